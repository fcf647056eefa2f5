#!/usr/bin/env python
# bfl, the Brainfuck-to-Lua compiler.

import sys
import getopt
import logging

try: import readline
except ImportError: pass

from bfl.shell import Session


def usage(progname):
    print('''\
bfsh - brainfuck shell

Usage: %s [options]

Options:
-h, --help
    Shows this message.
-O LEVEL, --optimize LEVEL
    Sets the optimization level: 0 (default), 1 or 2.
-m MODULUS, --modulus MODULUS
    Sets the cell wraparound, defaults to 256. 0 disables the wraparound.
-f, --functions
    Wraps every loop body into a function in the printed Lua code.
-g, --debug
    Enables the debugging command #.
-v, --verbose
    Logs the compilation stages.
''' % progname, file=sys.stderr)

def interact(session, prompt='> '):
    def readmore(loops):
        try:
            return input('%d%s' % (loops, prompt))
        except EOFError:
            return None

    while True:
        try:
            line = input(prompt)
        except EOFError:
            print()
            break
        session.feed(line, readmore)

def main(argv):
    try:
        opts, args = getopt.getopt(argv[1:], 'hO:m:fgv',
                ['help', 'optimize=', 'modulus=', 'functions', 'debug',
                 'verbose'])
    except getopt.GetoptError as err:
        print('Error: %s' % err, file=sys.stderr)
        print('Type "%s --help" for usage.' % argv[0], file=sys.stderr)
        return 1

    optimization = 0
    modulus = 256
    functions = False
    debugging = False
    verbose = False
    for opt, arg in opts:
        if opt in ('-h', '--help'):
            usage(argv[0])
            return 0
        elif opt in ('-O', '--optimize'):
            try:
                optimization = int(arg)
                if optimization not in (0, 1, 2): raise ValueError
            except ValueError:
                print('Error: Invalid optimization level %r.' % arg, file=sys.stderr)
                return 1
        elif opt in ('-m', '--modulus'):
            try:
                modulus = int(arg)
                if modulus < 0: raise ValueError
            except ValueError:
                print('Error: Invalid modulus %r.' % arg, file=sys.stderr)
                return 1
        elif opt in ('-f', '--functions'):
            functions = True
        elif opt in ('-g', '--debug'):
            debugging = True
        elif opt in ('-v', '--verbose'):
            verbose = True
        else:
            assert False

    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING,
                        format='%(name)s: %(message)s')

    session = Session(sys.stdin.buffer, sys.stdout.buffer, sys.stdout,
                      optimization=optimization, modulus=modulus,
                      debugging=debugging, functions=functions)
    print('bfsh - brainfuck shell')
    print('Enter `help` for a list of commands')
    interact(session)
    return 0

def run():
    sys.exit(main(sys.argv))

if __name__ == '__main__':
    run()
