#!/usr/bin/env python
# bfl, the Brainfuck-to-Lua compiler.

import os
import sys
import getopt
import logging
import subprocess
import tempfile

from bfl import Compiler, CompileError


def usage(progname):
    print('''\
bf2lua - convert Brainfuck to Lua

Usage: %s [options] filename  (from file)
       %s [options] -         (from stdin)

Without --output the generated code is run with the lua interpreter.

Options:
-h, --help
    Shows this message.
-o FILE, --output FILE
    Writes the generated code to FILE, - for stdout.
-O LEVEL, --optimize LEVEL
    Sets the optimization level: 0, 1 or 2 (default).
-m MODULUS, --modulus MODULUS
    Sets the cell wraparound, defaults to 256. 0 disables the wraparound.
-f, --functions
    Wraps every loop body into a function, for Lua implementations with
    small limits per block.
-g, --debug
    Enables the debugging command #.
-v, --verbose
    Logs the compilation stages.
''' % (progname, progname), file=sys.stderr)

def runlua(code, interpreter='lua'):
    fd, path = tempfile.mkstemp(suffix='.lua')
    try:
        with os.fdopen(fd, 'w') as fp:
            fp.write(code)
        return subprocess.call([interpreter, path])
    finally:
        os.remove(path)

def main(argv):
    try:
        opts, args = getopt.getopt(argv[1:], 'ho:O:m:fgv',
                ['help', 'output=', 'optimize=', 'modulus=', 'functions',
                 'debug', 'verbose'])
    except getopt.GetoptError as err:
        print('Error: %s' % err, file=sys.stderr)
        print('Type "%s --help" for usage.' % argv[0], file=sys.stderr)
        return 1

    output = None
    optimization = 2
    modulus = 256
    functions = False
    debugging = False
    verbose = False
    for opt, arg in opts:
        if opt in ('-h', '--help'):
            usage(argv[0])
            return 0
        elif opt in ('-o', '--output'):
            output = arg
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

    if not args:
        print('Type "%s --help" for usage.' % argv[0], file=sys.stderr)
        return 1

    try:
        if args[0] == '-':
            source = sys.stdin.buffer.read()
        else:
            with open(args[0], 'rb') as fp:
                source = fp.read()
    except IOError as err:
        print("Error: Couldn't open %s: %s" % (args[0], err.strerror), file=sys.stderr)
        return 1

    compiler = Compiler(optimization=optimization, modulus=modulus,
                        debugging=debugging, functions=functions)
    try:
        code = compiler.compile(source)
    except CompileError as err:
        print('Error: %s' % err, file=sys.stderr)
        return 1

    if output is None:
        try:
            status = runlua(code)
        except OSError as err:
            print("Error: Couldn't run lua: %s" % err.strerror, file=sys.stderr)
            return 1
        if status != 0:
            print('Error: lua exited with status %d' % status, file=sys.stderr)
            return 1
    elif output == '-':
        sys.stdout.write(code)
    else:
        try:
            with open(output, 'w') as fp:
                fp.write(code)
        except IOError as err:
            print("Error: Couldn't open %s: %s" % (output, err.strerror), file=sys.stderr)
            return 1
    return 0

def run():
    sys.exit(main(sys.argv))

if __name__ == '__main__':
    run()
