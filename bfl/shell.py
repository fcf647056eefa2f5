# This is a part of bfl, the Brainfuck-to-Lua compiler.

"""Interactive Brainfuck shell.

The shell compiles one statement at a time and runs it on the tape kept in
a Session, so that the memory survives between statements. Lines starting
with a letter are shell commands (see HELP), lines starting with // are
comments, and everything else is Brainfuck code.
"""

import io
import re

from bfl.compiler import Compiler
from bfl.errors import CompileError
from bfl.runtime import Tape, execute
from bfl.text import checkbalance

HELP = '''\
Enter brainfuck code or a command, available commands:

ptr [VALUE]
reset
get
set VALUE
inc VALUE
dec VALUE
data
help
printlua on|off
trace on|off
echo [TEXT]
input [TEXT]
'''

_COMMAND = re.compile(r'^\s*[a-zA-Z]')
_COMMENT = re.compile(r'^\s*//')

def unescape(s):
    return s.replace('\\n', '\n').replace('\\0', '\0').replace('\\\\', '\\')

class Session(object):
    """Session of the shell.

    It owns the tape and the shell flags. It is created at the start of the
    shell, cleared by the reset command and discarded at the exit. stdin and
    stdout are binary streams used by the program, console is the text
    stream for the shell messages."""

    def __init__(self, stdin=None, stdout=None, console=None, optimization=0,
                 modulus=256, debugging=False, functions=False):
        self.compiler = Compiler(optimization=optimization, modulus=modulus,
                                 debugging=debugging, functions=functions,
                                 header=False)
        self.tape = Tape(modulus)
        self.stdin = stdin
        self.stdout = stdout if stdout is not None else io.BytesIO()
        self.console = console if console is not None else io.StringIO()
        self.printlua = False
        self.trace = None
        self.input = None

    def reset(self):
        self.tape.reset()
        self.trace = None

    def say(self, message):
        self.console.write(message + '\n')

    def run(self, code):
        """session.run(code) -> None

        Compiles the code and runs it on the session tape. Raises
        CompileError if the code cannot be compiled."""

        program = self.compiler.optimize(self.compiler.parse(code))
        if self.printlua:
            self.console.write(self.compiler.generate(program))
        self.console.flush()

        if self.input is not None:
            stdin = io.BytesIO(self.input.encode('latin-1'))
        else:
            stdin = self.stdin
        execute(program, self.tape, stdin, self.stdout, self.trace)
        if self.input is not None:
            self.input = stdin.read().decode('latin-1')
        self.stdout.flush()

    def command(self, line):
        name, _, arg = line.strip().partition(' ')
        arg = arg.strip()
        tape = self.tape

        if name == 'ptr' and not arg:
            self.say(str(tape.ptr))
        elif name == 'ptr' and arg.isdigit():
            tape.ptr = int(arg)
        elif name == 'reset' and not arg:
            self.reset()
        elif name == 'get' and not arg:
            value = tape[tape.ptr]
            if 32 <= value <= 126:
                self.say('%d\t%s' % (value, chr(value)))
            else:
                self.say('%d\t' % value)
        elif name == 'set' and arg.isdigit():
            tape[tape.ptr] = int(arg)
        elif name == 'inc' and arg.isdigit():
            tape[tape.ptr] = tape[tape.ptr] + int(arg)
        elif name == 'dec' and arg.isdigit():
            tape[tape.ptr] = tape[tape.ptr] - int(arg)
        elif name == 'data' and not arg:
            self.say(tape.window())
        elif name == 'printlua' and arg in ('on', 'off'):
            self.printlua = arg == 'on'
        elif name == 'trace' and arg == 'on':
            self.trace = []
        elif name == 'trace' and arg == 'off':
            if self.trace is None:
                self.say('no trace started')
            else:
                for ptr in self.trace:
                    self.say(str(ptr))
                self.trace = None
        elif name == 'echo':
            self.say(unescape(arg))
        elif name == 'input':
            self.input = unescape(arg) if arg else None
        elif name == 'help' and not arg:
            self.console.write(HELP)
        else:
            self.say('unknown or wrong command')

    def feed(self, line, readmore=None):
        """session.feed(line, readmore=None) -> None

        Handles one line of the shell input. If the line opens more loops
        than it closes, readmore(prompt) is called with the number of
        unclosed loops to read the following lines; it should return None
        at the end of input."""

        if _COMMENT.match(line):
            return
        if _COMMAND.match(line):
            self.command(line)
            return

        code = line
        loops = checkbalance(code)
        while loops > 0 and readmore is not None:
            more = readmore(loops)
            if more is None: break
            code = code + '\n' + more
            loops = checkbalance(code)

        if loops < 0:
            self.say('unmatched ]')
            return
        try:
            self.run(code)
        except CompileError as err:
            self.say('Error: %s' % err)
