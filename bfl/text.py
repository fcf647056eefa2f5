# This is a part of bfl, the Brainfuck-to-Lua compiler.

"""Source level passes.

These work on the program text before it is lowered to the IR: filtering
of comment characters, the textual peephole pass and the loop balance
check. The peephole pass introduces one extra command, the zero sentinel
"0", meaning that the current cell is set to zero.
"""

COMMANDS = '+-<>[].,'
DEBUG = '#'
ZERO = '0'

_CANCELLING = ('<>', '><', '+-', '-+')
_ZEROLOOPS = ('[-]', '[+]')

def normalize(source, debugging=False):
    """normalize(source, debugging=False) -> str

    Strips every character which is not a command. The debug command # is
    kept only if debugging is set. source can be bytes or str."""

    if isinstance(source, bytes):
        source = source.decode('latin-1')
    allowed = COMMANDS + DEBUG if debugging else COMMANDS
    return ''.join(ch for ch in source if ch in allowed)

def _peephole(program):
    result = []
    i = 0
    length = len(program)
    while i < length:
        ch = program[i]
        pair = program[i:i+2]
        if pair in _CANCELLING:
            # these pairs of commands have no effect.
            i += 2
        elif program[i:i+3] in _ZEROLOOPS:
            result.append(ZERO)
            i += 3
        elif pair == ZERO + ZERO:
            i += 1
        elif ch == ZERO and result and result[-1] == ']':
            # the current cell is guaranteed to be zero after a loop.
            i += 1
        else:
            result.append(ch)
            i += 1
    return ''.join(result)

def optimize(program, optimization=1):
    """optimize(program, optimization=1) -> str

    Removes useless sequences of commands and replaces [-] and [+] with the
    zero sentinel, until nothing changes. Does nothing at level 0."""

    if optimization < 1:
        return program

    while True:
        result = _peephole(program)
        if result == program:
            return result
        program = result

def checkbalance(program):
    """checkbalance(program) -> int

    Counts unmatched loop commands: positive if some ] are missing, negative
    if some [ are missing, 0 if balanced. It works on incomplete programs."""

    return program.count('[') - program.count(']')

def describebalance(count):
    if count > 0:
        return 'missing %d ]' % count
    elif count < 0:
        return 'missing %d [' % -count
    return ''
