# This is a part of bfl, the Brainfuck-to-Lua compiler.

"""Reference interpreter of the IR.

It executes an instruction list with the same semantics as the generated
Lua code: unset cells read as 0, the pointer starts at 1, arithmetic results
are reduced by the modulus when it is not zero, reading past the end of
the input stores 0, and every write outputs its value modulo 256.
"""

from bfl.nodes import *

class Tape(object):
    def __init__(self, modulus=256):
        self.modulus = modulus
        self.reset()

    def reset(self):
        self.cells = {}
        self.ptr = 1

    def __getitem__(self, index):
        return self.cells.get(index, 0)

    def __setitem__(self, index, value):
        if self.modulus:
            value %= self.modulus
        self.cells[index] = value

    def window(self):
        """tape.window() -> str

        Formats 17 cells around the pointer, the current one in brackets."""

        cells = []
        for i in range(-8, 9):
            if i == 0:
                cells.append('[%03d]' % self[self.ptr + i])
            else:
                cells.append('%03d' % self[self.ptr + i])
        return '%d: %s' % (self.ptr, ''.join(cell + ' ' for cell in cells))

def matchloops(program):
    """matchloops(program) -> dict

    Maps the position of every loop opener to its LoopEnd and vice versa."""

    jumps = {}
    stack = []
    for i, node in enumerate(program):
        if isinstance(node, OPENERS):
            stack.append(i)
        elif isinstance(node, LoopEnd):
            start = stack.pop()
            jumps[start] = i
            jumps[i] = start
    assert not stack
    return jumps

def execute(program, tape, input=None, output=None, trace=None):
    """execute(program, tape, input=None, output=None, trace=None) -> None

    Runs the program on the tape. input and output are binary file-like
    objects; no input means the end of input. If trace is a list, the
    pointer is appended to it at the start and after every movement."""

    jumps = matchloops(program)
    if trace is not None:
        trace.append(tape.ptr)

    pc = 0
    while pc < len(program):
        node = program[pc]
        if isinstance(node, Move):
            tape.ptr += node.delta
            if trace is not None:
                trace.append(tape.ptr)
        elif isinstance(node, Adjust):
            index = tape.ptr + node.offset
            tape[index] = tape[index] + node.delta
        elif isinstance(node, Assign):
            tape[tape.ptr + node.offset] = node.value
        elif isinstance(node, Read):
            ch = input.read(1) if input is not None else b''
            tape[tape.ptr + node.offset] = ch[0] if ch else 0
        elif isinstance(node, Write):
            value = tape[tape.ptr + node.offset] + node.bias
            if tape.modulus:
                value %= tape.modulus
            output.write(bytes([value % 256]))
        elif isinstance(node, LoopStart):
            if tape[tape.ptr + node.offset] == 0:
                pc = jumps[pc]
        elif isinstance(node, If):
            if tape[tape.ptr] == 0:
                pc = jumps[pc]
        elif isinstance(node, LoopEnd):
            start = jumps[pc]
            if isinstance(program[start], LoopStart):
                pc = start
                continue
        elif isinstance(node, AddToScaled):
            index = tape.ptr + node.dest
            tape[index] = (tape[index] + node.addend +
                           node.multiplier * tape[tape.ptr + node.src])
        elif isinstance(node, MoveTo):
            tape[tape.ptr + node.dest] = (node.value +
                                         node.multiplier * tape[tape.ptr + node.src])
        elif isinstance(node, Debug):
            if output is not None:
                output.write((tape.window() + '\n').encode('ascii'))
        pc += 1
