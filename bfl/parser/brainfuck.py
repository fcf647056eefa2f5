# This is a part of bfl, the Brainfuck-to-Lua compiler.

from bfl.nodes import *
from bfl.errors import UnbalancedLoopError
from bfl.text import ZERO, DEBUG

class Parser(object):
    """The Brainfuck parser, lowering the program text to the IR.

    It expects the text already filtered by normalize() and possibly
    processed by the textual peephole pass, so it also understands the zero
    sentinel. Any other character is ignored.
    """

    def __init__(self, compiler):
        self.compiler = compiler

    def parse(self, program):
        result = Program()
        depth = 0

        repch = ''
        repcount = 0
        # set when the zero sentinel is immediately followed by + or -; the
        # following run becomes an assignment instead.
        skippedzero = False

        for i, ch in enumerate(program):
            if ch == repch:
                repcount += 1
                continue

            # merge repeated operations. +- or >< sequences are not merged
            # here; the textual peephole pass and the IR optimizer do it.
            if repcount > 0:
                self.flush(result, depth, repch, repcount, skippedzero)
                if repch in '+-':
                    skippedzero = False

            repch = ''
            repcount = 0
            if ch in '+-><':
                repch = ch
                repcount = 1
            elif ch == '.':
                result.append(Write(depth, 0))
            elif ch == ',':
                result.append(Read(depth, 0))
            elif ch == '[':
                result.append(LoopStart(depth, 0))
                depth += 1
            elif ch == ']':
                if depth == 0:
                    raise UnbalancedLoopError(-1)
                depth -= 1
                result.append(LoopEnd(depth))
            elif ch == ZERO:
                if program[i+1:i+2] in ('+', '-'):
                    # setting this cell to zero can be skipped, because the
                    # value will be set with the next instruction.
                    skippedzero = True
                else:
                    result.append(Assign(depth, 0, 0))
            elif ch == DEBUG:
                result.append(Debug(depth))

        if repcount > 0:
            self.flush(result, depth, repch, repcount, skippedzero)

        if depth != 0:
            raise UnbalancedLoopError(depth)
        return result

    def flush(self, result, depth, repch, repcount, skippedzero):
        if repch == '+':
            if skippedzero:
                result.append(Assign(depth, +repcount, 0))
            else:
                result.append(Inc(depth, repcount, 0))
        elif repch == '-':
            if skippedzero:
                result.append(Assign(depth, -repcount, 0))
            else:
                result.append(Dec(depth, repcount, 0))
        elif repch == '>':
            result.append(MoveRight(depth, repcount))
        elif repch == '<':
            result.append(MoveLeft(depth, repcount))
