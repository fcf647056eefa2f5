# This is a part of bfl, the Brainfuck-to-Lua compiler.

import io

from bfl.tests.utils import *
from bfl.nodes import *
from bfl.compiler import Compiler
from bfl.runtime import Tape, matchloops, execute

HELLO = ('++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]>>.>---.+++++++..+++.'
         '>>.<-.<.+++.------.--------.>>+.>++.')

def run(source, optimization=2, input=b'', tape=None, modulus=256):
    compiler = Compiler(optimization=optimization, modulus=modulus)
    program = compiler.optimize(compiler.parse(source))
    if tape is None:
        tape = Tape(modulus)
    output = io.BytesIO()
    execute(program, tape, io.BytesIO(input), output)
    return output.getvalue(), tape

def state(tape):
    return tape.ptr, dict((k, v) for k, v in tape.cells.items() if v)

class TestTape:
    def test_defaults(self):
        tape = Tape()
        assert tape.ptr == 1
        assert tape[1] == 0
        assert tape[-100] == 0

    def test_modulus(self):
        tape = Tape()
        tape[1] = 300
        assert tape[1] == 44
        tape[1] = -1
        assert tape[1] == 255
        tape = Tape(0)
        tape[1] = -1
        assert tape[1] == -1

    def test_reset(self):
        tape = Tape()
        tape[3] = 4
        tape.ptr = 3
        tape.reset()
        assert state(tape) == (1, {})

    def test_window(self):
        tape = Tape()
        tape[1] = 5
        tape[2] = 65
        assert tape.window() == ('1: ' + '000 ' * 8 + '[005] 065 ' +
                                 '000 ' * 7)

class TestExecute:
    def test_matchloops(self):
        program = Program([LoopStart(0), If(1), LoopEnd(1), LoopEnd(0)])
        assert matchloops(program) == {0: 3, 3: 0, 1: 2, 2: 1}

    def test_hello(self):
        for level in (0, 1, 2):
            output, tape = run(HELLO, level)
            assert output == b'Hello World!\n'

    def test_accumulate(self):
        tape = Tape()
        tape[1] = 5
        run('[->+<]', tape=tape)
        assert state(tape) == (1, {2: 5})

    def test_read(self):
        output, tape = run(',>,>,', input=b'A')
        assert state(tape) == (3, {1: 65})

    def test_cat(self):
        for level in (0, 1, 2):
            output, tape = run(',[.,]', level, input=b'abc')
            assert output == b'abc'

    def test_write_bias(self):
        output, tape = run('++++++++[>++++++++<-]>+.+.-', input=b'')
        assert output == b'AB'
        assert state(tape) == (2, {2: 65})

    def test_wraparound(self):
        output, tape = run('-.')
        assert output == b'\xff'
        output, tape = run('-.', modulus=0)
        assert output == b'\xff'
        assert tape[1] == -1
        output, tape = run('-.', modulus=1000)
        assert output == b'\xe7'

    def test_read_modulus(self):
        for level in (0, 1, 2):
            output, tape = run(',-+.', level, input=b'A', modulus=7)
            assert output == b'\x02'

    def test_long_block(self):
        source = '>' + ',.' * 500
        for level in (0, 2):
            output, tape = run(source, level, input=b'xyz')
            assert output == b'xyz' + b'\0' * 497
            assert tape.ptr == 2

    def test_debug(self):
        tape = Tape()
        output = io.BytesIO()
        execute(Program([Inc(0, 5), Debug(0)]), tape, None, output)
        assert output.getvalue() == (tape.window() + '\n').encode('ascii')

    def test_trace(self):
        trace = []
        execute(Program([MoveRight(0, 2), MoveLeft(0, 1)]), Tape(), trace=trace)
        assert trace == [1, 3, 2]

    def test_levels_agree(self):
        programs = [
            '+++[>+++++<-]>[>++<-]>.',
            '>>+<<[-]+[>]>+',
            '+++[>+>++<<-]>>[-<+>]<<',
            '++>+++[<+>-]<.',
            '+[>+<[-]]>.',
            '>+++[-<+>]<[->>+<<]>>[-<+<+>>]',
            '+++[>+[>++<-]<-]>>.',
        ]
        for source in programs:
            results = [run(source, level) for level in (0, 1, 2)]
            for output, tape in results[1:]:
                assert output == results[0][0]
                assert state(tape) == state(results[0][1])

    def test_levels_agree_modulus(self):
        programs = [
            ',-+.',
            ',+-+.-',
            ',[->+<]>.',
            '+++[>++<-]>.',
            '++++++++[>++++++++<-]>+.+.-.',
            ',>,<[->+<]>.',
            ',+++.---.',
            '-.>+<+-.>.',
        ]
        for modulus in (7, 0, 1000):
            for source in programs:
                results = [run(source, level, input=b'A', modulus=modulus)
                           for level in (0, 1, 2)]
                for output, tape in results[1:]:
                    assert output == results[0][0]
                    assert state(tape) == state(results[0][1])
