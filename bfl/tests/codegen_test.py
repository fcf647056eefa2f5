# This is a part of bfl, the Brainfuck-to-Lua compiler.

from bfl.tests.utils import *
from bfl.nodes import *
from bfl.compiler import Compiler
from bfl.codegen.lua import cellref

def generate(nodes, **kwargs):
    kwargs.setdefault('header', False)
    return Compiler(**kwargs).generate(Program(nodes))

class TestCellRef:
    def test_cellref(self):
        assert cellref(0) == 'data[ptr]'
        assert cellref(3) == 'data[ptr + 3]'
        assert cellref(-2) == 'data[ptr - 2]'

class TestHeader:
    def test_prologue(self):
        code = generate([], header=True)
        assert code.startswith('-- generated by bfl\n')
        assert 'data = setmetatable({}, {__index = function() return 0 end})\n' in code
        assert 'ptr = 1\n' in code
        assert 'max = 256\n' in code
        assert 'bf_debug' not in code

    def test_no_modulus(self):
        assert 'max =' not in generate([], header=True, modulus=0)
        assert 'max = 65536\n' in generate([], header=True, modulus=65536)

    def test_debug(self):
        code = generate([Debug(0)], header=True, debugging=True)
        assert 'function bf_debug()\n' in code
        assert code.endswith('\nbf_debug()\n')

    def test_fragment(self):
        assert generate([]) == ''

class TestNodes:
    def test_moves(self):
        assert generate([MoveRight(0, 2)]) == 'ptr = ptr + 2\n'
        assert generate([MoveLeft(0, 1)]) == 'ptr = ptr - 1\n'

    def test_adjust(self):
        assert generate([Inc(0, 3)]) == 'data[ptr] = (data[ptr] + 3) % max\n'
        assert generate([Dec(0, 1, -2)]) == \
                'data[ptr - 2] = (data[ptr - 2] - 1) % max\n'
        assert generate([Inc(0, 3)], modulus=0) == 'data[ptr] = data[ptr] + 3\n'

    def test_assign(self):
        assert generate([Assign(0, 0)]) == 'data[ptr] = 0\n'
        assert generate([Assign(0, -3, 1)]) == 'data[ptr + 1] = 253\n'
        assert generate([Assign(0, 300)]) == 'data[ptr] = 44\n'
        assert generate([Assign(0, -3, 1)], modulus=0) == 'data[ptr + 1] = -3\n'

    def test_io(self):
        assert generate([Read(0, 0)]) == \
                'data[ptr] = string.byte(io.read(1) or "\\0")\n'
        assert generate([Write(0)]) == 'io.write(string.char(data[ptr]))\n'
        assert generate([Write(0, 1, 3)]) == \
                'io.write(string.char((data[ptr + 1] + 3) % max))\n'
        assert generate([Write(0, 0, -2)], modulus=0) == \
                'io.write(string.char((data[ptr] - 2) % 256))\n'

    def test_io_modulus(self):
        read = 'string.byte(io.read(1) or "\\0")'
        assert generate([Read(0, 0)], modulus=7) == 'data[ptr] = (%s) %% max\n' % read
        assert generate([Read(0, 0)], modulus=0) == 'data[ptr] = %s\n' % read
        assert generate([Read(0, 0)], modulus=1000) == 'data[ptr] = %s\n' % read

        assert generate([Write(0)], modulus=7) == \
                'io.write(string.char(data[ptr] % 256))\n'
        assert generate([Write(0)], modulus=0) == \
                'io.write(string.char(data[ptr] % 256))\n'
        assert generate([Write(0, 0, 3)], modulus=7) == \
                'io.write(string.char(((data[ptr] + 3) % max) % 256))\n'
        assert generate([Write(0, 0, 3)], modulus=1000) == \
                'io.write(string.char(((data[ptr] + 3) % max) % 256))\n'

    def test_loops(self):
        program = [LoopStart(0), Dec(1, 1), LoopEnd(0)]
        assert generate(program) == ('while data[ptr] ~= 0 do\n'
                                     '\tdata[ptr] = (data[ptr] - 1) % max\n'
                                     'end\n')
        assert generate([LoopStart(0, 1), LoopEnd(0)]) == \
                'while data[ptr + 1] ~= 0 do\nend\n'
        program = [If(0), Assign(1, 0), LoopEnd(0)]
        assert generate(program) == ('if data[ptr] ~= 0 then\n'
                                     '\tdata[ptr] = 0\n'
                                     'end\n')

    def test_functions(self):
        program = [LoopStart(0), Dec(1, 1), LoopEnd(0)]
        assert generate(program, functions=True) == (
                'while data[ptr] ~= 0 do\n'
                'local function loop1()\n'
                '\tdata[ptr] = (data[ptr] - 1) % max\n'
                'end\n'
                'loop1()\n'
                'end\n')

    def test_nested_functions(self):
        program = [LoopStart(0), LoopStart(1), LoopEnd(1), LoopEnd(0),
                   LoopStart(0), LoopEnd(0)]
        code = generate(program, functions=True)
        assert code.count('local function') == 3
        assert code.index('\tloop2()\n') < code.index('\nloop1()\n')
        assert code.endswith('\nloop3()\nend\n')

    def test_addto(self):
        assert generate([AddTo(0, 1, 1, 0)]) == \
                'data[ptr + 1] = (data[ptr + 1] + data[ptr]) % max\n'
        assert generate([AddTo(0, -1, 1, 0)]) == \
                'data[ptr + 1] = (data[ptr + 1] - data[ptr]) % max\n'
        assert generate([AddToScaled(0, 2, 3, 1, 0)]) == \
                'data[ptr + 1] = (data[ptr + 1] + 2 + 3 * data[ptr]) % max\n'
        assert generate([AddToScaled(0, -1, -3, -1, 0)], modulus=0) == \
                'data[ptr - 1] = data[ptr - 1] - 1 - 3 * data[ptr]\n'

    def test_moveto(self):
        assert generate([MoveTo(0, 0, 1, 0)]) == 'data[ptr + 1] = data[ptr]\n'
        assert generate([MoveTo(0, 5, 1, 0, 2)]) == \
                'data[ptr + 1] = (2 * data[ptr] + 5) % max\n'
        assert generate([MoveTo(0, 0, 1, 0, -1)]) == \
                'data[ptr + 1] = (-data[ptr]) % max\n'

    def test_debug(self):
        assert generate([Debug(0)]) == ''
        assert generate([Debug(0)], debugging=True) == 'bf_debug()\n'

    def test_indent(self):
        program = [LoopStart(0), LoopStart(1), MoveRight(2, 1), LoopEnd(1), LoopEnd(0)]
        assert generate(program) == ('while data[ptr] ~= 0 do\n'
                                     '\twhile data[ptr] ~= 0 do\n'
                                     '\t\tptr = ptr + 1\n'
                                     '\tend\n'
                                     'end\n')
