# This is a part of bfl, the Brainfuck-to-Lua compiler.

import io

from bfl.nodes import *

from bfl.codegen import Generator as BaseGenerator

PROLOGUE = '''\
-- generated by bfl
data = setmetatable({}, {__index = function() return 0 end})
ptr = 1
'''

DEBUG_PROLOGUE = '''\
function bf_debug()
\tio.write(ptr .. ": ")
\tfor i = -8, 8 do
\t\tif i == 0 then
\t\t\tio.write(string.format("[%03d] ", data[ptr + i]))
\t\telse
\t\t\tio.write(string.format("%03d ", data[ptr + i]))
\t\tend
\tend
\tio.write("\\n")
end
'''

def cellref(offset):
    if offset > 0:
        return 'data[ptr + %d]' % offset
    elif offset < 0:
        return 'data[ptr - %d]' % -offset
    return 'data[ptr]'

def _term(value, expr=None):
    # renders " + value*expr" style term with explicit sign.
    if expr is None:
        return ' %s %d' % ('+-'[value < 0], abs(value))
    elif abs(value) == 1:
        return ' %s %s' % ('+-'[value < 0], expr)
    return ' %s %d * %s' % ('+-'[value < 0], abs(value), expr)

class Generator(BaseGenerator):
    """Lua code generator.

    The generated code keeps the tape in the global table data, which
    defaults every cell to 0, and the pointer in the global ptr starting
    from 1. If the modulus is not zero every arithmetic result is reduced
    by the global max.
    """

    def __init__(self, compiler):
        BaseGenerator.__init__(self, compiler)
        self.buf = io.StringIO()
        self.nextfunction = 1
        self.functionnames = {}

    def write(self, line):
        self.buf.write('\t' * self.nindents + line + '\n')

    def flush(self):
        code = self.buf.getvalue()
        self.buf.seek(0)
        self.buf.truncate()
        return code

    def reduce(self, expr):
        if self.modulus:
            return '(%s) %% max' % expr
        return expr

    def prologue(self):
        if not self.header: return
        self.buf.write(PROLOGUE)
        if self.modulus:
            self.buf.write('max = %d\n' % self.modulus)
        if self.debugging:
            self.buf.write(DEBUG_PROLOGUE)
        self.buf.write('\n')

    ############################################################

    def openfunction(self, node):
        if not self.functions: return
        name = 'loop%d' % self.nextfunction
        self.nextfunction += 1
        self.functionnames[node.depth] = name
        self.write('local function %s()' % name)

    def generate_LoopStart(self, node):
        self.write('while %s ~= 0 do' % cellref(node.offset))
        self.openfunction(node)

    def generate_If(self, node):
        self.write('if %s ~= 0 then' % cellref(0))
        self.openfunction(node)

    def generate_LoopEnd(self, node):
        self.write('end')
        if self.functions:
            self.write('%s()' % self.functionnames.pop(node.depth))
            self.write('end')

    def generate_MoveRight(self, node):
        self.write('ptr = ptr + %d' % node.amount)

    def generate_MoveLeft(self, node):
        self.write('ptr = ptr - %d' % node.amount)

    def generate_Inc(self, node):
        ref = cellref(node.offset)
        self.write('%s = %s' % (ref, self.reduce('%s + %d' % (ref, node.amount))))

    def generate_Dec(self, node):
        ref = cellref(node.offset)
        self.write('%s = %s' % (ref, self.reduce('%s - %d' % (ref, node.amount))))

    def generate_Assign(self, node):
        value = node.value
        if self.modulus:
            value %= self.modulus
        self.write('%s = %d' % (cellref(node.offset), value))

    def generate_Read(self, node):
        expr = 'string.byte(io.read(1) or "\\0")'
        if 0 < self.modulus < 256:
            expr = self.reduce(expr)
        self.write('%s = %s' % (cellref(node.offset), expr))

    def generate_Write(self, node):
        # string.char only accepts 0..255, which every cell is in at max = 256.
        expr = cellref(node.offset)
        if node.bias != 0:
            expr = self.reduce(expr + _term(node.bias))
            if self.modulus != 256:
                expr = '(%s) %% 256' % expr
        elif self.modulus != 256:
            expr = '%s %% 256' % expr
        self.write('io.write(string.char(%s))' % expr)

    def generate_AddToScaled(self, node):
        dest = cellref(node.dest)
        expr = dest
        if node.addend != 0:
            expr += _term(node.addend)
        if node.multiplier != 0:
            expr += _term(node.multiplier, cellref(node.src))
        self.write('%s = %s' % (dest, self.reduce(expr)))
    generate_AddTo = generate_AddToScaled

    def generate_MoveTo(self, node):
        dest = cellref(node.dest)
        src = cellref(node.src)
        if node.value == 0 and node.multiplier == 1:
            self.write('%s = %s' % (dest, src))
            return

        if node.multiplier == 1:
            expr = src
        elif node.multiplier == -1:
            expr = '-' + src
        else:
            expr = '%d * %s' % (node.multiplier, src)
        if node.value != 0:
            expr += _term(node.value)
        self.write('%s = %s' % (dest, self.reduce(expr)))

    def generate_Debug(self, node):
        if self.debugging:
            self.write('bf_debug()')
