# This is a part of bfl, the Brainfuck-to-Lua compiler.

import logging

from bfl import text
from bfl.errors import UnbalancedLoopError
from bfl.opt import OptimizerPass
from bfl.parser.brainfuck import Parser
from bfl.codegen.lua import Generator

logger = logging.getLogger(__name__)

class Compiler(object):
    """Compiler class.

    It connects the source passes, parser, optimizer and code generator into
    single interface, and provides a shared configuration namespace: every
    stage reads its options as attributes of the compiler. If you are not
    interested in the internal workings, this class should be sufficient.
    """

    def __init__(self, parser=Parser, codegen=Generator, optimization=2,
                 modulus=256, debugging=False, functions=False, header=True,
                 maxiterations=None):
        """Compiler(parser=Parser, codegen=Generator, optimization=2,
                    modulus=256, debugging=False, functions=False,
                    header=True, maxiterations=None) -> Compiler object

        optimization is 0 (no optimization), 1 (textual peephole pass only)
        or 2 (also the IR optimizer). modulus is the cell wraparound, 0 for
        unbounded cells. debugging keeps the # command and emits the debug
        routine. functions wraps every loop body into a Lua function. header
        can be turned off in order to generate a bare fragment, as the shell
        does. maxiterations limits the passes of the IR optimizer; by default
        it is 10000 plus the number of nodes."""

        if optimization not in (0, 1, 2):
            raise ValueError('invalid optimization level %r' % (optimization,))
        if modulus < 0:
            raise ValueError('invalid modulus %r' % (modulus,))

        self.parser = parser
        self.optpasses = [OptimizerPass]
        self.codegen = codegen
        self.optimization = optimization
        self.modulus = modulus
        self.debugging = debugging
        self.functions = functions
        self.header = header
        self.maxiterations = maxiterations

    def preprocess(self, source):
        """compiler.preprocess(source) -> str

        Filters the source and applies the textual peephole pass. Raises
        UnbalancedLoopError if loop commands don't match."""

        program = text.normalize(source, self.debugging)
        program = text.optimize(program, self.optimization)
        balance = text.checkbalance(program)
        if balance != 0:
            raise UnbalancedLoopError(balance)
        return program

    def parse(self, source):
        program = self.preprocess(source)
        parser = self.parser(self)
        node = parser.parse(program)
        logger.debug('lowered %d commands into %d nodes', len(program), len(node))
        return node

    def optimize(self, node):
        """compiler.optimize(node) -> node

        Optimizes the given program using internal optimizer passes. The
        program could be modified in-place.
        """

        for passcls in self.optpasses:
            passobj = passcls(self)
            node = passobj.transform(node)
        return node

    def generate(self, node):
        """compiler.generate(node) -> str

        Feeds the given program to a new code generator and returns the
        generated Lua code."""

        gen = self.codegen(self)
        gen.generate(node)
        return gen.flush()

    def compile(self, source):
        """compiler.compile(source) -> str

        One-shot shortcut for parse, optimization and code generation."""

        node = self.parse(source)
        node = self.optimize(node)
        logger.debug('optimized into %d nodes', len(node))
        return self.generate(node)
