# This is a part of bfl, the Brainfuck-to-Lua compiler.

"""bfl, the optimizing Brainfuck-to-Lua compiler.

compile() and checkbalance() are the entry points used by the command line
tools; Compiler gives access to the individual stages.
"""

from bfl.compiler import Compiler
from bfl.errors import CompileError, UnbalancedLoopError, OptimizerError
from bfl.text import checkbalance

__version__ = '1.0'

def compile(source, optimization=2, modulus=256, debugging=False,
            functions=False):
    """compile(source, optimization=2, modulus=256, debugging=False,
               functions=False) -> str

    Compiles Brainfuck source (bytes or str) into a Lua program."""

    compiler = Compiler(optimization=optimization, modulus=modulus,
                        debugging=debugging, functions=functions)
    return compiler.compile(source)
