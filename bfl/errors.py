# This is a part of bfl, the Brainfuck-to-Lua compiler.

from bfl.text import describebalance

class CompileError(Exception):
    """Base class of every error raised by the compiler."""

class UnbalancedLoopError(CompileError, ValueError):
    """Raised when the program has unmatched [ or ] commands.

    count is the signed balance as returned by checkbalance(): positive if
    some ] are missing, negative if some [ are missing."""

    def __init__(self, count):
        CompileError.__init__(self, count)
        self.count = count

    def __str__(self):
        return describebalance(self.count)

class OptimizerError(CompileError, RuntimeError):
    """Raised when the IR optimizer does not reach a fixed point.

    This is an internal defect of the optimizer rules, not of the program."""
