# This is a part of bfl, the Brainfuck-to-Lua compiler.

"""The IR optimizer.

It is a single peephole pass driven by the ordered rule table below, and
repeated until a whole pass changes nothing. At each position the first
matching rule wins, thus the order of the table decides which of
overlapping patterns is rewritten.
"""

import logging

from bfl.errors import OptimizerError
from bfl.opt.base import Transformer, BaseOptimizerPass
from bfl.opt import loops, offsets, merge

logger = logging.getLogger(__name__)

# the pass limit on top of the program length, unless set by the compiler.
MAXITERATIONS = 10000

RULES = [
    loops.ONCE,
    loops.ACCUMULATE,
    offsets.BRACKETED,
    offsets.COMMUTE,
    offsets.COMMUTECOMPOUND,
    merge.FOLDADDEND,
    merge.ASSIGNADDTO,
    merge.ASSIGNADJUST,
    merge.SORT,
    merge.DEADSTORE,
    merge.COMBINE,
    offsets.COMBINE,
    merge.WRITEBIAS,
    merge.WRITEORDER,
    offsets.SEEKLOOP,
]

class OptimizerPass(BaseOptimizerPass):
    rules = RULES

    def _transform(self, program):
        rules = self.rules
        tr = Transformer(program)
        for i, cur in tr:
            for rule in rules:
                if rule.apply(tr, cur):
                    break
        return tr.changed

    def transform(self, program):
        """pass.transform(program) -> program

        Optimizes the program in place until the fixed point is reached.
        Does nothing below optimization level 2."""

        if self.optimization < 2:
            return program

        limit = self.maxiterations
        if limit is None:
            # long basic blocks may need one pass per node to get sorted.
            limit = MAXITERATIONS + len(program)
        for iteration in range(limit):
            if not self._transform(program):
                logger.debug('fixed point reached after %d passes, %d nodes',
                             iteration + 1, len(program))
                return program
        raise OptimizerError('no fixed point after %d passes' % limit)
