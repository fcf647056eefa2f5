# This is a part of bfl, the Brainfuck-to-Lua compiler.

# tries to convert loops into more specific form:
# - Loop[{0}] whose body sets cell 0 to zero and doesn't touch it otherwise.
#   the body runs at most once, so the loop is replaced by If[{0}].
# - Loop[{0}] whose body only adjusts cells and decrements cell 0 by exactly
#   one per iteration. the loop runs {0} times, so it is replaced by one
#   AddTo[] per adjusted cell followed by {0}=0.
#
# both windows span from the loop start up to the first loop end, which is
# its own end since nested loops are rejected.

from bfl.nodes import *

from bfl.opt.base import Rule

_ONCEBODY = (Inc, Dec, Assign, Write, AddToScaled, MoveTo)

def _isonce(window):
    if window[0].offset != 0: return False

    zeroed = False
    for node in window[1:-1]:
        if not isinstance(node, _ONCEBODY):
            return False
        if isinstance(node, ARITHMETIC) and node.offset == 0:
            if isinstance(node, Assign) and node.value == 0:
                zeroed = True
            else:
                return False
        elif isinstance(node, COMPOUND) and node.dest == 0:
            return False
    return zeroed

def _makeonce(window):
    return [If(window[0].depth)] + window[1:]

def _celldeltas(window):
    deltas = {}
    for node in window[1:-1]:
        if not isinstance(node, Adjust):
            return None
        deltas[node.offset] = deltas.get(node.offset, 0) + node.delta
    return deltas

def _isaccumulate(window):
    if window[0].offset != 0: return False
    deltas = _celldeltas(window)
    return deltas is not None and deltas.get(0) == -1

def _makeaccumulate(window):
    depth = window[0].depth
    deltas = _celldeltas(window)
    result = []
    for offset in sorted(deltas):
        if offset != 0 and deltas[offset] != 0:
            result.append(addto(depth, 0, deltas[offset], offset, 0))
    result.append(Assign(depth, 0, 0))
    return result

ONCE = Rule('loop-to-if', None, _isonce, _makeonce, head=LoopStart)
ACCUMULATE = Rule('loop-to-addto', None, _isaccumulate, _makeaccumulate,
                  head=LoopStart)
