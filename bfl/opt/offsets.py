# This is a part of bfl, the Brainfuck-to-Lua compiler.

# pointer movement rules. a movement is pushed forward through the nodes
# with offsets by adjusting their offsets, so that movements meet each other
# and cancel out, and so that nodes on the same cell become adjacent.

from bfl.nodes import *

from bfl.opt.base import Rule

def _isbracketed(window):
    first, node, last = window
    return (isinstance(first, Move) and isinstance(node, CELLOPS) and
            isinstance(last, Move))

def _makebracketed(window):
    # >?< -> ?< or ?>, and <?< -> ?<, >?> -> ?>.
    first, node, last = window
    result = [node.shifted(first.delta)]
    residual = move(first.depth, first.delta + last.delta)
    if residual is not None:
        result.append(residual)
    return result

def _iscommutable(window):
    first, node = window
    return isinstance(first, Move) and isinstance(node, CELLOPS)

def _iscompoundcommutable(window):
    first, node = window
    return isinstance(first, Move) and isinstance(node, COMPOUND)

def _makecommuted(window):
    first, node = window
    return [node.shifted(first.delta), first]

def _iscombinable(window):
    first, second = window
    return isinstance(first, Move) and isinstance(second, Move)

def _makecombined(window):
    first, second = window
    result = move(second.depth, first.delta + second.delta)
    return [result] if result is not None else []

def _isseekloop(window):
    first, start, body, end = window
    return (isinstance(first, Move) and isinstance(start, LoopStart) and
            isinstance(body, Move) and isinstance(end, LoopEnd))

def _makeseekloop(window):
    # >[<] -> [<]> with the loop condition looking one cell further.
    first, start, body, end = window
    return [start.shifted(first.delta), body, end, first]

# the emitted movement is visited again, so it is pushed as far as possible
# in a single pass.
BRACKETED = Rule('bracketed-move', 3, _isbracketed, _makebracketed,
                 head=Move, resume=Move)
COMMUTE = Rule('commute-cell', 2, _iscommutable, _makecommuted,
               head=Move, resume=Move)
COMMUTECOMPOUND = Rule('commute-compound', 2, _iscompoundcommutable, _makecommuted,
                        head=Move, resume=Move)
COMBINE = Rule('combine-moves', 2, _iscombinable, _makecombined,
               head=Move, resume=Move)
SEEKLOOP = Rule('commute-seek-loop', 4, _isseekloop, _makeseekloop,
                head=Move, resume=Move)
