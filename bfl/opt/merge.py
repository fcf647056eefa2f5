# This is a part of bfl, the Brainfuck-to-Lua compiler.

# rules merging, removing or reordering adjacent memory operations. every
# rule only looks at nodes with known offsets, and never swaps two nodes if
# one of them can reference or update the cell the other one updates.

from bfl.nodes import *

from bfl.opt.base import Rule

def _writes(node):
    if isinstance(node, CellNode): return node.offset
    return node.dest

def _reads(node):
    # the cell other than its own destination which node references.
    if isinstance(node, COMPOUND): return node.src
    return None

def _isfoldaddend(window):
    # {d}+=x and {d}+=a+m*{s} -> {d}+=a+x+m*{s}
    first, second = window
    return (isinstance(first, Adjust) and isinstance(second, AddToScaled) and
            first.offset == second.dest and second.src != second.dest)

def _makefoldaddend(window):
    first, second = window
    return [addto(second.depth, second.addend + first.delta, second.multiplier,
                  second.dest, second.src)]

def _isassignaddto(window):
    # {d}=v and {d}+=a+m*{s} -> {d}=v+a+m*{s}
    first, second = window
    return (isinstance(first, Assign) and isinstance(second, AddToScaled) and
            first.offset == second.dest and second.src != second.dest)

def _makeassignaddto(window):
    first, second = window
    return [MoveTo(second.depth, first.value + second.addend, second.dest,
                   second.src, second.multiplier)]

def _isassignadjust(window):
    first, second = window
    return (isinstance(first, Assign) and isinstance(second, Adjust) and
            first.offset == second.offset)

def _makeassignadjust(window):
    first, second = window
    return [Assign(second.depth, first.value + second.delta, first.offset)]

def _isdeadstore(window):
    # the first store is dead if the second one overwrites the cell without
    # referencing it.
    first, second = window
    if not isinstance(first, ARITHMETIC): return False
    if isinstance(second, (Assign, Read)):
        return first.offset == second.offset
    if isinstance(second, MoveTo):
        return first.offset == second.dest and second.src != second.dest
    return False

def _makedeadstore(window):
    return [window[1]]

def _isunordered(window):
    first, second = window
    if not isinstance(first, ARITHMETIC + COMPOUND): return False
    if not isinstance(second, ARITHMETIC + COMPOUND): return False
    if _writes(first) <= _writes(second): return False
    return (_reads(first) != _writes(second) and
            _reads(second) != _writes(first))

def _makeswapped(window):
    first, second = window
    return [second, first]

def _iscombinable(window):
    first, second = window
    return (isinstance(first, Adjust) and isinstance(second, Adjust) and
            first.offset == second.offset)

def _makecombined(window):
    first, second = window
    result = adjust(second.depth, first.delta + second.delta, first.offset)
    return [result] if result is not None else []

def _iswritebias(window):
    # +++.--- -> Write[{0}+3]
    first, node, last = window
    return (isinstance(first, Adjust) and isinstance(node, Write) and
            isinstance(last, Adjust) and
            first.offset == node.offset == last.offset)

def _makewritebias(window):
    first, node, last = window
    result = [Write(node.depth, node.offset, node.bias + first.delta)]
    rest = adjust(last.depth, first.delta + last.delta, last.offset)
    if rest is not None:
        result.append(rest)
    return result

def _iswritereorderable(window):
    # makes joining writes easier.
    first, second = window
    return (isinstance(first, Adjust) and isinstance(second, Write) and
            first.offset != second.offset)

FOLDADDEND = Rule('fold-addend', 2, _isfoldaddend, _makefoldaddend, head=Adjust)
ASSIGNADDTO = Rule('assign-addto', 2, _isassignaddto, _makeassignaddto,
                   head=Assign)
ASSIGNADJUST = Rule('assign-adjust', 2, _isassignadjust, _makeassignadjust,
                    head=Assign)
DEADSTORE = Rule('dead-store', 2, _isdeadstore, _makedeadstore, head=ARITHMETIC)
SORT = Rule('sort', 2, _isunordered, _makeswapped, head=ARITHMETIC + COMPOUND)
COMBINE = Rule('combine-adjust', 2, _iscombinable, _makecombined, head=Adjust)
WRITEBIAS = Rule('write-bias', 3, _iswritebias, _makewritebias, head=Adjust)
WRITEORDER = Rule('write-reorder', 2, _iswritereorderable, _makeswapped,
                  head=Adjust)
