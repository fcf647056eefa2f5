# This is a part of bfl, the Brainfuck-to-Lua compiler.

"""The Brainfuck IR (intermediate representation).

Unlike a tree-shaped IL the IR is a flat sequence of instructions: loops are
delimited by paired LoopStart/If and LoopEnd nodes, and every node records
its nesting depth, which is used for indentation and function naming only.
Loops are matched by position, never by depth.

Offsets of non-move instructions are relative to the current pointer. The
optimizer folds pointer movements into these offsets wherever it can.
"""

class Node(object):
    """Base class of the Brainfuck IR."""

    __slots__ = ('depth',)

    def __init__(self, depth=0):
        self.depth = depth

    def copy(self):
        obj = object.__new__(type(self))
        for cls in type(self).__mro__:
            for name in getattr(cls, '__slots__', ()):
                setattr(obj, name, getattr(self, name))
        return obj

    def fields(self):
        result = []
        for cls in reversed(type(self).__mro__):
            for name in getattr(cls, '__slots__', ()):
                result.append(getattr(self, name))
        return tuple(result)

    def movepointer(self, offset):
        """node.movepointer(offset) -> None

        Moves all memory references in the node by given offset. This is an
        in-place operation."""

        pass

    def shifted(self, offset):
        """node.shifted(offset) -> Node

        Returns the copy of node with memory references moved."""

        node = self.copy()
        node.movepointer(offset)
        return node

    def __eq__(self, other):
        return type(self) is type(other) and self.fields() == other.fields()

    def __ne__(self, other):
        return not self.__eq__(other)

    __hash__ = None

    def compactrepr(self):
        raise RuntimeError('not implemented')

    def __repr__(self):
        return self.compactrepr()

class Program(list):
    """Program node.

    Program[...] is the entire instruction sequence, in execution order.
    """

    def compactrepr(self):
        return 'Program[%s]' % ', '.join(node.compactrepr() for node in self)

    __repr__ = compactrepr

def _ref(offset):
    return '{%d}' % offset

class Move(Node):
    """Common base of MoveLeft[] and MoveRight[]; amount is always positive."""

    __slots__ = ('amount',)

    def __init__(self, depth, amount):
        Node.__init__(self, depth)
        self.amount = amount

    @property
    def delta(self):
        raise NotImplementedError

class MoveLeft(Move):
    __slots__ = ()

    @property
    def delta(self):
        return -self.amount

    def compactrepr(self):
        return 'MoveLeft[%d]' % self.amount

class MoveRight(Move):
    __slots__ = ()

    @property
    def delta(self):
        return self.amount

    def compactrepr(self):
        return 'MoveRight[%d]' % self.amount

def move(depth, delta):
    """Returns MoveRight[] or MoveLeft[] for signed delta, None if zero."""

    if delta > 0:
        return MoveRight(depth, delta)
    elif delta < 0:
        return MoveLeft(depth, -delta)
    return None

class CellNode(Node):
    """Node acting on the single memory cell {offset}."""

    __slots__ = ('offset',)

    def __init__(self, depth, offset=0):
        Node.__init__(self, depth)
        self.offset = offset

    def movepointer(self, offset):
        self.offset += offset

class Adjust(CellNode):
    """Common base of Inc and Dec; amount is always positive."""

    __slots__ = ('amount',)

    def __init__(self, depth, amount, offset=0):
        CellNode.__init__(self, depth, offset)
        self.amount = amount

    @property
    def delta(self):
        raise NotImplementedError

class Inc(Adjust):
    """Inc node, {offset}+=amount in the compact notation."""

    __slots__ = ()

    @property
    def delta(self):
        return self.amount

    def compactrepr(self):
        return '%s+=%d' % (_ref(self.offset), self.amount)

class Dec(Adjust):
    """Dec node, {offset}-=amount in the compact notation."""

    __slots__ = ()

    @property
    def delta(self):
        return -self.amount

    def compactrepr(self):
        return '%s-=%d' % (_ref(self.offset), self.amount)

def adjust(depth, delta, offset=0):
    """Returns Inc or Dec for signed delta, None if zero."""

    if delta > 0:
        return Inc(depth, delta, offset)
    elif delta < 0:
        return Dec(depth, -delta, offset)
    return None

class Assign(CellNode):
    """Assign node, {offset}=value in the compact notation.

    The value is kept as an unbounded integer; it is reduced by the cell
    modulus only when the code is generated.
    """

    __slots__ = ('value',)

    def __init__(self, depth, value, offset=0):
        CellNode.__init__(self, depth, offset)
        self.value = value

    def compactrepr(self):
        return '%s=%d' % (_ref(self.offset), self.value)

class Read(CellNode):
    """Read node.

    {offset}=Read[] reads one byte from the input (0 at the end of input)
    and stores it to given memory cell. It is never reordered with other
    nodes referencing the same cell.
    """

    __slots__ = ()

    def compactrepr(self):
        return '%s=Read[]' % _ref(self.offset)

class Write(CellNode):
    """Write node.

    Write[{offset}+bias] writes one byte, the value of the cell plus bias.
    The bias is folded in by the optimizer from adjacent Inc/Dec pairs.
    """

    __slots__ = ('bias',)

    def __init__(self, depth, offset=0, bias=0):
        CellNode.__init__(self, depth, offset)
        self.bias = bias

    def compactrepr(self):
        if self.bias > 0:
            return 'Write[%s+%d]' % (_ref(self.offset), self.bias)
        elif self.bias < 0:
            return 'Write[%s-%d]' % (_ref(self.offset), -self.bias)
        return 'Write[%s]' % _ref(self.offset)

class LoopStart(CellNode):
    """LoopStart node.

    Loop[{offset}] opens the loop repeated while the cell is not zero. The
    offset is non-zero only after the optimizer moved a pointer movement
    past a seek loop like [<].
    """

    __slots__ = ()

    def __init__(self, depth, offset=0):
        CellNode.__init__(self, depth, offset)

    def compactrepr(self):
        return 'Loop[%s]' % _ref(self.offset)

class If(Node):
    """If node.

    If[{0}] is introduced by the optimizer for a loop whose body is known to
    run at most once. It is closed by LoopEnd like a loop.
    """

    __slots__ = ()

    def compactrepr(self):
        return 'If[{0}]'

class LoopEnd(Node):
    __slots__ = ()

    def compactrepr(self):
        return 'End[]'

class AddToScaled(Node):
    """AddToScaled node.

    AddToScaled[{dest}+=addend+multiplier*{src}] is a closed form of the
    accumulation loop; the loop counter cell {src} is zeroed separately.
    """

    __slots__ = ('addend', 'multiplier', 'dest', 'src')

    def __init__(self, depth, addend, multiplier, dest, src):
        Node.__init__(self, depth)
        self.addend = addend
        self.multiplier = multiplier
        self.dest = dest
        self.src = src

    def movepointer(self, offset):
        self.dest += offset
        self.src += offset

    def compactrepr(self):
        return 'AddToScaled[%s+=%d%+d*%s]' % (_ref(self.dest), self.addend,
                                              self.multiplier, _ref(self.src))

class AddTo(AddToScaled):
    """AddTo node, AddTo[{dest}+={src}] or AddTo[{dest}-={src}].

    It is AddToScaled[] without addend and with the unit multiplier given by
    sign."""

    __slots__ = ()

    def __init__(self, depth, sign, dest, src):
        AddToScaled.__init__(self, depth, 0, sign, dest, src)

    @property
    def sign(self):
        return self.multiplier

    def compactrepr(self):
        return 'AddTo[%s%s=%s]' % (_ref(self.dest), '+-'[self.sign < 0],
                                   _ref(self.src))

def addto(depth, addend, multiplier, dest, src):
    """Returns the simplest of AddTo and AddToScaled for given terms."""

    if addend == 0 and multiplier in (1, -1):
        return AddTo(depth, multiplier, dest, src)
    return AddToScaled(depth, addend, multiplier, dest, src)

class MoveTo(Node):
    """MoveTo node.

    MoveTo[{dest}=value+multiplier*{src}] is produced when a cell is
    assigned right before it accumulates another cell.
    """

    __slots__ = ('value', 'dest', 'src', 'multiplier')

    def __init__(self, depth, value, dest, src, multiplier=1):
        Node.__init__(self, depth)
        self.value = value
        self.dest = dest
        self.src = src
        self.multiplier = multiplier

    def movepointer(self, offset):
        self.dest += offset
        self.src += offset

    def compactrepr(self):
        if self.value == 0 and self.multiplier == 1:
            return 'MoveTo[%s=%s]' % (_ref(self.dest), _ref(self.src))
        return 'MoveTo[%s=%d%+d*%s]' % (_ref(self.dest), self.value,
                                        self.multiplier, _ref(self.src))

class Debug(Node):
    """Debug node, dumps the memory cells around the pointer."""

    __slots__ = ()

    def compactrepr(self):
        return 'Debug[]'

# node groups used by the optimizer rules.
ARITHMETIC = (Inc, Dec, Assign)
CELLOPS = (Inc, Dec, Assign, Read, Write)
COMPOUND = (AddToScaled, MoveTo)
OPENERS = (LoopStart, If)
