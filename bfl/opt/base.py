# This is a part of bfl, the Brainfuck-to-Lua compiler.

from bfl.nodes import LoopEnd

class Transformer(object):
    """Cursor over the instruction list for peephole rewriting.

    Each iteration yields the position and the current node. A rewrite
    replaces the nodes under the window and the cursor skips everything
    it has emitted, so one pass never looks back."""

    def __init__(self, target):
        assert isinstance(target, list)
        self.target = target
        self.cursormin = 0
        self.cursormax = 0
        self.changed = False

    def __iter__(self):
        return self

    def __next__(self):
        if self.cursormax >= len(self.target):
            raise StopIteration
        self.cursormin = self.cursormax
        self.cursormax += 1
        return self.cursormin, self.target[self.cursormin]

    def window(self, size):
        """tr.window(size) -> list or None

        Returns size nodes starting from the cursor, or None if there are
        not enough nodes. If size is None the window extends up to the
        first LoopEnd node inclusive."""

        start = self.cursormin
        if size is None:
            for end in range(start + 1, len(self.target)):
                if isinstance(self.target[end], LoopEnd):
                    return self.target[start:end+1]
            return None
        if start + size > len(self.target):
            return None
        return self.target[start:start+size]

    def replace(self, count, *items):
        """Replaces count nodes from the cursor with given items."""

        self.target[self.cursormin:self.cursormin+count] = items
        self.cursormax = self.cursormin + len(items)
        self.changed = True

    def rewind(self, count):
        """Makes the last count emitted nodes visited again."""

        self.cursormax = max(self.cursormin, self.cursormax - count)

class Rule(object):
    """Peephole rule: a predicate and a rewrite over the window of nodes.

    head, if given, is the class (or tuple of classes) the first node of the
    window should be; it is checked before the window is even built. If the
    last emitted node is an instance of resume, the scan continues from that
    node instead of after it, so that a pointer movement can travel through
    a whole run of nodes in one pass."""

    def __init__(self, name, size, predicate, rewrite, head=None, resume=None):
        self.name = name
        self.size = size
        self.predicate = predicate
        self.rewrite = rewrite
        self.head = head
        self.resume = resume

    def apply(self, tr, cur):
        if self.head is not None and not isinstance(cur, self.head):
            return False
        window = tr.window(self.size)
        if window is None or not self.predicate(window):
            return False
        items = self.rewrite(window)
        tr.replace(len(window), *items)
        if self.resume is not None and items and isinstance(items[-1], self.resume):
            tr.rewind(1)
        return True

    def __repr__(self):
        return '<Rule %s>' % self.name

class BaseOptimizerPass(object):
    def __init__(self, compiler):
        self.compiler = compiler

    def __getattr__(self, name):
        return getattr(self.compiler, name)

    def transform(self, program):
        return program
