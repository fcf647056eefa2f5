# This is a part of bfl, the Brainfuck-to-Lua compiler.

import bfl.nodes

class Generator(object):
    def __init__(self, compiler):
        self.compiler = compiler
        self.nindents = 0

        self.genmap = {}
        for name in dir(self):
            if not name.startswith('generate_'): continue
            try:
                self.genmap[getattr(bfl.nodes, name[9:])] = getattr(self, name)
            except AttributeError:
                pass

    def __getattr__(self, name):
        return getattr(self.compiler, name)

    def flush(self):
        raise NotImplementedError

    def generate(self, program):
        genmap = self.genmap
        self.prologue()
        for node in program:
            self.nindents = node.depth
            genmap[type(node)](node)
        self.nindents = 0

    def prologue(self):
        pass
