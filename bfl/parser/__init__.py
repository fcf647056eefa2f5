# This is a part of bfl, the Brainfuck-to-Lua compiler.
