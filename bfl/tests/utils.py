# This is a part of bfl, the Brainfuck-to-Lua compiler.

from pytest import raises

def remove_spaces(s):
    '''Strips every whitespaces in s.'''
    return ''.join(s.split())

def eq(node, str):
    '''Returns True if representation of node matches str except whitespaces.'''
    return remove_spaces(repr(node)) == remove_spaces(str)
