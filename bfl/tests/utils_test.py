# This is a part of bfl, the Brainfuck-to-Lua compiler.

from bfl.tests.utils import *
from bfl.nodes import *

def test_remove_spaces():
    assert remove_spaces('Program[{0}+=1,Write[{0}]]') == 'Program[{0}+=1,Write[{0}]]'
    assert remove_spaces('  foo   bar  quux\tz\nq\r+3\t\t ') == 'foobarquuxzq+3'

def test_eq():
    assert eq([1, 2, 3, 4], '[1,2,3,4]')
    assert eq(Program([Inc(0, 1), Write(0)]), 'Program[{0}+=1, Write[{0}]]')
    assert not eq(Program([Dec(0, 1)]), 'Program[{0}+=1]')
