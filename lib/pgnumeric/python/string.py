##
# .python.string
##
"""
String slicing helpers.

`chunk` and `rchunk` split a string into fixed size pieces. They differ in
which end receives the short remainder: `chunk` leaves it at the right end,
`rchunk` at the left end.
"""
import os

def indent(s, level = 2, char = ' '):
	ind = char * level
	r = ""
	for x in s.splitlines():
		r += ((ind + x).rstrip() + os.linesep)
	return r

def chunk(s, size = 4):
	"""
	Split `s` into pieces of `size` characters from the left; only the last
	piece may be shorter::

		>>> list(chunk('1234567', 4))
		['1234', '567']
	"""
	for i in range(0, len(s), size):
		yield s[i:i+size]

def rchunk(s, size = 4):
	"""
	Split `s` into pieces of `size` characters from the right; only the first
	piece may be shorter::

		>>> list(rchunk('1234567', 4))
		['123', '4567']
	"""
	head = len(s) % size
	if head:
		yield s[:head]
	for i in range(head, len(s), size):
		yield s[i:i+size]
