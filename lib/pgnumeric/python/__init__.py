"""
Python tools package.

Various extensions to the standard library used by the codec.
"""
