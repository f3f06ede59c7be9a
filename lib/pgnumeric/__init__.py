##
# pgnumeric root package
##
"""
pgnumeric is a Python package for the PostgreSQL NUMERIC binary format. It
converts exact decimal text to and from the records PostgreSQL sends and
receives for NUMERIC values::

	>>> import pgnumeric
	>>> r = pgnumeric.Numeric.from_string('-42.5')
	>>> r
	pgnumeric.types.numeric.Numeric(ndigits = 2, weight = 0, sign = 16384, dscale = 1, digits = (42, 5000))
	>>> r.to_bytes()
	b'\\x00\\x02\\x00\\x00@\\x00\\x00\\x01\\x00*\\x13\\x88'
	>>> str(pgnumeric.Numeric.from_bytes(r.to_bytes()))
	'-42.5'

Message framing and the surrounding wire protocol are left to the caller.
"""
__all__ = [
	'__author__',
	'__date__',
	'__version__',
	'version',
	'version_info',
	'Numeric',
	'encode',
	'decode',
]

#: The version string of pgnumeric.
version = '' # overridden by subsequent import from .project.

#: The version triple of pgnumeric: (major, minor, patch).
version_info = () # overridden by subsequent import from .project.

# Optional.
try:
	from .project import version_info, version, \
		author as __author__, date as __date__
	__version__ = version
except ImportError:
	pass

from .types.numeric import Numeric
from .types.io.pg_numeric import \
	numeric_pack as encode, \
	numeric_unpack as decode
