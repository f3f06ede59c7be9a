##
# .types.io - I/O routines for packing and unpacking data
##
"""
NUMERIC I/O routines--packing and unpacking functions.

This package manages the modules providing I/O routines. Each module exposes
an ``oid_to_io`` mapping of a type Oid, or a string key for alternative
representations, to a ``(pack, unpack, type)`` triple.

 pg_numeric
  decimal text, registered for `NUMERICOID`.

 stdlib_decimal
  `decimal.Decimal`, registered under the key ``'stdlib_decimal'``.
"""
from itertools import cycle, chain
from ... import types as pg_types

io_modules = {
	'pg_numeric' : (
		pg_types.NUMERICOID,
	),

	# Must be resolved by name; NUMERICOID defaults to text.
	'stdlib_decimal' : (
		'stdlib_decimal',
	),
}

# OID -> module name
module_io = dict(
	chain.from_iterable((
		zip(x[1], cycle((x[0],))) for x in io_modules.items()
	))
)

def load(relmod):
	return __import__(relmod, globals = globals(), locals = locals(), fromlist = [''], level = 1)

def resolve(oid):
	io = module_io.get(oid)
	if io is None:
		return None
	if io.__class__ is str:
		module_io.update(load(io).oid_to_io)
		io = module_io[oid]
	return io
