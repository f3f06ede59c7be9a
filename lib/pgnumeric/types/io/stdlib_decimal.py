##
# types.io.stdlib_decimal
#
# I/O routines for transforming NUMERIC to and from decimal.Decimal.
##
from decimal import Decimal
from ...exceptions import InvalidFormat
from ..numeric import Numeric
from . import lib
from .pg_numeric import numeric_from_string, numeric_to_string

##
# Python's Decimal consists of:
#  1. sign, negativity.
#  2. digits, sequence of int()'s
#  3. exponent, digits that fall to the right of the decimal point
#
# The exponent is expanded into plain notation, so Decimal('1E+3') is packed
# as the numeral 1000 and Decimal('1.50') keeps its display scale of two.
def numeric_from_decimal(x, typ = Numeric, Decimal = Decimal):
	if not isinstance(x, Decimal):
		x = Decimal(x)
	if not x.is_finite():
		raise InvalidFormat(
			"numeric does not support infinite or NaN values",
			details = {
				'function': 'numeric_from_decimal',
				'hint': "%r is not finite" %(x,),
			},
		)
	return numeric_from_string(format(x, 'f'), typ = typ)

def numeric_to_decimal(x, Decimal = Decimal):
	return Decimal(numeric_to_string(x))

def numeric_pack(x, pack = lib.numeric_pack):
	return pack(numeric_from_decimal(x))

def numeric_unpack(x, unpack = lib.numeric_unpack):
	return numeric_to_decimal(unpack(x))

oid_to_io = {
	'stdlib_decimal' : (numeric_pack, numeric_unpack, Decimal),
}
