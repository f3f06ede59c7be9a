##
# types.io.pg_numeric
#
# I/O routines for transforming NUMERIC to and from decimal text.
##
"""
Convert decimal text to and from NUMERIC records.

The text grammar is ``-?[0-9]+(\\.[0-9]+)?``: no whitespace, no exponent, no
thousands separators. Decoding produces the canonical form of the text: no
redundant leading zeros, the fraction kept to `dscale` digits, and zero
without a sign.

Decoding accepts every valid record. A record with no digits and the negative
sign renders as ``"0"`` and issues a `TypeConversionWarning`; under a
warnings filter of ``'error'`` that warning is raised instead.
"""
import re
import warnings
from ...python.string import chunk, rchunk
from ...exceptions import \
	InvalidFormat, NumericRangeError, TypeConversionWarning
from ...types import NUMERICOID
from ..numeric import Numeric, \
	numeric_positive, numeric_negative, \
	numeric_digit_length, int2_max
from . import lib

numeral = re.compile(r'-?[0-9]+(\.[0-9]+)?\Z')

def integer_digits(s, rchunk = rchunk, size = numeric_digit_length):
	"""
	Numeric digits of the integer part; grouped from the right, so only the
	most significant digit can hold fewer than four decimal digits.
	"""
	return [int(x) for x in rchunk(s, size)]

def fraction_digits(s, chunk = chunk, size = numeric_digit_length):
	"""
	Numeric digits of the fractional part; grouped from the left with the last
	group padded on the right with zeros.
	"""
	return [int(x.ljust(size, '0')) for x in chunk(s, size)]

def numeric_from_string(text, typ = Numeric):
	"""
	Encode decimal `text` into a NUMERIC record.
	"""
	if not isinstance(text, str) or numeral.match(text) is None:
		raise InvalidFormat(
			"invalid input syntax for type numeric: %r" %(text,),
			details = {
				'function': 'numeric_from_string',
				'hint': 'numerals take the form [-]digits[.digits]',
			},
		)

	integer, point, fraction = text.partition('.')
	if integer.startswith('-'):
		integer = integer[1:]
		sign = numeric_negative
	else:
		sign = numeric_positive

	idigits = integer_digits(integer)
	fdigits = fraction_digits(fraction)
	digits = idigits + fdigits
	dscale = len(fraction)
	if len(digits) > int2_max or dscale > int2_max:
		raise NumericRangeError(
			"value overflows numeric format",
			details = {
				'function': 'numeric_from_string',
				'hint': "%d numeric digits with a display scale of %d" %(
					len(digits), dscale
				),
			},
		)
	return typ(len(digits), len(idigits) - 1, sign, dscale, digits)

def numeric_to_string(x, str = str):
	"""
	Decode a NUMERIC record into canonical decimal text.
	"""
	ndigits, weight, sign, dscale, digits = x
	if ndigits == 0:
		if sign & numeric_negative:
			w = TypeConversionWarning(
				"negative zero rendered as \"0\"",
				details = {
					'hint': 'A numeric with no digits had the negative sign set.'
				},
			)
			warnings.warn(w)
		return '0'
	if not any(digits):
		return '0'

	# the first integer digit is written without leading zeros
	if weight >= 0:
		idigits = digits[:weight+1]
		integer = str(idigits[0]) + ''.join(
			str(d).rjust(numeric_digit_length, '0') for d in idigits[1:]
		)
		# server sent records omit trailing zero digits of the integer part
		integer += '0000' * (weight + 1 - len(idigits))
		integer = integer.lstrip('0') or '0'
		fdigits = digits[weight+1:]
		fraction = ''
	else:
		integer = '0'
		fdigits = digits
		# weight < -1 means zero digits were left off after the point
		fraction = '0000' * (-1 - weight)

	fraction += ''.join(
		str(d).rjust(numeric_digit_length, '0') for d in fdigits
	)
	# dscale drops the padding of the last digit; or restores the
	# trailing zeros left off by the server.
	fraction = fraction[:dscale].ljust(dscale, '0')

	numeric = integer + '.' + fraction if fraction else integer
	if sign & numeric_negative:
		return '-' + numeric
	return numeric

def numeric_pack(x,
	numeric_from_string = numeric_from_string,
	pack = lib.numeric_pack,
):
	'decimal text to serialized NUMERIC'
	return pack(numeric_from_string(x))

def numeric_unpack(x,
	unpack = lib.numeric_unpack,
	numeric_to_string = numeric_to_string,
):
	'serialized NUMERIC to decimal text'
	return numeric_to_string(unpack(x))

oid_to_io = {
	NUMERICOID : (numeric_pack, numeric_unpack, str),
}
