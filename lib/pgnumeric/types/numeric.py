##
# .types.numeric - the NUMERIC record
##
"""
The NUMERIC record as it appears on the wire.

A record consists of:

 1. ndigits, the number of *numeric* digits that follow the header.
 2. weight, the number of *numeric* digits left of the decimal point, minus one.
 3. sign, negativity. `numeric_negative` or `numeric_positive`.
 4. dscale, *display* precision; the number of decimal digits shown after the
    decimal point.
 5. digits, the numeric digits, most significant first.

A numeric digit is actually four decimal digits, 0000-9999, in the
representation.
"""
from ..exceptions import BinaryRepresentationError

numeric_positive = 0x0000
numeric_negative = 0x4000
numeric_nan = 0xC000

#: Number of decimal digits in a numeric digit.
numeric_digit_length = 4
numeric_base = 10 ** numeric_digit_length

int2_min = -0x8000
int2_max = 0x7FFF

header_fields = ('ndigits', 'weight', 'sign', 'dscale')

class Numeric(tuple):
	"""
	An immutable NUMERIC record; the tuple ``(ndigits, weight, sign, dscale,
	digits)`` where `digits` is a tuple of ints.

	Instances are compared field-for-field. Use `from_string`, `from_bytes`, or
	`from_decimal` to build one from an external form.
	"""
	__slots__ = ()
	ndigits = property(fget = lambda s: s[0])
	weight = property(fget = lambda s: s[1])
	sign = property(fget = lambda s: s[2])
	dscale = property(fget = lambda s: s[3])
	digits = property(fget = lambda s: s[4])

	def __new__(subtype, ndigits, weight, sign, dscale, digits = ()):
		digits = tuple(digits)
		header = (ndigits, weight, sign, dscale)
		for name, value in zip(header_fields, header):
			if not int2_min <= value <= int2_max:
				raise BinaryRepresentationError(
					"numeric %s out of int2 range" %(name,),
					details = {name: value},
				)
		if ndigits != len(digits):
			raise BinaryRepresentationError(
				"numeric digit count does not match the number of digits",
				details = {
					'ndigits': ndigits,
					'hint': "%d digits were given" %(len(digits),),
				},
			)
		if dscale < 0:
			raise BinaryRepresentationError(
				"negative numeric display scale",
				details = {'dscale': dscale},
			)
		for position, digit in enumerate(digits):
			if not 0 <= digit < numeric_base:
				raise BinaryRepresentationError(
					"numeric digit out of range",
					details = {
						'position': position,
						'hint': "%r is not in 0-%d" %(digit, numeric_base - 1),
					},
				)
		return tuple.__new__(subtype, header + (digits,))

	@classmethod
	def from_string(typ, text):
		'Encode the decimal `text`; raises `InvalidFormat` on malformed text.'
		from .io.pg_numeric import numeric_from_string
		return numeric_from_string(text, typ = typ)

	@classmethod
	def from_bytes(typ, data):
		'Read a record; raises `Truncated` when `data` is too short.'
		from .io.lib import numeric_unpack
		return numeric_unpack(data, typ = typ)

	@classmethod
	def from_decimal(typ, d):
		from .io.stdlib_decimal import numeric_from_decimal
		return numeric_from_decimal(d, typ = typ)

	def to_bytes(self):
		from .io.lib import numeric_pack
		return numeric_pack(self)

	def decimal(self):
		from .io.stdlib_decimal import numeric_to_decimal
		return numeric_to_decimal(self)

	@property
	def negative(self):
		return bool(self[2] & numeric_negative)

	def __str__(self):
		from .io.pg_numeric import numeric_to_string
		return numeric_to_string(self)

	def __float__(self):
		return float(str(self))

	def __repr__(self):
		return '%s.%s(%s, digits = %r)' %(
			type(self).__module__,
			type(self).__name__,
			', '.join(
				'%s = %r' %(name, value)
				for name, value in zip(header_fields, self[:4])
			),
			self[4],
		)

	def __getnewargs__(self):
		return tuple(self)
