##
# .types.io.lib - NUMERIC binary record packing
##
"""
Pack and unpack the binary form of a NUMERIC record::

	offset  size  field
	0       2     ndigits
	2       2     weight
	4       2     sign
	6       2     dscale
	8       2*N   digits, N = ndigits

All fields are int2 in network order.
"""
from ...python.structlib import \
	hhhh_pack, hhhh_unpack, hhhh_size, \
	shorts_pack, shorts_unpack_from
from ...exceptions import Truncated, BinaryRepresentationError
from ..numeric import Numeric, numeric_nan

def numeric_pack(data, hhhh_pack = hhhh_pack, shorts_pack = shorts_pack):
	"""
	Serialize a `Numeric` record, or any ``(ndigits, weight, sign, dscale,
	digits)`` sequence, header first.
	"""
	return hhhh_pack(data[:4]) + shorts_pack(data[4])

def numeric_unpack_from(data, offset = 0, typ = Numeric,
	hhhh_unpack = hhhh_unpack,
	hhhh_size = hhhh_size,
	len = len,
):
	"""
	Read a record from `data` starting at `offset`.

	Returns the pair ``(record, next_offset)`` where `next_offset` is the
	position of the first byte after the record. Exactly ``2 * ndigits`` bytes
	are read after the header; anything beyond is left to the caller.
	"""
	available = len(data) - offset
	if available < hhhh_size:
		raise Truncated(
			"insufficient data for numeric header",
			details = {
				'position': offset,
				'hint': "required %d bytes, %d remaining" %(hhhh_size, max(available, 0)),
			},
		)
	header = hhhh_unpack(data, offset)
	ndigits, weight, sign, dscale = header
	if ndigits < 0:
		raise BinaryRepresentationError(
			"negative numeric digit count",
			details = {'position': offset, 'ndigits': ndigits},
		)
	if sign & numeric_nan == numeric_nan:
		raise BinaryRepresentationError(
			"numeric NaN is not supported",
			details = {'position': offset + 4},
		)
	required = 2 * ndigits
	available -= hhhh_size
	if available < required:
		raise Truncated(
			"insufficient data for numeric digits",
			details = {
				'position': offset + hhhh_size,
				'hint': "required %d bytes for %d digits, %d remaining" %(
					required, ndigits, available
				),
			},
		)
	digits = shorts_unpack_from(data, ndigits, offset + hhhh_size)
	end = offset + hhhh_size + required
	return (typ(ndigits, weight, sign, dscale, digits), end)

def numeric_unpack(data, typ = Numeric, numeric_unpack_from = numeric_unpack_from):
	"""
	Read a record from the start of `data`.

	The enclosing framing must delimit the record; bytes after the declared
	digits are not part of it and are not read.
	"""
	return numeric_unpack_from(data, 0, typ = typ)[0]
