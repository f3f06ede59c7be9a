##
# .python.structlib - module for extracting serialized data
##
import struct

# Always to and from network order.
# Create a pair, (pack, unpack) for the given `struct` format.'
def mk_pack(x):
	s = struct.Struct('!' + x)
	def pack(y, p = s.pack):
		return p(*y)
	return (pack, s.unpack_from)

hhhh_pack, hhhh_unpack = mk_pack("hhhh")

#: Size of the `hhhh` header in bytes.
hhhh_size = struct.calcsize("!hhhh")

def shorts_pack(seq, pack = struct.pack, len = len):
	'pack a sequence of int2 values in network order'
	return pack("!%dh" %(len(seq),), *seq)

def shorts_unpack_from(data, count, offset = 0, unpack_from = struct.unpack_from):
	"""
	Unpack exactly `count` int2 values from `data` starting at `offset`.

	Bytes following the `count` values are not examined; the caller must
	check that at least ``2 * count`` bytes are available.
	"""
	return unpack_from("!%dh" %(count,), data, offset)
