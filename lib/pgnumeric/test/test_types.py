##
# .test.test_types - test the record type and its binary I/O
##
import unittest
import operator
from .. import types as pg_types
from ..types import Numeric
from ..types.io import lib as typlib
from ..types.io import resolve
from .. import exceptions as pg_exc

# this must pack to that, and
# that must unpack to this
expectation_samples = {
	('numeric', typlib.numeric_pack, typlib.numeric_unpack) : [
		(Numeric(0, 0, 0, 0, ()), b'\x00'*2*4),
		(Numeric(1, 0, 0, 0, (1,)), b'\x00\x01' + b'\x00'*2*3 + b'\x00\x01'),
		(Numeric(1, 1, 0, 1, (1,)),
			b'\x00\x01\x00\x01\x00\x00\x00\x01' + b'\x00\x01'),
		(Numeric(3, 2, 0, 0, (1, 2345, 6789)),
			b'\x00\x03\x00\x02\x00\x00\x00\x00' + b'\x00\x01\x09\x29\x1a\x85'),
		(Numeric(2, 0, 0x4000, 1, (42, 5000)),
			b'\x00\x02\x00\x00\x40\x00\x00\x01' + b'\x00\x2a\x13\x88'),
		(Numeric(2, 0, 0, 1, (1, 5000)),
			b'\x00\x02\x00\x00\x00\x00\x00\x01' + b'\x00\x01\x13\x88'),
		(Numeric(1, -1, 0, 2, (1200,)),
			b'\x00\x01\xff\xff\x00\x00\x00\x02' + b'\x04\xb0'),
		(Numeric(1, 0, 0, 0, (9999,)),
			b'\x00\x01' + b'\x00'*2*3 + b'\x27\x0f'),
	],
}

def check_expectations(self, samples):
	for id, sample in samples.items():
		name, pack, unpack = id

		for (sample_unpacked, sample_packed) in sample:
			pack_trial = pack(sample_unpacked)
			self.assertTrue(
				pack_trial == sample_packed,
				"%s sample: unpacked sample, %r, did not match " \
				"%r when packed, rather, %r" %(
					name, sample_unpacked,
					sample_packed, pack_trial
				)
			)

			unpack_trial = unpack(sample_packed)
			self.assertTrue(
				unpack_trial == sample_unpacked,
				"%s sample: packed sample, %r, did not match " \
				"%r when unpacked, rather, %r" %(
					name, sample_packed,
					sample_unpacked, unpack_trial
				)
			)

class test_Numeric(unittest.TestCase):
	def testFields(self):
		r = Numeric(3, 2, 0x4000, 0, [1, 2345, 6789])
		self.assertEqual(r.ndigits, 3)
		self.assertEqual(r.weight, 2)
		self.assertEqual(r.sign, 0x4000)
		self.assertEqual(r.dscale, 0)
		self.assertEqual(r.digits, (1, 2345, 6789))
		self.assertTrue(r.negative)
		self.assertFalse(Numeric(0, 0, 0, 0).negative)

	def testImmutable(self):
		r = Numeric(1, 0, 0, 0, (5,))
		self.assertRaises(AttributeError, setattr, r, 'weight', 1)
		self.assertRaises(TypeError, operator.setitem, r, 0, 2)
		self.assertIsInstance(r.digits, tuple)

	def testEquality(self):
		self.assertEqual(Numeric(1, 0, 0, 0, [5]), Numeric(1, 0, 0, 0, (5,)))
		self.assertNotEqual(Numeric(1, 0, 0, 0, (5,)), Numeric(1, 0, 0x4000, 0, (5,)))
		self.assertNotEqual(Numeric(1, 0, 0, 0, (5,)), Numeric(1, 0, 0, 1, (5,)))

	def testRepr(self):
		self.assertEqual(
			repr(Numeric(1, 0, 0, 1, (5000,))),
			'pgnumeric.types.numeric.Numeric(' \
			'ndigits = 1, weight = 0, sign = 0, dscale = 1, digits = (5000,))'
		)

	def testInvariants(self):
		# digit count must match
		self.assertRaises(pg_exc.BinaryRepresentationError, Numeric, 2, 0, 0, 0, (1,))
		self.assertRaises(pg_exc.BinaryRepresentationError, Numeric, 0, 0, 0, 0, (1,))
		# digits are base 10000
		self.assertRaises(pg_exc.BinaryRepresentationError, Numeric, 1, 0, 0, 0, (10000,))
		self.assertRaises(pg_exc.BinaryRepresentationError, Numeric, 1, 0, 0, 0, (-1,))
		# dscale
		self.assertRaises(pg_exc.BinaryRepresentationError, Numeric, 0, 0, 0, -1, ())
		# int2 fields
		self.assertRaises(pg_exc.BinaryRepresentationError, Numeric, 0, 0x8000, 0, 0, ())
		self.assertRaises(pg_exc.BinaryRepresentationError, Numeric, 0, 0, 0, 0x8000, ())

	def testInvariantDetails(self):
		try:
			Numeric(2, 0, 0, 0, (1, 12345))
		except pg_exc.BinaryRepresentationError as err:
			self.assertEqual(err.code, '22P03')
			self.assertEqual(err.details['position'], 1)
		else:
			self.fail("digit out of range was accepted")

	def testBytes(self):
		r = Numeric(3, 2, 0, 0, (1, 2345, 6789))
		self.assertEqual(Numeric.from_bytes(r.to_bytes()), r)
		self.assertEqual(len(r.to_bytes()), 8 + 2 * 3)

class test_io(unittest.TestCase):
	def testExpectations(self):
		'IO tests where the pre-made expected serialized form is compared'
		check_expectations(self, expectation_samples)

	def testTruncatedHeader(self):
		for x in (b'', b'\x00', b'\x00' * 7):
			self.assertRaises(pg_exc.Truncated, typlib.numeric_unpack, x)

	def testTruncatedDigits(self):
		# header declares three digits, two are present
		data = b'\x00\x03\x00\x02\x00\x00\x00\x00' + b'\x00\x01\x09\x29'
		self.assertRaises(pg_exc.Truncated, typlib.numeric_unpack, data)
		# odd trailing byte does not complete a digit
		self.assertRaises(pg_exc.Truncated, typlib.numeric_unpack, data + b'\x1a')
		try:
			typlib.numeric_unpack(data)
		except pg_exc.Truncated as err:
			self.assertEqual(err.details['position'], 8)
			self.assertEqual(err.code, '22P03')

	def testTrailingBytesNotRead(self):
		data = b'\x00\x01\x00\x00\x00\x00\x00\x00' + b'\x00\x07'
		r = typlib.numeric_unpack(data + b'\x00\x08\x00\x09')
		self.assertEqual(r.digits, (7,))
		self.assertEqual(r.ndigits, 1)

	def testUnpackFrom(self):
		first = Numeric(1, 0, 0, 0, (7,))
		second = Numeric(2, 0, 0x4000, 1, (42, 5000))
		data = b'\xff\xff' + typlib.numeric_pack(first) + typlib.numeric_pack(second)
		r, offset = typlib.numeric_unpack_from(data, 2)
		self.assertEqual(r, first)
		self.assertEqual(offset, 2 + 10)
		r, offset = typlib.numeric_unpack_from(data, offset)
		self.assertEqual(r, second)
		self.assertEqual(offset, len(data))
		self.assertRaises(pg_exc.Truncated, typlib.numeric_unpack_from, data, offset)

	def testBadRecords(self):
		# negative ndigits
		self.assertRaises(pg_exc.BinaryRepresentationError,
			typlib.numeric_unpack, b'\xff\xff' + b'\x00' * 6)
		# NaN
		self.assertRaises(pg_exc.BinaryRepresentationError,
			typlib.numeric_unpack, b'\x00\x00\x00\x00\xc0\x00\x00\x00')
		# digit beyond 9999
		self.assertRaises(pg_exc.BinaryRepresentationError,
			typlib.numeric_unpack, b'\x00\x01' + b'\x00' * 6 + b'\x27\x10')
		# truncation is still a binary representation error
		self.assertTrue(issubclass(pg_exc.Truncated, pg_exc.BinaryRepresentationError))

	def testConsistency(self):
		'records must unpack to what was packed, field-for-field'
		for x in (
			Numeric(0, -1, 0x4000, 3, ()),
			Numeric(4, 1, 0, 9, (9999, 0, 1, 9000)),
			Numeric(2, -3, 0x4000, 12, (10, 20)),
			Numeric(1, 0x7fff, 0, 0x7fff, (1,)),
		):
			packed = typlib.numeric_pack(x)
			self.assertEqual(len(packed), 8 + 2 * x.ndigits)
			self.assertEqual(typlib.numeric_unpack(packed), x)

	def testSampleHelperName(self):
		# module level helpers must not look like test functions to runners
		helpers = [
			k for k, v in globals().items()
			if k.startswith('test') and callable(v) and not isinstance(v, type)
		]
		self.assertEqual(helpers, [])

	def testResolve(self):
		pack, unpack, typ = resolve(pg_types.NUMERICOID)
		self.assertIs(typ, str)
		self.assertEqual(unpack(pack('-42.5')), '-42.5')
		pack, unpack, typ = resolve('stdlib_decimal')
		from decimal import Decimal
		self.assertIs(typ, Decimal)
		self.assertEqual(unpack(pack(Decimal('1.50'))), Decimal('1.50'))
		self.assertIsNone(resolve(0))

if __name__ == '__main__':
	unittest.main()
