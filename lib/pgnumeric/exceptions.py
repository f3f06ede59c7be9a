##
# .exceptions - Exception hierarchy for NUMERIC codec failures.
##
"""
pgnumeric exceptions and warnings with associated state codes.

The codes are the PostgreSQL SQL state codes of the equivalent server side
conditions, so ``22P02``, invalid_text_representation, is used for text that is
not a numeral and ``22P03``, invalid_binary_representation, for records that
cannot be read.

The primary entry points of this module is the `ErrorLookup` function and the
`WarningLookup` function. Given an SQL state code, they give back the most
appropriate Error or Warning subclass.

This module is executable via -m: python -m pgnumeric.exceptions.
It provides a convenient way to look up the exception object mapped to by the
given error code::

	$ python -m pgnumeric.exceptions 22P02
	pgnumeric.exceptions.TextRepresentationError [22P02]

If the exact error code is not found, it will try to find the error class's
exception(The first two characters of the error code make up the class
identity)::

	$ python -m pgnumeric.exceptions 22444
	pgnumeric.exceptions.DataError [22000]

If that fails, it will return `pgnumeric.exceptions.Error`
"""
import sys
import os
from functools import partial
from operator import attrgetter
from .message import Message
from . import sys as pg_sys

PythonException = Exception
PythonWarning = Warning
class Exception(Exception):
	'Base pgnumeric exception class'
	pass

class Warning(Message, PythonWarning):
	code = '01000'
	label = property(attrgetter('__class__.__name__'))

class DriverWarning(Warning):
	code = '01-00'
	source = 'CLIENT'
class TypeConversionWarning(DriverWarning):
	'Report a potential issue with a conversion.'
	code = '01-TP'

class Error(Message, Exception):
	'A pgnumeric Error'
	label = 'ERROR'
	code = ''

	def __str__(self):
		'Call .sys.errformat(self)'
		return pg_sys.errformat(self)

class DataError(Error):
	code = '22000'
class NumericRangeError(DataError):
	'The value does not fit the 16-bit fields of the binary format.'
	code = '22003'

class TextRepresentationError(DataError):
	code = '22P02'
class InvalidFormat(TextRepresentationError):
	"""
	The text is not a plain decimal numeral, ``-?[0-9]+(\\.[0-9]+)?``.
	"""

class BinaryRepresentationError(DataError):
	code = '22P03'
class Truncated(BinaryRepresentationError):
	"""
	The binary record is shorter than its header declares.
	"""

# Setup mapping to provide code based exception lookup.
code_to_error = {}
code_to_warning = {}
def map_errors_and_warnings(
	objs : "A iterable of `Warning`s and `Error`'s",
	error_container : "apply the code to error association to this object" = code_to_error,
	warning_container : "apply the code to warning association to this object" = code_to_warning,
):
	"""
	Construct the code-to-error and code-to-warning associations.
	"""
	for obj in objs:
		if not issubclass(type(obj), (type(Warning), type(Error))):
			# It's not object of interest.
			continue
		code = getattr(obj, 'code', None)
		if not code:
			# It has no code attribute, or the code was set to None.
			# If it's code is None, we don't map it as it's a "container".
			continue

		if issubclass(obj, Error):
			container = error_container
		elif issubclass(obj, Warning):
			container = warning_container
		else:
			continue

		cur_obj = container.get(code)
		if cur_obj is None or issubclass(cur_obj, obj):
			# There is no object yet, or the object at the code
			# is not the most general class.
			# The latter condition comes into play when
			# there are sub-Class types that share the Class code
			# with the most general type. (See Truncated)
			container[code] = obj

def code_lookup(
	default : "The object to return when no code or class is found",
	container : "where to look for the object associated with the code",
	code : "the code to find the exception for"
):
	obj = container.get(code)
	if obj is None:
		obj = container.get(code[:2] + "000", default)
	return obj

map_errors_and_warnings(sys.modules[__name__].__dict__.values())
ErrorLookup = partial(code_lookup, Error, code_to_error)
WarningLookup = partial(code_lookup, Warning, code_to_warning)

if __name__ == '__main__':
	for x in sys.argv[1:]:
		if x.startswith('01'):
			e = WarningLookup(x)
		else:
			e = ErrorLookup(x)
		sys.stdout.write('pgnumeric.exceptions.%s [%s]%s%s' %(
				e.__name__, e.code, os.linesep, (
					e.__doc__ is not None and os.linesep.join([
						'  ' + x for x in (e.__doc__).split('\n')
					]) + os.linesep or ''
				)
			)
		)
