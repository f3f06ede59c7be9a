#!/usr/bin/env python
##
# .bin.pg_numeric - encode and decode NUMERIC records
##
"""
pg_numeric command entry point.

Encode decimal numerals into NUMERIC binary records, or decode hexadecimal
records back into numerals::

	$ pg_numeric encode 123456789 -42.5
	$ pg_numeric --format text decode 0001000000000000002a
"""
import sys
import os
import warnings
from prettytable import PrettyTable

from .. import __version__
from .. import sys as pg_sys
from ..types.numeric import Numeric
from ..exceptions import Error, Warning, BinaryRepresentationError
from ..clientparameters import DefaultParser, collect, apply_warnings

__all__ = ['command', 'main']

table_fields = ('numeric', 'ndigits', 'weight', 'sign', 'dscale', 'digits', 'bytes')

def unhex(data):
	try:
		return bytes.fromhex(data)
	except ValueError as err:
		raise BinaryRepresentationError(
			"invalid hexadecimal record",
			details = {'hint': str(err)},
		) from err

actions = {
	'encode' : Numeric.from_string,
	'decode' : lambda x: Numeric.from_bytes(unhex(x)),
}

def record_row(text, record):
	return [
		text,
		record.ndigits,
		record.weight,
		'0x%04x' %(record.sign & 0xFFFF,),
		record.dscale,
		' '.join(map(str, record.digits)),
		record.to_bytes().hex(),
	]

def render(fmt, rows):
	"""
	Render the ``(text, record)`` pairs in the given output format.
	"""
	if fmt == 'table':
		table = PrettyTable(table_fields)
		table.align['numeric'] = 'r'
		table.align['digits'] = 'l'
		for text, record in rows:
			table.add_row(record_row(text, record))
		return table.get_string() + os.linesep
	elif fmt == 'hex':
		return ''.join(record.to_bytes().hex() + os.linesep for text, record in rows)
	return ''.join(text + os.linesep for text, record in rows)

def command(args, environ = os.environ, stdout = None, stderr = None):
	"""
	pg_numeric script entry point.
	"""
	stdout = stdout or sys.stdout
	stderr = stderr or sys.stderr
	op = DefaultParser(
		"%prog [options] (encode NUMERAL...|decode HEX...)",
		version = __version__
	)
	# options precede the action; negative numerals are operands
	op.disable_interspersed_args()
	co, ca = op.parse_args(list(args[1:]))
	if not ca or ca[0] not in actions:
		op.print_usage(stderr)
		return 2

	try:
		params = collect(parsed_options = co, environ = environ)
	except Error as err:
		stderr.write('ERROR: ' + str(err) + os.linesep)
		return 1

	read = actions[ca[0]]
	rows = []
	status = 0
	with warnings.catch_warnings(record = True) as caught:
		apply_warnings(params)
		for operand in ca[1:]:
			try:
				record = read(operand)
				rows.append((str(record), record))
			except (Error, Warning) as err:
				stderr.write('ERROR: %r: %s%s' %(operand, err, os.linesep))
				status = 1
	for w in caught:
		if isinstance(w.message, Warning):
			w.message.emit()
		else:
			stderr.write(warnings.formatwarning(
				w.message, w.category, w.filename, w.lineno
			))

	if rows:
		stdout.write(render(params['format'], rows))
	return status

def main():
	sys.exit(command(sys.argv))

if __name__ == '__main__':
	main()
