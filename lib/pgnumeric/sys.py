##
# .sys
##
"""
pgnumeric system functions.

Overridable Functions
---------------------

 errformat
  The displayed body of an exception; the implementation of
  `pgnumeric.exceptions.Error.__str__`. Defaults to `format_error`.

 msghook
  Display a message. Defaults to `write_message`, which prints to stderr.

Assign a replacement to either name; `reset_errformat` and `reset_msghook`
restore the defaults.
"""
import sys
import os
from .python.string import indent

def format_fields(msg):
	return indent(os.linesep.join(k + ': ' + v for k, v in msg.fields())).rstrip()

def format_message(msg):
	"""
	Render a message with its label::

		TypeConversionWarning: negative zero rendered as "0"
		  CODE: 01-TP
		  LOCATION: CLIENT
	"""
	return msg.label + ': ' + msg.message + os.linesep + format_fields(msg)

def format_error(err):
	'The message text followed by its fields; no label, the traceback has it.'
	return err.message + os.linesep + format_fields(err)

def write_message(msg):
	if sys.stderr is None or sys.stderr.closed:
		return
	sys.stderr.write(format_message(msg) + os.linesep)

errformat = format_error
msghook = write_message

def reset_errformat():
	global errformat
	errformat = format_error

def reset_msghook():
	global msghook
	msghook = write_message
