##
# .message - codec message representation
##
from operator import itemgetter
from . import sys as pg_sys

class Message(object):
	"""
	A message emitted by the codec. Errors and warnings are messages too; the
	message carries the primary text, a SQL state code, and a dictionary of
	additional details such as 'hint' or 'position'.
	"""
	label = 'MESSAGE'
	source = 'CLIENT'
	code = '00000'

	# details shown as part of LOCATION rather than on their own line
	location_keys = frozenset(['function', 'position'])

	def __init__(self,
		message : "The primary information of the message",
		code : "Message code to attach (SQL state)" = None,
		details : "additional information associated with the message" = None,
		source : "Which side generated the message(SERVER, CLIENT)" = None,
	):
		self.message = message
		self.details = {} if details is None else details
		if code is not None:
			self.code = code
		if source is not None:
			self.source = source

	@property
	def location(self):
		'where the message arose: "in <function>, position <n> from <source>"'
		function = self.details.get('function')
		if function is None:
			return self.source
		position = self.details.get('position')
		if position is None:
			return "in %s from %s" %(function, self.source)
		return "in %s, position %s from %s" %(function, position, self.source)

	def fields(self, get0 = itemgetter(0)):
		"""
		Yield the (KEY, value) lines displayed under the message text.
		"""
		if self.code and self.code != "00000":
			yield ('CODE', self.code)
		yield ('LOCATION', self.location)
		for k, v in sorted(self.details.items(), key = get0):
			if k not in self.location_keys:
				yield (k.upper(), str(v))

	def __repr__(self):
		args = [repr(self.message)]
		if self.code != type(self).code:
			args.append('code = %r' %(self.code,))
		if self.details:
			args.append('details = %r' %(self.details,))
		if self.source != type(self).source:
			args.append('source = %r' %(self.source,))
		return '%s.%s(%s)' %(
			type(self).__module__, type(self).__name__, ', '.join(args)
		)

	def emit(self):
		'Send the message to `pgnumeric.sys.msghook`.'
		pg_sys.msghook(self)
