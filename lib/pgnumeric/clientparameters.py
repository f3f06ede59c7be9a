##
# .clientparameters
##
"""
Collect codec parameters from various sources.

This module provides functions for collecting the parameters of the
`pg_numeric` command from various sources such as built-in defaults, a
configuration file, environment variables, and command line options.

Parameters are handled in two forms: normalized and
denormalized. Normalized parameters is a dictionary. Denormalized parameters
is an iterable of key-value pairs where the key is a tuple, the "key-path"::

	>>> list(denormalize_parameters({'format' : 'hex'}))
	[(('format',), 'hex')]

Later pairs override earlier ones, so the sources are chained in order of
increasing precedence:

 1. `defaults`
 2. `configfile`, the ``[pg_numeric]`` section of an INI file named by
    ``PGNUMERIC_CONFIG`` or the ``--config`` option
 3. explicit ``parameters`` given to `collect`
 4. `envvars`, ``PGNUMERIC_FORMAT`` and ``PGNUMERIC_WARNINGS``
 5. command line options parsed with `DefaultParser`
"""
import os
import configparser
import optparse
import warnings
from itertools import chain
from functools import partial

from .exceptions import Error, TypeConversionWarning

class ClientParameterError(Error):
	code = '-*000'
	source = '.clientparameters'
class ConfigFileError(ClientParameterError):
	code = '-*cfg'

config_envvar = 'PGNUMERIC_CONFIG'
config_section = 'pg_numeric'

default_format = 'table'
default_warnings = 'default'

#: Accepted values of each parameter.
parameter_choices = {
	'format' : ('table', 'hex', 'text'),
	'warnings' : ('default', 'error', 'ignore', 'always'),
}

# Environment variables that require no transformation.
default_envvar_map = {
	'FORMAT' : 'format',
	'WARNINGS' : 'warnings',
}

def defaults():
	"""
	Produce the built-in defaults.
	"""
	yield ('format',), default_format
	yield ('warnings',), default_warnings

def envvars(environ = os.environ, modifier : "environment variable key modifier" = 'PGNUMERIC_'.__add__):
	"""
	Create parameters from the given environment variables.

		PGNUMERIC_FORMAT -> format
		PGNUMERIC_WARNINGS -> warnings

	The 'PGNUMERIC_' prefix can be customized via the `modifier` argument.
	PGNUMERIC_CONFIG will not respect any such change as it's not a parameter
	itself.
	"""
	for k, v in default_envvar_map.items():
		k = modifier(k)
		if k in environ:
			yield ((v,), environ[k])

def configfile(path, section = config_section):
	"""
	Yield the parameters in the `section` of the INI file at `path`.

	A missing section yields nothing; a missing or unreadable file is an
	error as it was explicitly requested.
	"""
	cp = configparser.RawConfigParser()
	try:
		with open(path) as f:
			cp.read_file(f)
	except (OSError, configparser.Error) as err:
		raise ConfigFileError(
			"could not read configuration file",
			details = {
				'file': path,
				'hint': str(err),
			},
		) from err
	if not cp.has_section(section):
		return
	for k, v in cp.items(section):
		yield ((k,), v)

def denormalize_parameters(p):
	"""
	Given a normalized parameters dictionary, {'format': 'hex'}, denormalize
	it: [(('format',), 'hex')]
	"""
	for k, v in p.items():
		yield ((k,), v)

def normalize_parameter(kv):
	"""
	Translate a parameter into standard form, validating its value.
	"""
	(k, v) = kv
	name = k[0].lower()
	choices = parameter_choices.get(name)
	if choices is None:
		raise ClientParameterError(
			"unknown parameter %r" %(name,),
			details = {'hint': 'known parameters: ' + ', '.join(sorted(parameter_choices))},
		)
	v = str(v).strip().lower()
	if v not in choices:
		raise ClientParameterError(
			"invalid value for parameter %r: %r" %(name, v),
			details = {'hint': 'choose one of: ' + ', '.join(choices)},
		)
	return ((name,) + tuple(k[1:]), v)

def normalize(iter):
	"""
	Make a dictionary out of denormalized parameters.
	"""
	rd = {}
	for (k, v) in map(normalize_parameter, iter):
		sd = rd
		for sk in k[:len(k)-1]:
			sd = sd.setdefault(sk, {})
		sd[k[-1]] = v
	return rd

##
# optparse options
##

def append_client_parameters(option, opt_str, value, parser):
	parser.values.client_parameters.append(
		((option.dest,), value)
	)

make_option = partial(
	optparse.make_option,
	action = 'callback',
	callback = append_client_parameters
)

option_format = make_option('-f', '--format',
	dest = 'format',
	type = 'choice',
	choices = parameter_choices['format'],
	help = 'output format: table, hex, or text',
)
option_warnings = make_option('-W', '--warnings',
	dest = 'warnings',
	type = 'choice',
	choices = parameter_choices['warnings'],
	help = 'action taken on conversion warnings: default, error, ignore, or always',
)
option_config = optparse.make_option('-c', '--config',
	dest = 'config_file',
	type = 'str',
	default = None,
	help = 'configuration file to read the [%s] section from' %(config_section,),
)

default_optparse_options = [
	option_format,
	option_warnings,
	option_config,
]

class DefaultParser(optparse.OptionParser):
	"""
	Option parser with the format, warnings, and config options. Initializes
	the client_parameters list on the parser's values.
	"""
	standard_option_list = default_optparse_options

	def get_default_values(self, *args, **kw):
		v = super().get_default_values(*args, **kw)
		v.client_parameters = []
		return v

def collect(
	parsed_options : "options parsed using the `DefaultParser`" = None,
	no_defaults : "Don't build-out the built-in defaults" = False,
	environ : "environment variables to use, `None` to disable" = os.environ,
	environ_prefix : "prefix to use for collecting environment variables" = 'PGNUMERIC_',
	config_file : "the configuration file to actually use" = None,
	parameters : "base parameters to use(applied after the config file)" = (),
):
	"""
	Build a normalized parameters dictionary for the `pg_numeric` command.
	"""
	d_parameters = []
	if not no_defaults:
		d_parameters.append(defaults())

	if config_file is None:
		config_file = getattr(parsed_options, 'config_file', None)
	if config_file is None and environ is not None:
		config_file = environ.get(config_envvar)
	if config_file:
		d_parameters.append(configfile(config_file))

	if parameters:
		d_parameters.append(denormalize_parameters(dict(parameters)))

	if environ is not None:
		d_parameters.append(envvars(
			environ = environ,
			modifier = environ_prefix.__add__
		))
	cop = getattr(parsed_options, 'client_parameters', None)
	if cop:
		d_parameters.append(cop)

	return normalize(chain(*d_parameters))

def apply_warnings(params, category = TypeConversionWarning):
	"""
	Install the warnings filter named by the 'warnings' parameter for
	conversion warnings.
	"""
	action = params.get('warnings')
	if action is not None:
		warnings.simplefilter(action, category)

if __name__ == '__main__':
	import pprint
	p = DefaultParser(
		description = "print the parameters dictionary for the environment"
	)
	(co, ca) = p.parse_args()
	pprint.pprint(collect(parsed_options = co))
