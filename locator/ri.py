"""
# Decompose, Resolve, and Reassemble Resource Indicators

# &.ri splits URI text into an &Indicator whose fields hold the raw,
# undecoded text that appeared in the source. Like most of the project, it is
# lenient: unusual input degrades into empty fields or a path-only indicator.
# The only rejected input is a port containing something other than digits.

# [ Entry Points ]
# - &parse
# - &unparse
# - &resolve
# - &default_port

# [ States ]

# &parse is a small state machine. Each state consumes a portion of the text
# and names its successor:

# /start/
	# Selects &State.scheme when the text begins with a letter, otherwise &State.path.
# /scheme/
	# Recognizes the scheme when it is followed by (characters)`'://'`.
	# Text without one is interpreted entirely as a path.
# /hostinfo/
	# Finds the end of the authority section.
# /userinfo/
	# Splits credentials from the authority at its last (character)`@`.
# /host/
	# Splits the hostname from the port at the first (character)`:`.
# /path/
	# Collects the text up to (character)`?`, (character)`#`, or the end.
# /query/
	# Collects the query and any fragment following it.
# /fragment/
	# Collects the fragment when no query was present.
"""
import enum
import logging
import dataclasses

from .data import octets
from .data import schemes
from . import host

log = logging.getLogger(__name__)

class Error(Exception):
	"""
	# Base class for resource indicator errors.
	"""

class InvalidPortCharacter(Error):
	"""
	# The port segment of the authority contained a character that is not a decimal digit.

	# [ Properties ]
	# /port/
		# The complete text of the port segment.
	# /span/
		# The start and stop offsets of &port within the parsed text.
	# /offset/
		# The position of the first invalid character within the parsed text.
	"""

	def __init__(self, port, span, offset):
		self.port = port
		self.span = span
		self.offset = offset
		super().__init__(port, span, offset)

	def __str__(self):
		return "invalid character %r after ':' in port %r at offset %d" %(
			self.port[self.offset - self.span[0]], self.port, self.offset
		)

def default_port(scheme, registry=schemes.registry):
	"""
	# Identify the registered port of the &scheme; zero when the scheme is unknown.
	"""

	if scheme:
		scheme = scheme.lower()
		for name, port in registry:
			if name == scheme:
				return port
	return 0

@dataclasses.dataclass
class Indicator(object):
	"""
	# The fields of a resource indicator as they were written.

	# Instances are plain mutable values; fields can be assigned directly and
	# &copy produces an independent instance.

	# [ Properties ]
	# /scheme/
		# The scheme preceding (characters)`'://'`, or an empty string.
	# /user/
		# The user of the credentials preceding (character)`@`.
	# /password/
		# The text following the first (character)`:` of the credentials.
	# /hostname/
		# The host portion of the authority.
	# /port/
		# The numeric port. Filled from the scheme's registered default
		# when no port was written.
	# /port_text/
		# The port digits exactly as written; empty when no port was present.
	# /path/
		# The path. No distinction is made between an empty and an absent path.
	# /query/
		# The query text without the leading (character)`?`.
	# /query_present/
		# Whether a (character)`?` was present; distinguishes an empty query from none.
	# /fragment/
		# The fragment text without the leading (character)`#`.
	# /fragment_present/
		# Whether a (character)`#` was present.
	"""

	scheme: str = ''
	user: str = ''
	password: str = ''
	hostname: str = ''
	port: int = 0
	port_text: str = ''
	path: str = ''
	query: str = ''
	query_present: bool = False
	fragment: str = ''
	fragment_present: bool = False

	def copy(self):
		return dataclasses.replace(self)

	def __str__(self):
		return unparse(self)

class State(enum.Enum):
	"""
	# The states of the decomposition performed by &parse.
	"""

	start = 0
	scheme = 1
	hostinfo = 2
	userinfo = 3
	host = 4
	path = 5
	query = 6
	fragment = 7
	terminal = 8

def scan(text, position, end, mask, table=octets.delimiters, ord=ord):
	"""
	# Advance &position until a character classified by &mask or &end is reached.
	"""

	while position < end:
		o = ord(text[position])
		if o < 256 and table[o] & mask:
			break
		position += 1
	return position

def _port_violation(text, start, stop):
	for i in range(start, stop):
		if not '0' <= text[i] <= '9':
			return i
	return None

def parse(text, registry=schemes.registry):
	"""
	# Decompose the resource indicator &text into an &Indicator.

	# [ Parameters ]
	# /text/
		# The indicator string. An empty string produces an empty &Indicator.
	# /registry/
		# The scheme and port pairs used to fill in default ports.

	# [ Exceptions ]
	# /&InvalidPortCharacter/
		# Raised when the port segment is not entirely decimal digits.
	"""

	ri = Indicator()
	if not text:
		return ri

	# Text following a NUL is not part of the indicator.
	end = text.find('\x00')
	if end == -1:
		end = len(text)

	state = State.start
	start = 0 # Beginning of the path.
	hostinfo = stop = at = 0 # Authority boundaries.
	position = 0

	while state is not State.terminal:
		if state is State.start:
			first = text[0]
			if first == '/' or not ('A' <= first <= 'Z' or 'a' <= first <= 'z'):
				state = State.path
			else:
				state = State.scheme

		elif state is State.scheme:
			s = scan(text, 0, end, octets.SCHEME)
			if text[s:s+3] != '://':
				# Colon without slashes; the entire text is a path.
				state = State.path
				start = 0
			else:
				ri.scheme = text[:s]
				log.debug("scheme is %r", ri.scheme)
				hostinfo = s + 3
				state = State.hostinfo

		elif state is State.hostinfo:
			stop = scan(text, hostinfo, end, octets.HOSTINFO)
			start = stop
			at = text.rfind('@', hostinfo, stop)
			if at == -1:
				state = State.host
			else:
				state = State.userinfo

		elif state is State.userinfo:
			# The last '@' delimits the credentials; the first ':' within them the password.
			colon = text.find(':', hostinfo, at)
			if colon == -1:
				ri.user = text[hostinfo:at]
			else:
				ri.user = text[hostinfo:colon]
				ri.password = text[colon+1:at]
			log.debug("user is %r", ri.user)
			hostinfo = at + 1
			state = State.host

		elif state is State.host:
			# IP literals are opaque; the port follows the closing bracket.
			search = hostinfo
			if text[hostinfo:hostinfo+1] == '[':
				search = max(text.find(']', hostinfo, stop), hostinfo)
			colon = text.find(':', search, stop)
			if colon == -1:
				ri.hostname = text[hostinfo:stop]
				ri.port = default_port(ri.scheme, registry=registry)
			else:
				ri.hostname = text[hostinfo:colon]
				if colon + 1 != stop:
					violation = _port_violation(text, colon + 1, stop)
					if violation is not None:
						raise InvalidPortCharacter(text[colon+1:stop], (colon + 1, stop), violation)
					ri.port_text = text[colon+1:stop]
					ri.port = int(ri.port_text)
				else:
					ri.port = default_port(ri.scheme, registry=registry)
			log.debug("hostname is %r, port is %d", ri.hostname, ri.port)
			state = State.path

		elif state is State.path:
			# Path may be empty: `http://host?query`.
			position = scan(text, start, end, octets.PATH)
			ri.path = text[start:position]
			log.debug("path is %r", ri.path)

			if position == end:
				state = State.terminal
			elif text[position] == '?':
				state = State.query
			else:
				state = State.fragment

		elif state is State.query:
			position += 1
			fragment = text.find('#', position, end)
			if fragment == -1:
				ri.query = text[position:end]
			else:
				ri.query = text[position:fragment]
				ri.fragment = text[fragment+1:end]
				ri.fragment_present = True
			ri.query_present = True
			log.debug("query is %r", ri.query)
			state = State.terminal

		elif state is State.fragment:
			ri.fragment = text[position+1:end]
			ri.fragment_present = True
			log.debug("fragment is %r", ri.fragment)
			state = State.terminal

	return ri

def resolve(relative, base):
	"""
	# Construct the absolute form of &relative using &base as the context.

	# Dot segments are not collapsed; paths are merged textually.

	# [ Parameters ]
	# /relative/
		# An &Indicator that may lack a scheme.
	# /base/
		# The &Indicator that &relative is relative to.
	"""

	if relative.scheme:
		# Already absolute.
		if not relative.path:
			return dataclasses.replace(relative, path='/')
		return relative.copy()

	root = base.copy()
	if not root.path:
		root.path = '/'

	if not relative.path:
		if relative.query_present:
			root.query = relative.query
			root.query_present = True
			root.fragment = relative.fragment
			root.fragment_present = relative.fragment_present
		elif relative.fragment_present:
			root.fragment = relative.fragment
			root.fragment_present = True
		return root

	if relative.path[:1] == '/':
		root.path = relative.path
	else:
		# Merge with the base's directory.
		root.path = root.path[:root.path.rfind('/') + 1] + relative.path

	root.query = relative.query
	root.query_present = relative.query_present
	root.fragment = relative.fragment
	root.fragment_present = relative.fragment_present
	return root

class Flags(enum.IntFlag):
	"""
	# Removals applied by &unparse. Members may be combined freely.

	# [ Elements ]
	# /REMOVE_WWW_PREFIX/
		# Omit a leading `www.` or `www` and digit label from the hostname.
	# /REMOVE_TRAILING_BAR/
		# Omit a single trailing slash unless the path is only a slash.
	# /REMOVE_FRAGMENT/
		# Omit the fragment.
	# /REMOVE_DEFAULT_FILENAMES/
		# Omit a final path segment like `index.html`.
	# /REMOVE_SCHEME/
		# Omit the scheme and its `://` delimiter.
	# /REMOVE_QUERY_VALUES/
		# Omit the values of query parameters retaining `key=`.
	# /REMOVE_QUERY/
		# Omit the query.
	# /REMOVE_CREDENTIALS/
		# Omit the user and password.
	"""

	REMOVE_WWW_PREFIX = 1
	REMOVE_TRAILING_BAR = 2
	REMOVE_FRAGMENT = 4
	REMOVE_DEFAULT_FILENAMES = 8
	REMOVE_SCHEME = 16
	REMOVE_QUERY_VALUES = 32
	REMOVE_QUERY = 64
	REMOVE_CREDENTIALS = 128

def remove_default_filename(path, filenames=octets.default_filenames, extensions=octets.default_extensions):
	"""
	# Remove the final segment of &path when it is a default filename and extension pair.
	"""

	for ext in extensions:
		if path.endswith(ext):
			break
	else:
		return path

	stem = path[:-len(ext)]
	for name in filenames:
		if stem.endswith(name):
			prefix = stem[:-len(name)]
			if not prefix or prefix[-1:] == '/':
				return prefix
			break

	return path

def remove_query_values(query):
	"""
	# Truncate each (character)`&` separated parameter after its first (character)`=`.
	"""

	return '&'.join([
		x[:x.find('=')+1] if '=' in x else x
		for x in query.split('&')
	])

def unparse(ri, flags=0, registry=schemes.registry, filenames=octets.default_filenames, extensions=octets.default_extensions):
	"""
	# Reassemble the text of &ri applying the removals selected by &flags.

	# The port is only included when it was written and differs from the
	# scheme's registered default.

	# [ Parameters ]
	# /ri/
		# The &Indicator to serialize.
	# /flags/
		# A combination of &Flags.
	"""

	s = ''
	if not flags & Flags.REMOVE_SCHEME and ri.scheme:
		s += ri.scheme
		s += '://'

	if not flags & Flags.REMOVE_CREDENTIALS and (ri.user or ri.password):
		s += ri.user
		if ri.password:
			s += ':'
			s += ri.password
		s += '@'

	if ri.hostname:
		offset = 0
		if flags & Flags.REMOVE_WWW_PREFIX and len(ri.hostname) > 3:
			offset = host.www_prefix_offset(ri.hostname)
		s += ri.hostname[offset:]

	if ri.port_text and not (ri.scheme and ri.port == default_port(ri.scheme, registry=registry)):
		s += ':'
		s += ri.port_text

	path = ri.path
	if path:
		if flags & Flags.REMOVE_DEFAULT_FILENAMES:
			path = remove_default_filename(path, filenames=filenames, extensions=extensions)
		if flags & Flags.REMOVE_TRAILING_BAR and len(path) > 1 and path[-1] == '/':
			path = path[:-1]
		s += path

	if not flags & Flags.REMOVE_QUERY and ri.query_present:
		s += '?'
		if flags & Flags.REMOVE_QUERY_VALUES:
			s += remove_query_values(ri.query)
		else:
			s += ri.query

	if not flags & Flags.REMOVE_FRAGMENT and ri.fragment_present:
		s += '#'
		s += ri.fragment

	return s

if __name__ == '__main__':
	import sys
	ri = parse(sys.argv[1])
	for field in dataclasses.fields(ri):
		print(field.name + ':', repr(getattr(ri, field.name)))
	print(unparse(ri))
	if len(sys.argv) > 2:
		print(unparse(resolve(ri, parse(sys.argv[2]))))
