"""
# Percent escape encoding and decoding.

# Both functions accept &str or &bytes and return an instance of the type given.
# Strings are processed as their UTF-8 encoding. Surrogates in the range used by the
# `surrogateescape` error handler stand for the undecodable byte they carry, and other
# lone surrogates are encoded as-is, so strings survive an &encode then &decode
# sequence unchanged.

# Malformed escapes are preserved by &decode. RFC 1630 reserves sequences
# beginning with a percent sign that are not followed by two hexadecimal digits,
# so they are left as written rather than rejected.
"""
import codecs

from .data import octets

pct_encode = '%%%0.2X'.__mod__

# Every spelling of an escape's two digits mapped to the byte it designates.
percent_escapes = {}
x = k = None
for x in range(256):
	k = '%0.2X'.__mod__(x)
	percent_escapes[k.encode('ascii')] = x
	percent_escapes[k.lower().encode('ascii')] = x
	percent_escapes[(k[0].lower() + k[1]).encode('ascii')] = x
	percent_escapes[(k[0] + k[1].lower()).encode('ascii')] = x
del x, k

escapes = tuple(
	chr(x) if octets.safe[x] else pct_encode(x)
	for x in range(256)
)

def _surrogates(exc, escape=codecs.lookup_error('surrogateescape'), passthrough=codecs.lookup_error('surrogatepass')):
	# Escaped bytes (U+DC80-U+DCFF) map back to the byte; other lone surrogates
	# pass through as their three byte UTF-8 form.
	if isinstance(exc, UnicodeEncodeError):
		data = bytearray()
		for c in exc.object[exc.start:exc.end]:
			if '\udc80' <= c <= '\udcff':
				data.append(ord(c) - 0xDC00)
			else:
				data += c.encode('utf-8', 'surrogatepass')
		return (bytes(data), exc.end)

	try:
		return passthrough(exc)
	except UnicodeDecodeError:
		return escape(exc)

codecs.register_error('locator.pct.surrogates', _surrogates)

def _octets(string):
	return string.encode('utf-8', 'locator.pct.surrogates')

def _text(data):
	return data.decode('utf-8', 'locator.pct.surrogates')

def decode(string, len=len, isinstance=isinstance):
	"""
	# Substitute percent escapes with the bytes that they designate.
	"""

	if isinstance(string, str):
		return _text(decode(_octets(string)))

	nstr = bytearray()
	pos = 0
	end = len(string)
	while pos != end:
		newpos = string.find(b'%', pos)
		if newpos == -1:
			nstr += string[pos:]
			break
		else:
			nstr += string[pos:newpos]

		val = percent_escapes.get(bytes(string[newpos+1:newpos+3]))
		if val is not None:
			nstr.append(val)
			pos = newpos + 3
		else:
			nstr.append(0x25)
			pos = newpos + 1

	return bytes(nstr)

def encode(string, escapes=escapes, isinstance=isinstance):
	"""
	# Replace bytes absent from &octets.safe with percent escapes.

	# Escapes always carry two upper case hexadecimal digits.
	"""

	if isinstance(string, str):
		return ''.join(map(escapes.__getitem__, _octets(string)))

	return ''.join(map(escapes.__getitem__, string)).encode('ascii')
