"""
# Byte classification tables used while scanning and escaping indicators.
"""

#: Delimiter bits.
T_COLON = 0x01
T_SLASH = 0x02
T_QUESTION = 0x04
T_HASH = 0x08
T_NUL = 0x80

def _delimiters(bits={':': T_COLON, '/': T_SLASH, '?': T_QUESTION, '#': T_HASH, '\x00': T_NUL}):
	table = [0] * 256
	for k, v in bits.items():
		table[ord(k)] = v
	return tuple(table)

delimiters = _delimiters()

# Scan masks; a byte stops the scan when its entry shares a bit with the mask.
SCHEME = 0xFF
HOSTINFO = T_SLASH | T_QUESTION | T_HASH | T_NUL
PATH = T_QUESTION | T_HASH | T_NUL

#: Characters passed through by the percent encoder.
safe_characters = (
	"ABCDEFGHIJKLMNOPQRSTUVWXYZ"
	"abcdefghijklmnopqrstuvwxyz"
	"0123456789"
	"!$&()*+,-./:;=?@[]_~"
)
safe = tuple(chr(x) in safe_characters for x in range(256))

#: Final path segments recognized by unparse's default filename removal.
default_filenames = ('index', 'default')
default_extensions = ('.html', '.htm', '.php', '.shtml', '.asp', '.cgi')
