"""
# Hostname canonicalization.

# Reduces hostnames to their registrable domain using the ICANN section of the
# Public Suffix List distributed with &publicsuffixlist.
"""
import functools
import ipaddress

from publicsuffixlist import PublicSuffixList

@functools.lru_cache(1)
def suffixes():
	"""
	# The process' &PublicSuffixList instance; loaded on first use.
	"""
	return PublicSuffixList(only_icann=True)

def address(hostname):
	"""
	# Whether &hostname is an IPv4 address rather than a domain name.
	"""
	try:
		ipaddress.IPv4Address(hostname)
	except ValueError:
		return False
	return True

def tld_suffix_length(hostname, suffixes=suffixes):
	"""
	# The length of the public suffix ending &hostname, excluding the dot separating it
	# from the preceding label. Zero when no suffix is recognized or when &hostname
	# is an IPv4 address.

	# The root label's dot of a fully qualified name is counted as part of the suffix.
	"""

	root = hostname[-1:] == '.'
	if root:
		hostname = hostname[:-1]

	if not hostname or address(hostname):
		return 0

	suffix = suffixes().publicsuffix(hostname.lower(), accept_unknown=False)
	if suffix is None:
		return 0
	return len(suffix) + root

def www_prefix_offset(hostname, len=len):
	"""
	# Identify the length of a leading `www.` or `www` and single digit label.
	"""

	if hostname[:3].lower() == 'www':
		if len(hostname) > 3 and hostname[3] == '.':
			return 4
		if len(hostname) > 4 and '0' <= hostname[3] <= '9' and hostname[4] == '.':
			return 5
	return 0

def canonical_hostname(ri, max_depth, suffix_length=tld_suffix_length):
	"""
	# Construct the canonical form of the hostname of &ri.

	# Starting at the public suffix, labels are included until &max_depth dots
	# have been crossed or a `www` prefix is reached. A &max_depth of two
	# produces the registrable domain: `www2.foo.example.com` becomes `example.com`.
	# IPv4 addresses are returned unchanged.

	# [ Parameters ]
	# /ri/
		# The &.ri.Indicator whose hostname is canonicalized.
	# /max_depth/
		# The number of dot separators to cross.
	# /suffix_length/
		# Callable identifying the length of the public suffix of a hostname.
	"""

	hostname = ri.hostname
	if not hostname:
		return ''
	if address(hostname):
		# Addresses have no registrable domain.
		return hostname

	start = www_prefix_offset(hostname)
	position = len(hostname) - suffix_length(hostname)
	depth = 0

	while depth < max_depth and position > start:
		position -= 1
		if hostname[position] == '.':
			depth += 1

	if hostname[position:position+1] == '.':
		position += 1
	return hostname[position:]
