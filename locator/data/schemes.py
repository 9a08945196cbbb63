"""
# Registered default ports for well known schemes.

# The sequence is searched linearly; entries are ordered by expected frequency.
"""

HTTP = 80
FTP = 21
HTTPS = 443
GOPHER = 70
LDAP = 389
NNTP = 119
SNEWS = 563
IMAP = 143
POP = 110
SIP = 5060
RTSP = 554
WAIS = 210
PROSPERO = 191
NFS = 2049
TIP = 3372
ACAP = 674
TELNET = 23
SSH = 22

registry = (
	('http', HTTP),
	('ftp', FTP),
	('https', HTTPS),
	('gopher', GOPHER),
	('ldap', LDAP),
	('nntp', NNTP),
	('snews', SNEWS),
	('imap', IMAP),
	('pop', POP),
	('sip', SIP),
	('rtsp', RTSP),
	('wais', WAIS),
	('z39.50r', WAIS),
	('z39.50s', WAIS),
	('prospero', PROSPERO),
	('nfs', NFS),
	('tip', TIP),
	('acap', ACAP),
	('telnet', TELNET),
	('ssh', SSH),
)
