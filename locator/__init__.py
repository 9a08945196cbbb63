"""
# locator is a Python project for decomposing, resolving, and reassembling
# Uniform Resource Identifiers. It works strictly on text that the caller
# already holds; no name resolution or network access is performed.

# [ Resource Indicators ]
# -----------------------

# &.ri.parse splits a string into an &.ri.Indicator, &.ri.unparse reassembles
# one using a set of removal &.ri.Flags, and &.ri.resolve merges a relative
# indicator with a base.

# [ Hosts ]
# ---------

# &.host.canonical_hostname reduces a hostname to its registrable domain with
# a configurable number of preceding labels.

# [ Percent Escapes ]
# -------------------

# &.pct.encode and &.pct.decode translate percent escapes. They are not
# applied by the parser; fields retain the text as written.
"""
