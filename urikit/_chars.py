"""RFC 3986 character classes.

This code is free software; you can redistribute it and/or modify it under
the terms of the BSD or ZPL 2.1 licenses (see the file COPYING.txt
included with the distribution).

"""

import re
import string

ALPHA = string.ascii_letters
DIGIT = string.digits
HEXDIG = string.hexdigits

UNRESERVED = ALPHA + DIGIT + "-._~"
GEN_DELIMS = ":/?#[]@"
SUB_DELIMS = "!$&'()*+,;="
RESERVED = GEN_DELIMS + SUB_DELIMS

# subset of the sub-delims that can be decoded in a query without changing
# how form-style parsers split it
QUERY_DELIMS = "!$'()*,"

SCHEME_CHARS = ALPHA + DIGIT + "+-."

# per-component sets of characters that may appear unescaped
PCHAR = UNRESERVED + SUB_DELIMS + ":@"
USER_INFO_CHARS = UNRESERVED + SUB_DELIMS + ":"
REG_NAME_CHARS = UNRESERVED + SUB_DELIMS
PATH_CHARS = PCHAR + "/"
QUERY_FRAGMENT_CHARS = PCHAR + "/?"

# characters a %XX escape may be decoded to during normalization
USER_INFO_DECODE_CHARS = UNRESERVED + SUB_DELIMS + ":"
PATH_DECODE_CHARS = UNRESERVED + ":@&=+$,;"
QUERY_DECODE_CHARS = UNRESERVED + QUERY_DELIMS + ":@/?"
FRAGMENT_DECODE_CHARS = UNRESERVED + SUB_DELIMS + ":@/?"

PCT_ENCODED = "%[0-9A-Fa-f]{2}"


def char_class(chars, negate=False):
    """Return a regular expression character class matching chars."""
    body = "".join(re.escape(c) for c in chars)
    if negate:
        return "[^%s]" % body
    return "[%s]" % body
