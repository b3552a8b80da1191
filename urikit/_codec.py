"""Percent-encoding and selective decoding of URI components.

This code is free software; you can redistribute it and/or modify it under
the terms of the BSD or ZPL 2.1 licenses (see the file COPYING.txt
included with the distribution).

"""

import functools
import re

from ._chars import (
    PCT_ENCODED, USER_INFO_CHARS, PATH_CHARS, QUERY_FRAGMENT_CHARS,
    char_class)
from ._errors import StringTypeError, type_name

PCT_MATCH = re.compile(PCT_ENCODED)

_pct_encode = "%%%02X".__mod__


def _require_string(x):
    if not isinstance(x, str):
        raise StringTypeError("Expecting a string, got %s" % type_name(x))


def escape(s):
    """Percent-encode every UTF-8 byte of s, using uppercase hex digits."""
    _require_string(s)
    return "".join(map(_pct_encode, s.encode("utf-8")))


@functools.lru_cache(maxsize=32)
def _encoder(allowed):
    # group 1 is a well-formed escape, anything else needs escaping
    return re.compile("(%s)|%s+|%%" % (
        PCT_ENCODED, char_class(allowed + "%", negate=True)))


def _escape_match(match):
    if match.group(1):
        return match.group(1)
    return escape(match.group(0))


def encode(s, allowed):
    """Escape everything in s that is not in allowed.

    Well-formed %XX escapes are left alone, so encoding already-encoded text
    is a no-op.  A "%" that does not start a valid escape is escaped itself.

    >>> encode("100% a%41", "0123456789a")
    '100%25%20a%41'

    """
    _require_string(s)
    return _encoder(allowed).sub(_escape_match, s)


def decode_selective(s, allowed):
    """Decode %XX escapes of characters in allowed; uppercase the rest.

    >>> decode_selective("%7e%2f%2F", "~")
    '~%2F%2F'

    """
    _require_string(s)
    def replace(match):
        escaped = match.group(0)
        c = chr(int(escaped[1:], 16))
        if c in allowed:
            return c
        return escaped.upper()
    return PCT_MATCH.sub(replace, s)


def unescape(s):
    """Decode every well-formed %XX escape in s as UTF-8."""
    _require_string(s)
    if "%" not in s:
        return s
    parts = PCT_MATCH.split(s)
    escapes = PCT_MATCH.findall(s)
    r = []
    append = r.append
    octets = bytearray()
    for text, escaped in zip(parts, escapes + [None]):
        if text:
            if octets:
                append(octets.decode("utf-8", "replace"))
                octets = bytearray()
            append(text)
        if escaped is not None:
            octets.append(int(escaped[1:], 16))
    if octets:
        append(octets.decode("utf-8", "replace"))
    return "".join(r)


def encode_user_info(user_info):
    return encode(user_info, USER_INFO_CHARS)


def encode_path(path):
    return encode(path, PATH_CHARS)


def encode_query_fragment(s):
    return encode(s, QUERY_FRAGMENT_CHARS)
