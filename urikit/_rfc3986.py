"""RFC 3986 URI splitting, dot-segment removal, merging and relativization.

These are the string-level algorithms; urikit._uri.Uri applies them to URI
components.

This code is free software; you can redistribute it and/or modify it under
the terms of the BSD or ZPL 2.1 licenses (see the file COPYING.txt
included with the distribution).

"""

import re

from ._errors import StringTypeError, type_name

SCHEME_MATCH = re.compile(r"([A-Za-z][A-Za-z0-9+.\-]*):").match
SCHEME_TOKEN_MATCH = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*\Z").match
AUTHORITY_MATCH = re.compile(r"//([^/?#]*)").match
PATH_MATCH = re.compile(r"[^?#]*").match
QUERY_MATCH = re.compile(r"\?([^#]*)").match
PORT_SEARCH = re.compile(r":([0-9]{0,5})\Z").search
SEGMENT_SPLIT = re.compile(r"(/)").split


def parse_scheme(uri_string):
    """Return the scheme at the start of uri_string, or None.

    >>> parse_scheme("http://example.com/"), parse_scheme("/path:x")
    ('http', None)

    """
    if not isinstance(uri_string, str):
        raise StringTypeError("Expecting a string, got %s" %
                              type_name(uri_string))
    match = SCHEME_MATCH(uri_string)
    if match:
        return match.group(1)
    return None


def split_authority(authority):
    """Return user_info, host, port from an authority.

    User info is everything before the last "@" (so it may itself contain
    "@").  A trailing ":" with up to five digits is the port; the port is an
    int, or None when absent or empty.

    >>> split_authority("u@v@example.com:8080")
    ('u@v', 'example.com', 8080)

    """
    user_info = None
    if "@" in authority:
        user_info, authority = authority.rsplit("@", 1)

    port = None
    match = PORT_SEARCH(authority)
    if match:
        if match.group(1):
            port = int(match.group(1))
        authority = authority[:match.start()]

    return user_info, authority, port


def remove_dot_segments(path):
    """Remove "." and ".." segments from path (RFC 3986 section 5.2.4).

    >>> remove_dot_segments("/a/b/c/./../../g")
    '/a/g'
    >>> remove_dot_segments("mid/content=5/../6")
    'mid/6'

    """
    r = []
    while path:
        if path == "." or path == "..":
            break
        if path == "/.":
            path = "/"
            continue
        if path == "/..":
            path = "/"
            if r:
                r.pop()
            continue
        if path.startswith("/../"):
            path = path[3:]
            if r:
                r.pop()
            continue
        if path.startswith("/./"):
            path = path[2:]
            continue
        if path.startswith("./"):
            path = path[2:]
            continue
        if path.startswith("../"):
            path = path[3:]
            continue
        # move the first segment, with its leading "/" if any, to the output
        ii = path.find("/", 1)
        if ii < 0:
            r.append(path)
            break
        r.append(path[:ii])
        path = path[ii:]
    return "".join(r)


def merge_paths(base_has_authority, base_path, ref_path):
    """Merge a relative-path reference with a base path (section 5.2.3)."""
    if base_path is None:
        base_path = ""
    if base_has_authority and base_path == "":
        return "/" + ref_path
    ii = base_path.rfind("/")
    return base_path[:ii+1] + ref_path


def split_segments(path):
    """Split path into segments, keeping each "/" as a token of its own.

    >>> split_segments("/a/b")
    ['/', 'a', '/', 'b']

    """
    return [x for x in SEGMENT_SPLIT(path or "") if x]


def relative_path(path, base_path):
    """Return the shortest relative path that resolves against base_path to
    path.

    >>> relative_path("/a/g", "/a/b/c/d")
    '../../g'
    >>> relative_path("/a/b/", "/a/b/c")
    './'

    """
    if path == base_path:
        return ""
    parts = split_segments(path)
    base_parts = split_segments(base_path)

    common = 0
    for part, base_part in zip(parts, base_parts):
        if part != base_part:
            break
        common += 1
    # only whole directories are shared: back up to the last shared "/"
    while common and parts[common-1] != "/":
        common -= 1

    climbs = base_parts[common:].count("/")
    rest = "".join(parts[common:])
    if climbs:
        return "../" * climbs + rest
    if common and rest.startswith("/"):
        # leading empty segment: keep it below the base directory
        return "./" + rest
    return _segment_reference(rest)


def last_segment_reference(path):
    """Return a relative path naming the last segment of path.

    Used instead of an empty reference, which would inherit the base's
    query.

    >>> last_segment_reference("/b/c/d;p"), last_segment_reference("/b/")
    ('d;p', './')

    """
    return _segment_reference((path or "").rsplit("/", 1)[-1])


def _segment_reference(rest):
    if rest == "" or ":" in rest.split("/", 1)[0]:
        return "./" + rest
    return rest
