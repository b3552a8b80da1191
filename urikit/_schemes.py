"""HTTP and file URIs, and file URIs built from native filesystem paths.

This code is free software; you can redistribute it and/or modify it under
the terms of the BSD or ZPL 2.1 licenses (see the file COPYING.txt
included with the distribution).

"""

import re

from ._errors import StringTypeError, type_name
from ._policy import FILE, HTTP, policy_for
from ._rfc3986 import parse_scheme
from ._uri import Uri

WINDOWS_DRIVE_MATCH = re.compile(r"[A-Za-z]:(?:/|\Z)").match


def http_uri(uri=None):
    """Return a Uri restricted to the http and https schemes."""
    return Uri(uri, policy=HTTP)


def file_uri(uri=None):
    """Return a Uri restricted to the file scheme."""
    return Uri(uri, policy=FILE)


def parse_uri(uri):
    """Parse uri with the policy registered for its scheme."""
    return Uri(uri, policy=policy_for(parse_scheme(uri)))


def _require_path(path):
    if not isinstance(path, str):
        raise StringTypeError("Expecting a path string, got %s" %
                              type_name(path))


def from_unix_path(path):
    """Return a file URI for a POSIX path.

    >>> from_unix_path("/etc/passwd").to_string()
    'file:///etc/passwd'

    """
    _require_path(path)
    uri = file_uri("file:")
    if path.startswith("/"):
        uri.set_host("")
    return uri.set_path(path)


def from_windows_path(path):
    r"""Return a file URI for a Windows path.

    Backslashes separate segments; a literal "/" is escaped.  Drive-letter
    paths get an empty host, UNC paths (\\server\share) use the server as
    the host.

    >>> from_windows_path("C:\\Users").to_string()
    'file:///C:/Users'

    """
    _require_path(path)
    uri = file_uri("file:")
    path = path.replace("/", "%2F").replace("\\", "/")

    if path.startswith("//"):
        host, sep, rest = path[2:].partition("/")
        uri.set_host(host)
        path = sep + rest
    elif WINDOWS_DRIVE_MATCH(path):
        uri.set_host("")
        path = "/" + path
    elif path.startswith("/"):
        uri.set_host("")

    return uri.set_path(path)
