"""Scheme policies: per-scheme rules layered on the generic URI.

A policy says which schemes and host kinds a Uri accepts, which ports are
the defaults, and which components the scheme does without.  The HTTP and
file rules are policies rather than Uri subclasses, so any number of them
can be registered side by side.

This code is free software; you can redistribute it and/or modify it under
the terms of the BSD or ZPL 2.1 licenses (see the file COPYING.txt
included with the distribution).

"""

from ._host import HOST_ALL, HOST_DNS_OR_IPV4_OR_IPV6_OR_REGNAME, \
     validate_host
from ._rfc3986 import SCHEME_TOKEN_MATCH


def validate_scheme(scheme, valid_schemes=()):
    """Return True if scheme is a scheme token accepted by valid_schemes.

    An empty valid_schemes accepts any well-formed scheme.  The whitelist
    comparison ignores case.

    """
    if not isinstance(scheme, str):
        return False
    if valid_schemes and scheme.lower() not in valid_schemes:
        return False
    return bool(SCHEME_TOKEN_MATCH(scheme))


class SchemePolicy:
    """Rules for one family of URI schemes.

    name: label used in error messages
    valid_schemes: lowercase schemes accepted; empty accepts any scheme
    default_ports: mapping of scheme to its default port
    valid_host_kinds: HOST_* bitmask passed to validate_host
    user_info, fragment: when False, setting that component does nothing
    query: when False, a URI carrying a query is not valid
    root_path: when True, parsing a URI with an authority and an empty path
      gives the path "/"

    """

    def __init__(self, name, valid_schemes=(), default_ports=None,
                 valid_host_kinds=HOST_ALL, user_info=True, fragment=True,
                 query=True, root_path=False):
        self.name = name
        self.valid_schemes = tuple(s.lower() for s in valid_schemes)
        self.default_ports = dict(default_ports or {})
        self.valid_host_kinds = valid_host_kinds
        self.user_info = user_info
        self.fragment = fragment
        self.query = query
        self.root_path = root_path

    def accepts_scheme(self, scheme):
        return validate_scheme(scheme, self.valid_schemes)

    def validate_host(self, host):
        return validate_host(host, self.valid_host_kinds)

    def default_port(self, scheme):
        if scheme is None:
            return None
        return self.default_ports.get(scheme.lower())

    def __repr__(self):
        return "<SchemePolicy %s>" % self.name


GENERIC = SchemePolicy("generic")

HTTP = SchemePolicy(
    "http",
    valid_schemes=("http", "https"),
    default_ports={"http": 80, "https": 443},
    valid_host_kinds=HOST_DNS_OR_IPV4_OR_IPV6_OR_REGNAME,
    root_path=True,
    )

FILE = SchemePolicy(
    "file",
    valid_schemes=("file",),
    user_info=False,
    fragment=False,
    query=False,
    )


_registry = {}


def register_policy(policy, schemes=None):
    """Use policy for URIs with the given schemes (default: its whitelist)."""
    if schemes is None:
        schemes = policy.valid_schemes
    for scheme in schemes:
        _registry[scheme.lower()] = policy


def policy_for(scheme):
    """Return the registered policy for scheme, or GENERIC."""
    if scheme is None:
        return GENERIC
    return _registry.get(scheme.lower(), GENERIC)


register_policy(HTTP)
register_policy(FILE)
