"""Generic RFC 3986 URI: parsing, validation, normalization, resolution.

    foo://example.com:8080/over/there?name=ferret#nose
    \\_/   \\______________/\\_________/ \\_________/ \\__/
     |           |            |            |        |
  scheme     authority       path        query   fragment

This code is free software; you can redistribute it and/or modify it under
the terms of the BSD or ZPL 2.1 licenses (see the file COPYING.txt
included with the distribution).

"""

import logging
import re
from urllib.parse import parse_qsl, quote, urlencode

from ._chars import (
    PCT_ENCODED, PATH_CHARS, QUERY_FRAGMENT_CHARS, USER_INFO_CHARS,
    PATH_DECODE_CHARS, QUERY_DECODE_CHARS, FRAGMENT_DECODE_CHARS,
    USER_INFO_DECODE_CHARS, char_class)
from ._codec import (
    decode_selective, encode_path, encode_query_fragment, encode_user_info,
    escape)
from ._errors import FormatError, SerializationError, StringTypeError, \
     type_name
from ._host import validate_host
from ._policy import GENERIC, validate_scheme
from ._rfc3986 import (
    AUTHORITY_MATCH, PATH_MATCH, QUERY_MATCH, last_segment_reference,
    merge_paths, parse_scheme, relative_path, remove_dot_segments,
    split_authority)

debug = logging.getLogger("urikit").debug


def _component_match(chars):
    return re.compile(r"(?:%s|%s)*\Z" % (char_class(chars), PCT_ENCODED)).match

USER_INFO_VALID = _component_match(USER_INFO_CHARS)
PATH_VALID = _component_match(PATH_CHARS)
QUERY_FRAGMENT_VALID = _component_match(QUERY_FRAGMENT_CHARS)


def validate_user_info(user_info):
    return isinstance(user_info, str) and bool(USER_INFO_VALID(user_info))


def validate_path(path):
    return isinstance(path, str) and bool(PATH_VALID(path))


def validate_query_fragment(s):
    return isinstance(s, str) and bool(QUERY_FRAGMENT_VALID(s))


def validate_port(port):
    """Return True for an absent port or a port number from 1 to 65535."""
    if port is None or port == "":
        return True
    if isinstance(port, bool):
        return False
    if isinstance(port, str) and not port.isdigit():
        return False
    try:
        port = int(port)
    except (TypeError, ValueError):
        return False
    return 1 <= port <= 0xffff


def _check_string(value, what):
    if value is not None and not isinstance(value, str):
        raise StringTypeError("%s must be a string, got %s" %
                              (what, type_name(value)))


def normalize_path(path):
    normalized = encode_path(decode_selective(remove_dot_segments(path),
                                              PATH_DECODE_CHARS))
    if normalized != path:
        # decoding may have exposed new "." segments
        normalized = remove_dot_segments(normalized)
    return normalized


def normalize_query(query):
    return encode_query_fragment(decode_selective(query, QUERY_DECODE_CHARS))


def normalize_fragment(fragment):
    return encode_query_fragment(
        decode_selective(fragment, FRAGMENT_DECODE_CHARS))


def normalize_user_info(user_info):
    return encode_user_info(
        decode_selective(user_info, USER_INFO_DECODE_CHARS))


class Uri:
    """A URI or relative reference, held as seven optional components.

    Components are None when absent; an empty string is a present, empty
    component.  Setters validate before assigning and return the Uri, so
    calls can be chained.  normalize, resolve and make_relative change the
    Uri in place and return it too.

    The policy (see urikit._policy) restricts schemes and host kinds and
    supplies default ports.

    Uri(other) copies other through this Uri's setters, so this Uri's policy
    applies.  The port copied is the one stored on other, not get_port():
    other's policy default is not turned into an explicit port.

    """

    validate_scheme = staticmethod(validate_scheme)
    validate_host = staticmethod(validate_host)
    validate_port = staticmethod(validate_port)
    validate_path = staticmethod(validate_path)
    validate_user_info = staticmethod(validate_user_info)
    validate_query_fragment = staticmethod(validate_query_fragment)
    encode_user_info = staticmethod(encode_user_info)
    encode_path = staticmethod(encode_path)
    encode_query_fragment = staticmethod(encode_query_fragment)
    escape = staticmethod(escape)
    parse_scheme = staticmethod(parse_scheme)
    remove_dot_segments = staticmethod(remove_dot_segments)

    def __init__(self, uri=None, policy=GENERIC):
        self.policy = policy
        self._reset()
        if isinstance(uri, str):
            self.parse(uri)
        elif isinstance(uri, Uri):
            # copy through the setters so our own policy applies
            self.set_scheme(uri.get_scheme())
            self.set_user_info(uri.get_user_info())
            self.set_host(uri.get_host())
            self.set_port(uri._port)
            self.set_path(uri.get_path())
            self.set_query(uri.get_query())
            self.set_fragment(uri.get_fragment())
        elif uri is not None:
            raise StringTypeError(
                "Expecting a string or a Uri object, received %s" %
                type_name(uri))

    def _reset(self):
        self._scheme = None
        self._user_info = None
        self._host = None
        self._port = None
        self._path = None
        self._query = None
        self._fragment = None

    def components(self):
        return (self._scheme, self._user_info, self._host, self._port,
                self._path, self._query, self._fragment)

    def _restore(self, components):
        (self._scheme, self._user_info, self._host, self._port,
         self._path, self._query, self._fragment) = components

    # validity

    def is_valid(self):
        if not self.policy.query and self._query is not None:
            return False

        if self._host is not None:
            return not (self._path and self._path[0] != "/")

        # user info and port mean nothing without a host
        if self._user_info is not None or self._port is not None:
            return False

        if self._path:
            return not self._path.startswith("//")

        return bool(self._query or self._fragment)

    def is_valid_relative(self):
        if (self._scheme is not None or self._host is not None or
            self._user_info is not None or self._port is not None):
            return False

        if not self.policy.query and self._query is not None:
            return False

        if self._path:
            return not self._path.startswith("//")

        return bool(self._query or self._fragment)

    def is_absolute(self):
        return self._scheme is not None

    # parsing and serialization

    def parse(self, uri):
        """Replace all components with those parsed from the string uri.

        Raises FormatError if the scheme, host or port is rejected, in which
        case the Uri keeps its previous components.

        """
        if not isinstance(uri, str):
            raise StringTypeError("Expecting a string, got %s" %
                                  type_name(uri))
        previous = self.components()
        self._reset()
        try:
            self._parse(uri)
        except FormatError:
            self._restore(previous)
            raise
        return self

    def _parse(self, uri):
        scheme = parse_scheme(uri)
        if scheme is not None:
            self.set_scheme(scheme)
            uri = uri[len(scheme)+1:]

        match = AUTHORITY_MATCH(uri)
        if match:
            uri = uri[match.end():]
            user_info, host, port = split_authority(match.group(1))
            self.set_user_info(user_info)
            self.set_host(host)
            self.set_port(port)

        if uri:
            match = PATH_MATCH(uri)
            self.set_path(match.group(0))
            uri = uri[match.end():]

        if uri:
            match = QUERY_MATCH(uri)
            if match:
                self.set_query(match.group(1))
                uri = uri[match.end():]

        if uri and uri[0] == "#":
            self.set_fragment(uri[1:])

        if self.policy.root_path and self._host is not None and \
               not self._path:
            self._path = "/"

    def to_string(self):
        """Return the URI as a string.

        Raises SerializationError if the Uri is neither valid nor a valid
        relative reference.

        """
        if not self.is_valid():
            if self.is_absolute() or not self.is_valid_relative():
                debug("refusing to serialize %r" % (self.components(),))
                raise SerializationError(
                    "URI is not valid and cannot be converted into a string")

        r = []
        append = r.append
        if self._scheme is not None:
            append(self._scheme)
            append(":")

        if self._host is not None:
            append("//")
            if self._user_info is not None:
                append(encode_user_info(self._user_info))
                append("@")
            append(self._host)
            if self._port is not None:
                append(":")
                append(str(self._port))

        if self._path:
            append(encode_path(self._path))
        elif self._host is not None and (self._query is not None or
                                         self._fragment is not None):
            append("/")

        if self._query is not None:
            append("?")
            append(encode_query_fragment(self._query))

        if self._fragment is not None:
            append("#")
            append(encode_query_fragment(self._fragment))

        return "".join(r)

    def __str__(self):
        try:
            return self.to_string()
        except SerializationError:
            return ""

    def __repr__(self):
        return "<%s %r (%s)>" % (self.__class__.__name__, str(self),
                                 self.policy.name)

    def __eq__(self, other):
        if not isinstance(other, Uri):
            return NotImplemented
        return self.components() == other.components()

    # transformations

    def normalize(self):
        """Rewrite the components into their canonical form.

        Scheme and host are lowercased, a default port is dropped, dot
        segments are removed from the path, and needless percent escapes
        are decoded (the rest get uppercase hex digits).

        """
        if self._scheme:
            self._scheme = self._scheme.lower()

        if self._host:
            self._host = self._host.lower()

        if (self._port is not None and
            self._port == self.policy.default_port(self._scheme)):
            self._port = None

        if self._user_info:
            self._user_info = normalize_user_info(self._user_info)

        if self._path:
            self._path = normalize_path(self._path)

        if self._query:
            self._query = normalize_query(self._query)

        if self._fragment:
            self._fragment = normalize_fragment(self._fragment)

        if self._host is not None and not self._path:
            self._path = "/"

        return self

    def _base_uri(self, base):
        if isinstance(base, str):
            return Uri(base, policy=self.policy)
        if isinstance(base, Uri):
            return base
        raise StringTypeError(
            "Provided base URI must be a string or a Uri object, got %s" %
            type_name(base))

    def resolve(self, base):
        """Resolve this reference against base (RFC 3986 section 5.2).

        Does nothing if the Uri is already absolute.

        """
        if self.is_absolute():
            return self

        base = self._base_uri(base)
        previous = self.components()
        try:
            self._resolve(base)
        except FormatError:
            self._restore(previous)
            raise
        return self

    def _resolve(self, base):
        if self._host is not None:
            if self._path:
                self.set_path(remove_dot_segments(self._path))
        else:
            base_path = base.get_path()
            rel_path = self._path
            if not rel_path:
                self.set_path(base_path)
                if self._query is None:
                    self.set_query(base.get_query())
            elif rel_path.startswith("/"):
                self.set_path(remove_dot_segments(rel_path))
            else:
                merged = merge_paths(base.get_host() is not None,
                                     base_path, rel_path)
                self.set_path(remove_dot_segments(merged))

            self.set_user_info(base.get_user_info())
            self.set_host(base.get_host())
            self.set_port(base._port)

        self.set_scheme(base.get_scheme())

    @classmethod
    def merge(cls, base, relative, policy=GENERIC):
        """Return a new Uri: relative resolved against base."""
        return cls(relative, policy=policy).resolve(base)

    def make_relative(self, base):
        """Turn this Uri into the shortest reference to it from base.

        Both are normalized first.  If scheme, host, port or user info
        differ (and both sides have one), the Uri is left absolute.  A Uri
        with the base's path and no query becomes its last segment, not an
        empty reference.

        """
        base = self._base_uri(base)
        base = Uri(base, policy=base.policy)

        self.normalize()
        base.normalize()

        for name in "scheme", "host", "port", "user_info":
            mine = getattr(self, "_" + name)
            theirs = getattr(base, "_" + name)
            if mine is not None and theirs is not None and mine != theirs:
                debug("not relative to %s: %s differs" % (base, name))
                return self

        self._scheme = None
        self._user_info = None
        self._host = None
        self._port = None

        path = self._path or ""
        base_path = base.get_path() or ""
        if path == base_path and self._query is None:
            self._path = last_segment_reference(path)
        else:
            self._path = relative_path(path, base_path)
        return self

    # accessors

    def get_scheme(self):
        return self._scheme

    def get_user_info(self):
        return self._user_info

    def get_user(self):
        if self._user_info is None:
            return None
        return self._user_info.split(":", 1)[0]

    def get_password(self):
        if self._user_info is None or ":" not in self._user_info:
            return None
        return self._user_info.split(":", 1)[1]

    def get_host(self):
        return self._host

    def get_port(self):
        """Return the port, or the policy's default port for the scheme."""
        if self._port is None:
            return self.policy.default_port(self._scheme)
        return self._port

    def get_path(self):
        return self._path

    def get_query(self):
        return self._query

    def get_query_as_dict(self):
        """Return the query form-decoded into a dict (last value wins)."""
        if not self._query:
            return {}
        return dict(parse_qsl(self._query, keep_blank_values=True))

    def get_fragment(self):
        return self._fragment

    # mutators

    def set_scheme(self, scheme):
        _check_string(scheme, "scheme")
        if scheme is not None and not self.policy.accepts_scheme(scheme):
            debug("rejecting scheme %r" % (scheme,))
            raise FormatError(
                'Scheme "%s" is not valid or is not accepted by the %s policy'
                % (scheme, self.policy.name))
        self._scheme = scheme
        return self

    def set_user_info(self, user_info):
        if not self.policy.user_info:
            return self
        _check_string(user_info, "user info")
        self._user_info = user_info
        return self

    def set_user(self, user):
        return self._set_credentials(user, self.get_password())

    def set_password(self, password):
        return self._set_credentials(self.get_user(), password)

    def _set_credentials(self, user, password):
        _check_string(user, "user")
        _check_string(password, "password")
        if password is not None:
            user_info = "%s:%s" % (user or "", password)
        else:
            user_info = user
        return self.set_user_info(user_info)

    def set_host(self, host):
        _check_string(host, "host")
        if host and not self.policy.validate_host(host):
            debug("rejecting host %r" % (host,))
            raise FormatError(
                'Host "%s" is not valid or is not accepted by the %s policy'
                % (host, self.policy.name))
        self._host = host
        return self

    def set_port(self, port):
        if port == "":
            port = None
        if not validate_port(port):
            debug("rejecting port %r" % (port,))
            raise FormatError('Port "%s" is not valid' % (port,))
        if port is not None:
            port = int(port)
        self._port = port
        return self

    def set_path(self, path):
        _check_string(path, "path")
        self._path = path
        return self

    def set_query(self, query):
        """Set the query from a string, or form-encode a mapping or a
        sequence of (key, value) pairs."""
        if query is not None and not isinstance(query, str):
            try:
                query = urlencode(query, doseq=True, quote_via=quote)
            except TypeError:
                raise StringTypeError(
                    "Expecting a string, mapping or pairs for the query, "
                    "got %s" % type_name(query))
        self._query = query
        return self

    def set_fragment(self, fragment):
        if not self.policy.fragment:
            return self
        _check_string(fragment, "fragment")
        self._fragment = fragment
        return self


def urljoin(base_uri, uri_reference):
    """Resolve uri_reference against base_uri, returning a string.

    >>> urljoin("http://a/b/c/d;p?q", "../g")
    'http://a/b/g'

    """
    return Uri.merge(base_uri, uri_reference).to_string()
