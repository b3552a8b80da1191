__all__ = [
    'FILE',
    'FormatError',
    'GENERIC',
    'HOST_ALL',
    'HOST_DNS',
    'HOST_DNS_OR_IPV4',
    'HOST_DNS_OR_IPV4_OR_IPV6',
    'HOST_DNS_OR_IPV4_OR_IPV6_OR_REGNAME',
    'HOST_DNS_OR_IPV6',
    'HOST_DNS_OR_IPVANY',
    'HOST_IPV4',
    'HOST_IPV6',
    'HOST_IPVANY',
    'HOST_IPVFUTURE',
    'HOST_REGNAME',
    'HTTP',
    'SchemePolicy',
    'SerializationError',
    'StringTypeError',
    'Uri',
    'UriError',
    '__version__',
    'decode_selective',
    'encode',
    'encode_path',
    'encode_query_fragment',
    'encode_user_info',
    'escape',
    'file_uri',
    'from_unix_path',
    'from_windows_path',
    'http_uri',
    'parse_scheme',
    'parse_uri',
    'policy_for',
    'register_policy',
    'remove_dot_segments',
    'unescape',
    'urljoin',
    'validate_host',
    'validate_path',
    'validate_port',
    'validate_query_fragment',
    'validate_scheme',
    'validate_user_info',
]

import logging

from ._version import __version__

# errors
from ._errors import UriError, FormatError, StringTypeError, \
     SerializationError

# percent-encoding
from ._codec import escape, encode, decode_selective, unescape, \
     encode_user_info, encode_path, encode_query_fragment

# hosts
from ._host import (
    HOST_IPV4,
    HOST_IPV6,
    HOST_IPVFUTURE,
    HOST_IPVANY,
    HOST_DNS,
    HOST_DNS_OR_IPV4,
    HOST_DNS_OR_IPV6,
    HOST_DNS_OR_IPV4_OR_IPV6,
    HOST_DNS_OR_IPVANY,
    HOST_REGNAME,
    HOST_DNS_OR_IPV4_OR_IPV6_OR_REGNAME,
    HOST_ALL,
    validate_host,
)

# the URI itself
from ._rfc3986 import parse_scheme, remove_dot_segments
from ._uri import Uri, urljoin, validate_port, validate_path, \
     validate_user_info, validate_query_fragment

# scheme policies
from ._policy import SchemePolicy, GENERIC, HTTP, FILE, validate_scheme, \
     register_policy, policy_for
from ._schemes import http_uri, file_uri, parse_uri, from_unix_path, \
     from_windows_path

logger = logging.getLogger("urikit")
if logger.level is logging.NOTSET:
    logger.setLevel(logging.CRITICAL)
del logger
