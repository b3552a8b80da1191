"""Host grammars: IPv4, IPv6, IPvFuture, DNS names and registered names.

Which grammars apply is selected with a bitmask of HOST_* flags.

This code is free software; you can redistribute it and/or modify it under
the terms of the BSD or ZPL 2.1 licenses (see the file COPYING.txt
included with the distribution).

"""

import ipaddress
import re

from ._chars import PCT_ENCODED, REG_NAME_CHARS, UNRESERVED, SUB_DELIMS, \
     char_class

HOST_IPV4 = 0x01
HOST_IPV6 = 0x02
HOST_IPVFUTURE = 0x04
HOST_IPVANY = 0x07
HOST_DNS = 0x08
HOST_DNS_OR_IPV4 = 0x09
HOST_DNS_OR_IPV6 = 0x0A
HOST_DNS_OR_IPV4_OR_IPV6 = 0x0B
HOST_DNS_OR_IPVANY = 0x0F
HOST_REGNAME = 0x10
HOST_DNS_OR_IPV4_OR_IPV6_OR_REGNAME = 0x1B
HOST_ALL = 0x1F

# alternate IPv4 notations, rewritten to dotted decimal before checking
IPV4_BINARY_MATCH = re.compile(r"(?:[01]{8}\.){3}[01]{8}\Z").match
IPV4_OCTET_MATCH = re.compile(r"(?:[0-9]{3}\.){3}[0-9]{3}\Z").match
IPV4_HEX_MATCH = re.compile(r"(?:[0-9a-f]{2}\.){3}[0-9a-f]{2}\Z", re.I).match

IPV6_FULL_MATCH = re.compile(
    r"(?:[0-9a-f]{1,4}:){7}[0-9a-f]{1,4}\Z", re.I).match
IPV6_COMPRESSED_MATCH = re.compile(
    r"(?::|(?:[0-9a-f]{1,4}:)+):(?:(?:[0-9a-f]{1,4}:)*[0-9a-f]{1,4})?\Z",
    re.I).match
# eight colons only fit when "::" stands for a single group at either end
IPV6_EDGE_MATCH = re.compile(
    r"(?:::)?(?:[0-9a-f]{1,4}:){6}[0-9a-f]{1,4}(?:::)?\Z", re.I).match

IPVFUTURE_MATCH = re.compile(
    r"v[0-9a-f]+\.%s+\Z" % char_class(UNRESERVED + SUB_DELIMS + ":"),
    re.I).match

REG_NAME_MATCH = re.compile(
    r"(?:%s|%s)+\Z" % (char_class(REG_NAME_CHARS), PCT_ENCODED)).match

DNS_LABEL_MATCH = re.compile(
    r"[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?\Z", re.I).match
NUMERIC_SHAPE_MATCH = re.compile(r"[0-9.]*\Z").match
HEX_SHAPE_MATCH = re.compile(r"[0-9a-f:.]*\Z", re.I).match


def _split_notation(value, width, base):
    return ".".join(str(int(value[i:i+width], base))
                    for i in range(0, len(value), width + 1))


def is_valid_ipv4(value):
    """Return True if value is an IPv4 address.

    Besides dotted decimal, dotted 8-bit binary, zero-padded 3-digit and
    2-digit hex octets are accepted.

    >>> is_valid_ipv4("192.168.0.1"), is_valid_ipv4("c0.a8.00.01")
    (True, True)
    >>> is_valid_ipv4("192.168.0.01")
    False

    """
    if IPV4_BINARY_MATCH(value):
        value = _split_notation(value, 8, 2)
    elif IPV4_OCTET_MATCH(value):
        value = _split_notation(value, 3, 10)
    elif IPV4_HEX_MATCH(value):
        value = _split_notation(value, 2, 16)

    try:
        packed = int(ipaddress.IPv4Address(value))
    except ValueError:
        return False
    return str(ipaddress.IPv4Address(packed)) == value


def is_valid_ipv6(value):
    """Return True if value is an IPv6 address (without brackets)."""
    if len(value) < 3:
        return value == "::"

    if "." in value:
        # embedded IPv4 address in the low 32 bits
        head, sep, tail = value.rpartition(":")
        if not head or not is_valid_ipv4(tail):
            return False
        value = head + ":0:0"

    if "::" not in value:
        return bool(IPV6_FULL_MATCH(value))

    colons = value.count(":")
    if colons < 8:
        return bool(IPV6_COMPRESSED_MATCH(value))
    if colons == 8:
        return bool(IPV6_EDGE_MATCH(value))
    return False


def is_valid_ipvfuture(value):
    return bool(IPVFUTURE_MATCH(value))


def _bracketed(host):
    if len(host) > 2 and host[0] == "[" and host[-1] == "]":
        return host[1:-1]
    return None


def is_valid_ip_address(host, allowed=HOST_IPVANY):
    """Return True if host is an IP literal of a kind selected by allowed.

    IPv6 and IPvFuture literals must be wrapped in brackets, as they are in
    the authority component.

    """
    if allowed & HOST_IPV4 and is_valid_ipv4(host):
        return True
    if allowed & (HOST_IPV6 | HOST_IPVFUTURE):
        inner = _bracketed(host)
        if inner is None:
            return False
        if allowed & HOST_IPV6 and is_valid_ipv6(inner):
            return True
        if allowed & HOST_IPVFUTURE and is_valid_ipvfuture(inner):
            return True
    return False


def is_valid_reg_name(host):
    return bool(REG_NAME_MATCH(host))


def is_valid_dns_hostname(host):
    """Return True if host is a DNS host name.

    Anything shaped like an IP literal (digits and dots, or hex digits and
    colons) has to be a valid IP address: "999.1.1.1" is rejected rather
    than read as a name.  Everything else must be dot-separated RFC 1123
    labels.

    """
    if not isinstance(host, str) or not host:
        return False
    if ((NUMERIC_SHAPE_MATCH(host) and "." in host) or
        (HEX_SHAPE_MATCH(host) and ":" in host)):
        return is_valid_ip_address(host)

    name = host[:-1] if host.endswith(".") else host
    if not name or len(name) > 253:
        return False
    for label in name.split("."):
        if not DNS_LABEL_MATCH(label):
            return False
    return True


def validate_host(host, allowed=HOST_ALL):
    """Return True if host matches one of the grammars selected by allowed.

    >>> validate_host("192.168.0.1", HOST_IPV4)
    True
    >>> validate_host("[::1]", HOST_IPV6)
    True
    >>> validate_host("not a host", HOST_REGNAME)
    False

    """
    if not isinstance(host, str):
        return False

    if allowed & HOST_IPVANY:
        if is_valid_ip_address(host, allowed):
            return True

    if allowed & HOST_REGNAME:
        if is_valid_reg_name(host):
            return True

    if allowed & HOST_DNS:
        if is_valid_dns_hostname(host):
            return True

    return False
