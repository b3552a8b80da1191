"""Tests for urikit._host."""

from unittest import TestCase

from urikit import (
    validate_host, HOST_ALL, HOST_IPV4, HOST_IPV6, HOST_IPVFUTURE,
    HOST_IPVANY, HOST_DNS, HOST_REGNAME, HOST_DNS_OR_IPV4_OR_IPV6)
from urikit._host import is_valid_ipv4, is_valid_ipv6, \
     is_valid_dns_hostname, is_valid_reg_name


class IPv4Tests(TestCase):

    def test_valid(self):
        for value in [
            "192.168.0.1",
            "0.0.0.0",
            "255.255.255.255",
            # dotted binary
            "11000000.10101000.00000000.00000001",
            # zero-padded octets
            "192.168.000.001",
            # dotted hex
            "c0.a8.00.01",
            "C0.A8.00.01",
            "ff.ff.ff.ff",
            ]:
            self.assertTrue(is_valid_ipv4(value), value)

    def test_invalid(self):
        for value in [
            "256.1.1.1",
            "1.2.3",
            "1.2.3.4.5",
            "01.2.3.4",
            "192.168.0.01",
            "a.b.c.d",
            "1.2.3.-4",
            " 1.2.3.4",
            "",
            ]:
            self.assertFalse(is_valid_ipv4(value), value)


class IPv6Tests(TestCase):

    def test_valid(self):
        for value in [
            "::",
            "::1",
            "1:2:3:4:5:6:7:8",
            "fe80::1",
            "FE80::1",
            "2001:db8::ff00:42:8329",
            "::ffff:192.168.0.1",
            "1:2:3:4:5:6:7::",
            "::2:3:4:5:6:7:8",
            "1:2:3:4:5:6:1.2.3.4",
            ]:
            self.assertTrue(is_valid_ipv6(value), value)

    def test_invalid(self):
        for value in [
            ":",
            "1::2::3",
            "12345::1",
            "1:2:3:4:5:6:7:8:9",
            "1:2:3:4:5:6:7",
            "::g",
            "::1.2.3.256",
            "1.2.3.4",
            "[::1]",
            ]:
            self.assertFalse(is_valid_ipv6(value), value)


class ValidateHostTests(TestCase):

    def test_ip_kinds(self):
        for host, allowed, expected in [
            ("192.168.0.1", HOST_IPV4, True),
            ("192.168.0.1", HOST_IPV6, False),
            ("[::1]", HOST_IPV6, True),
            ("[::1]", HOST_IPV4, False),
            ("::1", HOST_IPV6, False),
            ("[::1]", HOST_IPVANY, True),
            ("[v1.fe80::a+en1]", HOST_IPVFUTURE, True),
            ("[v1.fe80::a+en1]", HOST_IPV6, False),
            ("[v1.]", HOST_IPVFUTURE, False),
            ("[::1]", HOST_ALL, True),
            ("example.com", HOST_IPVANY, False),
            ]:
            self.assertEqual(validate_host(host, allowed), expected,
                             (host, allowed))

    def test_reg_name(self):
        for host, expected in [
            ("example.com", True),
            ("exa_mple~1", True),
            ("ex%41mple", True),
            ("sub!delims$&'()*+,;=", True),
            ("not a host", False),
            ("a%zz", False),
            ("user@host", False),
            ("", False),
            ]:
            self.assertEqual(validate_host(host, HOST_REGNAME), expected, host)
            self.assertEqual(is_valid_reg_name(host), expected, host)

    def test_dns(self):
        for host, expected in [
            ("example.com", True),
            ("localhost", True),
            ("x", True),
            ("example.com.", True),
            ("xn--bcher-kva.example", True),
            ("-bad.example", False),
            ("bad-.example", False),
            ("a..b", False),
            ("under_score.com", False),
            ("a" * 64 + ".com", False),
            ("[::1]", False),
            ("", False),
            ]:
            self.assertEqual(validate_host(host, HOST_DNS), expected, host)

    def test_dns_numeric_hosts_must_be_addresses(self):
        self.assertTrue(is_valid_dns_hostname("192.168.0.1"))
        self.assertFalse(is_valid_dns_hostname("999.1.1.1"))
        self.assertFalse(is_valid_dns_hostname("1.2.3"))
        # colon forms would have to be bracketed
        self.assertFalse(is_valid_dns_hostname("fe80::1"))

    def test_combined_masks(self):
        self.assertTrue(validate_host("example.com", HOST_DNS_OR_IPV4_OR_IPV6))
        self.assertTrue(validate_host("10.0.0.1", HOST_DNS_OR_IPV4_OR_IPV6))
        self.assertTrue(validate_host("[::1]", HOST_DNS_OR_IPV4_OR_IPV6))
        self.assertFalse(validate_host("exa_mple", HOST_DNS_OR_IPV4_OR_IPV6))
        self.assertTrue(validate_host("exa_mple", HOST_ALL))

    def test_default_mask_is_all(self):
        self.assertTrue(validate_host("example.com"))
        self.assertFalse(validate_host("not a host"))

    def test_non_strings(self):
        self.assertFalse(validate_host(None))
        self.assertFalse(validate_host(1234))
