"""Tests for scheme policies and the HTTP and file helpers."""

import urikit._policy
from urikit import (
    Uri, SchemePolicy, GENERIC, HTTP, FILE, FormatError, StringTypeError,
    SerializationError, http_uri, file_uri, parse_uri, policy_for,
    register_policy, from_unix_path, from_windows_path)
from urikit._testcase import TestCase


class HttpTests(TestCase):

    def test_scheme_whitelist(self):
        self.assertRaises(FormatError, http_uri, "ftp://h/")
        self.assertRaises(FormatError, http_uri().set_scheme, "mailto")
        self.assertEqual(http_uri("HTTPS://h/").get_scheme(), "HTTPS")

    def test_root_path(self):
        self.assertEqual(http_uri("https://x").to_string(), "https://x/")
        self.assertEqual(http_uri("//h").to_string(), "//h/")
        # no authority, no root path
        uri = http_uri("?y")
        self.assertEqual(uri.get_path(), "")
        self.assertEqual(uri.to_string(), "?y")

    def test_default_ports(self):
        self.assertEqual(http_uri("http://h/").get_port(), 80)
        self.assertEqual(http_uri("https://x").get_port(), 443)
        self.assertEqual(http_uri("http://h:8080/").get_port(), 8080)
        self.assertEqual(http_uri("/p").get_port(), None)
        self.assertEqual(HTTP.default_port("HTTPS"), 443)
        self.assertEqual(HTTP.default_port(None), None)

    def test_normalize_drops_default_port(self):
        for uri, expected in [
            ("HTTP://Example.com:80", "http://example.com/"),
            ("https://h:443/a", "https://h/a"),
            ("https://h:80/a", "https://h:80/a"),
            ("http://h:8080", "http://h:8080/"),
            ]:
            self.assertEqual(http_uri(uri).normalize().to_string(), expected,
                             uri)

    def test_host_kinds(self):
        for host, ok in [
            ("example.com", True),
            ("10.0.0.1", True),
            ("[::1]", True),
            # registered names are accepted alongside DNS names
            ("my_host", True),
            ("exa_mple", True),
            ("ex%41mple", True),
            ("999.1.1.1", True),
            ("[v1.x]", False),
            ]:
            uri = "http://%s/" % host
            if ok:
                self.assertEqual(http_uri(uri).get_host(), host)
            else:
                self.assertRaises(FormatError, http_uri, uri)
            # the generic policy takes every kind of host
            self.assertEqual(Uri(uri).get_host(), host)
        self.assertRaises(FormatError, http_uri, "http://exa mple/")

    def test_user_and_password(self):
        uri = http_uri("http://u:p@h/")
        self.assertEqual((uri.get_user(), uri.get_password()), ("u", "p"))
        uri.set_password("p w")
        self.assertEqual(uri.to_string(), "http://u:p%20w@h/")

    def test_resolve_uses_policy(self):
        self.assertEqual(
            http_uri("g").resolve("http://a/b/c/d;p?q").to_string(),
            "http://a/b/c/g")
        self.assertRaises(FormatError, http_uri("g").resolve, "ftp://a/")


class FileTests(TestCase):

    def test_parse(self):
        self.assertEqual(file_uri("file:///etc/passwd").to_string(),
                         "file:///etc/passwd")
        self.assertRaises(FormatError, file_uri, "http://h/")

    def test_dropped_components(self):
        self.assertEqual(file_uri("file:///x#frag").to_string(), "file:///x")
        self.assertEqual(file_uri("file://u@h/x").to_string(), "file://h/x")
        uri = file_uri("file:///x")
        uri.set_user_info("u").set_fragment("f")
        self.assert_components(uri, scheme="file", host="", path="/x")

    def test_query_is_invalid(self):
        uri = file_uri("file:///x?q")
        self.assertFalse(uri.is_valid())
        self.assertRaises(SerializationError, uri.to_string)
        self.assertEqual(str(uri), "")
        self.assertFalse(file_uri("?q").is_valid_relative())
        self.assertTrue(file_uri("x/y").is_valid_relative())

    def test_from_unix_path(self):
        for path, expected in [
            ("/etc/passwd", "file:///etc/passwd"),
            ("/", "file:///"),
            ("docs/a b.txt", "file:docs/a%20b.txt"),
            ("/tmp/100%", "file:///tmp/100%25"),
            ]:
            self.assertEqual(from_unix_path(path).to_string(), expected, path)
        self.assertEqual(from_unix_path("/x").get_host(), "")
        self.assertEqual(from_unix_path("x").get_host(), None)
        self.assertRaises(StringTypeError, from_unix_path, None)

    def test_from_windows_path(self):
        for path, expected in [
            ("C:\\Users", "file:///C:/Users"),
            ("C:", "file:///C:"),
            ("c:\\My Docs\\x", "file:///c:/My%20Docs/x"),
            ("\\\\server\\share\\f.txt", "file://server/share/f.txt"),
            ("dir\\file", "file:dir/file"),
            ("\\temp", "file:///temp"),
            ("C:\\a/b", "file:///C:/a%2Fb"),
            ]:
            self.assertEqual(from_windows_path(path).to_string(), expected,
                             path)
        self.assertEqual(from_windows_path("C:\\x").get_host(), "")
        self.assertRaises(StringTypeError, from_windows_path, b"C:\\")


class PolicyTests(TestCase):

    def test_parse_uri_picks_policy(self):
        for uri, policy in [
            ("https://x", HTTP),
            ("HTTP://x", HTTP),
            ("FILE:///x", FILE),
            ("foo:bar", GENERIC),
            ("g", GENERIC),
            ]:
            self.assertTrue(parse_uri(uri).policy is policy, uri)
        self.assertEqual(parse_uri("https://x").to_string(), "https://x/")
        self.assertRaises(FormatError, parse_uri, "http://[v1.x]/")

    def test_register_policy(self):
        self.monkey_patch(urikit._policy, "_registry",
                          dict(urikit._policy._registry))
        ftp = SchemePolicy("ftp", valid_schemes=("FTP",),
                           default_ports={"ftp": 21})
        register_policy(ftp)
        self.assertTrue(policy_for("ftp") is ftp)
        self.assertTrue(policy_for("FTP") is ftp)
        self.assertEqual(parse_uri("ftp://h:21/").normalize().to_string(),
                         "ftp://h/")

        register_policy(ftp, ["sftp"])
        self.assertTrue(policy_for("sftp") is ftp)
        # the policy's own whitelist still applies
        self.assertRaises(FormatError, parse_uri, "sftp://h/")

    def test_registry_restored(self):
        self.assertTrue(policy_for("ftp") is GENERIC)
        self.assertTrue(policy_for(None) is GENERIC)

    def test_copy_across_policies(self):
        self.assertRaises(FormatError, http_uri, Uri("ftp://h/"))
        self.assertEqual(file_uri(Uri("file://u@h/x#f")).to_string(),
                         "file://h/x")
        uri = http_uri(Uri("https://h/"))
        self.assertEqual(uri.get_port(), 443)
        self.assertEqual(repr(uri), "<Uri 'https://h/' (http)>")
        # the source's policy default does not become an explicit port
        copy = Uri(http_uri("http://h/"))
        self.assertEqual(copy.get_port(), None)
        self.assertEqual(copy.to_string(), "http://h/")

    def test_repr(self):
        self.assertEqual(repr(HTTP), "<SchemePolicy http>")

    def test_policy_host_check(self):
        self.assertTrue(HTTP.validate_host("exa_mple"))
        self.assertFalse(HTTP.validate_host("[v1.x]"))
        self.assertTrue(FILE.validate_host("[v1.x]"))
        self.assertTrue(GENERIC.accepts_scheme("anything"))
        self.assertFalse(HTTP.accepts_scheme("ftp"))
