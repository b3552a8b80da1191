import unittest

from ._uri import Uri


class TestCase(unittest.TestCase):

    def setUp(self):
        super(TestCase, self).setUp()
        self._on_teardown = []

    def monkey_patch(self, obj, name, value):
        orig_value = getattr(obj, name)
        setattr(obj, name, value)
        def reverse_patch():
            setattr(obj, name, orig_value)
        self._on_teardown.append(reverse_patch)

    def assert_contains(self, container, containee):
        self.assertTrue(containee in container, "%r not in %r" %
                        (containee, container))

    def assert_components(self, uri, scheme=None, user_info=None, host=None,
                          port=None, path=None, query=None, fragment=None):
        self.assertEqual(
            (scheme, user_info, host, port, path, query, fragment),
            uri.components())

    def assert_round_trips(self, uri_string, policy=None):
        """Parse, serialize and reparse; components must survive."""
        kwds = {}
        if policy is not None:
            kwds["policy"] = policy
        uri = Uri(uri_string, **kwds)
        again = Uri(uri.to_string(), **kwds)
        self.assertEqual(uri.components(), again.components())
        return again

    def tearDown(self):
        for func in reversed(self._on_teardown):
            func()


def main():
    unittest.main()
