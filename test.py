#!/usr/bin/env python

"""
Run the test suite: the unittest modules in test/ and the doctests in the
urikit modules.

Usage examples:

python test.py  # all tests
python test.py test_uri  # run test/test_uri.py
python test.py test_uri.ResolveTests  # just this class
# just this test method
python test.py test_uri.ResolveTests.test_rfc3986_normal_examples
"""

import doctest
import os
import sys
import unittest

DOCTEST_MODULES = [
    "urikit._codec",
    "urikit._host",
    "urikit._rfc3986",
    "urikit._schemes",
    "urikit._uri",
]


def mutate_sys_path():
    this_dir = os.path.dirname(os.path.abspath(__file__))
    sys.path.insert(0, os.path.join(this_dir, "test"))
    sys.path.insert(0, this_dir)


def load_tests(names):
    loader = unittest.TestLoader()
    if names:
        return loader.loadTestsFromNames(names)
    this_dir = os.path.dirname(os.path.abspath(__file__))
    suite = loader.discover(os.path.join(this_dir, "test"), "test_*.py")
    for name in DOCTEST_MODULES:
        suite.addTests(doctest.DocTestSuite(name))
    return suite


def main(argv):
    mutate_sys_path()
    result = unittest.TextTestRunner(verbosity=1).run(load_tests(argv[1:]))
    success = result.wasSuccessful()
    sys.exit(int(not success))


if __name__ == "__main__":
    main(sys.argv)
