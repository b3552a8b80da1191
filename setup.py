#!/usr/bin/env python
"""RFC 3986 URI parsing, validation, normalization and resolution.

urikit.Uri splits a URI into scheme, user info, host, port, path, query and
fragment, checks each component against its grammar, and turns the
components back into a string.  It normalizes URIs (case, default ports, dot
segments, needless percent escapes), resolves relative references against a
base URI and computes the relative reference between two URIs.

Scheme policies restrict a Uri to particular schemes: HTTP/HTTPS (default
ports, user and password, DNS or IP hosts) and file (no user info, query or
fragment; construction from POSIX and Windows paths).  No network access is
performed.

"""

VERSION = "0.1.0"

CLASSIFIERS = """\
Development Status :: 4 - Beta
Intended Audience :: Developers
License :: OSI Approved :: BSD License
License :: OSI Approved :: Zope Public License
Natural Language :: English
Operating System :: OS Independent
Programming Language :: Python
Programming Language :: Python :: 3
Topic :: Internet
Topic :: Internet :: WWW/HTTP
Topic :: Software Development :: Libraries
Topic :: Software Development :: Libraries :: Python Modules
Topic :: Text Processing
"""

def main():
    import setuptools
    setuptools.setup(
        name = "urikit",
        version = VERSION,
        license = "BSD",  # or ZPL 2.1
        platforms = ["any"],
        classifiers = [c for c in CLASSIFIERS.split("\n") if c],
        python_requires = ">=3.6",
        install_requires = [],
        extras_require = {"test": ["pytest"]},
        zip_safe = True,
        description = __doc__.split("\n", 1)[0],
        long_description = __doc__.split("\n", 2)[-1],
        packages = ["urikit"],
        )


if __name__ == "__main__":
    main()
