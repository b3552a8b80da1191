"""Exceptions raised by urikit.

This code is free software; you can redistribute it and/or modify it under
the terms of the BSD or ZPL 2.1 licenses (see the file COPYING.txt
included with the distribution).

"""


class UriError(Exception): pass


class FormatError(UriError, ValueError):
    """A URI string or component does not match its grammar."""


class StringTypeError(FormatError, TypeError):
    """Something other than a string was given where a string is required."""


class SerializationError(UriError, ValueError):
    """The URI is neither valid nor a valid relative reference."""


def type_name(x):
    return type(x).__name__
