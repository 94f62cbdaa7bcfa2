"""
errors.py
Exception types raised by the footprint generator.

Every error is fatal: the generator stops at the first one and
`python -m fovgen` turns it into a one-line diagnostic and exit status 1.
Write failures are not wrapped; the OSError raised by `open()` propagates as is.
"""


class FovGenError(Exception):
    """Base class for all generator errors."""


class ResourceNotFoundError(FovGenError, FileNotFoundError):
    """A dataset or the template file does not exist."""


class ParseError(FovGenError, ValueError):
    """A dataset row is malformed or a numeric field does not parse."""


class InvalidInputError(FovGenError, ValueError):
    """A focal length, photosite size or photosite count is zero or negative."""
