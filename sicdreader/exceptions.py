# -*- coding: utf-8 -*-
"""
SICD Exception Hierarchy - Domain-specific exceptions for SICD reading.

Every failure raised while reading a SICD product subclasses both
``SICDError`` and the closest built-in exception, so callers can catch
reader errors as a group or keep treating them as ``ValueError`` /
``NotImplementedError`` / ``LookupError``.

Author
------
Steven Siebert

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

from typing import Optional


class SICDError(Exception):
    """Base exception for all SICD reader errors."""


#: Everything ``read()`` raises for an unreadable product derives from this.
AssemblyError = SICDError


class VersionError(SICDError, ValueError):
    """Metadata declares a version token that is not a known SICD version.

    Parameters
    ----------
    token : str
        The namespace token exactly as it was found in the metadata.
    """

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"unknown SICD version {token!r}")


class UnimplementedVersionError(SICDError, NotImplementedError):
    """Version is recognized but its metadata schema is not supported.

    Distinct from ``VersionError``: the version exists, support for it
    could be added later.

    Parameters
    ----------
    version : SICDVersion
        The recognized version.
    """

    def __init__(self, version) -> None:
        self.version = version
        super().__init__(
            f"metadata for SICD version {version.value} is not implemented"
        )


class MetadataParseError(SICDError, ValueError):
    """Metadata text could not be deserialized against its schema.

    Parameters
    ----------
    message : str
        Description of the failure.
    version : SICDVersion, optional
        Schema version the text was read against. None when the failure
        happened before a version was known.
    cause : Exception, optional
        Underlying parser or conversion error.
    """

    def __init__(
        self,
        message: str,
        version=None,
        cause: Optional[BaseException] = None,
    ) -> None:
        self.version = version
        self.cause = cause
        if version is not None:
            message = f"SICD {version.value} metadata: {message}"
        super().__init__(message)


class ShapeMismatchError(SICDError, ValueError):
    """Image buffer length does not match the declared dimensions.

    Parameters
    ----------
    expected : int
        Byte count implied by ``rows * cols * 8``.
    actual : int
        Byte count of the buffer.
    segment : int, optional
        Image segment index, filled in by the assembler.
    """

    def __init__(
        self, expected: int, actual: int, segment: Optional[int] = None,
    ) -> None:
        self.expected = expected
        self.actual = actual
        self.segment = segment
        where = f" in image segment {segment}" if segment is not None else ""
        super().__init__(
            f"image buffer{where} holds {actual} bytes, "
            f"expected {expected}"
        )


class MissingSegmentError(SICDError, LookupError):
    """A required metadata or image segment is absent from the container.

    Parameters
    ----------
    segment_type : str
        ``'metadata'`` or ``'image'``.
    index : int, optional
        Index of the missing segment, if applicable.
    """

    def __init__(self, segment_type: str, index: Optional[int] = None) -> None:
        self.segment_type = segment_type
        self.index = index
        if index is None:
            msg = f"container has no {segment_type} segment"
        else:
            msg = f"container has no {segment_type} segment at index {index}"
        super().__init__(msg)


class UnsupportedPixelTypeError(SICDError, NotImplementedError):
    """Metadata declares a pixel type other than ``RE32F_IM32F``."""

    def __init__(self, pixel_type: str) -> None:
        self.pixel_type = pixel_type
        super().__init__(
            f"pixel type {pixel_type!r} is not supported, "
            "only RE32F_IM32F can be decoded"
        )


class DependencyError(SICDError, ImportError):
    """Missing optional dependency required for a specific module.

    Raised when no NITF parsing backend (jbpy, sarpy) is installed.
    """


class ContainerError(SICDError, ValueError):
    """Container file could not be parsed by the NITF backend."""
