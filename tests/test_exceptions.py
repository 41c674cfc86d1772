# -*- coding: utf-8 -*-
"""
Exception Tests - Hierarchy and messages of sicdreader errors.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

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

# Third-party
import pytest

# sicdreader internal
from sicdreader.exceptions import (
    AssemblyError,
    ContainerError,
    DependencyError,
    MetadataParseError,
    MissingSegmentError,
    ShapeMismatchError,
    SICDError,
    UnimplementedVersionError,
    UnsupportedPixelTypeError,
    VersionError,
)
from sicdreader.vocabulary import SICDVersion


@pytest.mark.parametrize("exc,builtin", [
    (VersionError('x'), ValueError),
    (UnimplementedVersionError(SICDVersion.V0_3_1), NotImplementedError),
    (MetadataParseError('bad'), ValueError),
    (ShapeMismatchError(8, 7), ValueError),
    (MissingSegmentError('image'), LookupError),
    (UnsupportedPixelTypeError('AMP8I_PHS8I'), NotImplementedError),
    (DependencyError('missing'), ImportError),
    (ContainerError('broken'), ValueError),
])
def test_hierarchy(exc, builtin):
    """Every error is a SICDError and its matching built-in."""
    assert isinstance(exc, SICDError)
    assert isinstance(exc, builtin)


def test_assembly_error_alias():
    """AssemblyError is the common base."""
    assert AssemblyError is SICDError


def test_unimplemented_is_not_version_error():
    """Recognized-but-unsupported stays distinct from unknown."""
    err = UnimplementedVersionError(SICDVersion.V0_4_1)
    assert not isinstance(err, VersionError)
    assert err.version is SICDVersion.V0_4_1
    assert '0.4.1' in str(err)


def test_metadata_parse_error_prefix():
    """A version prefixes the message."""
    err = MetadataParseError('missing X', version=SICDVersion.V1_0_0)
    assert str(err) == 'SICD 1.0.0 metadata: missing X'
    assert MetadataParseError('plain').version is None


def test_metadata_parse_error_cause():
    cause = ValueError('inner')
    assert MetadataParseError('outer', cause=cause).cause is cause


def test_missing_segment_messages():
    assert str(MissingSegmentError('metadata')) == (
        'container has no metadata segment')
    assert str(MissingSegmentError('image', 2)) == (
        'container has no image segment at index 2')


def test_unsupported_pixel_type_attr():
    assert UnsupportedPixelTypeError('RE16I_IM16I').pixel_type == (
        'RE16I_IM16I')
