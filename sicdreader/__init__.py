# -*- coding: utf-8 -*-
"""
sicdreader - Read-only access to Sensor Independent Complex Data.

Reads SICD products from NITF containers: resolves the metadata's
schema version from its namespace, deserializes it into that version's
typed dataclasses and decodes every image segment into a ``complex64``
array.

Dependencies
------------
numpy
jbpy or sarpy (NITF framing)

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

__version__ = "0.1.0"
__author__ = "Duane Smalley"

from sicdreader.exceptions import (
    SICDError,
    AssemblyError,
    VersionError,
    UnimplementedVersionError,
    MetadataParseError,
    ShapeMismatchError,
    MissingSegmentError,
    UnsupportedPixelTypeError,
    DependencyError,
    ContainerError,
)
from sicdreader.vocabulary import PixelType, SICDVersion
from sicdreader.IO import (
    DecodedImage,
    NITFContainer,
    SICDContainer,
    SICDMeta,
    SICDProduct,
    read,
)

__all__ = [
    'SICDError',
    'AssemblyError',
    'VersionError',
    'UnimplementedVersionError',
    'MetadataParseError',
    'ShapeMismatchError',
    'MissingSegmentError',
    'UnsupportedPixelTypeError',
    'DependencyError',
    'ContainerError',
    'PixelType',
    'SICDVersion',
    'DecodedImage',
    'NITFContainer',
    'SICDContainer',
    'SICDMeta',
    'SICDProduct',
    'read',
]
