# -*- coding: utf-8 -*-
"""
IO Module - SICD containers, decoding, metadata dispatch and assembly.

Provides the ``SICDContainer`` interface and its NITF implementation,
the complex pixel decoder, version resolution, version-specific
metadata dispatch, and ``read()``, which ties them into a
``SICDProduct``.

Dependencies
------------
numpy
jbpy (primary) or sarpy (fallback), for NITF files

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

# Container interface and NITF implementation
from sicdreader.IO.base import ImageSegment, SICDContainer
from sicdreader.IO.nitf import NITFContainer

# Core components
from sicdreader.IO.decoder import DecodedImage, decode_complex_image
from sicdreader.IO.version import (
    extract_namespace,
    resolve_metadata_version,
    resolve_version,
)
from sicdreader.IO.dispatch import SICDMeta, dispatch_metadata, schema_target
from sicdreader.IO.product import SICDProduct, assemble, read

# Metadata models
from sicdreader.IO.models import (
    ImageMetadata,
    SICDMetadata,
    SICD040Metadata,
    SICD050Metadata,
)

__all__ = [
    'ImageSegment',
    'SICDContainer',
    'NITFContainer',
    'DecodedImage',
    'decode_complex_image',
    'extract_namespace',
    'resolve_metadata_version',
    'resolve_version',
    'SICDMeta',
    'dispatch_metadata',
    'schema_target',
    'SICDProduct',
    'assemble',
    'read',
    'ImageMetadata',
    'SICDMetadata',
    'SICD040Metadata',
    'SICD050Metadata',
]
