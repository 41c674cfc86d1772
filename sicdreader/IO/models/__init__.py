# -*- coding: utf-8 -*-
"""
IO Models - Typed metadata targets of every implemented SICD schema.

Re-exports all metadata classes from submodules for convenient access:

    from sicdreader.IO.models import SICDMetadata, SICD040Metadata

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

# Base
from sicdreader.IO.models.base import ImageMetadata

# Common primitives
from sicdreader.IO.models.common import (
    XYZ,
    LatLon,
    LatLonHAE,
    RowCol,
    Poly1D,
    Poly2D,
    XYZPoly,
)

# SICD 1.x
from sicdreader.IO.models.sicd import (
    SICDMetadata,
    SICDRadarMode,
    SICDCollectionInfo,
    SICDImageCreation,
    SICDFullImage,
    SICDImageData,
    SICDSCP,
    SICDGeoData,
    SICDWgtType,
    SICDDirParam,
    SICDGrid,
    SICDIPPSet,
    SICDTimeline,
    SICDPosition,
    SICDTxFrequency,
    SICDWaveformParams,
    SICDRcvChannel,
    SICDRadarCollection,
    SICDRcvChanProc,
    SICDTxFrequencyProc,
    SICDProcessingStep,
    SICDImageFormation,
    SICDSCPCOA,
    SICDNoiseLevel,
    SICDRadiometric,
)

# SICD 0.x
from sicdreader.IO.models.sicd_legacy import (
    SICDLegacyMetadata,
    SICD040Metadata,
    SICD050Metadata,
    SICDLegacyDirParam,
    SICDLegacyGrid,
    SICDLegacyRadiometric,
    SICDLegacyMatchCollect,
)

__all__ = [
    'ImageMetadata',
    'XYZ',
    'LatLon',
    'LatLonHAE',
    'RowCol',
    'Poly1D',
    'Poly2D',
    'XYZPoly',
    'SICDMetadata',
    'SICDRadarMode',
    'SICDCollectionInfo',
    'SICDImageCreation',
    'SICDFullImage',
    'SICDImageData',
    'SICDSCP',
    'SICDGeoData',
    'SICDWgtType',
    'SICDDirParam',
    'SICDGrid',
    'SICDIPPSet',
    'SICDTimeline',
    'SICDPosition',
    'SICDTxFrequency',
    'SICDWaveformParams',
    'SICDRcvChannel',
    'SICDRadarCollection',
    'SICDRcvChanProc',
    'SICDTxFrequencyProc',
    'SICDProcessingStep',
    'SICDImageFormation',
    'SICDSCPCOA',
    'SICDNoiseLevel',
    'SICDRadiometric',
    'SICDLegacyMetadata',
    'SICD040Metadata',
    'SICD050Metadata',
    'SICDLegacyDirParam',
    'SICDLegacyGrid',
    'SICDLegacyRadiometric',
    'SICDLegacyMatchCollect',
]
