# -*- coding: utf-8 -*-
"""
SICD 0.x Metadata - Typed targets for the pre-1.0 SICD schemas.

SICD 0.4.0 and 0.5.0 predate the backward compatible 1.x line. Most
sections share their layout with 1.x and reuse those dataclasses; the
sections below are the ones whose XML layout differs:

- ``Grid/Row|Col/WgtType`` is a plain string (e.g. ``'TAYLOR,4,-35'``)
  rather than a ``WindowName`` + ``Parameter`` structure;
- ``Radiometric/NoisePoly`` sits directly under ``Radiometric`` with no
  ``NoiseLevel`` wrapper and no noise level type;
- ``MatchInfo`` is a flat list of ``Collect`` entries rather than
  ``MatchType`` blocks.

Each version gets its own top-level class so a product's metadata can
never be mistaken for another version's.

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

# Standard library
from dataclasses import dataclass
from typing import List, Optional

# sicdreader internal
from sicdreader.IO.models.base import ImageMetadata
from sicdreader.IO.models.common import XYZ, Poly2D
from sicdreader.IO.models.sicd import (
    SICDCollectionInfo,
    SICDImageCreation,
    SICDImageData,
    SICDGeoData,
    SICDTimeline,
    SICDPosition,
    SICDRadarCollection,
    SICDImageFormation,
    SICDSCPCOA,
)


@dataclass
class SICDLegacyDirParam:
    """Row or column grid parameters, 0.x layout.

    Parameters
    ----------
    uvect_ecf : XYZ, optional
    ss : float, optional
        Sample spacing (meters).
    imp_resp_wid : float, optional
    sgn : int, optional
    imp_resp_bw : float, optional
    k_ctr : float, optional
    delta_k1, delta_k2 : float, optional
    wgt_type : str, optional
        Window description as written, e.g. ``'UNIFORM'`` or
        ``'TAYLOR,4,-35'``.
    """

    uvect_ecf: Optional[XYZ] = None
    ss: Optional[float] = None
    imp_resp_wid: Optional[float] = None
    sgn: Optional[int] = None
    imp_resp_bw: Optional[float] = None
    k_ctr: Optional[float] = None
    delta_k1: Optional[float] = None
    delta_k2: Optional[float] = None
    wgt_type: Optional[str] = None


@dataclass
class SICDLegacyGrid:
    """Image sample grid, 0.x layout."""

    image_plane: Optional[str] = None
    type: Optional[str] = None
    row: Optional[SICDLegacyDirParam] = None
    col: Optional[SICDLegacyDirParam] = None
    time_coa_poly: Optional[Poly2D] = None


@dataclass
class SICDLegacyRadiometric:
    """Radiometric polynomials, 0.x layout (bare ``NoisePoly``)."""

    noise_poly: Optional[Poly2D] = None
    rcs_sf_poly: Optional[Poly2D] = None
    sigma_zero_sf_poly: Optional[Poly2D] = None
    beta_zero_sf_poly: Optional[Poly2D] = None
    gamma_zero_sf_poly: Optional[Poly2D] = None


@dataclass
class SICDLegacyMatchCollect:
    """One matched collection from a 0.x ``MatchInfo/Collect`` entry."""

    collector_name: Optional[str] = None
    illuminator_name: Optional[str] = None
    core_name: Optional[str] = None
    match_types: Optional[List[str]] = None
    index: int = 0


@dataclass
class SICDLegacyMetadata(ImageMetadata):
    """Sections common to the 0.4.0 and 0.5.0 schemas.

    Not produced directly; see ``SICD040Metadata`` and
    ``SICD050Metadata``.
    """

    collection_info: Optional[SICDCollectionInfo] = None
    image_creation: Optional[SICDImageCreation] = None
    image_data: Optional[SICDImageData] = None
    geo_data: Optional[SICDGeoData] = None
    grid: Optional[SICDLegacyGrid] = None
    timeline: Optional[SICDTimeline] = None
    position: Optional[SICDPosition] = None
    radar_collection: Optional[SICDRadarCollection] = None
    image_formation: Optional[SICDImageFormation] = None
    scpcoa: Optional[SICDSCPCOA] = None
    radiometric: Optional[SICDLegacyRadiometric] = None
    match_info: Optional[List[SICDLegacyMatchCollect]] = None


@dataclass
class SICD040Metadata(SICDLegacyMetadata):
    """Typed metadata of a SICD 0.4.0 product."""


@dataclass
class SICD050Metadata(SICDLegacyMetadata):
    """Typed metadata of a SICD 0.5.0 product."""
