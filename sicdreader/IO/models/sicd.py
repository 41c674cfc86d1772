# -*- coding: utf-8 -*-
"""
SICD 1.x Metadata - Typed target shared by SICD 1.0.0 through 1.3.0.

The 1.x line of the NGA SICD standard is backward compatible, so a
single set of nested dataclasses serves every 1.x minor version. Each
top-level section of the SICD XML maps onto one dataclass; sections the
reader does not model stay ``None``.

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
from typing import Dict, List, Optional

# sicdreader internal
from sicdreader.IO.models.base import ImageMetadata
from sicdreader.IO.models.common import (
    XYZ,
    LatLon,
    LatLonHAE,
    RowCol,
    Poly1D,
    Poly2D,
    XYZPoly,
)


# ===================================================================
# CollectionInfo
# ===================================================================

@dataclass
class SICDRadarMode:
    """Radar collection mode.

    Parameters
    ----------
    mode_type : str, optional
        ``'SPOTLIGHT'``, ``'STRIPMAP'`` or ``'DYNAMIC STRIPMAP'``.
    mode_id : str, optional
        Collector specific mode identifier.
    """

    mode_type: Optional[str] = None
    mode_id: Optional[str] = None


@dataclass
class SICDCollectionInfo:
    """Collection identification.

    Parameters
    ----------
    collector_name : str, optional
        Collecting platform.
    illuminator_name : str, optional
        Illuminating platform, bistatic collections only.
    core_name : str, optional
        Unique collection identifier.
    collect_type : str, optional
        ``'MONOSTATIC'`` or ``'BISTATIC'``.
    radar_mode : SICDRadarMode, optional
    classification : str, optional
        Security classification banner.
    country_codes : List[str], optional
    """

    collector_name: Optional[str] = None
    illuminator_name: Optional[str] = None
    core_name: Optional[str] = None
    collect_type: Optional[str] = None
    radar_mode: Optional[SICDRadarMode] = None
    classification: Optional[str] = None
    country_codes: Optional[List[str]] = None


# ===================================================================
# ImageCreation
# ===================================================================

@dataclass
class SICDImageCreation:
    """Provenance of the product: application, time, site, profile."""

    application: Optional[str] = None
    date_time: Optional[str] = None
    site: Optional[str] = None
    profile: Optional[str] = None


# ===================================================================
# ImageData
# ===================================================================

@dataclass
class SICDFullImage:
    """Dimensions of the full image before any sub-imaging."""

    num_rows: int = 0
    num_cols: int = 0


@dataclass
class SICDImageData:
    """Pixel layout of the image carried by the product.

    Parameters
    ----------
    pixel_type : str, optional
        ``'RE32F_IM32F'``, ``'RE16I_IM16I'`` or ``'AMP8I_PHS8I'``.
    num_rows : int
        Rows in the product image.
    num_cols : int
        Columns in the product image.
    first_row : int
        Row offset into the full image.
    first_col : int
        Column offset into the full image.
    full_image : SICDFullImage, optional
    scp_pixel : RowCol, optional
        Scene Center Point pixel location.
    valid_data : List[RowCol], optional
        Vertices of the valid data polygon.
    """

    pixel_type: Optional[str] = None
    num_rows: int = 0
    num_cols: int = 0
    first_row: int = 0
    first_col: int = 0
    full_image: Optional[SICDFullImage] = None
    scp_pixel: Optional[RowCol] = None
    valid_data: Optional[List[RowCol]] = None


# ===================================================================
# GeoData
# ===================================================================

@dataclass
class SICDSCP:
    """Scene Center Point in ECF and geodetic coordinates."""

    ecf: Optional[XYZ] = None
    llh: Optional[LatLonHAE] = None


@dataclass
class SICDGeoData:
    """Geographic reference of the image.

    Parameters
    ----------
    earth_model : str
        Always ``'WGS_84'`` in published schemas.
    scp : SICDSCP, optional
    image_corners : List[LatLon], optional
        FRFC, FRLC, LRLC, LRFC corners in that order.
    """

    earth_model: str = 'WGS_84'
    scp: Optional[SICDSCP] = None
    image_corners: Optional[List[LatLon]] = None


# ===================================================================
# Grid
# ===================================================================

@dataclass
class SICDWgtType:
    """Named weighting window and its parameters."""

    window_name: Optional[str] = None
    parameters: Optional[Dict[str, str]] = None


@dataclass
class SICDDirParam:
    """Row or column direction parameters of the sample grid.

    Parameters
    ----------
    uvect_ecf : XYZ, optional
        Unit vector of increasing index, ECF.
    ss : float, optional
        Sample spacing (meters).
    imp_resp_wid : float, optional
        Impulse response width (meters).
    sgn : int, optional
        Phase sign, +1 or -1.
    imp_resp_bw : float, optional
        Impulse response bandwidth (cycles/meter).
    k_ctr : float, optional
        Center spatial frequency (cycles/meter).
    delta_k1, delta_k2 : float, optional
        Spatial frequency support offsets.
    delta_k_coa_poly : Poly2D, optional
    wgt_type : SICDWgtType, optional
    """

    uvect_ecf: Optional[XYZ] = None
    ss: Optional[float] = None
    imp_resp_wid: Optional[float] = None
    sgn: Optional[int] = None
    imp_resp_bw: Optional[float] = None
    k_ctr: Optional[float] = None
    delta_k1: Optional[float] = None
    delta_k2: Optional[float] = None
    delta_k_coa_poly: Optional[Poly2D] = None
    wgt_type: Optional[SICDWgtType] = None


@dataclass
class SICDGrid:
    """Image sample grid.

    Parameters
    ----------
    image_plane : str, optional
        ``'SLANT'`` or ``'GROUND'``.
    type : str, optional
        ``'RGAZIM'``, ``'RGZERO'``, ``'XRGYCR'``, ``'XCTYAT'`` or
        ``'PLANE'``.
    row : SICDDirParam, optional
    col : SICDDirParam, optional
    time_coa_poly : Poly2D, optional
    """

    image_plane: Optional[str] = None
    type: Optional[str] = None
    row: Optional[SICDDirParam] = None
    col: Optional[SICDDirParam] = None
    time_coa_poly: Optional[Poly2D] = None


# ===================================================================
# Timeline
# ===================================================================

@dataclass
class SICDIPPSet:
    """One Inter-Pulse Period set of the timeline."""

    t_start: float = 0.0
    t_end: float = 0.0
    ipp_start: int = 0
    ipp_end: int = 0
    ipp_poly: Optional[Poly1D] = None
    index: int = 0


@dataclass
class SICDTimeline:
    """Collection start (ISO 8601), duration (seconds) and IPP sets."""

    collect_start: Optional[str] = None
    collect_duration: Optional[float] = None
    ipp: Optional[List[SICDIPPSet]] = None


# ===================================================================
# Position
# ===================================================================

@dataclass
class SICDPosition:
    """Aperture, ground and transmit phase center polynomials."""

    arp_poly: Optional[XYZPoly] = None
    grp_poly: Optional[XYZPoly] = None
    tx_apc_poly: Optional[XYZPoly] = None


# ===================================================================
# RadarCollection
# ===================================================================

@dataclass
class SICDTxFrequency:
    """Transmit frequency band (Hz)."""

    min: Optional[float] = None
    max: Optional[float] = None


@dataclass
class SICDWaveformParams:
    """Parameters of a single transmitted waveform."""

    tx_pulse_length: Optional[float] = None
    tx_rf_bandwidth: Optional[float] = None
    tx_freq_start: Optional[float] = None
    tx_fm_rate: Optional[float] = None
    rcv_window_length: Optional[float] = None
    adc_sample_rate: Optional[float] = None
    rcv_demod_type: Optional[str] = None
    index: int = 0


@dataclass
class SICDRcvChannel:
    """Receive channel: polarization pair and aperture index."""

    tx_rcv_polarization: Optional[str] = None
    rcv_apc_index: Optional[int] = None
    index: int = 0


@dataclass
class SICDRadarCollection:
    """Radar collection parameters.

    Parameters
    ----------
    tx_frequency : SICDTxFrequency, optional
    ref_freq_index : int, optional
    waveform : List[SICDWaveformParams], optional
    tx_polarization : str, optional
        ``'V'``, ``'H'``, ``'RHC'``, ``'LHC'`` or ``'SEQUENCE'``.
    rcv_channels : List[SICDRcvChannel], optional
    """

    tx_frequency: Optional[SICDTxFrequency] = None
    ref_freq_index: Optional[int] = None
    waveform: Optional[List[SICDWaveformParams]] = None
    tx_polarization: Optional[str] = None
    rcv_channels: Optional[List[SICDRcvChannel]] = None


# ===================================================================
# ImageFormation
# ===================================================================

@dataclass
class SICDRcvChanProc:
    """Receive channels used to form the image."""

    num_chan_proc: Optional[int] = None
    prf_scale_factor: Optional[float] = None
    chan_indices: Optional[List[int]] = None


@dataclass
class SICDTxFrequencyProc:
    """Processed transmit band (Hz)."""

    min_proc: Optional[float] = None
    max_proc: Optional[float] = None


@dataclass
class SICDProcessingStep:
    """Additional processing step recorded by the image former."""

    type: Optional[str] = None
    applied: Optional[bool] = None
    parameters: Optional[Dict[str, str]] = None


@dataclass
class SICDImageFormation:
    """Image formation parameters.

    Parameters
    ----------
    rcv_chan_proc : SICDRcvChanProc, optional
    image_form_algo : str, optional
        ``'PFA'``, ``'RMA'``, ``'RGAZCOMP'`` or ``'OTHER'``.
    t_start_proc, t_end_proc : float, optional
        Processed time span (seconds from collect start).
    tx_frequency_proc : SICDTxFrequencyProc, optional
    image_beam_comp, az_autofocus, rg_autofocus : str, optional
        ``'NO'``, ``'GLOBAL'`` or ``'SV'``.
    processing : List[SICDProcessingStep], optional
    """

    rcv_chan_proc: Optional[SICDRcvChanProc] = None
    image_form_algo: Optional[str] = None
    t_start_proc: Optional[float] = None
    t_end_proc: Optional[float] = None
    tx_frequency_proc: Optional[SICDTxFrequencyProc] = None
    image_beam_comp: Optional[str] = None
    az_autofocus: Optional[str] = None
    rg_autofocus: Optional[str] = None
    processing: Optional[List[SICDProcessingStep]] = None


# ===================================================================
# SCPCOA
# ===================================================================

@dataclass
class SICDSCPCOA:
    """Geometry at the Scene Center Point center of aperture.

    Angles are in degrees, ranges in meters, ARP kinematics in ECF.
    """

    scp_time: Optional[float] = None
    arp_pos: Optional[XYZ] = None
    arp_vel: Optional[XYZ] = None
    arp_acc: Optional[XYZ] = None
    side_of_track: Optional[str] = None
    slant_range: Optional[float] = None
    ground_range: Optional[float] = None
    doppler_cone_ang: Optional[float] = None
    graze_ang: Optional[float] = None
    incidence_ang: Optional[float] = None
    twist_ang: Optional[float] = None
    slope_ang: Optional[float] = None
    azim_ang: Optional[float] = None
    layover_ang: Optional[float] = None


# ===================================================================
# Radiometric
# ===================================================================

@dataclass
class SICDNoiseLevel:
    """Noise level polynomial and whether it is absolute or relative."""

    noise_level_type: Optional[str] = None
    noise_poly: Optional[Poly2D] = None


@dataclass
class SICDRadiometric:
    """Radiometric scale factor polynomials over image coordinates."""

    noise_level: Optional[SICDNoiseLevel] = None
    rcs_sf_poly: Optional[Poly2D] = None
    sigma_zero_sf_poly: Optional[Poly2D] = None
    beta_zero_sf_poly: Optional[Poly2D] = None
    gamma_zero_sf_poly: Optional[Poly2D] = None


# ===================================================================
# Top level
# ===================================================================

@dataclass
class SICDMetadata(ImageMetadata):
    """Typed metadata of a SICD 1.x product.

    The same target is produced for every version from 1.0.0 through
    1.3.0; the version itself travels next to it in ``SICDMeta``.

    Parameters
    ----------
    collection_info : SICDCollectionInfo
    image_creation : SICDImageCreation, optional
    image_data : SICDImageData
    geo_data : SICDGeoData
    grid : SICDGrid, optional
    timeline : SICDTimeline, optional
    position : SICDPosition, optional
    radar_collection : SICDRadarCollection, optional
    image_formation : SICDImageFormation, optional
    scpcoa : SICDSCPCOA, optional
    radiometric : SICDRadiometric, optional

    Examples
    --------
    >>> meta = product.get_v1_meta()
    >>> meta.collection_info.radar_mode.mode_type
    'SPOTLIGHT'
    >>> meta.image_data.pixel_type
    'RE32F_IM32F'
    """

    collection_info: Optional[SICDCollectionInfo] = None
    image_creation: Optional[SICDImageCreation] = None
    image_data: Optional[SICDImageData] = None
    geo_data: Optional[SICDGeoData] = None
    grid: Optional[SICDGrid] = None
    timeline: Optional[SICDTimeline] = None
    position: Optional[SICDPosition] = None
    radar_collection: Optional[SICDRadarCollection] = None
    image_formation: Optional[SICDImageFormation] = None
    scpcoa: Optional[SICDSCPCOA] = None
    radiometric: Optional[SICDRadiometric] = None
