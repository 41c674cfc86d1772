# -*- coding: utf-8 -*-
"""
SICD XML Extraction - Build typed model sections from SICD XML elements.

Low-level ``_xml_*`` helpers pull typed scalars, coordinates and
polynomials out of an ``ElementTree`` element; the ``extract_*``
functions each turn one top-level SICD section into its dataclass.
Element paths use the ``{*}`` wildcard so the same extractor reads any
schema namespace.

Absent elements yield ``None``. Present elements whose text cannot be
converted raise ``ValueError`` (or ``TypeError`` / ``IndexError`` for
malformed polynomials); the dispatcher turns those into
``MetadataParseError``.

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
from typing import Any, Callable, Dict, List, Optional, Tuple
import xml.etree.ElementTree as ET

# Third-party
import numpy as np

# sicdreader internal
from sicdreader.IO.models.common import (
    XYZ,
    LatLon,
    LatLonHAE,
    RowCol,
    Poly1D,
    Poly2D,
    XYZPoly,
)
from sicdreader.IO.models.sicd import (
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
from sicdreader.IO.models.sicd_legacy import (
    SICDLegacyDirParam,
    SICDLegacyGrid,
    SICDLegacyRadiometric,
    SICDLegacyMatchCollect,
)


# ===================================================================
# Scalar and primitive helpers
# ===================================================================

def _xml_float(elem: Optional[ET.Element], path: str) -> Optional[float]:
    """Extract float from XML path, returning None if absent."""
    val = elem.findtext(path) if elem is not None else None
    return float(val) if val is not None else None


def _xml_int(elem: Optional[ET.Element], path: str) -> Optional[int]:
    """Extract int from XML path, returning None if absent."""
    val = elem.findtext(path) if elem is not None else None
    return int(val) if val is not None else None


def _xml_str(elem: Optional[ET.Element], path: str) -> Optional[str]:
    """Extract stripped string from XML path, returning None if absent."""
    val = elem.findtext(path) if elem is not None else None
    return val.strip() if val is not None else None


def _xml_bool(elem: Optional[ET.Element], path: str) -> Optional[bool]:
    """Extract an ``xs:boolean`` from XML path, returning None if absent."""
    val = _xml_str(elem, path)
    if val is None:
        return None
    if val.lower() in ('true', '1'):
        return True
    if val.lower() in ('false', '0'):
        return False
    raise ValueError(f"invalid boolean {val!r} at {path}")


def _xml_params(elem: ET.Element) -> Optional[Dict[str, str]]:
    """Collect ``<Parameter name="...">`` children into a dict."""
    params = elem.findall('{*}Parameter')
    if not params:
        return None
    return {p.get('name', ''): (p.text or '') for p in params}


def _xml_xyz(elem: Optional[ET.Element], path: str) -> Optional[XYZ]:
    """Extract XYZ from XML sub-element."""
    sub = elem.find(path) if elem is not None else None
    if sub is None:
        return None
    return XYZ(
        x=_xml_float(sub, '{*}X') or 0.0,
        y=_xml_float(sub, '{*}Y') or 0.0,
        z=_xml_float(sub, '{*}Z') or 0.0,
    )


def _xml_latlonhae(
    elem: Optional[ET.Element], path: str,
) -> Optional[LatLonHAE]:
    """Extract LatLonHAE from XML sub-element."""
    sub = elem.find(path) if elem is not None else None
    if sub is None:
        return None
    return LatLonHAE(
        lat=_xml_float(sub, '{*}Lat') or 0.0,
        lon=_xml_float(sub, '{*}Lon') or 0.0,
        hae=_xml_float(sub, '{*}HAE') or 0.0,
    )


def _xml_rowcol(elem: Optional[ET.Element], path: str) -> Optional[RowCol]:
    """Extract RowCol from XML sub-element."""
    sub = elem.find(path) if elem is not None else None
    if sub is None:
        return None
    return RowCol(
        row=_xml_float(sub, '{*}Row') or 0.0,
        col=_xml_float(sub, '{*}Col') or 0.0,
    )


def _xml_poly1d(elem: Optional[ET.Element]) -> Optional[Poly1D]:
    """Extract Poly1D from XML element with Coef children."""
    if elem is None:
        return None
    order = int(elem.get('order1', '0'))
    coefs = np.zeros(order + 1)
    for coef_el in elem.findall('{*}Coef'):
        exp = int(coef_el.get('exponent1', '0'))
        if exp < 0:
            raise ValueError(f"negative polynomial exponent {exp}")
        coefs[exp] = float(coef_el.text)
    return Poly1D(coefs=coefs)


def _xml_poly2d(elem: Optional[ET.Element]) -> Optional[Poly2D]:
    """Extract Poly2D from XML element with Coef children."""
    if elem is None:
        return None
    order1 = int(elem.get('order1', '0'))
    order2 = int(elem.get('order2', '0'))
    coefs = np.zeros((order1 + 1, order2 + 1))
    for coef_el in elem.findall('{*}Coef'):
        exp1 = int(coef_el.get('exponent1', '0'))
        exp2 = int(coef_el.get('exponent2', '0'))
        if exp1 < 0 or exp2 < 0:
            raise ValueError(
                f"negative polynomial exponent ({exp1}, {exp2})"
            )
        coefs[exp1, exp2] = float(coef_el.text)
    return Poly2D(coefs=coefs)


def _xml_poly2d_at(
    elem: Optional[ET.Element], path: str,
) -> Optional[Poly2D]:
    """Extract Poly2D from XML path."""
    return _xml_poly2d(elem.find(path)) if elem is not None else None


def _xml_xyzpoly(
    elem: Optional[ET.Element], path: str,
) -> Optional[XYZPoly]:
    """Extract XYZPoly from XML sub-element."""
    sub = elem.find(path) if elem is not None else None
    if sub is None:
        return None
    return XYZPoly(
        x=_xml_poly1d(sub.find('{*}X')),
        y=_xml_poly1d(sub.find('{*}Y')),
        z=_xml_poly1d(sub.find('{*}Z')),
    )


_FieldTable = Tuple[Tuple[str, Callable[..., Any], str], ...]


def _xml_fields(elem: ET.Element, table: _FieldTable) -> Dict[str, Any]:
    """Read each ``(field, reader, tag)`` row of ``table`` into kwargs."""
    return {name: reader(elem, '{*}' + tag) for name, reader, tag in table}


_COLLECTION_INFO = (
    ('collector_name', _xml_str, 'CollectorName'),
    ('illuminator_name', _xml_str, 'IlluminatorName'),
    ('core_name', _xml_str, 'CoreName'),
    ('collect_type', _xml_str, 'CollectType'),
    ('classification', _xml_str, 'Classification'),
)

_IMAGE_CREATION = (
    ('application', _xml_str, 'Application'),
    ('date_time', _xml_str, 'DateTime'),
    ('site', _xml_str, 'Site'),
    ('profile', _xml_str, 'Profile'),
)

_WAVEFORM = (
    ('tx_pulse_length', _xml_float, 'TxPulseLength'),
    ('tx_rf_bandwidth', _xml_float, 'TxRFBandwidth'),
    ('tx_freq_start', _xml_float, 'TxFreqStart'),
    ('tx_fm_rate', _xml_float, 'TxFMRate'),
    ('rcv_window_length', _xml_float, 'RcvWindowLength'),
    ('adc_sample_rate', _xml_float, 'ADCSampleRate'),
    ('rcv_demod_type', _xml_str, 'RcvDemodType'),
)

_IMAGE_FORMATION = (
    ('image_form_algo', _xml_str, 'ImageFormAlgo'),
    ('t_start_proc', _xml_float, 'TStartProc'),
    ('t_end_proc', _xml_float, 'TEndProc'),
    ('image_beam_comp', _xml_str, 'ImageBeamComp'),
    ('az_autofocus', _xml_str, 'AzAutofocus'),
    ('rg_autofocus', _xml_str, 'RgAutofocus'),
)

_SCPCOA = (
    ('scp_time', _xml_float, 'SCPTime'),
    ('arp_pos', _xml_xyz, 'ARPPos'),
    ('arp_vel', _xml_xyz, 'ARPVel'),
    ('arp_acc', _xml_xyz, 'ARPAcc'),
    ('side_of_track', _xml_str, 'SideOfTrack'),
    ('slant_range', _xml_float, 'SlantRange'),
    ('ground_range', _xml_float, 'GroundRange'),
    ('doppler_cone_ang', _xml_float, 'DopplerConeAng'),
    ('graze_ang', _xml_float, 'GrazeAng'),
    ('incidence_ang', _xml_float, 'IncidenceAng'),
    ('twist_ang', _xml_float, 'TwistAng'),
    ('slope_ang', _xml_float, 'SlopeAng'),
    ('azim_ang', _xml_float, 'AzimAng'),
    ('layover_ang', _xml_float, 'LayoverAng'),
)

# Grid Row/Col scalars common to every schema version.
_DIR_PARAM = (
    ('uvect_ecf', _xml_xyz, 'UVectECF'),
    ('ss', _xml_float, 'SS'),
    ('imp_resp_wid', _xml_float, 'ImpRespWid'),
    ('sgn', _xml_int, 'Sgn'),
    ('imp_resp_bw', _xml_float, 'ImpRespBW'),
    ('k_ctr', _xml_float, 'KCtr'),
    ('delta_k1', _xml_float, 'DeltaK1'),
    ('delta_k2', _xml_float, 'DeltaK2'),
)

_RADIOMETRIC_POLYS = (
    ('rcs_sf_poly', _xml_poly2d_at, 'RCSSFPoly'),
    ('sigma_zero_sf_poly', _xml_poly2d_at, 'SigmaZeroSFPoly'),
    ('beta_zero_sf_poly', _xml_poly2d_at, 'BetaZeroSFPoly'),
    ('gamma_zero_sf_poly', _xml_poly2d_at, 'GammaZeroSFPoly'),
)


# ===================================================================
# Sections with one layout across all schema versions
# ===================================================================

def extract_collection_info(
    xml: ET.Element,
) -> Optional[SICDCollectionInfo]:
    """Extract CollectionInfo."""
    ci = xml.find('{*}CollectionInfo')
    if ci is None:
        return None

    radar_mode = None
    rm = ci.find('{*}RadarMode')
    if rm is not None:
        radar_mode = SICDRadarMode(
            mode_type=_xml_str(rm, '{*}ModeType'),
            mode_id=_xml_str(rm, '{*}ModeID'),
        )

    country_codes = [
        cc.text.strip() for cc in ci.findall('{*}CountryCode') if cc.text
    ]

    return SICDCollectionInfo(
        radar_mode=radar_mode,
        country_codes=country_codes or None,
        **_xml_fields(ci, _COLLECTION_INFO),
    )


def extract_image_creation(
    xml: ET.Element,
) -> Optional[SICDImageCreation]:
    """Extract ImageCreation."""
    ic = xml.find('{*}ImageCreation')
    if ic is None:
        return None
    return SICDImageCreation(**_xml_fields(ic, _IMAGE_CREATION))


def extract_image_data(xml: ET.Element) -> Optional[SICDImageData]:
    """Extract ImageData, including the valid data polygon."""
    idata = xml.find('{*}ImageData')
    if idata is None:
        return None

    full_image = None
    fi = idata.find('{*}FullImage')
    if fi is not None:
        full_image = SICDFullImage(
            num_rows=_xml_int(fi, '{*}NumRows') or 0,
            num_cols=_xml_int(fi, '{*}NumCols') or 0,
        )

    valid_data = [
        RowCol(
            row=_xml_float(v, '{*}Row') or 0.0,
            col=_xml_float(v, '{*}Col') or 0.0,
        )
        for v in idata.findall('{*}ValidData/{*}Vertex')
    ]

    return SICDImageData(
        pixel_type=_xml_str(idata, '{*}PixelType'),
        num_rows=_xml_int(idata, '{*}NumRows') or 0,
        num_cols=_xml_int(idata, '{*}NumCols') or 0,
        first_row=_xml_int(idata, '{*}FirstRow') or 0,
        first_col=_xml_int(idata, '{*}FirstCol') or 0,
        full_image=full_image,
        scp_pixel=_xml_rowcol(idata, '{*}SCPPixel'),
        valid_data=valid_data or None,
    )


def extract_geo_data(xml: ET.Element) -> Optional[SICDGeoData]:
    """Extract GeoData."""
    geo = xml.find('{*}GeoData')
    if geo is None:
        return None

    scp = None
    scp_elem = geo.find('{*}SCP')
    if scp_elem is not None:
        scp = SICDSCP(
            ecf=_xml_xyz(scp_elem, '{*}ECF'),
            llh=_xml_latlonhae(scp_elem, '{*}LLH'),
        )

    corners: List[LatLon] = []
    ic = geo.find('{*}ImageCorners')
    if ic is not None:
        for label in ('FRFC', 'FRLC', 'LRLC', 'LRFC'):
            c = ic.find('{*}' + label)
            if c is not None:
                corners.append(LatLon(
                    lat=_xml_float(c, '{*}Lat') or 0.0,
                    lon=_xml_float(c, '{*}Lon') or 0.0,
                ))

    return SICDGeoData(
        earth_model=_xml_str(geo, '{*}EarthModel') or 'WGS_84',
        scp=scp,
        image_corners=corners or None,
    )


def extract_timeline(xml: ET.Element) -> Optional[SICDTimeline]:
    """Extract Timeline."""
    tl = xml.find('{*}Timeline')
    if tl is None:
        return None

    ipp_sets = [
        SICDIPPSet(
            t_start=_xml_float(s, '{*}TStart') or 0.0,
            t_end=_xml_float(s, '{*}TEnd') or 0.0,
            ipp_start=_xml_int(s, '{*}IPPStart') or 0,
            ipp_end=_xml_int(s, '{*}IPPEnd') or 0,
            ipp_poly=_xml_poly1d(s.find('{*}IPPPoly')),
            index=int(s.get('index', '0')),
        )
        for s in tl.findall('{*}IPP/{*}Set')
    ]

    return SICDTimeline(
        collect_start=_xml_str(tl, '{*}CollectStart'),
        collect_duration=_xml_float(tl, '{*}CollectDuration'),
        ipp=ipp_sets or None,
    )


def extract_position(xml: ET.Element) -> Optional[SICDPosition]:
    """Extract Position."""
    pos = xml.find('{*}Position')
    if pos is None:
        return None
    return SICDPosition(
        arp_poly=_xml_xyzpoly(pos, '{*}ARPPoly'),
        grp_poly=_xml_xyzpoly(pos, '{*}GRPPoly'),
        tx_apc_poly=_xml_xyzpoly(pos, '{*}TxAPCPoly'),
    )


def extract_radar_collection(
    xml: ET.Element,
) -> Optional[SICDRadarCollection]:
    """Extract RadarCollection."""
    rc = xml.find('{*}RadarCollection')
    if rc is None:
        return None

    tx_freq = None
    tf = rc.find('{*}TxFrequency')
    if tf is not None:
        tx_freq = SICDTxFrequency(
            min=_xml_float(tf, '{*}Min'),
            max=_xml_float(tf, '{*}Max'),
        )

    waveforms = [
        SICDWaveformParams(
            index=int(wf.get('index', '0')), **_xml_fields(wf, _WAVEFORM),
        )
        for wf in rc.findall('{*}Waveform/{*}WFParameters')
    ]

    rcv_channels = [
        SICDRcvChannel(
            tx_rcv_polarization=_xml_str(ch, '{*}TxRcvPolarization'),
            rcv_apc_index=_xml_int(ch, '{*}RcvAPCIndex'),
            index=int(ch.get('index', '0')),
        )
        for ch in rc.findall('{*}RcvChannels/{*}ChanParameters')
    ]

    return SICDRadarCollection(
        tx_frequency=tx_freq,
        ref_freq_index=_xml_int(rc, '{*}RefFreqIndex'),
        waveform=waveforms or None,
        tx_polarization=_xml_str(rc, '{*}TxPolarization'),
        rcv_channels=rcv_channels or None,
    )


def extract_image_formation(
    xml: ET.Element,
) -> Optional[SICDImageFormation]:
    """Extract ImageFormation."""
    imf = xml.find('{*}ImageFormation')
    if imf is None:
        return None

    rcv_chan_proc = None
    rcp = imf.find('{*}RcvChanProc')
    if rcp is not None:
        chan_indices = [
            int(c.text) for c in rcp.findall('{*}ChanIndex') if c.text
        ]
        rcv_chan_proc = SICDRcvChanProc(
            num_chan_proc=_xml_int(rcp, '{*}NumChanProc'),
            prf_scale_factor=_xml_float(rcp, '{*}PRFScaleFactor'),
            chan_indices=chan_indices or None,
        )

    tx_freq_proc = None
    tfp = imf.find('{*}TxFrequencyProc')
    if tfp is not None:
        tx_freq_proc = SICDTxFrequencyProc(
            min_proc=_xml_float(tfp, '{*}MinProc'),
            max_proc=_xml_float(tfp, '{*}MaxProc'),
        )

    processing = [
        SICDProcessingStep(
            type=_xml_str(p, '{*}Type'),
            applied=_xml_bool(p, '{*}Applied'),
            parameters=_xml_params(p),
        )
        for p in imf.findall('{*}Processing')
    ]

    return SICDImageFormation(
        rcv_chan_proc=rcv_chan_proc,
        tx_frequency_proc=tx_freq_proc,
        processing=processing or None,
        **_xml_fields(imf, _IMAGE_FORMATION),
    )


def extract_scpcoa(xml: ET.Element) -> Optional[SICDSCPCOA]:
    """Extract SCPCOA."""
    sc = xml.find('{*}SCPCOA')
    if sc is None:
        return None
    return SICDSCPCOA(**_xml_fields(sc, _SCPCOA))


# ===================================================================
# 1.x layouts
# ===================================================================

def _extract_dir_param(elem: Optional[ET.Element]) -> Optional[SICDDirParam]:
    """Extract Grid Row or Col in the 1.x layout."""
    if elem is None:
        return None

    wgt_type = None
    wt = elem.find('{*}WgtType')
    if wt is not None:
        wgt_type = SICDWgtType(
            window_name=_xml_str(wt, '{*}WindowName'),
            parameters=_xml_params(wt),
        )

    return SICDDirParam(
        delta_k_coa_poly=_xml_poly2d_at(elem, '{*}DeltaKCOAPoly'),
        wgt_type=wgt_type,
        **_xml_fields(elem, _DIR_PARAM),
    )


def extract_grid(xml: ET.Element) -> Optional[SICDGrid]:
    """Extract Grid in the 1.x layout."""
    grid = xml.find('{*}Grid')
    if grid is None:
        return None
    return SICDGrid(
        image_plane=_xml_str(grid, '{*}ImagePlane'),
        type=_xml_str(grid, '{*}Type'),
        row=_extract_dir_param(grid.find('{*}Row')),
        col=_extract_dir_param(grid.find('{*}Col')),
        time_coa_poly=_xml_poly2d_at(grid, '{*}TimeCOAPoly'),
    )


def extract_radiometric(xml: ET.Element) -> Optional[SICDRadiometric]:
    """Extract Radiometric in the 1.x layout."""
    rad = xml.find('{*}Radiometric')
    if rad is None:
        return None

    noise_level = None
    nl = rad.find('{*}NoiseLevel')
    if nl is not None:
        noise_level = SICDNoiseLevel(
            noise_level_type=_xml_str(nl, '{*}NoiseLevelType'),
            noise_poly=_xml_poly2d_at(nl, '{*}NoisePoly'),
        )

    return SICDRadiometric(
        noise_level=noise_level, **_xml_fields(rad, _RADIOMETRIC_POLYS),
    )


# ===================================================================
# 0.x layouts
# ===================================================================

def _extract_legacy_dir_param(
    elem: Optional[ET.Element],
) -> Optional[SICDLegacyDirParam]:
    """Extract Grid Row or Col in the 0.x layout (string WgtType)."""
    if elem is None:
        return None
    return SICDLegacyDirParam(
        wgt_type=_xml_str(elem, '{*}WgtType'),
        **_xml_fields(elem, _DIR_PARAM),
    )


def extract_legacy_grid(xml: ET.Element) -> Optional[SICDLegacyGrid]:
    """Extract Grid in the 0.x layout."""
    grid = xml.find('{*}Grid')
    if grid is None:
        return None
    return SICDLegacyGrid(
        image_plane=_xml_str(grid, '{*}ImagePlane'),
        type=_xml_str(grid, '{*}Type'),
        row=_extract_legacy_dir_param(grid.find('{*}Row')),
        col=_extract_legacy_dir_param(grid.find('{*}Col')),
        time_coa_poly=_xml_poly2d_at(grid, '{*}TimeCOAPoly'),
    )


def extract_legacy_radiometric(
    xml: ET.Element,
) -> Optional[SICDLegacyRadiometric]:
    """Extract Radiometric in the 0.x layout."""
    rad = xml.find('{*}Radiometric')
    if rad is None:
        return None
    return SICDLegacyRadiometric(
        noise_poly=_xml_poly2d_at(rad, '{*}NoisePoly'),
        **_xml_fields(rad, _RADIOMETRIC_POLYS),
    )


def extract_legacy_match_info(
    xml: ET.Element,
) -> Optional[List[SICDLegacyMatchCollect]]:
    """Extract the 0.x ``MatchInfo/Collect`` list."""
    collects = xml.findall('{*}MatchInfo/{*}Collect')
    if not collects:
        return None
    return [
        SICDLegacyMatchCollect(
            collector_name=_xml_str(c, '{*}CollectorName'),
            illuminator_name=_xml_str(c, '{*}IlluminatorName'),
            core_name=_xml_str(c, '{*}CoreName'),
            match_types=[
                mt.text.strip() for mt in c.findall('{*}MatchType')
                if mt.text
            ] or None,
            index=int(c.get('index', '0')),
        )
        for c in collects
    ]
