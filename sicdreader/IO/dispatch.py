# -*- coding: utf-8 -*-
"""
SICD Metadata Dispatch - Deserialize metadata against its version's schema.

``dispatch_metadata`` looks the resolved ``SICDVersion`` up in a schema
table and runs that schema's reader over the XML text. The result is a
``SICDMeta``: the version and its typed metadata, kept together so the
pair can never disagree.

Schema table:

==============  ======================  ==========================
Version         Target                  Reader
==============  ======================  ==========================
0.3.1           (not implemented)
0.4.0           ``SICD040Metadata``     0.x sections
0.4.1           (not implemented)
0.5.0           ``SICD050Metadata``     0.x sections
1.0.0 - 1.3.0   ``SICDMetadata``        1.x sections, shared
==============  ======================  ==========================

Adding a version means adding a ``SICDVersion`` member and a row here.

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
import logging
from dataclasses import dataclass
from typing import Callable, Dict, NamedTuple, Optional, Type, Union
import xml.etree.ElementTree as ET

# sicdreader internal
from sicdreader.exceptions import (
    MetadataParseError,
    UnimplementedVersionError,
    VersionError,
)
from sicdreader.vocabulary import SICDVersion
from sicdreader.IO.models import (
    SICDMetadata,
    SICDLegacyMetadata,
    SICD040Metadata,
    SICD050Metadata,
)
from sicdreader.IO.sicd_xml import (
    extract_collection_info,
    extract_image_creation,
    extract_image_data,
    extract_geo_data,
    extract_timeline,
    extract_position,
    extract_radar_collection,
    extract_image_formation,
    extract_scpcoa,
    extract_grid,
    extract_radiometric,
    extract_legacy_grid,
    extract_legacy_radiometric,
    extract_legacy_match_info,
)
from sicdreader.IO.version import resolve_version, split_tag

logger = logging.getLogger(__name__)

SchemaTarget = Union[SICD040Metadata, SICD050Metadata, SICDMetadata]

# Present in every published SICD schema.
_REQUIRED_SECTIONS = ('CollectionInfo', 'ImageData', 'GeoData')
_REQUIRED_FIELDS = (
    'ImageData/PixelType',
    'ImageData/NumRows',
    'ImageData/NumCols',
)


# ===================================================================
# Schema readers
# ===================================================================

def _read_v1(xml: ET.Element) -> SICDMetadata:
    """Build the shared 1.x target."""
    image_data = extract_image_data(xml)
    return SICDMetadata(
        format='SICD',
        rows=image_data.num_rows,
        cols=image_data.num_cols,
        dtype='complex64',
        collection_info=extract_collection_info(xml),
        image_creation=extract_image_creation(xml),
        image_data=image_data,
        geo_data=extract_geo_data(xml),
        grid=extract_grid(xml),
        timeline=extract_timeline(xml),
        position=extract_position(xml),
        radar_collection=extract_radar_collection(xml),
        image_formation=extract_image_formation(xml),
        scpcoa=extract_scpcoa(xml),
        radiometric=extract_radiometric(xml),
    )


def _legacy_reader(
    target: Type[SICDLegacyMetadata],
) -> Callable[[ET.Element], SICDLegacyMetadata]:
    """Make a 0.x reader that builds ``target``."""
    def read(xml: ET.Element) -> SICDLegacyMetadata:
        image_data = extract_image_data(xml)
        return target(
            format='SICD',
            rows=image_data.num_rows,
            cols=image_data.num_cols,
            dtype='complex64',
            collection_info=extract_collection_info(xml),
            image_creation=extract_image_creation(xml),
            image_data=image_data,
            geo_data=extract_geo_data(xml),
            grid=extract_legacy_grid(xml),
            timeline=extract_timeline(xml),
            position=extract_position(xml),
            radar_collection=extract_radar_collection(xml),
            image_formation=extract_image_formation(xml),
            scpcoa=extract_scpcoa(xml),
            radiometric=extract_legacy_radiometric(xml),
            match_info=extract_legacy_match_info(xml),
        )
    return read


class _Schema(NamedTuple):
    target: type
    reader: Callable[[ET.Element], SchemaTarget]


_V1_SCHEMA = _Schema(SICDMetadata, _read_v1)

_SCHEMAS: Dict[SICDVersion, _Schema] = {
    SICDVersion.V0_4_0: _Schema(
        SICD040Metadata, _legacy_reader(SICD040Metadata),
    ),
    SICDVersion.V0_5_0: _Schema(
        SICD050Metadata, _legacy_reader(SICD050Metadata),
    ),
    SICDVersion.V1_0_0: _V1_SCHEMA,
    SICDVersion.V1_0_1: _V1_SCHEMA,
    SICDVersion.V1_1_0: _V1_SCHEMA,
    SICDVersion.V1_2_0: _V1_SCHEMA,
    SICDVersion.V1_2_1: _V1_SCHEMA,
    SICDVersion.V1_3_0: _V1_SCHEMA,
}


def _schema_for(version: SICDVersion) -> _Schema:
    if not version.is_implemented or version not in _SCHEMAS:
        raise UnimplementedVersionError(version)
    return _SCHEMAS[version]


def schema_target(version: SICDVersion) -> type:
    """Metadata class produced for ``version``.

    Raises
    ------
    UnimplementedVersionError
        If ``version`` has no schema.
    """
    return _schema_for(version).target


# ===================================================================
# Tagged union
# ===================================================================

@dataclass(frozen=True)
class SICDMeta:
    """Resolved SICD version together with its typed metadata.

    Parameters
    ----------
    version : SICDVersion
        Resolved schema version.
    content : SICD040Metadata, SICD050Metadata or SICDMetadata
        Metadata, of exactly the class the version's schema produces.

    Raises
    ------
    UnimplementedVersionError
        If ``version`` has no schema.
    TypeError
        If ``content`` is not the class ``version`` maps to.
    """

    version: SICDVersion
    content: SchemaTarget

    def __post_init__(self) -> None:
        target = schema_target(self.version)
        if type(self.content) is not target:
            raise TypeError(
                f"SICD {self.version.value} metadata must be "
                f"{target.__name__}, got {type(self.content).__name__}"
            )

    def get(self, expected: SICDVersion) -> Optional[SchemaTarget]:
        """Metadata if the resolved version is ``expected``, else None."""
        return self.content if self.version is expected else None

    def get_v0_3_1_meta(self):
        """Always raises: SICD 0.3.1 metadata is not implemented."""
        raise UnimplementedVersionError(SICDVersion.V0_3_1)

    def get_v0_4_0_meta(self) -> Optional[SICD040Metadata]:
        return self.get(SICDVersion.V0_4_0)

    def get_v0_4_1_meta(self):
        """Always raises: SICD 0.4.1 metadata is not implemented."""
        raise UnimplementedVersionError(SICDVersion.V0_4_1)

    def get_v0_5_0_meta(self) -> Optional[SICD050Metadata]:
        return self.get(SICDVersion.V0_5_0)

    def get_v1_meta(self) -> Optional[SICDMetadata]:
        """Metadata for any 1.x version, else None."""
        return self.content if self.version.is_v1 else None


# ===================================================================
# Dispatch
# ===================================================================

def dispatch_metadata(version: SICDVersion, metadata_text: str) -> SICDMeta:
    """Deserialize SICD XML against the schema of ``version``.

    Parameters
    ----------
    version : SICDVersion
        Version resolved from the metadata's namespace.
    metadata_text : str
        SICD XML document.

    Returns
    -------
    SICDMeta
        Carries exactly ``version``.

    Raises
    ------
    UnimplementedVersionError
        For versions with no schema (0.3.1, 0.4.1). The text is not
        parsed.
    MetadataParseError
        If the text is malformed, is not a SICD document of ``version``,
        lacks a mandatory section or holds an unconvertible value.
    """
    schema = _schema_for(version)

    try:
        root = ET.fromstring(metadata_text)
    except ET.ParseError as e:
        raise MetadataParseError(
            f"malformed XML: {e}", version=version, cause=e,
        ) from e

    ns, local = split_tag(root.tag)
    if local != 'SICD':
        raise MetadataParseError(
            f"root element is {local!r}, expected 'SICD'", version=version,
        )
    try:
        declared = resolve_version(ns)
    except VersionError:
        declared = None
    if declared is not version:
        raise MetadataParseError(
            f"root namespace {ns!r} does not match {version.urn!r}",
            version=version,
        )

    missing = [s for s in _REQUIRED_SECTIONS if root.find('{*}' + s) is None]
    missing += [
        f for f in _REQUIRED_FIELDS
        if root.findtext('{*}' + f.replace('/', '/{*}')) is None
    ]
    if missing:
        raise MetadataParseError(
            f"missing required element(s): {', '.join(missing)}",
            version=version,
        )

    try:
        content = schema.reader(root)
    except (ValueError, TypeError, IndexError) as e:
        raise MetadataParseError(
            f"invalid value: {e}", version=version, cause=e,
        ) from e

    logger.debug("Parsed SICD %s metadata as %s",
                 version.value, type(content).__name__)
    return SICDMeta(version=version, content=content)
