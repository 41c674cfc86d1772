# -*- coding: utf-8 -*-
"""
SICD Version Resolution - Map a metadata namespace to a ``SICDVersion``.

A SICD XML document declares its schema version only through the
namespace of its root element (``urn:SICD:1.3.0``). ``extract_namespace``
pulls that namespace out of the raw text, ``resolve_version`` maps it
onto the closed set of known versions.

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
from typing import Dict, Tuple
import xml.etree.ElementTree as ET

# sicdreader internal
from sicdreader.exceptions import MetadataParseError, VersionError
from sicdreader.vocabulary import SICD_URN_PREFIX, SICDVersion

_VERSIONS_BY_STRING: Dict[str, SICDVersion] = {
    v.value: v for v in SICDVersion
}


def split_tag(tag: str) -> Tuple[str, str]:
    """Split an ElementTree tag ``'{ns}Local'`` into ``(ns, 'Local')``.

    Tags without a namespace give ``('', tag)``.
    """
    if tag.startswith('{'):
        ns, _, local = tag[1:].partition('}')
        return ns, local
    return '', tag


def extract_namespace(metadata_text: str) -> str:
    """Return the namespace URI of the metadata's root element.

    Parameters
    ----------
    metadata_text : str
        SICD XML document.

    Returns
    -------
    str
        Namespace of the root element, ``''`` if it has none.

    Raises
    ------
    MetadataParseError
        If the text is not well-formed XML or has no root element.
    """
    parser = ET.XMLPullParser(events=('start',))
    try:
        parser.feed(metadata_text)
        parser.close()
    except ET.ParseError as e:
        raise MetadataParseError(
            f"metadata is not well-formed XML: {e}", cause=e,
        ) from e
    for _event, elem in parser.read_events():
        return split_tag(elem.tag)[0]
    raise MetadataParseError("metadata holds no XML root element")


def resolve_version(namespace_token: str) -> SICDVersion:
    """Map a namespace token onto a known SICD version.

    The ``urn:SICD:`` prefix is stripped when present; the remainder
    must match one of the known version strings exactly.

    Parameters
    ----------
    namespace_token : str
        Namespace of the SICD root element, e.g. ``'urn:SICD:1.2.1'``.
        A bare version string (``'1.2.1'``) is also accepted.

    Returns
    -------
    SICDVersion

    Raises
    ------
    VersionError
        If the token names no known version. The error's ``token`` is
        the input, unmodified.

    Examples
    --------
    >>> resolve_version('urn:SICD:1.3.0')
    <SICDVersion.V1_3_0: '1.3.0'>
    """
    key = namespace_token
    if key.startswith(SICD_URN_PREFIX):
        key = key[len(SICD_URN_PREFIX):]
    try:
        return _VERSIONS_BY_STRING[key]
    except KeyError:
        raise VersionError(namespace_token) from None


def resolve_metadata_version(metadata_text: str) -> SICDVersion:
    """Resolve the SICD version declared by a metadata document."""
    return resolve_version(extract_namespace(metadata_text))
