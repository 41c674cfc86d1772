# -*- coding: utf-8 -*-
"""
Shared test fixtures - Synthetic SICD XML, pixel buffers and containers.

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
import struct
from typing import List, Optional, Sequence, Tuple

# Third-party
import pytest

# sicdreader internal
from sicdreader.exceptions import MissingSegmentError
from sicdreader.IO.base import ImageSegment, SICDContainer


_V1_GRID = """
  <Grid>
    <ImagePlane>SLANT</ImagePlane>
    <Type>RGAZIM</Type>
    <Row>
      <SS>0.5</SS>
      <Sgn>-1</Sgn>
      <WgtType>
        <WindowName>TAYLOR</WindowName>
        <Parameter name="NBAR">4</Parameter>
      </WgtType>
    </Row>
  </Grid>"""

_LEGACY_GRID = """
  <Grid>
    <ImagePlane>SLANT</ImagePlane>
    <Type>RGAZIM</Type>
    <Row>
      <SS>0.5</SS>
      <Sgn>-1</Sgn>
      <WgtType>TAYLOR,4,-35</WgtType>
    </Row>
  </Grid>"""


def build_sicd_xml(
    version: str = '1.3.0',
    rows: int = 2,
    cols: int = 2,
    pixel_type: str = 'RE32F_IM32F',
    body: Optional[str] = None,
    namespace: Optional[str] = None,
) -> str:
    """Minimal SICD document with the mandatory sections."""
    if namespace is None:
        namespace = f'urn:SICD:{version}'
    if body is None:
        body = _V1_GRID if version.startswith('1.') else _LEGACY_GRID
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<SICD xmlns="{namespace}">
  <CollectionInfo>
    <CollectorName>SYNTH</CollectorName>
    <CoreName>CORE_001</CoreName>
    <CollectType>MONOSTATIC</CollectType>
    <RadarMode>
      <ModeType>SPOTLIGHT</ModeType>
    </RadarMode>
    <Classification>UNCLASSIFIED</Classification>
  </CollectionInfo>
  <ImageData>
    <PixelType>{pixel_type}</PixelType>
    <NumRows>{rows}</NumRows>
    <NumCols>{cols}</NumCols>
    <FirstRow>0</FirstRow>
    <FirstCol>0</FirstCol>
    <FullImage>
      <NumRows>{rows}</NumRows>
      <NumCols>{cols}</NumCols>
    </FullImage>
  </ImageData>
  <GeoData>
    <EarthModel>WGS_84</EarthModel>
    <SCP>
      <ECF><X>6378137.0</X><Y>0.0</Y><Z>0.0</Z></ECF>
      <LLH><Lat>0.0</Lat><Lon>0.0</Lon><HAE>0.0</HAE></LLH>
    </SCP>
  </GeoData>{body}
</SICD>
"""


def encode_complex(values: Sequence[complex]) -> bytes:
    """Big-endian float32 (real, imag) pairs, written with ``struct``."""
    return b''.join(
        struct.pack('>ff', v.real, v.imag) for v in values
    )


class MemoryContainer(SICDContainer):
    """In-memory container for assembly tests.

    Parameters
    ----------
    metadata_text : str, optional
        None simulates a container without a metadata segment.
    segments : list of (rows, cols, data)
    declared_images : int, optional
        Overrides the declared image count.
    """

    def __init__(
        self,
        metadata_text: Optional[str],
        segments: List[Tuple[int, int, bytes]],
        declared_images: Optional[int] = None,
    ) -> None:
        self._text = metadata_text
        self._segments = segments
        self._declared = (len(segments) if declared_images is None
                          else declared_images)
        self.reads: List[int] = []
        self.closed = False

    def read_metadata_text(self) -> str:
        if self._text is None:
            raise MissingSegmentError('metadata')
        return self._text

    @property
    def num_images(self) -> int:
        return self._declared

    def read_image_segment(self, index: int) -> ImageSegment:
        if not 0 <= index < len(self._segments):
            raise MissingSegmentError('image', index)
        self.reads.append(index)
        rows, cols, data = self._segments[index]
        return ImageSegment(index=index, rows=rows, cols=cols, data=data)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def sicd_xml():
    """Factory for synthetic SICD XML documents."""
    return build_sicd_xml


@pytest.fixture
def encode():
    """Encoder for big-endian complex sample buffers."""
    return encode_complex


@pytest.fixture
def memory_container():
    """Factory for in-memory containers."""
    return MemoryContainer
