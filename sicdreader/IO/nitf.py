# -*- coding: utf-8 -*-
"""
NITF Container - SICD container backed by a NITF file.

Frames the NITF with jbpy (the NITF parser under sarkit) as primary
backend and sarpy's ``NITFDetails`` as fallback. Only segment framing
is taken from the backend: the first Data Extension Segment is returned
as metadata text, image segments as raw bytes with their header
``NROWS``/``NCOLS``. Pixel decoding and metadata parsing happen in this
package.

Dependencies
------------
jbpy (primary) or sarpy (fallback)

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
import os
from pathlib import Path
from typing import BinaryIO, Optional, Tuple, Union

# sicdreader internal
from sicdreader.exceptions import (
    ContainerError,
    MetadataParseError,
    MissingSegmentError,
)
from sicdreader.IO.base import ImageSegment, SICDContainer
from sicdreader.IO._backend import require_nitf_backend

logger = logging.getLogger(__name__)


class NITFContainer(SICDContainer):
    """SICD container read from a NITF file.

    Parameters
    ----------
    source : str, Path or binary file object
        Path to the NITF file, or an open binary file positioned
        anywhere. A file object passed in is not closed by ``close()``.
    backend : str, optional
        ``'jbpy'`` or ``'sarpy'``. Default picks the best installed.

    Attributes
    ----------
    filepath : Path or None
        Path of the file, None when built from a file object.
    backend : str
        Active backend.

    Raises
    ------
    FileNotFoundError
        If ``source`` is a path that does not exist.
    DependencyError
        If no usable backend is installed.
    ContainerError
        If the backend cannot parse the file as NITF.

    Examples
    --------
    >>> with NITFContainer('image.nitf') as container:
    ...     text = container.read_metadata_text()
    ...     first = container.read_image_segment(0)
    """

    def __init__(
        self,
        source: Union[str, Path, BinaryIO],
        backend: Optional[str] = None,
    ) -> None:
        if isinstance(source, (str, Path)):
            self.filepath: Optional[Path] = Path(source)
            if not self.filepath.exists():
                raise FileNotFoundError(f"File not found: {self.filepath}")
        else:
            self.filepath = None

        self.backend = require_nitf_backend(backend)

        self._owns_file = self.filepath is not None
        self._file: Optional[BinaryIO] = (
            open(self.filepath, 'rb') if self._owns_file else source
        )
        try:
            if self.backend == 'jbpy':
                self._load_jbpy()
            else:
                self._load_sarpy()
        except Exception as e:
            self.close()
            raise ContainerError(
                f"Failed to parse NITF container "
                f"{self.filepath or '<file object>'}: {e}"
            ) from e
        logger.debug("Opened NITF container with %s backend, %d image "
                     "segment(s)", self.backend, self._num_images)

    # -----------------------------------------------------------------
    # Backend loading
    # -----------------------------------------------------------------

    def _load_jbpy(self) -> None:
        import jbpy

        self._jbp = jbpy.Jbp()
        self._jbp.load(self._file)
        self._num_images = int(self._jbp['FileHeader']['NUMI'].value)

    def _load_sarpy(self) -> None:
        from sarpy.io.general.nitf import NITFDetails

        self._details = NITFDetails(self._file)
        self._num_images = int(
            self._details.nitf_header.ImageSegments.subhead_sizes.size
        )

    # -----------------------------------------------------------------
    # Raw access
    # -----------------------------------------------------------------

    def _read_span(self, offset: int, size: int) -> bytes:
        self._file.seek(int(offset), os.SEEK_SET)
        return self._file.read(int(size))

    def _metadata_payload(self) -> bytes:
        """Raw bytes of the first DES payload."""
        if self.backend == 'jbpy':
            desegs = self._jbp['DataExtensionSegments']
            if len(desegs) == 0:
                raise MissingSegmentError('metadata')
            desdata = desegs[0]['DESDATA']
            return self._read_span(desdata.get_offset(), desdata.size)
        offsets = self._details.des_subheader_offsets
        if offsets is None or offsets.size == 0:
            raise MissingSegmentError('metadata')
        return self._details.get_des_bytes(0)

    def _image_span(self, index: int) -> Tuple[int, int, int, int]:
        """``(rows, cols, offset, size)`` of image segment ``index``."""
        if self.backend == 'jbpy':
            imseg = self._jbp['ImageSegments'][index]
            sub = imseg['subheader']
            data = imseg['Data']
            return (int(sub['NROWS'].value), int(sub['NCOLS'].value),
                    data.get_offset(), data.size)
        header = self._details.img_headers[index]
        return (int(header.NROWS), int(header.NCOLS),
                self._details.img_segment_offsets[index],
                self._details.nitf_header.ImageSegments.item_sizes[index])

    # -----------------------------------------------------------------
    # SICDContainer interface
    # -----------------------------------------------------------------

    def read_metadata_text(self) -> str:
        """Payload of the first Data Extension Segment, UTF-8 decoded.

        Raises
        ------
        MissingSegmentError
            If the file has no Data Extension Segment.
        MetadataParseError
            If the payload is not valid UTF-8.
        """
        payload = self._metadata_payload()
        try:
            return payload.decode('utf-8').rstrip('\x00')
        except UnicodeDecodeError as e:
            raise MetadataParseError(
                f"metadata segment is not UTF-8 text: {e}", cause=e,
            ) from e

    @property
    def num_images(self) -> int:
        """``NUMI`` from the NITF file header."""
        return self._num_images

    def read_image_segment(self, index: int) -> ImageSegment:
        """Header dimensions and raw bytes of image segment ``index``."""
        if not 0 <= index < self._num_images:
            raise MissingSegmentError('image', index)
        rows, cols, offset, size = self._image_span(index)
        return ImageSegment(
            index=index,
            rows=rows,
            cols=cols,
            data=self._read_span(offset, size),
        )

    def close(self) -> None:
        """Close the file if this container opened it."""
        if self._owns_file and getattr(self, '_file', None) is not None:
            self._file.close()
            self._file = None
