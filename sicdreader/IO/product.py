# -*- coding: utf-8 -*-
"""
SICD Product - Assemble a container's segments into one read-only product.

``assemble`` reads the metadata text from a ``SICDContainer``, resolves
its version, dispatches it to the version's schema and decodes every
image segment in stored order. Any failure aborts the whole assembly;
a ``SICDProduct`` only exists when every step succeeded. ``read`` is
the entry point for paths and file objects.

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
from pathlib import Path
from typing import BinaryIO, List, Optional, Sequence, Tuple, Union

# Third-party
import numpy as np

# sicdreader internal
from sicdreader.exceptions import (
    MissingSegmentError,
    SICDError,
    UnsupportedPixelTypeError,
)
from sicdreader.vocabulary import PixelType, SICDVersion
from sicdreader.IO.base import SICDContainer
from sicdreader.IO.decoder import DecodedImage, decode_complex_image
from sicdreader.IO.dispatch import SchemaTarget, SICDMeta, dispatch_metadata
from sicdreader.IO.models import SICD040Metadata, SICD050Metadata, SICDMetadata
from sicdreader.IO.nitf import NITFContainer
from sicdreader.IO.version import resolve_metadata_version

logger = logging.getLogger(__name__)


class SICDProduct:
    """A fully decoded SICD product.

    Built by ``assemble``; exposes read accessors only.

    Parameters
    ----------
    container : SICDContainer
        Container the product was read from. Held so it can be closed.
    meta : SICDMeta
        Resolved version and typed metadata.
    images : Sequence[DecodedImage]
        One decoded image per image segment, in container order.

    Examples
    --------
    >>> with read('image.nitf') as product:
    ...     print(product.version)
    ...     meta = product.get_v1_meta()
    ...     chip = product.read_chip(0, 512, 0, 512)
    """

    def __init__(
        self,
        container: SICDContainer,
        meta: SICDMeta,
        images: Sequence[DecodedImage],
    ) -> None:
        self._container = container
        self._meta = meta
        self._images: Tuple[DecodedImage, ...] = tuple(images)

    # -----------------------------------------------------------------
    # Accessors
    # -----------------------------------------------------------------

    @property
    def container(self) -> SICDContainer:
        return self._container

    @property
    def version(self) -> SICDVersion:
        """Resolved SICD schema version."""
        return self._meta.version

    @property
    def meta(self) -> SICDMeta:
        """Version-tagged metadata union."""
        return self._meta

    @property
    def images(self) -> Tuple[DecodedImage, ...]:
        """Decoded images, one per image segment, in container order."""
        return self._images

    @property
    def num_images(self) -> int:
        return len(self._images)

    def get_meta(self, expected: SICDVersion) -> Optional[SchemaTarget]:
        """Typed metadata if the product is version ``expected``, else None."""
        return self._meta.get(expected)

    def get_v0_4_0_meta(self) -> Optional[SICD040Metadata]:
        return self._meta.get_v0_4_0_meta()

    def get_v0_5_0_meta(self) -> Optional[SICD050Metadata]:
        return self._meta.get_v0_5_0_meta()

    def get_v1_meta(self) -> Optional[SICDMetadata]:
        """Typed metadata for any 1.x product, else None."""
        return self._meta.get_v1_meta()

    # -----------------------------------------------------------------
    # Pixel access
    # -----------------------------------------------------------------

    def get_shape(self) -> Tuple[int, int]:
        """Shape of the full image formed by stacking all segments.

        Returns
        -------
        Tuple[int, int]
            ``(rows, cols)``.

        Raises
        ------
        ValueError
            If the segments do not share a column count.
        """
        cols = {img.cols for img in self._images}
        if len(cols) != 1:
            raise ValueError(
                f"Image segments have differing column counts {sorted(cols)}"
            )
        return (sum(img.rows for img in self._images), cols.pop())

    def get_dtype(self) -> np.dtype:
        """``complex64``, the only decoded pixel type."""
        return np.dtype('complex64')

    def read_full(self) -> np.ndarray:
        """Full image, segments stacked along rows.

        Returns
        -------
        np.ndarray
            ``(rows, cols)`` complex64 array. With a single segment this
            is that segment's read-only array, otherwise a new array.
        """
        self.get_shape()
        if len(self._images) == 1:
            return self._images[0].array
        return np.concatenate([img.array for img in self._images], axis=0)

    def read_chip(
        self,
        row_start: int,
        row_end: int,
        col_start: int,
        col_end: int,
    ) -> np.ndarray:
        """Spatial subset of the full image.

        Parameters
        ----------
        row_start : int
            Starting row index (inclusive).
        row_end : int
            Ending row index (exclusive).
        col_start : int
            Starting column index (inclusive).
        col_end : int
            Ending column index (exclusive).

        Returns
        -------
        np.ndarray
            Complex-valued chip with shape
            ``(row_end - row_start, col_end - col_start)``.

        Raises
        ------
        ValueError
            If indices are out of bounds or reversed.
        """
        rows, cols = self.get_shape()
        if row_start < 0 or col_start < 0:
            raise ValueError("Start indices must be non-negative")
        if row_end > rows or col_end > cols:
            raise ValueError("End indices exceed image dimensions")
        if row_end < row_start or col_end < col_start:
            raise ValueError("End indices must not precede start indices")

        pieces: List[np.ndarray] = []
        offset = 0
        for img in self._images:
            lo = max(row_start, offset)
            hi = min(row_end, offset + img.rows)
            if lo < hi:
                pieces.append(
                    img.array[lo - offset:hi - offset, col_start:col_end]
                )
            offset += img.rows
        if not pieces:
            return np.empty((0, col_end - col_start), dtype=np.complex64)
        return np.concatenate(pieces, axis=0)

    # -----------------------------------------------------------------
    # Resources
    # -----------------------------------------------------------------

    def close(self) -> None:
        """Close the underlying container."""
        self._container.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
        return False

    def __repr__(self) -> str:
        return (f"SICDProduct(version={self.version.value}, "
                f"images={[img.shape for img in self._images]})")


def assemble(
    container: SICDContainer,
    max_workers: Optional[int] = None,
) -> SICDProduct:
    """Build a ``SICDProduct`` from a container.

    Parameters
    ----------
    container : SICDContainer
        Source of the metadata text and image segments.
    max_workers : int, optional
        Decode threads per image, passed to ``decode_complex_image``.

    Returns
    -------
    SICDProduct
        Holds one decoded image per declared image segment.

    Raises
    ------
    MissingSegmentError
        If the metadata segment is absent or no image segment is
        declared.
    VersionError
        If the metadata namespace names no known version.
    UnimplementedVersionError
        If the version has no metadata schema.
    MetadataParseError
        If the metadata does not deserialize.
    UnsupportedPixelTypeError
        If the metadata declares a pixel type other than RE32F_IM32F.
    ShapeMismatchError
        If any segment's byte count disagrees with its dimensions.
    """
    text = container.read_metadata_text()
    version = resolve_metadata_version(text)
    logger.debug("Resolved SICD version %s", version.value)

    meta = dispatch_metadata(version, text)
    if meta.version is not version:
        raise SICDError(
            f"Dispatcher returned SICD {meta.version.value} metadata "
            f"for version {version.value}"
        )

    pixel_type = meta.content.image_data.pixel_type
    if pixel_type != PixelType.RE32F_IM32F.value:
        raise UnsupportedPixelTypeError(pixel_type)

    n_images = container.num_images
    if n_images < 1:
        raise MissingSegmentError('image')

    images: List[DecodedImage] = []
    for index in range(n_images):
        segment = container.read_image_segment(index)
        logger.debug("Decoding image segment %d/%d (%d x %d)",
                     index + 1, n_images, segment.rows, segment.cols)
        images.append(decode_complex_image(
            segment.data, segment.rows, segment.cols,
            max_workers=max_workers, segment=index,
        ))

    return SICDProduct(container, meta, images)


def read(
    source: Union[str, Path, BinaryIO, SICDContainer],
    max_workers: Optional[int] = None,
    backend: Optional[str] = None,
) -> SICDProduct:
    """Read a SICD product.

    Parameters
    ----------
    source : str, Path, binary file object or SICDContainer
        NITF path or open file, or a container that is already open.
    max_workers : int, optional
        Decode threads per image.
    backend : str, optional
        NITF backend (``'jbpy'`` or ``'sarpy'``) when ``source`` is a
        path or file object.

    Returns
    -------
    SICDProduct

    Raises
    ------
    FileNotFoundError
        If ``source`` is a path that does not exist.
    SICDError
        Any assembly failure (see ``assemble``). A container opened
        here is closed before the error propagates.

    Examples
    --------
    >>> from sicdreader import read, SICDVersion
    >>> product = read('image.nitf')
    >>> product.version
    <SICDVersion.V1_3_0: '1.3.0'>
    >>> product.get_meta(SICDVersion.V0_4_0) is None
    True
    """
    if isinstance(source, SICDContainer):
        return assemble(source, max_workers=max_workers)

    container = NITFContainer(source, backend=backend)
    try:
        return assemble(container, max_workers=max_workers)
    except Exception:
        container.close()
        raise
