# -*- coding: utf-8 -*-
"""
IO Base Classes - Abstract interface to a SICD container.

A SICD product lives inside a container (NITF) that frames one metadata
segment and one or more image segments. ``SICDContainer`` is the
interface the product assembler reads through: metadata text, the
declared image-segment count and, per segment, the raw pixel bytes with
their declared dimensions. Framing, header parsing and file handles are
the concrete container's business.

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

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class ImageSegment:
    """One image segment as delivered by a container.

    Parameters
    ----------
    index : int
        Position of the segment in the container.
    rows : int
        ``NROWS`` declared by the segment header.
    cols : int
        ``NCOLS`` declared by the segment header.
    data : bytes
        Raw pixel bytes of the segment.
    """

    index: int
    rows: int
    cols: int
    data: bytes

    def __repr__(self) -> str:
        return (f"ImageSegment(index={self.index}, rows={self.rows}, "
                f"cols={self.cols}, nbytes={len(self.data)})")


class SICDContainer(ABC):
    """
    Abstract base class for containers that carry a SICD product.

    Concrete implementations wrap a specific container format and must
    deliver the metadata text and image segments in stored order.

    Notes
    -----
    Image segments are requested one at a time so the assembler can
    release each segment's bytes once decoded.
    """

    @abstractmethod
    def read_metadata_text(self) -> str:
        """
        Payload of the designated metadata segment, as text.

        Returns
        -------
        str
            SICD XML document.

        Raises
        ------
        MissingSegmentError
            If the container holds no metadata segment.
        MetadataParseError
            If the payload cannot be decoded as text.
        """
        pass

    @property
    @abstractmethod
    def num_images(self) -> int:
        """Declared number of image segments."""
        pass

    @abstractmethod
    def read_image_segment(self, index: int) -> ImageSegment:
        """
        Read one image segment.

        Parameters
        ----------
        index : int
            Segment index, ``0 <= index < num_images``.

        Returns
        -------
        ImageSegment

        Raises
        ------
        MissingSegmentError
            If the segment is not present.
        """
        pass

    def close(self) -> None:
        """
        Close the container and release resources.

        Default implementation does nothing. Override if the container
        maintains open file handles.
        """
        pass

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
        return False
