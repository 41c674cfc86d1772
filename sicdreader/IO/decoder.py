# -*- coding: utf-8 -*-
"""
Complex Image Decoder - Raw SICD pixel bytes to a complex64 array.

SICD ``RE32F_IM32F`` pixels are 8 bytes each: a big-endian IEEE-754
float32 real part followed by a big-endian float32 imaginary part,
stored row-major. ``decode_complex_image`` views the buffer through an
8-byte record dtype with two big-endian float fields, then copies the
fields into a freshly allocated native ``complex64`` array. Large
images are split into disjoint row blocks and decoded on a thread pool;
each output cell depends only on its own 8 input bytes, so the result
does not depend on how the rows are split.

Dependencies
------------
numpy

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
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Tuple, Union

# Third-party
import numpy as np

# sicdreader internal
from sicdreader.exceptions import ShapeMismatchError

logger = logging.getLogger(__name__)

#: Bytes per complex sample: two big-endian float32 values.
BYTES_PER_SAMPLE = 8

#: Images with fewer samples than this are decoded on the calling thread.
PARALLEL_MIN_SAMPLES = 1 << 20

_SAMPLE_DTYPE = np.dtype([('re', '>f4'), ('im', '>f4')])

BufferLike = Union[bytes, bytearray, memoryview]


class DecodedImage:
    """Complex image decoded from one SICD image segment.

    Owns a read-only ``complex64`` array of shape ``(rows, cols)``; it
    keeps no reference to the bytes it was decoded from.

    Parameters
    ----------
    array : np.ndarray
        2D ``complex64`` array.
    segment : int, optional
        Index of the source image segment in the container.

    Examples
    --------
    >>> img = decode_complex_image(buf, rows=2, cols=2)
    >>> img.shape
    (2, 2)
    >>> img[0, 1]
    (3+4j)
    """

    def __init__(self, array: np.ndarray, segment: Optional[int] = None) -> None:
        if array.ndim != 2:
            raise ValueError(
                f"DecodedImage requires a 2D array, got {array.ndim}D"
            )
        self._array = array
        self.segment = segment

    @property
    def array(self) -> np.ndarray:
        """The decoded ``(rows, cols)`` complex64 array (read-only)."""
        return self._array

    @property
    def rows(self) -> int:
        return self._array.shape[0]

    @property
    def cols(self) -> int:
        return self._array.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self._array.shape

    @property
    def dtype(self) -> np.dtype:
        return self._array.dtype

    def __getitem__(self, key):
        return self._array[key]

    def __repr__(self) -> str:
        return (f"DecodedImage(segment={self.segment}, "
                f"shape={self.shape}, dtype={self.dtype})")


def _row_blocks(
    rows: int, cols: int, max_workers: Optional[int],
) -> List[Tuple[int, int]]:
    """Split ``range(rows)`` into contiguous ``(start, stop)`` blocks."""
    if max_workers is None:
        max_workers = os.cpu_count() or 1
    if max_workers < 1:
        raise ValueError(f"max_workers must be >= 1, got {max_workers}")
    if max_workers == 1 or rows < 2 or rows * cols < PARALLEL_MIN_SAMPLES:
        return [(0, rows)]
    n_blocks = min(max_workers, rows)
    edges = np.linspace(0, rows, n_blocks + 1).astype(int)
    return [(int(a), int(b)) for a, b in zip(edges[:-1], edges[1:])]


def _decode_rows(
    samples: np.ndarray, out: np.ndarray, start: int, stop: int,
) -> None:
    """Decode rows ``start:stop`` of ``samples`` into the same rows of ``out``."""
    block = out[start:stop]
    src = samples[start:stop]
    block.real = src['re']
    block.imag = src['im']


def decode_complex_image(
    buffer: BufferLike,
    rows: int,
    cols: int,
    max_workers: Optional[int] = None,
    segment: Optional[int] = None,
) -> DecodedImage:
    """Decode big-endian ``RE32F_IM32F`` bytes into a complex image.

    Parameters
    ----------
    buffer : bytes-like
        Raw pixel bytes, exactly ``rows * cols * 8`` long. Any object
        supporting the buffer protocol is accepted; it is not retained.
    rows : int
        Declared number of rows.
    cols : int
        Declared number of columns.
    max_workers : int, optional
        Upper bound on decode threads. Default is ``os.cpu_count()``;
        ``1`` decodes on the calling thread.
    segment : int, optional
        Source segment index, recorded on the result and on errors.

    Returns
    -------
    DecodedImage
        Newly allocated ``(rows, cols)`` complex64 image.

    Raises
    ------
    ValueError
        If ``rows`` or ``cols`` is negative, or ``max_workers < 1``.
    ShapeMismatchError
        If the buffer length is not ``rows * cols * 8``. Nothing is
        decoded.
    """
    if rows < 0 or cols < 0:
        raise ValueError(
            f"Image dimensions must be non-negative, got ({rows}, {cols})"
        )

    expected = rows * cols * BYTES_PER_SAMPLE
    actual = memoryview(buffer).nbytes
    if actual != expected:
        raise ShapeMismatchError(expected, actual, segment=segment)

    out = np.empty((rows, cols), dtype=np.complex64)
    if expected == 0:
        out.flags.writeable = False
        return DecodedImage(out, segment=segment)

    samples = np.frombuffer(
        buffer, dtype=_SAMPLE_DTYPE, count=rows * cols,
    ).reshape(rows, cols)

    blocks = _row_blocks(rows, cols, max_workers)
    if len(blocks) == 1:
        _decode_rows(samples, out, 0, rows)
    else:
        logger.debug("Decoding %dx%d image in %d row blocks",
                     rows, cols, len(blocks))
        with ThreadPoolExecutor(max_workers=len(blocks)) as pool:
            futures = [
                pool.submit(_decode_rows, samples, out, start, stop)
                for start, stop in blocks
            ]
            for future in futures:
                future.result()

    out.flags.writeable = False
    return DecodedImage(out, segment=segment)
