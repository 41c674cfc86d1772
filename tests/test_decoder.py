# -*- coding: utf-8 -*-
"""
Decoder Tests - Unit tests for decode_complex_image and DecodedImage.

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
from unittest import mock

# Third-party
import numpy as np
import pytest

# sicdreader internal
from sicdreader.exceptions import SICDError, ShapeMismatchError
from sicdreader.IO import decoder
from sicdreader.IO.decoder import DecodedImage, decode_complex_image


def test_two_by_two_round_trip(encode):
    """Four encoded values decode to their row-major positions."""
    values = [1.5 - 2.0j, 3.0 + 4.0j, -0.25 + 0.0j, 0.0 - 1e6j]
    img = decode_complex_image(encode(values), rows=2, cols=2)

    assert img.shape == (2, 2)
    assert img.dtype == np.complex64
    assert img[0, 0] == values[0]
    assert img[0, 1] == values[1]
    assert img[1, 0] == values[2]
    assert img[1, 1] == values[3]


def test_non_square_row_major(encode):
    """Samples fill rows first."""
    values = [complex(i, -i) for i in range(6)]
    img = decode_complex_image(encode(values), rows=2, cols=3)
    expected = np.array(values, dtype=np.complex64).reshape(2, 3)
    np.testing.assert_array_equal(img.array, expected)
    assert img.rows == 2
    assert img.cols == 3


def test_special_float_values(encode):
    """inf and nan pass through unchanged."""
    img = decode_complex_image(
        encode([complex(np.inf, -np.inf), complex(np.nan, 0.0)]),
        rows=1, cols=2,
    )
    assert np.isposinf(img[0, 0].real)
    assert np.isneginf(img[0, 0].imag)
    assert np.isnan(img[0, 1].real)


def test_short_buffer_raises(encode):
    """One byte short raises ShapeMismatchError with both sizes."""
    buf = encode([1 + 1j] * 4)[:-1]
    with pytest.raises(ShapeMismatchError) as exc_info:
        decode_complex_image(buf, rows=2, cols=2)
    assert exc_info.value.expected == 32
    assert exc_info.value.actual == 31
    assert isinstance(exc_info.value, SICDError)
    assert isinstance(exc_info.value, ValueError)


def test_long_buffer_raises(encode):
    """Extra bytes are not truncated."""
    buf = encode([1 + 1j] * 5)
    with pytest.raises(ShapeMismatchError, match="expected 32"):
        decode_complex_image(buf, rows=2, cols=2)


def test_segment_index_on_error():
    """Segment index is carried on the error."""
    with pytest.raises(ShapeMismatchError) as exc_info:
        decode_complex_image(b'\x00' * 7, rows=1, cols=1, segment=3)
    assert exc_info.value.segment == 3
    assert "segment 3" in str(exc_info.value)


def test_negative_dims_raise():
    """Negative dimensions raise ValueError."""
    with pytest.raises(ValueError, match="non-negative"):
        decode_complex_image(b'', rows=-1, cols=0)


def test_empty_image():
    """Zero rows with an empty buffer yields an empty image."""
    img = decode_complex_image(b'', rows=0, cols=5)
    assert img.shape == (0, 5)


def test_accepts_bytearray_and_memoryview(encode):
    """Any buffer-protocol object is accepted."""
    raw = encode([2 + 3j, 4 - 5j])
    a = decode_complex_image(bytearray(raw), rows=1, cols=2)
    b = decode_complex_image(memoryview(raw), rows=1, cols=2)
    np.testing.assert_array_equal(a.array, b.array)


def test_output_owns_fresh_array(encode):
    """Result does not alias the source buffer and is read-only."""
    raw = bytearray(encode([1 + 2j] * 4))
    img = decode_complex_image(raw, rows=2, cols=2)
    raw[:] = b'\x00' * len(raw)
    assert img[0, 0] == 1 + 2j
    assert img.array.flags.owndata
    assert not img.array.flags.writeable
    with pytest.raises(ValueError):
        img.array[0, 0] = 0


def test_decode_deterministic_across_worker_counts():
    """Parallel row-block decoding matches single-threaded decoding."""
    rng = np.random.default_rng(7)
    rows, cols = 37, 11
    values = (rng.standard_normal(rows * cols)
              + 1j * rng.standard_normal(rows * cols)).astype(np.complex64)
    raw = values.astype('>c8').tobytes()

    serial = decode_complex_image(raw, rows, cols, max_workers=1)
    with mock.patch.object(decoder, 'PARALLEL_MIN_SAMPLES', 0):
        for workers in (2, 3, 8, 64):
            parallel = decode_complex_image(raw, rows, cols,
                                            max_workers=workers)
            np.testing.assert_array_equal(parallel.array, serial.array)

    np.testing.assert_array_equal(serial.array, values.reshape(rows, cols))


def test_row_blocks_cover_rows_disjointly():
    """Row blocks tile the image with no gaps or overlap."""
    with mock.patch.object(decoder, 'PARALLEL_MIN_SAMPLES', 0):
        blocks = decoder._row_blocks(10, 4, max_workers=3)
    assert blocks[0][0] == 0
    assert blocks[-1][1] == 10
    for (_, stop), (start, _) in zip(blocks[:-1], blocks[1:]):
        assert stop == start


def test_small_image_single_block():
    """Images below the threshold decode in one block."""
    assert decoder._row_blocks(4, 4, max_workers=8) == [(0, 4)]


def test_invalid_max_workers():
    """max_workers below 1 raises ValueError."""
    with pytest.raises(ValueError, match="max_workers"):
        decoder._row_blocks(4, 4, max_workers=0)


def test_worker_failure_propagates(encode):
    """A failing block aborts the whole decode."""
    raw = encode([1j] * 8)
    with mock.patch.object(decoder, 'PARALLEL_MIN_SAMPLES', 0), \
            mock.patch.object(decoder, '_decode_rows',
                              side_effect=RuntimeError("boom")):
        with pytest.raises(RuntimeError, match="boom"):
            decode_complex_image(raw, rows=4, cols=2, max_workers=2)


class TestDecodedImage:
    """Tests for the DecodedImage container."""

    def test_rejects_non_2d(self):
        """1D arrays are rejected."""
        with pytest.raises(ValueError, match="2D"):
            DecodedImage(np.zeros(4, dtype=np.complex64))

    def test_repr(self):
        """repr shows segment and shape."""
        img = DecodedImage(np.zeros((2, 3), dtype=np.complex64), segment=1)
        assert 'segment=1' in repr(img)
        assert '(2, 3)' in repr(img)
