# -*- coding: utf-8 -*-
"""
Product Tests - Assembly of SICD products from containers.

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

# Third-party
import numpy as np
import pytest

# sicdreader internal
from sicdreader.exceptions import (
    MetadataParseError,
    MissingSegmentError,
    ShapeMismatchError,
    SICDError,
    UnimplementedVersionError,
    UnsupportedPixelTypeError,
    VersionError,
)
from sicdreader.vocabulary import SICDVersion
from sicdreader.IO.models import SICD040Metadata, SICDMetadata
from sicdreader.IO.product import SICDProduct, assemble, read


def _segment(encode, rows, cols, start=0):
    values = [complex(start + i, -(start + i)) for i in range(rows * cols)]
    return rows, cols, encode(values)


@pytest.fixture
def three_segment_container(sicd_xml, encode, memory_container):
    """1.2.1 product with three 2x3 image segments."""
    segments = [_segment(encode, 2, 3, start=10 * k) for k in range(3)]
    return memory_container(sicd_xml('1.2.1', rows=6, cols=3), segments)


# ---------------------------------------------------------------------------
# assemble
# ---------------------------------------------------------------------------

def test_assemble_three_segments(three_segment_container):
    """Every segment is decoded, in container order."""
    product = assemble(three_segment_container)

    assert product.version is SICDVersion.V1_2_1
    assert product.num_images == 3
    assert three_segment_container.reads == [0, 1, 2]
    for k, img in enumerate(product.images):
        assert img.segment == k
        assert img.shape == (2, 3)
        assert img[0, 0] == complex(10 * k, -10 * k)
    assert type(product.get_v1_meta()) is SICDMetadata
    assert product.get_meta(SICDVersion.V0_4_0) is None
    assert product.get_meta(SICDVersion.V1_2_1) is product.meta.content


def test_assemble_single_threaded_matches(three_segment_container):
    a = assemble(three_segment_container, max_workers=1)
    b = assemble(three_segment_container, max_workers=4)
    np.testing.assert_array_equal(a.read_full(), b.read_full())


def test_assemble_legacy(sicd_xml, encode, memory_container):
    container = memory_container(
        sicd_xml('0.4.0', rows=1, cols=2), [_segment(encode, 1, 2)],
    )
    product = assemble(container)
    assert type(product.get_v0_4_0_meta()) is SICD040Metadata
    assert product.get_v1_meta() is None
    assert product.get_v0_5_0_meta() is None


def test_unknown_namespace(sicd_xml, encode, memory_container):
    container = memory_container(
        sicd_xml(namespace='urn:SICD:9.9.9'), [_segment(encode, 2, 2)],
    )
    with pytest.raises(VersionError) as exc_info:
        assemble(container)
    assert exc_info.value.token == 'urn:SICD:9.9.9'
    assert container.reads == []


def test_unimplemented_version(sicd_xml, encode, memory_container):
    container = memory_container(sicd_xml('0.3.1'), [_segment(encode, 2, 2)])
    with pytest.raises(UnimplementedVersionError):
        assemble(container)


def test_missing_metadata(encode, memory_container):
    container = memory_container(None, [_segment(encode, 2, 2)])
    with pytest.raises(MissingSegmentError) as exc_info:
        assemble(container)
    assert exc_info.value.segment_type == 'metadata'


def test_no_image_segments(sicd_xml, memory_container):
    with pytest.raises(MissingSegmentError) as exc_info:
        assemble(memory_container(sicd_xml(), []))
    assert exc_info.value.segment_type == 'image'


def test_declared_segment_absent(sicd_xml, encode, memory_container):
    """A declared but unreadable segment fails the whole assembly."""
    container = memory_container(
        sicd_xml(), [_segment(encode, 2, 2)], declared_images=2,
    )
    with pytest.raises(MissingSegmentError) as exc_info:
        assemble(container)
    assert exc_info.value.index == 1


def test_shape_mismatch_reports_segment(sicd_xml, encode, memory_container):
    rows, cols, data = _segment(encode, 2, 2)
    container = memory_container(
        sicd_xml(), [(rows, cols, data), (rows, cols, data[:-8])],
    )
    with pytest.raises(ShapeMismatchError) as exc_info:
        assemble(container)
    assert exc_info.value.segment == 1
    assert exc_info.value.expected == 32
    assert exc_info.value.actual == 24


@pytest.mark.parametrize("pixel_type", ['RE16I_IM16I', 'AMP8I_PHS8I'])
def test_unsupported_pixel_type(sicd_xml, encode, memory_container,
                                pixel_type):
    container = memory_container(
        sicd_xml(pixel_type=pixel_type), [_segment(encode, 2, 2)],
    )
    with pytest.raises(UnsupportedPixelTypeError) as exc_info:
        assemble(container)
    assert exc_info.value.pixel_type == pixel_type
    assert container.reads == []


def test_bad_metadata(encode, memory_container):
    container = memory_container(
        '<SICD xmlns="urn:SICD:1.0.0"></SICD>', [_segment(encode, 2, 2)],
    )
    with pytest.raises(MetadataParseError):
        assemble(container)


def test_errors_are_sicd_errors(sicd_xml, memory_container):
    with pytest.raises(SICDError):
        assemble(memory_container(sicd_xml(), []))


# ---------------------------------------------------------------------------
# read
# ---------------------------------------------------------------------------

def test_read_accepts_container(three_segment_container):
    product = read(three_segment_container, max_workers=1)
    assert isinstance(product, SICDProduct)
    assert product.container is three_segment_container


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read(tmp_path / 'absent.nitf')


# ---------------------------------------------------------------------------
# SICDProduct pixel access
# ---------------------------------------------------------------------------

class TestSICDProduct:
    """Tests for full-image and chip reads."""

    def test_shape_and_dtype(self, three_segment_container):
        product = assemble(three_segment_container)
        assert product.get_shape() == (6, 3)
        assert product.get_dtype() == np.complex64

    def test_read_full_stacks_rows(self, three_segment_container):
        full = assemble(three_segment_container).read_full()
        assert full.shape == (6, 3)
        assert full[2, 0] == complex(10, -10)
        assert full[5, 2] == complex(25, -25)

    def test_read_full_single_segment_is_read_only(
        self, sicd_xml, encode, memory_container,
    ):
        product = assemble(memory_container(
            sicd_xml(), [_segment(encode, 2, 2)],
        ))
        full = product.read_full()
        assert full is product.images[0].array
        assert not full.flags.writeable

    def test_read_chip_spans_segments(self, three_segment_container):
        product = assemble(three_segment_container)
        chip = product.read_chip(1, 4, 1, 3)
        np.testing.assert_array_equal(chip, product.read_full()[1:4, 1:3])

    def test_read_chip_empty(self, three_segment_container):
        chip = assemble(three_segment_container).read_chip(2, 2, 0, 3)
        assert chip.shape == (0, 3)

    @pytest.mark.parametrize("bounds,msg", [
        ((-1, 2, 0, 2), "non-negative"),
        ((0, 7, 0, 2), "exceed"),
        ((0, 2, 0, 4), "exceed"),
        ((3, 2, 0, 2), "must not precede"),
    ])
    def test_read_chip_bounds(self, three_segment_container, bounds, msg):
        product = assemble(three_segment_container)
        with pytest.raises(ValueError, match=msg):
            product.read_chip(*bounds)

    def test_mixed_column_counts(self, sicd_xml, encode, memory_container):
        product = assemble(memory_container(
            sicd_xml(), [_segment(encode, 1, 2), _segment(encode, 1, 3)],
        ))
        with pytest.raises(ValueError, match="column counts"):
            product.get_shape()
        assert product.images[1].shape == (1, 3)

    def test_context_manager_closes(self, three_segment_container):
        with assemble(three_segment_container) as product:
            assert not three_segment_container.closed
        assert three_segment_container.closed
        assert 'version=1.2.1' in repr(product)
