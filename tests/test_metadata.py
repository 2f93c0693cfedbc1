"""Tests for page metadata and the per-set page sequence."""
import pytest

from qrstamp.errors import InvalidPageCount, QRStampError
from qrstamp.metadata import Metadata, MetadataSequence


def test_sequence_yields_every_page_in_order():
    seq = MetadataSequence(Metadata(5, 3))
    assert list(seq) == [Metadata(5, 1), Metadata(5, 2), Metadata(5, 3)]


def test_sequence_is_not_restartable():
    seq = MetadataSequence(Metadata(5, 3))
    assert len(list(seq)) == 3
    assert list(seq) == []
    with pytest.raises(StopIteration):
        next(seq)
    # a fresh sequence from the same terminal value iterates again
    assert len(list(MetadataSequence(Metadata(5, 3)))) == 3


def test_sequence_is_lazy_and_tracks_remaining():
    seq = MetadataSequence(Metadata(1, 255))
    assert iter(seq) is seq
    assert seq.remaining == 255
    assert next(seq) == Metadata(1, 1)
    assert seq.remaining == 254


def test_single_page_set():
    assert list(MetadataSequence(Metadata(0, 1))) == [Metadata(0, 1)]


def test_page_zero_is_invalid():
    with pytest.raises(InvalidPageCount):
        MetadataSequence(Metadata(5, 0))


def test_invalid_page_count_is_a_value_error():
    with pytest.raises(ValueError):
        Metadata(5, 0)
    assert issubclass(InvalidPageCount, QRStampError)


@pytest.mark.parametrize("set_id,page", [(-1, 1), (256, 1), (0, 256), (0, -3)])
def test_fields_must_fit_in_a_byte(set_id, page):
    with pytest.raises(ValueError):
        Metadata(set_id, page)


def test_string_form():
    assert str(Metadata(0, 1)) == "0-1"
    assert str(Metadata(12, 34)) == "12-34"


def test_metadata_is_immutable():
    m = Metadata(1, 2)
    with pytest.raises(AttributeError):
        m.page = 3  # type: ignore[misc]


@pytest.mark.parametrize("set_id,page", [(1.0, 2), (1, 2.0), (True, 1), (1, True), ("1", 2)])
def test_fields_must_be_plain_ints(set_id, page):
    with pytest.raises(ValueError):
        Metadata(set_id, page)
