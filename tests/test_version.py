import pytest

from mspot.version import Version


def test_string_form():
    assert str(Version(1, 2, 3)) == "1.2.3"


@pytest.mark.parametrize("parts", [(0, 0, 0), (1, 2, 3), (255, 255, 65535), (7, 0, 300)])
def test_string_round_trip(parts):
    v = Version(*parts)
    assert tuple(int(p) for p in str(v).split(".")) == parts


@pytest.mark.parametrize("parts", [(0, 0, 0), (1, 2, 3), (255, 255, 65535), (3, 9, 1024)])
def test_packed_value_decomposes(parts):
    v = Version(*parts)
    assert v.value >> 24 == v.major
    assert (v.value >> 16) & 0xFF == v.minor
    assert v.value & 0xFFFF == v.revision


def test_ordering_and_equality():
    assert Version(1, 2, 3) == Version(1, 2, 3)
    assert Version(1, 2, 3) < Version(1, 3, 0)
    assert Version(2, 0, 0) > Version(1, 255, 65535)
    assert (Version(1, 2, 3) < Version(1, 3, 0)) == (
        Version(1, 2, 3).value < Version(1, 3, 0).value
    )


@pytest.mark.parametrize("parts", [(256, 0, 0), (0, 256, 0), (0, 0, 65536), (-1, 0, 0)])
def test_out_of_range_rejected(parts):
    with pytest.raises(ValueError):
        Version(*parts)