import pytest

from golio.regions import Region

_IDENTIFIERS = [
    "br1",
    "eun1",
    "euw1",
    "jp1",
    "kr",
    "la1",
    "la2",
    "na1",
    "oc1",
    "tr1",
    "ru",
    "pbe1",
]


def test_all_regions_in_order():
    assert [Region(value) for value in _IDENTIFIERS] == list(Region)


def test_lookup_by_value():
    assert Region("euw1") is Region.EUROPE_WEST
    assert Region("na1") is Region.NORTH_AMERICA


def test_str_is_identifier():
    assert str(Region("kr")) == "kr"
    assert f"{Region('ru')}" == "ru"


def test_compares_equal_to_plain_string():
    assert Region("oc1") == "oc1"


def test_values_are_unique():
    regions = {Region(value) for value in _IDENTIFIERS}
    assert len(regions) == len(_IDENTIFIERS)


def test_unknown_value_rejected():
    with pytest.raises(ValueError):
        Region("nowhere")