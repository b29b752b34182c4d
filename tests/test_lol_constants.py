import pytest

from golio.lol_constants import (
    ENDPOINT_GET_CHAMPION_MASTERY,
    ENDPOINT_GET_LEAGUES,
    Division,
    Queue,
    Tier,
)


@pytest.mark.parametrize("enum", [Queue, Tier, Division])
def test_members_round_trip_through_value(enum):
    for member in enum:
        assert enum(member.value) is member
        assert str(member) == member.value


def test_queue_values_fixed_by_api():
    assert Queue("RANKED_SOLO_5x5") is Queue.RANKED_SOLO
    values = ["RANKED_SOLO_5x5", "RANKED_FLEX_SR", "RANKED_FLEX_TT"]
    assert [Queue(value) for value in values] == list(Queue)


def test_tier_order():
    values = ["IRON", "BRONZE", "SILVER", "GOLD", "PLATINUM", "DIAMOND"]
    assert [Tier(value) for value in values] == list(Tier)


def test_division_order():
    values = ["I", "II", "III", "IV"]
    assert [Division(value) for value in values] == list(Division)


def test_unknown_value_rejected():
    with pytest.raises(ValueError):
        Tier("CHALLENGER")


def test_enum_members_format_into_endpoints():
    endpoint = ENDPOINT_GET_LEAGUES.format(Queue.RANKED_SOLO, Tier.GOLD, Division.ONE)
    assert endpoint.endswith("/entries/RANKED_SOLO_5x5/GOLD/I")
    assert endpoint.startswith("/lol/league/v4")


def test_mastery_endpoint_takes_two_ids():
    endpoint = ENDPOINT_GET_CHAMPION_MASTERY.format("sid", "cid")
    assert endpoint.endswith("/by-summoner/sid/by-champion/cid")