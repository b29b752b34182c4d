import json

import pytest

from golio.ddragon_models import (
    ChampionData,
    ChampionDataExtended,
    ChampionDataInfo,
    ChampionDataStats,
    ImageData,
    Item,
    ItemStats,
    Mastery,
    PassiveData,
    ProfileIcon,
    RecommendedItem,
    RecommendedItemData,
    RecommendedItemSet,
    SkinData,
    SpellData,
    SummonerSpell,
)


class _FakeClient:
    def __init__(self):
        self.calls = []

    def get_champion(self, name):
        self.calls.append(("champion", name))
        return ChampionDataExtended(name=name, lore="story")

    def get_item(self, item_id):
        self.calls.append(("item", item_id))
        return Item(id=item_id)


def test_empty_object_gives_zero_values():
    assert ChampionData.from_dict({}) == ChampionData()
    assert Item.from_dict({}) == Item()
    assert SummonerSpell.from_dict({}) == SummonerSpell()


def test_nested_decoding():
    champ = ChampionData.from_dict(
        {
            "name": "Ashe",
            "info": {"attack": 7},
            "image": {"full": "Ashe.png", "x": 3},
            "tags": ["Marksman"],
        }
    )
    assert champ.name == "Ashe"
    assert champ.info == ChampionDataInfo(attack=7)
    assert champ.image == ImageData(full="Ashe.png", x=3)
    assert champ.tags == ["Marksman"]


def test_json_key_names_are_used():
    stats = ChampionDataStats.from_dict({"hp": 600.5, "hpperlevel": 100})
    assert stats.health_points == 600.5
    assert stats.health_points_per_level == 100
    assert isinstance(stats.health_points_per_level, float)


def test_to_dict_uses_json_keys():
    assert "abstract" in SpellData().to_dict()
    assert "colloq" in Item().to_dict()
    assert "from" in Item().to_dict()
    assert "FlatHPPoolMod" in ItemStats().to_dict()
    assert "prereq" in Mastery().to_dict()


def test_round_trip_extended_champion():
    original = ChampionDataExtended(
        id="id",
        name="champion",
        tags=["Tank"],
        lore="lore",
        skins=[SkinData(id="1", num=1, name="skin", chromas=True)],
        spells=[SpellData(id="Q", effect=[[1.0, 2.0]], cooldown=[5.0])],
        passive=PassiveData(name="passive"),
        recommended_items=[
            RecommendedItemData(
                champion="champion",
                custom_panel={"a": 1},
                blocks=[RecommendedItemSet(items=[RecommendedItem(id="1001", count=2)])],
            )
        ],
    )
    encoded = json.loads(json.dumps(original.to_dict()))
    assert ChampionDataExtended.from_dict(encoded) == original


def test_round_trip_item_stats():
    stats = ItemStats(flat_hp_pool_mod=10.0, percent_spell_vamp_mod=0.5)
    assert ItemStats.from_dict(stats.to_dict()) == stats


def test_unknown_keys_are_ignored():
    assert ProfileIcon.from_dict({"id": 1, "unexpected": True}) == ProfileIcon(id=1)


def test_null_values_give_zero_values():
    assert Item.from_dict({"from": None, "maps": None, "name": None, "gold": None}) == Item()


def test_nested_null_list_in_list():
    spell = SpellData.from_dict({"effect": [[1, 2], None]})
    assert spell.effect == [[1.0, 2.0], []]


def test_case_insensitive_key_match():
    assert ChampionData.from_dict({"NAME": "x"}).name == "x"


def test_exact_key_preferred_over_case_insensitive():
    assert ChampionData.from_dict({"Name": "other", "name": "x"}).name == "x"


def test_extended_includes_base_fields():
    champ = ChampionDataExtended.from_dict({"name": "a", "lore": "b", "allytips": ["t"]})
    assert champ.name == "a"
    assert champ.lore == "b"
    assert champ.ally_tips == ["t"]


def test_any_fields_are_kept_as_is():
    spell = SummonerSpell.from_dict({"vars": [{"coeff": [1, 2], "key": "a1"}]})
    assert spell.vars[0].coefficient == [1, 2]
    assert spell.vars[0].key == "a1"


def test_item_maps_decode():
    item = Item.from_dict({"maps": {"11": True, "12": False}})
    assert item.maps == {"11": True, "12": False}


@pytest.mark.parametrize(
    "model, data",
    [
        (ChampionDataInfo, {"attack": "x"}),
        (ChampionDataInfo, {"attack": True}),
        (ChampionDataInfo, {"attack": 1.5}),
        (ChampionData, {"tags": "Marksman"}),
        (ChampionData, {"info": 3}),
        (Item, {"maps": {"11": "yes"}}),
        (SkinData, {"chromas": 1}),
    ],
)
def test_type_mismatch_raises(model, data):
    with pytest.raises(ValueError):
        model.from_dict(data)


def test_from_dict_rejects_non_object():
    with pytest.raises(ValueError):
        Item.from_dict(0)


def test_get_extended_uses_client():
    client = _FakeClient()
    got = ChampionData(name="champion").get_extended(client)
    assert got == ChampionDataExtended(name="champion", lore="story")
    assert client.calls == [("champion", "champion")]


def test_recommended_item_get_item_uses_client():
    client = _FakeClient()
    got = RecommendedItem(id="id").get_item(client)
    assert got == Item(id="id")
    assert client.calls == [("item", "id")]