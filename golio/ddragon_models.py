"""Data models for the Data Dragon service, decoded from its JSON documents."""

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, get_args, get_origin


def _j(key: str, default: Any = None) -> Any:
    return field(default=default, metadata={"json": key})


def _jf(key: str, factory: Any) -> Any:
    return field(default_factory=factory, metadata={"json": key})


@lru_cache(maxsize=None)
def _schema(cls: type) -> tuple:
    return tuple(
        (f.name, f.metadata.get("json", f.name), f.type)
        for f in dataclasses.fields(cls)
    )


def _zero(tp: Any) -> Any:
    if tp is Any:
        return None
    origin = get_origin(tp)
    if origin is list:
        return []
    if origin is dict:
        return {}
    if isinstance(tp, type) and issubclass(tp, JsonModel):
        return tp()
    return {int: 0, float: 0.0, str: "", bool: False}[tp]


def _mismatch(where: str, tp: Any, value: Any) -> ValueError:
    name = getattr(tp, "__name__", str(tp))
    return ValueError(f"cannot decode {type(value).__name__} into {name} at {where}")


def _decode(tp: Any, value: Any, where: str) -> Any:
    if tp is Any:
        return value
    if value is None:
        return _zero(tp)
    origin = get_origin(tp)
    if origin is list:
        if not isinstance(value, list):
            raise _mismatch(where, tp, value)
        (item_tp,) = get_args(tp)
        return [_decode(item_tp, item, f"{where}[]") for item in value]
    if origin is dict:
        if not isinstance(value, Mapping):
            raise _mismatch(where, tp, value)
        _, value_tp = get_args(tp)
        return {str(k): _decode(value_tp, v, f"{where}.{k}") for k, v in value.items()}
    if isinstance(tp, type) and issubclass(tp, JsonModel):
        if not isinstance(value, Mapping):
            raise _mismatch(where, tp, value)
        return tp.from_dict(value)
    if tp is bool:
        if isinstance(value, bool):
            return value
    elif tp is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    elif tp is float:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
    elif tp is str:
        if isinstance(value, str):
            return value
    raise _mismatch(where, tp, value)


def _encode(value: Any) -> Any:
    if isinstance(value, JsonModel):
        return value.to_dict()
    if isinstance(value, list):
        return [_encode(item) for item in value]
    if isinstance(value, dict):
        return {k: _encode(v) for k, v in value.items()}
    return value


class JsonModel:
    """Base for dataclasses that map to JSON objects by their field keys.

    Missing keys and nulls give zero values, unknown keys are ignored and
    keys are matched case-insensitively when no exact match exists.
    """

    @classmethod
    def from_dict(cls, data: Mapping) -> Any:
        """Build an instance from a decoded JSON object."""
        if not isinstance(data, Mapping):
            raise _mismatch(cls.__name__, cls, data)
        lowered = {}
        for key in data:
            lowered.setdefault(str(key).lower(), key)
        values = {}
        for name, key, tp in _schema(cls):
            if key in data:
                raw = data[key]
            elif key.lower() in lowered:
                raw = data[lowered[key.lower()]]
            else:
                continue
            values[name] = _decode(tp, raw, f"{cls.__name__}.{name}")
        return cls(**values)

    def to_dict(self) -> dict:
        """Return the JSON object for this instance."""
        return {key: _encode(getattr(self, name)) for name, key, _ in _schema(type(self))}


@dataclass
class ChampionDataInfo(JsonModel):
    """Information about the playstyle of a champion."""

    attack: int = _j("attack", 0)
    defense: int = _j("defense", 0)
    magic: int = _j("magic", 0)
    difficulty: int = _j("difficulty", 0)


@dataclass
class ImageData(JsonModel):
    """Information about an image."""

    full: str = _j("full", "")
    sprite: str = _j("sprite", "")
    group: str = _j("group", "")
    x: int = _j("x", 0)
    y: int = _j("y", 0)
    w: int = _j("w", 0)
    h: int = _j("h", 0)


@dataclass
class ChampionDataStats(JsonModel):
    """The base stats of a champion."""

    health_points: float = _j("hp", 0.0)
    health_points_per_level: float = _j("hpperlevel", 0.0)
    mana_points: float = _j("mp", 0.0)
    mana_points_per_level: float = _j("mpperlevel", 0.0)
    movement_speed: float = _j("movespeed", 0.0)
    armor: float = _j("armor", 0.0)
    armor_per_level: float = _j("armorperlevel", 0.0)
    spell_block: float = _j("spellblock", 0.0)
    spell_block_per_level: float = _j("spellblockperlevel", 0.0)
    attack_range: float = _j("attackrange", 0.0)
    health_point_regeneration: float = _j("hpregen", 0.0)
    health_point_regeneration_per_level: float = _j("hpregenperlevel", 0.0)
    mana_point_regeneration: float = _j("mpregen", 0.0)
    mana_point_regeneration_per_level: float = _j("mpregenperlevel", 0.0)
    critical_strike_chance: float = _j("crit", 0.0)
    critical_strike_chance_per_level: float = _j("critperlevel", 0.0)
    attack_damage: float = _j("attackdamage", 0.0)
    attack_damage_per_level: float = _j("attackdamageperlevel", 0.0)
    attack_speed_offset: float = _j("attackspeedoffset", 0.0)
    attack_speed_per_level: float = _j("attackspeedperlevel", 0.0)


@dataclass
class ChampionData(JsonModel):
    """Summary information about a champion."""

    version: str = _j("version", "")
    id: str = _j("id", "")
    key: str = _j("key", "")
    name: str = _j("name", "")
    title: str = _j("title", "")
    blurb: str = _j("blurb", "")
    info: ChampionDataInfo = _jf("info", ChampionDataInfo)
    image: ImageData = _jf("image", ImageData)
    tags: list[str] = _jf("tags", list)
    partype: str = _j("partype", "")
    stats: ChampionDataStats = _jf("stats", ChampionDataStats)

    def get_extended(self, client: Any) -> "ChampionDataExtended":
        """Fetch the extended information for this champion."""
        return client.get_champion(self.name)


@dataclass
class SkinData(JsonModel):
    """A skin of a champion."""

    id: str = _j("id", "")
    num: int = _j("num", 0)
    name: str = _j("name", "")
    chromas: bool = _j("chromas", False)


@dataclass
class LevelTip(JsonModel):
    """Labels and effects shown when a spell levels up."""

    label: list[str] = _jf("label", list)
    effect: list[str] = _jf("effect", list)


@dataclass
class SpellVar(JsonModel):
    """A scaling variable of a champion spell."""

    link: str = _j("link", "")
    coefficient: float = _j("coeff", 0.0)
    key: str = _j("key", "")


@dataclass
class SpellData(JsonModel):
    """A spell of a champion."""

    id: str = _j("id", "")
    name: str = _j("name", "")
    description: str = _j("abstract", "")
    tooltip: str = _j("tooltip", "")
    leveltip: LevelTip = _jf("leveltip", LevelTip)
    max_rank: int = _j("maxrank", 0)
    cooldown: list[float] = _jf("cooldown", list)
    cooldown_burn: str = _j("cooldownBurn", "")
    cost: list[float] = _jf("cost", list)
    cost_burn: str = _j("costBurn", "")
    effect: list[list[float]] = _jf("effect", list)
    effect_burn: list[str] = _jf("effectBurn", list)
    vars: list[SpellVar] = _jf("vars", list)
    cost_type: str = _j("costType", "")
    max_ammo: str = _j("maxammo", "")
    range: list[float] = _jf("range", list)
    range_burn: str = _j("rangeBurn", "")
    image: ImageData = _jf("image", ImageData)
    resource: str = _j("resource", "")


@dataclass
class PassiveData(JsonModel):
    """The passive ability of a champion."""

    name: str = _j("name", "")
    description: str = _j("description", "")
    image: ImageData = _jf("image", ImageData)


@dataclass
class RecommendedItem(JsonModel):
    """An item in a recommended item set."""

    id: str = _j("id", "")
    count: int = _j("count", 0)
    hide_count: bool = _j("hideCount", False)

    def get_item(self, client: Any) -> "Item":
        """Fetch the full item for this recommendation."""
        return client.get_item(self.id)


@dataclass
class RecommendedItemSet(JsonModel):
    """A set of items used in a recommended build."""

    type: str = _j("type", "")
    rec_math: bool = _j("recMath", False)
    rec_steps: bool = _j("recSteps", False)
    min_summoner_level: int = _j("minSummonerLevel", 0)
    max_summoner_level: int = _j("maxSummonerLevel", 0)
    show_if_summoner_spell: str = _j("showIfSummonerSpell", "")
    hide_if_summoner_spell: str = _j("hideIfSummonerSpell", "")
    items: list[RecommendedItem] = _jf("items", list)


@dataclass
class RecommendedItemData(JsonModel):
    """A build recommended for a champion."""

    champion: str = _j("champion", "")
    title: str = _j("title", "")
    map: str = _j("map", "")
    mode: str = _j("mode", "")
    custom_tag: str = _j("customTag", "")
    sort_rank: int = _j("sortrank", 0)
    extension_page: bool = _j("extensionPage", False)
    custom_panel: Any = _j("customPanel", None)
    blocks: list[RecommendedItemSet] = _jf("blocks", list)


@dataclass
class ChampionDataExtended(ChampionData):
    """Full information about a champion."""

    skins: list[SkinData] = _jf("skins", list)
    lore: str = _j("lore", "")
    ally_tips: list[str] = _jf("allytips", list)
    enemy_tips: list[str] = _jf("enemytips", list)
    spells: list[SpellData] = _jf("spells", list)
    passive: PassiveData = _jf("passive", PassiveData)
    recommended_items: list[RecommendedItemData] = _jf("recommended", list)


@dataclass
class ItemRune(JsonModel):
    """Rune information attached to an item."""

    is_rune: bool = _j("isrune", False)
    tier: int = _j("tier", 0)
    type: str = _j("type", "")


@dataclass
class ItemGold(JsonModel):
    """The cost of an item."""

    base: int = _j("base", 0)
    total: int = _j("total", 0)
    sell: int = _j("sell", 0)
    purchasable: bool = _j("purchasable", False)


@dataclass
class ItemStats(JsonModel):
    """The stats an item grants."""

    flat_hp_pool_mod: float = _j("FlatHPPoolMod", 0.0)
    r_flat_hp_mod_per_level: float = _j("rFlatHPModPerLevel", 0.0)
    flat_mp_pool_mod: float = _j("FlatMPPoolMod", 0.0)
    r_flat_mp_mod_per_level: float = _j("rFlatMPModPerLevel", 0.0)
    percent_hp_pool_mod: float = _j("PercentHPPoolMod", 0.0)
    percent_mp_pool_mod: float = _j("PercentMPPoolMod", 0.0)
    flat_hp_regen_mod: float = _j("FlatHPRegenMod", 0.0)
    r_flat_hp_regen_mod_per_level: float = _j("rFlatHPRegenModPerLevel", 0.0)
    percent_hp_regen_mod: float = _j("PercentHPRegenMod", 0.0)
    flat_mp_regen_mod: float = _j("FlatMPRegenMod", 0.0)
    r_flat_mp_regen_mod_per_level: float = _j("rFlatMPRegenModPerLevel", 0.0)
    percent_mp_regen_mod: float = _j("PercentMPRegenMod", 0.0)
    flat_armor_mod: float = _j("FlatArmorMod", 0.0)
    r_flat_armor_mod_per_level: float = _j("rFlatArmorModPerLevel", 0.0)
    percent_armor_mod: float = _j("PercentArmorMod", 0.0)
    r_flat_armor_penetration_mod: float = _j("rFlatArmorPenetrationMod", 0.0)
    r_flat_armor_penetration_mod_per_level: float = _j(
        "rFlatArmorPenetrationModPerLevel", 0.0
    )
    r_percent_armor_penetration_mod: float = _j("rPercentArmorPenetrationMod", 0.0)
    r_percent_armor_penetration_mod_per_level: float = _j(
        "rPercentArmorPenetrationModPerLevel", 0.0
    )
    flat_physical_damage_mod: float = _j("FlatPhysicalDamageMod", 0.0)
    r_flat_physical_damage_mod_per_level: float = _j("rFlatPhysicalDamageModPerLevel", 0.0)
    percent_physical_damage_mod: float = _j("PercentPhysicalDamageMod", 0.0)
    flat_magic_damage_mod: float = _j("FlatMagicDamageMod", 0.0)
    r_flat_magic_damage_mod_per_level: float = _j("rFlatMagicDamageModPerLevel", 0.0)
    percent_magic_damage_mod: float = _j("PercentMagicDamageMod", 0.0)
    flat_movement_speed_mod: float = _j("FlatMovementSpeedMod", 0.0)
    r_flat_movement_speed_mod_per_level: float = _j("rFlatMovementSpeedModPerLevel", 0.0)
    percent_movement_speed_mod: float = _j("PercentMovementSpeedMod", 0.0)
    r_percent_movement_speed_mod_per_level: float = _j(
        "rPercentMovementSpeedModPerLevel", 0.0
    )
    flat_attack_speed_mod: float = _j("FlatAttackSpeedMod", 0.0)
    percent_attack_speed_mod: float = _j("PercentAttackSpeedMod", 0.0)
    r_percent_attack_speed_mod_per_level: float = _j("rPercentAttackSpeedModPerLevel", 0.0)
    r_flat_dodge_mod: float = _j("rFlatDodgeMod", 0.0)
    r_flat_dodge_mod_per_level: float = _j("rFlatDodgeModPerLevel", 0.0)
    percent_dodge_mod: float = _j("PercentDodgeMod", 0.0)
    flat_crit_chance_mod: float = _j("FlatCritChanceMod", 0.0)
    r_flat_crit_chance_mod_per_level: float = _j("rFlatCritChanceModPerLevel", 0.0)
    percent_crit_chance_mod: float = _j("PercentCritChanceMod", 0.0)
    flat_crit_damage_mod: float = _j("FlatCritDamageMod", 0.0)
    r_flat_crit_damage_mod_per_level: float = _j("rFlatCritDamageModPerLevel", 0.0)
    percent_crit_damage_mod: float = _j("PercentCritDamageMod", 0.0)
    flat_block_mod: float = _j("FlatBlockMod", 0.0)
    percent_block_mod: float = _j("PercentBlockMod", 0.0)
    flat_spell_block_mod: float = _j("FlatSpellBlockMod", 0.0)
    r_flat_spell_block_mod_per_level: float = _j("rFlatSpellBlockModPerLevel", 0.0)
    percent_spell_block_mod: float = _j("PercentSpellBlockMod", 0.0)
    flat_exp_bonus: float = _j("FlatEXPBonus", 0.0)
    percent_exp_bonus: float = _j("PercentEXPBonus", 0.0)
    r_percent_cooldown_mod: float = _j("rPercentCooldownMod", 0.0)
    r_percent_cooldown_mod_per_level: float = _j("rPercentCooldownModPerLevel", 0.0)
    r_flat_time_dead_mod: float = _j("rFlatTimeDeadMod", 0.0)
    r_flat_time_dead_mod_per_level: float = _j("rFlatTimeDeadModPerLevel", 0.0)
    r_percent_time_dead_mod: float = _j("rPercentTimeDeadMod", 0.0)
    r_percent_time_dead_mod_per_level: float = _j("rPercentTimeDeadModPerLevel", 0.0)
    r_flat_gold_per10_mod: float = _j("rFlatGoldPer10Mod", 0.0)
    r_flat_magic_penetration_mod: float = _j("rFlatMagicPenetrationMod", 0.0)
    r_flat_magic_penetration_mod_per_level: float = _j(
        "rFlatMagicPenetrationModPerLevel", 0.0
    )
    r_percent_magic_penetration_mod: float = _j("rPercentMagicPenetrationMod", 0.0)
    r_percent_magic_penetration_mod_per_level: float = _j(
        "rPercentMagicPenetrationModPerLevel", 0.0
    )
    flat_energy_regen_mod: float = _j("FlatEnergyRegenMod", 0.0)
    r_flat_energy_regen_mod_per_level: float = _j("rFlatEnergyRegenModPerLevel", 0.0)
    flat_energy_pool_mod: float = _j("FlatEnergyPoolMod", 0.0)
    r_flat_energy_mod_per_level: float = _j("rFlatEnergyModPerLevel", 0.0)
    percent_life_steal_mod: float = _j("PercentLifeStealMod", 0.0)
    percent_spell_vamp_mod: float = _j("PercentSpellVampMod", 0.0)


@dataclass
class Item(JsonModel):
    """An item."""

    id: str = _j("id", "")
    name: str = _j("name", "")
    rune: ItemRune = _jf("rune", ItemRune)
    gold: ItemGold = _jf("gold", ItemGold)
    group: str = _j("group", "")
    description: str = _j("description", "")
    colloquial: str = _j("colloq", "")
    plaintext: str = _j("plaintext", "")
    consumed: bool = _j("consumed", False)
    stacks: int = _j("stacks", 0)
    depth: int = _j("depth", 0)
    consume_on_full: bool = _j("consumeOnFull", False)
    from_items: list[str] = _jf("from", list)
    into: list[str] = _jf("into", list)
    special_recipe: int = _j("specialRecipe", 0)
    in_store: bool = _j("inStore", False)
    hide_from_all: bool = _j("hideFromAll", False)
    required_champion: str = _j("requiredChampion", "")
    stats: ItemStats = _jf("stats", ItemStats)
    tags: list[str] = _jf("tags", list)
    maps: dict[str, bool] = _jf("maps", dict)


@dataclass
class Mastery(JsonModel):
    """A mastery from before masteries were removed."""

    id: int = _j("id", 0)
    name: str = _j("name", "")
    description: list[str] = _jf("description", list)
    image: ImageData = _jf("image", ImageData)
    ranks: int = _j("ranks", 0)
    prerequisite: str = _j("prereq", "")


@dataclass
class ProfileIcon(JsonModel):
    """A profile icon."""

    id: int = _j("id", 0)
    image: ImageData = _jf("image", ImageData)


@dataclass
class SummonerSpellVar(JsonModel):
    """A scaling variable of a summoner spell; the coefficient may be any JSON value."""

    link: str = _j("link", "")
    coefficient: Any = _j("coeff", None)
    key: str = _j("key", "")


@dataclass
class SummonerSpell(JsonModel):
    """A summoner spell."""

    id: str = _j("id", "")
    name: str = _j("name", "")
    description: str = _j("description", "")
    tooltip: str = _j("tooltip", "")
    max_rank: int = _j("maxrank", 0)
    cooldown: list[float] = _jf("cooldown", list)
    cooldown_burn: str = _j("cooldownBurn", "")
    cost: list[float] = _jf("cost", list)
    cost_burn: str = _j("costBurn", "")
    vars: list[SummonerSpellVar] = _jf("vars", list)
    key: str = _j("key", "")
    summoner_level: int = _j("summonerLevel", 0)
    modes: list[str] = _jf("modes", list)
    cost_type: str = _j("costType", "")
    max_ammo: str = _j("maxammo", "")
    range: list[float] = _jf("range", list)
    range_burn: str = _j("rangeBurn", "")
    image: ImageData = _jf("image", ImageData)
    resource: str = _j("resource", "")