"""Client for the Data Dragon service, which serves static game data per patch."""

from __future__ import annotations

import copy
import dataclasses
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from golio.ddragon_models import (
    ChampionData,
    ChampionDataExtended,
    Item,
    JsonModel,
    Mastery,
    ProfileIcon,
    SummonerSpell,
)
from golio.errors import ApiError, error_for_status
from golio.locking import RWLock, lock_toggle
from golio.regions import Region
from golio.transport import Doer, Request, Response, UrllibDoer


class LanguageCode(str, Enum):
    """A language the Data Dragon service provides data in."""

    CZECH_REPUBLIC = "cs_CZ"
    GREECE = "el_GR"
    POLAND = "pl_PL"
    ROMANIA = "ro_RO"
    HUNGARY = "hu_HU"
    UNITED_KINGDOM = "en_GB"
    GERMANY = "de_DE"
    SPAIN = "es_ES"
    ITALY = "it_IT"
    FRANCE = "fr_FR"
    JAPAN = "ja_JP"
    KOREA = "ko_KR"
    MEXICO = "es_MX"
    ARGENTINA = "es_AR"
    BRAZIL = "pt_BR"
    UNITED_STATES = "en_US"
    AUSTRALIA = "en_AU"
    RUSSIA = "ru_RU"
    TURKEY = "tr_TR"
    MALAYSIA = "ms_MY"
    REPUBLIC_OF_THE_PHILIPPINES = "en_PH"
    SINGAPORE = "en_SG"
    THAILAND = "th_TH"
    VIETNAM = "vn_VN"
    INDONESIA = "id_ID"
    MALAYSIA_CHINESE = "zh_MY"
    CHINA = "zh_CN"
    TAIWAN = "zh_TW"

    def __str__(self) -> str:
        return self.value


LATEST_RUNE_AND_MASTERY_VERSION = "7.23.1"
FALLBACK_VERSION = "9.10.1"
FALLBACK_LANGUAGE = LanguageCode.UNITED_STATES

_BASE_URL = "ddragon.leagueoflegends.com"
_INTEGER = re.compile(r"[+-]?\d+")

_REALMS: dict[Region, str] = {
    Region.EUROPE_WEST: "euw",
    Region.EUROPE_NORTH_EAST: "eun",
    Region.JAPAN: "jp",
    Region.KOREA: "kr",
    Region.LATIN_AMERICA_NORTH: "lan",
    Region.LATIN_AMERICA_SOUTH: "las",
    Region.NORTH_AMERICA: "na",
    Region.OCEANIA: "oce",
    Region.PBE: "pbe",
    Region.RUSSIA: "ru",
    Region.TURKEY: "tr",
    Region.BRASIL: "br",
}


class _Url(Enum):
    BASE = "base"
    DATA = "data"
    IMAGE = "image"


def version_greater_than(v1: str, v2: str) -> bool:
    """Return True if some dotted component of v1 exceeds the same component of v2.

    Any component that is not an integer makes the result False.
    """
    for part1, part2 in zip(v1.split("."), v2.split(".")):
        if not _INTEGER.fullmatch(part1) or not _INTEGER.fullmatch(part2):
            return False
        if int(part1) > int(part2):
            return True
    return False


def _lookup(mapping: Mapping[str, Any], key: str) -> Any:
    if key in mapping:
        return mapping[key]
    wanted = key.lower()
    for candidate, value in mapping.items():
        if str(candidate).lower() == wanted:
            return value
    return None


def _realm_for(region: Any) -> str:
    try:
        return _REALMS.get(Region(region), "")
    except ValueError:
        return ""


def _extend(champion: ChampionData) -> ChampionDataExtended:
    return ChampionDataExtended(
        **{f.name: getattr(champion, f.name) for f in dataclasses.fields(ChampionData)}
    )


def _base(champion: ChampionData) -> ChampionData:
    return ChampionData(
        **{f.name: getattr(champion, f.name) for f in dataclasses.fields(ChampionData)}
    )


def _not_found() -> ApiError:
    return error_for_status(404)


@dataclass
class _ListCache:
    endpoint: str
    model: type
    keyed_by_id: bool
    lock: RWLock = field(default_factory=RWLock)
    entries: list[Any] = field(default_factory=list)


class DataDragonClient:
    """Gives access to the data of the Data Dragon service, caching what it fetched."""

    def __init__(
        self,
        doer: Doer | None = None,
        region: Any = Region.EUROPE_WEST,
        logger: logging.Logger | None = None,
    ) -> None:
        self.doer: Doer = doer if doer is not None else UrllibDoer()
        base = logger if logger is not None else logging.getLogger("golio")
        self.logger = logging.LoggerAdapter(base, {"client": "data dragon"})
        self.version = ""
        self.language = ""
        self._champions_lock = RWLock()
        self._champions_by_name: dict[str, ChampionDataExtended] = {}
        self._champions_loaded = False
        self._profile_icons = _ListCache("/profileicon.json", ProfileIcon, False)
        self._items = _ListCache("/item.json", Item, True)
        self._masteries = _ListCache("/mastery.json", Mastery, False)
        self._runes = _ListCache("/rune.json", Item, True)
        self._summoner_spells = _ListCache("/summoner.json", SummonerSpell, False)
        try:
            self._init(_realm_for(region))
        except Exception as exc:  # any failure falls back to known defaults
            self.logger.debug("realm lookup failed: %s", exc)
            self.version = FALLBACK_VERSION
            self.language = FALLBACK_LANGUAGE.value

    def _init(self, realm: str) -> None:
        payload = self._do_request(_Url.BASE, f"/realms/{realm}.json").json()
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError("realm document is not an object")
        version = _lookup(payload, "v")
        language = _lookup(payload, "l")
        version = "" if version is None else version
        language = "" if language is None else language
        if not isinstance(version, str) or not isinstance(language, str):
            raise ValueError("realm version and language must be strings")
        self.version = version
        self.language = language

    def get_champions(self) -> list[ChampionData]:
        """Return all existing champions."""
        with lock_toggle(self._champions_lock) as toggle:
            if not self._champions_loaded:
                toggle()
                if not self._champions_loaded:
                    champions = self._get_map("/champion.json", ChampionData)
                    for champion in champions.values():
                        self._champions_by_name[champion.name] = _extend(champion)
                    self._champions_loaded = True
            return [_base(champion) for champion in self._champions_by_name.values()]

    def get_champion_by_id(self, champion_id: str) -> ChampionDataExtended:
        """Return the champion with the given id."""
        for champion in self.get_champions():
            if champion.id == champion_id:
                return self.get_champion(champion.name)
        raise _not_found()

    def get_champion(self, name: str) -> ChampionDataExtended:
        """Return full information about the champion with the given name."""
        with lock_toggle(self._champions_lock) as toggle:
            champion = self._champions_by_name.get(name)
            if champion is None or not champion.lore:
                toggle()
                data = self._get_map(f"/champion/{name}.json", ChampionDataExtended)
                champion = data.get(name)
                if champion is None:
                    raise _not_found()
                self._champions_by_name[name] = champion
            return copy.copy(champion)

    def get_profile_icons(self) -> list[ProfileIcon]:
        """Return all existing profile icons."""
        return self._load(self._profile_icons)

    def get_profile_icon(self, icon_id: int) -> ProfileIcon:
        """Return the profile icon with the given id."""
        return self._find(self.get_profile_icons(), icon_id)

    def get_items(self) -> list[Item]:
        """Return all existing items."""
        return self._load(self._items)

    def get_item(self, item_id: str) -> Item:
        """Return the item with the given id."""
        return self._find(self.get_items(), item_id)

    def get_masteries(self) -> list[Mastery]:
        """Return all masteries; newer versions fall back to the last one that had them."""
        return self._load(self._masteries)

    def get_mastery(self, mastery_id: int) -> Mastery:
        """Return the mastery with the given id."""
        return self._find(self.get_masteries(), mastery_id)

    def get_runes(self) -> list[Item]:
        """Return all runes; newer versions fall back to the last one that had them."""
        return self._load(self._runes)

    def get_rune(self, rune_id: str) -> Item:
        """Return the rune with the given id."""
        return self._find(self.get_runes(), rune_id)

    def get_summoner_spells(self) -> list[SummonerSpell]:
        """Return all existing summoner spells."""
        return self._load(self._summoner_spells)

    def get_summoner_spell(self, spell_id: str) -> SummonerSpell:
        """Return the summoner spell with the given id."""
        return self._find(self.get_summoner_spells(), spell_id)

    def clear_caches(self) -> None:
        """Forget everything fetched so far."""
        self._champions_lock.acquire_write()
        try:
            self._champions_by_name = {}
            self._champions_loaded = False
        finally:
            self._champions_lock.release_write()
        for cache in (
            self._masteries,
            self._profile_icons,
            self._items,
            self._summoner_spells,
            self._runes,
        ):
            cache.lock.acquire_write()
            try:
                cache.entries = []
            finally:
                cache.lock.release_write()

    @staticmethod
    def _find(entries: list[Any], wanted: Any) -> Any:
        match = next((entry for entry in entries if entry.id == wanted), None)
        if match is None:
            raise _not_found()
        return match

    def _load(self, cache: _ListCache) -> list[Any]:
        with lock_toggle(cache.lock) as toggle:
            if not cache.entries:
                toggle()
                if not cache.entries:
                    decoded = self._get_map(cache.endpoint, cache.model)
                    entries = []
                    for key, value in decoded.items():
                        if cache.keyed_by_id:
                            value.id = key
                        entries.append(value)
                    cache.entries = entries
            return [copy.copy(entry) for entry in cache.entries]

    def _get_map(self, endpoint: str, model: type[JsonModel]) -> dict[str, Any]:
        payload = self._do_request(_Url.DATA, endpoint).json()
        if payload is None:
            return {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"response for {endpoint} is not an object")
        data = _lookup(payload, "data")
        if data is None:
            return {}
        if not isinstance(data, Mapping):
            raise ValueError(f"data for {endpoint} is not an object")
        return {
            str(key): model() if value is None else model.from_dict(value)
            for key, value in data.items()
        }

    def _do_request(self, url: _Url, endpoint: str) -> Response:
        request = self._new_request(url, endpoint)
        response = self.doer.do(request)
        if not 200 <= response.status_code <= 299:
            raise error_for_status(response.status_code)
        return response

    def _new_request(self, url: _Url, endpoint: str) -> Request:
        version = self.version
        if ("rune" in endpoint or "mastery" in endpoint) and version_greater_than(
            self.version, LATEST_RUNE_AND_MASTERY_VERSION
        ):
            version = LATEST_RUNE_AND_MASTERY_VERSION
        if url is _Url.DATA:
            location = f"{_BASE_URL}/cdn/{version}/data/{self.language}"
        elif url is _Url.IMAGE:
            location = f"{_BASE_URL}/cdn/{version}/img"
        else:
            location = _BASE_URL
        return Request("GET", f"https://{location}{endpoint}")