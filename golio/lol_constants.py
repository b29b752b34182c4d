"""Endpoints and enumerations of the League of Legends API."""

from __future__ import annotations

from enum import Enum

ENDPOINT_BASE = "/lol"
ENDPOINT_MASTERY_BASE = ENDPOINT_BASE + "/champion-mastery/v4"
ENDPOINT_GET_CHAMPION_MASTERIES = ENDPOINT_MASTERY_BASE + "/champion-masteries/by-summoner/{}"
ENDPOINT_GET_CHAMPION_MASTERY = (
    ENDPOINT_MASTERY_BASE + "/champion-masteries/by-summoner/{}/by-champion/{}"
)
ENDPOINT_GET_CHAMPION_MASTERY_TOTAL_SCORE = ENDPOINT_MASTERY_BASE + "/scores/by-summoner/{}"
ENDPOINT_PLATFORM_BASE = ENDPOINT_BASE + "/platform/v3"
ENDPOINT_GET_FREE_CHAMPION_ROTATION = ENDPOINT_PLATFORM_BASE + "/champion-rotations"
ENDPOINT_LEAGUE_BASE = ENDPOINT_BASE + "/league/v4"
ENDPOINT_GET_CHALLENGER_LEAGUE = ENDPOINT_LEAGUE_BASE + "/challengerleagues/by-queue/{}"
ENDPOINT_GET_GRANDMASTER_LEAGUE = ENDPOINT_LEAGUE_BASE + "/grandmasterleagues/by-queue/{}"
ENDPOINT_GET_MASTER_LEAGUE = ENDPOINT_LEAGUE_BASE + "/masterleagues/by-queue/{}"
ENDPOINT_GET_LEAGUES_BY_SUMMONER = ENDPOINT_LEAGUE_BASE + "/entries/by-summoner/{}"
ENDPOINT_GET_LEAGUES = ENDPOINT_LEAGUE_BASE + "/entries/{}/{}/{}"
ENDPOINT_GET_LEAGUE = ENDPOINT_LEAGUE_BASE + "/leagues/{}"
ENDPOINT_STATUS_BASE = ENDPOINT_BASE + "/status/v3"
ENDPOINT_GET_STATUS = ENDPOINT_STATUS_BASE + "/shard-data"
ENDPOINT_MATCH_BASE = ENDPOINT_BASE + "/match/v4"
ENDPOINT_GET_MATCH = ENDPOINT_MATCH_BASE + "/matches/{}"
ENDPOINT_GET_MATCHES_BY_ACCOUNT = (
    ENDPOINT_MATCH_BASE + "/matchlists/by-account/{}?beginIndex={}&endIndex={}"
)
ENDPOINT_GET_MATCH_TIMELINE = ENDPOINT_MATCH_BASE + "/timelines/by-match/{}"
ENDPOINT_GET_MATCH_IDS_BY_TOURNAMENT_CODE = (
    ENDPOINT_MATCH_BASE + "/matches/by-tournament-code/{}/ids"
)
ENDPOINT_GET_MATCH_FOR_TOURNAMENT = ENDPOINT_MATCH_BASE + "/matches/{}/by-tournament-code/{}"
ENDPOINT_SUMMONER_BASE = ENDPOINT_BASE + "/summoner/v4"
ENDPOINT_GET_SUMMONER_BY_SUMMONER_ID = ENDPOINT_SUMMONER_BASE + "/summoners/{}"
ENDPOINT_GET_SUMMONER_BY = ENDPOINT_SUMMONER_BASE + "/summoners/by-{}/{}"
ENDPOINT_SPECTATOR_BASE = ENDPOINT_BASE + "/spectator/v4"
ENDPOINT_GET_CURRENT_GAME = ENDPOINT_SPECTATOR_BASE + "/active-games/by-summoner/{}"
ENDPOINT_GET_FEATURED_GAMES = ENDPOINT_SPECTATOR_BASE + "/featured-games"
ENDPOINT_TOURNAMENT_STUB_BASE = ENDPOINT_BASE + "/tournament-stub/v4"
ENDPOINT_CREATE_STUB_TOURNAMENT_CODES = (
    ENDPOINT_TOURNAMENT_STUB_BASE + "/codes?count={}&tournamentId={}"
)
ENDPOINT_GET_STUB_LOBBY_EVENTS = ENDPOINT_TOURNAMENT_STUB_BASE + "/lobby-events/by-code/{}"
ENDPOINT_CREATE_STUB_TOURNAMENT_PROVIDER = ENDPOINT_TOURNAMENT_STUB_BASE + "/providers"
ENDPOINT_CREATE_STUB_TOURNAMENT = ENDPOINT_TOURNAMENT_STUB_BASE + "/tournaments"
ENDPOINT_TOURNAMENT_BASE = ENDPOINT_BASE + "/tournament/v4"
ENDPOINT_CREATE_TOURNAMENT_CODES = ENDPOINT_TOURNAMENT_BASE + "/codes?count={}&tournamentId={}"
ENDPOINT_GET_LOBBY_EVENTS = ENDPOINT_TOURNAMENT_BASE + "/lobby-events/by-code/{}"
ENDPOINT_CREATE_TOURNAMENT_PROVIDER = ENDPOINT_TOURNAMENT_BASE + "/providers"
ENDPOINT_CREATE_TOURNAMENT = ENDPOINT_TOURNAMENT_BASE + "/tournaments"
ENDPOINT_GET_TOURNAMENT = ENDPOINT_TOURNAMENT_BASE + "/codes/{}"
ENDPOINT_UPDATE_TOURNAMENT = ENDPOINT_TOURNAMENT_BASE + "/codes/{}"
ENDPOINT_GET_THIRD_PARTY_CODE = ENDPOINT_PLATFORM_BASE + "/third-party-code/by-summoner/{}"


class Queue(str, Enum):
    """A ranked queue."""

    RANKED_SOLO = "RANKED_SOLO_5x5"
    RANKED_FLEX = "RANKED_FLEX_SR"
    RANKED_TWISTED_TREELINE = "RANKED_FLEX_TT"

    def __str__(self) -> str:
        return self.value


class Tier(str, Enum):
    """A ranked tier below the apex leagues."""

    IRON = "IRON"
    BRONZE = "BRONZE"
    SILVER = "SILVER"
    GOLD = "GOLD"
    PLATINUM = "PLATINUM"
    DIAMOND = "DIAMOND"

    def __str__(self) -> str:
        return self.value


class Division(str, Enum):
    """A division within a tier."""

    ONE = "I"
    TWO = "II"
    THREE = "III"
    FOUR = "IV"

    def __str__(self) -> str:
        return self.value