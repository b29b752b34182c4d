"""The League of Legends API client, pooling all endpoint groups."""

from __future__ import annotations

from golio.base_client import BaseClient
from golio.lol_champion import ChampionClient
from golio.lol_league import LeagueClient
from golio.lol_mastery import ChampionMasteryClient
from golio.lol_match import MatchClient


class LolClient:
    """Pools the endpoint groups of the League of Legends API over one base client."""

    def __init__(self, base: BaseClient) -> None:
        self.base = base
        self.champion_mastery = ChampionMasteryClient(base)
        self.champion = ChampionClient(base)
        self.league = LeagueClient(base)
        self.match = MatchClient(base)