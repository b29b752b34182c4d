"""League endpoints of the League of Legends API."""

from __future__ import annotations

from typing import Any

from golio.base_client import BaseClient
from golio.lol_constants import (
    ENDPOINT_GET_CHALLENGER_LEAGUE,
    ENDPOINT_GET_GRANDMASTER_LEAGUE,
    ENDPOINT_GET_LEAGUE,
    ENDPOINT_GET_LEAGUES,
    ENDPOINT_GET_LEAGUES_BY_SUMMONER,
    ENDPOINT_GET_MASTER_LEAGUE,
)


def _text(value: Any) -> str:
    return str(getattr(value, "value", value))


class LeagueClient:
    """Access to the league endpoints."""

    def __init__(self, base: BaseClient) -> None:
        self._base = base

    def _fetch(self, method: str, endpoint: str) -> Any:
        try:
            return self._base.get_json(endpoint)
        except Exception as exc:
            self._base.logger.debug("league %s: %s", method, exc)
            raise

    def get_challenger(self, queue: Any) -> Any:
        """Return the current Challenger league of the queue."""
        return self._fetch("get_challenger", ENDPOINT_GET_CHALLENGER_LEAGUE.format(_text(queue)))

    def get_grandmaster(self, queue: Any) -> Any:
        """Return the current Grandmaster league of the queue."""
        return self._fetch(
            "get_grandmaster", ENDPOINT_GET_GRANDMASTER_LEAGUE.format(_text(queue))
        )

    def get_master(self, queue: Any) -> Any:
        """Return the current Master league of the queue."""
        return self._fetch("get_master", ENDPOINT_GET_MASTER_LEAGUE.format(_text(queue)))

    def list_by_summoner(self, summoner_id: str) -> list[Any]:
        """Return all league entries of the summoner."""
        leagues = self._fetch(
            "list_by_summoner", ENDPOINT_GET_LEAGUES_BY_SUMMONER.format(summoner_id)
        )
        return [] if leagues is None else leagues

    def list_players(self, queue: Any, tier: Any, division: Any) -> list[Any]:
        """Return all entries of the league given by queue, tier and division."""
        leagues = self._fetch(
            "list_players",
            ENDPOINT_GET_LEAGUES.format(_text(queue), _text(tier), _text(division)),
        )
        return [] if leagues is None else leagues

    def get(self, league_id: str) -> Any:
        """Return the league with the given id."""
        return self._fetch("get", ENDPOINT_GET_LEAGUE.format(league_id))