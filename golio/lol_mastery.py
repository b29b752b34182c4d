"""Champion mastery endpoints of the League of Legends API."""

from __future__ import annotations

from typing import Any

from golio.base_client import BaseClient
from golio.lol_constants import (
    ENDPOINT_GET_CHAMPION_MASTERIES,
    ENDPOINT_GET_CHAMPION_MASTERY,
    ENDPOINT_GET_CHAMPION_MASTERY_TOTAL_SCORE,
)


class ChampionMasteryClient:
    """Access to the champion mastery endpoints."""

    def __init__(self, base: BaseClient) -> None:
        self._base = base

    def _fetch(self, method: str, endpoint: str) -> Any:
        try:
            return self._base.get_json(endpoint)
        except Exception as exc:
            self._base.logger.debug("champion mastery %s: %s", method, exc)
            raise

    def list(self, summoner_id: str) -> list[Any]:
        """Return all champion masteries of the summoner."""
        masteries = self._fetch("list", ENDPOINT_GET_CHAMPION_MASTERIES.format(summoner_id))
        return [] if masteries is None else masteries

    def get(self, summoner_id: str, champion_id: str) -> Any:
        """Return the summoner's mastery of the given champion."""
        return self._fetch(
            "get", ENDPOINT_GET_CHAMPION_MASTERY.format(summoner_id, champion_id)
        )

    def get_total(self, summoner_id: str) -> int:
        """Return the summoner's accumulated mastery score over all champions."""
        score = self._fetch(
            "get_total", ENDPOINT_GET_CHAMPION_MASTERY_TOTAL_SCORE.format(summoner_id)
        )
        return 0 if score is None else score