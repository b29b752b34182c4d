"""Champion endpoints of the League of Legends API."""

from __future__ import annotations

from typing import Any

from golio.base_client import BaseClient
from golio.lol_constants import ENDPOINT_GET_FREE_CHAMPION_ROTATION


class ChampionClient:
    """Access to the champion endpoints."""

    def __init__(self, base: BaseClient) -> None:
        self._base = base

    def get_free_rotation(self) -> Any:
        """Return information about the current free champion rotation."""
        try:
            return self._base.get_json(ENDPOINT_GET_FREE_CHAMPION_ROTATION)
        except Exception as exc:
            self._base.logger.debug("champion get_free_rotation: %s", exc)
            raise