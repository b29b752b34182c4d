"""The Riot API client."""

from __future__ import annotations

import logging
from typing import Any

from golio.base_client import BaseClient
from golio.lol_client import LolClient
from golio.transport import Doer


class RiotClient:
    """Access to the Riot API endpoints.

    The attributes champion_mastery, champion, league and match are
    deprecated shortcuts to the same clients under lol.
    """

    def __init__(
        self,
        region: Any,
        api_key: str,
        doer: Doer | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        base = BaseClient(region, api_key, doer, logger)
        self.lol = LolClient(base)
        self.champion_mastery = self.lol.champion_mastery
        self.champion = self.lol.champion
        self.league = self.lol.league
        self.match = self.lol.match