"""The top-level client for the Riot API and the Data Dragon service."""

from __future__ import annotations

import logging
from typing import Any

from golio.ddragon import DataDragonClient
from golio.regions import Region
from golio.riot import RiotClient
from golio.transport import Doer, UrllibDoer


class Client:
    """A client for both the Riot API and the Data Dragon service."""

    def __init__(
        self,
        api_key: str,
        doer: Doer | None = None,
        logger: logging.Logger | None = None,
        region: Any = Region.EUROPE_WEST,
    ) -> None:
        self.doer: Doer = doer if doer is not None else UrllibDoer()
        self.logger = logger if logger is not None else logging.getLogger("golio")
        self.region = region
        self.api_key = api_key
        self.riot = RiotClient(self.region, self.api_key, self.doer, self.logger)
        self.data_dragon = DataDragonClient(self.doer, self.region, self.logger)