"""Match endpoints of the League of Legends API."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from golio.base_client import BaseClient
from golio.lol_constants import (
    ENDPOINT_GET_MATCH,
    ENDPOINT_GET_MATCH_FOR_TOURNAMENT,
    ENDPOINT_GET_MATCH_IDS_BY_TOURNAMENT_CODE,
    ENDPOINT_GET_MATCH_TIMELINE,
    ENDPOINT_GET_MATCHES_BY_ACCOUNT,
)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_PAGE_SIZE = 100


def _unix_millis(moment: datetime) -> int:
    if moment.tzinfo is None:
        moment = moment.astimezone()
    delta = moment - _EPOCH
    micros = (delta.days * 86400 + delta.seconds) * 1_000_000 + delta.microseconds
    return micros // 1000 if micros >= 0 else -((-micros) // 1000)


@dataclass
class MatchListOptions:
    """Filters for a match list; naive times are taken as local time."""

    champion: list[int] = field(default_factory=list)
    queue: list[int] = field(default_factory=list)
    begin_time: datetime | None = None
    end_time: datetime | None = None

    def build_param(self) -> str:
        """Return the filters as query parameters, each starting with '&'."""
        parts = [f"&champion={int(c)}" for c in self.champion]
        parts += [f"&queue={int(q)}" for q in self.queue]
        if self.begin_time is not None:
            parts.append(f"&beginTime={_unix_millis(self.begin_time)}")
        if self.end_time is not None:
            parts.append(f"&endTime={_unix_millis(self.end_time)}")
        return "".join(parts)


class MatchClient:
    """Access to the match endpoints."""

    def __init__(self, base: BaseClient) -> None:
        self._base = base

    def _fetch(self, method: str, endpoint: str) -> Any:
        try:
            return self._base.get_json(endpoint)
        except Exception as exc:
            self._base.logger.debug("match %s: %s", method, exc)
            raise

    def get(self, match_id: int) -> Any:
        """Return the match with the given id."""
        return self._fetch("get", ENDPOINT_GET_MATCH.format(int(match_id)))

    def list(
        self,
        account_id: str,
        begin_index: int,
        end_index: int,
        options: MatchListOptions | None = None,
    ) -> Any:
        """Return the given range of matches played on the account."""
        endpoint = ENDPOINT_GET_MATCHES_BY_ACCOUNT.format(
            account_id, int(begin_index), int(end_index)
        )
        if options is not None:
            endpoint += options.build_param()
        return self._fetch("list", endpoint)

    def list_stream(self, account_id: str) -> Iterator[Any]:
        """Yield every match reference of the account, fetching page after page.

        Errors are raised while iterating, after the references already yielded.
        """
        start = 0
        while True:
            page = self.list(account_id, start, start + _PAGE_SIZE)
            matches = (page or {}).get("matches") or []
            yield from matches
            if len(matches) < _PAGE_SIZE:
                return
            start += _PAGE_SIZE

    def get_timeline(self, match_id: int) -> Any:
        """Return the timeline of the match; not every match has one."""
        timeline = self._fetch("get_timeline", ENDPOINT_GET_MATCH_TIMELINE.format(int(match_id)))
        return {} if timeline is None else timeline

    def list_ids_by_tournament_code(self, tournament_code: str) -> list[int]:
        """Return the ids of all matches of the tournament."""
        ids = self._fetch(
            "list_ids_by_tournament_code",
            ENDPOINT_GET_MATCH_IDS_BY_TOURNAMENT_CODE.format(tournament_code),
        )
        return [] if ids is None else ids

    def get_for_tournament(self, match_id: int, tournament_code: str) -> Any:
        """Return the match data of the match within the tournament."""
        match = self._fetch(
            "get_for_tournament",
            ENDPOINT_GET_MATCH_FOR_TOURNAMENT.format(int(match_id), tournament_code),
        )
        return {} if match is None else match