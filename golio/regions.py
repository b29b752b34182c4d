"""Server regions served by the APIs."""

from __future__ import annotations

from enum import Enum


class Region(str, Enum):
    """A server region, valued by its platform identifier."""

    BRASIL = "br1"
    EUROPE_NORTH_EAST = "eun1"
    EUROPE_WEST = "euw1"
    JAPAN = "jp1"
    KOREA = "kr"
    LATIN_AMERICA_NORTH = "la1"
    LATIN_AMERICA_SOUTH = "la2"
    NORTH_AMERICA = "na1"
    OCEANIA = "oc1"
    TURKEY = "tr1"
    RUSSIA = "ru"
    PBE = "pbe1"

    def __str__(self) -> str:
        return self.value