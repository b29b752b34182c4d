import json
import logging

import pytest

from golio.client import Client
from golio.errors import ERR_NOT_FOUND, ApiError
from golio.regions import Region
from golio.transport import Response


class RecordingDoer:
    def __init__(self, status=200, body=b"null"):
        self.status = status
        self.body = body
        self.requests = []

    def do(self, request):
        self.requests.append(request)
        return Response(self.status, self.body)


def test_new_client_with_options():
    doer = RecordingDoer(status=404)
    client = Client(
        "placeholder",
        doer=doer,
        logger=logging.getLogger("golio"),
        region=Region.EUROPE_WEST,
    )
    assert client.region == Region.EUROPE_WEST
    assert client.riot.lol.base.region == Region.EUROPE_WEST
    assert client.data_dragon.version == "9.10.1"
    assert client.data_dragon.language == "en_US"


def test_default_region_is_europe_west():
    doer = RecordingDoer(status=404)
    client = Client("placeholder", doer=doer)
    assert client.region == Region.EUROPE_WEST
    assert doer.requests[0].url == "https://ddragon.leagueoflegends.com/realms/euw.json"


def test_region_option_selects_realm():
    doer = RecordingDoer(body=json.dumps({"v": "10.1.1", "l": "ko_KR"}).encode())
    client = Client("placeholder", doer=doer, region=Region.KOREA)
    assert doer.requests[0].url == "https://ddragon.leagueoflegends.com/realms/kr.json"
    assert client.data_dragon.version == "10.1.1"
    assert client.data_dragon.language == "ko_KR"


def test_riot_requests_carry_api_key():
    doer = RecordingDoer(status=404)
    client = Client("placeholder", doer=doer)
    with pytest.raises(ApiError) as info:
        client.riot.match.get(1)
    assert info.value == ERR_NOT_FOUND
    assert doer.requests[-1].headers["X-Riot-Token"] == "placeholder"
    assert doer.requests[-1].url == "http://kernel:8080/lol/match/v4/matches/1"