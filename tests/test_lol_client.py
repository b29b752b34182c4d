import pytest

from golio.base_client import BaseClient
from golio.errors import ERR_NOT_FOUND, ApiError
from golio.lol_client import LolClient
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


def make_client(doer):
    base = BaseClient(Region.EUROPE_WEST, "placeholder", doer, None)
    return LolClient(base), base


def test_sub_clients_share_the_base_client():
    doer = RecordingDoer(body=b"[]")
    client, base = make_client(doer)
    assert client.base is base
    client.champion_mastery.list("id")
    client.league.list_by_summoner("id")
    client.match.list_ids_by_tournament_code("code")
    assert len(doer.requests) == 3
    assert all(r.headers["X-Riot-Token"] == "placeholder" for r in doer.requests)


def test_champion_free_rotation_goes_through_base():
    doer = RecordingDoer(body=b'{"freeChampionIds": [1]}')
    client, _ = make_client(doer)
    assert client.champion.get_free_rotation() == {"freeChampionIds": [1]}
    assert doer.requests[0].url == "http://kernel:8080/lol/platform/v3/champion-rotations"


def test_errors_propagate_from_sub_clients():
    client, _ = make_client(RecordingDoer(status=404))
    with pytest.raises(ApiError) as info:
        client.league.get("id")
    assert info.value == ERR_NOT_FOUND


def test_match_client_uses_base_region():
    client, _ = make_client(RecordingDoer(body=b"{}"))
    assert client.base.region == Region.EUROPE_WEST
    assert client.match.get(1) == {}