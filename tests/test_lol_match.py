import json
import logging
from datetime import datetime, timezone

import pytest

from golio.base_client import BaseClient
from golio.errors import ERR_NOT_FOUND, ApiError
from golio.lol_match import MatchClient, MatchListOptions
from golio.regions import Region
from golio.transport import Response

NOT_FOUND = ApiError("not found", 404)


class FakeDoer:
    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []

    def do(self, request):
        self.requests.append(request)
        if len(self.responses) > 1:
            return self.responses.pop(0)
        return self.responses[0]


def ok(obj):
    return Response(200, json.dumps(obj).encode())


def make_client(doer):
    base = BaseClient(Region.EUROPE_WEST, "placeholder", doer, logging.getLogger("test"))
    return MatchClient(base)


def test_list_response_with_options():
    doer = FakeDoer(ok({}))
    options = MatchListOptions(
        champion=[1], queue=[200], begin_time=datetime.now(), end_time=datetime.now()
    )
    assert make_client(doer).list("id", 0, 1, options) == {}
    url = doer.requests[0].url
    assert url.startswith(
        "http://kernel:8080/lol/match/v4/matchlists/by-account/id?beginIndex=0&endIndex=1"
        "&champion=1&queue=200&beginTime="
    )
    assert "&endTime=" in url


def test_list_without_options():
    doer = FakeDoer(ok({}))
    make_client(doer).list("id", 0, 1)
    assert doer.requests[0].url.endswith("/matchlists/by-account/id?beginIndex=0&endIndex=1")


def test_list_not_found():
    with pytest.raises(ApiError) as info:
        make_client(FakeDoer(Response(404))).list("id", 0, 1, MatchListOptions(champion=[1]))
    assert info.value == ERR_NOT_FOUND


def test_build_param_empty():
    assert MatchListOptions().build_param() == ""


def test_build_param_epoch_millis():
    moment = datetime(2020, 1, 1, tzinfo=timezone.utc)
    options = MatchListOptions(begin_time=moment, end_time=moment)
    assert options.build_param() == "&beginTime=1577836800000&endTime=1577836800000"


def test_build_param_repeats_filters():
    options = MatchListOptions(champion=[1, 2], queue=[200])
    assert options.build_param() == "&champion=1&champion=2&queue=200"


def test_list_stream_pages_until_short_page():
    doer = FakeDoer(ok({"matches": [None] * 100}), ok({}))
    got = list(make_client(doer).list_stream("id"))
    assert got == [None] * 100
    assert len(doer.requests) == 2
    assert doer.requests[1].url.endswith("?beginIndex=100&endIndex=200")


def test_list_stream_not_found():
    doer = FakeDoer(Response(404))
    received = []
    with pytest.raises(ApiError) as info:
        for match in make_client(doer).list_stream("id"):
            received.append(match)
    error = info.value
    assert error == NOT_FOUND
    assert error == ERR_NOT_FOUND
    assert received == []
    assert len(doer.requests) == 1


def test_get_response():
    doer = FakeDoer(ok({}))
    assert make_client(doer).get(1) == {}
    assert doer.requests[0].url.endswith("/lol/match/v4/matches/1")


def test_get_not_found():
    with pytest.raises(ApiError) as info:
        make_client(FakeDoer(Response(404))).get(1)
    assert info.value == ERR_NOT_FOUND


def test_get_timeline_response():
    doer = FakeDoer(ok({}))
    assert make_client(doer).get_timeline(0) == {}
    assert doer.requests[0].url.endswith("/lol/match/v4/timelines/by-match/0")


def test_get_timeline_not_found():
    with pytest.raises(ApiError) as info:
        make_client(FakeDoer(Response(404))).get_timeline(0)
    assert info.value == ERR_NOT_FOUND


def test_list_ids_by_tournament_code_response():
    doer = FakeDoer(ok([]))
    assert make_client(doer).list_ids_by_tournament_code("tournamentCode") == []
    assert doer.requests[0].url.endswith("/matches/by-tournament-code/tournamentCode/ids")


def test_list_ids_by_tournament_code_not_found():
    with pytest.raises(ApiError) as info:
        make_client(FakeDoer(Response(404))).list_ids_by_tournament_code("tournamentCode")
    assert info.value == ERR_NOT_FOUND


def test_get_for_tournament_response():
    doer = FakeDoer(ok({}))
    assert make_client(doer).get_for_tournament(0, "tournamentCode") == {}
    assert doer.requests[0].url.endswith("/matches/0/by-tournament-code/tournamentCode")


def test_get_for_tournament_not_found():
    with pytest.raises(ApiError) as info:
        make_client(FakeDoer(Response(404))).get_for_tournament(0, "tournamentCode")
    assert info.value == ERR_NOT_FOUND