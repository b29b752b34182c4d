# golio

A Python client for the League of Legends game API and the Data Dragon
static data service. It uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from golio.client import Client
from golio.regions import Region
from golio.lol_constants import Queue, Tier, Division

client = Client("placeholder", region=Region.NORTH_AMERICA)

# Static game data from Data Dragon
champion = client.data_dragon.get_champion("Ashe")
print(champion.name, champion.title)

item = client.data_dragon.get_item("1001")
print(item.name, item.gold.total)

# Ranked data from the game API
challengers = client.riot.lol.league.get_challenger(Queue.RANKED_SOLO)
players = client.riot.lol.league.list_players(Queue.RANKED_SOLO, Tier.GOLD, Division.ONE)

# Champion mastery
total = client.riot.lol.champion_mastery.get_total("summoner-id")

# Match history, fetched page by page
for match in client.riot.lol.match.list_stream("account-id"):
    print(match)
```

`Client(api_key, doer=None, logger=None, region=Region.EUROPE_WEST)`
builds two clients over the same transport and logger:

- `client.data_dragon`, a `golio.ddragon.DataDragonClient`;
- `client.riot`, a `golio.riot.RiotClient`.

### Data Dragon

`DataDragonClient` returns dataclasses from `golio.ddragon_models`
(`ChampionData`, `ChampionDataExtended`, `Item`, `Mastery`,
`ProfileIcon`, `SummonerSpell` and the types they contain). Each has
`from_dict` and `to_dict` for converting to and from JSON objects.

Methods: `get_champions`, `get_champion`, `get_champion_by_id`,
`get_items`, `get_item`, `get_runes`, `get_rune`, `get_masteries`,
`get_mastery`, `get_profile_icons`, `get_profile_icon`,
`get_summoner_spells`, `get_summoner_spell` and `clear_caches`.

When it is created, the client requests the realm document for its region
to find the current game version and language. If that request fails, it
uses version `9.10.1` and `LanguageCode.UNITED_STATES`. For runes and
masteries, any version newer than `7.23.1` is replaced with `7.23.1`,
because that is the last version that has them. `version_greater_than(v1, v2)`
performs this version comparison.

Results are cached per client. A lookup that finds nothing raises the
"not found" error. `ChampionData.get_extended(client)` and
`RecommendedItem.get_item(client)` fetch the related records through a
`DataDragonClient`.

### Game API

`client.riot.lol` is a `golio.lol_client.LolClient` with these endpoint
groups:

- `champion` — `get_free_rotation()`
- `champion_mastery` — `list(summoner_id)`, `get(summoner_id, champion_id)`,
  `get_total(summoner_id)`
- `league` — `get_challenger(queue)`, `get_grandmaster(queue)`,
  `get_master(queue)`, `list_by_summoner(summoner_id)`,
  `list_players(queue, tier, division)`, `get(league_id)`
- `match` — `get(match_id)`,
  `list(account_id, begin_index, end_index, options=None)`,
  `list_stream(account_id)`, `get_timeline(match_id)`,
  `list_ids_by_tournament_code(code)`, `get_for_tournament(match_id, code)`

The same four groups are also available directly on `client.riot` as
deprecated shortcuts.

These methods return the decoded JSON as plain dicts and lists. They do
not return model objects.

`golio.lol_match.MatchListOptions` filters a match list by champion ids,
queue ids, `begin_time` and `end_time`. Naive datetimes are read as local
time. `list_stream` requests pages of 100 and yields match references
until a page holds fewer than 100.

Requests go to `http://kernel:8080`, with the key in the `X-Riot-Token`
header (`golio.base_client.BaseClient`). The host must be reachable, for
example through a proxy that forwards requests to the real service.

A 503 response is retried once, after one second. A 429 response waits for
the number of seconds in `Retry-After` and then tries again. If that header
is missing or is not an integer, the client raises `ValueError`.

### Errors

An HTTP error response raises `golio.errors.ApiError`, which carries
`message` and `status_code`. Two errors are equal when both fields are
equal. `error_for_status(status_code)` returns the error for a status
code. Unknown codes give the message "unknown error reason".

### HTTP transport

Requests go through a `golio.transport.Doer`: any object with a method
`do(request: Request) -> Response`. The default is `UrllibDoer`, which
uses `urllib` and returns error statuses as responses rather than raising
them. Pass a different doer as `doer=` to add caching or to replace the
network in tests.

### Not included

The package has no command-line program. It has no clients for the
summoner, status, spectator, tournament or third-party-code endpoints,
although `golio.lol_constants` lists their paths. It does not fetch Data
Dragon images.