from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from bracket_results.providers.base.client import BaseHttpClient
from bracket_results.providers.smashgg.client import SmashggClient
from bracket_results.providers.smashgg.errors import UrlParseError
from bracket_results.providers.smashgg.results import get_events
from bracket_results.providers.smashgg.types import CanonicalEvent, ErrorRecord, MatchedPlayer

ENDPOINT = "https://api.smash.gg/gql/alpha"


def _client(graphql_response: dict[str, Any], sent: list[dict[str, Any]]) -> SmashggClient:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "POST":
            assert str(request.url) == ENDPOINT
            assert request.headers["Authorization"] == "Bearer test-token"
            sent.append(json.loads(request.content))
            return httpx.Response(200, json=graphql_response)

        if request.url.path == "/g8":
            return httpx.Response(
                302,
                headers={"Location": "https://smash.gg/tournament/genesis-8/event/melee-singles"},
            )
        return httpx.Response(200, text="<html></html>")

    http = BaseHttpClient(base_url=ENDPOINT, transport=httpx.MockTransport(handler))
    return SmashggClient(http=http, endpoint=ENDPOINT, token="test-token", per_page=5)


def test_event_url_reshapes_single_event() -> None:
    sent: list[dict[str, Any]] = []
    response = {
        "data": {
            "event": {
                "id": 7,
                "name": "Melee Singles",
                "slug": "tournament/genesis-8/event/melee-singles",
                "entrant_0": {
                    "pageInfo": {"totalPages": 1},
                    "nodes": [{"name": "TeamA | Alice", "standing": {"placement": 2}}],
                },
            }
        }
    }

    with _client(response, sent) as client:
        result = get_events(
            url="https://smash.gg/g8", source="smashgg", players=["TeamA | Alice"], client=client
        )

    assert sent[0]["variables"]["slug"] == "tournament/genesis-8/event/melee-singles"
    assert sent[0]["variables"]["player_0"] == "TeamA | Alice"
    assert "event(slug: $slug)" in sent[0]["query"]

    assert isinstance(result, list)
    assert len(result) == 1
    event = result[0]
    assert isinstance(event, CanonicalEvent)
    assert event.players == (
        MatchedPlayer(name="TeamA | Alice", crew="TeamA", tag="Alice", placement=2),
    )
    assert event.errors == ()
    assert event.tournament == "genesis-8"


def test_tournament_slug_returns_every_event() -> None:
    sent: list[dict[str, Any]] = []
    response = {
        "data": {
            "tournament": {
                "events": [
                    {
                        "id": 1,
                        "name": "Melee",
                        "slug": "tournament/genesis-8/event/melee",
                        "entrant_0": {"pageInfo": {"totalPages": 4}, "nodes": []},
                    },
                    {
                        "id": 2,
                        "name": "Ultimate",
                        "slug": "tournament/genesis-8/event/ultimate",
                        "entrant_0": {
                            "pageInfo": {"totalPages": 1},
                            "nodes": [{"name": "Al", "standing": {"placement": 33}}],
                        },
                    },
                ]
            }
        }
    }

    with _client(response, sent) as client:
        result = get_events(url="genesis-8", source="other", players=["Al"], client=client)

    assert sent[0]["variables"]["slug"] == "genesis-8"
    assert "tournament(slug: $slug)" in sent[0]["query"]

    assert isinstance(result, list)
    assert [e.id for e in result] == [1, 2]
    assert result[0].errors == ("Found too many players matching Al. Please be more specific",)
    assert result[0].players == ()
    assert result[1].players == (MatchedPlayer(name="Al", tag="Al", placement=33),)
    assert result[1].link == "https://smash.gg/tournament/genesis-8/event/ultimate"


def test_graphql_errors_short_circuit() -> None:
    sent: list[dict[str, Any]] = []
    with _client({"errors": [{"message": "bad slug"}], "data": None}, sent) as client:
        result = get_events(url="genesis-8", source="other", players=["Al"], client=client)

    assert result == [ErrorRecord(message="bad slug")]
    assert [r.as_dict() for r in result] == [{"message": "bad slug"}]


def test_no_events_returns_single_record() -> None:
    sent: list[dict[str, Any]] = []
    with _client({"data": {"tournament": None}}, sent) as client:
        result = get_events(url="abc", source="other", players=[], client=client)

    assert isinstance(result, ErrorRecord)
    assert result.message == "No events returned by SmashGG for URL: `abc`"


def test_url_parse_error_propagates_before_any_query() -> None:
    sent: list[dict[str, Any]] = []
    with _client({"data": {}}, sent) as client:
        with pytest.raises(UrlParseError):
            get_events(url="https://smash.gg/league/weekly", source="smashgg", players=[], client=client)

    assert sent == []


def test_empty_errors_array_still_short_circuits() -> None:
    sent: list[dict[str, Any]] = []
    response = {
        "errors": [],
        "data": {"tournament": {"events": [{"id": 1, "name": "E", "slug": "s"}]}},
    }
    with _client(response, sent) as client:
        result = get_events(url="genesis-8", source="other", players=[], client=client)

    assert result == []


@pytest.mark.parametrize(
    "data",
    [
        {"tournament": {"events": []}},
        {"tournament": {}},
        {"tournament": {"events": [None]}},
    ],
)
def test_tournament_without_usable_events_returns_single_record(data: dict[str, Any]) -> None:
    sent: list[dict[str, Any]] = []
    with _client({"data": data}, sent) as client:
        result = get_events(url="genesis-8", source="other", players=["Al"], client=client)

    assert result == ErrorRecord(message="No events returned by SmashGG for URL: `genesis-8`")


def test_missing_event_returns_single_record() -> None:
    sent: list[dict[str, Any]] = []
    url = "https://smash.gg/tournament/genesis-8/event/melee-singles"
    with _client({"data": {"event": None}}, sent) as client:
        result = get_events(url=url, source="smashgg", players=["Al"], client=client)

    assert isinstance(result, ErrorRecord)
    assert result.message == f"No events returned by SmashGG for URL: `{url}`"
