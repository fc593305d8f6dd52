from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Protocol

from .errors import NoEventsError, UpstreamGraphQLError
from .queries import build_query
from .reshape import reshape_event
from .types import CanonicalEvent, ErrorRecord, QueryRequest
from .urls import resolve_url

logger = logging.getLogger(__name__)

Json = dict[str, Any]

EventsResult = list[CanonicalEvent] | list[ErrorRecord] | ErrorRecord


class GraphQLClient(Protocol):
    """What get_events needs from a transport (SmashggClient satisfies it)."""

    per_page: int

    def follow_redirect(self, url: str) -> str: ...

    def execute(self, request: QueryRequest) -> Json: ...


def _raise_for_graphql_errors(payload: Json) -> None:
    errors = payload.get("errors")
    if errors is None:
        return
    messages = [
        str(e.get("message") or "") if isinstance(e, dict) else str(e)
        for e in errors
    ]
    raise UpstreamGraphQLError(messages)


def _extract_events(payload: Json, *, tournament_wide: bool, url: str | None) -> list[Json]:
    data = payload.get("data") or {}

    if tournament_wide:
        tournament = data.get("tournament") or {}
        events = tournament.get("events")
    else:
        event = data.get("event")
        events = [event] if event else None

    events = [e for e in events or [] if isinstance(e, dict)]
    if not events:
        raise NoEventsError(url)
    return events


def get_events(
    *,
    url: str | None,
    source: str | None,
    players: Sequence[str],
    client: GraphQLClient,
) -> EventsResult:
    """
    Resolve `url`, query smash.gg for the requested players and reshape the
    response.

    Returns one CanonicalEvent per upstream event. Upstream GraphQL errors come
    back as a list of ErrorRecords; an empty response comes back as a single
    ErrorRecord. UrlParseError and NameParseError propagate.
    """

    players = list(players)
    ref = resolve_url(url, source, follow_redirect=client.follow_redirect)
    request = build_query(ref, players, per_page=client.per_page)
    payload = client.execute(request)

    try:
        _raise_for_graphql_errors(payload)
        raw_events = _extract_events(
            payload, tournament_wide=ref.is_tournament_wide, url=url
        )
    except UpstreamGraphQLError as e:
        logger.warning("smash.gg returned errors for %s: %s", ref.query_identifier, e)
        return [ErrorRecord(message=m) for m in e.messages]
    except NoEventsError as e:
        logger.warning(str(e))
        return ErrorRecord(message=str(e))

    events = [
        reshape_event(
            raw,
            tournament=ref.tournament_slug,
            tournament_link=ref.tournament_link,
            players=players,
            aliases=request.aliases,
        )
        for raw in raw_events
    ]
    logger.info("Reshaped %d event(s) for %s", len(events), ref.query_identifier)
    return events
