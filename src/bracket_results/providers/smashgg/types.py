from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

SMASHGG_BASE_URL = "https://smash.gg"

Json = dict[str, Any]


class SourceEnum(StrEnum):
    SMASHGG = "smashgg"


def tournament_link(tournament: str) -> str:
    return f"{SMASHGG_BASE_URL}/tournament/{tournament}"


def event_link(slug: str) -> str:
    return f"{SMASHGG_BASE_URL}/{slug}"


@dataclass(frozen=True)
class UrlReference:
    """
    A resolved smash.gg URL.

    `event_slug` is set iff the URL points at a single event; in that case
    `query_identifier` is `tournament/<tournament>/event/<event>`, otherwise it
    is the bare tournament slug.
    """

    raw_url: str
    resolved_url: str
    tournament_slug: str
    event_slug: str | None = None

    @property
    def is_tournament_wide(self) -> bool:
        return self.event_slug is None

    @property
    def query_identifier(self) -> str:
        if self.event_slug is None:
            return self.tournament_slug
        return f"tournament/{self.tournament_slug}/event/{self.event_slug}"

    @property
    def tournament_link(self) -> str:
        return tournament_link(self.tournament_slug)


@dataclass(frozen=True)
class RawEntrant:
    display_name: str | None
    placement: int | None = None


@dataclass(frozen=True)
class EntrantGroup:
    search_term: str
    total_pages: int
    matches: tuple[RawEntrant, ...] | None


@dataclass(frozen=True)
class ParsedName:
    crew: str | None = None
    tag: str | None = None


@dataclass(frozen=True)
class MatchedPlayer:
    name: str | None
    crew: str | None = None
    tag: str | None = None
    placement: int | None = None

    def as_dict(self) -> Json:
        out: Json = {"name": self.name}
        if self.crew is not None:
            out["crew"] = self.crew
        if self.tag is not None:
            out["tag"] = self.tag
        if self.placement is not None:
            out["placement"] = self.placement
        return out


@dataclass(frozen=True)
class EntrantMatch:
    """Outcome of matching one search term: players, an error, or neither."""

    players: tuple[MatchedPlayer, ...] | None = None
    error: str | None = None


@dataclass(frozen=True)
class ErrorRecord:
    message: str

    def as_dict(self) -> Json:
        return {"message": self.message}


@dataclass(frozen=True)
class CanonicalEvent:
    id: Any
    name: str | None
    tournament: str
    tournament_link: str
    link: str
    slug: str | None
    players: tuple[MatchedPlayer, ...] = ()
    errors: tuple[str, ...] = ()

    def as_dict(self) -> Json:
        return {
            "id": self.id,
            "name": self.name,
            "tournament": self.tournament,
            "tournamentLink": self.tournament_link,
            "link": self.link,
            "slug": self.slug,
            "players": [p.as_dict() for p in self.players],
            "errors": list(self.errors),
        }


@dataclass(frozen=True)
class QueryRequest:
    """
    A parameterized GraphQL request.

    `aliases[i]` is the response field holding the entrant group for the
    i-th search term.
    """

    query: str
    variables: Mapping[str, Any]
    aliases: Sequence[str] = field(default_factory=tuple)

    def as_payload(self) -> Json:
        return {"query": self.query, "variables": dict(self.variables)}
