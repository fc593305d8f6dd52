from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from bracket_results.providers.base.errors import ProviderMappingError

from .names import parse_player_name
from .types import EntrantGroup, EntrantMatch, MatchedPlayer, RawEntrant

logger = logging.getLogger(__name__)


def too_many_matches_message(search_term: str) -> str:
    return f"Found too many players matching {search_term}. Please be more specific"


def match_entrants(
    search_term: str,
    total_pages: int,
    matches: Sequence[RawEntrant] | None,
) -> EntrantMatch:
    """
    Decide whether one search term's matches are usable.

    More than one page of results means the term is ambiguous: only an error is
    returned, whatever the matches are. Otherwise each match becomes a
    MatchedPlayer. Missing matches give an empty result.
    """

    if total_pages > 1:
        logger.warning("Search term %r matched %d pages of entrants", search_term, total_pages)
        return EntrantMatch(error=too_many_matches_message(search_term))

    if matches is None:
        return EntrantMatch()

    players: list[MatchedPlayer] = []
    for entrant in matches:
        parsed = parse_player_name(entrant.display_name)
        players.append(
            MatchedPlayer(
                name=entrant.display_name,
                crew=parsed.crew,
                tag=parsed.tag,
                placement=entrant.placement,
            )
        )
    return EntrantMatch(players=tuple(players))


def _parse_raw_entrant(node: Any, *, search_term: str) -> RawEntrant:
    if not isinstance(node, dict):
        raise ProviderMappingError(
            "Expected entrant node object", context={"search_term": search_term, "node": node}
        )

    name = node.get("name")
    if name is not None and not isinstance(name, str):
        raise ProviderMappingError(
            "Entrant name is not a string", context={"search_term": search_term, "name": name}
        )

    placement: int | None = None
    standing = node.get("standing")
    if isinstance(standing, dict):
        value = standing.get("placement")
        if isinstance(value, int):
            placement = value

    return RawEntrant(display_name=name, placement=placement)


def parse_entrant_group(search_term: str, raw: Any) -> EntrantGroup:
    """Read an upstream `{pageInfo: {totalPages}, nodes: [...]}` connection."""

    if not isinstance(raw, dict):
        raise ProviderMappingError(
            "Expected entrant connection object", context={"search_term": search_term}
        )

    total_pages = 0
    page_info = raw.get("pageInfo")
    if isinstance(page_info, dict) and isinstance(page_info.get("totalPages"), int):
        total_pages = page_info["totalPages"]

    nodes = raw.get("nodes")
    if nodes is None:
        return EntrantGroup(search_term=search_term, total_pages=total_pages, matches=None)
    if not isinstance(nodes, list):
        raise ProviderMappingError(
            "Expected entrant nodes list", context={"search_term": search_term}
        )

    return EntrantGroup(
        search_term=search_term,
        total_pages=total_pages,
        matches=tuple(_parse_raw_entrant(n, search_term=search_term) for n in nodes),
    )
