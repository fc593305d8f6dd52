from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .entrants import match_entrants, parse_entrant_group
from .queries import entrant_alias
from .types import CanonicalEvent, MatchedPlayer, event_link


def reshape_event(
    raw_event: Mapping[str, Any],
    *,
    tournament: str,
    tournament_link: str,
    players: Sequence[str],
    aliases: Sequence[str] | None = None,
) -> CanonicalEvent:
    """
    Fold one upstream event into a CanonicalEvent.

    `aliases[i]` names the response field holding the entrant group for
    `players[i]`; it defaults to `entrant_<i>`. Players are deduplicated by
    value keeping first-seen order, and so are error messages.
    """

    if aliases is None:
        aliases = [entrant_alias(i) for i in range(len(players))]

    matched: dict[MatchedPlayer, None] = {}
    errors: dict[str, None] = {}

    for search_term, alias in zip(players, aliases, strict=True):
        raw_group = raw_event.get(alias)
        if raw_group is None:
            continue

        group = parse_entrant_group(search_term, raw_group)
        result = match_entrants(group.search_term, group.total_pages, group.matches)

        if result.players:
            for player in result.players:
                matched.setdefault(player)
        if result.error:
            errors.setdefault(result.error)

    slug = raw_event.get("slug")
    return CanonicalEvent(
        id=raw_event.get("id"),
        name=raw_event.get("name"),
        tournament=tournament,
        tournament_link=tournament_link,
        link=event_link(slug or ""),
        slug=slug,
        players=tuple(matched),
        errors=tuple(errors),
    )
