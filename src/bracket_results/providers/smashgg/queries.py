from __future__ import annotations

import logging
from collections.abc import Sequence

from .types import QueryRequest, UrlReference

logger = logging.getLogger(__name__)

ENTRANT_ALIAS_PREFIX = "entrant_"

_ENTRANT_FIELDS = """
        pageInfo {
          totalPages
        }
        nodes {
          name
          standing {
            placement
          }
        }"""


def entrant_alias(index: int) -> str:
    return f"{ENTRANT_ALIAS_PREFIX}{index}"


def player_variable(index: int) -> str:
    return f"player_{index}"


def _variable_defs(player_count: int) -> str:
    defs = ["$slug: String!", "$perPage: Int!"]
    defs.extend(f"${player_variable(i)}: String!" for i in range(player_count))
    return ", ".join(defs)


def _entrant_selections(player_count: int, *, indent: str) -> str:
    blocks = []
    for i in range(player_count):
        blocks.append(
            f"{indent}{entrant_alias(i)}: entrants("
            f"query: {{page: 1, perPage: $perPage, filter: {{name: ${player_variable(i)}}}}}"
            f") {{{_ENTRANT_FIELDS}\n{indent}}}"
        )
    return "\n".join(blocks)


def tournament_query(player_count: int) -> str:
    """All events of a tournament, each with one entrant search per player."""

    return (
        f"query TournamentEvents({_variable_defs(player_count)}) {{\n"
        "  tournament(slug: $slug) {\n"
        "    events {\n"
        "      id\n"
        "      name\n"
        "      slug\n"
        f"{_entrant_selections(player_count, indent='      ')}\n"
        "    }\n"
        "  }\n"
        "}\n"
    )


def event_query(player_count: int) -> str:
    """A single event with one entrant search per player."""

    return (
        f"query Event({_variable_defs(player_count)}) {{\n"
        "  event(slug: $slug) {\n"
        "    id\n"
        "    name\n"
        "    slug\n"
        f"{_entrant_selections(player_count, indent='    ')}\n"
        "  }\n"
        "}\n"
    )


def build_query(ref: UrlReference, players: Sequence[str], *, per_page: int) -> QueryRequest:
    """Pick the tournament-wide or single-event query for `ref` and parameterize it.

    Search terms are passed as GraphQL variables; `aliases` lines up with
    `players` by position.
    """

    count = len(players)
    query = tournament_query(count) if ref.is_tournament_wide else event_query(count)

    variables: dict[str, object] = {"slug": ref.query_identifier, "perPage": per_page}
    for i, term in enumerate(players):
        variables[player_variable(i)] = term

    logger.debug(
        "Built %s query for %s with %d player(s)",
        "tournament" if ref.is_tournament_wide else "event",
        ref.query_identifier,
        count,
    )
    return QueryRequest(
        query=query,
        variables=variables,
        aliases=tuple(entrant_alias(i) for i in range(count)),
    )
