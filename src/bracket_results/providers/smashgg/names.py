from __future__ import annotations

from .errors import NameParseError
from .types import ParsedName

CREW_SEPARATOR = " | "

_LINE_BREAKS = ("\n", "\r", "\u2028", "\u2029")


def parse_player_name(name: str | None) -> ParsedName:
    """Split a smash.gg display name into an optional crew prefix and a tag.

    Grammar: `tag` or `crew | tag`, where crew and tag are non-empty. With
    several separators the right-most one that leaves both sides non-empty is
    the split point, so the crew may itself contain `" | "`.
    """

    if not name:
        return ParsedName()

    # Display names are single-line.
    if any(ch in name for ch in _LINE_BREAKS):
        raise NameParseError(name)

    sep_len = len(CREW_SEPARATOR)
    idx = name.rfind(CREW_SEPARATOR)
    while idx != -1:
        crew, tag = name[:idx], name[idx + sep_len :]
        if crew and tag:
            return ParsedName(crew=crew, tag=tag)
        # Separators may overlap (e.g. "a | | b"); step back one character.
        idx = name.rfind(CREW_SEPARATOR, 0, idx + sep_len - 1)

    return ParsedName(tag=name)
