from __future__ import annotations

import logging
from collections.abc import Callable
from urllib.parse import urlsplit

from .errors import UrlParseError
from .types import SourceEnum, UrlReference, tournament_link

logger = logging.getLogger(__name__)

RedirectFollower = Callable[[str], str]


def _is_slug(segment: str) -> bool:
    return bool(segment) and not any(ch.isspace() for ch in segment)


def parse_smashgg_url(final_url: str, *, raw_url: str | None = None) -> UrlReference:
    """
    Parse `.../tournament/<tournament>[/event/<event>]...` out of a URL.

    The first `tournament` path segment followed by a slug wins. Anything after
    the optional event segment (e.g. `/overview`) is ignored.
    """

    segments = urlsplit(final_url).path.split("/")

    for i, segment in enumerate(segments[:-1]):
        if segment != "tournament" or not _is_slug(segments[i + 1]):
            continue

        tournament = segments[i + 1]
        event: str | None = None
        if len(segments) > i + 3 and segments[i + 2] == "event" and _is_slug(segments[i + 3]):
            event = segments[i + 3]

        return UrlReference(
            raw_url=raw_url if raw_url is not None else final_url,
            resolved_url=final_url,
            tournament_slug=tournament,
            event_slug=event,
        )

    raise UrlParseError(f"Could not parse SmashGG URL `{final_url}`", url=final_url)


def resolve_url(
    url: str | None,
    source: str | None,
    *,
    follow_redirect: RedirectFollower,
) -> UrlReference:
    """Turn user input into a UrlReference.

    Input from any source other than smash.gg is treated as a bare tournament
    slug and wrapped into a tournament URL first. Redirects are followed
    before parsing so short links work.
    """

    if not url:
        raise UrlParseError("No URL defined", url=url)

    full_url = url if source == SourceEnum.SMASHGG else tournament_link(url)
    parts = urlsplit(full_url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise UrlParseError(f"Could not parse SmashGG URL `{full_url}`", url=full_url)

    final_url = follow_redirect(full_url)
    ref = parse_smashgg_url(final_url, raw_url=url)

    logger.debug(
        "Resolved %s to %s (tournament_wide=%s)",
        url,
        ref.query_identifier,
        ref.is_tournament_wide,
    )
    return ref
