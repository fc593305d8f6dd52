from bracket_results.providers.smashgg.client import SmashggClient
from bracket_results.providers.smashgg.errors import NameParseError, UrlParseError
from bracket_results.providers.smashgg.results import get_events
from bracket_results.providers.smashgg.types import (
    CanonicalEvent,
    ErrorRecord,
    MatchedPlayer,
    UrlReference,
)

__all__ = [
    "CanonicalEvent",
    "ErrorRecord",
    "MatchedPlayer",
    "NameParseError",
    "SmashggClient",
    "UrlParseError",
    "UrlReference",
    "get_events",
]
