from __future__ import annotations


class UrlParseError(ValueError):
    """No URL was given, or the resolved URL is not a smash.gg tournament/event URL."""

    def __init__(self, message: str, *, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class NameParseError(ValueError):
    """A non-empty display name does not fit the `[crew | ]tag` grammar."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Could not parse player name {name}")
        self.name = name


class UpstreamGraphQLError(Exception):
    """The GraphQL response carried an `errors` array.

    Recovered by `get_events`, which returns the messages as error records.
    """

    def __init__(self, messages: list[str]) -> None:
        super().__init__("; ".join(messages))
        self.messages = messages


class NoEventsError(Exception):
    """The GraphQL response contained no events for the requested URL.

    Recovered by `get_events`, which returns a single error record.
    """

    def __init__(self, url: str | None) -> None:
        super().__init__(f"No events returned by SmashGG for URL: `{url}`")
        self.url = url
