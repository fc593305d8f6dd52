from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

import httpx

from .errors import ProviderRateLimited, ProviderRequestError

logger = logging.getLogger(__name__)

Json = dict[str, Any]


@dataclass
class BaseHttpClient:
    """
    Provider-agnostic HTTP client wrapper.

    - Uses a single underlying httpx.Client for connection pooling.
    - Follows redirects (bounded by max_redirects) so short links resolve.
    - Provides consistent error handling.
    - Provider-specific clients wrap this and add auth / convenience methods.
    """

    base_url: str
    timeout_s: float = 30.0
    connect_timeout_s: float = 10.0
    max_redirects: int = 20
    headers: Mapping[str, str] = field(default_factory=dict)

    transport: httpx.BaseTransport | None = None

    def __post_init__(self) -> None:
        self._client = httpx.Client(
            base_url=self.base_url.rstrip("/") + "/",
            timeout=httpx.Timeout(self.timeout_s, connect=self.connect_timeout_s),
            headers=dict(self.headers),
            follow_redirects=True,
            max_redirects=self.max_redirects,
            transport=self.transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> BaseHttpClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def request_json(
        self,
        method: str,
        path: str,
        *,
        json: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Json:
        """
        Perform an HTTP request and return parsed JSON (dict).
        Raises ProviderRequestError (including ProviderRateLimited) on transport issues / non-2xx.
        """
        try:
            resp = self._client.request(
                method=method,
                url=path.lstrip("/"),
                json=json,
                headers=headers,
            )
        except (httpx.TimeoutException, httpx.NetworkError, httpx.TooManyRedirects) as e:
            raise ProviderRequestError(str(e)) from e

        if resp.status_code == 429:
            raise ProviderRateLimited("Provider rate limited the request (HTTP 429).")

        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ProviderRequestError(
                f"HTTP {resp.status_code} for {method} {resp.request.url}"
            ) from e

        try:
            data = resp.json()
        except ValueError as e:
            raise ProviderRequestError("Response was not valid JSON.") from e

        if not isinstance(data, dict):
            raise ProviderRequestError(f"Expected JSON object, got {type(data)}")

        return data

    def post_json(
        self,
        path: str,
        *,
        json: Mapping[str, Any],
        headers: Mapping[str, str] | None = None,
    ) -> Json:
        return self.request_json("POST", path, json=json, headers=headers)

    def resolve_url(self, url: str) -> str:
        """
        Follow the redirect chain starting at `url` and return the terminal URL.

        Only the response head is read; the final status code is not checked,
        since callers only care where the chain ends.
        """
        if httpx.URL(url).is_relative_url:
            raise ProviderRequestError(f"Refusing to resolve relative URL {url!r}")

        try:
            with self._client.stream("GET", url) as resp:
                final_url = str(resp.url)
        except (httpx.TimeoutException, httpx.NetworkError, httpx.TooManyRedirects) as e:
            raise ProviderRequestError(f"Could not follow redirects for {url}: {e}") from e

        if final_url != url:
            logger.debug("Resolved %s -> %s", url, final_url)
        return final_url
