from __future__ import annotations

import logging
from typing import Any

from bracket_results.core.config import Settings, settings
from bracket_results.providers.base.client import BaseHttpClient
from bracket_results.providers.base.errors import ProviderResponseError

from .types import QueryRequest

logger = logging.getLogger(__name__)

Json = dict[str, Any]


class SmashggClient:
    """Authenticated smash.gg GraphQL transport plus redirect resolution."""

    def __init__(
        self,
        *,
        http: BaseHttpClient,
        endpoint: str | None = None,
        token: str | None = None,
        per_page: int | None = None,
    ) -> None:
        self.http = http
        self.endpoint = endpoint or settings.smashgg_graphql_endpoint
        self.token = token or settings.require_smashgg_graphql_token()
        self.per_page = per_page or settings.smashgg_entrants_per_page

    @classmethod
    def from_settings(cls, config: Settings = settings) -> SmashggClient:
        http = BaseHttpClient(
            base_url=config.smashgg_graphql_endpoint,
            timeout_s=config.http_timeout_s,
            connect_timeout_s=config.http_connect_timeout_s,
            max_redirects=config.http_max_redirects,
        )
        return cls(
            http=http,
            endpoint=config.smashgg_graphql_endpoint,
            token=config.require_smashgg_graphql_token(),
            per_page=config.smashgg_entrants_per_page,
        )

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> SmashggClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}

    def follow_redirect(self, url: str) -> str:
        return self.http.resolve_url(url)

    def execute(self, request: QueryRequest) -> Json:
        """
        POST a GraphQL request and return the `{data, errors}` envelope.

        GraphQL-level errors are returned, not raised; callers decide how to
        surface them.
        """

        logger.debug("POST %s variables=%s", self.endpoint, request.variables)
        payload = self.http.post_json(
            self.endpoint, json=request.as_payload(), headers=self._headers()
        )

        if "data" not in payload and "errors" not in payload:
            raise ProviderResponseError("GraphQL response had neither `data` nor `errors`.")

        return payload
