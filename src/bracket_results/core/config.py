from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # smash.gg GraphQL
    smashgg_graphql_endpoint: str = Field(
        default="https://api.smash.gg/gql/alpha",
        validation_alias="SMASHGG_GRAPHQL_ENDPOINT",
    )
    smashgg_graphql_token: str | None = Field(
        default=None,
        validation_alias="SMASHGG_GRAPHQL_TOKEN",
        repr=False,
    )
    smashgg_entrants_per_page: int = Field(default=5, ge=1)

    # HTTP
    http_timeout_s: float = 30.0
    http_connect_timeout_s: float = 10.0
    http_max_redirects: int = Field(default=20, ge=0)

    log_level: str = "WARNING"

    def require_smashgg_graphql_token(self) -> str:
        if not self.smashgg_graphql_token:
            raise RuntimeError(
                "SMASHGG_GRAPHQL_TOKEN is not set. Set it in the environment or .env file."
            )
        return self.smashgg_graphql_token


settings = Settings()
