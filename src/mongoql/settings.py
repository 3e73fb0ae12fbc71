from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MongoQLSettings(BaseSettings):
    """Runtime configuration.

    Environment variables are prefixed with MONGOQL_.
    """

    model_config = SettingsConfigDict(env_prefix="MONGOQL_", extra="ignore")

    log_level: str = Field(default="INFO", description="Python logging level")

    # --- Output ---
    json_indent: int = Field(default=2, ge=0, description="Indent for JSON query results")

    # --- Demo ---
    demo_username: str = Field(default="yusef", description="User looked up by the demo query")


settings = MongoQLSettings()
