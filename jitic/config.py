"""Configuration management using pydantic-settings."""

from functools import lru_cache
from typing import Annotated

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Command line options take precedence over every value defined here.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Jira
    jira_url: str = Field(
        default="",
        description="Jira instance URL (scheme://[username[:password]@]host[:port]/)",
    )
    jira_username: str = Field(default="", description="Jira username")
    jira_password: str = Field(default="", description="Jira password or API token")
    jira_cloud: bool = Field(
        default=False, description="Talk to Jira Cloud instead of Server/Data Center"
    )
    request_timeout: int = Field(
        default=30,
        ge=1,
        description="Timeout in seconds for a single Jira request",
    )

    # Validation
    projects: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        validation_alias=AliasChoices("JITIC_PROJECTS", "projects"),
        description="Fixed project keys; skips fetching projects from Jira when set",
    )
    require_one: bool = Field(
        default=False,
        validation_alias=AliasChoices("JITIC_REQUIRE_ONE", "require_one"),
        description="Succeed when at least one issue key exists (instead of all)",
    )

    # Logging
    log_level: str = Field(
        default="WARNING", description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )

    @field_validator("projects", mode="before")
    @classmethod
    def parse_projects(cls, v: str | list[str] | None) -> list[str]:
        """Accept a comma-separated list, e.g. JITIC_PROJECTS=WEB,SYS."""
        if v is None:
            return []
        if isinstance(v, str):
            return [item.strip() for item in v.split(",") if item.strip()]
        return v


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
