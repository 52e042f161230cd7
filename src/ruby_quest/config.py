"""
config.py

PURPOSE: Configuration loading and settings management.
DEPENDENCIES: pydantic, pydantic-settings

ARCHITECTURE NOTES:
Configuration comes from multiple sources (in priority order):
1. CLI flags (highest priority)
2. Environment variables (RUBY_QUEST_*)
3. Defaults (lowest priority)
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class OpenTelemetrySettings(BaseSettings):
    """Settings for OpenTelemetry tracing."""

    enabled: bool = Field(
        default=False,
        description="Export a span for every turn",
    )
    service_name: str = Field(
        default="ruby-quest",
        description="Service name reported with each span",
    )
    endpoint: str | None = Field(
        default=None,
        description="OTLP gRPC endpoint (console only when unset)",
    )

    model_config = {"env_prefix": "RUBY_QUEST_OTEL_"}


class Settings(BaseSettings):
    """Main application settings."""

    log_level: str = Field(
        default="WARNING",
        description="Logging level",
    )
    debug: bool = Field(
        default=False,
        description="Show state after every turn",
    )
    show_intro: bool = Field(
        default=True,
        description="Tell the story of Uncle Simon before the first room",
    )
    otel: OpenTelemetrySettings = Field(
        default_factory=OpenTelemetrySettings,
        description="OpenTelemetry settings",
    )

    model_config = {"env_prefix": "RUBY_QUEST_"}


def get_settings() -> Settings:
    """Get application settings, loading from environment."""
    return Settings(otel=OpenTelemetrySettings())
