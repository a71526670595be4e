"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from tomparser.models.options import ParseOptions


class Settings(BaseSettings):
    """Configuration for the CLI and REST API.

    Values are read from environment variables and from a ``.env`` file
    in the working directory. The library functions never read these;
    they take :class:`ParseOptions` explicitly.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Shared
    log_level: str = "INFO"

    # Default parse options
    include_annotations: bool = True
    include_hidden_objects: bool = True
    strict_relationships: bool = False
    strict_data_types: bool = False

    # REST API
    api_server_host: str = "localhost"
    api_server_port: int = 8000
    port: int | None = None  # PORT overrides api_server_port when set
    max_body_mb: int = 50

    @property
    def effective_port(self) -> int:
        """Return the port to listen on (PORT takes precedence)."""
        return self.port if self.port is not None else self.api_server_port

    def parse_options(self) -> ParseOptions:
        return ParseOptions(
            include_annotations=self.include_annotations,
            include_hidden_objects=self.include_hidden_objects,
            strict_relationships=self.strict_relationships,
            strict_data_types=self.strict_data_types,
        )
