"""Application settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. Environment variables (SHELFSEARCH_ prefix)
  2. YAML config file (if specified)
  3. Default values
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings


class ServerSettings(BaseModel):
    """HTTP server configuration."""

    host: str = Field(default="0.0.0.0", description="Server bind address")
    port: int = Field(default=8080, description="Server port")
    workers: int = Field(default=4, description="Number of worker processes")
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")


class EngineSettings(BaseModel):
    """Search engine connection.

    The client handle built from these settings is shared by every
    repository; it pools connections and is safe for concurrent use.
    """

    url: str = Field(default="https://localhost:9200", description="Engine node URL (comma-separated for several)")
    username: str | None = Field(default=None, description="HTTP basic-auth username")
    password: str | None = Field(default=None, description="HTTP basic-auth password")
    verify_certs: bool = Field(default=True, description="Whether to verify TLS certificates")
    timeout: int = Field(default=30, description="Connection-level request timeout in seconds")
    extra: dict[str, Any] = Field(default_factory=dict, description="Extra kwargs for the engine client")

    @field_validator("url", mode="before")
    @classmethod
    def _join_url(cls, v: Any) -> str:
        """Accept a list of node URLs from YAML as well as a plain string."""
        if isinstance(v, (list, tuple)):
            return ",".join(str(h) for h in v)
        return v

    @property
    def hosts(self) -> list[str]:
        """Node URLs split out of ``url``."""
        return [h.strip() for h in self.url.split(",") if h.strip()]


class IndexSettings(BaseModel):
    """Index name per document type."""

    authors: str = Field(default="authors", description="Index holding Author documents")
    books: str = Field(default="books", description="Index holding Book documents")


class AuditSettings(BaseModel):
    """Identity stamped on writes until a real identity provider is wired in."""

    created_by: int = Field(default=1111, description="Identity recorded on inserts")
    updated_by: int = Field(default=2222, description="Identity recorded on updates")


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root application settings.

    Configuration is loaded from environment variables with the SHELFSEARCH_ prefix.
    Nested settings use double underscores: SHELFSEARCH_SERVER__PORT=9090

    Example:
        SHELFSEARCH_ENGINE__URL=https://search.internal:9200
        SHELFSEARCH_ENGINE__USERNAME=elastic
        SHELFSEARCH_INDICES__BOOKS=books-v2
    """

    model_config = {
        "env_prefix": "SHELFSEARCH_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    # Application metadata
    app_name: str = Field(default="ShelfSearch", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")

    # Component settings
    server: ServerSettings = Field(default_factory=ServerSettings)
    engine: EngineSettings = Field(default_factory=EngineSettings)
    indices: IndexSettings = Field(default_factory=IndexSettings)
    audit: AuditSettings = Field(default_factory=AuditSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Values from the YAML file are used as defaults; environment variables
        still take precedence.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.
        """
        import yaml  # type: ignore[import-untyped]

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)
