"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from coves.domain.value import CommentSort


class CovesAPISettings(BaseModel):
    """Coves AppView configuration."""

    # Base URL of the AppView serving social.coves.* XRPC endpoints
    base_url: str = "https://coves.social"

    # Request timeout in seconds
    timeout: float = 30.0


class ThreadingSettings(BaseModel):
    """Comment thread rendering configuration."""

    # Deepest level rendered inline before a "continue thread" affordance
    # Depth counting starts at 0 for top-level comments
    max_depth: int = Field(default=6, ge=0)

    # Depth limit inside a focused thread view
    focused_max_depth: int = Field(default=6, ge=0)

    # Comments per page requested from the AppView (max 100)
    page_size: int = Field(default=50, ge=1, le=100)

    # Reply nesting depth requested from the AppView
    fetch_depth: int = Field(default=10, ge=0)

    default_sort: CommentSort = CommentSort.HOT

    # Number of post threads kept in the session cache
    # Pinned sessions are never evicted, so the cache may briefly exceed this
    cache_size: int = Field(default=15, ge=1)


class APISettings(BaseModel):
    """API configuration."""

    host: str
    port: int
    protocol: Literal["http", "https"]

    @computed_field
    @property
    def base_url(self) -> str:
        """Construct base URL from host.

        In development: http://localhost:8000
        In production: https://threads.coves.social
        """
        if self.host == "localhost":
            return f"{self.protocol}://{self.host}:{self.port}"
        else:
            # Production uses standard ports (80/443)
            return f"{self.protocol}://{self.host}"


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using ``__`` for nested values:

        ENVIRONMENT=production
        HOST=threads.coves.social
        COVES__BASE_URL=https://coves.social
        THREADING__MAX_DEPTH=5
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows THREADING__MAX_DEPTH syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Git commit SHA (loaded from version.txt file or defaults to "unknown")
    git_sha: str = "unknown"

    host: str = "localhost"
    port: int = 8000

    # Nested settings
    coves: CovesAPISettings = CovesAPISettings()
    threading: ThreadingSettings = ThreadingSettings()
    api: APISettings = APISettings(
        host="localhost", port=8000, protocol="http"
    )  # Overwritten in validator
    observability: ObservabilitySettings = ObservabilitySettings()

    @model_validator(mode="after")
    def initialize_api_settings(self) -> "Settings":
        """Initialize API settings from host and environment."""
        protocol: Literal["http", "https"] = (
            "http" if self.environment in ("test", "development") else "https"
        )

        self.api = APISettings(host=self.host, port=self.port, protocol=protocol)
        self.git_sha = self._load_git_sha()

        return self

    @staticmethod
    def _load_git_sha() -> str:
        """Load git SHA from version file.

        Returns:
            Git SHA if version file exists, otherwise "unknown"
        """
        version_file = Path("/app/version.txt")
        if version_file.exists():
            try:
                return version_file.read_text().strip()
            except OSError:
                return "unknown"
        # In development, version file may not exist
        return "unknown"
