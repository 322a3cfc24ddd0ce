"""
Configuration management for the caption-e2e suite.

Settings are read from ``E2E_``-prefixed environment variables and,
optionally, from a TOML file named by ``E2E_CONFIG_FILE``. All timeouts
are in seconds.
"""

import os
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import InvalidConfigError, MissingConfigError

DEFAULT_BASE_URL = "http://localhost:3000"

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


class Settings(BaseSettings):
    """Settings for one run of the end-to-end suite."""

    model_config = SettingsConfigDict(
        env_prefix="E2E_",
        extra="ignore",
    )

    # Target application
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Root URL of the caption generator under test",
    )
    require_target: bool = Field(
        default=False,
        description="Fail instead of skip when the target is unreachable",
    )

    # Browser launch
    browser: str = Field(default="chromium", description="Browser engine")
    channel: Optional[str] = Field(
        None, description="Browser channel, e.g. chrome or msedge"
    )
    headless: bool = Field(default=True, description="Run without a window")
    slow_mo: int = Field(
        default=0, ge=0, description="Delay between operations in ms"
    )
    window_width: int = Field(default=1920, ge=320, description="Window width")
    window_height: int = Field(
        default=1080, ge=240, description="Window height"
    )

    # Waits
    implicit_wait: float = Field(
        default=10.0, gt=0, description="Window for presence probes"
    )
    default_timeout: float = Field(
        default=20.0, gt=0, description="Wait for an element to be visible"
    )
    page_load_timeout: float = Field(
        default=30.0, gt=0, description="Navigation timeout"
    )
    redirect_timeout: float = Field(
        default=30.0, gt=0, description="Wait for the post-signup redirect"
    )
    negative_check_timeout: float = Field(
        default=5.0,
        gt=0,
        description="How long to watch for a transition that must not happen",
    )
    generation_timeout: float = Field(
        default=30.0, gt=0, description="Wait for a caption to be generated"
    )
    poll_interval: float = Field(
        default=0.25, gt=0, description="Polling interval for waits"
    )

    # Artifacts
    results_dir: Path = Field(
        default=Path("test-results"), description="Test artifact directory"
    )
    screenshot_on_failure: bool = Field(
        default=True, description="Save a screenshot when a case fails"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base URL format."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("browser")
    @classmethod
    def validate_browser(cls, v: str) -> str:
        """Validate the browser engine name."""
        v_lower = v.strip().lower()
        if v_lower not in SUPPORTED_BROWSERS:
            raise ValueError(
                f"Browser must be one of: {', '.join(SUPPORTED_BROWSERS)}"
            )
        return v_lower

    @field_validator("log_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                f"Log level must be one of: {', '.join(valid_levels)}")
        return v_upper

    @property
    def dashboard_url(self) -> str:
        """URL of the authenticated dashboard."""
        return f"{self.base_url}/dashboard"

    @property
    def screenshots_dir(self) -> Path:
        """Directory for failure screenshots."""
        return self.results_dir / "screenshots"

    @classmethod
    def from_toml(cls, path: str | Path) -> "Settings":
        """
        Load settings from a TOML configuration file.

        Keys may sit at the top level or under an ``[e2e]`` table.

        Args:
            path: Path to the TOML configuration file.

        Returns:
            Settings instance with loaded configuration.

        Raises:
            ConfigurationError: If the file cannot be read or parsed.
        """
        path = Path(path)
        if not path.exists():
            raise MissingConfigError(
                "E2E_CONFIG_FILE", details={"path": str(path)}
            )

        try:
            with open(path, "rb") as f:
                config_data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise InvalidConfigError(
                config_key="E2E_CONFIG_FILE",
                value=str(path),
                reason=f"Failed to parse TOML: {e}",
            )

        return cls._from_dict(config_data)

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Settings":
        """Create settings from a parsed configuration mapping."""
        if isinstance(data.get("e2e"), dict):
            data = data["e2e"]
        return cls(**data)


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached suite settings.

    Environment variables are always read; ``E2E_CONFIG_FILE`` adds a
    TOML file on top of them.

    Returns:
        Settings instance.
    """
    config_file = os.getenv("E2E_CONFIG_FILE")

    if config_file:
        return Settings.from_toml(config_file)
    return Settings()


def reload_settings() -> Settings:
    """
    Reload settings, clearing the cache.

    Returns:
        Fresh Settings instance.
    """
    get_settings.cache_clear()
    return get_settings()
