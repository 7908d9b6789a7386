"""ItemReport configuration management.

Loads configuration from environment variables with sensible defaults.
Defaults reproduce the reference report output byte for byte.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from dotenv import load_dotenv

from itemreport.exceptions import ConfigError

# Load .env file if present
load_dotenv()


@dataclass
class ReportConfig:
    """Business rule thresholds and rendering switches."""

    visibility_threshold: Decimal = Decimal("500")  # non-admins see value <= this
    priority_threshold: Decimal = Decimal("1000")  # admins mark value > this
    escape_html: bool = False  # opt-in; default output is unescaped


@dataclass
class AppConfig:
    """Root application configuration."""

    log_level: str = "INFO"
    log_format: str = "text"  # text or json

    report: ReportConfig = field(default_factory=ReportConfig)

    @classmethod
    def from_env(cls) -> AppConfig:
        """Load configuration from environment variables.

        Optional (with defaults):
        - LOG_LEVEL: Logging verbosity (default: "INFO")
        - LOG_FORMAT: "text" or "json" (default: "text")
        - REPORT_VISIBILITY_THRESHOLD: Max value visible to non-admins (default: 500)
        - REPORT_PRIORITY_THRESHOLD: Value above which admins flag priority (default: 1000)
        - REPORT_ESCAPE_HTML: Escape interpolated HTML fields (default: false)

        Raises:
            ConfigError: If a numeric setting cannot be parsed
        """
        log_format = os.getenv("LOG_FORMAT", "text").lower()
        if log_format not in ("text", "json"):
            raise ConfigError(f"LOG_FORMAT must be 'text' or 'json', got {log_format!r}")

        return cls(
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_format=log_format,
            report=ReportConfig(
                visibility_threshold=_env_decimal("REPORT_VISIBILITY_THRESHOLD", "500"),
                priority_threshold=_env_decimal("REPORT_PRIORITY_THRESHOLD", "1000"),
                escape_html=os.getenv("REPORT_ESCAPE_HTML", "false").lower() == "true",
            ),
        )


def _env_decimal(name: str, default: str) -> Decimal:
    raw = os.getenv(name, default)
    try:
        return Decimal(raw.strip())
    except InvalidOperation as e:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from e


# Singleton instance (lazy-loaded)
_config: AppConfig | None = None


def get_config() -> AppConfig:
    """Get or create singleton AppConfig instance from environment.

    Returns:
        AppConfig: Application configuration

    Raises:
        ConfigError: If environment values are malformed
    """
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() re-reads the environment."""
    global _config
    _config = None
