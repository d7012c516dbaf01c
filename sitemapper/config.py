"""Centralised settings for sitemapper.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).  Command-line options
take precedence over everything in this module.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from sitemapper.errors import ConfigError

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from exc


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw.strip())
    except ValueError as exc:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from exc


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "y", "on")


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------
    depth: int = field(default_factory=lambda: _env_int("SITEMAP_DEPTH", 1))
    parallel: int = field(default_factory=lambda: _env_int("SITEMAP_PARALLEL", 1))

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    output_path: Path = field(
        default_factory=lambda: Path(os.environ.get("SITEMAP_OUTPUT", "./sitemap.xml"))
    )

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: _env_float("REQUEST_TIMEOUT", 30.0)
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "SITEMAP_USER_AGENT", "Mozilla/5.0 (compatible; sitemapper/1.0)"
        )
    )
    follow_redirects: bool = field(
        default_factory=lambda: _env_bool("SITEMAP_FOLLOW_REDIRECTS", True)
    )

    def validate(
        self, depth: Optional[int] = None, parallel: Optional[int] = None
    ) -> None:
        """Raise :class:`ConfigError` if any effective value is out of range.

        *depth* and *parallel* are command-line overrides; when given they are
        checked in place of the corresponding settings.
        """
        depth = self.depth if depth is None else depth
        parallel = self.parallel if parallel is None else parallel
        if depth < 0:
            raise ConfigError(f"depth must be >= 0, got {depth}")
        if parallel < 1:
            raise ConfigError(f"parallel must be >= 1, got {parallel}")
        if self.request_timeout <= 0:
            raise ConfigError(
                f"request timeout must be positive, got {self.request_timeout}"
            )


# Module-level singleton, import this everywhere:
#   from sitemapper.config import settings
settings = Settings()
