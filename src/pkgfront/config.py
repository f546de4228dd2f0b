"""Runtime settings read from the process environment.

Only two knobs exist; both have defaults so the tool runs with an
empty environment.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

MANPAGER_ENV: str = "PKG_MANPAGER"
LOG_LEVEL_ENV: str = "PKG_LOG_LEVEL"

DEFAULT_MANPAGER: str = "man"
DEFAULT_LOG_LEVEL: str = "WARNING"


@dataclass(frozen=True, slots=True)
class Settings:
    """Immutable front-end settings."""

    manpager: str = DEFAULT_MANPAGER
    """Program used to display ``pkg-<command>`` manual pages."""

    log_level: str = DEFAULT_LOG_LEVEL
    """Name of the level applied to the ``pkgfront`` logger."""

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from *environ* (``os.environ`` by default).

        Blank values fall back to the defaults; an unknown level name
        falls back to ``WARNING``.
        """
        env = os.environ if environ is None else environ

        manpager = env.get(MANPAGER_ENV, "").strip() or DEFAULT_MANPAGER

        level = env.get(LOG_LEVEL_ENV, "").strip().upper() or DEFAULT_LOG_LEVEL
        if not isinstance(logging.getLevelName(level), int):
            level = DEFAULT_LOG_LEVEL

        return cls(manpager=manpager, log_level=level)
