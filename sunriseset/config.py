"""Environment-driven settings for the sunrise/sunset service."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from .diagnostics import DiagnosticSink, LoggerSink, console_sink, null_sink

DIAGNOSTICS_ENV = "SUNRISESET_DIAGNOSTICS"
CORS_ORIGINS_ENV = "SUNRISESET_CORS_ORIGINS"

DIAGNOSTICS_LOGGER = "sunriseset.diagnostics"
DIAGNOSTICS_MODES = ("null", "console", "logging")


class ConfigurationError(RuntimeError):
    """Raised when an environment setting holds an unusable value."""


@dataclass(frozen=True)
class Settings:
    diagnostics: str = "null"
    cors_origins: Tuple[str, ...] = ("*",)

    def sink(self) -> DiagnosticSink:
        """Return the diagnostic sink selected by :attr:`diagnostics`."""

        if self.diagnostics == "console":
            return console_sink
        if self.diagnostics == "logging":
            return LoggerSink(logging.getLogger(DIAGNOSTICS_LOGGER))
        return null_sink


def _parse_origins(raw: str) -> Tuple[str, ...]:
    origins = tuple(item.strip() for item in raw.split(",") if item.strip())
    if not origins:
        raise ConfigurationError(f"{CORS_ORIGINS_ENV} must list at least one origin")
    return origins


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Read :class:`Settings` from *environ* (``os.environ`` by default)."""

    env = os.environ if environ is None else environ

    diagnostics = env.get(DIAGNOSTICS_ENV, "null").strip().lower()
    if diagnostics not in DIAGNOSTICS_MODES:
        raise ConfigurationError(
            f"{DIAGNOSTICS_ENV} must be one of {', '.join(DIAGNOSTICS_MODES)}: {diagnostics!r}"
        )

    raw_origins = env.get(CORS_ORIGINS_ENV)
    cors_origins = _parse_origins(raw_origins) if raw_origins is not None else ("*",)
    return Settings(diagnostics=diagnostics, cors_origins=cors_origins)
