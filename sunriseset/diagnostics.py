"""Diagnostic sinks receiving the intermediate values of a calculation.

A sink is any callable accepting a ``%``-style format string followed by its
positional arguments. Calling it with no arguments emits a blank line.
"""

from __future__ import annotations

import logging
from typing import Protocol

__all__ = ["DiagnosticSink", "LoggerSink", "console_sink", "null_sink"]


class DiagnosticSink(Protocol):
    def __call__(self, message: str = "", *args: object) -> None: ...


def null_sink(message: str = "", *args: object) -> None:
    """Discard the message."""


def console_sink(message: str = "", *args: object) -> None:
    """Print the formatted message to standard output."""

    print(message % args if args else message)


class LoggerSink:
    """Forward diagnostics to a :class:`logging.Logger`.

    Formatting is deferred to the logging framework, so disabled levels cost
    nothing beyond the call itself.
    """

    def __init__(self, logger: logging.Logger, level: int = logging.DEBUG) -> None:
        self.logger = logger
        self.level = level

    def __call__(self, message: str = "", *args: object) -> None:
        self.logger.log(self.level, message, *args)

    def __repr__(self) -> str:
        return f"LoggerSink({self.logger.name!r}, level={logging.getLevelName(self.level)})"
