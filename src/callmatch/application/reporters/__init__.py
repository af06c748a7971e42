"""Reporters for scan results."""

from callmatch.application.reporters.console import (
    ConsoleConfig,
    ConsoleReporter,
    format_bindings,
)

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "format_bindings",
]
