"""Application layer: matcher, scanner, reporters."""

from callmatch.application.matcher import Matcher, create_matcher
from callmatch.application.reporters import ConsoleConfig, ConsoleReporter
from callmatch.application.scanner import classify_arguments, find_calls, scan

__all__ = [
    # Matcher
    "Matcher",
    "create_matcher",
    # Scanner
    "scan",
    "find_calls",
    "classify_arguments",
    # Reporters
    "ConsoleConfig",
    "ConsoleReporter",
]
