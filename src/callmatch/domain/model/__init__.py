"""Domain model: value objects and configuration."""

from callmatch.domain.model.argument_signature import ArgumentKind, ArgumentSignature
from callmatch.domain.model.call_match import ArgumentBinding, CallMatch
from callmatch.domain.model.location import Location
from callmatch.domain.model.options import MatcherOptions

__all__ = [
    "ArgumentKind",
    "ArgumentSignature",
    "ArgumentBinding",
    "CallMatch",
    "Location",
    "MatcherOptions",
]
