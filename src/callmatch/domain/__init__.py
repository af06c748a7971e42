"""callmatch domain layer.

Pure domain logic with no external dependencies.
"""

from callmatch.domain.exceptions import (
    CallMatchError,
    DuplicateArgumentNameError,
    InvalidArgumentFormError,
    NotCallExpressionError,
    SignatureError,
    SignatureSyntaxError,
    SourceSyntaxError,
)
from callmatch.domain.model import (
    ArgumentBinding,
    ArgumentKind,
    ArgumentSignature,
    CallMatch,
    Location,
    MatcherOptions,
)

__all__ = [
    # Exceptions
    "CallMatchError",
    "SignatureError",
    "SignatureSyntaxError",
    "NotCallExpressionError",
    "InvalidArgumentFormError",
    "DuplicateArgumentNameError",
    "SourceSyntaxError",
    # Enums
    "ArgumentKind",
    # Value objects
    "ArgumentSignature",
    "ArgumentBinding",
    "CallMatch",
    "Location",
    # Configuration
    "MatcherOptions",
]
