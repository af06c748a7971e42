"""callmatch - Python call expression matcher made from function/method signatures."""

__version__ = "0.1.0"

from callmatch.application.matcher import Matcher, create_matcher
from callmatch.application.scanner import classify_arguments, find_calls, scan
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
    "__version__",
    # Entry points
    "create_matcher",
    "Matcher",
    "MatcherOptions",
    "scan",
    "find_calls",
    "classify_arguments",
    # Results
    "ArgumentKind",
    "ArgumentSignature",
    "ArgumentBinding",
    "CallMatch",
    "Location",
    # Exceptions
    "CallMatchError",
    "SignatureError",
    "SignatureSyntaxError",
    "NotCallExpressionError",
    "InvalidArgumentFormError",
    "DuplicateArgumentNameError",
    "SourceSyntaxError",
]
