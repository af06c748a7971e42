"""Domain exceptions."""

from callmatch.domain.exceptions.base import CallMatchError
from callmatch.domain.exceptions.parsing import SourceSyntaxError
from callmatch.domain.exceptions.signature import (
    DuplicateArgumentNameError,
    InvalidArgumentFormError,
    NotCallExpressionError,
    SignatureError,
    SignatureSyntaxError,
)

__all__ = [
    "CallMatchError",
    "SignatureError",
    "SignatureSyntaxError",
    "NotCallExpressionError",
    "InvalidArgumentFormError",
    "DuplicateArgumentNameError",
    "SourceSyntaxError",
]
