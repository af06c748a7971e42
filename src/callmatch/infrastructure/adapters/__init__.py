"""Infrastructure adapters for external interfaces."""

from callmatch.infrastructure.adapters.signature_parser import (
    argument_name,
    extract_call_expression,
    parse_signature,
    validate_call_expression,
)

__all__ = [
    "argument_name",
    "extract_call_expression",
    "parse_signature",
    "validate_call_expression",
]
