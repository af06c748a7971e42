"""Source parsing exceptions."""

from callmatch.domain.exceptions.base import CallMatchError


class SourceSyntaxError(CallMatchError, SyntaxError):
    """Source handed to the scanner failed to parse.

    FAIL-FIRST: invalid syntax raises immediately.
    Inherits SyntaxError for semantic correctness.

    Attributes:
        filename: Name used in messages
        reason: Error description
    """

    def __init__(self, filename: str, reason: str) -> None:
        if not filename:
            raise ValueError("filename must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.filename = filename
        self.reason = reason
        super().__init__(f"Failed to parse {filename}: {reason}")
