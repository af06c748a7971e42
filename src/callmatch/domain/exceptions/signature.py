"""Signature validation exceptions.

Raised while compiling a signature string into a matcher.
All are fatal: there is no partially constructed matcher.
"""

from callmatch.domain.exceptions.base import CallMatchError

NOT_CALL_EXPRESSION_MESSAGE = "Argument should be in the form of CallExpression"
INVALID_ARGUMENT_FORM_MESSAGE = "Argument should be in the form of `name` or `[name]`"
DUPLICATE_ARGUMENT_MESSAGE = "Duplicate argument name: "


class SignatureError(CallMatchError, ValueError):
    """Signature cannot be compiled into a matcher.

    Inherits ValueError for semantic correctness (bad input value).

    Attributes:
        signature: Signature source text, None when compiled from a tree
    """

    def __init__(self, message: str, signature: str | None = None) -> None:
        if not message:
            raise ValueError("message must not be empty")

        self.signature = signature
        super().__init__(message)


class SignatureSyntaxError(SignatureError):
    """Signature text is not valid Python.

    Attributes:
        signature: Signature source text
        reason: Parser error description
    """

    def __init__(self, signature: str, reason: str) -> None:
        if not reason:
            raise ValueError("reason must not be empty")

        self.reason = reason
        super().__init__(f"Invalid signature {signature!r}: {reason}", signature)


class NotCallExpressionError(SignatureError):
    """Signature is not a single bare call expression."""

    def __init__(self, signature: str | None = None) -> None:
        super().__init__(NOT_CALL_EXPRESSION_MESSAGE, signature)


class InvalidArgumentFormError(SignatureError):
    """Signature argument is neither `name` nor `[name]`."""

    def __init__(self, signature: str | None = None) -> None:
        super().__init__(INVALID_ARGUMENT_FORM_MESSAGE, signature)


class DuplicateArgumentNameError(SignatureError):
    """Two signature arguments resolve to the same parameter name.

    Attributes:
        name: The repeated parameter name
    """

    def __init__(self, name: str, signature: str | None = None) -> None:
        if not name:
            raise ValueError("name must not be empty")

        self.name = name
        super().__init__(DUPLICATE_ARGUMENT_MESSAGE + name, signature)
