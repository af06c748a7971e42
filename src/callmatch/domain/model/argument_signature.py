"""Argument signature value object."""

from dataclasses import dataclass
from enum import Enum


class ArgumentKind(Enum):
    """How a signature declares a parameter.

    MANDATORY: bare name, `f(a)`
    OPTIONAL: name wrapped in a one-element list, `f([a])`
    """

    MANDATORY = "mandatory"
    OPTIONAL = "optional"


@dataclass(frozen=True, slots=True)
class ArgumentSignature:
    """Parameter declared by a signature.

    Attributes:
        name: Parameter name (identifier from the signature)
        kind: Mandatory or optional
    """

    name: str
    kind: ArgumentKind

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("argument name must not be empty")
        if not isinstance(self.kind, ArgumentKind):
            raise TypeError(f"kind must be ArgumentKind, got {type(self.kind).__name__}")

    @property
    def is_optional(self) -> bool:
        """True for `[name]` parameters."""
        return self.kind is ArgumentKind.OPTIONAL
