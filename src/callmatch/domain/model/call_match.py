"""Scan result value objects."""

from __future__ import annotations

import ast
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from callmatch.domain.model.argument_signature import ArgumentSignature
    from callmatch.domain.model.location import Location


@dataclass(frozen=True, slots=True)
class ArgumentBinding:
    """Actual argument bound to a declared parameter.

    Attributes:
        parameter: Declared parameter the argument fills
        node: Argument expression node (borrowed from the scanned tree)
        source: Argument expression as source text
    """

    parameter: ArgumentSignature
    node: ast.expr
    source: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.parameter is None:
            raise TypeError("parameter must not be None")
        if not isinstance(self.node, ast.expr):
            raise TypeError(f"node must be ast.expr, got {type(self.node).__name__}")


@dataclass(frozen=True, slots=True)
class CallMatch:
    """Call expression accepted by a matcher.

    Attributes:
        signature: Signature text of the matcher that accepted the call
        call: Matched call node (borrowed from the scanned tree)
        location: Position of the call
        bindings: Positional arguments with their parameters, in order
    """

    signature: str
    call: ast.Call
    location: Location
    bindings: tuple[ArgumentBinding, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.signature:
            raise ValueError("signature must not be empty")
        if not isinstance(self.call, ast.Call):
            raise TypeError(f"call must be ast.Call, got {type(self.call).__name__}")
        if len(self.bindings) > len(self.call.args):
            raise ValueError(
                f"{len(self.bindings)} bindings for call with {len(self.call.args)} arguments"
            )

    def binding(self, name: str) -> ArgumentBinding | None:
        """Get binding by parameter name, None if parameter not filled."""
        for item in self.bindings:
            if item.parameter.name == name:
                return item
        return None

    @property
    def arguments(self) -> dict[str, str]:
        """Parameter name to argument source text."""
        return {item.parameter.name: item.source for item in self.bindings}
