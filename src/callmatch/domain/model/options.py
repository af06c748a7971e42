"""Matcher configuration."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class MatcherOptions:
    """Configuration for matcher construction.

    Immutable (frozen dataclass) and hashable. All fields have defaults.

    Attributes:
        traversal_keys: Node kind (AST class name) to ordered child field
            names followed when measuring callee depth. None = default
            table built from the `ast` grammar. A supplied table is copied
            into a read-only mapping of tuples, so later changes to the
            caller's dict do not leak in.
    """

    traversal_keys: Mapping[str, tuple[str, ...]] | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.traversal_keys is None:
            return
        for kind, fields in self.traversal_keys.items():
            if not kind:
                raise ValueError("traversal key node kind must not be empty")
            if isinstance(fields, str):
                raise TypeError(f"traversal keys for '{kind}' must be a sequence of field names")
        frozen = MappingProxyType(
            {kind: tuple(fields) for kind, fields in self.traversal_keys.items()}
        )
        object.__setattr__(self, "traversal_keys", frozen)

    def __hash__(self) -> int:
        """Hash by table contents (mappingproxy itself is unhashable)."""
        if self.traversal_keys is None:
            return hash(None)
        return hash(frozenset(self.traversal_keys.items()))
