"""Traversal keys: which child fields count as structure, per node kind.

Node kind is the AST class name (`type(node).__name__`).
The default table covers every node class of the running interpreter's
`ast` grammar, so it follows grammar changes between Python versions.
"""

from __future__ import annotations

import ast
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

# Expression context markers (Load/Store/Del) are not structure.
_EXCLUDED_FIELDS = frozenset({"ctx"})


def _node_classes(root: type[ast.AST]) -> Iterator[type[ast.AST]]:
    """Yield root and all its subclasses, depth-first."""
    stack: list[type[ast.AST]] = [root]
    while stack:
        cls = stack.pop()
        yield cls
        stack.extend(cls.__subclasses__())


def build_traversal_keys(
    root: type[ast.AST] = ast.AST,
    exclude: frozenset[str] = _EXCLUDED_FIELDS,
) -> Mapping[str, tuple[str, ...]]:
    """Build read-only traversal key table from AST class `_fields`.

    Args:
        root: Root AST class, all subclasses included
        exclude: Field names never followed

    Returns:
        Read-only mapping: node kind → ordered child field names
    """
    keys: dict[str, tuple[str, ...]] = {}
    for cls in _node_classes(root):
        fields = getattr(cls, "_fields", ())
        keys.setdefault(cls.__name__, tuple(f for f in fields if f not in exclude))
    return MappingProxyType(keys)


def freeze_traversal_keys(
    keys: Mapping[str, tuple[str, ...]] | None,
) -> Mapping[str, tuple[str, ...]]:
    """Return read-only copy of user keys, default table when None."""
    if keys is None:
        return DEFAULT_TRAVERSAL_KEYS
    return MappingProxyType({kind: tuple(fields) for kind, fields in keys.items()})


DEFAULT_TRAVERSAL_KEYS: Mapping[str, tuple[str, ...]] = build_traversal_keys()
