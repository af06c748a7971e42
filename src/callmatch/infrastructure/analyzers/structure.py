"""Structural primitives over AST subtrees.

- structural_depth: deepest traversal path length below a node
- purify: copy without location metadata
- nodes_equal: deep equality ignoring location metadata

All functions are pure and never mutate their input.
"""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING, Any

from callmatch.infrastructure.analyzers.traversal_keys import DEFAULT_TRAVERSAL_KEYS

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

# Path elements added when descending: field name, plus index for list fields
_FIELD_STEP = 1
_LIST_ITEM_STEP = 2


def node_kind(node: ast.AST) -> str:
    """Node kind as used in traversal key tables."""
    return type(node).__name__


def iter_structural_children(
    node: ast.AST,
    traversal_keys: Mapping[str, tuple[str, ...]] = DEFAULT_TRAVERSAL_KEYS,
) -> Iterator[tuple[ast.AST, int]]:
    """Yield (child, path step) pairs following traversal keys.

    Node kinds missing from traversal_keys have no children.
    None entries and non-node values are skipped.

    Args:
        node: Parent node
        traversal_keys: Node kind → child field names

    Yields:
        Child node and number of path elements between parent and child
    """
    for field in traversal_keys.get(node_kind(node), ()):
        value = getattr(node, field, None)
        match value:
            case ast.AST():
                yield value, _FIELD_STEP
            case list():
                for item in value:
                    if isinstance(item, ast.AST):
                        yield item, _LIST_ITEM_STEP


def structural_depth(
    node: ast.AST,
    traversal_keys: Mapping[str, tuple[str, ...]] = DEFAULT_TRAVERSAL_KEYS,
    limit: int | None = None,
) -> int:
    """Compute maximum traversal path length in subtree.

    Root is at depth 0. `a` → 0, `a.b` → 1, `a.b.c` → 2, `f(x).y` → 3.

    Args:
        node: Subtree root
        traversal_keys: Node kind → child field names
        limit: Stop descending once depth exceeds limit (result is then
            some value > limit, not necessarily the maximum)

    Returns:
        Maximum path length observed
    """
    return _depth(node, 0, traversal_keys, limit)


def _depth(
    node: ast.AST,
    current: int,
    traversal_keys: Mapping[str, tuple[str, ...]],
    limit: int | None,
) -> int:
    deepest = current
    for child, step in iter_structural_children(node, traversal_keys):
        if limit is not None and deepest > limit:
            break
        deepest = max(deepest, _depth(child, current + step, traversal_keys, limit))
    return deepest


def has_structural_depth(
    node: ast.AST,
    depth: int,
    traversal_keys: Mapping[str, tuple[str, ...]] = DEFAULT_TRAVERSAL_KEYS,
) -> bool:
    """Check subtree depth equals depth, stopping early when exceeded."""
    return structural_depth(node, traversal_keys, limit=depth) == depth


def purify(node: Any) -> Any:
    """Deep copy AST without location metadata.

    Removes every field listed in the node's `_attributes`
    (lineno, col_offset, end_lineno, end_col_offset), recursively.
    Lists are copied; other values are shared.

    Args:
        node: AST node, list of nodes, or plain value

    Returns:
        Copy with same kinds, fields and values, no positions
    """
    match node:
        case ast.AST():
            fields = {
                field: purify(getattr(node, field))
                for field in node._fields
                if hasattr(node, field)
            }
            return type(node)(**fields)
        case list():
            return [purify(item) for item in node]
        case _:
            return node


def nodes_equal(left: Any, right: Any) -> bool:
    """Deep structural equality ignoring location metadata.

    Nodes are equal when they have the same kind and all `_fields`
    are equal. Lists compare element-wise. Plain values compare by
    type and `==`, so `1` and `True` differ.

    Args:
        left: AST node, list, or plain value
        right: AST node, list, or plain value

    Returns:
        True if structurally equal
    """
    match left:
        case ast.AST():
            if type(left) is not type(right):
                return False
            return all(
                nodes_equal(getattr(left, field, None), getattr(right, field, None))
                for field in left._fields
            )
        case list():
            if not isinstance(right, list) or len(left) != len(right):
                return False
            return all(nodes_equal(a, b) for a, b in zip(left, right, strict=True))
        case _:
            return type(left) is type(right) and left == right
