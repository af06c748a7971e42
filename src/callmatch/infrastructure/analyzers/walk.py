"""Parent-tracking AST walk."""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


def walk_with_parents(tree: ast.AST) -> Iterator[tuple[ast.AST, ast.AST | None]]:
    """Walk AST yielding (node, parent) pairs.

    Depth-first, children in field order, so calls come out in
    source order. Root has parent None.

    Args:
        tree: Root node

    Yields:
        Each node with its immediate parent
    """
    stack: list[tuple[ast.AST, ast.AST | None]] = [(tree, None)]

    while stack:
        node, parent = stack.pop()
        yield node, parent

        # Add children in reverse order to maintain depth-first order
        children = list(ast.iter_child_nodes(node))
        stack.extend((child, node) for child in reversed(children))
