"""AST analysis primitives."""

from callmatch.infrastructure.analyzers.structure import (
    has_structural_depth,
    iter_structural_children,
    node_kind,
    nodes_equal,
    purify,
    structural_depth,
)
from callmatch.infrastructure.analyzers.traversal_keys import (
    DEFAULT_TRAVERSAL_KEYS,
    build_traversal_keys,
    freeze_traversal_keys,
)
from callmatch.infrastructure.analyzers.walk import walk_with_parents

__all__ = [
    "DEFAULT_TRAVERSAL_KEYS",
    "build_traversal_keys",
    "freeze_traversal_keys",
    "has_structural_depth",
    "iter_structural_children",
    "node_kind",
    "nodes_equal",
    "purify",
    "structural_depth",
    "walk_with_parents",
]
