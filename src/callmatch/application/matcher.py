"""Call expression matcher compiled from a call signature.

Signature "obj.method(a, [b])" declares:
    callee      obj.method (must match exactly, positions ignored)
    a           mandatory parameter
    [b]         optional parameter

Matcher.test accepts call nodes with the same callee and 1..2 arguments.
Matcher.match_argument tells which parameter an argument node fills.
"""

from __future__ import annotations

import ast
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from callmatch.domain.exceptions.signature import InvalidArgumentFormError
from callmatch.domain.model.argument_signature import ArgumentKind, ArgumentSignature
from callmatch.domain.model.options import MatcherOptions
from callmatch.infrastructure.adapters.signature_parser import (
    parse_signature,
    validate_call_expression,
)
from callmatch.infrastructure.analyzers.structure import (
    has_structural_depth,
    nodes_equal,
    purify,
    structural_depth,
)
from callmatch.infrastructure.analyzers.traversal_keys import freeze_traversal_keys

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class Matcher:
    """Predicate over call expression nodes.

    Immutable: all derived values are computed in __post_init__.
    Candidate nodes are borrowed, never mutated or stored.
    Safe to share between threads while queried trees are not mutated.

    Attributes:
        signature_ast: Validated signature call expression
        options: Construction options
        signature: Signature as source text
        traversal_keys: Read-only traversal key table in use
        callee_depth: Structural depth of signature callee
        min_args: Number of mandatory parameters
        max_args: Number of all parameters
    """

    signature_ast: ast.Call
    options: MatcherOptions | None = None

    # === DERIVED (built in __post_init__) ===
    signature: str = field(init=False)
    traversal_keys: Mapping[str, tuple[str, ...]] = field(init=False, repr=False)
    callee_depth: int = field(init=False)
    min_args: int = field(init=False)
    max_args: int = field(init=False)
    _callee: ast.expr = field(init=False, repr=False)
    _arguments: tuple[ArgumentSignature, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate signature and precompute derived values. FAIL-FIRST."""
        validate_call_expression(self.signature_ast)

        options = self.options or MatcherOptions()
        keys = freeze_traversal_keys(options.traversal_keys)
        arguments = tuple(_to_argument_signature(arg) for arg in self.signature_ast.args)

        object.__setattr__(self, "options", options)
        object.__setattr__(self, "signature", ast.unparse(self.signature_ast))
        object.__setattr__(self, "traversal_keys", keys)
        object.__setattr__(
            self, "callee_depth", structural_depth(self.signature_ast.func, keys)
        )
        object.__setattr__(self, "max_args", len(arguments))
        object.__setattr__(
            self, "min_args", sum(1 for a in arguments if a.kind is ArgumentKind.MANDATORY)
        )
        object.__setattr__(self, "_callee", purify(self.signature_ast.func))
        object.__setattr__(self, "_arguments", arguments)

    def test(self, node: object) -> bool:
        """Check if node is a call matching this signature.

        Callee must match structurally (source positions ignored).
        Number of positional arguments must be within [min_args, max_args].
        Never raises: any non-call input gives False.

        Args:
            node: Candidate node

        Returns:
            True if node is a matching call expression
        """
        args = self._matched_args(node)
        if args is None:
            return False
        num_args = len(args)
        return self.min_args <= num_args <= self.max_args

    def match_argument(self, node: object, parent: object) -> ArgumentSignature | None:
        """Classify which declared parameter node fills in parent call.

        Optional parameters are filled in declared order once all
        mandatory ones are present: for "f(a, [b], [c])", "f(1, 2)"
        binds 1 → a, 2 → b.

        Args:
            node: Candidate argument node
            parent: Immediate parent of node

        Returns:
            Parameter descriptor, None if node is the callee, parent does
            not match, or node is not a direct argument of parent
        """
        if _is_callee_of_parent(node, parent):
            return None
        if not self.test(parent):
            return None

        args = _call_args(parent)
        if args is None:
            return None
        index = _index_of(args, node)
        if index is None:
            return None

        matched = self._filled_signatures(len(args))
        if index >= len(matched):
            return None
        return matched[index]

    def callee_ast(self) -> ast.expr:
        """Signature callee without location metadata (fresh copy)."""
        return purify(self.signature_ast.func)

    def argument_signatures(self) -> tuple[ArgumentSignature, ...]:
        """All declared parameters in signature order."""
        return self._arguments

    def _matched_args(self, node: object) -> list[ast.expr] | None:
        """Positional arguments of node if its callee matches, None otherwise."""
        func = _call_func(node)
        args = _call_args(node)
        if func is None or args is None:
            return None
        if not has_structural_depth(func, self.callee_depth, self.traversal_keys):
            return None
        if not nodes_equal(self._callee, func):
            return None
        return args

    def _filled_signatures(self, num_args: int) -> list[ArgumentSignature]:
        """Parameters actually filled by a call with num_args arguments, in order."""
        num_optional = num_args - self.min_args
        filled: list[ArgumentSignature] = []
        for arg_sig in self._arguments:
            if arg_sig.kind is ArgumentKind.MANDATORY:
                filled.append(arg_sig)
            elif num_optional > 0:
                num_optional -= 1
                filled.append(arg_sig)
        return filled

    def __repr__(self) -> str:
        """Return repr with signature text."""
        return f"Matcher({self.signature!r})"


def create_matcher(signature: str, options: MatcherOptions | None = None) -> Matcher:
    """Compile signature text into a Matcher.

    Args:
        signature: Call in Python syntax, e.g. "assert_equal(actual, expected, [msg])"
        options: Matcher options, defaults if None

    Returns:
        Matcher for the signature

    Raises:
        SignatureError: If signature is invalid (see parse_signature)
    """
    matcher = Matcher(parse_signature(signature), options)
    logger.debug(
        "compiled signature %s: callee depth %d, %d..%d arguments",
        matcher.signature,
        matcher.callee_depth,
        matcher.min_args,
        matcher.max_args,
    )
    return matcher


def _to_argument_signature(arg: ast.expr) -> ArgumentSignature:
    match arg:
        case ast.Name(id=name):
            return ArgumentSignature(name=name, kind=ArgumentKind.MANDATORY)
        case ast.List(elts=[ast.Name(id=name)]):
            return ArgumentSignature(name=name, kind=ArgumentKind.OPTIONAL)
    raise InvalidArgumentFormError()


def _is_callee_of_parent(node: object, parent: object) -> bool:
    return node is not None and _call_func(parent) is node


def _call_func(node: object) -> ast.AST | None:
    """Callee of a call node, None for non-calls and calls built without one."""
    if not isinstance(node, ast.Call):
        return None
    func = getattr(node, "func", None)
    return func if isinstance(func, ast.AST) else None


def _call_args(node: object) -> list[ast.expr] | None:
    """Positional arguments of a call node, None when missing or malformed."""
    if not isinstance(node, ast.Call):
        return None
    args = getattr(node, "args", None)
    return args if isinstance(args, list) else None


def _index_of(items: Sequence[object], target: object) -> int | None:
    """Position of target by identity, None if absent."""
    for index, item in enumerate(items):
        if item is target:
            return index
    return None
