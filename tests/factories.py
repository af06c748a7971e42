"""Test factories for building AST nodes and scan results.

Centralized factory functions to avoid duplication across test modules.
All factories accept source snippets and return real parsed nodes.
"""

import ast

from callmatch.domain.model.argument_signature import ArgumentKind, ArgumentSignature
from callmatch.domain.model.call_match import ArgumentBinding, CallMatch
from callmatch.domain.model.location import Location


def parse_expr(source: str) -> ast.expr:
    """Parse single expression with source positions.

    Args:
        source: Expression source, e.g. "obj.method(1)"

    Returns:
        Expression node
    """
    return ast.parse(source, mode="eval").body


def parse_call(source: str) -> ast.Call:
    """Parse call expression.

    Args:
        source: Call source, e.g. "f(1, 2)"

    Returns:
        Call node

    Raises:
        AssertionError: If source is not a call
    """
    node = parse_expr(source)
    assert isinstance(node, ast.Call), f"not a call: {source}"
    return node


def calls_in(source: str) -> list[ast.Call]:
    """Parse module source and collect all calls in source order."""
    tree = ast.parse(source)
    calls = [node for node in ast.walk(tree) if isinstance(node, ast.Call)]
    return sorted(calls, key=lambda c: (c.lineno, c.col_offset))


def mandatory(name: str) -> ArgumentSignature:
    """Mandatory parameter descriptor."""
    return ArgumentSignature(name=name, kind=ArgumentKind.MANDATORY)


def optional(name: str) -> ArgumentSignature:
    """Optional parameter descriptor."""
    return ArgumentSignature(name=name, kind=ArgumentKind.OPTIONAL)


def make_call_match(
    source: str = "f(1)",
    signature: str = "f(a)",
    *,
    parameters: tuple[ArgumentSignature, ...] = (),
    line: int = 1,
) -> CallMatch:
    """Create a CallMatch for tests.

    Parameters bind to call arguments in order.

    Args:
        source: Call source
        signature: Signature text stored on the match
        parameters: Parameters for the first len(parameters) arguments
        line: Line number (default 1)

    Returns:
        CallMatch instance
    """
    call = parse_call(source)
    bindings = tuple(
        ArgumentBinding(parameter=param, node=arg, source=ast.unparse(arg))
        for param, arg in zip(parameters, call.args, strict=False)
    )
    return CallMatch(
        signature=signature,
        call=call,
        location=Location(line=line, column=0),
        bindings=bindings,
    )
