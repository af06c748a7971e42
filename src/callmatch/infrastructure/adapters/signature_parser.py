"""Signature parser: signature text → validated call expression.

Uses Python AST as the external parser.
The validated ast.Call is returned verbatim (not copied, not purified).

FAIL-FIRST: the first invalid argument stops validation.
"""

from __future__ import annotations

import ast

from callmatch.domain.exceptions.signature import (
    DuplicateArgumentNameError,
    InvalidArgumentFormError,
    NotCallExpressionError,
    SignatureSyntaxError,
)


def parse_signature(signature: str) -> ast.Call:
    """Parse and validate signature text.

    Args:
        signature: Call in Python syntax, e.g. "obj.method(a, [b])"

    Returns:
        Validated call expression node

    Raises:
        TypeError: If signature is not a string
        SignatureSyntaxError: If signature is not valid Python
        NotCallExpressionError: If signature is not a single call expression
        InvalidArgumentFormError: If an argument is not `name` or `[name]`
        DuplicateArgumentNameError: If a parameter name repeats
    """
    if not isinstance(signature, str):
        raise TypeError(f"signature must be str, got {type(signature).__name__}")

    try:
        tree = ast.parse(signature.strip(), mode="exec")
    except SyntaxError as e:
        raise SignatureSyntaxError(signature, e.msg or str(e)) from e

    return extract_call_expression(tree, signature)


def extract_call_expression(tree: ast.Module, signature: str | None = None) -> ast.Call:
    """Extract the single call expression from a parsed signature.

    Args:
        tree: Parsed signature module
        signature: Signature text for error messages

    Returns:
        Validated call expression node

    Raises:
        NotCallExpressionError: If tree is not exactly one call statement
        InvalidArgumentFormError: If an argument is not `name` or `[name]`
        DuplicateArgumentNameError: If a parameter name repeats
    """
    match tree.body:
        case [ast.Expr(value=ast.Call() as call)]:
            validate_call_expression(call, signature)
            return call
    raise NotCallExpressionError(signature)


def validate_call_expression(call: ast.AST, signature: str | None = None) -> None:
    """Validate call expression arguments, left to right.

    Args:
        call: Node expected to be ast.Call
        signature: Signature text for error messages

    Raises:
        NotCallExpressionError: If call is not ast.Call
        InvalidArgumentFormError: On first invalid argument
        DuplicateArgumentNameError: On first repeated name
    """
    if not isinstance(call, ast.Call):
        raise NotCallExpressionError(signature)

    names: dict[str, str] = {}
    for arg in call.args:
        name = argument_name(arg, signature)
        if name in names:
            raise DuplicateArgumentNameError(name, signature)
        names[name] = name

    # keywords follow every positional argument in source
    if call.keywords:
        raise InvalidArgumentFormError(signature)


def argument_name(arg: ast.expr, signature: str | None = None) -> str:
    """Get parameter name declared by a signature argument.

    Accepted forms:
        a      → "a" (mandatory)
        [a]    → "a" (optional)

    Raises:
        InvalidArgumentFormError: For any other form
    """
    match arg:
        case ast.Name(id=name):
            return name
        case ast.List(elts=[ast.Name(id=name)]):
            return name
    raise InvalidArgumentFormError(signature)
