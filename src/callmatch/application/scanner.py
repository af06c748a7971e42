"""Scanner: run matchers over a parsed module.

Supplies the (node, parent) pairs Matcher expects, in source order,
and collects matched calls with their argument bindings.
"""

from __future__ import annotations

import ast
import logging
from typing import TYPE_CHECKING

from callmatch.application.matcher import create_matcher
from callmatch.domain.exceptions.parsing import SourceSyntaxError
from callmatch.domain.model.call_match import ArgumentBinding, CallMatch
from callmatch.domain.model.location import Location
from callmatch.infrastructure.analyzers.walk import walk_with_parents

if TYPE_CHECKING:
    from collections.abc import Iterable

    from callmatch.application.matcher import Matcher
    from callmatch.domain.model.argument_signature import ArgumentSignature
    from callmatch.domain.model.options import MatcherOptions

logger = logging.getLogger(__name__)


def scan(tree: ast.AST, matchers: Iterable[Matcher]) -> tuple[CallMatch, ...]:
    """Find calls in tree accepted by any matcher.

    A call accepted by several matchers is reported once per matcher.

    Args:
        tree: Parsed source (usually ast.Module)
        matchers: Compiled matchers

    Returns:
        Matches in source order
    """
    matchers = tuple(matchers)
    matches: list[CallMatch] = []

    for node, _parent in walk_with_parents(tree):
        if not isinstance(node, ast.Call):
            continue
        for matcher in matchers:
            if matcher.test(node):
                matches.append(_build_match(matcher, node))

    logger.debug("scan found %d matching call(s) for %d matcher(s)", len(matches), len(matchers))
    return tuple(matches)


def find_calls(
    source: str,
    signature: str,
    *,
    filename: str = "<string>",
    options: MatcherOptions | None = None,
) -> tuple[CallMatch, ...]:
    """Parse source and find calls matching one signature.

    Args:
        source: Python source text
        signature: Call signature, e.g. "obj.method(a, [b])"
        filename: Name used in error messages
        options: Matcher options

    Returns:
        Matches in source order

    Raises:
        SourceSyntaxError: If source is not valid Python
        SignatureError: If signature is invalid
    """
    matcher = create_matcher(signature, options)

    try:
        tree = ast.parse(source, filename=filename)
    except SyntaxError as e:
        raise SourceSyntaxError(filename, f"syntax error: {e}") from e

    return scan(tree, (matcher,))


def _build_match(matcher: Matcher, call: ast.Call) -> CallMatch:
    bindings: list[ArgumentBinding] = []
    for arg in call.args:
        parameter = matcher.match_argument(arg, call)
        if parameter is not None:
            bindings.append(
                ArgumentBinding(parameter=parameter, node=arg, source=ast.unparse(arg))
            )

    return CallMatch(
        signature=matcher.signature,
        call=call,
        location=Location.of(call),
        bindings=tuple(bindings),
    )


def classify_arguments(
    tree: ast.AST, matcher: Matcher
) -> tuple[tuple[ast.AST, ArgumentSignature], ...]:
    """Classify every node in tree against its parent call.

    Each node is paired with its immediate parent and handed to
    Matcher.match_argument, the way a traversal visitor would.

    Args:
        tree: Parsed source
        matcher: Compiled matcher

    Returns:
        (argument node, parameter) pairs in source order
    """
    classified: list[tuple[ast.AST, ArgumentSignature]] = []
    for node, parent in walk_with_parents(tree):
        if parent is None:
            continue
        parameter = matcher.match_argument(node, parent)
        if parameter is not None:
            classified.append((node, parameter))
    return tuple(classified)
