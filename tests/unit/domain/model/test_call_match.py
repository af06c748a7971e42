"""Tests for domain/model/call_match.py."""

import ast

import pytest

from callmatch.domain.model.call_match import ArgumentBinding, CallMatch
from callmatch.domain.model.location import Location
from tests.factories import make_call_match, mandatory, optional, parse_call


class TestArgumentBinding:
    """Tests for ArgumentBinding."""

    def test_create(self) -> None:
        arg = ast.parse("x + 1", mode="eval").body
        binding = ArgumentBinding(parameter=mandatory("a"), node=arg, source="x + 1")
        assert binding.parameter == mandatory("a")
        assert binding.node is arg
        assert binding.source == "x + 1"

    def test_none_parameter_raises(self) -> None:
        with pytest.raises(TypeError, match="parameter"):
            ArgumentBinding(parameter=None, node=ast.Name(id="x"), source="x")  # type: ignore[arg-type]

    def test_statement_node_raises(self) -> None:
        with pytest.raises(TypeError, match="ast.expr"):
            ArgumentBinding(parameter=mandatory("a"), node=ast.Pass(), source="pass")  # type: ignore[arg-type]


class TestCallMatch:
    """Tests for CallMatch."""

    def test_arguments_mapping(self) -> None:
        match = make_call_match("f(x, y)", "f(a, [b])", parameters=(mandatory("a"), optional("b")))
        assert match.arguments == {"a": "x", "b": "y"}

    def test_binding_by_name(self) -> None:
        match = make_call_match("f(x, y)", "f(a, [b])", parameters=(mandatory("a"), optional("b")))
        binding = match.binding("b")
        assert binding is not None
        assert binding.source == "y"

    def test_binding_missing_returns_none(self) -> None:
        match = make_call_match("f(x)", "f(a, [b])", parameters=(mandatory("a"),))
        assert match.binding("b") is None

    def test_empty_signature_raises(self) -> None:
        with pytest.raises(ValueError, match="signature"):
            CallMatch(signature="", call=parse_call("f()"), location=Location(line=1, column=0))

    def test_non_call_raises(self) -> None:
        with pytest.raises(TypeError, match="ast.Call"):
            CallMatch(
                signature="f(a)",
                call=ast.Name(id="f"),  # type: ignore[arg-type]
                location=Location(line=1, column=0),
            )

    def test_more_bindings_than_arguments_raises(self) -> None:
        call = parse_call("f()")
        binding = ArgumentBinding(parameter=mandatory("a"), node=ast.Name(id="x"), source="x")
        with pytest.raises(ValueError, match="bindings"):
            CallMatch(
                signature="f(a)",
                call=call,
                location=Location(line=1, column=0),
                bindings=(binding,),
            )
