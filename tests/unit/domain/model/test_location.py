"""Tests for domain/model/location.py."""

import ast

import pytest

from callmatch.domain.model.location import Location
from tests.factories import parse_call


class TestLocation:
    """Tests for Location value object."""

    def test_create(self) -> None:
        loc = Location(line=3, column=4, end_line=3, end_column=10)
        assert loc.line == 3
        assert loc.column == 4
        assert loc.end_line == 3
        assert loc.end_column == 10

    def test_end_defaults_to_none(self) -> None:
        loc = Location(line=1, column=0)
        assert loc.end_line is None
        assert loc.end_column is None

    def test_str_start_only(self) -> None:
        assert str(Location(line=12, column=8)) == "12:8"

    def test_str_with_end(self) -> None:
        assert str(Location(line=3, column=4, end_line=4, end_column=1)) == "3:4-4:1"

    def test_str_end_line_without_column(self) -> None:
        assert str(Location(line=3, column=4, end_line=3)) == "3:4"

    def test_of_parsed_call(self) -> None:
        call = parse_call("obj.method(a,\n    b)")
        assert Location.of(call) == Location(line=1, column=0, end_line=2, end_column=6)

    def test_of_node_without_positions(self) -> None:
        call = ast.Call(func=ast.Name(id="f", ctx=ast.Load()), args=[], keywords=[])
        assert Location.of(call) == Location(line=1, column=0)

    def test_zero_line_raises(self) -> None:
        with pytest.raises(ValueError, match="line must be > 0"):
            Location(line=0, column=0)

    def test_negative_column_raises(self) -> None:
        with pytest.raises(ValueError, match="column must be >= 0"):
            Location(line=1, column=-1)

    def test_end_line_before_line_raises(self) -> None:
        with pytest.raises(ValueError, match="end_line"):
            Location(line=5, column=0, end_line=4)
