"""Tests for domain/model/options.py."""

import pytest

from callmatch.domain.model.options import MatcherOptions


class TestMatcherOptions:
    """Tests for MatcherOptions."""

    def test_default_traversal_keys_is_none(self) -> None:
        assert MatcherOptions().traversal_keys is None

    def test_custom_traversal_keys(self) -> None:
        keys = {"Attribute": ("value",), "Name": ()}
        assert MatcherOptions(traversal_keys=keys).traversal_keys == keys

    def test_field_lists_become_tuples(self) -> None:
        options = MatcherOptions(traversal_keys={"Attribute": ["value"]})  # type: ignore[dict-item]
        assert options.traversal_keys == {"Attribute": ("value",)}

    def test_caller_dict_changes_do_not_leak(self) -> None:
        keys = {"Attribute": ("value",)}
        options = MatcherOptions(traversal_keys=keys)
        keys["Name"] = ()
        del keys["Attribute"]
        assert options.traversal_keys == {"Attribute": ("value",)}

    def test_traversal_keys_read_only(self) -> None:
        options = MatcherOptions(traversal_keys={"Name": ()})
        with pytest.raises(TypeError):
            options.traversal_keys["Call"] = ("func",)  # type: ignore[index]

    def test_hashable(self) -> None:
        first = MatcherOptions(traversal_keys={"Name": (), "Attribute": ("value",)})
        second = MatcherOptions(traversal_keys={"Attribute": ("value",), "Name": ()})
        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second, MatcherOptions()}) == 2

    def test_empty_kind_raises(self) -> None:
        with pytest.raises(ValueError, match="node kind"):
            MatcherOptions(traversal_keys={"": ("value",)})

    def test_string_fields_raises(self) -> None:
        """A bare string is a common mistake for a one-field tuple."""
        with pytest.raises(TypeError, match="Attribute"):
            MatcherOptions(traversal_keys={"Attribute": "value"})  # type: ignore[dict-item]
