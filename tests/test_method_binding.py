"""
Unit tests for MethodBinding matching.

Run with: pytest tests/test_method_binding.py -v
"""

import dataclasses

import pytest

from labmock.domain.models import MethodBinding, args_equal, kwargs_equal


def _noop(*args, **kwargs):
    return None


class Opaque:
    """Object compared by identity only."""


class TestArgumentEquality:
    """Tests for the shallow argument comparison helpers."""
    
    def test_equal_values_match(self):
        assert args_equal((1, "a"), (1, "a"))
    
    def test_different_value_does_not_match(self):
        assert not args_equal((1, "a"), (1, "b"))
    
    def test_different_length_does_not_match(self):
        assert not args_equal((1, "a"), (1,))
        assert not args_equal((1,), (1, "a"))
    
    def test_empty_sequences_match(self):
        assert args_equal((), ())
    
    def test_objects_compare_by_identity(self):
        first, second = Opaque(), Opaque()
        assert args_equal((first,), (first,))
        assert not args_equal((first,), (second,))
    
    def test_value_like_containers_compare_by_value(self):
        assert args_equal(([1, 2], {"k": "v"}), ([1, 2], {"k": "v"}))
    
    def test_kwargs_need_same_names_and_values(self):
        assert kwargs_equal({"a": 1}, {"a": 1})
        assert not kwargs_equal({"a": 1}, {"a": 2})
        assert not kwargs_equal({"a": 1}, {"b": 1})
        assert not kwargs_equal({"a": 1}, {})


class TestMethodBindingMatches:
    """Tests for MethodBinding.matches()."""
    
    def test_matches_same_name_and_args(self):
        binding = MethodBinding("greet", (1, "a"), _noop)
        
        assert binding.matches("greet", (1, "a"))
    
    def test_rejects_other_args(self):
        binding = MethodBinding("greet", (1, "a"), _noop)
        
        assert not binding.matches("greet", (1, "b"))
        assert not binding.matches("greet", (1,))
        assert not binding.matches("greet", (1, "a", None))
    
    def test_rejects_other_method_name(self):
        binding = MethodBinding("greet", ("bob",), _noop)
        
        assert not binding.matches("farewell", ("bob",))
    
    def test_function_bindings_match_none_name(self):
        binding = MethodBinding(None, (1, 2), _noop)
        
        assert binding.matches(None, (1, 2))
        assert not binding.matches("call", (1, 2))
    
    def test_keyword_arguments_take_part_in_matching(self):
        binding = MethodBinding("save", ("k",), _noop, kwargs={"overwrite": True})
        
        assert binding.matches("save", ("k",), {"overwrite": True})
        assert not binding.matches("save", ("k",))
        assert not binding.matches("save", ("k",), {"overwrite": False})
    
    def test_binding_without_kwargs_rejects_keyword_call(self):
        binding = MethodBinding("save", ("k",), _noop)
        
        assert binding.matches("save", ("k",), {})
        assert not binding.matches("save", ("k",), {"overwrite": True})
    
    def test_list_args_are_accepted(self):
        binding = MethodBinding("greet", ["bob"], _noop)
        
        assert binding.args == ("bob",)
        assert binding.matches("greet", ["bob"])


class TestMethodBindingImmutability:
    """Bindings never change after creation."""
    
    def test_fields_cannot_be_reassigned(self):
        binding = MethodBinding("greet", ("bob",), _noop)
        
        with pytest.raises(dataclasses.FrozenInstanceError):
            binding.method_name = "farewell"
    
    def test_recorded_args_are_copied(self):
        recorded = ["bob"]
        binding = MethodBinding("greet", recorded, _noop)
        recorded.append("alice")
        
        assert binding.args == ("bob",)
    
    def test_recorded_kwargs_are_copied_and_read_only(self):
        recorded = {"loud": True}
        binding = MethodBinding("greet", (), _noop, kwargs=recorded)
        recorded["loud"] = False
        
        assert binding.kwargs["loud"] is True
        with pytest.raises(TypeError):
            binding.kwargs["loud"] = False
    
    def test_kwargs_default_is_immutable_none(self):
        kwargs_field = next(f for f in dataclasses.fields(MethodBinding) if f.name == "kwargs")

        assert kwargs_field.default is None
        assert MethodBinding("greet", (), _noop).kwargs == {}
        assert MethodBinding("greet", (), _noop, kwargs=None).matches("greet", ())

    def test_get_substitute_returns_the_function(self):
        binding = MethodBinding("greet", (), _noop)
        
        assert binding.get_substitute() is _noop
    
    def test_describe(self):
        assert MethodBinding("greet", ("bob",), _noop, kwargs={"n": 2}).describe() == "greet('bob', n=2)"
        assert MethodBinding(None, (1,), _noop).describe() == "<function>(1)"
