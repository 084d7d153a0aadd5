"""
Tests for mock_function().

Run with: pytest tests/test_function_mock.py -v
"""

import inspect

import pytest

from labmock import FunctionMockManager, MockAssertionError, mock_function, when
from tests.mocks import Greeter, add, explode


class TestFunctionMockCalls:
    """Tests for calls made on function mocks."""
    
    def test_stubbed_call_returns_value(self):
        g = mock_function(add)
        when(g)(1, 2).then_return(3)
        
        assert g(1, 2) == 3
        assert g(9, 9) is None
    
    def test_unstubbed_calls_return_none(self):
        g = mock_function(add)
        
        assert g() is None
        assert g(1, 2) is None
    
    def test_original_function_is_never_called(self):
        g = mock_function(explode)
        when(g)("x").then_return("stubbed")
        
        assert g("x") == "stubbed"
        assert g("y") is None
    
    def test_substitute_receives_call_arguments(self):
        g = mock_function(add)
        when(g)(1, 2).then(lambda a, b: a * 10 + b)
        
        assert g(1, 2) == 12
    
    def test_keyword_arguments_are_matched(self):
        g = mock_function(add)
        when(g)(1, b=2).then_return("keyword")
        
        assert g(1, b=2) == "keyword"
        assert g(1, 2) is None
    
    def test_then_raise(self):
        g = mock_function(add)
        when(g)(0, 0).then_raise(ZeroDivisionError("stubbed"))
        
        with pytest.raises(ZeroDivisionError, match="stubbed"):
            g(0, 0)
    
    def test_first_registered_match_wins(self):
        g = mock_function(add)
        when(g)(1, 2).then_return("first")
        when(g)(1, 2).then_return("second")
        
        assert g(1, 2) == "first"


class TestFunctionMockShape:
    """The mocked function looks like the original."""
    
    def test_mocked_function_keeps_name_and_doc(self):
        g = mock_function(add)
        
        assert g.__name__ == "add"
        assert g.__doc__ == "Add two numbers."
    
    def test_mocked_function_reports_original_signature(self):
        g = mock_function(add)
        
        assert list(inspect.signature(g).parameters) == ["a", "b"]
    
    def test_callable_objects_can_be_mocked(self):
        g = mock_function(Greeter("hi").greet)
        when(g)("bob").then_return("stubbed")
        
        assert g("bob") == "stubbed"
    
    def test_classes_can_be_mocked_as_callables(self):
        factory = mock_function(Greeter)
        when(factory)("hi").then_return("built")
        
        assert factory("hi") == "built"
    
    def test_lambdas_can_be_mocked(self):
        g = mock_function(lambda: None)
        
        assert g() is None
    
    def test_manager_uses_none_method_name(self):
        manager = FunctionMockManager(add)
        manager.get_recorder()(1, 2).then_return(3)
        
        assert manager.bindings[0].method_name is None
        assert manager.get_mocked_item()(1, 2) == 3


class TestFunctionMockPreconditions:
    """Only callables can be mocked as functions."""
    
    @pytest.mark.parametrize("not_callable", [42, "add", None, [add]])
    def test_non_callable_is_rejected(self, not_callable):
        with pytest.raises(MockAssertionError, match="must be callable"):
            mock_function(not_callable)
