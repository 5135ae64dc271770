"""Tests for the Result model."""

import pytest
from dataknobs_common import ValidationError

from dataknobs_validators import Kind, Result, ResultValidationError, failure, success, type_error


class TestResult:
    """Test Result construction and helpers."""

    def test_success(self):
        """Test creating a successful result."""
        result = success(42)
        assert result.error is None
        assert result.value == 42
        assert result.valid is True
        assert bool(result) is True

    def test_success_with_falsy_value(self):
        """Test that a falsy value does not make the result invalid."""
        assert success(0)
        assert success(None)
        assert success("")

    def test_failure(self):
        """Test creating a failed result."""
        result = failure("broken")
        assert result.error == "broken"
        assert result.value is None
        assert not result

    def test_type_error_message(self):
        """Test the standard type mismatch message."""
        result = type_error(Kind.STRING, Kind.NUMBER)
        assert result.error == "Expected string but got number"
        assert result.value is None

    def test_type_error_with_labels(self):
        """Test type_error with plain string labels."""
        assert type_error("any", "undefined").error == "Expected any but got undefined"

    def test_to_dict(self):
        """Test dictionary conversion."""
        assert success([1]).to_dict() == {"error": None, "value": [1]}
        assert failure({"a": "bad"}).to_dict() == {"error": {"a": "bad"}, "value": None}


class TestErrorTree:
    """Test walking nested composite errors."""

    def test_iter_errors_leaf(self):
        """Test that a leaf error has the empty path."""
        assert list(failure("bad").iter_errors()) == [((), "bad")]
        assert list(success(1).iter_errors()) == []

    def test_iter_errors_nested(self):
        """Test depth-first paths through dicts."""
        result = Result(error={"a": "bad a", "b": {0: "bad b0", 2: {"c": "bad c"}}})
        assert list(result.iter_errors()) == [
            (("a",), "bad a"),
            (("b", 0), "bad b0"),
            (("b", 2, "c"), "bad c"),
        ]

    def test_flatten_errors(self):
        """Test dotted path flattening."""
        result = Result(error={"tags": {1: "Expected string but got number"}})
        assert result.flatten_errors() == {"tags.1": "Expected string but got number"}


class TestUnwrap:
    """Test raising on demand."""

    def test_unwrap_success(self):
        """Test that unwrap returns the value."""
        assert success("ok").unwrap() == "ok"

    def test_unwrap_leaf_failure(self):
        """Test that unwrap raises with the message."""
        with pytest.raises(ResultValidationError) as exc_info:
            failure("Expected string but got number").unwrap()
        assert str(exc_info.value) == "Expected string but got number"
        assert exc_info.value.context == {"error": "Expected string but got number"}

    def test_unwrap_composite_failure(self):
        """Test that unwrap names failing fields and is a common ValidationError."""
        error = {"name": "bad", "age": "worse"}
        with pytest.raises(ValidationError) as exc_info:
            failure(error).unwrap()
        assert "name" in str(exc_info.value)
        assert "age" in str(exc_info.value)
        assert exc_info.value.error == error
