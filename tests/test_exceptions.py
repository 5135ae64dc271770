"""Tests for configuration exceptions and their logging."""

import logging

import pytest
from dataknobs_common import ConfigurationError, DataknobsError, ValidationError

from dataknobs_validators import (
    ConflictingCoercionError,
    InvalidBoundsError,
    InvalidSchemaError,
    ResultValidationError,
    ValidatorConfigurationError,
    number,
    object_,
    string,
)


class TestExceptionHierarchy:
    """Test that package exceptions extend the common framework."""

    @pytest.mark.parametrize(
        "error",
        [
            InvalidBoundsError("min", 5, "must be less than the configured maximum 1", 1),
            ConflictingCoercionError("to_float", "to_integer"),
            InvalidSchemaError("Schema entries must be validators", "a"),
        ],
    )
    def test_configuration_errors(self, error):
        """Test configuration errors are catchable as ConfigurationError."""
        assert isinstance(error, ValidatorConfigurationError)
        assert isinstance(error, ConfigurationError)
        assert isinstance(error, DataknobsError)

    def test_result_validation_error(self):
        """Test ResultValidationError is a common ValidationError."""
        error = ResultValidationError({"a": "bad"})
        assert isinstance(error, ValidationError)
        assert error.context == {"error": {"a": "bad"}}

    def test_invalid_bounds_message(self):
        """Test InvalidBoundsError message and context."""
        error = InvalidBoundsError("max_length", 2, "must be greater than the configured minimum 3", 3)
        assert str(error) == "Invalid max_length(2): must be greater than the configured minimum 3"
        assert error.context == {"option": "max_length", "value": 2, "other_bound": 3}

    def test_schema_error_without_field(self):
        """Test InvalidSchemaError without a field name."""
        error = InvalidSchemaError("Schema must be a mapping, got list")
        assert str(error) == "Schema must be a mapping, got list"
        assert error.context == {}


class TestConfigurationLogging:
    """Test that rejected configuration is logged before raising."""

    def test_bounds_logged(self, caplog):
        """Test debug log for misordered bounds."""
        with caplog.at_level(logging.DEBUG, logger="dataknobs_validators"):
            with pytest.raises(InvalidBoundsError):
                string().max_length(1).min_length(2)
        assert "Rejected configuration" in caplog.text

    def test_coercion_logged(self, caplog):
        """Test debug log for conflicting coercions."""
        with caplog.at_level(logging.DEBUG, logger="dataknobs_validators"):
            with pytest.raises(ConflictingCoercionError):
                number().to_integer().to_float()
        assert "to_float" in caplog.text

    def test_precision_logged(self, caplog):
        """Test debug log for an invalid to_float precision."""
        with caplog.at_level(logging.DEBUG, logger="dataknobs_validators"):
            with pytest.raises(ValidatorConfigurationError):
                number().to_float(-2)
        assert "Rejected configuration" in caplog.text
        assert "to_float(-2)" in caplog.text

    def test_empty_one_of_logged(self, caplog):
        """Test debug log for one_of without values."""
        with caplog.at_level(logging.DEBUG, logger="dataknobs_validators"):
            with pytest.raises(ValidatorConfigurationError):
                string().one_of()
        assert "one_of() requires at least one allowed value" in caplog.text

    def test_schema_logged(self, caplog):
        """Test debug log for malformed schemas."""
        with caplog.at_level(logging.DEBUG, logger="dataknobs_validators"):
            with pytest.raises(InvalidSchemaError):
                object_({"a": None})
        assert "Rejected schema" in caplog.text

    def test_field_failures_logged(self, caplog):
        """Test debug log for failing fields during validation."""
        with caplog.at_level(logging.DEBUG, logger="dataknobs_validators"):
            object_({"a": string()}).validate({"a": 1})
        assert "Field 'a' failed validation" in caplog.text
