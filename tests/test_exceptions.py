"""Tests for the obscurestring exception hierarchy."""

import pytest

from obscurestring.core.exceptions import (
    CombinedLengthExceededError,
    InvalidFlagError,
    InvalidMaskCharError,
    InvalidNumericParamError,
    InvalidPatternError,
    InvalidPercentageError,
    InvalidTypeError,
    LengthExceededError,
    ObscureStringError,
    ParamExceedsLengthError,
    UnknownPresetError,
    ValidationError,
    create_validation_error,
)


class TestObscureStringError:
    """Test the base exception."""

    def test_basic_attributes(self):
        error = ObscureStringError("Something failed")

        assert str(error) == "Something failed"
        assert error.message == "Something failed"
        assert error.error_code == "OBSCURESTRING_ERROR"
        assert error.context == {}
        assert error.recovery_suggestions == []
        assert error.component == "core"

    def test_explicit_error_code_and_component(self):
        error = ObscureStringError("Failed", error_code="CUSTOM", component="cache")

        assert error.error_code == "CUSTOM"
        assert error.component == "cache"

    def test_add_context(self):
        error = ObscureStringError("Failed")
        error.add_context("length", 42)

        assert error.context == {"length": 42}

    def test_recovery_suggestions_are_deduplicated(self):
        error = ObscureStringError("Failed")
        error.add_recovery_suggestion("Try again")
        error.add_recovery_suggestion("Try again")

        assert error.recovery_suggestions == ["Try again"]

    def test_to_dict(self):
        error = ObscureStringError("Failed", context={"field_name": "mask_char"})
        data = error.to_dict()

        assert data["error_type"] == "ObscureStringError"
        assert data["message"] == "Failed"
        assert data["context"] == {"field_name": "mask_char"}
        assert data["component"] == "core"


class TestValidationErrors:
    """Test the validation error kinds."""

    @pytest.mark.parametrize(
        "error_class",
        [
            InvalidTypeError,
            InvalidMaskCharError,
            InvalidNumericParamError,
            ParamExceedsLengthError,
            CombinedLengthExceededError,
            InvalidPercentageError,
            InvalidPatternError,
            UnknownPresetError,
            InvalidFlagError,
        ],
    )
    def test_kinds_are_validation_errors(self, error_class):
        error = error_class("bad option", field_name="prefix_length")

        assert isinstance(error, ValidationError)
        assert isinstance(error, ObscureStringError)
        assert error.component == "validation"
        assert error.field_name == "prefix_length"
        assert error.context["field_name"] == "prefix_length"

    def test_invalid_type_is_also_type_error(self):
        with pytest.raises(TypeError):
            raise InvalidTypeError("Input must be an array of strings")

    def test_length_exceeded_context(self):
        error = LengthExceededError("too long", length=20, max_length=10)

        assert error.field_name == "max_length"
        assert error.context["length"] == 20
        assert error.context["max_length"] == 10

    def test_expected_type_context(self):
        error = ValidationError("bad", field_name="mask_char", expected_type="str")

        assert error.context == {"field_name": "mask_char", "expected_type": "str"}

    def test_create_validation_error(self):
        error = create_validation_error(
            InvalidPercentageError,
            "percentage must be a number between 0 and 100",
            "percentage",
            "a number between 0 and 100",
        )

        assert isinstance(error, InvalidPercentageError)
        assert error.field_name == "percentage"
        assert error.recovery_suggestions == ["Ensure percentage is a number between 0 and 100"]
        assert error.error_code == "INVALIDPERCENTAGE_ERROR"
