"""obscurestring exception hierarchy.

Every error raised by the masking engine is an ``ObscureStringError``. The
validation errors name the offending option in their context but never carry
the string being masked: masked values are usually secrets, and error
messages end up in logs.
"""

from typing import Any, Dict, List, Optional


class ObscureStringError(Exception):
    """Base exception for all obscurestring errors.

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable error identifier
        context: Additional error metadata (never the masked input)
        recovery_suggestions: List of suggested recovery actions
        component: Component where the error originated
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        recovery_suggestions: Optional[List[str]] = None,
        component: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self._default_error_code()
        self.context = context or {}
        self.recovery_suggestions = recovery_suggestions or []
        self.component = component or self._infer_component()

    def _default_error_code(self) -> str:
        """Generate default error code based on exception class name."""
        return self.__class__.__name__.upper().replace("ERROR", "_ERROR")

    def _infer_component(self) -> str:
        """Infer component name from exception class."""
        if isinstance(self, ValidationError):
            return "validation"
        return "core"

    def add_context(self, key: str, value: Any) -> None:
        """Add additional context to the error."""
        self.context[key] = value

    def add_recovery_suggestion(self, suggestion: str) -> None:
        """Add a recovery suggestion to help users resolve the error."""
        if suggestion not in self.recovery_suggestions:
            self.recovery_suggestions.append(suggestion)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to structured dictionary for logging/reporting."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "component": self.component,
            "context": self.context,
            "recovery_suggestions": self.recovery_suggestions,
        }


class ValidationError(ObscureStringError):
    """Raised when the input or the masking options fail validation."""

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        expected_type: Optional[str] = None,
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        self.field_name = field_name
        if field_name:
            self.add_context("field_name", field_name)
        if expected_type:
            self.add_context("expected_type", expected_type)


class InvalidTypeError(ValidationError, TypeError):
    """Input is not text and the call path does not coerce it."""


class LengthExceededError(ValidationError):
    """Input is longer than the configured maximum."""

    def __init__(self, message: str, length: int, max_length: int, **kwargs: Any):
        super().__init__(message, field_name="max_length", **kwargs)
        self.add_context("length", length)
        self.add_context("max_length", max_length)


class InvalidMaskCharError(ValidationError):
    """Mask character is empty, not a string, or too long."""


class InvalidNumericParamError(ValidationError):
    """A length option is negative or not an integer."""


class ParamExceedsLengthError(ValidationError):
    """Prefix or suffix length is larger than the input."""


class CombinedLengthExceededError(ValidationError):
    """Prefix plus suffix length is larger than the input (strict mode)."""


class InvalidPercentageError(ValidationError):
    """Percentage is not a number in [0, 100]."""


class InvalidPatternError(ValidationError):
    """Unknown pattern name, or a preserve pattern that is not a usable regex."""


class UnknownPresetError(ValidationError):
    """Preset name is not one of the known presets."""


class InvalidFlagError(ValidationError):
    """A boolean option received a non-boolean value."""


def create_validation_error(
    error_class: type,
    message: str,
    field_name: str,
    expected: str,
) -> ValidationError:
    """Create a validation error with standard context and a recovery hint."""
    error = error_class(message, field_name=field_name, expected_type=expected)
    error.add_recovery_suggestion(f"Ensure {field_name} is {expected}")
    return error
