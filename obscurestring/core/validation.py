"""Validation of masking options against an input string.

The validator turns a raw ``MaskOptions`` into a sanitized one, or raises the
``ValidationError`` subclass naming the offending option. Rules run in a
fixed order so the first problem reported is predictable. No message built
here includes the input text.
"""

import numbers
import re
from dataclasses import replace
from typing import Any

from ..defaults import (
    DEFAULT_PREFIX_LENGTH,
    DEFAULT_SUFFIX_LENGTH,
    MAX_MASK_CHAR_LENGTH,
    PATTERN_NAMES,
    PRESET_NAMES,
)
from .exceptions import (
    CombinedLengthExceededError,
    InvalidFlagError,
    InvalidMaskCharError,
    InvalidNumericParamError,
    InvalidPatternError,
    InvalidPercentageError,
    LengthExceededError,
    ParamExceedsLengthError,
    UnknownPresetError,
    create_validation_error,
)
from .options import MaskOptions
from .presets import canonical_pattern, canonical_preset
from .strategies import (
    PREFIX_FRAMED,
    compile_preserve_pattern,
    is_catastrophic_pattern,
    select_strategy,
)

_FLAGS = ("full_mask", "reverse_mask", "random_mask", "cache", "strict")


def _as_int(value: Any) -> Any:
    """Return ``value`` as an int if it is integral, otherwise None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _non_negative_int(value: Any, field_name: str) -> int:
    number = _as_int(value)
    if number is None or number < 0:
        raise create_validation_error(
            InvalidNumericParamError,
            f"{field_name} must be a non-negative integer",
            field_name,
            "a non-negative integer",
        )
    return number


class OptionsValidator:
    """Validates and normalizes ``MaskOptions`` for one input string."""

    def validate(self, text: str, options: MaskOptions) -> MaskOptions:
        """
        Check ``options`` against ``text`` and return a sanitized copy.

        Args:
            text: The string that is about to be masked
            options: Raw options as supplied by the caller

        Returns:
            MaskOptions with every value checked and lengths resolved

        Raises:
            ValidationError: The subclass matching the first failed rule
        """
        length = len(text)

        max_length = _as_int(options.max_length)
        if max_length is None or max_length <= 0:
            raise create_validation_error(
                InvalidNumericParamError,
                "max_length must be a positive integer",
                "max_length",
                "a positive integer",
            )
        if length > max_length:
            raise LengthExceededError(
                f"Input exceeds maximum length of {max_length}",
                length=length,
                max_length=max_length,
            )

        self._check_mask_char(options.mask_char)

        prefix_length = self._length_option(options, "prefix_length", DEFAULT_PREFIX_LENGTH)
        suffix_length = self._length_option(options, "suffix_length", DEFAULT_SUFFIX_LENGTH)
        min_mask_length = _non_negative_int(options.min_mask_length, "min_mask_length")

        for field_name, value in (("prefix_length", prefix_length), ("suffix_length", suffix_length)):
            if options.is_explicit(field_name) and value > length:
                raise create_validation_error(
                    ParamExceedsLengthError,
                    f"{field_name} exceeds string length",
                    field_name,
                    "at most the input length",
                )

        percentage = self._check_percentage(options.percentage)
        preset = self._check_preset(options.preset)
        pattern = self._check_pattern(options.pattern)
        self._check_preserve_pattern(options.preserve_pattern)

        for flag in _FLAGS:
            if not isinstance(getattr(options, flag), bool):
                raise create_validation_error(
                    InvalidFlagError, f"{flag} must be a boolean", flag, "a boolean"
                )

        sanitized = replace(
            options,
            max_length=max_length,
            prefix_length=prefix_length,
            suffix_length=suffix_length,
            min_mask_length=min_mask_length,
            percentage=percentage,
            preset=preset,
            pattern=pattern,
        )

        if (
            sanitized.strict
            and prefix_length + suffix_length > length
            and select_strategy(sanitized) in PREFIX_FRAMED
        ):
            raise create_validation_error(
                CombinedLengthExceededError,
                "prefix_length + suffix_length cannot exceed string length",
                "prefix_length",
                "a combined length within the input length",
            )

        return sanitized

    @staticmethod
    def _length_option(options: MaskOptions, field_name: str, default: int) -> int:
        value = getattr(options, field_name)
        if value is None:
            return default
        return _non_negative_int(value, field_name)

    @staticmethod
    def _check_mask_char(mask_char: Any) -> None:
        if not isinstance(mask_char, str):
            raise create_validation_error(
                InvalidMaskCharError, "mask_char must be a string", "mask_char", "a string"
            )
        if not mask_char:
            raise create_validation_error(
                InvalidMaskCharError, "mask_char cannot be empty", "mask_char", "a non-empty string"
            )
        if len(mask_char) > MAX_MASK_CHAR_LENGTH:
            raise create_validation_error(
                InvalidMaskCharError,
                f"mask_char exceeds maximum length of {MAX_MASK_CHAR_LENGTH}",
                "mask_char",
                f"at most {MAX_MASK_CHAR_LENGTH} characters",
            )

    @staticmethod
    def _check_percentage(percentage: Any) -> Any:
        if percentage is None:
            return None
        if (
            isinstance(percentage, bool)
            or not isinstance(percentage, numbers.Real)
            or not 0 <= percentage <= 100
        ):
            raise create_validation_error(
                InvalidPercentageError,
                "percentage must be a number between 0 and 100",
                "percentage",
                "a number between 0 and 100",
            )
        return percentage

    @staticmethod
    def _check_preset(preset: Any) -> Any:
        if preset is None:
            return None
        if not isinstance(preset, str) or preset.lower() not in PRESET_NAMES:
            error = UnknownPresetError("Unknown preset", field_name="preset")
            error.add_recovery_suggestion(
                f"Use one of: {', '.join(PRESET_NAMES.values())}"
            )
            raise error
        return canonical_preset(preset)

    @staticmethod
    def _check_pattern(pattern: Any) -> Any:
        if pattern is None:
            return None
        if not isinstance(pattern, str) or pattern.lower() not in PATTERN_NAMES:
            error = InvalidPatternError("Unknown pattern", field_name="pattern")
            error.add_recovery_suggestion(
                f"Use one of: {', '.join(PATTERN_NAMES.values())}"
            )
            raise error
        return canonical_pattern(pattern)

    @staticmethod
    def _check_preserve_pattern(source: Any) -> None:
        if source is None:
            return
        if not isinstance(source, str):
            raise create_validation_error(
                InvalidPatternError,
                "preserve_pattern must be a string",
                "preserve_pattern",
                "a regular expression string",
            )
        if is_catastrophic_pattern(source):
            raise create_validation_error(
                InvalidPatternError,
                "preserve_pattern contains a nested quantifier",
                "preserve_pattern",
                "a regular expression without nested quantifiers",
            )
        try:
            compile_preserve_pattern(source)
        except re.error as e:
            raise create_validation_error(
                InvalidPatternError,
                f"preserve_pattern is not a valid regular expression: {e.msg}",
                "preserve_pattern",
                "a valid regular expression",
            ) from e
