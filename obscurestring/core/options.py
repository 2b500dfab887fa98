"""Masking options record."""

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from ..defaults import (
    DEFAULT_MASK_CHAR,
    DEFAULT_MIN_MASK_LENGTH,
    MAX_INPUT_LENGTH,
)
from .exceptions import InvalidTypeError

logger = logging.getLogger(__name__)

# Legacy camelCase option names accepted in mappings
_ALIASES = {
    "maskChar": "mask_char",
    "prefixLength": "prefix_length",
    "suffixLength": "suffix_length",
    "minMaskLength": "min_mask_length",
    "fullMask": "full_mask",
    "reverseMask": "reverse_mask",
    "maxLength": "max_length",
    "preservePattern": "preserve_pattern",
    "randomMask": "random_mask",
}


@dataclass(frozen=True)
class MaskOptions:
    """
    Options controlling how a string is masked.

    A record built by a caller is "raw": its values have not been checked and
    ``prefix_length``/``suffix_length`` may be ``None`` to request the
    defaults. ``OptionsValidator.validate`` returns a sanitized copy in which
    every value has been checked and the lengths are concrete.

    Attributes:
        mask_char: Text used to fill masked positions (1-10 characters)
        prefix_length: Characters kept visible at the start
        suffix_length: Characters kept visible at the end
        min_mask_length: Leave the input unchanged if fewer chars would be masked
        full_mask: Mask the entire string
        reverse_mask: Mask the edges and show the middle
        percentage: Mask this share (0-100) of the string, centered
        max_length: Reject inputs longer than this
        preset: Named recipe: email, creditCard or phone
        pattern: Shape-aware recipe: email, phone, generic or auto
        preserve_pattern: Regex whose matches stay visible inside the mask
        random_mask: Fill masked positions with random palette characters
        cache: Memoize the result in the engine cache
        strict: Raise instead of passing through when prefix + suffix
            exceed the input length

    Examples:
        >>> MaskOptions(prefix_length=2, suffix_length=4, mask_char="#")
        >>> MaskOptions.from_mapping({"maskChar": "#", "fullMask": True})
    """

    mask_char: Any = DEFAULT_MASK_CHAR
    prefix_length: Any = None
    suffix_length: Any = None
    min_mask_length: Any = DEFAULT_MIN_MASK_LENGTH
    full_mask: Any = False
    reverse_mask: Any = False
    percentage: Any = None
    max_length: Any = MAX_INPUT_LENGTH
    preset: Any = None
    pattern: Any = None
    preserve_pattern: Any = None
    random_mask: Any = False
    cache: Any = True
    strict: Any = False

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in dataclasses.fields(cls))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "MaskOptions":
        """Build a raw record from a mapping of snake_case or camelCase keys."""
        known = set(cls.field_names())
        values: Dict[str, Any] = {}
        for key, value in data.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                logger.debug("Ignoring unknown mask option %r", key)
                continue
            values[name] = value
        return cls(**values)

    @classmethod
    def coerce(
        cls,
        options: Union["MaskOptions", Mapping[str, Any], None] = None,
        **overrides: Any,
    ) -> "MaskOptions":
        """Normalize whatever a caller passed into a raw ``MaskOptions``."""
        if options is None:
            base = cls()
        elif isinstance(options, cls):
            base = options
        elif isinstance(options, Mapping):
            base = cls.from_mapping(options)
        else:
            raise InvalidTypeError(
                "options must be a MaskOptions or a mapping",
                field_name="options",
                expected_type="MaskOptions or mapping",
            )
        if overrides:
            return base.with_options(**overrides)
        return base

    def with_options(self, **changes: Any) -> "MaskOptions":
        """Return a copy with the given options replaced (camelCase accepted)."""
        merged = {name: getattr(self, name) for name in self.field_names()}
        merged.update({_ALIASES.get(key, key): value for key, value in changes.items()})
        return MaskOptions.from_mapping(merged)

    def fingerprint(self) -> Tuple[Any, ...]:
        """Deterministic tuple of every option that affects the masked output."""
        return (
            self.mask_char,
            self.prefix_length,
            self.suffix_length,
            self.min_mask_length,
            self.full_mask,
            self.reverse_mask,
            self.percentage,
            self.preset,
            self.pattern,
            self.preserve_pattern,
            self.random_mask,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert options to a plain dictionary."""
        return dataclasses.asdict(self)

    def is_explicit(self, name: str) -> bool:
        """Whether a length option was supplied rather than left to its default."""
        return getattr(self, name) is not None
