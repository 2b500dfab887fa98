"""Shape classifier and the named shape-aware masking recipes.

There is one classifier (``classify``) and two families of named recipes
built on it:

* presets (``email``, ``creditCard``, ``phone``) show a little more of an
  email's local part and drop digit formatting;
* patterns (``email``, ``phone``, ``generic``, ``auto``) show the first and
  last character of an email's local part, and ``auto`` picks a recipe from
  the detected shape.

Outputs of both families are pinned.
"""

import re
from enum import Enum
from typing import Callable, Dict

from ..defaults import (
    CREDIT_CARD_MIN_DIGITS,
    PATTERN_NAMES,
    PHONE_MIN_DIGITS,
    PRESET_NAMES,
    VISIBLE_TRAILING_DIGITS,
)
from .options import MaskOptions
from .strategies import fill_mask, mask_standard

EMAIL_SHAPE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_SHAPE = re.compile(r"^\+?[\d\s().\-]{7,}$")
CARD_SHAPE = re.compile(r"^\d[\d\s\-]{11,22}\d$")
_NON_DIGITS = re.compile(r"\D")

Recipe = Callable[[str, MaskOptions], str]


class Shape(Enum):
    """Data shapes the classifier can recognise."""

    EMAIL = "email"
    PHONE = "phone"
    CREDIT_CARD = "creditCard"
    GENERIC = "generic"


def classify(text: str) -> Shape:
    """Classify a whole string into one of the known shapes."""
    if EMAIL_SHAPE.match(text):
        return Shape.EMAIL
    if CARD_SHAPE.match(text) and 13 <= len(_NON_DIGITS.sub("", text)) <= 19:
        return Shape.CREDIT_CARD
    if PHONE_SHAPE.match(text) and _NON_DIGITS.sub("", text):
        return Shape.PHONE
    return Shape.GENERIC


def _mask_trailing_digits(text: str, options: MaskOptions, min_digits: int) -> str:
    digits = _NON_DIGITS.sub("", text)
    if len(digits) < min_digits:
        return text
    hidden = len(digits) - VISIBLE_TRAILING_DIGITS
    return fill_mask(options.mask_char, hidden) + digits[hidden:]


# Presets


def preset_email(text: str, options: MaskOptions) -> str:
    """Show up to two characters of the local part, keep the domain."""
    at_index = text.rfind("@")
    if at_index < 0:
        return text
    local, domain = text[:at_index], text[at_index:]
    if len(local) <= 2:
        return text
    shown = min(2, len(local) // 3)
    return local[:shown] + fill_mask(options.mask_char, len(local) - shown) + domain


def preset_credit_card(text: str, options: MaskOptions) -> str:
    return _mask_trailing_digits(text, options, CREDIT_CARD_MIN_DIGITS)


def preset_phone(text: str, options: MaskOptions) -> str:
    return _mask_trailing_digits(text, options, PHONE_MIN_DIGITS)


# Patterns


def pattern_email(text: str, options: MaskOptions) -> str:
    """Show the first and last character of the local part."""
    if not EMAIL_SHAPE.match(text):
        return mask_standard(text, options)
    at_index = text.rfind("@")
    local, domain = text[:at_index], text[at_index:]
    if len(local) <= 2:
        return text
    return local[0] + fill_mask(options.mask_char, len(local) - 2) + local[-1] + domain


def pattern_phone(text: str, options: MaskOptions) -> str:
    """Show the last four digits; formatting is dropped."""
    return _mask_trailing_digits(text, options, VISIBLE_TRAILING_DIGITS + 1)


def pattern_auto(text: str, options: MaskOptions) -> str:
    shape = classify(text)
    if shape is Shape.EMAIL:
        return pattern_email(text, options)
    if shape in (Shape.PHONE, Shape.CREDIT_CARD):
        return pattern_phone(text, options)
    return mask_standard(text, options)


PRESETS: Dict[str, Recipe] = {
    "email": preset_email,
    "creditCard": preset_credit_card,
    "phone": preset_phone,
}

PATTERNS: Dict[str, Recipe] = {
    "email": pattern_email,
    "phone": pattern_phone,
    "generic": mask_standard,
    "auto": pattern_auto,
}


def canonical_preset(name: str) -> str:
    """Map a case-insensitive preset name onto its canonical spelling."""
    return PRESET_NAMES[name.lower()]


def canonical_pattern(name: str) -> str:
    return PATTERN_NAMES[name.lower()]


def apply_preset(text: str, options: MaskOptions) -> str:
    return PRESETS[canonical_preset(options.preset)](text, options)


def apply_pattern(text: str, options: MaskOptions) -> str:
    return PATTERNS[canonical_pattern(options.pattern)](text, options)
