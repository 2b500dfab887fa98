"""Strategy system: the masking policies and how one is chosen.

Each strategy is a pure function ``(text, options) -> str`` operating on a
sanitized ``MaskOptions`` record. Shape-aware recipes (presets and patterns)
live in ``presets.py``.
"""

import functools
import math
import random
import re
from enum import Enum
from typing import Optional, Pattern

from ..defaults import RANDOM_MASK_PALETTE
from .options import MaskOptions


class StrategyKind(Enum):
    """Types of masking strategies available, in precedence order."""

    PRESET = "preset"
    PATTERN = "pattern"
    FULL = "full"
    PERCENTAGE = "percentage"
    REVERSE = "reverse"
    RANDOM = "random"
    PRESERVE = "preserve"
    STANDARD = "standard"


# Strategies that keep a prefix and a suffix visible around a masked middle
PREFIX_FRAMED = frozenset({StrategyKind.STANDARD, StrategyKind.RANDOM, StrategyKind.PRESERVE})

# Strategies whose output varies between calls and must not be memoized
NON_DETERMINISTIC = frozenset({StrategyKind.RANDOM})

# Unbounded quantifier closing one or more groups that are themselves
# repeated without bound, e.g. (a+)+, (\w*)*, ((a+))+ or (x+){2,}
_CATASTROPHIC_PATTERN = re.compile(r"(?<!\\)[+*]\??\)+\s*(?:[+*]|\{\d+,\})")


def select_strategy(options: MaskOptions) -> StrategyKind:
    """Pick the single strategy the options ask for.

    Precedence: preset > pattern > full > percentage > reverse > random >
    preserve > standard.
    """
    if options.preset:
        return StrategyKind.PRESET
    if options.pattern:
        return StrategyKind.PATTERN
    if options.full_mask:
        return StrategyKind.FULL
    if options.percentage is not None:
        return StrategyKind.PERCENTAGE
    if options.reverse_mask:
        return StrategyKind.REVERSE
    if options.random_mask:
        return StrategyKind.RANDOM
    if options.preserve_pattern is not None:
        return StrategyKind.PRESERVE
    return StrategyKind.STANDARD


def is_catastrophic_pattern(source: str) -> bool:
    """Cheap check for regexes prone to catastrophic backtracking."""
    return bool(_CATASTROPHIC_PATTERN.search(source))


@functools.lru_cache(maxsize=64)
def compile_preserve_pattern(source: str) -> Pattern[str]:
    return re.compile(source)


def fill_mask(mask_char: str, length: int) -> str:
    """Repeat ``mask_char`` to exactly ``length`` characters."""
    if length <= 0:
        return ""
    if len(mask_char) == 1:
        return mask_char * length
    repeats = -(-length // len(mask_char))
    return (mask_char * repeats)[:length]


def _middle_bounds(text: str, options: MaskOptions) -> Optional[tuple]:
    """Return (start, end) of the masked middle, or None if nothing is masked."""
    length = len(text)
    start = options.prefix_length
    end = length - options.suffix_length
    if length <= options.prefix_length + options.suffix_length:
        return None
    if options.min_mask_length > 0 and end - start < options.min_mask_length:
        return None
    return start, end


def mask_standard(text: str, options: MaskOptions) -> str:
    """Keep the prefix and suffix, fill the middle with the mask."""
    bounds = _middle_bounds(text, options)
    if bounds is None:
        return text
    start, end = bounds
    return text[:start] + fill_mask(options.mask_char, end - start) + text[end:]


def mask_full(text: str, options: MaskOptions) -> str:
    return fill_mask(options.mask_char, len(text))


def mask_reverse(text: str, options: MaskOptions) -> str:
    """Mask the prefix and suffix zones and show the middle verbatim."""
    length = len(text)
    total_masked = options.prefix_length + options.suffix_length
    if options.min_mask_length > 0 and total_masked < options.min_mask_length:
        return text
    if total_masked >= length:
        return fill_mask(options.mask_char, length)
    end = length - options.suffix_length
    return (
        fill_mask(options.mask_char, options.prefix_length)
        + text[options.prefix_length:end]
        + fill_mask(options.mask_char, options.suffix_length)
    )


def mask_percentage(text: str, options: MaskOptions) -> str:
    """Mask a centered run covering ``percentage`` percent of the string."""
    length = len(text)
    mask_count = math.floor(length * options.percentage / 100)
    if mask_count == 0:
        return text
    if mask_count >= length:
        return fill_mask(options.mask_char, length)

    visible = length - mask_count
    prefix = visible // 2
    suffix = visible - prefix
    return text[:prefix] + fill_mask(options.mask_char, mask_count) + text[length - suffix:]


def mask_preserve(text: str, options: MaskOptions) -> str:
    """Standard framing, but regex matches inside the middle stay visible.

    Every hidden character becomes exactly one copy of ``mask_char``.
    """
    bounds = _middle_bounds(text, options)
    if bounds is None:
        return text
    start, end = bounds
    middle = text[start:end]

    keep = [False] * len(middle)
    for match in compile_preserve_pattern(options.preserve_pattern).finditer(middle):
        for index in range(match.start(), match.end()):
            keep[index] = True

    masked = "".join(
        char if kept else options.mask_char for char, kept in zip(middle, keep)
    )
    return text[:start] + masked + text[end:]


def mask_random(text: str, options: MaskOptions, rng: Optional[random.Random] = None) -> str:
    """Standard framing with each masked position drawn from the palette.

    A replacement never equals the character it hides.
    """
    bounds = _middle_bounds(text, options)
    if bounds is None:
        return text
    rng = rng or random.SystemRandom()
    start, end = bounds

    replaced = []
    for char in text[start:end]:
        choices = RANDOM_MASK_PALETTE.replace(char, "")
        replaced.append(rng.choice(choices))
    return text[:start] + "".join(replaced) + text[end:]
