"""Strategy execution for masking operations."""

import logging
import random
from typing import Optional

from .options import MaskOptions
from .presets import apply_pattern, apply_preset
from .strategies import (
    StrategyKind,
    mask_full,
    mask_percentage,
    mask_preserve,
    mask_random,
    mask_reverse,
    mask_standard,
)

logger = logging.getLogger(__name__)


class StrategyExecutor:
    """
    Executes a single masking strategy against a validated input.

    The executor holds the random source used by the random strategy so
    tests can inject a seeded ``random.Random``.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._random = rng or random.SystemRandom()

    def execute_strategy(self, kind: StrategyKind, text: str, options: MaskOptions) -> str:
        """
        Execute one masking strategy.

        Args:
            kind: The strategy chosen by ``select_strategy``
            text: The input string
            options: Sanitized masking options

        Returns:
            str: The masked text

        Raises:
            NotImplementedError: If strategy type is not supported
        """
        if kind == StrategyKind.PRESET:
            return apply_preset(text, options)
        if kind == StrategyKind.PATTERN:
            return apply_pattern(text, options)
        if kind == StrategyKind.FULL:
            return mask_full(text, options)
        if kind == StrategyKind.PERCENTAGE:
            return mask_percentage(text, options)
        if kind == StrategyKind.REVERSE:
            return mask_reverse(text, options)
        if kind == StrategyKind.RANDOM:
            return mask_random(text, options, self._random)
        if kind == StrategyKind.PRESERVE:
            return mask_preserve(text, options)
        if kind == StrategyKind.STANDARD:
            return mask_standard(text, options)

        raise NotImplementedError(f"Strategy {kind.value} not implemented")
