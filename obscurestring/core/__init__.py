"""Core masking components: options, validation, strategies, cache."""

from .batch import BatchItemError, BatchProcessor, BatchResult
from .cache import MaskCache
from .config import EngineConfig, get_engine_config, reset_engine_config
from .exceptions import (
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
)
from .executor import StrategyExecutor
from .info import MaskInfo, build_mask_info
from .options import MaskOptions
from .presets import PATTERNS, PRESETS, Shape, classify
from .strategies import StrategyKind, select_strategy
from .validation import OptionsValidator

__all__ = [
    # Options and validation
    "MaskOptions",
    "OptionsValidator",
    # Strategies
    "StrategyKind",
    "StrategyExecutor",
    "select_strategy",
    "Shape",
    "classify",
    "PRESETS",
    "PATTERNS",
    # Cache
    "MaskCache",
    # Introspection
    "MaskInfo",
    "build_mask_info",
    # Batch
    "BatchProcessor",
    "BatchResult",
    "BatchItemError",
    # Configuration
    "EngineConfig",
    "get_engine_config",
    "reset_engine_config",
    # Exceptions
    "ObscureStringError",
    "ValidationError",
    "InvalidTypeError",
    "LengthExceededError",
    "InvalidMaskCharError",
    "InvalidNumericParamError",
    "ParamExceedsLengthError",
    "CombinedLengthExceededError",
    "InvalidPercentageError",
    "InvalidPatternError",
    "UnknownPresetError",
    "InvalidFlagError",
]
