"""obscurestring: mask the middle of strings for display and logging.

Hide secrets, emails, card numbers and IDs in log lines and UIs by replacing
part of the string with a mask while keeping the edges readable. Masking is
one-way and lossy; it is not encryption.
"""

__version__ = "1.1.0"

from .core import (
    CombinedLengthExceededError,
    EngineConfig,
    InvalidFlagError,
    InvalidMaskCharError,
    InvalidNumericParamError,
    InvalidPatternError,
    InvalidPercentageError,
    InvalidTypeError,
    LengthExceededError,
    MaskCache,
    MaskInfo,
    MaskOptions,
    ObscureStringError,
    ParamExceedsLengthError,
    StrategyKind,
    UnknownPresetError,
    ValidationError,
)
from .defaults import (
    DEFAULT_CACHE_SIZE,
    DEFAULT_MASK_CHAR,
    DEFAULT_PREFIX_LENGTH,
    DEFAULT_SUFFIX_LENGTH,
    MAX_INPUT_LENGTH,
    MAX_MASK_CHAR_LENGTH,
)
from .engine import (
    ObscureEngine,
    clear_cache,
    get_cache_stats,
    get_default_engine,
    get_mask_info,
    obscure_string,
    obscure_string_async,
    obscure_string_batch,
)

__all__ = [
    "__version__",
    # Functions
    "obscure_string",
    "obscure_string_async",
    "obscure_string_batch",
    "get_mask_info",
    "clear_cache",
    "get_cache_stats",
    # Engine
    "ObscureEngine",
    "get_default_engine",
    "EngineConfig",
    "MaskCache",
    "MaskOptions",
    "MaskInfo",
    "StrategyKind",
    # Constants
    "MAX_INPUT_LENGTH",
    "MAX_MASK_CHAR_LENGTH",
    "DEFAULT_MASK_CHAR",
    "DEFAULT_PREFIX_LENGTH",
    "DEFAULT_SUFFIX_LENGTH",
    "DEFAULT_CACHE_SIZE",
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
