"""ObscureEngine: the masking entry point.

The engine validates options, consults its cache, runs exactly one strategy
and stores the result. Module-level functions such as ``obscure_string``
delegate to a lazily created process-wide default engine; create an
``ObscureEngine`` directly for an isolated cache.
"""

import asyncio
import threading
from typing import Any, Dict, List, Mapping, Optional, Union

from .core.batch import BatchProcessor, BatchResult
from .core.cache import MaskCache
from .core.config import EngineConfig, get_engine_config
from .core.exceptions import InvalidTypeError, ValidationError
from .core.executor import StrategyExecutor
from .core.info import MaskInfo, build_mask_info
from .core.options import MaskOptions
from .core.strategies import NON_DETERMINISTIC, select_strategy
from .core.validation import OptionsValidator
from .observability.logging import get_logger

logger = get_logger(__name__)

OptionsLike = Union[MaskOptions, Mapping[str, Any], None]


class ObscureEngine:
    """Masks strings for display and logging.

    Examples:
        >>> engine = ObscureEngine()
        >>> engine.obscure("mysecretkey")
        'mys*****key'
        >>> engine.obscure("4111111111111111", {"preset": "creditCard"})
        '************1111'
        >>> engine.obscure("1234567890", percentage=50)
        '12*****890'
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        cache: Optional[MaskCache] = None,
        executor: Optional[StrategyExecutor] = None,
    ) -> None:
        self.config = config if config is not None else get_engine_config()
        self.cache = cache if cache is not None else MaskCache(self.config.cache_size)
        self.validator = OptionsValidator()
        self.executor = executor if executor is not None else StrategyExecutor()
        self.batch_processor = BatchProcessor(self)

    def _to_text(self, value: Any) -> Optional[str]:
        """Apply the input policy; None means the result is the empty string."""
        if value is None:
            return None
        if isinstance(value, str):
            return value
        if self.config.input_policy == "coerce":
            return str(value)
        if self.config.input_policy == "reject":
            raise InvalidTypeError(
                f"Input must be a string, got {type(value).__name__}",
                field_name="input",
                expected_type="str",
            )
        return None

    def obscure(self, value: Any, options: OptionsLike = None, **kwargs: Any) -> str:
        """
        Mask ``value`` according to ``options``.

        Args:
            value: The string to mask. None (and, by default, any non-string)
                yields an empty string.
            options: MaskOptions or a mapping of option names to values
            **kwargs: Individual options, overriding ``options``

        Returns:
            The masked string

        Raises:
            ValidationError: If the options are invalid for this input
        """
        text = self._to_text(value)
        if not text:
            return ""

        raw = MaskOptions.coerce(options, **kwargs)
        try:
            sanitized = self.validator.validate(text, raw)
        except ValidationError as e:
            logger.debug(
                "mask_rejected",
                error_code=e.error_code,
                field_name=e.field_name,
                length=len(text),
            )
            raise

        kind = select_strategy(sanitized)
        use_cache = (
            self.config.cache_enabled
            and sanitized.cache
            and kind not in NON_DETERMINISTIC
        )

        key = None
        if use_cache:
            key = MaskCache.make_key(text, sanitized)
            cached = self.cache.lookup(key)
            if cached is not None:
                logger.debug("mask_applied", strategy=kind.value, length=len(text), cache_hit=True)
                return cached

        result = self.executor.execute_strategy(kind, text, sanitized)

        if key is not None:
            self.cache.store(key, result)
        logger.debug("mask_applied", strategy=kind.value, length=len(text), cache_hit=False)
        return result

    async def obscure_async(
        self, value: Any, options: OptionsLike = None, **kwargs: Any
    ) -> str:
        """Masks like ``obscure`` but yields to the event loop once for large inputs.

        The yield happens before any validation or cache access, so a call
        cancelled there has no effect on the cache.
        """
        if isinstance(value, str) and len(value) >= self.config.async_chunk_size:
            await asyncio.sleep(0)
        return self.obscure(value, options, **kwargs)

    def obscure_batch(
        self, values: Any, options: OptionsLike = None, **kwargs: Any
    ) -> List[str]:
        """Mask each element; failing elements become empty strings."""
        return self.process_batch(values, options, **kwargs).results

    def process_batch(
        self, values: Any, options: OptionsLike = None, **kwargs: Any
    ) -> BatchResult:
        """Mask each element and report per-element failures."""
        raw = MaskOptions.coerce(options, **kwargs)
        return self.batch_processor.process(values, raw)

    def mask_info(self, value: Any, options: OptionsLike = None, **kwargs: Any) -> MaskInfo:
        """Describe how ``value`` would be masked. Never raises or caches."""
        if kwargs:
            if isinstance(options, MaskOptions):
                base = options.to_dict()
            elif isinstance(options, Mapping):
                base = dict(options)
            else:
                base = {}
            options = {**base, **kwargs}
        return build_mask_info(value, options, input_policy=self.config.input_policy)

    def clear_cache(self) -> None:
        self.cache.clear()

    def cache_stats(self) -> Dict[str, Any]:
        return self.cache.stats()


_default_engine: Optional[ObscureEngine] = None
_default_engine_lock = threading.Lock()


def get_default_engine() -> ObscureEngine:
    """Get the process-wide engine used by the module-level functions."""
    global _default_engine
    if _default_engine is None:
        with _default_engine_lock:
            if _default_engine is None:
                _default_engine = ObscureEngine()
    return _default_engine


def reset_default_engine() -> None:
    """Drop the process-wide engine, e.g. after changing configuration."""
    global _default_engine
    with _default_engine_lock:
        _default_engine = None


def obscure_string(value: Any, options: OptionsLike = None, **kwargs: Any) -> str:
    """Mask a string with the default engine. See ``ObscureEngine.obscure``."""
    return get_default_engine().obscure(value, options, **kwargs)


async def obscure_string_async(value: Any, options: OptionsLike = None, **kwargs: Any) -> str:
    return await get_default_engine().obscure_async(value, options, **kwargs)


def obscure_string_batch(values: Any, options: OptionsLike = None, **kwargs: Any) -> List[str]:
    return get_default_engine().obscure_batch(values, options, **kwargs)


def get_mask_info(value: Any, options: OptionsLike = None, **kwargs: Any) -> MaskInfo:
    return get_default_engine().mask_info(value, options, **kwargs)


def clear_cache() -> None:
    get_default_engine().clear_cache()


def get_cache_stats() -> Dict[str, Any]:
    """Return ``{"size", "max_size", "hits", "misses"}`` for the default cache."""
    return get_default_engine().cache_stats()
