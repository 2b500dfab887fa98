"""Batch masking over a sequence of inputs."""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, List, Optional, Protocol, Sequence

from .exceptions import InvalidTypeError, ObscureStringError
from .options import MaskOptions

logger = logging.getLogger(__name__)


class Masker(Protocol):
    """Anything that masks a single value the way ``ObscureEngine`` does."""

    def obscure(self, value: Any, options: Optional[MaskOptions] = None) -> str:
        ...


@dataclass
class BatchItemError:
    """Failure of one batch element. Holds no part of the element's value."""

    index: int
    error_type: str
    error_code: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "error_type": self.error_type,
            "error_code": self.error_code,
            "message": self.message,
        }


@dataclass
class BatchResult:
    """Result of a batch operation."""

    results: List[str]
    start_time: float
    end_time: float
    errors: List[BatchItemError] = field(default_factory=list)

    @property
    def total_items(self) -> int:
        return len(self.results)

    @property
    def failed_items(self) -> int:
        return len(self.errors)

    @property
    def successful_items(self) -> int:
        return self.total_items - self.failed_items

    @property
    def duration_ms(self) -> float:
        """Total batch operation duration in milliseconds."""
        return (self.end_time - self.start_time) * 1000

    @property
    def success_rate(self) -> float:
        """Success rate as a percentage."""
        if self.total_items == 0:
            return 0.0
        return (self.successful_items / self.total_items) * 100.0


class BatchProcessor:
    """
    Maps a masker over a list of values without letting one bad value abort
    the batch.

    Elements that are ``None`` or that fail validation contribute an empty
    string at their position; the output always has the input's length.
    """

    def __init__(self, masker: Masker) -> None:
        self.masker = masker

    def process(
        self, values: Sequence[Any], options: Optional[MaskOptions] = None
    ) -> BatchResult:
        """
        Mask every value in ``values``.

        Args:
            values: A list or tuple of inputs
            options: Options applied to every element

        Returns:
            BatchResult with one output per input and the per-element errors

        Raises:
            InvalidTypeError: If ``values`` is not a list or tuple
        """
        if not isinstance(values, (list, tuple)):
            raise InvalidTypeError(
                "Input must be an array of strings",
                field_name="values",
                expected_type="list",
            )

        start_time = time.time()
        results: List[str] = []
        errors: List[BatchItemError] = []

        for index, value in enumerate(values):
            try:
                results.append(self.masker.obscure(value, options))
            except ObscureStringError as e:
                results.append("")
                errors.append(
                    BatchItemError(
                        index=index,
                        error_type=type(e).__name__,
                        error_code=e.error_code,
                        message=e.message,
                    )
                )

        result = BatchResult(
            results=results,
            start_time=start_time,
            end_time=time.time(),
            errors=errors,
        )
        if errors:
            logger.info(
                f"Batch completed with {result.failed_items} of "
                f"{result.total_items} items failed"
            )
        return result
