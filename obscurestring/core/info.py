"""Dry-run reporting of how a string would be masked."""

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from ..defaults import (
    DEFAULT_MIN_MASK_LENGTH,
    DEFAULT_PREFIX_LENGTH,
    DEFAULT_SUFFIX_LENGTH,
)
from .exceptions import InvalidTypeError
from .options import MaskOptions


@dataclass(frozen=True)
class MaskInfo:
    """Read-only report produced by ``get_mask_info``.

    Only ``will_be_masked`` is always set; the remaining fields depend on
    which case the input fell into.
    """

    will_be_masked: bool
    reason: Optional[str] = None
    original_length: Optional[int] = None
    masked_length: Optional[int] = None
    visible_chars: Optional[int] = None
    masked_chars: Optional[int] = None
    prefix_length: Optional[int] = None
    suffix_length: Optional[int] = None
    min_mask_length: Optional[int] = None
    mask_length: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dictionary, omitting fields that do not apply."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


def _length_or_default(value: Any, default: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return default
    return value


def build_mask_info(value: Any, options: Any = None, input_policy: str = "empty") -> MaskInfo:
    """Describe what standard or full masking would do to ``value``.

    Non-text input is described the way the engine treats it under
    ``input_policy``: only "coerce" masks ``str(value)``. Never raises:
    unusable options fall back to their defaults.
    """
    if value is None:
        return MaskInfo(will_be_masked=False, reason="null or undefined input")
    if isinstance(value, str):
        text = value
    elif input_policy == "coerce":
        text = str(value)
    else:
        return MaskInfo(will_be_masked=False, reason="non-text input")

    try:
        opts = MaskOptions.coerce(options)
    except InvalidTypeError:
        opts = MaskOptions()

    if text == "":
        return MaskInfo(will_be_masked=False, reason="empty string")

    length = len(text)
    if opts.full_mask is True:
        return MaskInfo(
            will_be_masked=True,
            original_length=length,
            masked_length=length,
            visible_chars=0,
            masked_chars=length,
        )

    prefix_length = _length_or_default(opts.prefix_length, DEFAULT_PREFIX_LENGTH)
    suffix_length = _length_or_default(opts.suffix_length, DEFAULT_SUFFIX_LENGTH)
    min_mask_length = _length_or_default(opts.min_mask_length, DEFAULT_MIN_MASK_LENGTH)
    total_visible = prefix_length + suffix_length

    if length <= total_visible:
        return MaskInfo(will_be_masked=False, reason="string too short", original_length=length)

    mask_length = length - total_visible
    if min_mask_length > 0 and mask_length < min_mask_length:
        return MaskInfo(
            will_be_masked=False,
            reason="mask length below minimum",
            original_length=length,
            mask_length=mask_length,
            min_mask_length=min_mask_length,
        )

    return MaskInfo(
        will_be_masked=True,
        original_length=length,
        masked_length=mask_length,
        visible_chars=total_visible,
        masked_chars=mask_length,
        prefix_length=prefix_length,
        suffix_length=suffix_length,
    )
