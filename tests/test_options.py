"""Tests for the MaskOptions record."""

import dataclasses

import pytest

from obscurestring.core.exceptions import InvalidTypeError
from obscurestring.core.options import MaskOptions
from obscurestring.defaults import MAX_INPUT_LENGTH


class TestMaskOptions:
    """Test construction and normalization of MaskOptions."""

    def test_defaults(self):
        options = MaskOptions()

        assert options.mask_char == "*"
        assert options.prefix_length is None
        assert options.suffix_length is None
        assert options.min_mask_length == 0
        assert options.max_length == MAX_INPUT_LENGTH
        assert options.full_mask is False
        assert options.cache is True
        assert options.strict is False

    def test_is_frozen(self):
        options = MaskOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.mask_char = "#"

    def test_from_mapping_accepts_camel_case(self):
        options = MaskOptions.from_mapping(
            {"maskChar": "#", "prefixLength": 2, "suffixLength": 1, "fullMask": True}
        )

        assert options.mask_char == "#"
        assert options.prefix_length == 2
        assert options.suffix_length == 1
        assert options.full_mask is True

    def test_from_mapping_accepts_snake_case(self):
        options = MaskOptions.from_mapping({"preserve_pattern": r"\d", "random_mask": True})

        assert options.preserve_pattern == r"\d"
        assert options.random_mask is True

    def test_from_mapping_ignores_unknown_keys(self):
        options = MaskOptions.from_mapping({"colour": "blue", "maskChar": "-"})

        assert options.mask_char == "-"

    def test_coerce_none(self):
        assert MaskOptions.coerce(None) == MaskOptions()

    def test_coerce_returns_same_record(self):
        options = MaskOptions(mask_char="#")
        assert MaskOptions.coerce(options) is options

    def test_coerce_applies_overrides(self):
        options = MaskOptions.coerce({"maskChar": "#"}, prefix_length=1, suffixLength=2)

        assert options.mask_char == "#"
        assert options.prefix_length == 1
        assert options.suffix_length == 2

    def test_coerce_rejects_other_types(self):
        with pytest.raises(InvalidTypeError):
            MaskOptions.coerce(["maskChar", "#"])

    def test_with_options_keeps_other_fields(self):
        options = MaskOptions(mask_char="#", prefix_length=1)
        changed = options.with_options(suffixLength=5)

        assert changed.mask_char == "#"
        assert changed.prefix_length == 1
        assert changed.suffix_length == 5
        assert options.suffix_length is None

    def test_fingerprint_distinguishes_options(self):
        assert MaskOptions(mask_char="#").fingerprint() != MaskOptions().fingerprint()
        assert MaskOptions(prefix_length=2).fingerprint() == MaskOptions(prefix_length=2).fingerprint()

    def test_fingerprint_ignores_cache_flag(self):
        assert MaskOptions(cache=False).fingerprint() == MaskOptions().fingerprint()

    def test_is_explicit(self):
        options = MaskOptions(prefix_length=0)

        assert options.is_explicit("prefix_length") is True
        assert options.is_explicit("suffix_length") is False

    def test_to_dict(self):
        data = MaskOptions(mask_char="#").to_dict()

        assert data["mask_char"] == "#"
        assert set(data) == set(MaskOptions.field_names())
