"""Property-based tests for masking using hypothesis."""

import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st

from obscurestring import ObscureEngine, ValidationError
from obscurestring.core.config import EngineConfig


def text_strategy(min_size: int = 1, max_size: int = 200) -> st.SearchStrategy[str]:
    """Generate text without surrogates so lengths are stable."""
    return st.text(
        alphabet=st.characters(blacklist_categories=("Cs",)),
        min_size=min_size,
        max_size=max_size,
    )


mask_chars = st.sampled_from(["*", "#", "-", "x", "•"])
lengths = st.integers(min_value=0, max_value=10)


@pytest.mark.property
class TestMaskingProperties:
    """Invariants that hold for any input."""

    def setup_method(self):
        self.engine = ObscureEngine(config=EngineConfig())
        self.uncached = ObscureEngine(config=EngineConfig(cache_enabled=False))

    @given(text=text_strategy(), mask_char=mask_chars)
    @settings(max_examples=100, deadline=None)
    def test_standard_preserves_length(self, text, mask_char):
        assert len(self.engine.obscure(text, mask_char=mask_char)) == len(text)

    @given(text=text_strategy(), percentage=st.floats(min_value=0, max_value=100))
    @settings(max_examples=100, deadline=None)
    def test_percentage_preserves_length(self, text, percentage):
        assert len(self.engine.obscure(text, percentage=percentage)) == len(text)

    @given(text=text_strategy(), prefix=lengths, suffix=lengths)
    @settings(max_examples=100, deadline=None)
    def test_reverse_preserves_length(self, text, prefix, suffix):
        assume(prefix <= len(text) and suffix <= len(text))
        result = self.engine.obscure(
            text, reverse_mask=True, prefix_length=prefix, suffix_length=suffix
        )
        assert len(result) == len(text)

    @given(text=text_strategy(), mask_char=mask_chars)
    @settings(max_examples=100, deadline=None)
    def test_full_mask_is_idempotent(self, text, mask_char):
        once = self.engine.obscure(text, full_mask=True, mask_char=mask_char)
        twice = self.engine.obscure(once, full_mask=True, mask_char=mask_char)

        assert once == twice == mask_char * len(text)

    @given(text=text_strategy(min_size=2), prefix=lengths, suffix=lengths)
    @settings(max_examples=100, deadline=None)
    def test_visible_edges_are_original(self, text, prefix, suffix):
        assume(prefix + suffix < len(text))
        result = self.engine.obscure(
            text, prefix_length=prefix, suffix_length=suffix, mask_char="\x00"
        )

        assert result[:prefix] == text[:prefix]
        assert result[len(text) - suffix:] == text[len(text) - suffix:]
        assert result[prefix:len(text) - suffix] == "\x00" * (len(text) - prefix - suffix)

    @given(text=text_strategy(max_size=20), prefix=lengths, suffix=lengths)
    @settings(max_examples=100, deadline=None)
    def test_too_short_passes_through(self, text, prefix, suffix):
        assume(prefix <= len(text) and suffix <= len(text))
        assume(len(text) <= prefix + suffix)

        assert self.engine.obscure(text, prefix_length=prefix, suffix_length=suffix) == text

    @given(values=st.lists(st.one_of(st.none(), text_strategy(max_size=30)), max_size=20))
    @settings(max_examples=50, deadline=None)
    def test_batch_length_matches_input(self, values):
        assert len(self.engine.obscure_batch(values, prefix_length=2)) == len(values)

    @given(text=text_strategy(), prefix=lengths, suffix=lengths)
    @settings(max_examples=100, deadline=None)
    def test_cache_is_transparent(self, text, prefix, suffix):
        options = {"prefixLength": prefix, "suffixLength": suffix}
        try:
            expected = self.uncached.obscure(text, options)
        except ValidationError:
            return

        assert self.engine.obscure(text, options) == expected
        assert self.engine.obscure(text, options) == expected

    @given(secret=st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=12, max_size=40))
    @settings(max_examples=50, deadline=None)
    def test_errors_never_contain_input(self, secret):
        for options in (
            {"prefixLength": 1000},
            {"maxLength": 5},
            {"percentage": 101},
            {"maskChar": ""},
        ):
            with pytest.raises(ValidationError) as exc_info:
                self.engine.obscure(secret, options)
            assert secret not in str(exc_info.value)
            assert secret not in repr(exc_info.value.to_dict())
