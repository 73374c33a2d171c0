"""Unit tests for the fixed vocabulary."""

import random

import pytest

from status_service.core.vocabulary import VOCABULARY, pick_word


@pytest.mark.unit
class TestVocabulary:
    """Test the fixed vocabulary and word picking"""

    def test_has_twenty_unique_words(self):
        assert len(VOCABULARY) == 20
        assert len(set(VOCABULARY)) == 20
        assert all(isinstance(word, str) and word for word in VOCABULARY)

    def test_is_immutable(self):
        assert isinstance(VOCABULARY, tuple)
        with pytest.raises(TypeError):
            VOCABULARY[0] = "changed"

    def test_pick_word_stays_in_vocabulary(self):
        rng = random.Random()
        picks = {pick_word(rng) for _ in range(500)}
        assert picks <= set(VOCABULARY)

    def test_pick_word_is_reproducible_with_seed(self):
        first = [pick_word(random.Random(42)) for _ in range(3)]
        assert len(set(first)) == 1
        assert first[0] == random.Random(42).choice(VOCABULARY)

    def test_pick_word_custom_vocabulary(self):
        assert pick_word(random.Random(), ("only",)) == "only"
