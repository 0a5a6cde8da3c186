"""Unit tests for ingredient normalization."""

import re

import pytest

from culinarycompanion.features.recipes.domain.normalizer import normalize_ingredients, split_ingredients


class TestNormalizeIngredients:
    """Tests for normalize_ingredients()."""

    def test_lowercases_and_strips_punctuation(self) -> None:
        assert normalize_ingredients("Chicken, Rice!!") == "chicken, rice"

    def test_splits_on_whitespace_and_commas(self) -> None:
        assert normalize_ingredients("tomato  basil,,garlic\nonion") == "tomato, basil, garlic, onion"

    def test_drops_short_tokens(self) -> None:
        assert normalize_ingredients("an egg, oil, ox, yam") == "egg, oil, yam"

    def test_all_tokens_filtered_gives_empty_string(self) -> None:
        assert normalize_ingredients("a, an, to") == ""

    def test_none_and_empty_input(self) -> None:
        assert normalize_ingredients("") == ""
        assert normalize_ingredients(None) == ""

    def test_removes_non_ascii_letters(self) -> None:
        assert normalize_ingredients("Jalapeño, crème fraîche") == "jalapeo, crme, frache"

    @pytest.mark.parametrize("raw", [
        "Chicken, Rice!!",
        "2 cups FLOUR; 1 tsp salt",
        "beef & broccoli / soy-sauce",
        "  leading, trailing  ",
        "Ünïcödé — tofu, 100g",
    ])
    def test_output_alphabet_and_token_length(self, raw: str) -> None:
        out = normalize_ingredients(raw)
        assert re.fullmatch(r"[a-z0-9,\s]*", out)
        assert all(len(tok) > 2 for tok in split_ingredients(out))


class TestSplitIngredients:
    """Tests for split_ingredients()."""

    def test_splits_and_trims(self) -> None:
        assert split_ingredients("plant-based protein, rice") == ["plant-based protein", "rice"]

    def test_empty(self) -> None:
        assert split_ingredients("") == []
        assert split_ingredients(" , ") == []
