"""Tests for ingredient line screening."""

import pytest

from recipeshelf.ingest.schemas import ImportedIngredient
from recipeshelf.ingest.screening import is_ingredient_candidate, screen_ingredients, screen_reason


class TestScreenReason:
    """Tests for screen_reason function."""

    @pytest.mark.parametrize(
        "line,reason",
        [
            ("", "empty"),
            ("   ", "empty"),
            ("---", "section separator"),
            ("--- Toppings ---", "section separator"),
            ("*** sauce ***", "section separator"),
            ("For the sauce:", "section header"),
            ("Garnish:", "section header"),
            ("Diced", "standalone word"),
            ("to taste", "standalone word"),
            ("2 cups", "measurement only"),
            ("1/2 tsp", "measurement only"),
            ("1 lb*", "measurement only"),
        ],
    )
    def test_dropped_lines(self, line, reason):
        """Test lines that are not ingredients and why."""
        assert screen_reason(line) == reason

    @pytest.mark.parametrize(
        "line",
        [
            "2 cups flour",
            "salt and pepper",
            "1 onion, diced",
            "Step 1:",
            "Salt: to taste, plus more for the water",
        ],
    )
    def test_kept_lines(self, line):
        """Test real ingredients and ambiguous lines are kept."""
        assert screen_reason(line) is None
        assert is_ingredient_candidate(line)


class TestScreenIngredients:
    """Tests for screen_ingredients function."""

    def test_keeps_order_and_sections(self):
        """Test kept ingredients stay in their original order with their sections."""
        ingredients = [
            ImportedIngredient.model_validate(
                {"originalText": "1 lb ground beef", "title": "Chili"}
            ),
            ImportedIngredient.model_validate("--- Toppings ---"),
            ImportedIngredient.model_validate({"display": "1 cup cheddar"}),
            ImportedIngredient.model_validate({"note": ""}),
            ImportedIngredient.model_validate("chopped"),
        ]

        kept = screen_ingredients(ingredients)

        assert [i.text for i in kept] == ["1 lb ground beef", "1 cup cheddar"]
        assert kept[0].section == "Chili"
