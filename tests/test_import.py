"""Tests for import schemas and batch import reconciliation."""

import pytest

from recipeshelf.ingest.reconcile import (
    SKIP_DUPLICATE_IN_BATCH,
    SKIP_FULLY_PARSED,
    ImportReconciler,
    ImportState,
    classify_recipe,
    is_fully_parsed,
    preview_import_batch,
)
from recipeshelf.ingest.schemas import ImportedIngredient, ImportedRecipe
from recipeshelf.parsing.rules import RulesIngredientParser
from recipeshelf.recipes.service import RecipeService

# =============================================================================
# Import Schema Tests
# =============================================================================


class TestImportedRecipe:
    """Tests for accepting Mealie and plain recipe formats."""

    def test_mealie_fields(self, mealie_recipe):
        """Test Mealie field names are mapped onto recipe fields."""
        recipe = ImportedRecipe.model_validate(mealie_recipe)

        assert recipe.name == "Weeknight Chili"
        assert recipe.servings == 4
        assert recipe.prep_time == "15 minutes"
        assert recipe.source_url == "https://example.com/chili"
        assert recipe.category == "Dinner"
        assert recipe.tags == ["Beef", "Spicy"]
        assert len(recipe.ingredients) == 5
        assert recipe.ingredients[0].section == "Chili"
        assert recipe.instructions[0].title == "Cook"

    def test_plain_format(self):
        """Test the plain format with string ingredients and instructions."""
        recipe = ImportedRecipe.model_validate(
            {
                "name": "  Toast ",
                "servings": 2,
                "category": "Breakfast",
                "tags": "Quick",
                "ingredients": ["2 slices bread", "1 tbsp butter"],
                "instructions": ["Toast the bread.", "Butter it."],
            }
        )

        assert recipe.name == "Toast"
        assert recipe.tags == ["Quick"]
        assert [i.text for i in recipe.ingredients] == ["2 slices bread", "1 tbsp butter"]
        assert [s.text for s in recipe.instructions] == ["Toast the bread.", "Butter it."]

    @pytest.mark.parametrize(
        "value,expected",
        [(4, 4), ("6", 6), ("Makes about 12 cookies", 12), ("serves many", None), (True, None)],
    )
    def test_servings(self, value, expected):
        """Test servings are taken from the first number in the yield."""
        recipe = ImportedRecipe.model_validate({"name": "x", "recipeYield": value})
        assert recipe.servings == expected

    def test_missing_lists(self):
        """Test null ingredient and instruction lists become empty."""
        recipe = ImportedRecipe.model_validate(
            {"name": "Water", "recipeIngredient": None, "recipeInstructions": None}
        )
        assert recipe.ingredients == []
        assert recipe.instructions == []

    def test_unknown_fields_ignored(self):
        """Test extra fields from the source are dropped."""
        recipe = ImportedRecipe.model_validate({"name": "Soup", "rating": 5, "slug": "soup"})
        assert recipe.name == "Soup"


class TestImportedIngredient:
    """Tests for picking the text of an imported ingredient."""

    def test_text_fallback_order(self):
        """Test original text wins over display, which wins over note."""
        both = ImportedIngredient.model_validate(
            {"originalText": "1 onion", "display": "1 Onion", "note": "diced"}
        )
        display_only = ImportedIngredient.model_validate(
            {"originalText": " ", "display": "1 Onion"}
        )
        note_only = ImportedIngredient.model_validate({"note": " 2 eggs "})

        assert both.text == "1 onion"
        assert display_only.text == "1 Onion"
        assert note_only.text == "2 eggs"

    def test_empty(self):
        """Test an ingredient without text."""
        assert ImportedIngredient.model_validate({}).text == ""


# =============================================================================
# Classification Tests
# =============================================================================


class TestClassification:
    """Tests for per-recipe classification."""

    def test_fully_parsed(self):
        """Test parsed flags and known ids both count as parsed."""
        assert is_fully_parsed([{"name": "Onion", "parsed": True}])
        assert is_fully_parsed([{"name": "Onion", "known_ingredient_id": 3, "parsed": False}])
        assert not is_fully_parsed([{"name": "mystery", "parsed": False}])
        assert is_fully_parsed([])

    def test_duplicate_checked_first(self):
        """Test a name already handled in this batch is a duplicate, case-insensitively."""
        assert classify_recipe("Chili", {"chili"}, None) == ImportState.DUPLICATE_IN_BATCH

    def test_new_recipe(self):
        """Test a name not stored yet is created."""
        assert classify_recipe("Chili", set(), None) == ImportState.CREATE


# =============================================================================
# Reconciler Tests
# =============================================================================


class RateLimitedRulesParser(RulesIngredientParser):
    """Rules parser that reports itself as rate limited, for delay tests."""

    rate_limited = True
    request_delay = 0.25

    def __init__(self, kb):
        super().__init__(kb)
        self.calls = []

    def parse(self, text):
        self.calls.append(text)
        return super().parse(text)


class TestImportReconciler:
    """Tests for reconciling an import batch against stored recipes."""

    @pytest.fixture
    def recipes(self, seeded_session):
        return RecipeService(seeded_session)

    @pytest.fixture
    def sleeps(self):
        return []

    @pytest.fixture
    def reconciler(self, rules_parser, recipes, knowledge_base, sleeps):
        return ImportReconciler(rules_parser, recipes, knowledge_base, sleep=sleeps.append)

    def test_create_from_mealie_export(self, reconciler, recipes, mealie_recipe):
        """Test a Mealie recipe is screened, parsed and stored."""
        report = reconciler.reconcile("user-1", [mealie_recipe])

        assert report.created == 1
        assert report.failed == 0
        assert report.recipes_with_parsing_issues == 0
        summary = report.created_recipes[0]
        assert summary.ingredient_count == 4
        assert summary.has_unparsed_ingredients is False

        stored = recipes.get("user-1", summary.id)
        assert stored.servings == 4
        assert stored.category == "Dinner"
        assert stored.tags == ["Beef", "Spicy"]
        assert [i["name"] for i in stored.ingredients] == [
            "Ground Beef",
            "Onion",
            "Garlic",
            "Cheddar Cheese",
        ]
        assert stored.ingredients[0]["section"] == "Chili"
        assert stored.ingredients[0]["raw_line"] == "1 lb ground beef"
        assert stored.ingredients[1]["modifiers"] == ["diced"]
        assert stored.instructions == [
            {"text": "Brown the beef.", "title": "Cook", "position": 0},
            {"text": "Add onion and garlic.", "title": None, "position": 1},
        ]

    def test_report_metadata(self, reconciler, knowledge_base):
        """Test the report names the parser and the knowledge base version."""
        report = reconciler.reconcile("user-1", [])

        assert report.parser == "rules"
        assert report.kb_version == knowledge_base.version
        assert report.created == report.skipped == report.failed == 0

    def test_duplicate_in_batch(self, reconciler, mealie_recipe):
        """Test the second recipe with the same name in a batch is skipped."""
        report = reconciler.reconcile(
            "user-1", [mealie_recipe, {"name": "weeknight chili", "ingredients": ["1 onion"]}]
        )

        assert report.created == 1
        assert report.skipped == 1
        assert report.skipped_recipes[0].reason == SKIP_DUPLICATE_IN_BATCH

    def test_fully_parsed_existing_is_skipped(self, reconciler, mealie_recipe):
        """Test re-importing a fully parsed recipe changes nothing."""
        reconciler.reconcile("user-1", [mealie_recipe])
        report = reconciler.reconcile("user-1", [mealie_recipe])

        assert report.created == 0
        assert report.updated == 0
        assert report.skipped_recipes[0].name == "Weeknight Chili"
        assert report.skipped_recipes[0].reason == SKIP_FULLY_PARSED

    def test_existing_with_unparsed_is_updated_in_place(self, reconciler, recipes):
        """Test a stored recipe with unparsed lines is re-parsed and keeps its id."""
        first = reconciler.reconcile(
            "user-1", [{"name": "Mystery Stew", "ingredients": ["1 cup unobtainium", "2 eggs"]}]
        )
        recipe_id = first.created_recipes[0].id
        assert first.created_recipes[0].has_unparsed_ingredients is True

        second = reconciler.reconcile(
            "user-1", [{"name": "Mystery Stew", "ingredients": ["2 eggs", "1 onion"]}]
        )

        assert second.created == 0
        assert second.updated == 1
        assert second.updated_recipes[0].id == recipe_id
        assert second.updated_recipes[0].has_unparsed_ingredients is False
        stored = recipes.get("user-1", recipe_id)
        assert [i["name"] for i in stored.ingredients] == ["Egg", "Onion"]

    def test_parsing_issues_reported(self, reconciler):
        """Test unmatched lines are stored unparsed and listed with details."""
        report = reconciler.reconcile(
            "user-1", [{"name": "Mystery Stew", "ingredients": ["1 cup unobtainium", "2 eggs"]}]
        )

        assert report.created == 1
        assert report.recipes_with_parsing_issues == 1
        issues = report.parsing_issues[0]
        assert issues.recipe_name == "Mystery Stew"
        assert issues.recipe_id == report.created_recipes[0].id
        assert issues.total_ingredients == 2

        failed = issues.failed_ingredients[0]
        assert failed.original_text == "1 cup unobtainium"
        assert failed.parsed_ingredient == "unobtainium"
        assert failed.parsed_quantity == 1
        assert failed.parsed_unit == "cup"
        assert failed.unit_matched is True
        assert failed.reason == (
            'No match for ingredient "unobtainium" in known ingredients database'
        )

    def test_failures_are_isolated(self, reconciler):
        """Test invalid recipes are reported while the rest of the batch is imported."""
        report = reconciler.reconcile(
            "user-1",
            [
                {"name": "   ", "ingredients": ["1 onion"]},
                {"name": "Negative", "servings": -1, "ingredients": ["1 onion"]},
                42,
                {"name": "Omelette", "ingredients": ["2 eggs"]},
            ],
        )

        assert report.created == 1
        assert report.created_recipes[0].name == "Omelette"
        assert report.failed == 3
        assert [e.name for e in report.errors] == ["Unknown", "Negative", "Unknown"]

    def test_unexpected_error_is_isolated(self, reconciler, recipes, monkeypatch):
        """Test an unexpected storage error fails only that recipe."""
        original_create = recipes.create

        def flaky_create(owner_id, data):
            if data.name == "Broken":
                raise RuntimeError("disk full")
            return original_create(owner_id, data)

        monkeypatch.setattr(recipes, "create", flaky_create)
        report = reconciler.reconcile(
            "user-1",
            [{"name": "Broken", "ingredients": ["1 onion"]}, {"name": "Fine", "ingredients": []}],
        )

        assert report.created == 1
        assert report.errors[0].name == "Broken"
        assert report.errors[0].error == "disk full"

    def test_failed_recipe_not_marked_seen(self, reconciler):
        """Test a recipe that failed does not make a later copy a duplicate."""
        report = reconciler.reconcile(
            "user-1",
            [
                {"name": "Omelette", "servings": -1, "ingredients": ["2 eggs"]},
                {"name": "Omelette", "ingredients": ["2 eggs"]},
            ],
        )

        assert report.failed == 1
        assert report.created == 1
        assert report.skipped == 0

    def test_owners_are_separate(self, reconciler, mealie_recipe):
        """Test the same recipe name is new for a different owner."""
        reconciler.reconcile("user-1", [mealie_recipe])
        report = reconciler.reconcile("user-2", [mealie_recipe])
        assert report.created == 1

    def test_screened_lines_not_stored(self, reconciler, recipes):
        """Test headers and separators never reach the parser or the recipe."""
        report = reconciler.reconcile(
            "user-1",
            [{"name": "Salad", "ingredients": ["For the dressing:", "2 tbsp olive oil", "---"]}],
        )

        stored = recipes.get("user-1", report.created_recipes[0].id)
        assert [i["original_text"] for i in stored.ingredients] == ["2 tbsp olive oil"]

    def test_local_parser_never_waits(self, reconciler, sleeps, mealie_recipe):
        """Test no delay is applied for a local parser."""
        reconciler.reconcile("user-1", [mealie_recipe])
        assert sleeps == []

    def test_rate_limited_parser_waits_between_calls(self, knowledge_base, recipes):
        """Test the parser's delay is applied between consecutive parse calls across recipes."""
        parser = RateLimitedRulesParser(knowledge_base)
        sleeps = []
        reconciler = ImportReconciler(parser, recipes, knowledge_base, sleep=sleeps.append)

        reconciler.reconcile(
            "user-1",
            [
                {"name": "Omelette", "ingredients": ["2 eggs", "1 tbsp butter"]},
                {"name": "Toast", "ingredients": ["--- Bread ---", "1 tbsp butter"]},
            ],
        )

        assert parser.calls == ["2 eggs", "1 tbsp butter", "1 tbsp butter"]
        assert sleeps == [0.25, 0.25]


class TestPreviewImportBatch:
    """Tests for import previews."""

    def test_preview(self, mealie_recipe):
        """Test the preview lists screened lines without storing anything."""
        preview = preview_import_batch([mealie_recipe, {"name": "Empty"}])

        assert preview.total_recipes == 2
        assert preview.total_ingredients == 4
        assert preview.recipes[0].ingredients == [
            "1 lb ground beef",
            "1 onion, diced",
            "2 cloves garlic, minced",
            "1 cup shredded cheddar cheese",
        ]
        assert preview.recipes[1].ingredient_count == 0
