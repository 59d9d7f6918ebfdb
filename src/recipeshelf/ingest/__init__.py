"""Bulk recipe import: screening, reconciliation and reporting."""

from recipeshelf.ingest.reconcile import (
    ImportReconciler,
    ImportState,
    classify_recipe,
    is_fully_parsed,
    preview_import_batch,
)
from recipeshelf.ingest.schemas import (
    FailedIngredient,
    ImportedIngredient,
    ImportedInstruction,
    ImportedRecipe,
    ImportFailure,
    ImportPreview,
    ImportReport,
    RecipeParsingIssues,
    SkippedRecipe,
)
from recipeshelf.ingest.screening import is_ingredient_candidate, screen_ingredients, screen_reason

__all__ = [
    "FailedIngredient",
    "ImportFailure",
    "ImportPreview",
    "ImportReconciler",
    "ImportReport",
    "ImportState",
    "ImportedIngredient",
    "ImportedInstruction",
    "ImportedRecipe",
    "RecipeParsingIssues",
    "SkippedRecipe",
    "classify_recipe",
    "is_fully_parsed",
    "is_ingredient_candidate",
    "preview_import_batch",
    "screen_ingredients",
    "screen_reason",
]
