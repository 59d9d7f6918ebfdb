"""
Bulk recipe import.

Each recipe of a batch is classified (duplicate, already complete, new or
needing a re-parse), its ingredient lines are screened and parsed strictly
in order, and the outcome is collected into an ImportReport. A failure on one
recipe is recorded and the batch moves on.
"""

import time
import uuid
from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any

from pydantic import ValidationError

from recipeshelf.exceptions import InvalidInputError
from recipeshelf.ingest.schemas import (
    FailedIngredient,
    ImportedRecipe,
    ImportedRecipeSummary,
    ImportFailure,
    ImportPreview,
    ImportReport,
    PreviewRecipe,
    RecipeParsingIssues,
    SkippedRecipe,
)
from recipeshelf.ingest.screening import screen_ingredients
from recipeshelf.kb.knowledge_base import KnowledgeBase
from recipeshelf.logging_config import LoggingContext, get_logger
from recipeshelf.models import Recipe
from recipeshelf.parsing.base import IngredientParser, ParsedIngredient
from recipeshelf.recipes.service import RecipeService
from recipeshelf.schemas import Instruction, RecipeCreate, RecipeIngredient

logger = get_logger(__name__)

SKIP_DUPLICATE_IN_BATCH = "Duplicate in import batch"
SKIP_FULLY_PARSED = "Recipe already exists with all ingredients parsed"


class ImportState(str, Enum):
    NEW = "new"
    DUPLICATE_IN_BATCH = "duplicate_in_batch"
    EXISTS_FULLY_PARSED = "exists_fully_parsed"
    EXISTS_WITH_UNPARSED = "exists_with_unparsed"
    CREATE = "create"
    UPDATE = "update"
    FAILED = "failed"


def is_fully_parsed(ingredients: Iterable[RecipeIngredient | dict[str, Any]]) -> bool:
    """An ingredient counts as done when it is marked parsed or carries a known id."""
    for raw in ingredients or []:
        ingredient = (
            raw if isinstance(raw, RecipeIngredient) else RecipeIngredient.model_validate(raw)
        )
        if not ingredient.parsed and ingredient.known_ingredient_id is None:
            return False
    return True


def classify_recipe(name: str, seen: set[str], existing: Recipe | None) -> ImportState:
    """Decide what happens to one incoming recipe before any parsing is done."""
    if name.strip().lower() in seen:
        return ImportState.DUPLICATE_IN_BATCH
    if existing is None:
        return ImportState.CREATE
    if is_fully_parsed(existing.ingredients or []):
        return ImportState.EXISTS_FULLY_PARSED
    return ImportState.EXISTS_WITH_UNPARSED


def build_instructions(recipe: ImportedRecipe) -> list[Instruction]:
    """Drop empty steps, strip the rest and number them by their kept order."""
    kept = [step for step in recipe.instructions if step.text and step.text.strip()]
    return [
        Instruction(text=step.text.strip(), title=step.title, position=position)
        for position, step in enumerate(kept)
    ]


def failure_reason(ingredient_text: str) -> str:
    return f'No match for ingredient "{ingredient_text}" in known ingredients database'


def _recipe_name(raw: ImportedRecipe | dict[str, Any]) -> str:
    if isinstance(raw, ImportedRecipe):
        return raw.name or "Unknown"
    if isinstance(raw, dict):
        return str(raw.get("name") or "Unknown").strip() or "Unknown"
    return "Unknown"


def _summary(recipe: Recipe) -> ImportedRecipeSummary:
    return ImportedRecipeSummary(
        id=recipe.id,
        name=recipe.name,
        ingredient_count=len(recipe.ingredients or []),
        has_unparsed_ingredients=recipe.has_unparsed_ingredients,
    )


def preview_import_batch(raw_recipes: Iterable[ImportedRecipe | dict[str, Any]]) -> ImportPreview:
    """Show which ingredient lines an import would parse. Nothing is parsed or stored."""
    preview = ImportPreview()
    for raw in raw_recipes:
        recipe = raw if isinstance(raw, ImportedRecipe) else ImportedRecipe.model_validate(raw)
        lines = [ingredient.text for ingredient in screen_ingredients(recipe.ingredients)]
        preview.recipes.append(
            PreviewRecipe(
                name=recipe.name or "Unknown",
                ingredient_count=len(lines),
                ingredients=lines,
            )
        )
        preview.total_ingredients += len(lines)
    preview.total_recipes = len(preview.recipes)
    return preview


class ImportReconciler:
    """
    Runs one import batch for one owner.

    Recipes and their lines are handled sequentially. When the parser reports
    itself as rate limited, `parser.request_delay` seconds are waited between
    consecutive parse calls.
    """

    def __init__(
        self,
        parser: IngredientParser,
        recipes: RecipeService,
        kb: KnowledgeBase,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.parser = parser
        self.recipes = recipes
        self.kb = kb
        self.sleep = sleep
        self._parse_calls = 0

    def reconcile(
        self,
        owner_id: str,
        raw_recipes: Iterable[ImportedRecipe | dict[str, Any]],
    ) -> ImportReport:
        raw_recipes = list(raw_recipes)
        report = ImportReport(parser=self.parser.name, kb_version=self.kb.version)
        seen: set[str] = set()
        self._parse_calls = 0

        with LoggingContext(batch_id=uuid.uuid4().hex[:8]):
            logger.info(
                f"Importing {len(raw_recipes)} recipes for {owner_id} "
                f"with the {self.parser.name} parser"
            )
            for raw in raw_recipes:
                name = _recipe_name(raw)
                with LoggingContext(recipe=name):
                    try:
                        recipe = (
                            raw
                            if isinstance(raw, ImportedRecipe)
                            else ImportedRecipe.model_validate(raw)
                        )
                        self._reconcile_one(owner_id, recipe, seen, report)
                    except (ValidationError, InvalidInputError) as e:
                        self.recipes.rollback()
                        logger.warning(f"Rejected recipe '{name}': {e}")
                        report.errors.append(ImportFailure(name=name, error=str(e)))
                    except Exception as e:
                        self.recipes.rollback()
                        logger.exception(f"Failed to import recipe '{name}'")
                        report.errors.append(ImportFailure(name=name, error=str(e)))

            report.refresh_counts()
            logger.info(
                f"Import finished: {report.created} created, {report.updated} updated, "
                f"{report.skipped} skipped, {report.failed} failed, "
                f"{report.recipes_with_parsing_issues} with parsing issues"
            )
        return report

    def _reconcile_one(
        self,
        owner_id: str,
        recipe: ImportedRecipe,
        seen: set[str],
        report: ImportReport,
    ) -> ImportState:
        name = recipe.name.strip()
        if not name:
            raise InvalidInputError("Recipe name must not be empty")

        existing = None
        if name.lower() not in seen:
            existing = self.recipes.find_by_name(owner_id, name)
        state = classify_recipe(name, seen, existing)

        if state == ImportState.DUPLICATE_IN_BATCH:
            logger.info(f"Skipping '{name}': duplicate in this batch")
            report.skipped_recipes.append(SkippedRecipe(name=name, reason=SKIP_DUPLICATE_IN_BATCH))
            return state
        if state == ImportState.EXISTS_FULLY_PARSED:
            logger.info(f"Skipping '{name}': already stored with every ingredient parsed")
            report.skipped_recipes.append(SkippedRecipe(name=name, reason=SKIP_FULLY_PARSED))
            return state
        if state == ImportState.EXISTS_WITH_UNPARSED:
            logger.info(f"Re-parsing '{name}': stored copy has unparsed ingredients")
            state = ImportState.UPDATE

        ingredients, failed = self._parse_ingredients(recipe)
        data = RecipeCreate(
            name=name,
            description=recipe.description,
            servings=recipe.servings,
            prep_time=recipe.prep_time,
            cook_time=recipe.cook_time,
            total_time=recipe.total_time,
            source_url=recipe.source_url,
            category=recipe.category,
            tags=recipe.tags,
            ingredients=ingredients,
            instructions=build_instructions(recipe),
        )

        if state == ImportState.UPDATE:
            stored = self.recipes.update(existing, data)
            report.updated_recipes.append(_summary(stored))
        else:
            stored = self.recipes.create(owner_id, data)
            report.created_recipes.append(_summary(stored))
        seen.add(name.lower())

        if failed:
            report.parsing_issues.append(
                RecipeParsingIssues(
                    recipe_name=name,
                    recipe_id=stored.id,
                    failed_ingredients=failed,
                    total_ingredients=len(ingredients),
                )
            )
        return state

    def _parse(self, text: str) -> ParsedIngredient:
        if self.parser.rate_limited and self._parse_calls and self.parser.request_delay > 0:
            self.sleep(self.parser.request_delay)
        self._parse_calls += 1
        return self.parser.parse(text)

    def _parse_ingredients(
        self, recipe: ImportedRecipe
    ) -> tuple[list[RecipeIngredient], list[FailedIngredient]]:
        ingredients: list[RecipeIngredient] = []
        failed: list[FailedIngredient] = []

        for item in screen_ingredients(recipe.ingredients):
            text = item.text
            result = self._parse(text)
            ingredients.append(result.to_recipe_ingredient(raw_line=text, section=item.section))

            if not result.parsed:
                failed.append(
                    FailedIngredient(
                        original_text=text,
                        parsed_ingredient=result.ingredient_text,
                        parsed_quantity=result.quantity,
                        parsed_unit=result.unit.name if result.unit else result.unit_text,
                        unit_matched=result.unit is not None,
                        reason=failure_reason(result.ingredient_text or text),
                        suggestions=self.kb.suggest_ingredients(result.ingredient_text or text),
                    )
                )
        return ingredients, failed
