"""Single entry point to parsing, shopping list aggregation and recipe import."""

from collections.abc import Iterable
from typing import Any

from sqlalchemy.orm import Session

from recipeshelf.config import Settings, get_settings
from recipeshelf.ingest.reconcile import ImportReconciler, preview_import_batch
from recipeshelf.ingest.schemas import ImportedRecipe, ImportPreview, ImportReport
from recipeshelf.kb.knowledge_base import KnowledgeBase
from recipeshelf.kb.repository import SqlKnowledgeBaseStore, load_knowledge_base
from recipeshelf.logging_config import get_logger
from recipeshelf.models import Recipe
from recipeshelf.parsing.base import IngredientParser, ParsedIngredient
from recipeshelf.parsing.factory import create_parser
from recipeshelf.plan.shopping_list import AppendResult, ShoppingItem, ShoppingListGenerator
from recipeshelf.recipes.service import RecipeService
from recipeshelf.schemas import RecipeIngredient

logger = get_logger(__name__)

RecipeLike = Recipe | Iterable[RecipeIngredient | dict[str, Any]]


def _ingredient_lists(recipes: Iterable[RecipeLike]) -> list[list[Any]]:
    """Accept stored recipes or bare ingredient lists."""
    lists = []
    for recipe in recipes:
        if isinstance(recipe, Recipe):
            lists.append(list(recipe.ingredients or []))
        else:
            lists.append(list(recipe))
    return lists


class IngredientEngine:
    """
    Ingredient normalization and aggregation engine.

    Holds one knowledge base snapshot, one parser and one shopping list
    generator, all chosen when the engine is built.
    """

    def __init__(
        self,
        kb: KnowledgeBase,
        parser: IngredientParser,
        generator: ShoppingListGenerator | None = None,
    ):
        self.kb = kb
        self.parser = parser
        self.generator = generator or ShoppingListGenerator()

    @classmethod
    def from_session(cls, session: Session, settings: Settings | None = None) -> "IngredientEngine":
        """Load the knowledge base from storage and pick the configured parser."""
        settings = settings or get_settings()
        kb = load_knowledge_base(SqlKnowledgeBaseStore(session))
        parser = create_parser(kb, settings)
        logger.debug(f"Engine ready: parser={parser.name}, kb={kb.version}")
        return cls(kb, parser, ShoppingListGenerator(settings.range_reduction))

    # =========================================================================
    # Parsing
    # =========================================================================

    def parse(self, text: str) -> ParsedIngredient:
        return self.parser.parse(text)

    def parse_many(self, texts: Iterable[str]) -> list[ParsedIngredient]:
        return self.parser.parse_many(texts)

    # =========================================================================
    # Shopping lists
    # =========================================================================

    def aggregate_for_new_list(self, recipes: Iterable[RecipeLike]) -> list[ShoppingItem]:
        return self.generator.aggregate_for_new_list(_ingredient_lists(recipes))

    def aggregate_for_append(
        self,
        existing_items: list[ShoppingItem],
        new_recipes: Iterable[RecipeLike],
    ) -> AppendResult:
        return self.generator.aggregate_for_append(existing_items, _ingredient_lists(new_recipes))

    # =========================================================================
    # Import
    # =========================================================================

    def reconcile_import_batch(
        self,
        owner_id: str,
        raw_recipes: Iterable[ImportedRecipe | dict[str, Any]],
        recipes: RecipeService,
    ) -> ImportReport:
        reconciler = ImportReconciler(self.parser, recipes, self.kb)
        return reconciler.reconcile(owner_id, raw_recipes)

    def preview_import_batch(
        self, raw_recipes: Iterable[ImportedRecipe | dict[str, Any]]
    ) -> ImportPreview:
        return preview_import_batch(raw_recipes)

    def close(self) -> None:
        self.parser.close()
