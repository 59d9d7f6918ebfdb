"""Knowledge base business logic: snapshots, search and find-or-create."""

from sqlalchemy.orm import Session

from recipeshelf.exceptions import InvalidInputError
from recipeshelf.kb.knowledge_base import KnowledgeBase
from recipeshelf.kb.models import (
    IngredientCategory,
    KnownIngredient,
    KnownModifier,
    KnownUnit,
    ModifierType,
    UnitType,
)
from recipeshelf.kb.repository import SqlKnowledgeBaseStore, load_knowledge_base
from recipeshelf.logging_config import get_logger

logger = get_logger(__name__)

MIN_SEARCH_LENGTH = 2


def capitalize_words(text: str) -> str:
    """Capitalize each space-separated word: "red lentils" -> "Red Lentils"."""
    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split(" "))


class KnowledgeBaseService:
    """Service layer over the knowledge base store."""

    def __init__(self, session: Session, store: SqlKnowledgeBaseStore | None = None):
        self.session = session
        self.store = store or SqlKnowledgeBaseStore(session)
        self._kb: KnowledgeBase | None = None

    def snapshot(self, refresh: bool = False) -> KnowledgeBase:
        """Return the KB snapshot for this service, loading it on first use."""
        if self._kb is None or refresh:
            self._kb = load_knowledge_base(self.store)
        return self._kb

    # =========================================================================
    # Ingredients
    # =========================================================================

    def find_or_create_ingredient(
        self,
        name: str,
        category: str | None = None,
    ) -> tuple[KnownIngredient, bool]:
        """
        Resolve a name to a known ingredient, creating one when nothing matches.

        Only used for manually entered ingredients; the bulk parsing path never
        creates KB entries. Two concurrent calls for the same new name can both
        create a row.

        Returns:
            (ingredient, created) tuple.
        """
        normalized = (name or "").strip()
        if not normalized:
            raise InvalidInputError("Ingredient name must not be empty")

        kb = self.snapshot()
        existing = kb.match_ingredient(normalized)
        if existing is not None:
            return existing, False

        if category is not None and category not in {c.value for c in IngredientCategory}:
            raise InvalidInputError(f"Unknown ingredient category: {category}")

        created = self.store.create_ingredient(
            name=capitalize_words(normalized),
            category=category or IngredientCategory.OTHER.value,
            aliases=[],
        )
        self._kb = kb.with_ingredient(created)
        return created, True

    def search_ingredients(self, query: str, limit: int = 20) -> list[KnownIngredient]:
        """Case-insensitive substring search. Queries shorter than 2 characters find nothing."""
        query = (query or "").strip()
        if len(query) < MIN_SEARCH_LENGTH:
            return []
        return self.store.search_ingredients(query, limit=limit)

    def list_ingredients(self) -> list[KnownIngredient]:
        return list(self.snapshot().ingredients)

    # =========================================================================
    # Units and Modifiers
    # =========================================================================

    def list_units(self) -> list[KnownUnit]:
        return list(self.snapshot().units)

    def list_modifiers(self) -> list[KnownModifier]:
        return list(self.snapshot().modifiers)

    def create_unit(
        self,
        name: str,
        type: str = UnitType.OTHER.value,
        abbreviation: str | None = None,
        aliases: list[str] | None = None,
        base_unit: str | None = None,
        conversion_to_base: float | None = None,
    ) -> KnownUnit:
        if not name or not name.strip():
            raise InvalidInputError("Unit name must not be empty")
        if type not in {t.value for t in UnitType}:
            raise InvalidInputError(f"Unknown unit type: {type}")

        unit = self.store.create_unit(
            name=name.strip(),
            type=type,
            abbreviation=abbreviation,
            aliases=aliases,
            base_unit=base_unit,
            conversion_to_base=conversion_to_base,
        )
        self._kb = None
        return unit

    def create_modifier(
        self,
        name: str,
        type: str = ModifierType.OTHER.value,
        aliases: list[str] | None = None,
    ) -> KnownModifier:
        if not name or not name.strip():
            raise InvalidInputError("Modifier name must not be empty")
        if type not in {t.value for t in ModifierType}:
            raise InvalidInputError(f"Unknown modifier type: {type}")

        modifier = self.store.create_modifier(name=name.strip(), type=type, aliases=aliases)
        self._kb = None
        return modifier
