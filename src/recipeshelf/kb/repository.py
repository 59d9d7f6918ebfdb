"""Storage access for the knowledge base."""

from abc import ABC, abstractmethod

from sqlalchemy import select
from sqlalchemy.orm import Session

from recipeshelf.kb.knowledge_base import KnowledgeBase
from recipeshelf.kb.models import KnownIngredient, KnownModifier, KnownUnit, clean_aliases
from recipeshelf.logging_config import get_logger
from recipeshelf.models import KnownIngredientRecord, KnownModifierRecord, KnownUnitRecord

logger = get_logger(__name__)


def ingredient_from_record(record: KnownIngredientRecord) -> KnownIngredient:
    return KnownIngredient(
        id=record.id,
        name=record.name,
        category=record.category,
        aliases=clean_aliases(record.aliases),
        default_unit=record.default_unit,
    )


def unit_from_record(record: KnownUnitRecord) -> KnownUnit:
    return KnownUnit(
        id=record.id,
        name=record.name,
        type=record.type,
        abbreviation=record.abbreviation,
        aliases=clean_aliases(record.aliases),
        base_unit=record.base_unit,
        conversion_to_base=record.conversion_to_base,
    )


def modifier_from_record(record: KnownModifierRecord) -> KnownModifier:
    return KnownModifier(
        id=record.id,
        name=record.name,
        type=record.type,
        aliases=clean_aliases(record.aliases),
    )


class KnowledgeBaseStore(ABC):
    """Narrow read/create interface over knowledge base storage."""

    @abstractmethod
    def find_known_ingredients_all(self) -> list[KnownIngredient]:
        """Return every known ingredient in insertion order."""
        pass

    @abstractmethod
    def find_known_units_all(self) -> list[KnownUnit]:
        """Return every known unit in insertion order."""
        pass

    @abstractmethod
    def find_known_modifiers_all(self) -> list[KnownModifier]:
        """Return every known modifier in insertion order."""
        pass

    @abstractmethod
    def create_ingredient(
        self,
        name: str,
        category: str = "other",
        aliases: list[str] | None = None,
        default_unit: str | None = None,
    ) -> KnownIngredient:
        pass

    @abstractmethod
    def create_unit(
        self,
        name: str,
        type: str = "other",
        abbreviation: str | None = None,
        aliases: list[str] | None = None,
        base_unit: str | None = None,
        conversion_to_base: float | None = None,
    ) -> KnownUnit:
        pass

    @abstractmethod
    def create_modifier(
        self,
        name: str,
        type: str = "other",
        aliases: list[str] | None = None,
    ) -> KnownModifier:
        pass


class SqlKnowledgeBaseStore(KnowledgeBaseStore):
    """Knowledge base store backed by the relational database."""

    def __init__(self, session: Session):
        self.session = session

    # =========================================================================
    # Reads
    # =========================================================================

    def find_known_ingredients_all(self) -> list[KnownIngredient]:
        records = self.session.scalars(
            select(KnownIngredientRecord).order_by(KnownIngredientRecord.id)
        ).all()
        return [ingredient_from_record(r) for r in records]

    def find_known_units_all(self) -> list[KnownUnit]:
        records = self.session.scalars(select(KnownUnitRecord).order_by(KnownUnitRecord.id)).all()
        return [unit_from_record(r) for r in records]

    def find_known_modifiers_all(self) -> list[KnownModifier]:
        records = self.session.scalars(
            select(KnownModifierRecord).order_by(KnownModifierRecord.id)
        ).all()
        return [modifier_from_record(r) for r in records]

    def search_ingredients(self, query: str, limit: int = 20) -> list[KnownIngredient]:
        """Case-insensitive substring search on canonical names."""
        records = self.session.scalars(
            select(KnownIngredientRecord)
            .where(KnownIngredientRecord.name.icontains(query, autoescape=True))
            .order_by(KnownIngredientRecord.name)
            .limit(limit)
        ).all()
        return [ingredient_from_record(r) for r in records]

    # =========================================================================
    # Creates
    # =========================================================================

    def create_ingredient(
        self,
        name: str,
        category: str = "other",
        aliases: list[str] | None = None,
        default_unit: str | None = None,
    ) -> KnownIngredient:
        record = KnownIngredientRecord(
            name=name,
            category=category,
            aliases=list(clean_aliases(aliases)),
            default_unit=default_unit,
        )
        self.session.add(record)
        self.session.commit()
        logger.info(f"Created known ingredient '{name}' (id={record.id})")
        return ingredient_from_record(record)

    def create_unit(
        self,
        name: str,
        type: str = "other",
        abbreviation: str | None = None,
        aliases: list[str] | None = None,
        base_unit: str | None = None,
        conversion_to_base: float | None = None,
    ) -> KnownUnit:
        record = KnownUnitRecord(
            name=name,
            type=type,
            abbreviation=abbreviation,
            aliases=list(clean_aliases(aliases)),
            base_unit=base_unit,
            conversion_to_base=conversion_to_base,
        )
        self.session.add(record)
        self.session.commit()
        logger.info(f"Created known unit '{name}' (id={record.id})")
        return unit_from_record(record)

    def create_modifier(
        self,
        name: str,
        type: str = "other",
        aliases: list[str] | None = None,
    ) -> KnownModifier:
        record = KnownModifierRecord(name=name, type=type, aliases=list(clean_aliases(aliases)))
        self.session.add(record)
        self.session.commit()
        logger.info(f"Created known modifier '{name}' (id={record.id})")
        return modifier_from_record(record)


def load_knowledge_base(store: KnowledgeBaseStore) -> KnowledgeBase:
    """Read every KB collection once and build an immutable snapshot."""
    kb = KnowledgeBase(
        ingredients=store.find_known_ingredients_all(),
        units=store.find_known_units_all(),
        modifiers=store.find_known_modifiers_all(),
    )
    logger.debug(
        f"Loaded knowledge base {kb.version}: {len(kb.ingredients)} ingredients, "
        f"{len(kb.units)} units, {len(kb.modifiers)} modifiers"
    )
    return kb
