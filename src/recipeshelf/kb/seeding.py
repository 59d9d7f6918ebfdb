"""Seed the knowledge base from the static seed tables."""

from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from recipeshelf.kb.knowledge_base import KnowledgeBase
from recipeshelf.kb.models import KnownIngredient, KnownModifier, KnownUnit, clean_aliases
from recipeshelf.kb.seed_data import INGREDIENT_SEEDS, MODIFIER_SEEDS, UNIT_SEEDS
from recipeshelf.logging_config import get_logger
from recipeshelf.models import KnownIngredientRecord, KnownModifierRecord, KnownUnitRecord

logger = get_logger(__name__)


@dataclass
class SeedCounts:
    """Inserted and alias-extended counts for one KB collection."""

    inserted: int = 0
    aliases_extended: int = 0
    unchanged: int = 0


@dataclass
class SeedReport:
    """Outcome of a seeding run."""

    ingredients: SeedCounts = field(default_factory=SeedCounts)
    units: SeedCounts = field(default_factory=SeedCounts)
    modifiers: SeedCounts = field(default_factory=SeedCounts)

    def to_dict(self) -> dict[str, Any]:
        return {
            kind: {
                "inserted": counts.inserted,
                "aliases_extended": counts.aliases_extended,
                "unchanged": counts.unchanged,
            }
            for kind, counts in (
                ("ingredients", self.ingredients),
                ("units", self.units),
                ("modifiers", self.modifiers),
            )
        }


def merge_aliases(existing: list[str] | None, incoming: Any) -> list[str] | None:
    """
    Union two alias lists, keeping the existing order and appending new ones.

    Returns None when nothing new was added. Aliases are never removed.
    """
    current = list(existing or [])
    known = set(clean_aliases(current))
    added = [alias for alias in clean_aliases(incoming) if alias not in known]
    if not added:
        return None
    return current + added


def _seed_collection(session: Session, model: type, seeds: list, build: Any) -> SeedCounts:
    counts = SeedCounts()
    for seed in seeds:
        record = session.scalars(select(model).where(model.name == seed.name)).first()
        if record is None:
            session.add(build(seed))
            counts.inserted += 1
            continue

        merged = merge_aliases(record.aliases, seed.aliases)
        if merged is None:
            counts.unchanged += 1
            continue

        # Assign a new list so the JSON column is marked dirty
        record.aliases = merged
        counts.aliases_extended += 1
        logger.debug(f"Extended aliases of {model.__tablename__} '{seed.name}'")

    # Flush per collection so autoincrement ids follow seed order
    session.flush()
    return counts


def seed_knowledge_base(session: Session) -> SeedReport:
    """
    Insert missing seed entries by exact canonical name and grow aliases of existing ones.

    Safe to run repeatedly: a second run inserts nothing.
    """
    logger.info(
        f"Seeding knowledge base: {len(INGREDIENT_SEEDS)} ingredients, "
        f"{len(UNIT_SEEDS)} units, {len(MODIFIER_SEEDS)} modifiers"
    )

    report = SeedReport()
    report.ingredients = _seed_collection(
        session,
        KnownIngredientRecord,
        INGREDIENT_SEEDS,
        lambda s: KnownIngredientRecord(
            name=s.name,
            category=s.category,
            aliases=list(clean_aliases(s.aliases)),
            default_unit=s.default_unit,
        ),
    )
    report.units = _seed_collection(
        session,
        KnownUnitRecord,
        UNIT_SEEDS,
        lambda s: KnownUnitRecord(
            name=s.name,
            type=s.type,
            abbreviation=s.abbreviation,
            aliases=list(clean_aliases(s.aliases)),
            base_unit=s.base_unit,
            conversion_to_base=s.conversion_to_base,
        ),
    )
    report.modifiers = _seed_collection(
        session,
        KnownModifierRecord,
        MODIFIER_SEEDS,
        lambda s: KnownModifierRecord(
            name=s.name,
            type=s.type,
            aliases=list(clean_aliases(s.aliases)),
        ),
    )
    session.commit()

    logger.info(f"Knowledge base seeded: {report.to_dict()}")
    return report


def build_seed_knowledge_base() -> KnowledgeBase:
    """Build a snapshot straight from the seed tables, without storage."""
    ingredients = [
        KnownIngredient(
            id=i,
            name=s.name,
            category=s.category,
            aliases=clean_aliases(s.aliases),
            default_unit=s.default_unit,
        )
        for i, s in enumerate(INGREDIENT_SEEDS, start=1)
    ]
    units = [
        KnownUnit(
            id=i,
            name=s.name,
            type=s.type,
            abbreviation=s.abbreviation,
            aliases=clean_aliases(s.aliases),
            base_unit=s.base_unit,
            conversion_to_base=s.conversion_to_base,
        )
        for i, s in enumerate(UNIT_SEEDS, start=1)
    ]
    modifiers = [
        KnownModifier(id=i, name=s.name, type=s.type, aliases=clean_aliases(s.aliases))
        for i, s in enumerate(MODIFIER_SEEDS, start=1)
    ]
    return KnowledgeBase(ingredients, units, modifiers)
