"""Knowledge base of known ingredients, units and modifiers."""

from recipeshelf.kb.knowledge_base import KnowledgeBase, ModifierMatch
from recipeshelf.kb.models import (
    AliasConflict,
    IngredientCategory,
    KnownIngredient,
    KnownModifier,
    KnownUnit,
    ModifierType,
    UnitType,
)
from recipeshelf.kb.repository import KnowledgeBaseStore, SqlKnowledgeBaseStore, load_knowledge_base
from recipeshelf.kb.seeding import SeedReport, build_seed_knowledge_base, seed_knowledge_base
from recipeshelf.kb.service import KnowledgeBaseService

__all__ = [
    "AliasConflict",
    "IngredientCategory",
    "KnowledgeBase",
    "KnowledgeBaseService",
    "KnowledgeBaseStore",
    "KnownIngredient",
    "KnownModifier",
    "KnownUnit",
    "ModifierMatch",
    "ModifierType",
    "SeedReport",
    "SqlKnowledgeBaseStore",
    "UnitType",
    "build_seed_knowledge_base",
    "load_knowledge_base",
    "seed_knowledge_base",
]
