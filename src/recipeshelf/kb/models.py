"""Knowledge base entries: known ingredients, units and modifiers."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class IngredientCategory(str, Enum):
    PROTEIN = "protein"
    PRODUCE = "produce"
    DAIRY = "dairy"
    PANTRY = "pantry"
    GRAINS = "grains"
    BAKING = "baking"
    SPICES = "spices"
    CONDIMENTS = "condiments"
    FROZEN = "frozen"
    BEVERAGES = "beverages"
    OTHER = "other"


class UnitType(str, Enum):
    VOLUME = "volume"
    WEIGHT = "weight"
    COUNT = "count"
    LENGTH = "length"
    OTHER = "other"


class ModifierType(str, Enum):
    PREPARATION = "preparation"
    STATE = "state"
    QUALITY = "quality"
    SIZE = "size"
    COOKING = "cooking"
    OTHER = "other"


def normalize_term(text: str | None) -> str:
    """Lowercase and collapse whitespace for case-insensitive term lookups."""
    if not text:
        return ""
    return " ".join(text.lower().split())


def clean_aliases(aliases: Any) -> tuple[str, ...]:
    """Lowercase, dedupe and drop empty aliases, keeping first-seen order."""
    seen: dict[str, None] = {}
    for alias in aliases or ():
        term = normalize_term(alias)
        if term:
            seen.setdefault(term, None)
    return tuple(seen)


@dataclass(frozen=True)
class KnownIngredient:
    """Canonical ingredient identity."""

    id: int
    name: str
    category: str = IngredientCategory.OTHER.value
    aliases: tuple[str, ...] = field(default_factory=tuple)
    default_unit: str | None = None

    @property
    def alias_terms(self) -> tuple[str, ...]:
        return self.aliases

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "aliases": list(self.aliases),
            "default_unit": self.default_unit,
        }


@dataclass(frozen=True)
class KnownUnit:
    """Canonical measurement unit. The abbreviation also matches as an alias."""

    id: int
    name: str
    type: str = UnitType.OTHER.value
    abbreviation: str | None = None
    aliases: tuple[str, ...] = field(default_factory=tuple)
    base_unit: str | None = None
    conversion_to_base: float | None = None

    @property
    def alias_terms(self) -> tuple[str, ...]:
        abbreviation = normalize_term(self.abbreviation)
        if abbreviation and abbreviation not in self.aliases:
            return (abbreviation, *self.aliases)
        return self.aliases

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "abbreviation": self.abbreviation,
            "aliases": list(self.aliases),
            "base_unit": self.base_unit,
            "conversion_to_base": self.conversion_to_base,
        }


@dataclass(frozen=True)
class KnownModifier:
    """Canonical preparation, state, quality, size or cooking modifier."""

    id: int
    name: str
    type: str = ModifierType.OTHER.value
    aliases: tuple[str, ...] = field(default_factory=tuple)

    @property
    def alias_terms(self) -> tuple[str, ...]:
        return self.aliases

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "aliases": list(self.aliases),
        }


@dataclass(frozen=True)
class AliasConflict:
    """A term claimed by more than one entry of the same kind."""

    kind: str  # "ingredient", "unit", "modifier"
    term: str
    winner: str
    shadowed: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "term": self.term,
            "winner": self.winner,
            "shadowed": list(self.shadowed),
        }
