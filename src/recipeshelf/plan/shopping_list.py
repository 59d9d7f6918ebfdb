"""Shopping list aggregation: merge ingredients from many recipes into list lines."""

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import Any

from recipeshelf.logging_config import get_logger
from recipeshelf.normalize.units import (
    RANGE_REDUCTIONS,
    is_numeric_quantity,
    normalize_ingredient_name,
    normalize_unit,
    quantity_to_number,
    tidy_number,
)
from recipeshelf.schemas import RecipeIngredient

logger = get_logger(__name__)

NOTE_SEPARATOR = "; "

AggregationKey = tuple[str, int | str, str | None]


@dataclass
class AggregatedLine:
    """One consolidated ingredient before it is committed to a shopping list."""

    name: str
    quantity: int | float | str | None
    unit: str | None
    notes: list[str] = field(default_factory=list)
    known_ingredient_id: int | None = None

    @property
    def note(self) -> str | None:
        return NOTE_SEPARATOR.join(self.notes) if self.notes else None


@dataclass
class ShoppingItem:
    """A single shopping list line. Quantity is always a plain number or None."""

    name: str
    quantity: float | None = None
    unit: str | None = None
    note: str | None = None
    is_checked: bool = False
    position: int = 0
    known_ingredient_id: int | None = None
    id: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
            "note": self.note,
            "is_checked": self.is_checked,
            "position": self.position,
            "known_ingredient_id": self.known_ingredient_id,
        }


@dataclass
class AppendResult:
    """Existing lines that absorbed new quantities, and lines to create."""

    updated_items: list[ShoppingItem] = field(default_factory=list)
    new_items: list[ShoppingItem] = field(default_factory=list)


# =============================================================================
# Keys and merge rules
# =============================================================================


def as_recipe_ingredient(value: RecipeIngredient | dict[str, Any]) -> RecipeIngredient:
    if isinstance(value, RecipeIngredient):
        return value
    return RecipeIngredient.model_validate(value)


def aggregation_key(
    name: str | None,
    unit: str | None,
    known_ingredient_id: int | None = None,
) -> AggregationKey:
    """
    Identity of a shopping list line.

    A known ingredient groups by (id, unit); anything else by (normalized
    name, unit). Units are normalized through the fixed alias table, so
    "tbsp" and "Tablespoons" share a line while "cup" and "ml" never do.
    """
    normalized_unit = normalize_unit(unit)
    if known_ingredient_id is not None:
        return ("known", known_ingredient_id, normalized_unit)
    return ("text", normalize_ingredient_name(name), normalized_unit)


def merge_quantities(
    existing: int | float | str | None,
    incoming: int | float | str | None,
) -> int | float | str | None:
    """Add two quantities when both are plain numbers; otherwise keep the existing one."""
    if is_numeric_quantity(existing) and is_numeric_quantity(incoming):
        return tidy_number(float(existing) + float(incoming))
    return existing


def merge_notes(existing: str | None, incoming: str | None) -> str | None:
    """Append incoming note segments with "; ", skipping exact duplicates."""
    segments = existing.split(NOTE_SEPARATOR) if existing else []
    for segment in incoming.split(NOTE_SEPARATOR) if incoming else []:
        if segment and segment not in segments:
            segments.append(segment)
    return NOTE_SEPARATOR.join(segments) if segments else None


def aggregate_ingredients(
    ingredient_lists: Iterable[Iterable[RecipeIngredient | dict[str, Any]]],
) -> list[AggregatedLine]:
    """
    Group ingredient occurrences from several recipes into lines.

    First occurrence order, name and unit spelling are kept. Range
    quantities stay strings here; they are only reduced on commit.
    """
    lines: dict[AggregationKey, AggregatedLine] = {}

    for ingredients in ingredient_lists:
        for value in ingredients or []:
            ingredient = as_recipe_ingredient(value)
            key = aggregation_key(ingredient.name, ingredient.unit, ingredient.known_ingredient_id)
            line = lines.get(key)
            if line is None:
                lines[key] = AggregatedLine(
                    name=ingredient.name,
                    quantity=ingredient.quantity,
                    unit=ingredient.unit or None,
                    notes=[ingredient.note] if ingredient.note else [],
                    known_ingredient_id=ingredient.known_ingredient_id,
                )
                continue

            line.quantity = merge_quantities(line.quantity, ingredient.quantity)
            if ingredient.note and ingredient.note not in line.notes:
                line.notes.append(ingredient.note)

    return list(lines.values())


def merge_into_existing(
    existing_items: list[ShoppingItem],
    lines: list[AggregatedLine],
    range_reduction: str = "lower",
) -> AppendResult:
    """
    Fold aggregated lines into a list that already has items.

    A line matching an existing item adds to its quantity when both are plain
    numbers; a range or a missing quantity leaves the existing value as it is.
    The item also merges notes and is unchecked. Other lines become new items
    placed after the current highest position, with ranges reduced. Existing
    items are not mutated; updated copies are returned.
    """
    by_key: dict[AggregationKey, ShoppingItem] = {}
    for item in existing_items:
        by_key.setdefault(aggregation_key(item.name, item.unit, item.known_ingredient_id), item)

    updated: dict[int, ShoppingItem] = {}
    result = AppendResult()
    next_position = max((item.position for item in existing_items), default=-1) + 1

    for line in lines:
        key = aggregation_key(line.name, line.unit, line.known_ingredient_id)
        existing = by_key.get(key)

        if existing is None:
            result.new_items.append(
                ShoppingItem(
                    name=line.name,
                    quantity=quantity_to_number(line.quantity, range_reduction),
                    unit=line.unit,
                    note=line.note,
                    position=next_position,
                    known_ingredient_id=line.known_ingredient_id,
                )
            )
            next_position += 1
            continue

        current = updated.get(id(existing), existing)
        merged = replace(
            current,
            quantity=merge_quantities(current.quantity, line.quantity),
            note=merge_notes(current.note, line.note),
            is_checked=False,
        )
        updated[id(existing)] = merged

    result.updated_items = list(updated.values())
    return result


class ShoppingListGenerator:
    """
    Builds shopping list items from recipe ingredients.

    Range quantities ("3-4") are collapsed to one number when items are
    produced, using the configured policy (lower bound by default).
    """

    def __init__(self, range_reduction: str = "lower"):
        if range_reduction not in RANGE_REDUCTIONS:
            raise ValueError(f"Unknown range reduction policy: {range_reduction}")
        self.range_reduction = range_reduction

    def aggregate_for_new_list(
        self,
        ingredient_lists: Iterable[Iterable[RecipeIngredient | dict[str, Any]]],
    ) -> list[ShoppingItem]:
        """Aggregate recipes into fresh items positioned 0..n-1."""
        lines = aggregate_ingredients(ingredient_lists)
        items = [
            ShoppingItem(
                name=line.name,
                quantity=quantity_to_number(line.quantity, self.range_reduction),
                unit=line.unit,
                note=line.note,
                position=position,
                known_ingredient_id=line.known_ingredient_id,
            )
            for position, line in enumerate(lines)
        ]
        logger.debug(f"Aggregated {len(items)} shopping list items")
        return items

    def aggregate_for_append(
        self,
        existing_items: list[ShoppingItem],
        ingredient_lists: Iterable[Iterable[RecipeIngredient | dict[str, Any]]],
    ) -> AppendResult:
        """Aggregate new recipes and merge them into an existing list's items."""
        lines = aggregate_ingredients(ingredient_lists)
        result = merge_into_existing(existing_items, lines, self.range_reduction)
        logger.debug(
            f"Append merged into {len(result.updated_items)} items, "
            f"created {len(result.new_items)}"
        )
        return result
