"""Shopping list aggregation and management."""

from recipeshelf.plan.service import ShoppingListService
from recipeshelf.plan.shopping_list import (
    AggregatedLine,
    AppendResult,
    ShoppingItem,
    ShoppingListGenerator,
    aggregate_ingredients,
    aggregation_key,
    merge_into_existing,
    merge_notes,
    merge_quantities,
)

__all__ = [
    "AggregatedLine",
    "AppendResult",
    "ShoppingItem",
    "ShoppingListGenerator",
    "ShoppingListService",
    "aggregate_ingredients",
    "aggregation_key",
    "merge_into_existing",
    "merge_notes",
    "merge_quantities",
]
