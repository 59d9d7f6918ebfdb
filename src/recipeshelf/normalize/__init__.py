"""Normalize quantities, units and ingredient names."""

from recipeshelf.normalize.units import (
    UNIT_ALIASES,
    is_numeric_quantity,
    normalize_ingredient_name,
    normalize_unit,
    parse_number_token,
    parse_quantity_string,
    quantity_to_number,
)

__all__ = [
    "UNIT_ALIASES",
    "is_numeric_quantity",
    "normalize_ingredient_name",
    "normalize_unit",
    "parse_number_token",
    "parse_quantity_string",
    "quantity_to_number",
]
