"""Quantity parsing and unit/name normalization utilities."""

import math
import re


# =============================================================================
# Unit Normalization Table
# =============================================================================

# Spelling variants mapped to the canonical long form used for aggregation.
# Unknown units normalize to their own lowercase form.
UNIT_ALIASES: dict[str, str] = {
    # Volume
    "tsp": "teaspoon",
    "tsps": "teaspoon",
    "teaspoon": "teaspoon",
    "teaspoons": "teaspoon",
    "tbsp": "tablespoon",
    "tbsps": "tablespoon",
    "tbs": "tablespoon",
    "tbl": "tablespoon",
    "tablespoon": "tablespoon",
    "tablespoons": "tablespoon",
    "c": "cup",
    "cup": "cup",
    "cups": "cup",
    "ml": "milliliter",
    "milliliter": "milliliter",
    "milliliters": "milliliter",
    "millilitre": "milliliter",
    "millilitres": "milliliter",
    "l": "liter",
    "liter": "liter",
    "liters": "liter",
    "litre": "liter",
    "litres": "liter",
    "fl oz": "fluid ounce",
    "fluid ounce": "fluid ounce",
    "fluid ounces": "fluid ounce",
    "pt": "pint",
    "pint": "pint",
    "pints": "pint",
    "qt": "quart",
    "quart": "quart",
    "quarts": "quart",
    "gal": "gallon",
    "gallon": "gallon",
    "gallons": "gallon",
    # Weight
    "oz": "ounce",
    "ounce": "ounce",
    "ounces": "ounce",
    "lb": "pound",
    "lbs": "pound",
    "pound": "pound",
    "pounds": "pound",
    "g": "gram",
    "gm": "gram",
    "gram": "gram",
    "grams": "gram",
    "kg": "kilogram",
    "kilo": "kilogram",
    "kilogram": "kilogram",
    "kilograms": "kilogram",
    "mg": "milligram",
    "milligram": "milligram",
    "milligrams": "milligram",
    # Count
    "pc": "piece",
    "pcs": "piece",
    "piece": "piece",
    "pieces": "piece",
    "clove": "clove",
    "cloves": "clove",
    "can": "can",
    "cans": "can",
    "slice": "slice",
    "slices": "slice",
    "pkg": "package",
    "package": "package",
    "packages": "package",
    "packet": "package",
    "packets": "package",
}

# Policies for collapsing a range like "3-4" into one number
RANGE_REDUCTIONS = ("lower", "midpoint", "upper")


# =============================================================================
# Quantity Parsing
# =============================================================================

UNICODE_FRACTIONS: dict[str, float] = {
    "½": 1 / 2,
    "⅓": 1 / 3,
    "⅔": 2 / 3,
    "¼": 1 / 4,
    "¾": 3 / 4,
    "⅕": 1 / 5,
    "⅖": 2 / 5,
    "⅗": 3 / 5,
    "⅘": 4 / 5,
    "⅙": 1 / 6,
    "⅚": 5 / 6,
    "⅛": 1 / 8,
    "⅜": 3 / 8,
    "⅝": 5 / 8,
    "⅞": 7 / 8,
}

FRACTION_CHARS = "".join(UNICODE_FRACTIONS)

# One numeric token: "1/2", "1.5", "2", "1½", "½"
NUMBER_TOKEN = rf"(?:\d+/\d+|\d+(?:\.\d+)?[{FRACTION_CHARS}]?|\.\d+|[{FRACTION_CHARS}])"

# A quantity made of a whole part and an optional fractional part: "1 1/2", "1 ½"
COMPOUND_NUMBER = rf"{NUMBER_TOKEN}(?:\s+(?:\d+/\d+|[{FRACTION_CHARS}]))?"

RANGE_SEPARATOR = r"\s*(?:-|–|—)\s*|\s+to\s+"

RANGE_PATTERN = re.compile(
    rf"^{COMPOUND_NUMBER}(?:{RANGE_SEPARATOR}){COMPOUND_NUMBER}$",
    re.IGNORECASE,
)

_RANGE_SPLIT = re.compile(RANGE_SEPARATOR, re.IGNORECASE)


def tidy_number(value: float) -> int | float:
    """Return whole numbers as int so that 2.0 is stored as 2."""
    if value.is_integer():
        return int(value)
    return value


def parse_number_token(token: str) -> float | None:
    """
    Parse a single numeric token.

    Handles "2", "1.5", "1/2", "½" and "1½". Returns None for anything that
    does not produce a finite number.
    """
    token = token.strip()
    if not token:
        return None

    if "/" in token:
        numerator, _, denominator = token.partition("/")
        try:
            num = float(numerator)
            den = float(denominator)
        except ValueError:
            return None
        if den == 0:
            return None
        value = num / den
    elif token[-1] in UNICODE_FRACTIONS:
        whole = token[:-1]
        fraction = UNICODE_FRACTIONS[token[-1]]
        if not whole:
            return fraction
        try:
            value = float(whole) + fraction
        except ValueError:
            return None
    else:
        try:
            value = float(token)
        except ValueError:
            return None

    if not math.isfinite(value):
        return None
    return value


def _sum_parts(text: str) -> float | None:
    """Sum whitespace-separated numeric parts, ignoring the ones that fail to parse."""
    values = [parse_number_token(part) for part in text.split()]
    numbers = [v for v in values if v is not None]
    if not numbers:
        return None
    return sum(numbers)


def parse_quantity_string(quantity_str: str | None) -> int | float | str | None:
    """
    Parse a quantity string into a number or a range string.

    Handles formats like:
    - "2", "1.5", "1/2", "½"
    - "1 1/2" (one and a half)
    - "3-4", "1 to 2" (range, returned verbatim as a string)

    Returns None when no part parses as a number.
    """
    if not quantity_str:
        return None

    text = " ".join(quantity_str.split())
    if not text:
        return None

    if RANGE_PATTERN.match(text):
        return text

    total = _sum_parts(text)
    if total is None:
        return None
    return tidy_number(total)


def is_numeric_quantity(quantity: object) -> bool:
    """Check if a quantity is a plain number (not a range string, not absent)."""
    return isinstance(quantity, (int, float)) and not isinstance(quantity, bool)


def quantity_to_number(
    quantity: int | float | str | None,
    range_reduction: str = "lower",
) -> float | None:
    """
    Collapse a stored quantity into a single number.

    Numbers pass through. A range string such as "3-4" is reduced according
    to the policy: "lower" gives 3, "midpoint" 3.5 and "upper" 4. Strings that
    contain no number give None.
    """
    if range_reduction not in RANGE_REDUCTIONS:
        raise ValueError(f"Unknown range reduction policy: {range_reduction}")

    if quantity is None or isinstance(quantity, bool):
        return None
    if isinstance(quantity, (int, float)):
        return float(quantity)

    bounds = [_sum_parts(part) for part in _RANGE_SPLIT.split(quantity.strip())]
    numbers = [b for b in bounds if b is not None]
    if not numbers:
        return None

    if range_reduction == "upper":
        return numbers[-1]
    if range_reduction == "midpoint":
        return (numbers[0] + numbers[-1]) / 2
    return numbers[0]


# =============================================================================
# Name and Unit Normalization
# =============================================================================


def normalize_unit(unit: str | None) -> str | None:
    """
    Normalize a unit string to its canonical long form.

    "Tbsp" -> "tablespoon", "g" -> "gram". Unknown units come back as their own
    lowercase form; empty units give None.
    """
    if not unit:
        return None

    key = " ".join(unit.lower().split())
    if not key:
        return None

    if key in UNIT_ALIASES:
        return UNIT_ALIASES[key]

    stripped = key.rstrip(".")
    if stripped in UNIT_ALIASES:
        return UNIT_ALIASES[stripped]

    return key


def normalize_ingredient_name(name: str | None) -> str:
    """
    Normalize an ingredient name for grouping.

    - Lowercase and trim
    - Remove anything that is not a letter, digit or whitespace
    - Collapse whitespace
    """
    if not name:
        return ""

    name = name.lower().strip()
    name = re.sub(r"[^a-z0-9\s]", "", name)
    return " ".join(name.split())
