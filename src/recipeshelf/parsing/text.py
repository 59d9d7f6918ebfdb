"""Positional text pass: split an ingredient line into quantity, unit, name and note."""

import re
from dataclasses import dataclass

from recipeshelf.normalize.units import (
    COMPOUND_NUMBER,
    RANGE_SEPARATOR,
    UNIT_ALIASES,
    parse_quantity_string,
)

# =============================================================================
# Patterns
# =============================================================================

BULLET_PATTERN = re.compile(r"^\s*[■□●○•◦▪▫★☆✓✔✗✘*#-]+\s*")
LIST_MARKER_PATTERN = re.compile(r"^\d+[.)]\s+(?=[^\W\d_])")

QUANTITY_PATTERN = re.compile(
    rf"^(?P<quantity>{COMPOUND_NUMBER}(?:(?:{RANGE_SEPARATOR}){COMPOUND_NUMBER})?)(?![\d/])",
    re.IGNORECASE,
)

# Spelling variants recognized directly after a quantity, on top of UNIT_ALIASES
EXTRA_UNIT_VARIANTS = [
    "fl. oz",
    "pinch", "pinches",
    "dash", "dashes",
    "bunch", "bunches",
    "sprig", "sprigs",
    "stalk", "stalks",
    "stick", "sticks",
    "head", "heads",
    "jar", "jars",
    "bottle", "bottles",
    "bag", "bags",
    "box", "boxes",
    "tin", "tins",
    "pack", "packs",
    "sheet", "sheets",
    "strip", "strips",
    "drop", "drops",
    "handful", "handfuls",
    "inch", "inches",
    "cm",
]

UNIT_VARIANTS = sorted({*UNIT_ALIASES, *EXTRA_UNIT_VARIANTS}, key=lambda u: (-len(u), u))

UNIT_PATTERN = re.compile(
    r"^(?P<unit>"
    + "|".join(re.escape(u).replace(r"\ ", r"\s+") for u in UNIT_VARIANTS)
    + r")\.?(?=[\s,.()]|$)",
    re.IGNORECASE,
)

PAREN_PATTERN = re.compile(r"\(([^()]*)\)")
LEADING_OF_PATTERN = re.compile(r"^of\s+", re.IGNORECASE)
LEADING_DASH_PATTERN = re.compile(r"^[-–—]\s*")

TRAILING_PHRASE_PATTERN = re.compile(
    r"[\s,]+((?:or\s+)?(?:to taste|as needed|optional|for garnish|for serving|if desired))\s*$",
    re.IGNORECASE,
)


@dataclass
class TextParts:
    """Pieces of one ingredient line before any knowledge base lookup."""

    cleaned: str
    quantity: int | float | str | None = None
    quantity_text: str | None = None
    unit_text: str | None = None
    name: str = ""
    note: str | None = None


def clean_input_text(text: str | None) -> str:
    """Drop bullets and list numbering ("1. ", "2) ") and collapse whitespace."""
    if not text:
        return ""
    cleaned = BULLET_PATTERN.sub("", text)
    cleaned = LIST_MARKER_PATTERN.sub("", cleaned)
    return " ".join(cleaned.split())


def _split_quantity(text: str) -> tuple[int | float | str | None, str | None, str]:
    match = QUANTITY_PATTERN.match(text)
    if not match:
        return None, None, text
    quantity_text = match.group("quantity")
    rest = LEADING_DASH_PATTERN.sub("", text[match.end():].strip())
    return parse_quantity_string(quantity_text), quantity_text, rest


def _split_unit(text: str, has_quantity: bool) -> tuple[str | None, str]:
    match = UNIT_PATTERN.match(text)
    if not match:
        return None, text
    rest = text[match.end():].strip()
    if not rest:
        return None, text
    # Without a quantity only "<unit> of <name>" counts ("pinch of salt")
    if not has_quantity and not LEADING_OF_PATTERN.match(rest):
        return None, text
    return match.group("unit"), rest


def _tidy_name(text: str) -> str:
    return " ".join(text.split()).strip(" ,;:-")


def split_ingredient_text(line: str | None) -> TextParts:
    """
    Split a raw ingredient line into its positional parts.

    "2 cups (250g) flour, sifted" -> quantity 2, unit "cups", name "flour",
    note "250g, sifted". Ranges such as "3-4" stay strings. Nothing here
    consults the knowledge base.
    """
    cleaned = clean_input_text(line)
    parts = TextParts(cleaned=cleaned, name=cleaned)
    if not cleaned:
        return parts

    quantity, quantity_text, rest = _split_quantity(cleaned)
    parts.quantity = quantity
    parts.quantity_text = quantity_text

    notes = [n.strip() for n in PAREN_PATTERN.findall(rest) if n.strip()]
    rest = " ".join(PAREN_PATTERN.sub(" ", rest).split())

    unit_text, rest = _split_unit(rest, has_quantity=quantity_text is not None)
    parts.unit_text = unit_text
    rest = LEADING_OF_PATTERN.sub("", rest)

    if "," in rest:
        rest, _, tail = rest.partition(",")
        tail = tail.strip(" ,")
        if tail:
            notes.append(tail)

    trailing: list[str] = []
    while True:
        match = TRAILING_PHRASE_PATTERN.search(rest)
        if not match:
            break
        trailing.insert(0, match.group(1).lower())
        rest = rest[: match.start()]
    notes.extend(trailing)

    parts.name = _tidy_name(rest)
    parts.note = ", ".join(notes) if notes else None
    return parts
