"""Drop lines that are clearly not ingredients before they reach a parser."""

import re
from collections.abc import Iterable

from recipeshelf.ingest.schemas import ImportedIngredient
from recipeshelf.logging_config import get_logger

logger = get_logger(__name__)

SEPARATOR_PATTERNS = [
    re.compile(r"^[-*_\s]+$"),
    re.compile(r"^[-*_]+\s*\w+\s*[-*_]+$"),
]

# "For the sauce:" style labels
HEADER_PATTERN = re.compile(r"^[^\d]{1,40}:$")
MAX_HEADER_WORDS = 6

STANDALONE_WORDS = {
    "uncooked",
    "shredded",
    "dried",
    "large",
    "small",
    "medium",
    "finely chopped",
    "chopped",
    "diced",
    "minced",
    "low sodium",
    "fresh",
    "frozen",
    "canned",
    "sliced",
    "other",
    "optional",
    "garnish",
    "for garnish",
    "for serving",
    "to taste",
}

MEASUREMENT_ONLY_PATTERN = re.compile(
    r"^[\d/.\s\-to½¼¾⅓⅔⅛]+(cup|tbsp|tsp|oz|lb|g|ml|pound|ounce)s?\*?$",
    re.IGNORECASE,
)


def screen_reason(text: str | None) -> str | None:
    """
    Why a line is not an ingredient, or None when it may be one.

    Kept deliberately narrow: a wrongly kept line costs a manual fix, a
    wrongly dropped line is silently lost.
    """
    lower = (text or "").strip().lower()
    if not lower:
        return "empty"
    if any(pattern.match(lower) for pattern in SEPARATOR_PATTERNS):
        return "section separator"
    if HEADER_PATTERN.match(lower) and len(lower.split()) <= MAX_HEADER_WORDS:
        return "section header"
    if lower in STANDALONE_WORDS:
        return "standalone word"
    if MEASUREMENT_ONLY_PATTERN.match(lower):
        return "measurement only"
    return None


def is_ingredient_candidate(text: str | None) -> bool:
    return screen_reason(text) is None


def screen_ingredients(
    ingredients: Iterable[ImportedIngredient],
) -> list[ImportedIngredient]:
    """Keep the ingredients worth parsing, in their original order."""
    kept: list[ImportedIngredient] = []
    for ingredient in ingredients:
        reason = screen_reason(ingredient.text)
        if reason is None:
            kept.append(ingredient)
        elif reason != "empty":
            logger.debug(f"Skipping {reason}: '{ingredient.text}'")
    return kept
