"""Parser interface and the structured result of parsing one ingredient line."""

import time
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from recipeshelf.kb.models import KnownIngredient, KnownModifier, KnownUnit
from recipeshelf.schemas import RecipeIngredient


@dataclass
class ParsedIngredient:
    """
    Structured result of parsing one ingredient line.

    `ingredient` is only set on a successful knowledge base match, and that
    alone decides whether the line counts as parsed. A range quantity such as
    "3-4" is kept as the string it was written as.
    """

    original_text: str
    ingredient_text: str = ""
    ingredient: KnownIngredient | None = None
    quantity: int | float | str | None = None
    unit_text: str | None = None
    unit: KnownUnit | None = None
    modifier_texts: list[str] = field(default_factory=list)
    modifiers: list[KnownModifier] = field(default_factory=list)
    note: str | None = None
    raw_line: str | None = None
    section: str | None = None
    confidence: float = 0.0

    @property
    def parsed(self) -> bool:
        return self.ingredient is not None

    @property
    def name(self) -> str:
        """Canonical name when matched, otherwise the extracted candidate name."""
        if self.ingredient is not None:
            return self.ingredient.name
        return self.ingredient_text or self.original_text.strip()

    @classmethod
    def unparsed(cls, line: str | None) -> "ParsedIngredient":
        """Degenerate result: the line kept verbatim, its trimmed text as the name."""
        original = line or ""
        return cls(original_text=original, ingredient_text=original.strip())

    def to_recipe_ingredient(
        self,
        raw_line: str | None = None,
        section: str | None = None,
    ) -> RecipeIngredient:
        """Convert to the form stored on a recipe."""
        return RecipeIngredient(
            name=self.name,
            quantity=self.quantity,
            unit=self.unit.name if self.unit is not None else self.unit_text,
            modifiers=list(self.modifier_texts),
            note=self.note,
            original_text=self.original_text,
            raw_line=raw_line or self.raw_line or self.original_text,
            known_ingredient_id=self.ingredient.id if self.ingredient is not None else None,
            known_unit_id=self.unit.id if self.unit is not None else None,
            parsed=self.parsed,
            section=section if section is not None else self.section,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "original_text": self.original_text,
            "ingredient_text": self.ingredient_text,
            "ingredient": self.ingredient.to_dict() if self.ingredient else None,
            "quantity": self.quantity,
            "unit_text": self.unit_text,
            "unit": self.unit.to_dict() if self.unit else None,
            "modifier_texts": list(self.modifier_texts),
            "modifiers": [m.to_dict() for m in self.modifiers],
            "note": self.note,
            "raw_line": self.raw_line,
            "section": self.section,
            "parsed": self.parsed,
            "confidence": self.confidence,
        }


class RateLimitError(Exception):
    """Raised when the remote parsing service rejects a call with HTTP 429."""

    def __init__(self, message: str, retry_after: int | None = None):
        super().__init__(message)
        self.retry_after = retry_after


class ParserError(Exception):
    """Raised for remote parsing failures other than rate limiting."""

    def __init__(self, message: str, status_code: int | None = None, response: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class IngredientParser(ABC):
    """Abstract base class for ingredient line parsers."""

    # Implementations that call a rate-limited service set these
    rate_limited: bool = False
    request_delay: float = 0.0

    @property
    @abstractmethod
    def name(self) -> str:
        """Return parser name for logging and reports."""
        pass

    @abstractmethod
    def parse(self, text: str) -> ParsedIngredient:
        """
        Parse one ingredient line.

        Never raises: any failure degrades to ParsedIngredient.unparsed(text).
        """
        pass

    def parse_many(self, texts: Iterable[str]) -> list[ParsedIngredient]:
        """Parse lines one at a time, in order, pausing between calls when rate limited."""
        results: list[ParsedIngredient] = []
        for index, text in enumerate(texts):
            if index and self.rate_limited and self.request_delay > 0:
                time.sleep(self.request_delay)
            results.append(self.parse(text))
        return results

    def close(self) -> None:
        """Release any held connections. Local parsers hold none."""
        pass
