"""Local rule-based ingredient parser backed by a knowledge base snapshot."""

import re

from recipeshelf.kb.knowledge_base import KnowledgeBase, ModifierMatch
from recipeshelf.kb.models import KnownIngredient, KnownModifier, KnownUnit
from recipeshelf.logging_config import get_logger
from recipeshelf.parsing.base import IngredientParser, ParsedIngredient
from recipeshelf.parsing.text import LEADING_OF_PATTERN, split_ingredient_text

logger = get_logger(__name__)

# Words that may be left over in a note once its modifiers are taken out
NOTE_FILLER_WORDS = {
    "and",
    "or",
    "roughly",
    "coarsely",
    "finely",
    "freshly",
    "lightly",
    "well",
    "very",
}

_WORD_PATTERN = re.compile(r"[^\W\d_]+")


def strip_spans(text: str, matches: list[ModifierMatch]) -> str:
    """Remove matched spans from text and tidy the leftover whitespace and punctuation."""
    pieces: list[str] = []
    cursor = 0
    for match in matches:
        pieces.append(text[cursor : match.start])
        cursor = match.end
    pieces.append(text[cursor:])
    return " ".join(" ".join(pieces).split()).strip(" ,;:-")


def is_filler(text: str) -> bool:
    """True when text holds nothing but connectors, adverbs and punctuation."""
    return all(word.lower() in NOTE_FILLER_WORDS for word in _WORD_PATTERN.findall(text))


def calculate_confidence(
    quantity: int | float | str | None,
    unit: KnownUnit | None,
    ingredient: KnownIngredient | None,
) -> float:
    confidence = 0.0
    if quantity is not None:
        confidence += 0.2
    if unit is not None:
        confidence += 0.3
    if ingredient is not None:
        confidence += 0.5
    return round(confidence, 2)


class RulesIngredientParser(IngredientParser):
    """
    Deterministic parser: regex text pass, then exact KB matching.

    Modifiers are peeled off the name and recovered from the note in a second
    pass, so "onion, diced" yields modifier "diced" rather than only a note.
    """

    def __init__(self, kb: KnowledgeBase):
        self.kb = kb

    @property
    def name(self) -> str:
        return "rules"

    def parse(self, text: str) -> ParsedIngredient:
        original = text or ""
        if not original.strip():
            return ParsedIngredient.unparsed(original)
        try:
            return self._parse(original)
        except Exception:
            logger.exception(f"Rules parser failed on '{original}'")
            return ParsedIngredient.unparsed(original)

    def _parse(self, original: str) -> ParsedIngredient:
        parts = split_ingredient_text(original.strip())
        name = parts.name
        unit_text = parts.unit_text
        unit = self.kb.match_unit(unit_text) if unit_text else None

        if unit_text is None and parts.quantity_text is not None:
            unit_text, unit, name = self._leading_kb_unit(name)

        # First pass: modifiers inside the name
        name_matches = self.kb.find_modifiers(name)
        cleaned_name = strip_spans(name, name_matches) if name_matches else name

        # Second pass: modifiers that the comma split pushed into the note
        note = parts.note
        note_matches = self.kb.find_modifiers(note) if note else []
        if note and note_matches and is_filler(strip_spans(note, note_matches)):
            note = None

        ingredient = self.kb.match_ingredient(cleaned_name)
        if ingredient is None and name_matches:
            # "hot sauce", "whole milk": the modifier word is part of the name
            unstripped = self.kb.match_ingredient(name)
            if unstripped is not None:
                ingredient = unstripped
                cleaned_name = name
                name_matches = []

        modifiers: list[KnownModifier] = []
        modifier_texts: list[str] = []
        seen: set[int] = set()
        for match in [*name_matches, *note_matches]:
            if match.modifier.id in seen:
                continue
            seen.add(match.modifier.id)
            modifiers.append(match.modifier)
            modifier_texts.append(match.text)

        return ParsedIngredient(
            original_text=original,
            ingredient_text=cleaned_name,
            ingredient=ingredient,
            quantity=parts.quantity,
            unit_text=unit_text,
            unit=unit,
            modifier_texts=modifier_texts,
            modifiers=modifiers,
            note=note,
            confidence=calculate_confidence(parts.quantity, unit, ingredient),
        )

    def _leading_kb_unit(self, name: str) -> tuple[str | None, KnownUnit | None, str]:
        """Look for a KB unit in the first two words, then the first word ("2 sprigs thyme")."""
        words = name.split()
        for size in (2, 1):
            if len(words) <= size:
                continue
            phrase = " ".join(words[:size]).strip(",;")
            unit = self.kb.match_unit(phrase)
            if unit is not None:
                rest = LEADING_OF_PATTERN.sub("", " ".join(words[size:]))
                if rest:
                    return phrase, unit, rest
        return None, None, name
