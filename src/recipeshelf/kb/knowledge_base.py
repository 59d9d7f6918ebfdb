"""Immutable knowledge base snapshot with exact name and alias matching."""

import hashlib
import json
import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from rapidfuzz import fuzz, process

from recipeshelf.kb.models import (
    AliasConflict,
    KnownIngredient,
    KnownModifier,
    KnownUnit,
    normalize_term,
)
from recipeshelf.logging_config import get_logger

logger = get_logger(__name__)

EntryT = TypeVar("EntryT", KnownIngredient, KnownUnit, KnownModifier)


@dataclass(frozen=True)
class ModifierMatch:
    """A modifier occurrence found inside a piece of text."""

    start: int
    end: int
    text: str
    modifier: KnownModifier


class TermIndex(Generic[EntryT]):
    """
    Two-pass term lookup over one KB collection.

    Canonical names are checked across the whole collection before any alias.
    Within each pass the first entry in insertion order wins; every term
    claimed by more than one entry is recorded as a conflict.
    """

    def __init__(self, kind: str, entries: Iterable[EntryT]):
        self.kind = kind
        self.names: dict[str, EntryT] = {}
        self.aliases: dict[str, EntryT] = {}
        claims: dict[str, list[EntryT]] = {}

        for entry in entries:
            name = normalize_term(entry.name)
            if name:
                self.names.setdefault(name, entry)
                claims.setdefault(name, []).append(entry)
            for alias in entry.alias_terms:
                self.aliases.setdefault(alias, entry)
                if alias != name:
                    claims.setdefault(alias, []).append(entry)

        self.conflicts: list[AliasConflict] = []
        for term, claimants in claims.items():
            distinct = list({entry.id: entry for entry in claimants}.values())
            if len(distinct) < 2:
                continue
            winner = self.lookup(term)
            self.conflicts.append(
                AliasConflict(
                    kind=kind,
                    term=term,
                    winner=winner.name if winner else distinct[0].name,
                    shadowed=tuple(e.name for e in distinct if winner is None or e.id != winner.id),
                )
            )

    def lookup(self, text: str | None) -> EntryT | None:
        key = normalize_term(text)
        if not key:
            return None
        return self.names.get(key) or self.aliases.get(key)

    def terms(self) -> list[str]:
        return list({**self.names, **self.aliases})


def _term_pattern(terms: Iterable[str]) -> re.Pattern[str] | None:
    """Build a case-insensitive alternation, longest term first, with word boundaries."""
    ordered = sorted(set(terms), key=lambda t: (-len(t), t))
    if not ordered:
        return None
    alternation = "|".join(re.escape(term).replace(r"\ ", r"\s+") for term in ordered)
    return re.compile(rf"(?<![\w-])(?:{alternation})(?![\w-])", re.IGNORECASE)


class KnowledgeBase:
    """
    Read-only snapshot of known ingredients, units and modifiers.

    A snapshot is built once (per process or per request) and injected into
    parsers, so parsing never reaches into live storage. The version is a
    fingerprint of the content and changes whenever any entry changes.
    """

    def __init__(
        self,
        ingredients: Iterable[KnownIngredient] = (),
        units: Iterable[KnownUnit] = (),
        modifiers: Iterable[KnownModifier] = (),
    ):
        self.ingredients: tuple[KnownIngredient, ...] = tuple(ingredients)
        self.units: tuple[KnownUnit, ...] = tuple(units)
        self.modifiers: tuple[KnownModifier, ...] = tuple(modifiers)

        self._ingredients = TermIndex("ingredient", self.ingredients)
        self._units = TermIndex("unit", self.units)
        self._modifiers = TermIndex("modifier", self.modifiers)

        self.version = self._fingerprint()
        self.conflicts: list[AliasConflict] = [
            *self._ingredients.conflicts,
            *self._units.conflicts,
            *self._modifiers.conflicts,
        ]

        self._modifier_pattern = _term_pattern(self._modifiers.terms())
        # Multi-word ingredient terms ("lemon juice", "brown sugar") are kept
        # whole when modifiers are peeled off a name
        self._protected_pattern = _term_pattern(
            term for term in self._ingredients.terms() if " " in term
        )
        self._suggestion_terms: dict[str, str] = {}
        for entry in self.ingredients:
            for term in (normalize_term(entry.name), *entry.alias_terms):
                self._suggestion_terms.setdefault(term, entry.name)

        if self.conflicts:
            logger.warning(
                f"Knowledge base {self.version} has {len(self.conflicts)} shared terms, "
                "resolved by insertion order"
            )
            for conflict in self.conflicts:
                logger.debug(
                    f"{conflict.kind} term '{conflict.term}' resolves to {conflict.winner}, "
                    f"shadowing {', '.join(conflict.shadowed)}"
                )

    def _fingerprint(self) -> str:
        payload = json.dumps(
            {
                "ingredients": [e.to_dict() for e in self.ingredients],
                "units": [e.to_dict() for e in self.units],
                "modifiers": [e.to_dict() for e in self.modifiers],
            },
            sort_keys=True,
        )
        return hashlib.sha1(payload.encode("utf-8")).hexdigest()[:12]

    # =========================================================================
    # Matching
    # =========================================================================

    def match_ingredient(self, text: str | None) -> KnownIngredient | None:
        """Match an ingredient by exact canonical name, then exact alias."""
        return self._ingredients.lookup(text)

    def match_unit(self, text: str | None) -> KnownUnit | None:
        """Match a unit by name, then abbreviation or alias. "Tbsp." matches "tbsp"."""
        unit = self._units.lookup(text)
        if unit is None and text and text.strip().endswith("."):
            unit = self._units.lookup(text.strip().rstrip("."))
        return unit

    def match_modifier(self, text: str | None) -> KnownModifier | None:
        """Match a modifier by exact canonical name, then exact alias."""
        return self._modifiers.lookup(text)

    def find_modifiers(self, text: str) -> list[ModifierMatch]:
        """
        Find modifier terms inside text, in order of appearance.

        Longer terms win over shorter ones at the same position ("finely
        chopped" over "chopped"). Occurrences inside a multi-word known
        ingredient term are ignored.
        """
        if not text or self._modifier_pattern is None:
            return []

        protected: list[tuple[int, int]] = []
        if self._protected_pattern is not None:
            protected = [(m.start(), m.end()) for m in self._protected_pattern.finditer(text)]

        matches: list[ModifierMatch] = []
        for match in self._modifier_pattern.finditer(text):
            if any(start < match.end() and match.start() < end for start, end in protected):
                continue
            modifier = self.match_modifier(match.group(0))
            if modifier is not None:
                matches.append(
                    ModifierMatch(
                        start=match.start(),
                        end=match.end(),
                        text=normalize_term(match.group(0)),
                        modifier=modifier,
                    )
                )
        return matches

    def suggest_ingredients(
        self,
        text: str | None,
        limit: int = 3,
        min_score: float = 75,
    ) -> list[str]:
        """
        Suggest canonical ingredient names that look like the text.

        Used to help a human fix an unmatched line; never used for matching.
        """
        key = normalize_term(text)
        if not key or not self._suggestion_terms:
            return []

        results = process.extract(
            key,
            list(self._suggestion_terms),
            scorer=fuzz.token_sort_ratio,
            limit=limit * 3,
            score_cutoff=min_score,
        )

        names: list[str] = []
        for term, _score, _ in results:
            name = self._suggestion_terms[term]
            if name not in names:
                names.append(name)
        return names[:limit]

    # =========================================================================
    # Snapshot helpers
    # =========================================================================

    def with_ingredient(self, ingredient: KnownIngredient) -> "KnowledgeBase":
        """Return a new snapshot that also contains the given ingredient."""
        return KnowledgeBase([*self.ingredients, ingredient], self.units, self.modifiers)

    def stats(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "ingredients": len(self.ingredients),
            "units": len(self.units),
            "modifiers": len(self.modifiers),
            "conflicts": [c.to_dict() for c in self.conflicts],
        }
