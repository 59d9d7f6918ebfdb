"""Ingredient line parsers."""

from recipeshelf.parsing.base import (
    IngredientParser,
    ParsedIngredient,
    ParserError,
    RateLimitError,
)
from recipeshelf.parsing.factory import create_parser
from recipeshelf.parsing.llm import LlmIngredientParser
from recipeshelf.parsing.rules import RulesIngredientParser
from recipeshelf.parsing.text import TextParts, clean_input_text, split_ingredient_text

__all__ = [
    "IngredientParser",
    "LlmIngredientParser",
    "ParsedIngredient",
    "ParserError",
    "RateLimitError",
    "RulesIngredientParser",
    "TextParts",
    "clean_input_text",
    "create_parser",
    "split_ingredient_text",
]
