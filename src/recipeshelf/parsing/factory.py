"""Select the ingredient parser implementation from configuration."""

from recipeshelf.config import Settings, get_settings
from recipeshelf.kb.knowledge_base import KnowledgeBase
from recipeshelf.logging_config import get_logger
from recipeshelf.parsing.base import IngredientParser
from recipeshelf.parsing.llm import LlmIngredientParser
from recipeshelf.parsing.rules import RulesIngredientParser

logger = get_logger(__name__)

PARSER_TYPES = ("rules", "llm")


def create_parser(kb: KnowledgeBase, settings: Settings | None = None) -> IngredientParser:
    """
    Build the parser named by INGREDIENT_PARSER_TYPE.

    Unknown types fall back to the rules parser with a warning.
    """
    settings = settings or get_settings()
    parser_type = settings.ingredient_parser_type.strip().lower()

    if parser_type == "llm":
        return LlmIngredientParser.from_settings(kb, settings)
    if parser_type != "rules":
        logger.warning(
            f"Unknown ingredient parser type '{settings.ingredient_parser_type}', "
            "falling back to rules"
        )
    return RulesIngredientParser(kb)
