"""Remote ingredient parser that asks a language model (ollama or OpenAI) for structure."""

import json
import math
from typing import Any

import httpx
from tenacity import (
    RetryError,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from recipeshelf.config import Settings
from recipeshelf.kb.knowledge_base import KnowledgeBase
from recipeshelf.kb.models import KnownIngredient, KnownModifier, KnownUnit, normalize_term
from recipeshelf.logging_config import get_logger
from recipeshelf.normalize.units import (
    is_numeric_quantity,
    parse_quantity_string,
    tidy_number,
)
from recipeshelf.parsing.base import IngredientParser, ParsedIngredient, ParserError, RateLimitError
from recipeshelf.parsing.text import clean_input_text

logger = get_logger(__name__)

PROVIDERS = ("ollama", "openai")

# Phrases models tend to return as modifiers that are really serving notes
EXCLUDED_MODIFIER_PHRASES = {
    "to taste",
    "or to taste",
    "as needed",
    "optional",
    "or more",
    "if desired",
    "for garnish",
    "for serving",
    "about",
    "approximately",
}

ASCII_FRACTIONS = {
    "½": "1/2",
    "⅓": "1/3",
    "⅔": "2/3",
    "¼": "1/4",
    "¾": "3/4",
    "⅕": "1/5",
    "⅖": "2/5",
    "⅗": "3/5",
    "⅘": "4/5",
    "⅙": "1/6",
    "⅚": "5/6",
    "⅛": "1/8",
    "⅜": "3/8",
    "⅝": "5/8",
    "⅞": "7/8",
}

PARSE_INSTRUCTIONS = """You turn one recipe ingredient line into JSON with the keys
"ingredient", "quantity", "unit" and "modifiers".

ingredient: the base ingredient. Keep compound and variety names whole
("lemon juice", "chicken broth", "red onion", "brown sugar", "cherry tomatoes").
Plain "sugar" means "granulated sugar".
quantity: a number, a string for ranges ("1-2"), or null. 1/2 is 0.5, 1 1/2 is 1.5.
Vague amounts such as "some" or "a few" are null.
unit: the measurement (cup, tbsp, tsp, g, oz, pound, clove, piece, can) or null.
modifiers: preparation, state or quality words (chopped, diced, toasted, canned,
frozen, packed). Serving notes such as "to taste" are not modifiers.

Examples:
"1 Tbsp lemon juice" -> {"ingredient":"lemon juice","quantity":1,"unit":"tbsp","modifiers":[]}
"2-3 garlic cloves, minced" -> {"ingredient":"garlic","quantity":"2-3","unit":"clove","modifiers":["minced"]}
"1/4 cup diced onion" -> {"ingredient":"onion","quantity":0.25,"unit":"cup","modifiers":["diced"]}
"1 tbsp toasted sesame seeds" -> {"ingredient":"sesame seeds","quantity":1,"unit":"tbsp","modifiers":["toasted"]}
"2 boneless skinless chicken breasts" -> {"ingredient":"chicken breast","quantity":2,"unit":"piece","modifiers":["boneless","skinless"]}
"a handful of fresh basil" -> {"ingredient":"basil","quantity":null,"unit":"handful","modifiers":["fresh"]}
"salt to taste" -> {"ingredient":"salt","quantity":null,"unit":null,"modifiers":[]}
"1/2 cup brown sugar, packed" -> {"ingredient":"brown sugar","quantity":0.5,"unit":"cup","modifiers":["packed"]}"""


def clean_llm_text(text: str) -> str:
    """Spell unicode fractions as ASCII and drop bullets before sending a line out."""
    for fraction, replacement in ASCII_FRACTIONS.items():
        text = text.replace(fraction, f" {replacement}")
    return clean_input_text(text)


def normalize_llm_quantity(value: Any) -> int | float | str | None:
    """
    Normalize the quantity a model returned.

    Numbers stay numbers, strings containing "-" or " to " stay verbatim range
    strings, other strings are parsed as numbers or dropped.
    """
    if isinstance(value, bool) or value is None:
        return None
    if is_numeric_quantity(value):
        number = float(value)
        if not math.isfinite(number):
            return None
        return tidy_number(number)
    if isinstance(value, str):
        trimmed = value.strip()
        if not trimmed:
            return None
        if "-" in trimmed or " to " in trimmed:
            return trimmed
        parsed = parse_quantity_string(trimmed)
        return parsed if is_numeric_quantity(parsed) else None
    return None


def filter_modifier_texts(values: Any) -> list[str]:
    """Keep non-empty modifier strings that are not serving notes."""
    if not isinstance(values, list):
        return []
    kept: list[str] = []
    for value in values:
        if not isinstance(value, str) or not value.strip():
            continue
        term = normalize_term(value)
        if term in EXCLUDED_MODIFIER_PHRASES or term.startswith(("or ", "about ")):
            continue
        kept.append(value.strip())
    return kept


class LlmIngredientParser(IngredientParser):
    """
    Parser backed by a remote language model.

    The model only proposes text; ingredient, unit and modifier identities
    still come from exact knowledge base matching. Every call is a network
    round trip, so imports pause `request_delay` seconds between lines.
    """

    rate_limited = True

    def __init__(
        self,
        kb: KnowledgeBase,
        provider: str = "ollama",
        model: str = "llama3.2:3b",
        base_url: str = "http://localhost:11434",
        api_key: str | None = None,
        timeout: float = 30.0,
        request_delay: float = 0.5,
        max_retries: int = 3,
        client: httpx.Client | None = None,
        retry_wait: Any = None,
    ):
        if provider not in PROVIDERS:
            raise ValueError(f"Unknown LLM provider: {provider}")
        self.kb = kb
        self.provider = provider
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.request_delay = request_delay
        self.max_retries = max_retries
        # Rate limited calls back off 2s, 4s, 8s
        self.retry_wait = retry_wait or wait_exponential(multiplier=2, max=8)
        self._client = client
        self._owns_client = client is None

        logger.info(f"Using {self.provider} provider with model {self.model}")

    @classmethod
    def from_settings(
        cls,
        kb: KnowledgeBase,
        settings: Settings,
        client: httpx.Client | None = None,
    ) -> "LlmIngredientParser":
        provider = settings.resolved_llm_provider
        return cls(
            kb,
            provider=provider,
            model=settings.llm_model,
            base_url=settings.openai_base_url if provider == "openai" else settings.ollama_url,
            api_key=settings.openai_api_key or None,
            timeout=settings.ollama_timeout,
            request_delay=settings.llm_request_delay,
            max_retries=settings.llm_max_retries,
            client=client,
        )

    @property
    def name(self) -> str:
        return "llm"

    # =========================================================================
    # HTTP
    # =========================================================================

    def _get_client(self) -> httpx.Client:
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                timeout=httpx.Timeout(self.timeout),
                headers={"Accept": "application/json", "User-Agent": "Recipeshelf/1.0"},
            )
            self._owns_client = True
        return self._client

    def close(self) -> None:
        """Close the HTTP client if this parser created it."""
        if self._client is not None and self._owns_client and not self._client.is_closed:
            self._client.close()
            self._client = None

    def __enter__(self) -> "LlmIngredientParser":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def _build_request(self, text: str) -> tuple[str, dict[str, Any], dict[str, str]]:
        if self.provider == "openai":
            if not self.api_key:
                raise ParserError("OpenAI API key not configured. Set OPENAI_API_KEY.")
            payload = {
                "model": self.model,
                "messages": [
                    {"role": "system", "content": PARSE_INSTRUCTIONS},
                    {"role": "user", "content": f'Parse: "{text}"'},
                ],
                "temperature": 0,
                "response_format": {"type": "json_object"},
            }
            headers = {"Authorization": f"Bearer {self.api_key}"}
            return f"{self.base_url}/chat/completions", payload, headers

        payload = {
            "model": self.model,
            "prompt": f'{PARSE_INSTRUCTIONS}\n\nParse: "{text}"',
            "format": "json",
            "stream": False,
            "options": {"temperature": 0},
        }
        return f"{self.base_url}/api/generate", payload, {}

    def _request(self, text: str) -> dict[str, Any]:
        url, payload, headers = self._build_request(text)
        response = self._get_client().post(url, json=payload, headers=headers)

        if response.status_code == 429:
            retry_after = response.headers.get("retry-after")
            raise RateLimitError(
                f"{self.provider} rate limited the request",
                retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
            )
        if response.status_code >= 400:
            detail = response.text[:500] if response.text else "No details"
            raise ParserError(
                f"{self.provider} API error {response.status_code}",
                status_code=response.status_code,
                response=detail,
            )

        try:
            data = response.json()
            if self.provider == "openai":
                content = data["choices"][0]["message"]["content"]
            else:
                content = data["response"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise ParserError(f"Malformed {self.provider} response", response=response.text) from e

        if not content:
            raise ParserError(f"Empty response from {self.provider}")

        try:
            answer = json.loads(content)
        except ValueError as e:
            raise ParserError("Model answer is not valid JSON", response=content) from e

        if not isinstance(answer, dict):
            raise ParserError("Model answer is not a JSON object", response=content)
        ingredient = answer.get("ingredient")
        if not isinstance(ingredient, str) or not ingredient.strip():
            raise ParserError("Model answer is missing the ingredient", response=content)
        return answer

    def _complete(self, text: str) -> dict[str, Any]:
        @retry(
            retry=retry_if_exception_type(RateLimitError),
            stop=stop_after_attempt(self.max_retries + 1),
            wait=self.retry_wait,
            reraise=True,
        )
        def _do_request() -> dict[str, Any]:
            return self._request(text)

        try:
            return _do_request()
        except RetryError as e:
            raise ParserError(
                f"Request failed after {self.max_retries} retries", response=str(e)
            ) from e

    # =========================================================================
    # Parsing
    # =========================================================================

    def parse(self, text: str) -> ParsedIngredient:
        original = text or ""
        if not original.strip():
            return ParsedIngredient.unparsed(original)

        cleaned = clean_llm_text(original.strip())
        try:
            answer = self._complete(cleaned)
        except RateLimitError:
            logger.warning(
                f"LLM parsing gave up on '{original}' after {self.max_retries} rate limit retries"
            )
            return ParsedIngredient.unparsed(original)
        except (ParserError, httpx.HTTPError) as e:
            logger.warning(f"LLM parsing failed for '{original}': {e}")
            return ParsedIngredient.unparsed(original)

        return self._to_parsed(original, answer)

    def _to_parsed(self, original: str, answer: dict[str, Any]) -> ParsedIngredient:
        ingredient_text = answer["ingredient"].strip()
        quantity = normalize_llm_quantity(answer.get("quantity"))
        unit_value = answer.get("unit")
        unit_text = None
        if isinstance(unit_value, str) and unit_value.strip():
            unit_text = unit_value.strip()

        ingredient = self.kb.match_ingredient(ingredient_text)
        unit = self.kb.match_unit(unit_text) if unit_text else None

        modifiers: list[KnownModifier] = []
        modifier_texts = filter_modifier_texts(answer.get("modifiers"))
        for modifier_text in modifier_texts:
            modifier = self.kb.match_modifier(modifier_text)
            if modifier is not None and all(m.id != modifier.id for m in modifiers):
                modifiers.append(modifier)

        return ParsedIngredient(
            original_text=original,
            ingredient_text=ingredient_text,
            ingredient=ingredient,
            quantity=quantity,
            unit_text=unit_text,
            unit=unit,
            modifier_texts=modifier_texts,
            modifiers=modifiers,
            confidence=self._confidence(quantity, unit, ingredient),
        )

    @staticmethod
    def _confidence(
        quantity: int | float | str | None,
        unit: KnownUnit | None,
        ingredient: KnownIngredient | None,
    ) -> float:
        confidence = 0.1
        if quantity is not None:
            confidence += 0.2
        if unit is not None:
            confidence += 0.3
        if ingredient is not None:
            confidence += 0.4
        return round(confidence, 2)
