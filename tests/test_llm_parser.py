"""Tests for the remote language model parser, using a mocked HTTP transport."""

import json

import httpx
import pytest
from tenacity import wait_none

from recipeshelf.config import Settings
from recipeshelf.parsing.factory import create_parser
from recipeshelf.parsing.llm import (
    LlmIngredientParser,
    clean_llm_text,
    filter_modifier_texts,
    normalize_llm_quantity,
)
from recipeshelf.parsing.rules import RulesIngredientParser


def ollama_answer(answer: dict) -> httpx.Response:
    return httpx.Response(200, json={"response": json.dumps(answer)})


def openai_answer(answer: dict) -> httpx.Response:
    return httpx.Response(
        200, json={"choices": [{"message": {"content": json.dumps(answer)}}]}
    )


def make_parser(knowledge_base, handler, **kwargs) -> LlmIngredientParser:
    return LlmIngredientParser(
        knowledge_base,
        client=httpx.Client(transport=httpx.MockTransport(handler)),
        retry_wait=wait_none(),
        **kwargs,
    )


class TestLlmParserOllama:
    """Tests for the ollama provider."""

    def test_successful_parse(self, knowledge_base):
        """Test the model answer is matched against the knowledge base."""
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return ollama_answer(
                {
                    "ingredient": "all-purpose flour",
                    "quantity": "2",
                    "unit": "cups",
                    "modifiers": ["sifted", "to taste"],
                }
            )

        parser = make_parser(knowledge_base, handler)
        result = parser.parse("2 cups all-purpose flour, sifted")

        assert result.parsed is True
        assert result.name == "Flour"
        assert result.quantity == 2
        assert result.unit.name == "cup"
        assert result.modifier_texts == ["sifted"]
        assert [m.name for m in result.modifiers] == ["sifted"]
        assert result.confidence == 1.0

        assert len(requests) == 1
        assert requests[0].url.path == "/api/generate"
        body = json.loads(requests[0].content)
        assert body["format"] == "json"
        assert body["stream"] is False

    def test_original_text_kept_verbatim(self, knowledge_base):
        """Test the raw line is kept as sent while the model sees the trimmed text."""
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return ollama_answer({"ingredient": "onion", "quantity": 1})

        parser = make_parser(knowledge_base, handler)
        result = parser.parse("  1 onion \t")

        assert result.original_text == "  1 onion \t"
        assert result.name == "Onion"
        assert json.loads(requests[0].content)["prompt"].endswith('Parse: "1 onion"')

    def test_unmatched_ingredient(self, knowledge_base):
        """Test an answer outside the knowledge base stays unparsed."""
        parser = make_parser(
            knowledge_base,
            lambda request: ollama_answer({"ingredient": "dragon fruit", "quantity": 1}),
        )
        result = parser.parse("1 dragon fruit")

        assert result.parsed is False
        assert result.ingredient_text == "dragon fruit"
        assert result.quantity == 1
        assert result.confidence == 0.3

    def test_range_quantity_kept(self, knowledge_base):
        """Test a range answer stays a string."""
        parser = make_parser(
            knowledge_base,
            lambda request: ollama_answer(
                {
                    "ingredient": "garlic",
                    "quantity": "2-3",
                    "unit": "clove",
                    "modifiers": ["minced"],
                }
            ),
        )
        result = parser.parse("2-3 garlic cloves, minced")

        assert result.quantity == "2-3"
        assert result.name == "Garlic"
        assert result.unit.name == "clove"


class TestLlmParserOpenAI:
    """Tests for the OpenAI provider."""

    def test_chat_completion(self, knowledge_base):
        """Test the chat completions endpoint is called with the API key."""
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return openai_answer({"ingredient": "onion", "quantity": 1, "unit": None})

        parser = make_parser(
            knowledge_base,
            handler,
            provider="openai",
            model="gpt-4o-mini",
            base_url="https://api.example.com/v1",
            api_key="sk-test",
        )
        result = parser.parse("1 onion")

        assert result.name == "Onion"
        assert requests[0].url.path == "/v1/chat/completions"
        assert requests[0].headers["Authorization"] == "Bearer sk-test"

    def test_missing_api_key(self, knowledge_base):
        """Test a missing key degrades to unparsed without any request."""
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return openai_answer({"ingredient": "onion"})

        parser = make_parser(knowledge_base, handler, provider="openai")
        result = parser.parse("1 onion")

        assert result.parsed is False
        assert result.original_text == "1 onion"
        assert calls == []


class TestLlmParserFailures:
    """Tests for rate limiting and malformed answers."""

    def test_rate_limit_retried_then_unparsed(self, knowledge_base):
        """Test HTTP 429 is retried max_retries times before giving up."""
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(429, headers={"retry-after": "1"})

        parser = make_parser(knowledge_base, handler, max_retries=2)
        result = parser.parse("2 eggs")

        assert len(calls) == 3
        assert result.parsed is False
        assert result.ingredient_text == "2 eggs"

    def test_rate_limit_then_success(self, knowledge_base):
        """Test a single 429 followed by an answer still parses."""
        responses = iter(
            [httpx.Response(429), ollama_answer({"ingredient": "eggs", "quantity": 2})]
        )
        parser = make_parser(knowledge_base, lambda request: next(responses))

        assert parser.parse("2 eggs").name == "Egg"

    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(500, text="server error"),
            httpx.Response(200, json={"response": "not json"}),
            httpx.Response(200, json={"response": json.dumps(["onion"])}),
            httpx.Response(200, json={"response": json.dumps({"quantity": 1})}),
            httpx.Response(200, json={"unexpected": True}),
        ],
    )
    def test_bad_answers_degrade(self, knowledge_base, response):
        """Test errors and malformed answers give the unparsed result."""
        parser = make_parser(knowledge_base, lambda request: response)
        result = parser.parse("1 onion")

        assert result.parsed is False
        assert result.original_text == "1 onion"

    def test_transport_error_degrades(self, knowledge_base):
        """Test connection failures give the unparsed result."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        parser = make_parser(knowledge_base, handler)
        assert parser.parse("1 onion").parsed is False

    def test_empty_line_makes_no_request(self, knowledge_base):
        """Test blank input short-circuits."""
        calls = []
        parser = make_parser(knowledge_base, lambda request: calls.append(request))
        assert parser.parse("  ").original_text == "  "
        assert calls == []


class TestLlmParserLifecycle:
    """Tests for delays, client ownership and construction."""

    def test_parse_many_pauses_between_calls(self, knowledge_base, monkeypatch):
        """Test the configured delay is applied between lines, not before the first."""
        sleeps = []
        monkeypatch.setattr("recipeshelf.parsing.base.time.sleep", sleeps.append)
        parser = make_parser(
            knowledge_base,
            lambda request: ollama_answer({"ingredient": "onion"}),
            request_delay=0.5,
        )

        results = parser.parse_many(["1 onion", "2 onions", "3 onions"])

        assert len(results) == 3
        assert sleeps == [0.5, 0.5]

    def test_injected_client_not_closed(self, knowledge_base):
        """Test close() leaves a caller-owned client open."""
        client = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
        parser = LlmIngredientParser(knowledge_base, client=client)
        parser.close()
        assert not client.is_closed

    def test_unknown_provider(self, knowledge_base):
        """Test an unknown provider is rejected at construction."""
        with pytest.raises(ValueError):
            LlmIngredientParser(knowledge_base, provider="bard")


class TestLlmHelpers:
    """Tests for answer normalization helpers."""

    def test_normalize_quantity(self):
        """Test numbers, ranges and junk values."""
        assert normalize_llm_quantity(2.0) == 2
        assert isinstance(normalize_llm_quantity(2.0), int)
        assert normalize_llm_quantity(0.5) == 0.5
        assert normalize_llm_quantity("1-2") == "1-2"
        assert normalize_llm_quantity("1 to 2") == "1 to 2"
        assert normalize_llm_quantity("1/2") == 0.5
        assert normalize_llm_quantity("some") is None
        assert normalize_llm_quantity(True) is None
        assert normalize_llm_quantity(float("inf")) is None
        assert normalize_llm_quantity(None) is None

    def test_filter_modifiers(self):
        """Test serving notes and non-strings are dropped."""
        values = ["chopped", " ", "to taste", "or more", "about 2", 3, "Fresh "]
        assert filter_modifier_texts(values) == ["chopped", "Fresh"]
        assert filter_modifier_texts("chopped") == []

    def test_clean_text(self):
        """Test unicode fractions are spelled out and bullets dropped."""
        assert clean_llm_text("- ½ cup milk") == "1/2 cup milk"
        assert clean_llm_text("1½ cups flour") == "1 1/2 cups flour"


class TestParserFactory:
    """Tests for parser selection from settings."""

    def test_rules_by_default(self, knowledge_base):
        """Test the rules parser is the default."""
        parser = create_parser(knowledge_base, Settings(_env_file=None))
        assert isinstance(parser, RulesIngredientParser)

    def test_llm_selected(self, knowledge_base):
        """Test 'llm' builds the remote parser from settings."""
        settings = Settings(
            _env_file=None,
            ingredient_parser_type="LLM",
            openai_api_key="sk-test",
            llm_request_delay=1.5,
        )
        parser = create_parser(knowledge_base, settings)

        assert isinstance(parser, LlmIngredientParser)
        assert parser.provider == "openai"
        assert parser.model == "gpt-4o-mini"
        assert parser.request_delay == 1.5
        assert parser.rate_limited is True

    def test_unknown_type_falls_back(self, knowledge_base):
        """Test unknown parser types fall back to rules."""
        parser = create_parser(
            knowledge_base, Settings(_env_file=None, ingredient_parser_type="magic")
        )
        assert isinstance(parser, RulesIngredientParser)
