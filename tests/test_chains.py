"""Tests for the chains module."""

import asyncio
import json

import pytest
from langchain_core.messages import AIMessage
from langchain_core.runnables import RunnableLambda
from pydantic import ValidationError as PydanticValidationError

from src.chains.spec_generator import (
    BULLET,
    SpecGeneratorChain,
    SpecificationResult,
    parse_response,
    validate_description,
)
from src.errors import (
    CredentialError,
    EmptyResponseError,
    GenerationError,
    MalformedJSONError,
    SchemaViolationError,
    ValidationError,
)


class TestSpecificationResultModel:
    """Test SpecificationResult Pydantic model."""

    def test_result_from_service_keys(self):
        """Test construction from the service's JSON keys."""
        result = SpecificationResult.model_validate(
            {"englishSpecs": "▪️ A", "arabicSpecs": "▪️ أ"}
        )

        assert result.english_specs == "▪️ A"
        assert result.arabic_specs == "▪️ أ"

    def test_result_dump_uses_service_keys(self):
        """Test serialization back to the service's JSON keys."""
        result = SpecificationResult(englishSpecs="e", arabicSpecs="a")

        assert result.model_dump(by_alias=True) == {"englishSpecs": "e", "arabicSpecs": "a"}

    def test_result_rejects_non_string(self):
        """Test that numbers are not coerced into strings."""
        with pytest.raises(PydanticValidationError):
            SpecificationResult.model_validate({"englishSpecs": 1, "arabicSpecs": "a"})


class TestValidateDescription:
    """Test input validation before any request."""

    def test_accepts_text(self):
        assert validate_description("  A speaker  ") == "  A speaker  "

    @pytest.mark.parametrize("description", ["", "   ", "\n\t"])
    def test_rejects_blank(self, description):
        with pytest.raises(ValidationError, match="Please enter a product description."):
            validate_description(description)


class TestParseResponse:
    """Test response validation order and messages."""

    def test_valid_body(self, valid_body, spec_result):
        """Test that strings come through byte for byte."""
        result = parse_response(valid_body)

        assert result == spec_result
        assert result.english_specs.encode() == spec_result.english_specs.encode()

    def test_surrounding_whitespace_is_ignored(self, valid_body, spec_result):
        assert parse_response(f"\n  {valid_body}  \n") == spec_result

    @pytest.mark.parametrize("body", ["", "   \n", None])
    def test_empty_body(self, body):
        with pytest.raises(EmptyResponseError, match="No JSON content received"):
            parse_response(body)

    def test_malformed_json(self):
        with pytest.raises(MalformedJSONError, match="Malformed JSON"):
            parse_response("not json")

    def test_missing_property(self):
        with pytest.raises(SchemaViolationError, match="Invalid JSON structure"):
            parse_response('{"englishSpecs": "x"}')

    def test_wrong_property_type(self):
        with pytest.raises(SchemaViolationError, match="Invalid JSON structure"):
            parse_response('{"englishSpecs": "x", "arabicSpecs": ["y"]}')

    def test_non_object_json(self):
        with pytest.raises(SchemaViolationError):
            parse_response('["englishSpecs", "arabicSpecs"]')

    def test_all_errors_are_generation_errors(self):
        """Test that callers can catch every failure with GenerationError."""
        for body in ["", "not json", "{}"]:
            with pytest.raises(GenerationError):
                parse_response(body)


class TestSpecGeneratorChain:
    """Test the specification generator chain."""

    def test_generate_success(self, make_chain, valid_body, spec_result):
        chain, _ = make_chain(valid_body)

        assert chain.generate("A portable speaker") == spec_result

    def test_agenerate_success(self, make_chain, valid_body, spec_result):
        chain, _ = make_chain(valid_body)

        assert asyncio.run(chain.agenerate("A portable speaker")) == spec_result

    def test_generate_empty_response(self, make_chain):
        chain, _ = make_chain("   ")

        with pytest.raises(EmptyResponseError):
            chain.generate("A portable speaker")

    def test_generate_schema_violation(self, make_chain):
        chain, _ = make_chain(json.dumps({"englishSpecs": "x"}))

        with pytest.raises(SchemaViolationError):
            chain.generate("A portable speaker")

    def test_credential_read_on_every_call(self, make_chain, valid_body):
        """Test that a rotated key is used by the next request."""
        keys = iter(["key-1", "key-2"])
        chain, factory = make_chain(valid_body, credential_provider=lambda: next(keys))

        chain.generate("first")
        asyncio.run(chain.agenerate("second"))

        assert factory.api_keys == ["key-1", "key-2"]

    def test_service_failure_is_wrapped(self):
        """Test that service errors become a single GenerationError."""

        def fail(_):
            raise RuntimeError("429 Resource exhausted")

        chain = SpecGeneratorChain(
            credential_provider=lambda: "k",
            llm_factory=lambda api_key: RunnableLambda(fail),
        )

        with pytest.raises(GenerationError) as exc_info:
            chain.generate("A portable speaker")

        assert type(exc_info.value) is GenerationError
        assert str(exc_info.value) == (
            "Failed to generate specifications: 429 Resource exhausted"
        )
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_credential_failure_is_wrapped(self):
        def no_key():
            raise CredentialError("No Gemini API key configured.")

        chain = SpecGeneratorChain(credential_provider=no_key, llm_factory=lambda k: None)

        with pytest.raises(GenerationError, match="No Gemini API key configured"):
            asyncio.run(chain.agenerate("A portable speaker"))

    def test_prompt_embeds_description_verbatim(self, valid_body):
        """Test the prompt sent to the model."""
        seen: list[str] = []

        def capture(prompt_value):
            seen.append(prompt_value.to_messages()[0].content)
            return AIMessage(content=valid_body)

        chain = SpecGeneratorChain(
            credential_provider=lambda: "k",
            llm_factory=lambda api_key: RunnableLambda(capture),
        )
        description = 'Speaker {"braces": true}\nSecond line'

        chain.generate(description)

        prompt = seen[0]
        assert description in prompt
        assert "'englishSpecs' and 'arabicSpecs'" in prompt
        assert f"'{BULLET}'" in prompt
        assert '"englishSpecs": "▪️ Feature 1' in prompt
        assert "{product_description}" not in prompt
