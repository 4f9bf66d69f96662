"""Bilingual product specification generation chain."""

import json
import logging
from collections.abc import Callable

from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate
from pydantic import BaseModel, ConfigDict, Field, StrictStr
from pydantic import ValidationError as PydanticValidationError

from src.credentials import current_api_key
from src.errors import (
    EmptyResponseError,
    GenerationError,
    MalformedJSONError,
    SchemaViolationError,
    ValidationError,
)
from src.llm import get_llm

logger = logging.getLogger(__name__)

BULLET = "▪️"

EMPTY_DESCRIPTION_MESSAGE = "Please enter a product description."
EMPTY_RESPONSE_MESSAGE = "No JSON content received from Gemini API."
INVALID_STRUCTURE_MESSAGE = (
    "Invalid JSON structure received from Gemini API. "
    "Expected 'englishSpecs' and 'arabicSpecs' strings."
)


class SpecificationResult(BaseModel):
    """Generated specifications in both languages.

    Constructed from the service's JSON keys (englishSpecs, arabicSpecs).
    Both fields are strict strings, so a number or null invalidates the
    whole result.
    """

    model_config = ConfigDict(frozen=True)

    english_specs: StrictStr = Field(
        alias="englishSpecs", description="Specifications in English, one bullet per line"
    )
    arabic_specs: StrictStr = Field(
        alias="arabicSpecs", description="Specifications in Arabic, one bullet per line"
    )


USER_PROMPT = f"""Convert the following product description into a clear, concise, and comprehensive list of product specifications.

The output should be a JSON object with two properties: 'englishSpecs' and 'arabicSpecs'.

Both 'englishSpecs' and 'arabicSpecs' should contain the specifications in bullet points, using the '{BULLET}' character for each bullet.

Focus on key features, functionalities, technical details, and benefits.

Product Description:
{{product_description}}

Example format for output (for a simplified example):
{{{{
  "englishSpecs": "{BULLET} Feature 1: Description in English.\\n{BULLET} Feature 2: Description in English.",
  "arabicSpecs": "{BULLET} الميزة 1: الوصف باللغة العربية.\\n{BULLET} الميزة 2: الوصف باللغة العربية."
}}}}
"""  # noqa: E501


def validate_description(description: str) -> str:
    """Reject empty product descriptions.

    Raises:
        ValidationError: If the description is empty after trimming.
    """
    if not description or not description.strip():
        raise ValidationError(EMPTY_DESCRIPTION_MESSAGE)
    return description


def parse_response(text: str | None) -> SpecificationResult:
    """Validate a raw response body and convert it to a SpecificationResult.

    Checks run in order: empty body, JSON syntax, then structure.

    Args:
        text: Raw text returned by the model.

    Returns:
        The parsed specifications.

    Raises:
        EmptyResponseError: If the body is empty or whitespace.
        MalformedJSONError: If the body is not valid JSON.
        SchemaViolationError: If either property is missing or not a string.
    """
    json_str = (text or "").strip()
    if not json_str:
        raise EmptyResponseError(EMPTY_RESPONSE_MESSAGE)

    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise MalformedJSONError(f"Malformed JSON received from Gemini API: {e.msg}") from e

    if not isinstance(data, dict):
        raise SchemaViolationError(INVALID_STRUCTURE_MESSAGE)

    try:
        return SpecificationResult.model_validate(data)
    except PydanticValidationError as e:
        raise SchemaViolationError(INVALID_STRUCTURE_MESSAGE) from e


class SpecGeneratorChain:
    """Chain that turns a product description into bilingual specifications."""

    def __init__(
        self,
        credential_provider: Callable[[], str] = current_api_key,
        llm_factory: Callable[[str], BaseChatModel] = get_llm,
    ):
        """Initialize the specification generator chain.

        Args:
            credential_provider: Returns the API key to use. Called on every request.
            llm_factory: Builds a chat model from an API key. Called on every request.
        """
        self.credential_provider = credential_provider
        self.llm_factory = llm_factory
        self.prompt = ChatPromptTemplate.from_messages([("human", USER_PROMPT)])
        self.parser = StrOutputParser()

    def _build_chain(self):
        llm = self.llm_factory(self.credential_provider())
        return self.prompt | llm | self.parser

    def generate(self, description: str) -> SpecificationResult:
        """Generate specifications for a product description.

        Args:
            description: Free-text product description, embedded verbatim.

        Returns:
            SpecificationResult with English and Arabic bullet points.

        Raises:
            GenerationError: On any service failure or unusable response.
        """
        try:
            text = self._build_chain().invoke({"product_description": description})
        except Exception as e:
            logger.error(f"Error generating product specifications: {e}")
            raise GenerationError(f"Failed to generate specifications: {e}") from e

        return parse_response(text)

    async def agenerate(self, description: str) -> SpecificationResult:
        """Async version of generate.

        Args:
            description: Free-text product description, embedded verbatim.

        Returns:
            SpecificationResult with English and Arabic bullet points.

        Raises:
            GenerationError: On any service failure or unusable response.
        """
        try:
            text = await self._build_chain().ainvoke({"product_description": description})
        except Exception as e:
            logger.error(f"Error generating product specifications: {e}")
            raise GenerationError(f"Failed to generate specifications: {e}") from e

        return parse_response(text)
