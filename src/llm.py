"""LLM factory for specification generation.

Sampling parameters are fixed constants: creative enough to phrase good
bullet points, controlled enough to stay on the product facts. The output
limit is generous so detailed bilingual specifications are not truncated.
"""

from typing import Any

from langchain_google_genai import ChatGoogleGenerativeAI

from src.config import get_settings

TEMPERATURE = 0.7
TOP_P = 0.95
TOP_K = 64
MAX_OUTPUT_TOKENS = 2048
RESPONSE_MIME_TYPE = "application/json"

RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "englishSpecs": {
            "type": "string",
            "description": "Product specifications in English, formatted with bullet points.",
        },
        "arabicSpecs": {
            "type": "string",
            "description": "Product specifications in Arabic, formatted with bullet points.",
        },
    },
    "required": ["englishSpecs", "arabicSpecs"],
}


def get_llm(api_key: str, model: str | None = None) -> ChatGoogleGenerativeAI:
    """Build a chat model bound to the given API key.

    A new instance is built for every request; callers must not cache it,
    since the key may have been rotated between calls.

    Args:
        api_key: Gemini API key returned by the credential provider.
        model: Override model name. If None, uses settings.llm_model.

    Returns:
        ChatGoogleGenerativeAI instance configured for JSON output.

    Examples:
        >>> from src.credentials import current_api_key
        >>> llm = get_llm(current_api_key())
    """
    return ChatGoogleGenerativeAI(
        model=model or get_settings().llm_model,
        google_api_key=api_key,
        temperature=TEMPERATURE,
        top_p=TOP_P,
        top_k=TOP_K,
        max_output_tokens=MAX_OUTPUT_TOKENS,
        response_mime_type=RESPONSE_MIME_TYPE,
        response_schema=RESPONSE_SCHEMA,
        # Failures go straight back to the user, who retries by hand
        max_retries=0,
    )
