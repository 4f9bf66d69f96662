"""Credential provider for the generation service.

The provider builds a fresh Settings on every call instead of going through
the cached get_settings(), so a key rotated in the environment, the .env
file or Secret Manager takes effect on the next request.
"""

from src.config import Settings
from src.errors import CredentialError


def current_api_key() -> str:
    """Return the currently configured Gemini API key.

    Raises:
        CredentialError: If no key is configured anywhere.
    """
    api_key = (Settings().gemini_api_key or "").strip()
    if not api_key:
        raise CredentialError(
            "No Gemini API key configured. Set GEMINI_API_KEY or store it in Secret Manager."
        )
    return api_key
