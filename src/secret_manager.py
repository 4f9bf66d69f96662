"""Secret Manager lookup for application secrets.

Secrets are read at the 'latest' version on every call, so a rotated API
key is picked up by the next request without a restart.
"""

import logging
import os
from functools import lru_cache

from google.api_core import exceptions as gcp_exceptions
from google.cloud import secretmanager

logger = logging.getLogger(__name__)

# Config key -> secret base name
SECRET_NAMES = {
    "gemini_api_key": "gemini-api-key",
}


@lru_cache
def get_secret_manager_client() -> secretmanager.SecretManagerServiceClient:
    """Get cached Secret Manager client."""
    return secretmanager.SecretManagerServiceClient()


def secret_version_name(key: str, project_id: str, environment: str) -> str:
    """Resource name of the latest version of an application secret.

    Example: projects/p/secrets/spec-generator-gemini-api-key-dev/versions/latest
    """
    return (
        f"projects/{project_id}/secrets/spec-generator-{SECRET_NAMES[key]}-{environment}"
        "/versions/latest"
    )


def get_app_secret(key: str) -> str | None:
    """Get the current value of an application secret by its config key.

    Args:
        key: Config key name (e.g., 'gemini_api_key')

    Returns:
        The secret value, or None if there is no project, the key is unknown,
        or the secret is missing or not readable.
    """
    project_id = os.environ.get("GOOGLE_PROJECT_ID")
    if not project_id or key not in SECRET_NAMES:
        return None

    name = secret_version_name(key, project_id, os.environ.get("ENVIRONMENT", "dev"))
    try:
        response = get_secret_manager_client().access_secret_version(request={"name": name})
    except gcp_exceptions.NotFound:
        logger.debug(f"Secret not found: {name}")
        return None
    except gcp_exceptions.PermissionDenied:
        logger.warning(f"Permission denied for secret: {name}")
        return None

    return response.payload.data.decode("UTF-8").strip()
