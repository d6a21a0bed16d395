"""
Configuration module for notion-digest.
This module handles environment variables (credentials) that are not part of the domain model.
"""

import logging
import os

from domain_models.constants import DEFAULT_OPENAI_BASE_URL
from notion_digest.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

NOTION_TOKEN_ENV = "NOTION_API_TOKEN"
OPENAI_KEY_ENV = "OPENAI_API_KEY"


def get_notion_token() -> str | None:
    """
    Retrieve the Notion integration token from environment variables.

    Returns:
        The token as a string if set, otherwise None.
    """
    token = os.environ.get(NOTION_TOKEN_ENV)
    if not token:
        logger.warning(f"{NOTION_TOKEN_ENV} environment variable is not set.")
    return token


def get_openai_api_key() -> str | None:
    """
    Retrieve the OpenAI API key from environment variables.

    Returns:
        The API key as a string if set, otherwise None.
    """
    api_key = os.environ.get(OPENAI_KEY_ENV)
    if not api_key:
        logger.warning(f"{OPENAI_KEY_ENV} environment variable is not set.")
    return api_key


def get_openai_base_url() -> str:
    """
    Retrieve the OpenAI-compatible base URL from environment variables.

    Returns:
        The Base URL as a string. Defaults to "https://api.openai.com/v1".
    """
    return os.environ.get("OPENAI_BASE_URL", DEFAULT_OPENAI_BASE_URL)


def require_credential(name: str, value: str | None) -> str:
    """Return `value` or raise ConfigurationError naming the missing variable."""
    if not value:
        msg = f"{name} is not set"
        raise ConfigurationError(msg)
    return value
