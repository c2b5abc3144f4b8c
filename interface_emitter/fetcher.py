"""Load JSON model descriptions from a file or URL."""

import json
import logging
from pathlib import Path

import requests

logger = logging.getLogger(__name__)


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def fetch_model_json(url: str) -> dict:
    """Fetch a model description from URL.

    Args:
        url: URL to the JSON model description

    Returns:
        Parsed JSON as dictionary

    Raises:
        requests.RequestException: If fetch fails
        ValueError: If response is not valid JSON
    """
    response = requests.get(url, timeout=30)
    response.raise_for_status()
    return response.json()


def load_model_source(source: str) -> dict:
    """Load a model description from a local path or an HTTP(S) URL.

    Args:
        source: File path or URL

    Returns:
        Parsed JSON as dictionary

    Raises:
        OSError: If the file cannot be read
        ValueError: If the content is not valid JSON
    """
    logger.debug("Loading model description from %s", source)
    if is_url(source):
        return fetch_model_json(source)
    return json.loads(Path(source).read_text(encoding="utf-8"))
