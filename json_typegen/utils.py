"""Utility functions for reading and reformatting JSON text.

Loaders return the raw text rather than parsed data: parsing belongs to
``convert`` so that malformed input is reported the same way whatever
the source. The pretty-print and minify helpers echo a document back
to the user.
"""

import json
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)

# Indentation used when echoing a document back
JSON_ECHO_INDENT = 4


class JSONLoaderError(Exception):
    """Raised when JSON text cannot be read from a file or URL."""

    pass


def load_json_from_file(file_path: str | Path) -> tuple[str, str]:
    """Read JSON text from a local file.

    Args:
        file_path: Path to the JSON file.

    Returns:
        Tuple of (source description, raw JSON text).

    Raises:
        FileNotFoundError: If file doesn't exist.
        JSONLoaderError: If file cannot be read or decoded as UTF-8.
    """
    file_path = Path(file_path)

    if not file_path.is_file():
        logger.error("File not found: %s", file_path)
        raise FileNotFoundError(f"File not found: {file_path}")

    if file_path.suffix.lower() != ".json":
        logger.warning("File does not have .json extension: %s", file_path)

    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error reading file %s: %s", file_path, e)
        raise JSONLoaderError(f"Error reading file {file_path}: {e}") from e

    logger.info("Read %d characters from %s", len(text), file_path)
    return f"📄 {file_path}", text


def _describe_request_error(error: requests.exceptions.RequestException) -> str:
    if isinstance(error, requests.exceptions.Timeout):
        return "Request timeout"
    if isinstance(error, requests.exceptions.ConnectionError):
        return "Connection error"
    if isinstance(error, requests.exceptions.HTTPError) and error.response is not None:
        return f"HTTP error {error.response.status_code}"
    return f"Request error ({error})"


def load_json_from_url(url: str, timeout: int = 30) -> tuple[str, str]:
    """Fetch JSON text from a URL.

    Args:
        url: URL to fetch JSON from.
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, raw JSON text).

    Raises:
        JSONLoaderError: If URL is invalid or the request fails.
    """
    parsed_url = urlparse(url)
    if not (parsed_url.scheme and parsed_url.netloc):
        raise JSONLoaderError(f"Invalid URL: {url}")

    logger.debug("Fetching JSON from %s", url)
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        message = f"{_describe_request_error(e)} for URL: {url}"
        logger.error(message)
        raise JSONLoaderError(message) from e

    content_type = response.headers.get("content-type", "").lower()
    if "json" not in content_type:
        logger.warning("URL %s does not have a JSON content type: %s", url, content_type)

    return f"🌐 {url}", response.text


def load_json(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, str]:
    """Read JSON text from exactly one of a file or a URL.

    Raises:
        JSONLoaderError: If neither or both sources are given, or loading fails.
        FileNotFoundError: If the file doesn't exist.
    """
    if bool(file_path) == bool(url):
        raise JSONLoaderError("Exactly one of file_path or url must be provided")

    if file_path:
        return load_json_from_file(file_path)
    return load_json_from_url(url, timeout)


def parse_json(text: str) -> Any:
    """Parse JSON text.

    Raises:
        json.JSONDecodeError: If the text is not valid JSON.
    """
    return json.loads(text)


def format_json(text: str, indent: int = JSON_ECHO_INDENT) -> str:
    """Pretty-print JSON text with the given indentation."""
    return json.dumps(parse_json(text), indent=indent, ensure_ascii=False)


def minify_json(text: str) -> str:
    """Re-serialize JSON text without any insignificant whitespace."""
    return json.dumps(parse_json(text), separators=(",", ":"), ensure_ascii=False)
