"""Loading of JSON schema descriptions from disk or over HTTP."""

import json
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 30


class JSONLoaderError(Exception):
    """A schema description could not be read or parsed."""

    pass


def load_json_from_file(file_path: str | Path) -> tuple[str, Any]:
    """Read and parse a JSON schema description file.

    Returns:
        Tuple of (path as string, parsed data).

    Raises:
        FileNotFoundError: If the file does not exist.
        JSONLoaderError: If the file is unreadable or not valid JSON.
    """
    path = Path(file_path)
    logger.debug("Reading schema description %s", path)

    if not path.exists():
        logger.error("File not found: %s", path)
        raise FileNotFoundError(f"File not found: {path}")

    if path.suffix.lower() != ".json":
        logger.warning("File does not have .json extension: %s", path)

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in file %s: %s", path, e)
        raise JSONLoaderError(f"Invalid JSON in file {path}: {e}") from e
    except OSError as e:
        logger.error("Error reading file %s: %s", path, e)
        raise JSONLoaderError(f"Error reading file {path}: {e}") from e

    logger.info("Loaded schema description from %s", path)
    return str(path), data


def load_json_from_url(url: str, timeout: int = DEFAULT_TIMEOUT) -> tuple[str, Any]:
    """Fetch and parse a JSON schema description.

    Returns:
        Tuple of (url, parsed data).

    Raises:
        JSONLoaderError: On a malformed URL, a failed request or a body
            that is not JSON.
    """
    parsed = urlparse(url)
    if not (parsed.scheme and parsed.netloc):
        logger.error("Invalid URL format: %s", url)
        raise JSONLoaderError(f"Invalid URL: {url}")

    logger.debug("Fetching schema description %s", url)
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()

        content_type = response.headers.get("content-type", "").lower()
        if "application/json" not in content_type and not url.endswith(".json"):
            logger.warning("URL %s does not have JSON content type: %s", url, content_type)

        data = response.json()
    except requests.exceptions.Timeout as e:
        logger.error("Request timeout for URL: %s", url)
        raise JSONLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error("Connection error for URL %s: %s", url, e)
        raise JSONLoaderError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        status = e.response.status_code
        logger.error("HTTP error %s for URL: %s", status, url)
        raise JSONLoaderError(f"HTTP error {status} for URL: {url}") from e
    except requests.exceptions.JSONDecodeError as e:
        logger.error("Invalid JSON response from URL %s: %s", url, e)
        raise JSONLoaderError(f"Invalid JSON response from URL {url}: {e}") from e
    except requests.exceptions.RequestException as e:
        logger.error("Request error for URL %s: %s", url, e)
        raise JSONLoaderError(f"Request error for URL {url}: {e}") from e

    logger.info("Loaded schema description from %s", url)
    return url, data


def load_json(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = DEFAULT_TIMEOUT,
) -> tuple[str, Any]:
    """Load a schema description from exactly one of a file or a URL.

    Raises:
        JSONLoaderError: If neither or both sources are given, or loading fails.
        FileNotFoundError: If the file does not exist.
    """
    if not file_path and not url:
        raise JSONLoaderError("Either file_path or url must be provided")
    if file_path and url:
        raise JSONLoaderError("Cannot specify both file_path and url")

    if file_path:
        return load_json_from_file(file_path)
    return load_json_from_url(url, timeout)
