"""Decode raw weather responses into snapshots."""
import json
import logging
from typing import Any, Dict, Union

from weather_provider import ApiError, ParseError


def parse(raw: Union[bytes, str]) -> Dict[str, Any]:
    """
    Decode a raw response into a nested dict/list tree.

    Anything before the first "{" (status line, headers) is skipped and the
    rest is decoded as one JSON object.

    Args:
        raw: Response content, bytes or text

    Returns:
        dict: The weather snapshot

    Raises:
        ParseError: If there is no JSON object in the response
    """
    if isinstance(raw, str):
        start = raw.find("{")
    else:
        start = raw.find(b"{")
    if start < 0:
        logging.error(f"No JSON object in response: {raw[:200]!r}")
        raise ParseError("response contains no JSON object")
    if start > 0:
        logging.debug(f"Skipping {start} characters of header text")

    try:
        # bytes are decoded strictly as UTF-8
        snapshot = json.loads(raw[start:])
    except ValueError as e:
        logging.error(f"Failed to decode response JSON: {e}")
        raise ParseError(f"Failed to parse response: {str(e)}") from e

    if not isinstance(snapshot, dict):
        raise ParseError(f"Expected a JSON object, got {type(snapshot).__name__}")

    logging.debug(f"Snapshot keys: {list(snapshot.keys())}")
    return snapshot


def check_api_error(snapshot: Dict[str, Any]) -> None:
    """Raise ApiError if the API reported an error inside a 200 response."""
    response = snapshot.get("response")
    if not isinstance(response, dict):
        return
    error = response.get("error")
    if not error:
        return

    if isinstance(error, dict):
        error_type = error.get("type", "unknown")
        description = error.get("description", "no description")
        message = f"Weather API error {error_type}: {description}"
    else:
        message = f"Weather API error: {error}"
    logging.error(message)
    raise ApiError(message)
