"""
Helpers for reading JSON out of model replies.

Models often wrap JSON in markdown fences (```json ... ```) even when
told not to; fences are removed before parsing.
"""
import json
import re
from typing import Any, Dict, List, Optional

from dayrhythm.core.exceptions import AIResponseParseError

_FENCE_PATTERN = re.compile(r"```(?:json)?\s*\n?", re.IGNORECASE)


def strip_code_fences(content: str) -> str:
    text = content.strip()
    if text.startswith("```"):
        text = _FENCE_PATTERN.sub("", text).strip()
    return text


def parse_string_list(content: str) -> Optional[List[str]]:
    """JSON array of strings, or None if the reply is anything else."""
    try:
        parsed = json.loads(strip_code_fences(content))
    except (json.JSONDecodeError, TypeError):
        return None
    if not isinstance(parsed, list) or not all(isinstance(item, str) for item in parsed):
        return None
    return parsed


def parse_event_list(content: str, error_message: str = "Failed to parse AI response") -> List[Dict[str, Any]]:
    """
    JSON array of event objects.

    Raises:
        AIResponseParseError: reply is not a JSON array of objects
    """
    try:
        parsed = json.loads(strip_code_fences(content))
    except (json.JSONDecodeError, TypeError) as e:
        raise AIResponseParseError(error_message) from e
    if not isinstance(parsed, list) or not all(isinstance(item, dict) for item in parsed):
        raise AIResponseParseError(error_message)
    return parsed
