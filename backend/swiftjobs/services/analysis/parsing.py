import json
import logging
import math
import re
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# First "{" to last "}" so fenced or chatty replies still yield the object
JSON_OBJECT_PATTERN = re.compile(r"\{[\s\S]*\}")
NUMBER_PATTERN = re.compile(r"-?\d+(?:\.\d+)?")


def extract_json_object(text: Optional[str]) -> Optional[Dict[str, Any]]:
    """
    Pull the first JSON-looking object out of free-form LLM output.

    Returns None when there is no candidate substring, it does not parse,
    or it parses to something other than an object.
    """
    if not text:
        return None

    match = JSON_OBJECT_PATTERN.search(text)
    if not match:
        logger.warning("No JSON object in LLM response", extra={"preview": text[:200]})
        return None

    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        logger.warning(
            f"Failed to parse LLM response as JSON: {str(e)}",
            extra={"preview": text[:200]}
        )
        return None

    if not isinstance(parsed, dict):
        return None

    return parsed


def coerce_score(value: Any, default: int) -> int:
    """Turn an LLM-supplied score (85, 85.4, "85", "85%") into an int in 0..100."""
    if isinstance(value, bool) or value is None:
        return default

    if isinstance(value, int):
        # Clamp before any float conversion; huge ints overflow a float
        return max(0, min(100, value))

    if isinstance(value, float):
        number = value
    elif isinstance(value, str):
        found = NUMBER_PATTERN.search(value)
        if not found:
            return default
        number = float(found.group(0))
    else:
        return default

    if math.isnan(number) or math.isinf(number):
        return default

    return max(0, min(100, int(round(number))))
