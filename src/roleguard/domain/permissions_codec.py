"""Text encoding of a role's permission mapping.

Stored rows keep permissions as JSON object text. A role without grants is
stored as an empty string rather than ``{}``, and anything that cannot be
decoded back into an object is read as "no grants".
"""

import json
import logging
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)


def decode_permissions(raw: str | bytes | None) -> dict[str, Any]:
    """Decode persisted permissions text into a mapping. Never raises."""
    if not raw:
        return {}
    try:
        decoded = json.loads(raw)
    except (TypeError, ValueError, RecursionError):
        logger.warning("Discarding undecodable permissions payload: %.200r", raw)
        return {}
    if not isinstance(decoded, dict):
        logger.warning(
            "Discarding permissions payload of type %s, expected object",
            type(decoded).__name__,
        )
        return {}
    return decoded


def encode_permissions(permissions: Mapping[str, Any]) -> str:
    """Encode a permission mapping for storage; empty mapping becomes ''."""
    if not permissions:
        return ""
    return json.dumps(dict(permissions), separators=(",", ":"))
