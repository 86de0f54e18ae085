"""
Utility functions for EventBus:
    - ID generation
    - payload coercion for cell coordinates
"""

import uuid
import logging
from typing import Optional, Tuple

log = logging.getLogger(__name__)

# ---------- ID Helpers ----------
def new_msg_id() -> str:
    """
    Generate a globally unique event ID.

    Returns:
        str: UUID string for a new event.
    """
    return str(uuid.uuid4())

# ---------- Payload Helpers ----------
def cell_from_payload(payload: dict) -> Optional[Tuple[int, int]]:
    """
    Read an ``(x, y)`` grid cell from an event payload.

    Args:
        payload (dict): Payload expected to carry integer-like 'x' and 'y' keys.

    Returns:
        Optional[Tuple[int, int]]: The cell, or None if the keys are missing or malformed.
    """
    try:
        return int(payload["x"]), int(payload["y"])
    except (KeyError, TypeError, ValueError):
        log.debug("Malformed cell payload: %r", payload)
        return None
