"""Generic JSON deserializer.

WHY: The living-room grammar parser emits JSON text. Most callers want the
plain nested dict/list/scalar value with no extra typing.

HOW: Thin wrapper over json.loads.

RULES:
- Malformed JSON raises json.JSONDecodeError, unmodified
- The result is whatever json.loads returns
"""

from __future__ import annotations

import json
from typing import Any

from living_room.core.collaborators import Deserializer


class JSONDeserializer(Deserializer):
    """Deserialize artifact text with the standard json module."""

    @property
    def name(self) -> str:
        return "JSON"

    def deserialize(self, artifact: str) -> Any:
        return json.loads(artifact)
