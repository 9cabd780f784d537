"""Deserializer registry — pluggable artifact formats.

WHY: Callers and configuration name a deserializer by key ("json",
"terms") rather than importing a class. A central dict makes adding a
format one new module plus one line here.

HOW: DESERIALIZERS maps string keys to Deserializer *classes* (not
instances). create_deserializer() instantiates by key.

RULES:
- Keys are snake_case identifiers (used in config)
- Values are Deserializer subclasses (not instances)
- Every deserializer listed here must be importable without side effects
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from living_room import config
from living_room.deserializers.json_text import JSONDeserializer
from living_room.deserializers.terms import TermDeserializer

if TYPE_CHECKING:
    from living_room.core.collaborators import Deserializer

logger = logging.getLogger(__name__)

DESERIALIZERS: dict[str, type[Deserializer]] = {
    "json": JSONDeserializer,
    "terms": TermDeserializer,
}


def create_deserializer(key: str | None = None) -> Deserializer:
    """Instantiate a registered deserializer.

    Args:
        key: Registry key; None means LIVING_ROOM_DEFAULT_DESERIALIZER.

    Raises:
        KeyError: If the key is not registered. The message lists valid keys.
    """
    key = key or config.DEFAULT_DESERIALIZER
    try:
        cls = DESERIALIZERS[key]
    except KeyError:
        raise KeyError(
            f"Unknown deserializer {key!r}; expected one of {sorted(DESERIALIZERS)}"
        ) from None
    logger.debug("Using deserializer %s (%s)", key, cls.__name__)
    return cls()


__all__ = [
    "DESERIALIZERS",
    "JSONDeserializer",
    "TermDeserializer",
    "create_deserializer",
]
