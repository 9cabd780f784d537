"""Schema-validated deserializer for the living-room term artifact.

WHY: A version mismatch between the grammar parser and its consumers shows
up as JSON that parses fine but has the wrong shape. Validating against the
term schema turns that into an immediate, descriptive error instead of a
KeyError deep inside caller code.

HOW: json.loads the artifact, validate it with jsonschema against
term_schema.json (loaded once, cached at module level), then build Term
objects with terms_from_list.

RULES:
- Output is a list[Term], in artifact order
- Malformed JSON raises json.JSONDecodeError
- Shape errors raise jsonschema.ValidationError when validation is on,
  ValueError from Term.from_dict when it is off
- validate defaults to LIVING_ROOM_VALIDATE_TERMS
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

from living_room import config
from living_room.core.collaborators import Deserializer
from living_room.core.terms import Term, terms_from_list

_SCHEMA_PATH = Path(__file__).resolve().parent / "term_schema.json"


def _load_schema() -> dict[str, Any]:
    """Load the term JSON schema from disk.

    Cached at module level after first call to avoid repeated I/O.
    """
    with open(_SCHEMA_PATH) as f:
        return json.load(f)


_CACHED_SCHEMA: dict[str, Any] | None = None


def get_schema() -> dict[str, Any]:
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        _CACHED_SCHEMA = _load_schema()
    return _CACHED_SCHEMA


class TermDeserializer(Deserializer):
    """Deserialize a term artifact into a list of Term objects.

    Args:
        validate: Check the decoded JSON against term_schema.json before
            building terms. None means use LIVING_ROOM_VALIDATE_TERMS.
    """

    def __init__(self, validate: bool | None = None) -> None:
        self.validate = config.VALIDATE_TERMS if validate is None else validate

    @property
    def name(self) -> str:
        return "Living Room terms"

    def deserialize(self, artifact: str) -> list[Term]:
        """Decode, validate, and type the term array.

        Raises:
            json.JSONDecodeError: The artifact is not JSON.
            jsonschema.ValidationError: The JSON does not match the term schema.
            ValueError: A term object is malformed (validation off).
        """
        data = json.loads(artifact)
        if self.validate:
            jsonschema.validate(instance=data, schema=get_schema())
        return terms_from_list(data)
