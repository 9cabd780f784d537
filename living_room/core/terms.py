"""Term IR for the living-room term artifact format.

WHY: The living-room grammar parser emits its result as a JSON array of
one-key objects, e.g. ``[{"word": "gorog"}, {"variable": "x"}]``. Plain
dicts work, but callers that act on the terms want typed objects with a
kind they can switch on.

HOW: TermKind maps each JSON key to an enum member. Term is a frozen
dataclass holding the kind and its payload. from_dict/to_dict convert one
array element in each direction.

RULES:
- Every element has exactly one key, and the key must be a TermKind value
- "value" carries a bool, int, float, null, or string literal
- "word", "id", "variable" carry a string (an empty id is allowed: "#")
- "hole" and "wildcard" carry the constant true
- Whitespace is not represented; the parser drops it before serializing
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class TermKind(Enum):
    """Term kinds, valued by their JSON key."""

    VALUE = "value"
    WORD = "word"
    ID = "id"
    VARIABLE = "variable"
    HOLE = "hole"
    WILDCARD = "wildcard"


_STRING_KINDS = frozenset({TermKind.WORD, TermKind.ID, TermKind.VARIABLE})
_FLAG_KINDS = frozenset({TermKind.HOLE, TermKind.WILDCARD})
_LITERAL_TYPES = (bool, int, float, str, type(None))


@dataclass(frozen=True, eq=False)
class Term:
    """One element of a parsed statement.

    RULES:
    - kind: which TermKind this is
    - value: the literal / name for VALUE, WORD, ID, VARIABLE; True for
      HOLE and WILDCARD
    - Equality and hashing include the payload type: 1, true and 1.0 are
      three different literals
    """

    kind: TermKind
    value: Any = True

    def _key(self) -> tuple[TermKind, type, Any]:
        return (self.kind, type(self.value), self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Term):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Term:
        """Parse one term object, e.g. ``{"word": "hi"}``.

        Raises:
            ValueError: If the object is not a single known key with a
                payload of the right type.
        """
        if not isinstance(data, dict) or len(data) != 1:
            raise ValueError(f"Term must be an object with exactly one key, got {data!r}")

        (key, value), = data.items()
        try:
            kind = TermKind(key)
        except ValueError:
            raise ValueError(f"Unknown term kind: {key!r}") from None

        if kind in _FLAG_KINDS and value is not True:
            raise ValueError(f"Term {key!r} must be true, got {value!r}")
        if kind in _STRING_KINDS and not isinstance(value, str):
            raise ValueError(f"Term {key!r} must be a string, got {value!r}")
        if kind is TermKind.VALUE and not isinstance(value, _LITERAL_TYPES):
            raise ValueError(f"Term 'value' must be a scalar literal, got {value!r}")

        return cls(kind=kind, value=value)

    def to_dict(self) -> dict[str, Any]:
        return {self.kind.value: self.value}

    # Convenience constructors, mirroring how the grammar builds terms

    @classmethod
    def word(cls, text: str) -> Term:
        return cls(TermKind.WORD, text)

    @classmethod
    def id(cls, name: str) -> Term:
        return cls(TermKind.ID, name)

    @classmethod
    def variable(cls, name: str) -> Term:
        return cls(TermKind.VARIABLE, name)

    @classmethod
    def literal(cls, value: Any) -> Term:
        return cls(TermKind.VALUE, value)

    @classmethod
    def hole(cls) -> Term:
        return cls(TermKind.HOLE, True)

    @classmethod
    def wildcard(cls) -> Term:
        return cls(TermKind.WILDCARD, True)


def terms_from_list(data: list[dict[str, Any]]) -> list[Term]:
    """Parse a whole term array."""
    if not isinstance(data, list):
        raise ValueError(f"Term artifact must be a JSON array, got {type(data).__name__}")
    return [Term.from_dict(item) for item in data]
