"""Explicit success/failure value for non-raising conversions.

WHY: Some callers (batch jobs, UIs showing per-line status) would rather
inspect an outcome than wrap every call in try/except. ConversionResult
carries either the structured value or the classified error.

HOW: ErrorKind names the three failure classes. ConversionResult is a
frozen dataclass built through the success()/failure() constructors.

RULES:
- A successful result has error=None and kind=None
- A failed result always has both error and kind set
- unwrap() re-raises the stored exception object itself
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Failure classes a conversion can end in."""

    UNPARSABLE_INPUT = "unparsable_input"
    DESERIALIZATION = "deserialization"
    COLLABORATOR_FAULT = "collaborator_fault"


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of one conversion: a value or a classified error."""

    value: Any = None
    error: BaseException | None = None
    kind: ErrorKind | None = None

    @classmethod
    def success(cls, value: Any) -> ConversionResult:
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, error: BaseException) -> ConversionResult:
        return cls(error=error, kind=kind)

    @property
    def ok(self) -> bool:
        return self.kind is None

    def unwrap(self) -> Any:
        """Return the value, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value
