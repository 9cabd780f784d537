"""Abstract bases for the Converter's two collaborators.

WHY: The grammar parser and the deserializer are external pieces. The
Converter only depends on their contracts, so tests can swap in stubs and
deployments can swap in a different grammar or format.

HOW: GrammarParser and Deserializer are ABCs with one method each.
FunctionGrammarParser adapts any plain callable to the GrammarParser
contract.

RULES:
- GrammarParser.parse() returns a falsy sentinel (None or "") when it
  cannot parse; it must not raise for ordinary unparsable input
- Deserializer.deserialize() raises when the artifact is malformed
- Implementations must not keep per-call state

To add a new deserializer:
1. Create a new file in deserializers/
2. Subclass Deserializer
3. Implement deserialize() and name
4. Register in DESERIALIZERS dict in deserializers/__init__.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any


class GrammarParser(ABC):
    """Recognizes raw text and emits an intermediate textual artifact."""

    @abstractmethod
    def parse(self, raw_input: str) -> str | None:
        """Parse raw text into an artifact.

        Args:
            raw_input: The caller's text.

        Returns:
            The artifact text, or None/"" when the input is not recognized.
        """


class Deserializer(ABC):
    """Turns an artifact in a known textual format into a structured value."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'JSON'."""

    @abstractmethod
    def deserialize(self, artifact: str) -> Any:
        """Convert the artifact into a structured value.

        Raises:
            Whatever the underlying format library raises on malformed input.
        """


class FunctionGrammarParser(GrammarParser):
    """GrammarParser backed by a plain ``str -> str | None`` callable."""

    def __init__(self, func: Callable[[str], str | None]) -> None:
        self._func = func

    def parse(self, raw_input: str) -> str | None:
        return self._func(raw_input)

    def __repr__(self) -> str:
        return f"FunctionGrammarParser({self._func!r})"


class FunctionDeserializer(Deserializer):
    """Deserializer backed by a plain ``str -> Any`` callable."""

    def __init__(self, func: Callable[[str], Any]) -> None:
        self._func = func

    @property
    def name(self) -> str:
        return getattr(self._func, "__name__", repr(self._func))

    def deserialize(self, artifact: str) -> Any:
        return self._func(artifact)
