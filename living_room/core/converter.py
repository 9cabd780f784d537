"""The Converter: raw text → grammar parser → deserializer → value.

WHY: Callers want one call that turns text into a structured value and
tells them which stage failed. The grammar parser signals failure with an
empty artifact, the deserializer by raising; the Converter reconciles the
two conventions.

HOW: Converter holds one GrammarParser and one Deserializer. convert()
runs them in order:
  1. parse(raw_input) → artifact
  2. falsy artifact → UnparsableInputError(raw_input)
  3. deserialize(artifact) → value (exceptions propagate untouched)
try_convert() runs the same steps and returns a ConversionResult.

RULES:
- raw_input must be a str; anything else is a TypeError before parsing
- Any falsy artifact (None, "", ...) means "could not parse"
- A grammar parser that raises is a CollaboratorFault, not unparsable input
- Deserializer exceptions are never caught or re-wrapped by convert()
- No state is kept between calls; no I/O, no logging
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from living_room.core.collaborators import (
    Deserializer,
    FunctionDeserializer,
    FunctionGrammarParser,
    GrammarParser,
)
from living_room.core.errors import CollaboratorFault, UnparsableInputError
from living_room.core.result import ConversionResult, ErrorKind
from living_room.deserializers import create_deserializer

GRAMMAR_PARSER_STAGE = "grammar_parser"


def _as_parser(parser: GrammarParser | Callable[[str], str | None]) -> GrammarParser:
    if isinstance(parser, GrammarParser):
        return parser
    if callable(parser):
        return FunctionGrammarParser(parser)
    raise TypeError(f"Expected a GrammarParser or callable, got {type(parser).__name__}")


def _as_deserializer(deserializer: Deserializer | Callable[[str], Any]) -> Deserializer:
    if isinstance(deserializer, Deserializer):
        return deserializer
    if callable(deserializer):
        return FunctionDeserializer(deserializer)
    raise TypeError(f"Expected a Deserializer or callable, got {type(deserializer).__name__}")


class Converter:
    """Sequence a grammar parser and a deserializer.

    Usage:
        converter = Converter(parser=my_grammar, deserializer=JSONDeserializer())
        value = converter.convert("gorog is at 1 2")
    """

    def __init__(
        self,
        parser: GrammarParser | Callable[[str], str | None],
        deserializer: Deserializer | Callable[[str], Any],
    ) -> None:
        self.parser = _as_parser(parser)
        self.deserializer = _as_deserializer(deserializer)

    @classmethod
    def from_registry(
        cls,
        parser: GrammarParser | Callable[[str], str | None],
        deserializer: str | None = None,
    ) -> Converter:
        """Build a Converter whose deserializer is looked up by registry key.

        Args:
            parser: The grammar parser collaborator.
            deserializer: Key in DESERIALIZERS; defaults to
                LIVING_ROOM_DEFAULT_DESERIALIZER.

        Raises:
            KeyError: If the key is not registered.
        """
        return cls(parser=parser, deserializer=create_deserializer(deserializer))

    def _parse(self, raw_input: str) -> str:
        if not isinstance(raw_input, str):
            raise TypeError(f"raw_input must be str, got {type(raw_input).__name__}")

        try:
            artifact = self.parser.parse(raw_input)
        except Exception as exc:
            raise CollaboratorFault(GRAMMAR_PARSER_STAGE, raw_input, exc) from exc

        if not artifact:
            raise UnparsableInputError(raw_input)
        return artifact

    def convert(self, raw_input: str) -> Any:
        """Convert raw text into a structured value.

        Raises:
            TypeError: raw_input is not a str.
            UnparsableInputError: The grammar parser returned an empty artifact.
            CollaboratorFault: The grammar parser raised.
            Exception: Whatever the deserializer raised, unmodified.
        """
        artifact = self._parse(raw_input)
        return self.deserializer.deserialize(artifact)

    def try_convert(self, raw_input: str) -> ConversionResult:
        """Convert raw text, returning the outcome instead of raising.

        TypeError for a non-str argument is still raised: it is a caller
        bug, not a conversion outcome.
        """
        try:
            artifact = self._parse(raw_input)
        except UnparsableInputError as exc:
            return ConversionResult.failure(ErrorKind.UNPARSABLE_INPUT, exc)
        except CollaboratorFault as exc:
            return ConversionResult.failure(ErrorKind.COLLABORATOR_FAULT, exc)

        try:
            value = self.deserializer.deserialize(artifact)
        except Exception as exc:
            return ConversionResult.failure(ErrorKind.DESERIALIZATION, exc)
        return ConversionResult.success(value)

    def __call__(self, raw_input: str) -> Any:
        return self.convert(raw_input)

    def __repr__(self) -> str:
        return f"Converter(parser={self.parser!r}, deserializer={self.deserializer.name!r})"


def convert(
    raw_input: str,
    parser: GrammarParser | Callable[[str], str | None],
    deserializer: Deserializer | Callable[[str], Any] | None = None,
) -> Any:
    """One-shot conversion without keeping a Converter around.

    When deserializer is None the default registry deserializer is used.
    """
    if deserializer is None:
        converter = Converter.from_registry(parser)
    else:
        converter = Converter(parser=parser, deserializer=deserializer)
    return converter.convert(raw_input)
