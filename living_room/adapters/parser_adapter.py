"""Adapter from exception-raising parsers to the sentinel contract.

WHY: Many grammar parsers (generated PEG/LALR parsers, hand-written
recursive descent) report unparsable input by raising. The Converter's
GrammarParser contract instead expects an empty/absent artifact. Wrapping
such a parser here keeps the Converter's classification honest: expected
syntax errors become "unparsable input", anything else stays a fault.

HOW: sentinel_parser() wraps a ``str -> str`` callable. If the call raises
one of the listed error types, the adapter logs it at DEBUG and returns
None. Other exceptions propagate (the Converter reports them as a
CollaboratorFault).

RULES:
- Listed errors → None; unlisted errors propagate
- A successful call's return value passes through unchanged
- Adapters hold no per-call state
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from living_room.core.collaborators import GrammarParser

logger = logging.getLogger(__name__)


class SentinelGrammarParser(GrammarParser):
    """GrammarParser that maps expected parse errors to None."""

    def __init__(
        self,
        func: Callable[[str], str],
        errors: tuple[type[BaseException], ...] = (Exception,),
    ) -> None:
        if not errors:
            raise ValueError("errors must name at least one exception type")
        self._func = func
        self._errors = errors

    def parse(self, raw_input: str) -> str | None:
        try:
            return self._func(raw_input)
        except self._errors as exc:
            logger.debug("Grammar parser rejected %r: %s", raw_input, exc)
            return None

    def __repr__(self) -> str:
        names = ", ".join(e.__name__ for e in self._errors)
        return f"SentinelGrammarParser({self._func!r}, errors=({names}))"


def sentinel_parser(
    func: Callable[[str], str],
    errors: tuple[type[BaseException], ...] | type[BaseException] = (Exception,),
) -> SentinelGrammarParser:
    """Wrap a raising parser so parse errors become the None sentinel.

    Args:
        func: Parser returning artifact text, raising on bad input.
        errors: Exception type(s) that mean "could not parse".
    """
    if isinstance(errors, type):
        errors = (errors,)
    return SentinelGrammarParser(func, tuple(errors))
