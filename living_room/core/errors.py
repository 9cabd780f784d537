"""Typed exceptions raised by the Converter.

WHY: Callers must be able to tell "the grammar never recognized this text"
apart from "the grammar parser itself broke". Deserializer failures are a
third class, but they keep the deserializer's own exception type, so no
wrapper is defined for them here.

RULES:
- UnparsableInputError always carries the raw input verbatim
- CollaboratorFault always chains the original exception (__cause__)
"""

from __future__ import annotations


class UnparsableInputError(ValueError):
    """Raised when the grammar parser signals it could not parse the input.

    WHY: The grammar parser reports failure with an empty/absent artifact,
    not an exception. The Converter turns that sentinel into an explicit
    error so callers cannot mistake it for a value.

    HOW: Stores the original raw input and embeds it in the message.

    RULES:
    - raw_input is the caller's string, unmodified
    - Message format: "Could not parse input: <raw_input>"
    """

    def __init__(self, raw_input: str) -> None:
        self.raw_input = raw_input
        super().__init__(f"Could not parse input: {raw_input}")


class CollaboratorFault(RuntimeError):
    """Raised when a collaborator fails abnormally instead of signalling.

    WHY: A grammar parser that raises (rather than returning an empty
    artifact) is misbehaving. Reporting that as "unparsable input" would
    blame the caller's text for a bug in the parser.

    HOW: Wraps the original exception, remembers which stage raised it and
    the raw input being converted.

    RULES:
    - stage is "grammar_parser" for faults raised during parsing
    - cause is the original exception (also set as __cause__ by the raiser)
    """

    def __init__(self, stage: str, raw_input: str, cause: BaseException) -> None:
        self.stage = stage
        self.raw_input = raw_input
        self.cause = cause
        super().__init__(
            f"{stage} failed while converting {raw_input!r}: "
            f"{type(cause).__name__}: {cause}"
        )
