"""Unit tests for the parser adapter and the deserializer registry.

WHY: The sentinel adapter decides which parser exceptions count as
"could not parse" and which are faults. Getting that list wrong silently
changes how the Converter classifies failures.

HOW: Wrap small raising functions, check the sentinel mapping, then run
them through a Converter to confirm the end-to-end classification.
"""

import json
import logging

import pytest

from living_room import CollaboratorFault, Converter, UnparsableInputError
from living_room.adapters import SentinelGrammarParser, sentinel_parser
from living_room.deserializers import (
    DESERIALIZERS,
    JSONDeserializer,
    TermDeserializer,
    create_deserializer,
)


class GrammarSyntaxError(Exception):
    pass


def strict_grammar(raw):
    """Accepts only lowercase words; raises on anything else."""
    if not raw or not raw.replace(" ", "").isalpha() or not raw.islower():
        raise GrammarSyntaxError(f"unexpected input at 0: {raw!r}")
    return json.dumps([{"word": w} for w in raw.split()])


def broken_grammar(raw):
    raise MemoryError("grammar tables exhausted")


class TestSentinelParser:

    def test_success_passes_through(self):
        parser = sentinel_parser(strict_grammar, GrammarSyntaxError)
        assert parser.parse("hi you") == '[{"word": "hi"}, {"word": "you"}]'

    def test_listed_error_becomes_none(self):
        parser = sentinel_parser(strict_grammar, GrammarSyntaxError)
        assert parser.parse("???") is None

    def test_unlisted_error_propagates(self):
        parser = sentinel_parser(strict_grammar, (KeyError,))
        with pytest.raises(GrammarSyntaxError):
            parser.parse("???")

    def test_default_catches_exception(self):
        assert sentinel_parser(strict_grammar).parse("") is None

    def test_rejection_logged_at_debug(self, caplog):
        parser = sentinel_parser(strict_grammar, GrammarSyntaxError)
        with caplog.at_level(logging.DEBUG, logger="living_room.adapters.parser_adapter"):
            parser.parse("???")
        assert "???" in caplog.text

    def test_empty_error_tuple_rejected(self):
        with pytest.raises(ValueError):
            SentinelGrammarParser(strict_grammar, ())

    def test_repr_lists_errors(self):
        assert "GrammarSyntaxError" in repr(sentinel_parser(strict_grammar, GrammarSyntaxError))


class TestSentinelParserInConverter:
    """Adapter output is classified correctly by the Converter."""

    def test_success(self):
        converter = Converter(sentinel_parser(strict_grammar, GrammarSyntaxError), TermDeserializer())
        assert [t.value for t in converter.convert("hi you")] == ["hi", "you"]

    def test_syntax_error_is_unparsable(self):
        converter = Converter(sentinel_parser(strict_grammar, GrammarSyntaxError), JSONDeserializer())
        with pytest.raises(UnparsableInputError) as exc_info:
            converter.convert("Hi!")
        assert exc_info.value.raw_input == "Hi!"

    def test_other_error_is_fault(self):
        converter = Converter(sentinel_parser(broken_grammar, GrammarSyntaxError), JSONDeserializer())
        with pytest.raises(CollaboratorFault) as exc_info:
            converter.convert("hi")
        assert isinstance(exc_info.value.cause, MemoryError)


class TestDeserializerRegistry:

    def test_registered_keys(self):
        assert DESERIALIZERS == {"json": JSONDeserializer, "terms": TermDeserializer}

    def test_create_by_key(self):
        assert isinstance(create_deserializer("terms"), TermDeserializer)

    def test_default_key(self):
        assert isinstance(create_deserializer(), JSONDeserializer)

    def test_unknown_key_lists_valid_keys(self):
        with pytest.raises(KeyError, match="json"):
            create_deserializer("xml")

    def test_json_deserializer(self):
        assert JSONDeserializer().deserialize('{"a": [1, 2.5, null]}') == {"a": [1, 2.5, None]}
        assert JSONDeserializer().name == "JSON"
