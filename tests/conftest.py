"""Shared test fixtures for the living_room test suite.

WHY: Converter tests must not depend on a real grammar. Stub collaborators
with fixed input → artifact tables let each test state exactly what the
grammar parser "recognized" and what the deserializer sees.

HOW: StubGrammarParser looks inputs up in a dict and records every call.
Fixtures provide a parser covering the standard scenarios and a sample
term artifact from the living-room grammar's test cases.

RULES:
- Unknown inputs map to None (the "could not parse" sentinel)
- Call recording is per-instance; fixtures build fresh instances
"""

import json
from typing import Dict, List, Optional

import pytest

from living_room.core.collaborators import GrammarParser


class StubGrammarParser(GrammarParser):
    """Grammar parser backed by a lookup table."""

    def __init__(self, table: Dict[str, Optional[str]]):
        self.table = dict(table)
        self.calls: List[str] = []

    def parse(self, raw_input):
        self.calls.append(raw_input)
        return self.table.get(raw_input)


class ExplodingGrammarParser(GrammarParser):
    """Grammar parser that fails abnormally on every call."""

    def __init__(self, exc: Exception):
        self.exc = exc

    def parse(self, raw_input):
        raise self.exc


# ---------------------------------------------------------------------------
# Sample artifacts
# ---------------------------------------------------------------------------

# "gorog is at $x $y but _ sometimes $ 1" with whitespace dropped
GOROG_TERMS: List[Dict] = [
    {"word": "gorog"},
    {"word": "is"},
    {"word": "at"},
    {"variable": "x"},
    {"variable": "y"},
    {"word": "but"},
    {"hole": True},
    {"word": "sometimes"},
    {"wildcard": True},
    {"value": 1},
]

SCENARIO_TABLE: Dict[str, Optional[str]] = {
    "{valid grammar text}": '{"a":1}',
    "{grammar-valid-but-bad-json-producing-rule}": "{not valid}",
    "???": None,
    "": "",
    "gorog is at $x $y but _ sometimes $ 1": json.dumps(GOROG_TERMS),
    "candy is null": json.dumps([{"word": "candy"}, {"word": "is"}, {"value": None}]),
}


@pytest.fixture
def stub_parser():
    """Grammar parser covering the standard conversion scenarios."""
    return StubGrammarParser(SCENARIO_TABLE)


@pytest.fixture
def gorog_artifact():
    """Term artifact for the 'gorog' statement."""
    return json.dumps(GOROG_TERMS)


@pytest.fixture
def make_stub_parser():
    """Factory for table-backed grammar parsers."""
    return StubGrammarParser


@pytest.fixture
def make_exploding_parser():
    """Factory for grammar parsers that raise the given exception."""
    return ExplodingGrammarParser
