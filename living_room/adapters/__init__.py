"""Adapter modules for plugging external parsers into the Converter.

WHY: External grammar parsers follow their own error conventions. Adapters
bridge them to the GrammarParser contract so the Converter stays unaware
of any particular parser library.

RULES:
- Adapters are thin wrappers: no I/O beyond DEBUG logging
- Each adapter lives in its own module under this package
"""

from living_room.adapters.parser_adapter import SentinelGrammarParser, sentinel_parser

__all__ = ["SentinelGrammarParser", "sentinel_parser"]
