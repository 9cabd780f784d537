"""Living Room converter — raw text to structured value.

WHY: The living-room grammar parser turns free-form statements such as
"gorog is at $x $y" into a textual term artifact (JSON). Callers want a
structured value, not a string, and they need to know which stage failed
when something goes wrong.

HOW: Two-stage pipeline — parse (grammar parser collaborator), deserialize
(deserializer collaborator). The Converter sequences them and classifies
failures. Both collaborators are injectable.

RULES:
- An empty artifact from the grammar parser means "could not parse"
- Deserializer failures propagate unmodified
- The Converter holds no state across calls
"""

from living_room.core.converter import Converter, convert
from living_room.core.errors import CollaboratorFault, UnparsableInputError
from living_room.core.result import ConversionResult, ErrorKind

__version__ = "0.1.0"

__all__ = [
    "CollaboratorFault",
    "ConversionResult",
    "Converter",
    "ErrorKind",
    "UnparsableInputError",
    "convert",
]
