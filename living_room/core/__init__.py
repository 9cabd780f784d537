"""Core conversion modules.

WHY: The core package contains the stable heart of the converter: the
collaborator contracts, the Converter itself, its error types, and the
term IR. Deserializers and adapters build on these.

HOW: collaborators.py defines the two contracts, converter.py sequences
them, errors.py and result.py describe failures, terms.py types the
living-room term artifact.

RULES:
- Collaborator contracts are the stable seam: change with care
- The Converter never inspects artifacts; the deserializer owns the format
"""
