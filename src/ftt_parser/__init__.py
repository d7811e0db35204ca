"""
FamilyTree-Text (FTT) parser.

    from ftt_parser import parse
    result = parse(text)
    if result.ok:
        ...
"""

from ftt_parser.core.diagnostics import Diagnostic, Severity
from ftt_parser.models import Field, Modifier, ParseResult, PlaceMetadata, Record, RecordType
from ftt_parser.parser_core import FTTParser, parse

__version__ = "0.1.0"

__all__ = [
    "Diagnostic",
    "FTTParser",
    "Field",
    "Modifier",
    "ParseResult",
    "PlaceMetadata",
    "Record",
    "RecordType",
    "Severity",
    "parse",
]
