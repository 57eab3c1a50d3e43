"""Model namespace for i18nscan call records and terms."""

from artifacts.models.calls import (
    ArgumentNode,
    BinaryNode,
    CallRecord,
    FileOutcome,
    LiteralNode,
    OtherNode,
    ParseFailure,
    ParseSuccess,
)
from artifacts.models.terms import (
    ExtractionResult,
    ExtractionSummary,
    FileError,
    MultiLocationTerm,
    Term,
    TermLocation,
    TermOccurrence,
    term_locations,
)

__all__ = [
    "ArgumentNode",
    "BinaryNode",
    "CallRecord",
    "ExtractionResult",
    "ExtractionSummary",
    "FileError",
    "FileOutcome",
    "LiteralNode",
    "MultiLocationTerm",
    "OtherNode",
    "ParseFailure",
    "ParseSuccess",
    "Term",
    "TermLocation",
    "TermOccurrence",
    "term_locations",
]
