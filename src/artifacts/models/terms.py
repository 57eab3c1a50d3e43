"""Term models for extracted translation candidates."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TermLocation(BaseModel):
    """Where a term was discovered."""

    source_file: str
    argument_index: int
    line: int | None = None


class TermOccurrence(BaseModel):
    """A single discovery of a target-script text.

    Also the single-location form of a term: it stays this shape until a second
    occurrence of the same text promotes it to ``MultiLocationTerm``.
    """

    text: str = Field(min_length=1)
    source_file: str
    argument_index: int
    line: int | None = None
    discovered_at: datetime = Field(default_factory=_utcnow)

    def location(self) -> TermLocation:
        return TermLocation(
            source_file=self.source_file,
            argument_index=self.argument_index,
            line=self.line,
        )


class MultiLocationTerm(BaseModel):
    """A term discovered more than once, with locations in discovery order."""

    text: str = Field(min_length=1)
    locations: list[TermLocation] = Field(default_factory=list)


Term = TermOccurrence | MultiLocationTerm


def term_locations(term: Term) -> list[TermLocation]:
    """Return the locations of a term regardless of its form."""
    if isinstance(term, MultiLocationTerm):
        return list(term.locations)
    return [term.location()]


class FileError(BaseModel):
    """A file that contributed no terms because parsing or extraction failed."""

    file: str
    error: str


class ExtractionSummary(BaseModel):
    """Per-run counts; ``total_terms`` counts occurrences before deduplication."""

    total_files: int = 0
    success_files: int = 0
    error_files: int = 0
    total_terms: int = 0


class ExtractionResult(BaseModel):
    """Raw occurrences, per-file errors and summary for a batch of files."""

    terms: list[TermOccurrence] = Field(default_factory=list)
    errors: list[FileError] = Field(default_factory=list)
    summary: ExtractionSummary = Field(default_factory=ExtractionSummary)


__all__ = [
    "ExtractionResult",
    "ExtractionSummary",
    "FileError",
    "MultiLocationTerm",
    "Term",
    "TermLocation",
    "TermOccurrence",
    "term_locations",
]
