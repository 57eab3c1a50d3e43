"""Summary builders for extracted terms."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from artifacts.models.terms import term_locations

if TYPE_CHECKING:
    from collections.abc import Sequence

    from artifacts.models.terms import Term


class FileTermCount(BaseModel):
    source_file: str
    count: int


class TermStats(BaseModel):
    """Per-file term counts and text length statistics."""

    term_count: int = 0
    file_counts: list[FileTermCount] = Field(default_factory=list)
    average_length: float = 0.0
    max_length: int = 0
    min_length: int = 0


def compute_file_counts(terms: Sequence[Term]) -> dict[str, int]:
    """Count terms per source file; a multi-location term counts once per location."""
    counts: dict[str, int] = {}
    for term in terms:
        for location in term_locations(term):
            counts[location.source_file] = counts.get(location.source_file, 0) + 1
    return counts


def build_term_stats(terms: Sequence[Term], top_n: int = 10) -> TermStats:
    counts = compute_file_counts(terms)
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    file_counts = [
        FileTermCount(source_file=source_file, count=count)
        for source_file, count in ranked[:top_n]
    ]

    lengths = [len(term.text) for term in terms]
    if not lengths:
        return TermStats(file_counts=file_counts)

    return TermStats(
        term_count=len(terms),
        file_counts=file_counts,
        average_length=round(sum(lengths) / len(lengths), 1),
        max_length=max(lengths),
        min_length=min(lengths),
    )
