"""Merging of term occurrences that share the same text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from artifacts.models.terms import MultiLocationTerm, term_locations

if TYPE_CHECKING:
    from collections.abc import Iterable

    from artifacts.models.terms import Term, TermLocation


def deduplicate(occurrences: Iterable[Term], enabled: bool = True) -> list[Term]:
    """Merge terms keyed by exact text.

    The first occurrence of a text keeps its single-location form; a second
    occurrence promotes it to ``MultiLocationTerm`` seeded with the first
    location, and later occurrences append to ``locations``. Output follows
    first-seen order. With ``enabled=False`` the input is returned as a list.
    """
    if not enabled:
        return list(occurrences)

    first_seen: dict[str, Term] = {}
    merged: dict[str, list[TermLocation]] = {}

    for term in occurrences:
        first = first_seen.get(term.text)
        if first is None:
            first_seen[term.text] = term
            continue

        locations = merged.get(term.text)
        if locations is None:
            locations = merged[term.text] = term_locations(first)
        locations.extend(term_locations(term))

    return [
        MultiLocationTerm(text=text, locations=merged[text]) if text in merged else term
        for text, term in first_seen.items()
    ]


__all__ = ["deduplicate"]
