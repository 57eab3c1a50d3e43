"""Translation-map loading and filtering of already-translated terms."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import orjson

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from artifacts.models.terms import Term

logger = logging.getLogger(__name__)


class TranslationMapError(Exception):
    """Raised when a translation file exists but cannot be used."""


def load_translation_map(path: Path | None) -> dict[str, Any] | None:
    """Load a ``text -> translation`` JSON object.

    Returns None when no path is given or the file does not exist. Raises
    TranslationMapError when the file is unreadable, is not valid JSON, or does
    not hold a JSON object.
    """
    if path is None or not path.exists():
        logger.debug("no translation map at %s", path)
        return None

    try:
        data = orjson.loads(path.read_bytes())
    except OSError as exc:
        msg = f"Failed to read translation file {path}: {exc}"
        raise TranslationMapError(msg) from exc
    except orjson.JSONDecodeError as exc:
        msg = f"Invalid JSON in translation file {path}: {exc}"
        raise TranslationMapError(msg) from exc

    if not isinstance(data, dict):
        msg = f"Translation file {path} must hold a JSON object"
        raise TranslationMapError(msg)
    return data


def is_translated(text: str, translation_map: Mapping[str, Any]) -> bool:
    """True when the map has an entry for ``text`` that is non-blank."""
    translation = translation_map.get(text)
    return isinstance(translation, str) and translation.strip() != ""


def filter_untranslated(
    terms: Iterable[Term],
    translation_map: Mapping[str, Any] | None,
) -> list[Term]:
    """Drop terms whose text already has a non-blank translation.

    A missing map leaves the terms unchanged.
    """
    if translation_map is None:
        return list(terms)
    if not isinstance(translation_map, Mapping):
        logger.warning(
            "ignoring translation map of type %s", type(translation_map).__name__
        )
        return list(terms)
    return [term for term in terms if not is_translated(term.text, translation_map)]


__all__ = [
    "TranslationMapError",
    "filter_untranslated",
    "is_translated",
    "load_translation_map",
]
