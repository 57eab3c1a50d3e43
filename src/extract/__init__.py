"""Term extraction engine: resolution, extraction, merging and filtering."""

from extract.dedupe import deduplicate
from extract.extractor import TermExtractor
from extract.literals import resolve_argument, strip_quotes
from extract.translations import (
    TranslationMapError,
    filter_untranslated,
    is_translated,
    load_translation_map,
)

__all__ = [
    "TermExtractor",
    "TranslationMapError",
    "deduplicate",
    "filter_untranslated",
    "is_translated",
    "load_translation_map",
    "resolve_argument",
    "strip_quotes",
]
