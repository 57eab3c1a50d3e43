"""Term extraction from parsed call records."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from artifacts.models.calls import ParseFailure
from artifacts.models.terms import (
    ExtractionResult,
    ExtractionSummary,
    FileError,
    TermOccurrence,
)
from extract.literals import resolve_argument
from rules.functions import FunctionMatcher
from rules.script import ScriptDetector

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from artifacts.models.calls import CallRecord, FileOutcome
    from rules.config import ScannerConfig

logger = logging.getLogger(__name__)


class TermExtractor:
    """Selects translation calls and emits their target-script arguments."""

    def __init__(
        self,
        config: ScannerConfig | None = None,
        *,
        matcher: FunctionMatcher | None = None,
        detector: ScriptDetector | None = None,
    ) -> None:
        self.matcher = matcher or FunctionMatcher.from_config(config)
        self.detector = detector or ScriptDetector.from_config(
            config.detection if config is not None else None
        )

    def extract_from_file(
        self, call_records: Iterable[CallRecord]
    ) -> list[TermOccurrence]:
        """Return one occurrence per qualifying argument, in call order.

        Arguments that do not resolve to text, or whose text lacks enough
        target-script characters, are skipped.
        """
        occurrences: list[TermOccurrence] = []
        for record in call_records:
            if not self.matcher.matches(record.function_name):
                continue
            for index, arg in enumerate(record.args):
                text = resolve_argument(arg)
                if not self.detector.contains_target_script(text):
                    continue
                occurrences.append(
                    TermOccurrence(
                        text=text,
                        source_file=record.source_file,
                        argument_index=index,
                        line=record.line,
                    )
                )
        return occurrences

    def extract_from_files(
        self, file_outcomes: Sequence[FileOutcome]
    ) -> ExtractionResult:
        """Extract occurrences from every file, isolating per-file failures.

        Occurrences are returned in file order and are not deduplicated;
        ``summary.total_terms`` counts them as returned.
        """
        terms: list[TermOccurrence] = []
        errors: list[FileError] = []
        summary = ExtractionSummary(total_files=len(file_outcomes))

        for outcome in file_outcomes:
            if isinstance(outcome, ParseFailure):
                logger.debug("skipping %s: %s", outcome.file, outcome.error)
                errors.append(FileError(file=outcome.file, error=outcome.error))
                summary.error_files += 1
                continue

            try:
                file_terms = self.extract_from_file(outcome.call_records)
            except Exception as exc:  # noqa: BLE001
                logger.debug("extraction failed for %s", outcome.file, exc_info=True)
                errors.append(FileError(file=outcome.file, error=str(exc)))
                summary.error_files += 1
                continue

            terms.extend(file_terms)
            summary.success_files += 1
            summary.total_terms += len(file_terms)

        return ExtractionResult(terms=terms, errors=errors, summary=summary)


__all__ = ["TermExtractor"]
