from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from artifacts.models.terms import TermOccurrence, term_locations
from artifacts.utils import _to_dict, _write_csv, _write_json, _write_yaml
from contract.artifacts import (
    CSV_COLUMNS,
    REPORT_FORMAT_SPECS,
    REPORT_FORMATS,
    REPORT_SCHEMA_VERSION,
)
from extract.dedupe import deduplicate
from extract.extractor import TermExtractor
from extract.translations import (
    TranslationMapError,
    filter_untranslated,
    load_translation_map,
)
from parse.treesitter_calls import parse_files
from rules.config import (
    config_base_dir,
    find_config_file,
    load_config,
    resolve_config_path,
    resolve_setting_paths,
    setting_base_dir,
)
from scan.files import find_source_files

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from pathlib import Path

    from artifacts.models.terms import ExtractionSummary, FileError, Term
    from rules.config import ScannerConfig

logger = logging.getLogger(__name__)


@dataclass
class ScanReport:
    """Outcome of one scan: final terms plus the raw extraction bookkeeping."""

    terms: list[Term]
    summary: ExtractionSummary
    errors: list[FileError] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    source_files: list[str] = field(default_factory=list)
    output_path: Path | None = None


def _term_payload(term: Term, include_location: bool) -> dict[str, Any]:
    if include_location:
        return term.model_dump(mode="json")
    payload: dict[str, Any] = {"text": term.text}
    if isinstance(term, TermOccurrence):
        payload["discovered_at"] = term.discovered_at.isoformat()
    return payload


def build_report_document(
    terms: Sequence[Term],
    summary: ExtractionSummary,
    *,
    include_location: bool = True,
    extracted_at: datetime | None = None,
) -> dict[str, Any]:
    """Build the report document shared by the json and yaml formats."""
    if extracted_at is None:
        extracted_at = datetime.now(timezone.utc)
    return {
        "metadata": {
            "schema_version": REPORT_SCHEMA_VERSION,
            "extracted_at": extracted_at.isoformat(),
            "total_terms": len(terms),
            "summary": _to_dict(summary),
        },
        "terms": [_term_payload(term, include_location) for term in terms],
    }


def _csv_rows(terms: Sequence[Term]) -> Iterator[dict[str, Any]]:
    for term in terms:
        discovered_at = (
            term.discovered_at.isoformat() if isinstance(term, TermOccurrence) else None
        )
        for location in term_locations(term):
            yield {
                "text": term.text,
                "source_file": location.source_file,
                "line": location.line,
                "argument_index": location.argument_index,
                "discovered_at": discovered_at,
            }


def write_report(
    path: Path,
    fmt: str,
    terms: Sequence[Term],
    summary: ExtractionSummary,
    *,
    include_location: bool = True,
) -> Path:
    """Serialize terms to ``path`` in the given format."""
    fmt = fmt.lower()
    if fmt not in REPORT_FORMATS:
        msg = f"Unsupported output format: {fmt}"
        raise ValueError(msg)

    path.parent.mkdir(parents=True, exist_ok=True)

    if fmt == "csv":
        _write_csv(path, CSV_COLUMNS, _csv_rows(terms))
        return path

    document = build_report_document(
        terms, summary, include_location=include_location
    )
    if fmt == "yaml":
        _write_yaml(path, document)
    else:
        _write_json(path, document)
    return path


def _default_output_path(
    config: ScannerConfig, fmt: str, root: Path, base_dir: Path
) -> Path:
    """Configured report path, with its suffix following ``fmt`` when it differs."""
    output = config.output
    anchor = setting_base_dir(output, "output_file", root=root, base_dir=base_dir)
    path = resolve_config_path(anchor, output.output_file)
    spec = REPORT_FORMAT_SPECS.get(fmt)
    if spec is None:
        return path
    if fmt != output.format or "output_file" not in output.model_fields_set:
        return path.with_suffix(spec.suffix)
    return path


def generate_report(
    *,
    root: Path,
    config: ScannerConfig | None = None,
    config_path: str | Path | None = None,
    out_file: Path | None = None,
    fmt: str | None = None,
    language: str | None = None,
    exclude_translated: bool = True,
    write_output: bool = True,
) -> ScanReport:
    """Scan a project and produce its untranslated-terms report.

    Args:
        root: Project root; config lookup starts here
        config: Optional preloaded configuration (skips loading)
        config_path: Optional explicit config file
        out_file: Optional report path (default: config output file)
        fmt: Optional report format (default: config output format)
        language: Translation-map language (default: config default language)
        exclude_translated: Drop terms already present in the translation map
        write_output: Write the report file

    Returns:
        ScanReport with the final terms, summary, per-file errors and warnings.
    """
    root = root.resolve()
    config_file = find_config_file(root, config_path)
    if config is None:
        config = load_config(root, config_path)
    base_dir = config_base_dir(root, config_file)

    source_paths = find_source_files(
        root,
        source_dirs=resolve_setting_paths(
            config.scan, "source_dirs", root=root, base_dir=base_dir
        ),
        exclude_dirs=resolve_setting_paths(
            config.scan, "exclude_dirs", root=root, base_dir=base_dir
        ),
        file_extensions=config.scan.file_extensions,
        recursive=config.scan.recursive,
        nested_gitignore=config.scan.nested_gitignore,
    )
    logger.info("found %d source files under %s", len(source_paths), root)

    outcomes = parse_files(source_paths, root)
    extraction = TermExtractor(config).extract_from_files(outcomes)
    terms = deduplicate(extraction.terms, enabled=config.output.deduplicate)

    warnings: list[str] = []
    translation_file = config.translation_file(language)
    if exclude_translated and translation_file:
        translation_path = resolve_config_path(base_dir, translation_file)
        try:
            translation_map = load_translation_map(translation_path)
        except TranslationMapError as exc:
            logger.warning("%s; keeping all terms", exc)
            warnings.append(str(exc))
            translation_map = None
        terms = filter_untranslated(terms, translation_map)

    report = ScanReport(
        terms=terms,
        summary=extraction.summary,
        errors=extraction.errors,
        warnings=warnings,
        source_files=[outcome.file for outcome in outcomes],
    )

    if write_output:
        fmt = (fmt or config.output.format).lower()
        output_path = out_file or _default_output_path(config, fmt, root, base_dir)
        report.output_path = write_report(
            output_path,
            fmt,
            terms,
            extraction.summary,
            include_location=config.output.include_location,
        )
        logger.info("wrote %d terms to %s", len(terms), output_path)

    return report
