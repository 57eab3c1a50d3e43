"""Report contract definitions.

Filenames, formats and column layout that downstream tooling relies on.
"""

from __future__ import annotations

from dataclasses import dataclass

# Schema version of the extracted-terms report.
REPORT_SCHEMA_VERSION = 1

DEFAULT_REPORT_FILE = "extracted_terms.json"

CSV_COLUMNS: tuple[str, ...] = (
    "text",
    "source_file",
    "line",
    "argument_index",
    "discovered_at",
)


@dataclass(frozen=True)
class ReportFormatSpec:
    """Specification for one report serialization."""

    format: str
    suffix: str


REPORT_FORMAT_SPECS: dict[str, ReportFormatSpec] = {
    "json": ReportFormatSpec(format="json", suffix=".json"),
    "yaml": ReportFormatSpec(format="yaml", suffix=".yaml"),
    "csv": ReportFormatSpec(format="csv", suffix=".csv"),
}

REPORT_FORMATS: tuple[str, ...] = tuple(REPORT_FORMAT_SPECS)
