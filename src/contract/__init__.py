"""Stable report contract surface for i18nscan."""

from contract.artifacts import (
    CSV_COLUMNS,
    DEFAULT_REPORT_FILE,
    REPORT_FORMAT_SPECS,
    REPORT_FORMATS,
    REPORT_SCHEMA_VERSION,
    ReportFormatSpec,
)


def __getattr__(name: str) -> object:
    if name in {"ValidationMessage", "ValidationResult", "validate_setup"}:
        from contract.validation import (
            ValidationMessage,
            ValidationResult,
            validate_setup,
        )

        return {
            "ValidationMessage": ValidationMessage,
            "ValidationResult": ValidationResult,
            "validate_setup": validate_setup,
        }[name]

    msg = f"module 'contract' has no attribute {name!r}"
    raise AttributeError(msg)


__all__ = [
    "CSV_COLUMNS",
    "DEFAULT_REPORT_FILE",
    "REPORT_FORMATS",
    "REPORT_FORMAT_SPECS",
    "REPORT_SCHEMA_VERSION",
    "ReportFormatSpec",
    "ValidationMessage",
    "ValidationResult",
    "validate_setup",
]
