"""Report generation entry points."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from artifacts.write import ScanReport
    from rules.config import ScannerConfig


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
    """Generate a report via lazy import to avoid package import cycles."""
    from artifacts.write import generate_report as _generate_report

    return _generate_report(
        root=root,
        config=config,
        config_path=config_path,
        out_file=out_file,
        fmt=fmt,
        language=language,
        exclude_translated=exclude_translated,
        write_output=write_output,
    )


__all__ = ["generate_report"]
