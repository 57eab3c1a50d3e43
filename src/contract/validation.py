"""Validation of an i18nscan setup: config file, source dirs, translation files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from rules.config import (
    ConfigError,
    config_base_dir,
    find_config_file,
    load_config,
    resolve_config_path,
    resolve_setting_paths,
)


@dataclass(frozen=True)
class ValidationMessage:
    subject: str
    path: Path | None
    message: str

    def location(self) -> str:
        if self.path is None:
            return self.subject
        return str(self.path)


@dataclass
class ValidationResult:
    errors: list[ValidationMessage] = field(default_factory=list)
    warnings: list[ValidationMessage] = field(default_factory=list)
    config_file: Path | None = None
    source_dir_count: int = 0
    translated_file_count: int = 0

    @property
    def ok(self) -> bool:
        return not self.errors


def validate_setup(
    root: Path, config_path: str | Path | None = None
) -> ValidationResult:
    result = ValidationResult()

    try:
        config_file = find_config_file(root, config_path)
        config = load_config(root, config_path)
    except ConfigError as exc:
        result.errors.append(
            ValidationMessage(
                subject="config",
                path=None if config_path is None else Path(config_path),
                message=str(exc),
            )
        )
        return result

    result.config_file = config_file
    if config_file is None:
        result.warnings.append(
            ValidationMessage(
                subject="config",
                path=None,
                message="No config file found; using defaults.",
            )
        )

    base_dir = config_base_dir(root, config_file)
    source_dirs = resolve_setting_paths(
        config.scan, "source_dirs", root=root, base_dir=base_dir
    )

    for directory in source_dirs:
        if directory.is_dir():
            result.source_dir_count += 1
            continue
        result.warnings.append(
            ValidationMessage(
                subject="source_dirs",
                path=directory,
                message="Source directory does not exist.",
            )
        )

    for language, translated_file in sorted(config.translated_files.items()):
        path = resolve_config_path(base_dir, translated_file)
        if path.is_file():
            result.translated_file_count += 1
            continue
        result.warnings.append(
            ValidationMessage(
                subject=f"translated_files.{language}",
                path=path,
                message="Translation file does not exist.",
            )
        )

    return result


__all__ = ["ValidationMessage", "ValidationResult", "validate_setup"]
