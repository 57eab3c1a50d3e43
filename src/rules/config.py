from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import tomllib
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from contract.artifacts import DEFAULT_REPORT_FILE
from rules.functions import DEFAULT_FUNCTION_NAMES
from rules.script import (
    DEFAULT_UNICODE_RANGES,
    MAX_CODE_POINT,
    parse_unicode_range,
)

CONFIG_FILENAME = "i18nscan.toml"

CONFIG_SEARCH_PATHS = (
    CONFIG_FILENAME,
    f".{CONFIG_FILENAME}",
    f"config/{CONFIG_FILENAME}",
)

DEFAULT_LANGUAGE = "zh_cn"

OutputFormat = Literal["json", "csv", "yaml"]


class _StrictModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


class I18nFunction(_StrictModel):
    """A call-site identifier marking user-facing text."""

    name: str = Field(min_length=1, description="Function name, e.g. 't' or 'i18n.T'")
    description: str = Field(default="", description="Free-form note")


class UnicodeRange(_StrictModel):
    """Inclusive code-point range of the target script."""

    low: int
    high: int

    @model_validator(mode="before")
    @classmethod
    def parse_range(cls, v: Any) -> Any:
        if isinstance(v, dict):
            return v
        low, high = parse_unicode_range(v)
        return {"low": low, "high": high}

    @model_validator(mode="after")
    def check_order(self) -> UnicodeRange:
        if not 0 <= self.low <= self.high <= MAX_CODE_POINT:
            msg = f"Invalid Unicode range: {self.low:#x}-{self.high:#x}"
            raise ValueError(msg)
        return self


def _default_ranges() -> list[UnicodeRange]:
    return [UnicodeRange(low=low, high=high) for low, high in DEFAULT_UNICODE_RANGES]


def _default_functions() -> list[I18nFunction]:
    return [I18nFunction(name=name) for name in DEFAULT_FUNCTION_NAMES]


class DetectionConfig(_StrictModel):
    """Target-script detection settings."""

    unicode_ranges: list[UnicodeRange] = Field(
        default_factory=_default_ranges,
        description="Code-point ranges counted as target-script characters",
    )
    min_chars: int = Field(
        default=1,
        ge=1,
        description="Minimum target-script characters for a text to qualify",
    )

    @field_validator("unicode_ranges", mode="after")
    @classmethod
    def default_when_empty(cls, v: list[UnicodeRange]) -> list[UnicodeRange]:
        return v or _default_ranges()


class ScanConfig(_StrictModel):
    """Source discovery settings."""

    source_dirs: list[str] = Field(
        default_factory=lambda: ["."],
        description="Directories to scan, relative to the config file",
    )
    exclude_dirs: list[str] = Field(
        default_factory=lambda: ["vendor", "node_modules"],
        description="Directories to skip, relative to the config file",
    )
    file_extensions: list[str] = Field(
        default_factory=lambda: [".go"],
        description="File suffixes to scan",
    )
    recursive: bool = Field(default=True, description="Descend into subdirectories")
    nested_gitignore: bool = Field(
        default=False,
        description="Compose nested .gitignore files (default: root only)",
    )

    @field_validator("file_extensions", mode="after")
    @classmethod
    def normalize_extensions(cls, v: list[str]) -> list[str]:
        return [ext if ext.startswith(".") else f".{ext}" for ext in v if ext]


class OutputConfig(_StrictModel):
    """Report output settings."""

    output_file: str = Field(
        default=DEFAULT_REPORT_FILE,
        description="Report path, relative to the config file",
    )
    format: OutputFormat = Field(default="json", description="Report format")
    include_location: bool = Field(
        default=True,
        description="Include discovery locations in the report",
    )
    deduplicate: bool = Field(
        default=True,
        description="Merge occurrences of the same text into one term",
    )


class ScannerConfig(_StrictModel):
    """Configuration for i18nscan term extraction."""

    i18n_functions: list[I18nFunction] = Field(
        default_factory=_default_functions,
        description="Translation functions whose literal arguments are extracted",
    )
    translated_files: dict[str, str] = Field(
        default_factory=dict,
        description="Translation map per language: language -> JSON file",
    )
    default_language: str = Field(
        default=DEFAULT_LANGUAGE,
        description="Language whose translation map filters the report",
    )
    scan: ScanConfig = Field(default_factory=ScanConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    detection: DetectionConfig = Field(default_factory=DetectionConfig)

    @field_validator("i18n_functions", mode="before")
    @classmethod
    def validate_i18n_functions(cls, v: Any) -> Any:
        """Accept bare names alongside ``{name, description}`` tables."""
        if v is None:
            return _default_functions()

        if not isinstance(v, list):
            msg = "i18n_functions must be an array"
            raise TypeError(msg)

        normalized: list[Any] = []
        for index, entry in enumerate(v):
            if isinstance(entry, str):
                normalized.append({"name": entry})
            elif isinstance(entry, dict):
                if not entry.get("name"):
                    msg = f"i18n_functions[{index}] is missing a name"
                    raise ValueError(msg)
                normalized.append(entry)
            else:
                normalized.append(entry)
        return normalized

    @property
    def function_names(self) -> list[str]:
        return [function.name for function in self.i18n_functions]

    def translation_file(self, language: str | None = None) -> str | None:
        return self.translated_files.get(language or self.default_language)


class ConfigError(Exception):
    """Raised when a config file is missing, unparsable or invalid."""


def find_config_file(root: Path, config_path: str | Path | None = None) -> Path | None:
    """Locate the config file for ``root``.

    An explicit ``config_path`` must exist; otherwise the standard locations
    under ``root`` are tried in order and ``None`` means "use defaults".
    """
    if config_path is not None:
        explicit = Path(config_path).expanduser()
        if not explicit.is_absolute():
            explicit = Path(root) / explicit
        if not explicit.is_file():
            msg = f"Config file does not exist: {explicit}"
            raise ConfigError(msg)
        return explicit.resolve()

    for candidate in CONFIG_SEARCH_PATHS:
        path = Path(root) / candidate
        if path.is_file():
            return path.resolve()
    return None


def config_base_dir(root: Path, config_file: Path | None) -> Path:
    """Directory that relative paths in the config resolve against."""
    if config_file is None:
        return Path(root).resolve()
    return config_file.parent


def resolve_config_path(base_dir: Path, value: str) -> Path:
    path = Path(value).expanduser()
    if path.is_absolute():
        return path
    return (base_dir / path).resolve()


def setting_base_dir(
    section: BaseModel, field_name: str, *, root: Path, base_dir: Path
) -> Path:
    """Directory a path setting resolves against.

    Values written in the config file resolve against its directory; defaults
    the file never set resolve against the project root.
    """
    if field_name in section.model_fields_set:
        return base_dir
    return Path(root).resolve()


def resolve_setting_paths(
    section: BaseModel, field_name: str, *, root: Path, base_dir: Path
) -> list[Path]:
    """Resolve a list-of-paths setting such as ``scan.source_dirs``."""
    anchor = setting_base_dir(section, field_name, root=root, base_dir=base_dir)
    values = getattr(section, field_name)
    return [resolve_config_path(anchor, value) for value in values]


def load_config(root: Path, config_path: str | Path | None = None) -> ScannerConfig:
    """Load configuration from i18nscan.toml if it exists."""
    path = find_config_file(root, config_path)

    if path is None:
        return ScannerConfig()

    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {path}: {e}"
        raise ConfigError(msg) from e
    except OSError as e:
        msg = f"Failed to read {path}: {e}"
        raise ConfigError(msg) from e

    try:
        return ScannerConfig.model_validate(data)
    except Exception as e:
        msg = f"Invalid config in {path}: {e}"
        raise ConfigError(msg) from e


DEFAULT_CONFIG_TEMPLATE = """\
# i18nscan configuration

default_language = "zh_cn"

# Translation functions whose literal arguments are extracted.
[[i18n_functions]]
name = "t"
description = "basic translation function"

[[i18n_functions]]
name = "i18n.T"
description = "i18n package translation function"

[[i18n_functions]]
name = "Translate"
description = "custom translation function"

# Already-translated text per language (JSON objects: text -> translation).
[translated_files]
zh_cn = "locales/zh-CN.json"

[scan]
source_dirs = ["."]
exclude_dirs = ["vendor", "node_modules"]
file_extensions = [".go"]
recursive = true

[output]
output_file = "extracted_terms.json"
format = "json"
include_location = true
deduplicate = true

[detection]
unicode_ranges = ["U+4E00-U+9FFF", "U+3400-U+4DBF", "U+F900-U+FAFF"]
min_chars = 1
"""


def render_default_config() -> str:
    return DEFAULT_CONFIG_TEMPLATE
