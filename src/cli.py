"""Command-line interface for i18nscan."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from artifacts.summaries.builders import build_term_stats
from artifacts.write import ScanReport, generate_report
from contract.artifacts import REPORT_FORMATS
from contract.validation import validate_setup
from rules.config import CONFIG_FILENAME, ConfigError, render_default_config

EXAMPLE_DIR_NAME = "i18nscan-example"
DEFAULT_LOCALE_FILE = Path("locales") / "zh-CN.json"
VERBOSE_TERM_LIMIT = 10

EXAMPLE_GO_SOURCE = """\
package main

import (
\t"fmt"

\t"github.com/example/i18n"
)

func main() {
\tfmt.Println(t("你好，世界！"))
\tfmt.Println(i18n.T("欢迎使用i18n扫描器"))
\tTranslate("这是一个测试消息")
}

func showMessage() {
\tmsg := t("用户" + "登录成功")
\tfmt.Println(msg)
}
"""

EXAMPLE_TRANSLATIONS = """\
{
  "你好，世界！": "Hello, World!",
  "欢迎使用i18n扫描器": "Welcome to i18n Scanner"
}
"""


def _add_common_paths(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "root",
        nargs="?",
        default=".",
        help="Project root (default: .)",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help=f"Config file (default: {CONFIG_FILENAME} under root)",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="i18nscan",
        description="Extract untranslated target-script terms from translation calls",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    scan_parser = subparsers.add_parser("scan", help="Extract terms and write a report")
    _add_common_paths(scan_parser)
    scan_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Report path (default: config output file)",
    )
    scan_parser.add_argument(
        "--format",
        choices=REPORT_FORMATS,
        default=None,
        help="Report format (default: config output format)",
    )
    scan_parser.add_argument(
        "--language",
        default=None,
        help="Translation map language (default: config default_language)",
    )
    scan_parser.add_argument(
        "--include-translated",
        action="store_true",
        help="Keep terms that already have a translation",
    )
    scan_parser.add_argument(
        "--no-output",
        action="store_true",
        help="Print the summary only, do not write a report",
    )
    scan_parser.add_argument("-v", "--verbose", action="store_true")

    validate_parser = subparsers.add_parser(
        "validate", help="Validate configuration and project layout"
    )
    _add_common_paths(validate_parser)

    init_parser = subparsers.add_parser("init", help="Create a default config")
    init_parser.add_argument(
        "root",
        nargs="?",
        default=".",
        help="Directory to initialize (default: .)",
    )
    init_parser.add_argument(
        "-f", "--force", action="store_true", help="Overwrite existing files"
    )
    init_parser.add_argument(
        "--example",
        action="store_true",
        help=f"Create an example project in {EXAMPLE_DIR_NAME}/",
    )

    stats_parser = subparsers.add_parser("stats", help="Show term statistics")
    _add_common_paths(stats_parser)

    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _resolve_cli_path(value: str | None) -> Path | None:
    if value is None:
        return None
    return Path(value).expanduser().resolve()


def _write_summary(report: ScanReport) -> None:
    summary = report.summary
    sys.stdout.write(f"total files: {summary.total_files}\n")
    sys.stdout.write(f"parsed: {summary.success_files}\n")
    sys.stdout.write(f"failed: {summary.error_files}\n")
    sys.stdout.write(f"extracted terms: {summary.total_terms}\n")
    sys.stdout.write(f"final terms: {len(report.terms)}\n")

    for error in report.errors:
        sys.stderr.write(f"{error.file}: {error.error}\n")
    for warning in report.warnings:
        sys.stderr.write(f"warning: {warning}\n")


def _handle_scan(args: argparse.Namespace, root: Path) -> int:
    try:
        report = generate_report(
            root=root,
            config_path=_resolve_cli_path(args.config),
            out_file=_resolve_cli_path(args.output),
            fmt=args.format,
            language=args.language,
            exclude_translated=not args.include_translated,
            write_output=not args.no_output,
        )
    except ConfigError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2

    _write_summary(report)

    if args.verbose and report.terms:
        for index, term in enumerate(report.terms[:VERBOSE_TERM_LIMIT], 1):
            sys.stdout.write(f"{index}. {term.text}\n")
        remaining = len(report.terms) - VERBOSE_TERM_LIMIT
        if remaining > 0:
            sys.stdout.write(f"... {remaining} more\n")

    if report.output_path is not None:
        sys.stdout.write(f"report: {report.output_path}\n")
    return 0


def _handle_validate(args: argparse.Namespace, root: Path) -> int:
    result = validate_setup(root, _resolve_cli_path(args.config))
    for error in result.errors:
        sys.stderr.write(f"{error.location()}: {error.message}\n")
    for warning in result.warnings:
        sys.stderr.write(f"warning: {warning.location()}: {warning.message}\n")
    if not result.ok:
        return 1

    sys.stdout.write(f"config: {result.config_file or 'defaults'}\n")
    sys.stdout.write(f"source dirs: {result.source_dir_count}\n")
    sys.stdout.write(f"translation files: {result.translated_file_count}\n")
    return 0


def _refuse_overwrite(path: Path) -> int:
    sys.stderr.write(f"error: {path} already exists (use --force to overwrite)\n")
    return 1


def _write_project_files(directory: Path, *, example: bool) -> None:
    directory.mkdir(parents=True, exist_ok=True)
    (directory / CONFIG_FILENAME).write_text(render_default_config(), encoding="utf-8")

    locale_path = directory / DEFAULT_LOCALE_FILE
    locale_path.parent.mkdir(parents=True, exist_ok=True)
    if example:
        locale_path.write_text(EXAMPLE_TRANSLATIONS, encoding="utf-8")
        (directory / "main.go").write_text(EXAMPLE_GO_SOURCE, encoding="utf-8")
    elif not locale_path.exists():
        locale_path.write_text("{}\n", encoding="utf-8")


def _handle_init(args: argparse.Namespace, root: Path) -> int:
    if args.example:
        target = root / EXAMPLE_DIR_NAME
        if target.exists() and not args.force:
            return _refuse_overwrite(target)
        _write_project_files(target, example=True)
        sys.stdout.write(f"created example project: {target}\n")
        return 0

    config_path = root / CONFIG_FILENAME
    if config_path.exists() and not args.force:
        return _refuse_overwrite(config_path)
    _write_project_files(root, example=False)
    sys.stdout.write(f"created {config_path}\n")
    return 0


def _handle_stats(args: argparse.Namespace, root: Path) -> int:
    try:
        report = generate_report(
            root=root,
            config_path=_resolve_cli_path(args.config),
            write_output=False,
        )
    except ConfigError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2

    stats = build_term_stats(report.terms)
    sys.stdout.write(f"terms: {stats.term_count}\n")
    for entry in stats.file_counts:
        sys.stdout.write(f"{entry.source_file}: {entry.count}\n")
    if stats.term_count:
        sys.stdout.write(f"average length: {stats.average_length}\n")
        sys.stdout.write(f"max length: {stats.max_length}\n")
        sys.stdout.write(f"min length: {stats.min_length}\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    _configure_logging(getattr(args, "verbose", False))
    root = Path(args.root).expanduser().resolve()

    if args.command == "scan":
        return _handle_scan(args, root)

    if args.command == "validate":
        return _handle_validate(args, root)

    if args.command == "init":
        return _handle_init(args, root)

    if args.command == "stats":
        return _handle_stats(args, root)

    raise AssertionError


if __name__ == "__main__":
    raise SystemExit(main())
