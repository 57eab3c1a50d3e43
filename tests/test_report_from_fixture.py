from __future__ import annotations

import json
from typing import TYPE_CHECKING

from artifacts import generate_report
from artifacts.models.terms import MultiLocationTerm, TermOccurrence

if TYPE_CHECKING:
    from pathlib import Path


def test_fixture_scan_summary(go_repo: Path) -> None:
    report = generate_report(root=go_repo, write_output=False)

    assert report.source_files == ["internal/handlers/user.go", "main.go"]
    assert report.summary.total_files == 2
    assert report.summary.success_files == 2
    assert report.summary.error_files == 0
    assert report.summary.total_terms == 6
    assert report.errors == []
    assert report.warnings == []
    assert report.output_path is None


def test_fixture_final_terms(go_repo: Path) -> None:
    report = generate_report(root=go_repo, write_output=False)

    assert [term.text for term in report.terms] == [
        "欢迎使用",
        "登录失败",
        "保存成功",
        "你好，",
    ]

    welcome = report.terms[0]
    assert isinstance(welcome, MultiLocationTerm)
    assert [(loc.source_file, loc.line) for loc in welcome.locations] == [
        ("internal/handlers/user.go", 7),
        ("main.go", 11),
    ]

    greeting = report.terms[3]
    assert isinstance(greeting, TermOccurrence)
    assert greeting.source_file == "main.go"
    assert greeting.line == 15
    assert greeting.argument_index == 0


def test_include_translated_keeps_everything(go_repo: Path) -> None:
    report = generate_report(
        root=go_repo, exclude_translated=False, write_output=False
    )

    assert "你好，世界！" in [term.text for term in report.terms]
    assert len(report.terms) == 5


def test_vendor_directory_is_excluded(go_repo: Path) -> None:
    report = generate_report(root=go_repo, write_output=False)

    assert "第三方库" not in [term.text for term in report.terms]
    assert not any(path.startswith("vendor/") for path in report.source_files)


def test_report_written_to_configured_output(go_repo: Path) -> None:
    report = generate_report(root=go_repo)

    expected = (go_repo / "out" / "extracted_terms.json").resolve()
    assert report.output_path == expected
    document = json.loads(expected.read_text(encoding="utf-8"))
    assert document["metadata"]["total_terms"] == 4
    assert document["metadata"]["summary"]["total_terms"] == 6
    assert [term["text"] for term in document["terms"]][0] == "欢迎使用"


def test_syntax_error_file_is_reported_and_skipped(go_repo: Path) -> None:
    (go_repo / "broken.go").write_text(
        'package main\n\nfunc broken() {\n\tt("坏了"\n', encoding="utf-8"
    )

    report = generate_report(root=go_repo, write_output=False)

    assert report.summary.total_files == 3
    assert report.summary.error_files == 1
    assert [error.file for error in report.errors] == ["broken.go"]
    assert "坏了" not in [term.text for term in report.terms]
    assert len(report.terms) == 4


def test_malformed_translation_map_keeps_all_terms(go_repo: Path) -> None:
    (go_repo / "locales" / "zh-CN.json").write_text("{not json", encoding="utf-8")

    report = generate_report(root=go_repo, write_output=False)

    assert len(report.terms) == 5
    assert len(report.warnings) == 1


def test_language_without_translation_file_keeps_all_terms(go_repo: Path) -> None:
    report = generate_report(root=go_repo, language="ja_jp", write_output=False)

    assert len(report.terms) == 5


def test_deduplicate_disabled_in_config(go_repo: Path) -> None:
    config_path = go_repo / "i18nscan.toml"
    config_path.write_text(
        config_path.read_text(encoding="utf-8") + "deduplicate = false\n",
        encoding="utf-8",
    )

    report = generate_report(root=go_repo, write_output=False)

    texts = [term.text for term in report.terms]
    assert texts.count("欢迎使用") == 2
    assert all(isinstance(term, TermOccurrence) for term in report.terms)


def _move_config_to_config_dir(repo_root: Path, content: str) -> None:
    (repo_root / "i18nscan.toml").unlink()
    config_dir = repo_root / "config"
    config_dir.mkdir()
    (config_dir / "i18nscan.toml").write_text(content, encoding="utf-8")


def test_config_dir_values_resolve_against_config_file(go_repo: Path) -> None:
    _move_config_to_config_dir(
        go_repo,
        """
i18n_functions = ["t", "i18n.T", "Translate"]

[translated_files]
zh_cn = "../locales/zh-CN.json"

[scan]
source_dirs = [".."]
exclude_dirs = ["../vendor"]

[output]
output_file = "../out/extracted_terms.json"
""".strip(),
    )

    report = generate_report(root=go_repo)

    assert report.source_files == ["internal/handlers/user.go", "main.go"]
    assert report.summary.total_terms == 6
    assert [term.text for term in report.terms] == [
        "欢迎使用",
        "登录失败",
        "保存成功",
        "你好，",
    ]
    assert report.output_path == (go_repo / "out" / "extracted_terms.json").resolve()


def test_config_dir_defaults_resolve_against_root(go_repo: Path) -> None:
    _move_config_to_config_dir(go_repo, 'default_language = "zh_cn"\n')

    report = generate_report(root=go_repo)

    assert report.source_files == ["internal/handlers/user.go", "main.go"]
    assert len(report.terms) == 5
    assert report.output_path == (go_repo / "extracted_terms.json").resolve()


def test_format_override_swaps_report_suffix(go_repo: Path) -> None:
    report = generate_report(root=go_repo, fmt="csv")

    assert report.output_path == (go_repo / "out" / "extracted_terms.csv").resolve()
    assert report.output_path.read_text(encoding="utf-8").startswith("text,")
    assert not (go_repo / "out" / "extracted_terms.json").exists()


def test_configured_format_names_default_report_file(tmp_path: Path) -> None:
    (tmp_path / "main.go").write_text(
        'package main\n\nvar s = t("你好")\n', encoding="utf-8"
    )
    (tmp_path / "i18nscan.toml").write_text(
        '[output]\nformat = "yaml"\n', encoding="utf-8"
    )

    report = generate_report(root=tmp_path)

    assert report.output_path == (tmp_path / "extracted_terms.yaml").resolve()
    assert [term.text for term in report.terms] == ["你好"]
