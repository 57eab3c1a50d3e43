from __future__ import annotations

from pathlib import Path

import pytest

from artifacts.models.calls import (
    BinaryNode,
    LiteralNode,
    OtherNode,
    ParseFailure,
    ParseSuccess,
)
from parse.treesitter_calls import extract_call_records, parse_file, parse_files


def _write_go_file(repo_root: Path, relative_path: str, source: str) -> Path:
    path = repo_root / relative_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(source, encoding="utf-8")
    return path


def _records(body: str):
    source = f"package main\n\nfunc main() {{\n{body}\n}}\n"
    return extract_call_records(source.encode("utf-8"), "main.go")


@pytest.mark.parametrize(
    ("call", "expected_function_name"),
    [
        ('t("x")', "t"),
        ('i18n.T("x")', "i18n.T"),
        ('a.b.c("x")', "a.b.c"),
        ('Translate("x")', "Translate"),
    ],
)
def test_extract_call_records_normalizes_function_names(
    call: str, expected_function_name: str
) -> None:
    records = _records(f"\t{call}")

    assert len(records) == 1
    assert records[0].function_name == expected_function_name


def test_complex_callee_gets_placeholder() -> None:
    records = _records('\tfuncs[0]("x")')

    assert len(records) == 1
    assert records[0].function_name.startswith("<")


def test_string_literal_arguments_keep_raw_token() -> None:
    records = _records('\tt("你好", `raw`, 42)')

    assert records[0].args == [
        LiteralNode(raw_token='"你好"'),
        LiteralNode(raw_token="`raw`"),
        LiteralNode(raw_token="42"),
    ]


def test_plus_concatenation_becomes_binary_node() -> None:
    records = _records('\tt("你好，" + "世界" + name)')

    assert records[0].args == [
        BinaryNode(
            left=BinaryNode(
                left=LiteralNode(raw_token='"你好，"'),
                right=LiteralNode(raw_token='"世界"'),
            ),
            right=OtherNode(expr="identifier"),
        )
    ]


def test_other_expressions_become_other_nodes() -> None:
    records = _records('\tt(name, x - 1, fmt.Sprintf("%d", n))')

    args = records[0].args
    assert [type(arg) for arg in args] == [OtherNode, OtherNode, OtherNode]
    assert args[0] == OtherNode(expr="identifier")


def test_nested_calls_are_recorded_in_document_order() -> None:
    records = _records('\tfmt.Println(t("你好"))\n\ti18n.T("再见")')

    assert [record.function_name for record in records] == [
        "fmt.Println",
        "t",
        "i18n.T",
    ]
    assert [record.line for record in records] == [4, 4, 5]
    assert all(record.source_file == "main.go" for record in records)


def test_comments_between_arguments_are_ignored() -> None:
    records = _records('\tt("你好" /* greeting */, "x")')

    assert records[0].args == [
        LiteralNode(raw_token='"你好"'),
        LiteralNode(raw_token='"x"'),
    ]


def test_parse_file_returns_relative_source_path(tmp_path: Path) -> None:
    repo_root = tmp_path / "repo"
    file_path = _write_go_file(
        repo_root,
        "internal/handlers/user.go",
        'package handlers\n\nfunc Hello() string {\n\treturn t("你好")\n}\n',
    )

    outcome = parse_file(file_path, repo_root)

    assert isinstance(outcome, ParseSuccess)
    assert outcome.file == "internal/handlers/user.go"
    assert [record.source_file for record in outcome.call_records] == [
        "internal/handlers/user.go"
    ]
    assert outcome.call_records[0].line == 4


def test_parse_file_reports_syntax_errors(tmp_path: Path) -> None:
    repo_root = tmp_path / "repo"
    file_path = _write_go_file(
        repo_root, "broken.go", 'package main\n\nfunc main() {\n\tt("你好"\n'
    )

    outcome = parse_file(file_path, repo_root)

    assert isinstance(outcome, ParseFailure)
    assert outcome.file == "broken.go"
    assert outcome.error.startswith("Syntax error at line")


def test_parse_file_reports_unreadable_files(tmp_path: Path) -> None:
    repo_root = tmp_path / "repo"
    repo_root.mkdir()

    outcome = parse_file(repo_root / "missing.go", repo_root)

    assert isinstance(outcome, ParseFailure)
    assert outcome.error.startswith("Failed to read file")


def test_parse_files_keeps_input_order_and_isolates_failures(tmp_path: Path) -> None:
    repo_root = tmp_path / "repo"
    good = _write_go_file(repo_root, "b.go", 'package main\n\nvar s = t("好")\n')
    bad = _write_go_file(repo_root, "a.go", "package main\n\nfunc {\n")

    outcomes = parse_files([good, bad], repo_root)

    assert [outcome.file for outcome in outcomes] == ["b.go", "a.go"]
    assert isinstance(outcomes[0], ParseSuccess)
    assert isinstance(outcomes[1], ParseFailure)
