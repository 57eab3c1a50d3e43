from __future__ import annotations

from typing import TYPE_CHECKING

from contract.validation import validate_setup

if TYPE_CHECKING:
    from pathlib import Path


def test_valid_fixture_setup(go_repo: Path) -> None:
    result = validate_setup(go_repo)

    assert result.ok
    assert result.warnings == []
    assert result.config_file == (go_repo / "i18nscan.toml").resolve()
    assert result.source_dir_count == 1
    assert result.translated_file_count == 1


def test_missing_config_is_a_warning(tmp_path: Path) -> None:
    result = validate_setup(tmp_path)

    assert result.ok
    assert result.config_file is None
    assert [warning.subject for warning in result.warnings] == ["config"]


def test_invalid_config_is_an_error(tmp_path: Path) -> None:
    (tmp_path / "i18nscan.toml").write_text("unknown = 1\n", encoding="utf-8")

    result = validate_setup(tmp_path)

    assert not result.ok
    assert result.errors[0].subject == "config"


def test_missing_explicit_config_is_an_error(tmp_path: Path) -> None:
    result = validate_setup(tmp_path, tmp_path / "nope.toml")

    assert not result.ok
    assert result.errors[0].path == tmp_path / "nope.toml"


def test_missing_dirs_and_translation_files_are_warnings(go_repo: Path) -> None:
    (go_repo / "locales" / "zh-CN.json").unlink()
    config_path = go_repo / "i18nscan.toml"
    config_path.write_text(
        config_path.read_text(encoding="utf-8").replace(
            'source_dirs = ["."]', 'source_dirs = [".", "cmd"]'
        ),
        encoding="utf-8",
    )

    result = validate_setup(go_repo)

    assert result.ok
    assert sorted(warning.subject for warning in result.warnings) == [
        "source_dirs",
        "translated_files.zh_cn",
    ]
    assert result.source_dir_count == 1
    assert result.translated_file_count == 0
