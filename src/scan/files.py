"""Source file discovery for i18nscan."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, cast

from gitignore_parser import parse_gitignore  # type: ignore[import-untyped]

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

logger = logging.getLogger(__name__)


def _is_within(path: Path, directory: Path) -> bool:
    try:
        path.relative_to(directory)
    except ValueError:
        return False
    return True


def _is_within_root(path: Path, root: Path) -> bool:
    """Return True when the resolved path stays within the resolved root."""
    try:
        root_resolved = root.resolve()
        path_resolved = path.resolve()
    except OSError:
        return False

    return _is_within(path_resolved, root_resolved)


def _should_include_file(
    path: Path,
    root: Path,
    file_extensions: Sequence[str],
    excluded_dirs: Sequence[Path],
    gitignore_matches: Callable[[str], bool] | None,
) -> bool:
    """Check if a file should be included based on all filtering rules."""
    if not path.is_file() or path.is_symlink():
        return False

    if path.suffix not in file_extensions:
        return False

    if not _is_within_root(path, root):
        return False

    resolved = path.resolve()
    if any(_is_within(resolved, excluded) for excluded in excluded_dirs):
        return False

    return not (gitignore_matches is not None and gitignore_matches(str(path)))


def _iter_gitignore_files(root: Path) -> list[Path]:
    """Return sorted list of .gitignore files under root (including root)."""
    gitignore_paths = [root / ".gitignore"]
    gitignore_paths.extend(root.rglob(".gitignore"))
    unique_paths = {
        path for path in gitignore_paths if path.is_file() and not path.is_symlink()
    }
    return sorted(unique_paths, key=lambda p: p.relative_to(root).as_posix())


def _build_gitignore_matcher(
    root: Path,
    *,
    nested_gitignore: bool,
) -> Callable[[str], bool] | None:
    if not nested_gitignore:
        gitignore_path = root / ".gitignore"
        if gitignore_path.is_file():
            return cast("Callable[[str], bool]", parse_gitignore(gitignore_path))
        return None

    gitignore_paths = _iter_gitignore_files(root)
    if not gitignore_paths:
        return None

    matchers = [parse_gitignore(path) for path in gitignore_paths]

    def matches(path_str: str) -> bool:
        for matcher in matchers:
            try:
                if matcher(path_str):
                    return True
            except ValueError:
                continue
        return False

    return matches


def find_source_files(
    root: Path,
    *,
    source_dirs: Sequence[str | Path] = (".",),
    exclude_dirs: Sequence[str | Path] = (),
    file_extensions: Sequence[str] = (".go",),
    recursive: bool = True,
    nested_gitignore: bool = False,
) -> list[Path]:
    """Find source files under the configured directories, respecting .gitignore.

    Args:
        root: Project root; relative source and exclude dirs resolve against it,
            and files outside it are skipped
        source_dirs: Directories to search; missing ones are skipped with a warning
        exclude_dirs: Directories whose files are skipped
        file_extensions: File suffixes to keep (e.g. ``.go``)
        recursive: Descend into subdirectories of each source dir
        nested_gitignore: Compose nested .gitignore files instead of the root one

    Returns:
        Unique paths sorted by their POSIX path relative to ``root``.
    """
    root = root.resolve()
    excluded = [(root / directory).resolve() for directory in exclude_dirs]
    gitignore_matches = _build_gitignore_matcher(
        root,
        nested_gitignore=nested_gitignore,
    )

    matched: dict[str, Path] = {}
    for source_dir in source_dirs:
        directory = (root / source_dir).resolve()
        if not directory.is_dir():
            logger.warning("source directory does not exist: %s", directory)
            continue
        if not _is_within(directory, root):
            logger.warning("source directory is outside %s: %s", root, directory)
            continue

        candidates = directory.rglob("*") if recursive else directory.glob("*")
        for path in candidates:
            if not _should_include_file(
                path, root, file_extensions, excluded, gitignore_matches
            ):
                continue
            matched.setdefault(path.relative_to(root).as_posix(), path)

    return [matched[key] for key in sorted(matched)]


__all__ = ["_should_include_file", "find_source_files"]
