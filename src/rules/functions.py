"""Translation-function matching."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from rules.config import ScannerConfig

DEFAULT_FUNCTION_NAMES: tuple[str, ...] = ("t", "i18n.T", "Translate")


class FunctionMatcher:
    """Exact, case-sensitive, whole-string match against configured names.

    ``i18n.T`` matches only the configured entry ``i18n.T``; neither ``T`` nor
    ``X.i18n.T`` does.
    """

    def __init__(self, function_names: Iterable[str] = DEFAULT_FUNCTION_NAMES) -> None:
        self._names = frozenset(name for name in function_names if name)

    @classmethod
    def from_config(cls, config: ScannerConfig | None) -> FunctionMatcher:
        if config is None:
            return cls()
        return cls(config.function_names)

    @property
    def names(self) -> frozenset[str]:
        return self._names

    def matches(self, function_name: object) -> bool:
        if not function_name or not isinstance(function_name, str):
            return False
        return function_name in self._names


def is_target_function(name: object, config: ScannerConfig | None = None) -> bool:
    """Return True when ``name`` is one of the configured translation functions."""
    return FunctionMatcher.from_config(config).matches(name)


__all__ = ["DEFAULT_FUNCTION_NAMES", "FunctionMatcher", "is_target_function"]
