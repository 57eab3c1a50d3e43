"""Target-script detection over configurable Unicode ranges."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable

    from rules.config import DetectionConfig

MAX_CODE_POINT = 0x10FFFF

# CJK Unified Ideographs, Extension A, Compatibility Ideographs.
DEFAULT_UNICODE_RANGES: tuple[tuple[int, int], ...] = (
    (0x4E00, 0x9FFF),
    (0x3400, 0x4DBF),
    (0xF900, 0xFAFF),
)

_CODE_POINT_PREFIXES = ("\\u", "\\U", "U+", "u+", "0x", "0X")


def _parse_code_point(value: Any) -> int:
    if isinstance(value, bool):
        msg = f"Invalid code point: {value!r}"
        raise TypeError(msg)
    if isinstance(value, int):
        code_point = value
    elif isinstance(value, str):
        token = value.strip()
        if len(token) == 1:
            code_point = ord(token)
        else:
            for prefix in _CODE_POINT_PREFIXES:
                if token.startswith(prefix):
                    token = token[len(prefix) :]
                    break
            try:
                code_point = int(token, 16)
            except ValueError as exc:
                msg = f"Invalid code point: {value!r}"
                raise ValueError(msg) from exc
    else:
        msg = f"Invalid code point: {value!r}"
        raise TypeError(msg)

    if not 0 <= code_point <= MAX_CODE_POINT:
        msg = f"Code point out of range: {value!r}"
        raise ValueError(msg)
    return code_point


def parse_unicode_range(value: Any) -> tuple[int, int]:
    """Parse an inclusive code-point range.

    Accepts a two-element sequence (``[0x4E00, 0x9FFF]`` or ``["4E00", "9FFF"]``)
    or a string with a ``-`` separator: ``"4E00-9FFF"``, ``"U+4E00-U+9FFF"``,
    ``"\\u4e00-\\u9fff"`` or the literal characters themselves.
    """
    if isinstance(value, str):
        text = value.strip()
        # Search from index 1 so a literal "-" may be the low endpoint.
        separator = text.find("-", 1)
        if separator == -1:
            msg = f"Unicode range must be written as 'low-high': {value!r}"
            raise ValueError(msg)
        low_raw, high_raw = text[:separator], text[separator + 1 :]
    elif isinstance(value, (list, tuple)) and len(value) == 2:
        low_raw, high_raw = value
    else:
        msg = f"Unicode range must be a 'low-high' string or a pair: {value!r}"
        raise TypeError(msg)

    low = _parse_code_point(low_raw)
    high = _parse_code_point(high_raw)
    if low > high:
        msg = f"Unicode range low end exceeds high end: {value!r}"
        raise ValueError(msg)
    return low, high


def build_char_class(ranges: Iterable[tuple[int, int]]) -> re.Pattern[str]:
    """Compile a character class matching any code point in ``ranges``."""
    parts: list[str] = []
    for low, high in ranges:
        if low == high:
            parts.append(re.escape(chr(low)))
        else:
            parts.append(f"{re.escape(chr(low))}-{re.escape(chr(high))}")
    if not parts:
        return build_char_class(DEFAULT_UNICODE_RANGES)
    return re.compile(f"[{''.join(parts)}]")


class ScriptDetector:
    """Counts target-script characters; compiled once and reused."""

    def __init__(
        self,
        unicode_ranges: Iterable[tuple[int, int]] = DEFAULT_UNICODE_RANGES,
        min_chars: int = 1,
    ) -> None:
        self._pattern = build_char_class(unicode_ranges)
        self.min_chars = min_chars if min_chars > 0 else 1

    @classmethod
    def from_config(cls, config: DetectionConfig | None) -> ScriptDetector:
        if config is None:
            return cls()
        return cls(
            [(r.low, r.high) for r in config.unicode_ranges],
            config.min_chars,
        )

    def count(self, text: str) -> int:
        return sum(1 for _ in self._pattern.finditer(text))

    def contains_target_script(self, text: object) -> bool:
        if not text or not isinstance(text, str):
            return False
        return self.count(text) >= self.min_chars


def contains_target_script(text: object, config: DetectionConfig | None = None) -> bool:
    """Return True when ``text`` has at least ``min_chars`` target-script characters."""
    return ScriptDetector.from_config(config).contains_target_script(text)


__all__ = [
    "DEFAULT_UNICODE_RANGES",
    "ScriptDetector",
    "build_char_class",
    "contains_target_script",
    "parse_unicode_range",
]
