from __future__ import annotations

import pytest

from artifacts.models.calls import BinaryNode, LiteralNode, OtherNode
from extract.literals import resolve_argument, strip_quotes


def _lit(token: str | None) -> LiteralNode:
    return LiteralNode(raw_token=token)


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ('"你好"', "你好"),
        ("'欢迎使用'", "欢迎使用"),
        ('""你好""', '"你好"'),
        ("你好", "你好"),
        ("\"你好'", "\"你好'"),
        ('"', '"'),
        ("`你好`", "`你好`"),
        ('""', ""),
    ],
)
def test_literal_strips_exactly_one_layer_of_matching_quotes(
    token: str, expected: str
) -> None:
    assert resolve_argument(_lit(token)) == expected


@pytest.mark.parametrize("token", [None, ""])
def test_literal_without_text_resolves_to_none(token: str | None) -> None:
    assert resolve_argument(_lit(token)) is None


def test_other_and_missing_nodes_resolve_to_none() -> None:
    assert resolve_argument(OtherNode(expr="identifier")) is None
    assert resolve_argument(None) is None


def test_concatenation_joins_left_then_right() -> None:
    node = BinaryNode(left=_lit('"你"'), right=_lit('"好"'))

    assert resolve_argument(node) == "你好"


def test_concatenation_with_one_dynamic_operand_keeps_literal_side() -> None:
    name = OtherNode(expr="identifier")
    left_literal = BinaryNode(left=_lit('"你好，"'), right=name)
    right_literal = BinaryNode(left=name, right=_lit('"先生"'))

    assert resolve_argument(left_literal) == "你好，"
    assert resolve_argument(right_literal) == "先生"


def test_concatenation_without_literals_resolves_to_none() -> None:
    node = BinaryNode(left=OtherNode(), right=OtherNode())

    assert resolve_argument(node) is None


def test_nested_concatenation_resolves_recursively() -> None:
    node = BinaryNode(
        left=BinaryNode(left=_lit('"用户"'), right=OtherNode(expr="identifier")),
        right=BinaryNode(left=_lit('"登录"'), right=_lit("'成功'")),
    )

    assert resolve_argument(node) == "用户登录成功"


def test_concatenation_does_not_filter_by_script() -> None:
    node = BinaryNode(left=_lit('"abc"'), right=_lit('"你好"'))

    assert resolve_argument(node) == "abc你好"


def test_strip_quotes_leaves_short_tokens_untouched() -> None:
    assert strip_quotes("'") == "'"
    assert strip_quotes("") == ""
