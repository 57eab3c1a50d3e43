"""Resolution of call arguments to literal text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from artifacts.models.calls import BinaryNode, LiteralNode

if TYPE_CHECKING:
    from artifacts.models.calls import ArgumentNode

QUOTE_CHARS = ('"', "'")


def strip_quotes(token: str) -> str:
    """Strip one layer of matching ``"`` or ``'`` quotes; otherwise return as-is."""
    if len(token) >= 2 and token[0] == token[-1] and token[0] in QUOTE_CHARS:
        return token[1:-1]
    return token


def resolve_argument(node: ArgumentNode | None) -> str | None:
    """Resolve an argument to its text, or None when it has none.

    Concatenations are resolved recursively. When only one operand resolves,
    that operand's text is returned on its own: ``t("你好，" + name)`` yields
    ``"你好，"``. This leniency is deliberate; partially dynamic translation
    calls still surface their literal part.
    """
    if isinstance(node, LiteralNode):
        if not node.raw_token:
            return None
        return strip_quotes(node.raw_token)

    if isinstance(node, BinaryNode):
        left = resolve_argument(node.left)
        right = resolve_argument(node.right)
        if left is not None and right is not None:
            return left + right
        return left if left is not None else right

    return None


__all__ = ["QUOTE_CHARS", "resolve_argument", "strip_quotes"]
