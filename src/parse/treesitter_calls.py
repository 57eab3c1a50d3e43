"""Tree-sitter based call-site extraction for Go files."""

from __future__ import annotations

import logging
from pathlib import Path

from tree_sitter import Language, Node, Parser
from tree_sitter_go import language as get_go_language

from artifacts.models.calls import (
    ArgumentNode,
    BinaryNode,
    CallRecord,
    FileOutcome,
    LiteralNode,
    OtherNode,
    ParseFailure,
    ParseSuccess,
)

logger = logging.getLogger(__name__)

_PARSER: Parser | None = None

LITERAL_NODE_TYPES = frozenset(
    {
        "interpreted_string_literal",
        "raw_string_literal",
        "rune_literal",
        "int_literal",
        "float_literal",
        "imaginary_literal",
    }
)


def _get_parser() -> Parser:
    """Initialize and return the Tree-sitter parser with the Go language."""
    global _PARSER
    if _PARSER is None:
        lang = Language(get_go_language())
        _PARSER = Parser(lang)

    return _PARSER


def _decode_node_text(source_bytes: bytes, node: Node) -> str:
    return source_bytes[node.start_byte : node.end_byte].decode("utf8", errors="ignore")


def _normalize_function_name(source_bytes: bytes, function_node: Node | None) -> str:
    if function_node is None:
        return "<complex_expr>"

    if function_node.type == "identifier":
        return _decode_node_text(source_bytes, function_node).strip()

    if function_node.type == "selector_expression":
        operand_node = function_node.child_by_field_name("operand")
        field_node = function_node.child_by_field_name("field")

        normalized_operand = _normalize_function_name(source_bytes, operand_node)
        if field_node is None:
            return "<selector>"

        field_name = _decode_node_text(source_bytes, field_node).strip()
        if normalized_operand.startswith("<") and normalized_operand.endswith(">"):
            return "<selector>"
        return f"{normalized_operand}.{field_name}"

    placeholder_map = {
        "call_expression": "<call>",
        "func_literal": "<func_literal>",
        "index_expression": "<index>",
        "parenthesized_expression": "<parenthesized>",
    }
    return placeholder_map.get(function_node.type, f"<{function_node.type}>")


def _to_argument_node(source_bytes: bytes, node: Node) -> ArgumentNode:
    if node.type in LITERAL_NODE_TYPES:
        return LiteralNode(raw_token=_decode_node_text(source_bytes, node))

    if node.type == "binary_expression":
        operator_node = node.child_by_field_name("operator")
        left_node = node.child_by_field_name("left")
        right_node = node.child_by_field_name("right")
        if (
            operator_node is not None
            and operator_node.type == "+"
            and left_node is not None
            and right_node is not None
        ):
            return BinaryNode(
                left=_to_argument_node(source_bytes, left_node),
                right=_to_argument_node(source_bytes, right_node),
            )

    return OtherNode(expr=node.type)


def _call_arguments(source_bytes: bytes, call_node: Node) -> list[ArgumentNode]:
    arguments_node = call_node.child_by_field_name("arguments")
    if arguments_node is None:
        return []
    return [
        _to_argument_node(source_bytes, child)
        for child in arguments_node.named_children
        if child.type != "comment"
    ]


def _traverse_calls(
    node: Node,
    *,
    source_bytes: bytes,
    source_file: str,
    out_records: list[CallRecord],
) -> None:
    if node.type == "call_expression":
        function_node = node.child_by_field_name("function")
        out_records.append(
            CallRecord(
                function_name=_normalize_function_name(source_bytes, function_node),
                args=_call_arguments(source_bytes, node),
                source_file=source_file,
                line=node.start_point[0] + 1,
            )
        )

    for child in node.children:
        _traverse_calls(
            child,
            source_bytes=source_bytes,
            source_file=source_file,
            out_records=out_records,
        )


def _first_error_line(node: Node) -> int | None:
    if node.type == "ERROR" or node.is_missing:
        return node.start_point[0] + 1
    if not node.has_error:
        return None
    for child in node.children:
        line = _first_error_line(child)
        if line is not None:
            return line
    return node.start_point[0] + 1


def extract_call_records(source_bytes: bytes, source_file: str) -> list[CallRecord]:
    """Extract every call expression from Go source, in document order.

    Syntax errors are tolerated here; see ``parse_file`` for strict parsing.
    """
    tree = _get_parser().parse(source_bytes)
    records: list[CallRecord] = []
    _traverse_calls(
        tree.root_node,
        source_bytes=source_bytes,
        source_file=source_file,
        out_records=records,
    )
    return records


def _relative_source_path(file_path: Path, root: Path) -> str:
    try:
        return file_path.resolve().relative_to(root.resolve()).as_posix()
    except (OSError, ValueError):
        return file_path.as_posix()


def parse_file(file_path: Path, root: Path) -> FileOutcome:
    """Parse one Go file into call records.

    Unreadable files and files with syntax errors yield a ParseFailure.
    """
    source_file = _relative_source_path(file_path, root)

    try:
        source_bytes = file_path.read_bytes()
    except OSError as exc:
        return ParseFailure(file=source_file, error=f"Failed to read file: {exc}")

    tree = _get_parser().parse(source_bytes)
    if tree.root_node.has_error:
        line = _first_error_line(tree.root_node)
        return ParseFailure(file=source_file, error=f"Syntax error at line {line}")

    records: list[CallRecord] = []
    _traverse_calls(
        tree.root_node,
        source_bytes=source_bytes,
        source_file=source_file,
        out_records=records,
    )
    logger.debug("parsed %s: %d calls", source_file, len(records))
    return ParseSuccess(file=source_file, call_records=records)


def parse_files(file_paths: list[Path], root: Path) -> list[FileOutcome]:
    """Parse each file independently; one outcome per path, in input order."""
    outcomes = [parse_file(path, root) for path in file_paths]
    failed = sum(1 for outcome in outcomes if isinstance(outcome, ParseFailure))
    if failed:
        logger.info("%d of %d files failed to parse", failed, len(outcomes))
    return outcomes


__all__ = ["extract_call_records", "parse_file", "parse_files"]
