"""Call-site models produced by source parsing and consumed by term extraction."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class LiteralNode(BaseModel):
    """A literal argument, carried as its raw source token (quotes included)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["literal"] = "literal"
    raw_token: str | None = None


class BinaryNode(BaseModel):
    """A string concatenation (``left + right``)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["binary"] = "binary"
    left: ArgumentNode
    right: ArgumentNode


class OtherNode(BaseModel):
    """Any argument shape that is not resolved to text."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["other"] = "other"
    expr: str | None = None


ArgumentNode = Annotated[
    Union[LiteralNode, BinaryNode, OtherNode],
    Field(discriminator="kind"),
]


class CallRecord(BaseModel):
    """One call expression found in a source file."""

    model_config = ConfigDict(frozen=True)

    function_name: str
    args: list[ArgumentNode] = Field(default_factory=list)
    source_file: str
    line: int | None = None


class ParseSuccess(BaseModel):
    """Parser outcome for a file that yielded call records."""

    kind: Literal["success"] = "success"
    file: str
    call_records: list[CallRecord] = Field(default_factory=list)


class ParseFailure(BaseModel):
    """Parser outcome for a file that could not be read or parsed."""

    kind: Literal["failure"] = "failure"
    file: str
    error: str


FileOutcome = Annotated[
    Union[ParseSuccess, ParseFailure],
    Field(discriminator="kind"),
]


BinaryNode.model_rebuild()
CallRecord.model_rebuild()


__all__ = [
    "ArgumentNode",
    "BinaryNode",
    "CallRecord",
    "FileOutcome",
    "LiteralNode",
    "OtherNode",
    "ParseFailure",
    "ParseSuccess",
]
