"""Go source parsing into call records."""

from parse.treesitter_calls import extract_call_records, parse_file, parse_files

__all__ = [
    "extract_call_records",
    "parse_file",
    "parse_files",
]
