"""Summary helpers for extracted terms."""

from artifacts.summaries.builders import (
    FileTermCount,
    TermStats,
    build_term_stats,
    compute_file_counts,
)

__all__ = ["FileTermCount", "TermStats", "build_term_stats", "compute_file_counts"]
