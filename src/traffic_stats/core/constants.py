"""Centralized constant definitions for traffic_stats."""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Report sizing
# ---------------------------------------------------------------------------
REPORT_PAGE_SIZE: int = 20  # connections per report page
TOP_ENTRIES: int = 30  # rows in the host and service summaries

# ---------------------------------------------------------------------------
# Unit conversion
# ---------------------------------------------------------------------------
BITS_PER_BYTE: int = 8

__all__ = [
    "REPORT_PAGE_SIZE",
    "TOP_ENTRIES",
    "BITS_PER_BYTE",
]
