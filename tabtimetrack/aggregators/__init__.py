"""Aggregators module for grouping parsed time lines into report buckets."""

from tabtimetrack.aggregators.summary_aggregator import (
    SummaryResult,
    sort_deduplicate,
    sum_lines,
)

__all__ = [
    "SummaryResult",
    "sort_deduplicate",
    "sum_lines",
]
