"""
Prometheus Metrics — annotation pipeline observability.

Exposes counters and histograms for:
- Entity hits rejected before normalization (by reason)
- Duplicate detections merged
- Entities removed by overlap resolution
- Resolver passes needed to reach a fixed point
- Stage processing latency

Usage
-----
    from abstract_annotator.service.metrics import timed_stage, record_hits_rejected

    with timed_stage("annotation"):
        result = build_annotations(text, hits, config)

    record_hits_rejected("malformed", 2)
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

# Hits dropped before normalization, labelled by reason (domain / malformed).
HITS_REJECTED: Counter = Counter(
    "annotation_hits_rejected_total",
    "Entity hits rejected before normalization",
    ["reason"],
)

# Duplicate detections folded into an existing entity.
DUPLICATES_MERGED: Counter = Counter(
    "annotation_duplicates_merged_total",
    "Duplicate entity detections merged into one entity",
)

# Entities dropped because a longer overlapping entity was kept.
OVERLAPS_REMOVED: Counter = Counter(
    "annotation_overlaps_removed_total",
    "Entities removed by overlap resolution",
)

# Passes the resolver needed to reach a fixed point.
RESOLVER_PASSES: Histogram = Histogram(
    "annotation_resolver_passes",
    "Overlap resolver passes per abstract",
    buckets=(1, 2, 3, 4, 5, 8, 13),
)

# Processing latency per stage (seconds).
STAGE_LATENCY: Histogram = Histogram(
    "annotation_stage_processing_seconds",
    "Processing time per annotation stage in seconds",
    ["stage_name"],
    buckets=(0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0),
)


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------

def record_hits_rejected(reason: str, count: int = 1) -> None:
    """Increment the rejected-hits counter for *reason*."""
    if count > 0:
        HITS_REJECTED.labels(reason=reason).inc(count)


def record_duplicates_merged(count: int) -> None:
    if count > 0:
        DUPLICATES_MERGED.inc(count)


def record_overlaps_removed(count: int) -> None:
    if count > 0:
        OVERLAPS_REMOVED.inc(count)


def record_resolver_passes(passes: int) -> None:
    RESOLVER_PASSES.observe(passes)


@contextmanager
def timed_stage(stage_name: str) -> Generator[None, None, None]:
    """
    Context manager that records stage processing latency.

    Usage::

        with timed_stage("annotation"):
            result = build_annotations(...)
    """
    with STAGE_LATENCY.labels(stage_name=stage_name).time():
        yield
