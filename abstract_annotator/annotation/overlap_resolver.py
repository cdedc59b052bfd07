"""
Overlap Resolver — reduces start-sorted entities to a non-overlapping cover.

Rules, applied to adjacent pairs in a single left-to-right pass:
1. No overlap (second starts after first ends) → keep first, move by one
2. Overlap → keep the longest text, the second one on a tie, move by two

A single pass only sees adjacent pairs, so chains of three or more mutually
overlapping entities are collapsed by repeating the pass until the list
stops shrinking.
"""
import logging
from typing import List, Tuple

from abstract_annotator.models.entity import Entity

logger = logging.getLogger(__name__)


def _keep_longest(first: Entity, second: Entity) -> Entity:
    if first.span_length() > second.span_length():
        return first
    return second


def remove_overlaps_single_pass(
    entities: List[Entity],
    keep_trailing: bool = True,
) -> List[Entity]:
    """
    One pairwise scan over entities sorted by start_pos.

    Args:
        entities: Entities sorted by ascending start_pos.
        keep_trailing: When the scan stops on the last element without having
            compared it, emit it (default). False reproduces the legacy scan
            that silently dropped that element.

    Returns:
        New list; overlapping adjacent pairs are reduced to one entity.
    """
    kept: List[Entity] = []

    idx = 0
    while idx < len(entities) - 1:
        first = entities[idx]
        second = entities[idx + 1]
        if second.start_pos > first.end_pos:
            kept.append(first)
            idx += 1
        else:
            kept.append(_keep_longest(first, second))
            idx += 2

    if keep_trailing and idx == len(entities) - 1:
        kept.append(entities[idx])

    return kept


def resolve_overlaps_with_passes(entities: List[Entity]) -> Tuple[List[Entity], int]:
    """
    Repeat the single pass until a pass removes nothing.

    Every pass that finds an overlap removes at least one entity, so the loop
    ends after at most len(entities) + 1 passes.

    Returns:
        (resolved entities, number of passes run)
    """
    current = list(entities)
    passes = 0

    for _ in range(len(entities) + 1):
        reduced = remove_overlaps_single_pass(current)
        passes += 1
        if len(reduced) == len(current):
            break
        current = reduced

    logger.debug(
        "Overlap resolution: %d → %d entities in %d passes",
        len(entities), len(current), passes,
    )
    return current, passes


def resolve_overlaps(entities: List[Entity]) -> List[Entity]:
    """Non-overlapping, start-ordered subset of start-sorted entities."""
    resolved, _ = resolve_overlaps_with_passes(entities)
    return resolved
