"""
Duplicate Entity Merger.

Collapses detections of the same entity (same text ignoring case, same start
offset) reported by several knowledge bases into one record:

    { text: "SARS-CoV", startPos: 529, uris: ["wd:Q85438966"], labels: ["severe ..."] }
    { text: "SARS-CoV", startPos: 529, uris: ["dbr:SARS-CoV"],  labels: [""] }

become

    { text: "SARS-CoV", startPos: 529,
      uris: ["dbr:SARS-CoV", "wd:Q85438966"], labels: ["", "severe ..."] }

The most recently seen duplicate is prepended, so the primary identifier of
a merged entity is the last one the backend reported.
"""
import logging
from dataclasses import replace
from typing import Dict, List, Tuple

from abstract_annotator.models.entity import Entity

logger = logging.getLogger(__name__)


def merge_duplicate_entities(entities: List[Entity]) -> List[Entity]:
    """
    Merge the uris/labels of entities sharing the same text and start offset.

    Args:
        entities: Normalized entities, any order.

    Returns:
        One entity per distinct (lowercased text, startPos), in first-seen
        order. Sorting by position is left to the caller.
    """
    merged: List[Entity] = []
    index_by_key: Dict[Tuple[str, int], int] = {}

    for entity in entities:
        key = entity.merge_key()
        i = index_by_key.get(key)

        if i is None:
            index_by_key[key] = len(merged)
            merged.append(entity)
            continue

        existing = merged[i]
        merged[i] = replace(
            existing,
            uris=entity.uris + existing.uris,
            labels=entity.labels + existing.labels,
        )

    duplicates = len(entities) - len(merged)
    if duplicates:
        logger.debug("Merged %d duplicate entity detections", duplicates)

    return merged


def sort_by_start_pos(entities: List[Entity]) -> List[Entity]:
    """Stable sort by start offset."""
    return sorted(entities, key=lambda e: e.start_pos)
