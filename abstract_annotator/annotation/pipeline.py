"""
Entity Annotation Pipeline — orchestrates Filter + Normalize + Merge + Resolve + Annotate.

Pipeline:
    1. Domain filter (allow-list from AnnotationConfig)
    2. Normalization (uris/labels lists, recomputed endPos)
    3. Duplicate merge (same text ignoring case, same startPos)
    4. Stable sort by startPos
    5. Overlap resolution (iterated to a fixed point)
    6. Segment layout over the abstract text

Every stage returns a new list; nothing is mutated in place, so running the
pipeline twice on the same input gives identical output.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from abstract_annotator.annotation.annotator import annotate_text
from abstract_annotator.annotation.merger import merge_duplicate_entities, sort_by_start_pos
from abstract_annotator.annotation.normalizer import filter_hits_by_domain, normalize_hits
from abstract_annotator.annotation.overlap_resolver import resolve_overlaps_with_passes
from abstract_annotator.models.annotation_config import AnnotationConfig
from abstract_annotator.models.backend_io import RawEntityHit
from abstract_annotator.models.entity import Entity
from abstract_annotator.models.segment import Segment

logger = logging.getLogger(__name__)


@dataclass
class AnnotationResult:
    """Output of one engine run plus the stage counts reported downstream."""

    segments: List[Segment]
    entities: List[Entity] = field(default_factory=list)
    hits_received: int = 0
    hits_accepted: int = 0
    entities_merged: int = 0
    entities_unplaced: int = 0
    resolver_passes: int = 0

    @property
    def duplicates_merged(self) -> int:
        return self.hits_accepted - self.entities_merged

    @property
    def overlaps_removed(self) -> int:
        return self.entities_merged - len(self.entities) - self.entities_unplaced


def _log_stage(config: AnnotationConfig, title: str, entities: List[Entity]) -> None:
    if not config.log_stages:
        return
    logger.info("------------------------- %s: %d entities", title, len(entities))
    for entity in entities:
        logger.info("  %r", entity)


def build_annotations(
    text: str,
    hits: List[RawEntityHit],
    config: Optional[AnnotationConfig] = None,
) -> AnnotationResult:
    """
    Full annotation engine run over one abstract.

    Args:
        text: Abstract text (already cleaned, see clean_abstract_text).
        hits: Parsed entity hits from the backend.
        config: Domain allow-list and stage logging. Defaults to accepting
                every domain without stage logging.

    Returns:
        AnnotationResult with segments reconstructing text exactly.
    """
    if config is None:
        config = AnnotationConfig()

    # 1. Domain filter
    accepted = filter_hits_by_domain(hits, config)

    # 2. Normalize
    normalized = normalize_hits(accepted)
    _log_stage(config, "Retrieved entities", sort_by_start_pos(normalized))

    # 3-4. Merge duplicates, then sort by position
    merged = sort_by_start_pos(merge_duplicate_entities(normalized))
    _log_stage(config, "Grouped same entities", merged)

    # 5. Resolve overlaps
    resolved, passes = resolve_overlaps_with_passes(merged)
    _log_stage(config, "Removed overlapping entities", resolved)

    # 6. Layout
    segments = annotate_text(text, resolved)
    placed_starts = {s.start for s in segments if s.is_entity}
    placed = [e for e in resolved if e.start_pos in placed_starts]

    logger.info(
        "Annotated abstract: %d hits → %d accepted → %d merged → %d kept (%d passes)",
        len(hits), len(accepted), len(merged), len(resolved), passes,
    )

    return AnnotationResult(
        segments=segments,
        entities=placed,
        hits_received=len(hits),
        hits_accepted=len(accepted),
        entities_merged=len(merged),
        resolver_passes=passes,
        entities_unplaced=len(resolved) - len(placed),
    )
