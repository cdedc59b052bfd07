"""
Text Annotator — lays resolved entities over the abstract text.

Produces the ordered plain/entity segments consumed by the rendering layer.
Concatenating the text of all segments gives back the source text.
"""
import logging
from typing import List

from abstract_annotator.config.constants import SEGMENT_ENTITY
from abstract_annotator.models.entity import Entity
from abstract_annotator.models.segment import Segment

logger = logging.getLogger(__name__)


def annotate_text(text: str, entities: List[Entity]) -> List[Segment]:
    """
    Split text into plain runs and highlighted entity spans.

    For each entity: a plain segment for [cursor, start_pos) (possibly empty),
    then an entity segment for [start_pos, end_pos]. A final plain segment
    covers whatever follows the last entity.

    Args:
        text: Abstract text the entity offsets refer to.
        entities: Sorted, non-overlapping entities (see resolve_overlaps).

    Returns:
        Segments in text order.
    """
    segments: List[Segment] = []
    cursor = 0

    for entity in entities:
        if entity.start_pos < cursor or entity.end_pos >= len(text):
            logger.warning(
                "Skipping entity '%s' at [%d,%d]: outside the text or before offset %d",
                entity.text, entity.start_pos, entity.end_pos, cursor,
            )
            continue

        segments.append(Segment.plain(text, cursor, entity.start_pos))

        end = entity.end_pos + 1
        segments.append(
            Segment(
                kind=SEGMENT_ENTITY,
                # Literal text at the offsets, the entity text may differ in case
                text=text[entity.start_pos:end],
                start=entity.start_pos,
                end=end,
                entity_text=entity.text,
                uris=entity.uris,
                labels=entity.labels,
            )
        )
        cursor = end

    segments.append(Segment.plain(text, cursor, len(text)))
    return segments


def segments_to_text(segments: List[Segment]) -> str:
    """Concatenate segment texts, ignoring markup."""
    return "".join(segment.text for segment in segments)
