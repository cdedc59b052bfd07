"""
Entity Normalizer — raw backend detections to canonical Entity records.

Domain filtering runs first: only hits whose identifier belongs to one of the
configured knowledge bases reach normalization.
"""
import logging
from typing import List

from abstract_annotator.models.annotation_config import AnnotationConfig
from abstract_annotator.models.backend_io import RawEntityHit
from abstract_annotator.models.entity import Entity

logger = logging.getLogger(__name__)


def filter_hits_by_domain(
    hits: List[RawEntityHit],
    config: AnnotationConfig,
) -> List[RawEntityHit]:
    """
    Keep only the hits whose uri contains one of the allowed domain substrings.

    Args:
        hits: Parsed entity hits in backend order.
        config: Carries the domain allow-list; an empty list accepts all hits.

    Returns:
        Accepted hits, order preserved.
    """
    accepted = [hit for hit in hits if config.accepts(hit.uri)]

    rejected = len(hits) - len(accepted)
    if rejected:
        logger.info("Domain filter rejected %d of %d entity hits", rejected, len(hits))

    return accepted


def normalize_hit(hit: RawEntityHit) -> Entity:
    """Turn one hit into an Entity with single-element uris/labels lists."""
    return Entity(
        text=hit.text,
        start_pos=hit.start_pos,
        uris=(hit.uri,),
        labels=(hit.label or "",),
    )


def normalize_hits(hits: List[RawEntityHit]) -> List[Entity]:
    return [normalize_hit(hit) for hit in hits]
