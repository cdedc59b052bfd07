"""
Output Builder — assembles the annotated-abstract document for the rendering layer.

Converts the engine result (Segment / Entity records) into the plain JSON
structure described by ANNOTATION_OUTPUT_SCHEMA.
"""
from typing import List, Optional

from abstract_annotator.annotation.pipeline import AnnotationResult
from abstract_annotator.config.constants import ENGINE_VERSION
from abstract_annotator.models.segment import Segment


def unannotated_result(text: str) -> AnnotationResult:
    """Engine-free result: the whole text as a single plain segment."""
    return AnnotationResult(segments=[Segment.plain(text, 0, len(text))])


def build_annotation_output(
    result: AnnotationResult,
    abstract: str,
    article_uri: Optional[str] = None,
    annotations_available: bool = True,
    warnings: Optional[List[str]] = None,
    errors: Optional[List[str]] = None,
    hits_received: Optional[int] = None,
    duration_ms: int = 0,
) -> dict:
    """
    Build the output document.

    Args:
        result: Engine result (or unannotated_result() when entities are missing).
        abstract: Cleaned abstract text the segments were laid over.
        article_uri: Identifier of the article, echoed back.
        annotations_available: False when the entity response could not be used.
        warnings: Non-fatal problems (skipped hits, prefix stripping, ...).
        errors: Upstream failures that disabled the annotations.
        hits_received: Raw record count from the backend; defaults to the
                       number of hits the engine saw.
        duration_ms: Wall-clock time spent annotating.

    Returns:
        Output dict conforming to ANNOTATION_OUTPUT_SCHEMA.
    """
    if hits_received is None:
        hits_received = result.hits_received

    return {
        "article_uri": article_uri,
        "engine_version": ENGINE_VERSION,
        "abstract": abstract,
        "segments": [s.to_dict() for s in result.segments],
        "entities": [e.to_dict() for e in result.entities],
        "diagnostics": {
            "annotations_available": annotations_available,
            "warnings": list(warnings or []),
            "errors": list(errors or []),
        },
        "processing_metadata": {
            "annotation_duration_ms": duration_ms,
            "hits_received": hits_received,
            "hits_accepted": result.hits_accepted,
            "entities_merged": result.entities_merged,
            "entities_resolved": len(result.entities),
            "entities_unplaced": result.entities_unplaced,
            "resolver_passes": result.resolver_passes,
        },
    }
