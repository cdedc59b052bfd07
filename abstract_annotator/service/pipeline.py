"""
Pipeline Orchestrator — main entry point for annotating one article abstract.

Executes the 5-stage flow:
    1. Metadata validation + abstract cleanup
    2. Entity response validation (malformed hits skipped)
    3. Annotation engine (filter, normalize, merge, resolve, layout)
    4. Metrics
    5. Output assembly + schema check

A missing or unusable entity response never fails the call: the abstract is
returned as one plain segment with annotations_available = False.
"""
import logging
import time
from typing import List, Optional

from abstract_annotator.annotation.pipeline import AnnotationResult, build_annotations
from abstract_annotator.config.constants import REJECT_DOMAIN, REJECT_MALFORMED
from abstract_annotator.models.annotation_config import AnnotationConfig
from abstract_annotator.service.abstract_text import clean_abstract_text
from abstract_annotator.service.metrics import (
    record_duplicates_merged,
    record_hits_rejected,
    record_overlaps_removed,
    record_resolver_passes,
    timed_stage,
)
from abstract_annotator.service.output_builder import (
    build_annotation_output,
    unannotated_result,
)
from abstract_annotator.service.validation import (
    validate_annotation_output,
    validate_entity_response,
    validate_metadata_response,
)

logger = logging.getLogger(__name__)


def _record_result_metrics(result: AnnotationResult) -> None:
    record_hits_rejected(REJECT_DOMAIN, result.hits_received - result.hits_accepted)
    record_duplicates_merged(result.duplicates_merged)
    record_overlaps_removed(result.overlaps_removed)
    record_resolver_passes(result.resolver_passes)


def annotate_abstract(
    metadata_response: dict | str | None,
    entity_response: dict | str | None,
    config: Optional[AnnotationConfig] = None,
    article_uri: Optional[str] = None,
) -> dict:
    """
    Annotate the abstract of one article with its named entities.

    Args:
        metadata_response: Backend article-metadata response ({"result": [{"abs": ...}]}).
        entity_response: Backend named-entities response ({"result": [hit, ...]}).
        config: Engine configuration. Defaults to AnnotationConfig.from_settings().
        article_uri: Article identifier echoed in the output.

    Returns:
        Output dict conforming to ANNOTATION_OUTPUT_SCHEMA.

    Raises:
        ValueError: If the assembled output does not match its schema.
    """
    start_time = time.monotonic()

    if config is None:
        config = AnnotationConfig.from_settings()

    warnings: List[str] = []
    errors: List[str] = []

    # ==================================================================
    # Stage 1: Abstract text
    # ==================================================================
    metadata_result = validate_metadata_response(metadata_response)
    warnings.extend(metadata_result.warnings)

    if metadata_result.valid:
        abstract = clean_abstract_text(metadata_result.data.abstract)
    else:
        logger.error("Article metadata unavailable: %s", metadata_result.errors)
        errors.extend(f"metadata: {e}" for e in metadata_result.errors)
        abstract = ""

    # ==================================================================
    # Stage 2: Entity hits
    # ==================================================================
    entity_result = validate_entity_response(entity_response)
    warnings.extend(entity_result.warnings)
    annotations_available = entity_result.valid

    # ==================================================================
    # Stage 3-4: Engine + metrics
    # ==================================================================
    if annotations_available:
        skipped = len(entity_result.warnings)
        record_hits_rejected(REJECT_MALFORMED, skipped)

        with timed_stage("annotation"):
            result = build_annotations(abstract, entity_result.data, config)

        _record_result_metrics(result)
        hits_received = result.hits_received + skipped
    else:
        logger.warning("No annotations available: %s", entity_result.errors)
        errors.extend(f"entities: {e}" for e in entity_result.errors)
        result = unannotated_result(abstract)
        hits_received = 0

    # ==================================================================
    # Stage 5: Output
    # ==================================================================
    elapsed_ms = int((time.monotonic() - start_time) * 1000)

    output = build_annotation_output(
        result,
        abstract,
        article_uri=article_uri,
        annotations_available=annotations_available,
        warnings=warnings,
        errors=errors,
        hits_received=hits_received,
        duration_ms=elapsed_ms,
    )

    output_check = validate_annotation_output(output)
    if not output_check.valid:
        logger.error("Annotation output failed validation: %s", output_check.errors)
        raise ValueError(f"Annotation output failed validation: {output_check.errors}")

    return output
