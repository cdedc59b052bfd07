"""
Validation — backend responses in, annotation output document out.

Implements:
- JSON parse (responses may arrive as raw strings)
- Envelope conformance (jsonschema)
- Record-level parsing of entity hits (pydantic); bad records are skipped
- Output document conformance (jsonschema)
"""
import json
import logging
from typing import List

from jsonschema import ValidationError, validate
from pydantic import ValidationError as RecordValidationError

from abstract_annotator.config.schemas import (
    ANNOTATION_OUTPUT_SCHEMA,
    ENTITY_RESPONSE_SCHEMA,
    METADATA_RESPONSE_SCHEMA,
)
from abstract_annotator.models.backend_io import ArticleMetadata, RawEntityHit
from abstract_annotator.models.validation import ValidationResult

logger = logging.getLogger(__name__)


# ======================================================================
# Internal helpers
# ======================================================================

def _parse_json(response: str | dict | None, errors: List[str]) -> dict | None:
    if response is None:
        errors.append("No response received")
        return None
    if isinstance(response, dict):
        return response
    try:
        return json.loads(response)
    except json.JSONDecodeError as e:
        errors.append(f"Invalid JSON: {e}")
        return None


def _describe_record_error(index: int, record: dict, exc: RecordValidationError) -> str:
    fields = sorted({".".join(str(p) for p in err["loc"]) for err in exc.errors()})
    text = record.get("entityText", "?") if isinstance(record, dict) else "?"
    return f"entity hit #{index} ('{text}') skipped: invalid {fields}"


# ======================================================================
# Public API
# ======================================================================

def validate_entity_response(response: str | dict | None) -> ValidationResult:
    """
    Validate the named-entities response and parse its records.

    Stages:
        1. JSON parse
        2. Envelope schema ({"result": [...]})
        3. Per-record parsing into RawEntityHit; malformed records are
           reported as warnings and left out

    Returns:
        ValidationResult whose data is the list of parsed hits. valid is
        False only when the response itself is unusable.
    """
    errors: List[str] = []
    warnings: List[str] = []

    data = _parse_json(response, errors)
    if data is None:
        return ValidationResult(valid=False, errors=errors, warnings=warnings)

    try:
        validate(instance=data, schema=ENTITY_RESPONSE_SCHEMA)
    except ValidationError as e:
        errors.append(f"Schema violation: {e.message}")
        return ValidationResult(valid=False, errors=errors, warnings=warnings)

    hits: List[RawEntityHit] = []
    for index, record in enumerate(data["result"]):
        try:
            hits.append(RawEntityHit.model_validate(record))
        except RecordValidationError as e:
            message = _describe_record_error(index, record, e)
            logger.warning(message)
            warnings.append(message)

    return ValidationResult(valid=True, errors=errors, warnings=warnings, data=hits)


def validate_metadata_response(response: str | dict | None) -> ValidationResult:
    """
    Validate the article-metadata response.

    Returns:
        ValidationResult whose data is the ArticleMetadata of the first result.
    """
    errors: List[str] = []
    warnings: List[str] = []

    data = _parse_json(response, errors)
    if data is None:
        return ValidationResult(valid=False, errors=errors, warnings=warnings)

    try:
        validate(instance=data, schema=METADATA_RESPONSE_SCHEMA)
    except ValidationError as e:
        errors.append(f"Schema violation: {e.message}")
        return ValidationResult(valid=False, errors=errors, warnings=warnings)

    if len(data["result"]) > 1:
        warnings.append(f"{len(data['result'])} metadata records received, using the first")

    metadata = ArticleMetadata.model_validate(data["result"][0])
    if metadata.abstract is None:
        warnings.append("Article has no abstract")

    return ValidationResult(valid=True, errors=errors, warnings=warnings, data=metadata)


def validate_annotation_output(document: dict) -> ValidationResult:
    """Check a built output document against ANNOTATION_OUTPUT_SCHEMA."""
    try:
        validate(instance=document, schema=ANNOTATION_OUTPUT_SCHEMA)
    except ValidationError as e:
        return ValidationResult(valid=False, errors=[f"Schema violation: {e.message}"])
    return ValidationResult(valid=True, data=document)
