"""
JSON Schemas for backend responses and the annotation output document.

Three schemas:
1. ENTITY_RESPONSE_SCHEMA     — envelope of the named-entities endpoint
2. METADATA_RESPONSE_SCHEMA   — envelope of the article-metadata endpoint
3. ANNOTATION_OUTPUT_SCHEMA   — final annotated abstract

Record-level checks on entity hits are done by the pydantic models in
abstract_annotator.models.backend_io so that one bad hit does not reject
the whole response.
"""
from abstract_annotator.config.constants import SEGMENT_KINDS

# =============================================================================
# 1. Named-entities response
# =============================================================================
ENTITY_RESPONSE_SCHEMA: dict = {
    "type": "object",
    "required": ["result"],
    "properties": {
        "result": {
            "type": "array",
            "items": {"type": "object"},
            "description": "One record per entity detection (entityText, startPos, entityUri, ...)",
        },
    },
}

# =============================================================================
# 2. Article metadata response
# =============================================================================
METADATA_RESPONSE_SCHEMA: dict = {
    "type": "object",
    "required": ["result"],
    "properties": {
        "result": {
            "type": "array",
            "minItems": 1,
            "items": {
                "type": "object",
                "properties": {
                    "abs": {"type": ["string", "null"]},
                    "title": {"type": ["string", "null"]},
                },
            },
        },
    },
}

# =============================================================================
# 3. Annotation output
# =============================================================================
_SEGMENT_SCHEMA: dict = {
    "type": "object",
    "additionalProperties": False,
    "required": ["kind", "text", "start", "end"],
    "properties": {
        "kind": {"type": "string", "enum": SEGMENT_KINDS},
        "text": {"type": "string"},
        "start": {"type": "integer", "minimum": 0},
        "end": {"type": "integer", "minimum": 0},
        "entity_text": {"type": "string"},
        "uri": {"type": "string"},
        "label": {"type": "string"},
        "uris": {"type": "array", "items": {"type": "string"}},
        "labels": {"type": "array", "items": {"type": "string"}},
    },
}

_ENTITY_SCHEMA: dict = {
    "type": "object",
    "additionalProperties": False,
    "required": ["text", "startPos", "endPos", "uris", "labels"],
    "properties": {
        "text": {"type": "string", "minLength": 1},
        "startPos": {"type": "integer", "minimum": 0},
        "endPos": {"type": "integer", "minimum": 0},
        "uris": {"type": "array", "minItems": 1, "items": {"type": "string"}},
        "labels": {"type": "array", "minItems": 1, "items": {"type": "string"}},
    },
}

ANNOTATION_OUTPUT_SCHEMA: dict = {
    "type": "object",
    "additionalProperties": False,
    "required": [
        "article_uri",
        "engine_version",
        "abstract",
        "segments",
        "entities",
        "diagnostics",
        "processing_metadata",
    ],
    "properties": {
        "article_uri": {"type": ["string", "null"]},
        "engine_version": {"type": "string"},
        "abstract": {"type": "string"},
        "segments": {"type": "array", "minItems": 1, "items": _SEGMENT_SCHEMA},
        "entities": {"type": "array", "items": _ENTITY_SCHEMA},
        "diagnostics": {
            "type": "object",
            "required": ["annotations_available", "warnings", "errors"],
            "properties": {
                "annotations_available": {"type": "boolean"},
                "warnings": {"type": "array", "items": {"type": "string"}},
                "errors": {"type": "array", "items": {"type": "string"}},
            },
        },
        "processing_metadata": {
            "type": "object",
            "required": [
                "annotation_duration_ms",
                "hits_received",
                "hits_accepted",
                "entities_merged",
                "entities_resolved",
                "entities_unplaced",
                "resolver_passes",
            ],
            "properties": {
                "annotation_duration_ms": {"type": "integer", "minimum": 0},
                "hits_received": {"type": "integer", "minimum": 0},
                "hits_accepted": {"type": "integer", "minimum": 0},
                "entities_merged": {"type": "integer", "minimum": 0},
                "entities_resolved": {"type": "integer", "minimum": 0},
                "entities_unplaced": {"type": "integer", "minimum": 0},
                "resolver_passes": {"type": "integer", "minimum": 0},
            },
        },
    },
}
