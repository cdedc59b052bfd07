"""
Constants used across the annotation pipeline.
Versioned and pinned for determinism.
"""
from typing import List

# =============================================================================
# Engine version (reported in every output document)
# =============================================================================
ENGINE_VERSION: str = "abstract-annotator-1.0.0"

# =============================================================================
# Abstract text cleanup
# =============================================================================
# Some abstracts start with the word "Abstract" but the entity offsets
# computed by the annotator do not include it.
ABSTRACT_PREFIX: str = "abstract "

# =============================================================================
# Entity domains accepted when ENTITY_DOMAINS is not configured
# =============================================================================
DEFAULT_ENTITY_DOMAINS: List[str] = [
    "wikidata.org",
    "dbpedia.org",
]

# =============================================================================
# Segment kinds
# =============================================================================
SEGMENT_PLAIN: str = "plain"
SEGMENT_ENTITY: str = "entity"
SEGMENT_KINDS: List[str] = [SEGMENT_PLAIN, SEGMENT_ENTITY]

# =============================================================================
# Rejection reasons for raw entity hits (metrics labels)
# =============================================================================
REJECT_DOMAIN: str = "domain"
REJECT_MALFORMED: str = "malformed"
