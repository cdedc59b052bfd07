"""
Shared test fixtures for the annotation test suite.
"""
import json

import pytest

from abstract_annotator.models.annotation_config import AnnotationConfig
from abstract_annotator.models.backend_io import RawEntityHit

WIKIDATA_SARS = "http://www.wikidata.org/entity/Q85438966"
DBPEDIA_SARS = "http://dbpedia.org/resource/Severe_acute_respiratory_syndrome-related_coronavirus"


# ==========================================================================
# Abstract text
# ==========================================================================

@pytest.fixture
def abstract_text():
    #      0         1         2         3         4         5         6
    #      0123456789012345678901234567890123456789012345678901234567890123456789
    return "The SARS-CoV virus causes severe acute respiratory syndrome in humans."


@pytest.fixture
def metadata_response():
    return {
        "result": [
            {
                "title": "SARS-CoV and the origin of severe acute respiratory syndrome",
                "abs": "Abstract The SARS-CoV virus causes severe acute respiratory syndrome in humans.",
            }
        ]
    }


# ==========================================================================
# Entity hits (backend wire format)
# ==========================================================================

@pytest.fixture
def entity_records():
    return [
        {
            "entityText": "SARS-CoV",
            "startPos": 4,
            "endPos": 12,
            "entityUri": WIKIDATA_SARS,
            "entityLabel": "severe acute respiratory syndrome coronavirus",
            "domainUri": "http://www.wikidata.org/",
        },
        {
            "entityText": "sars-cov",
            "startPos": 4,
            "entityUri": DBPEDIA_SARS,
            "domainUri": "http://dbpedia.org/",
        },
        {
            "entityText": "virus",
            "startPos": 13,
            "entityUri": "http://www.wikidata.org/entity/Q808",
            "entityLabel": "virus",
        },
        {
            "entityText": "severe acute respiratory syndrome",
            "startPos": 26,
            "entityUri": "http://www.wikidata.org/entity/Q103177",
            "entityLabel": "severe acute respiratory syndrome",
        },
        {
            "entityText": "respiratory syndrome",
            "startPos": 39,
            "entityUri": "http://dbpedia.org/resource/Respiratory_syndrome",
        },
        {
            "entityText": "respiratory syndrome",
            "startPos": 39,
            "entityUri": "http://purl.bioontology.org/ontology/MESH/D012120",
        },
        {
            "entityText": "humans",
            "startPos": 63,
            "entityUri": "http://www.wikidata.org/entity/Q5",
            "entityLabel": "human",
        },
    ]


@pytest.fixture
def entity_response(entity_records):
    return {"result": entity_records}


@pytest.fixture
def entity_response_json(entity_response):
    return json.dumps(entity_response, ensure_ascii=False)


@pytest.fixture
def entity_hits(entity_records):
    return [RawEntityHit.model_validate(r) for r in entity_records]


# ==========================================================================
# Configuration
# ==========================================================================

@pytest.fixture
def kb_config():
    """Accepts Wikidata and DBpedia identifiers only."""
    return AnnotationConfig.from_domains(["wikidata.org", "dbpedia.org"])


@pytest.fixture
def open_config():
    """Accepts every identifier."""
    return AnnotationConfig()
