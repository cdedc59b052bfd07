"""
Environment settings loaded from .env file.
"""
import os
from dotenv import load_dotenv

from abstract_annotator.config.constants import DEFAULT_ENTITY_DOMAINS

load_dotenv()


# --- Backend (fetch layer) ---
BACKEND_URL: str = os.getenv("BACKEND_URL", "http://localhost:3000")

# --- Entity filtering ---
# Pipe-delimited substrings, e.g. "wikidata.org|dbpedia.org"
ENTITY_DOMAINS: str = os.getenv("ENTITY_DOMAINS", "|".join(DEFAULT_ENTITY_DOMAINS))

# --- Logging ---
ANNOTATION_LOG: bool = os.getenv("ANNOTATION_LOG", "off").lower() == "on"
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# --- Runner ---
ANNOTATION_IO_DIR: str = os.getenv("ANNOTATION_IO_DIR", "annotation_io")
