"""
Script di esecuzione dell'annotazione degli abstract.

Legge:
  - annotation_io/article_metadata.json   (getArticleMetadata)
  - annotation_io/abstract_entities.json  (getAbstractNamedEntities)

Produce:
  - annotation_io/annotation_result.json
"""
import json
import logging
import sys
from pathlib import Path

from abstract_annotator.config import settings

# ---------------------------------------------------------------------------
# Setup logging
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger("run_annotation")

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
ROOT = Path(__file__).parent
IO_DIR = ROOT / settings.ANNOTATION_IO_DIR

METADATA_FILE = IO_DIR / "article_metadata.json"
ENTITIES_FILE = IO_DIR / "abstract_entities.json"
OUTPUT_FILE   = IO_DIR / "annotation_result.json"

# ---------------------------------------------------------------------------
# Load inputs
# ---------------------------------------------------------------------------
logger.info("Caricamento input...")
logger.info("backend           : %s", settings.BACKEND_URL)

with open(METADATA_FILE, encoding="utf-8") as f:
    metadata_response: dict = json.load(f)

# Il servizio NER può non aver ancora prodotto entità per l'articolo
entity_response = None
if ENTITIES_FILE.exists():
    with open(ENTITIES_FILE, encoding="utf-8") as f:
        entity_response = json.load(f)
else:
    logger.warning("File entità mancante: %s", ENTITIES_FILE)

article_uri = metadata_response.get("uri")
logger.info("article_uri       : %s", article_uri)

# ---------------------------------------------------------------------------
# Configurazione
# ---------------------------------------------------------------------------
from abstract_annotator.models.annotation_config import AnnotationConfig

config = AnnotationConfig.from_settings()
logger.info("domini accettati  : %s", sorted(config.domain_allow_list))

# ---------------------------------------------------------------------------
# Esecuzione pipeline
# ---------------------------------------------------------------------------
from abstract_annotator.service.pipeline import annotate_abstract

logger.info("Avvio annotazione...")

result = annotate_abstract(
    metadata_response,
    entity_response,
    config=config,
    article_uri=article_uri,
)

meta = result["processing_metadata"]
logger.info("Annotazione completata in %d ms", meta["annotation_duration_ms"])
logger.info("Entità ricevute   : %d", meta["hits_received"])
logger.info("Entità mostrate   : %d", meta["entities_resolved"])

# ---------------------------------------------------------------------------
# Salvataggio output
# ---------------------------------------------------------------------------
with open(OUTPUT_FILE, "w", encoding="utf-8") as f:
    json.dump(result, f, ensure_ascii=False, indent=2)

logger.info("Output salvato in: %s", OUTPUT_FILE)

# ---------------------------------------------------------------------------
# Stampa riepilogo a video
# ---------------------------------------------------------------------------
print("\n" + "=" * 70)
print("ABSTRACT ANNOTATION — RIEPILOGO")
print("=" * 70)
print(f"article     : {result['article_uri']}")
print(f"engine      : {result['engine_version']}")
print(f"annotazioni : {'si' if result['diagnostics']['annotations_available'] else 'non disponibili'}")

entity_segments = [s for s in result["segments"] if s["kind"] == "entity"]
if entity_segments:
    print(f"\nEntità ({len(entity_segments)}):")
    for s in entity_segments:
        label = s["label"] or "-"
        print(f"  [{s['start']:5d}] {s['text']:30s} → {label}  ({s['uri']})")

diag = result["diagnostics"]
if diag.get("warnings"):
    print(f"\nWarning: {diag['warnings']}")
if diag.get("errors"):
    print(f"\nErrori: {diag['errors']}")

print("=" * 70)
print(f"Output: {OUTPUT_FILE}")
print("=" * 70 + "\n")
