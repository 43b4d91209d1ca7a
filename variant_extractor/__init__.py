"""
Variant Extractor v0.1 — détection des PersonalizationContainer et préparation
des jobs de traduction par variante / par locale.

Usage :
    >>> from variant_extractor import detect_personalization_containers
    >>> containers = detect_personalization_containers(
    ...     {"id": "abc123", "modelName": "page"}, api_key="…")
    >>> [v.target_locales for c in containers for v in c.variants]
    [['fr-FR'], ['de-DE', 'de-AT']]

Usage (jobs) :
    >>> from variant_extractor import plan_variant_jobs
    >>> jobs = plan_variant_jobs(content_item, containers)
    >>> jobs[0].job_name
    'abc123-eu-french'
"""

from .core.schemas import (
    QueryOperator,
    QueryCondition,
    ContentRef,
    VariantInfo,
    PersonalizationContainer,
    DetectionStatus,
    DetectionResult,
    VariantJob,
)
from .core.settings import Settings, get_settings
from .errors import (
    VariantExtractionError,
    ContentFetchError,
    BlocksParseError,
    InvalidDocumentError,
)
from .locales import extract_target_locales_from_query, extract_target_locales
from .job_names import generate_variant_job_name, slugify_variant_name
from .variant_content import create_variant_content
from .content_api import build_content_url, fetch_content, normalize_blocks
from .detector import (
    iter_blocks,
    build_variants,
    find_personalization_containers,
    inspect_personalization,
    detect_personalization_containers,
    has_personalization_containers,
)
from .jobs import plan_variant_jobs, variant_jobs_for

__version__ = "0.1.0"

__all__ = [
    # schémas
    "QueryOperator", "QueryCondition", "ContentRef",
    "VariantInfo", "PersonalizationContainer",
    "DetectionStatus", "DetectionResult", "VariantJob",
    "Settings", "get_settings",
    # erreurs
    "VariantExtractionError", "ContentFetchError", "BlocksParseError", "InvalidDocumentError",
    # extraction
    "extract_target_locales_from_query", "extract_target_locales",
    "generate_variant_job_name", "slugify_variant_name",
    "create_variant_content",
    # API contenu
    "build_content_url", "fetch_content", "normalize_blocks",
    # détection
    "iter_blocks", "build_variants", "find_personalization_containers",
    "inspect_personalization", "detect_personalization_containers", "has_personalization_containers",
    # jobs
    "plan_variant_jobs", "variant_jobs_for",
]
