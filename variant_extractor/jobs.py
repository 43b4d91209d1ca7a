"""
Planification des jobs de traduction : un job par variante détectée.
Compose detector → job_names → variant_content ; la soumission elle-même
(API du prestataire de traduction) reste hors de ce module.
"""
import logging
from collections import Counter
from typing import Any, Iterable, List, Mapping, Optional

from .core.schemas import ContentRef, PersonalizationContainer, VariantJob
from .detector import ContentLike, detect_personalization_containers
from .job_names import generate_variant_job_name
from .variant_content import create_variant_content

log = logging.getLogger(__name__)


def plan_variant_jobs(content_item: Mapping[str, Any],
                      containers: Iterable[PersonalizationContainer]) -> List[VariantJob]:
    """
    Containers dans l'ordre de découverte, puis variantes dans l'ordre déclaré.
    Les noms en collision (ex : deux "variant-0" sans nom) sont signalés, pas renommés.
    """
    content_id = content_item.get("id")
    jobs: List[VariantJob] = []

    for container in containers:
        for variant in container.variants:
            jobs.append(VariantJob(
                job_name=generate_variant_job_name(content_id, variant.name, variant.index),
                container_block_id=container.container_block_id,
                variant_index=variant.index,
                variant_name=variant.name,
                target_locales=variant.target_locales,
                content=create_variant_content(content_item, variant.index, variant),
            ))

    duplicates = [name for name, n in Counter(j.job_name for j in jobs).items() if n > 1]
    if duplicates:
        log.warning("Noms de job en doublon pour %s : %s", content_id, ", ".join(duplicates))
    return jobs


def variant_jobs_for(content: ContentLike, api_key: str,
                     content_item: Optional[Mapping[str, Any]] = None,
                     **kwargs) -> List[VariantJob]:
    """
    Détection + planification. `content_item` = document servant de base aux
    contenus de variante (par défaut la référence `content` elle-même).
    Détection vide ou échouée → [].
    """
    containers = detect_personalization_containers(content, api_key, **kwargs)
    if not containers:
        return []
    if content_item is not None:
        base = content_item
    elif isinstance(content, ContentRef):
        base = content.model_dump(by_alias=True, exclude_none=True)
    else:
        base = dict(content)
    return plan_variant_jobs(base, containers)
