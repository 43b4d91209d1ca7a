"""
Détection des PersonalizationContainer dans un contenu distant.

1. Résout le modèle (modelName → modelId → "page") et l'id
2. Récupère le document complet (un seul GET, cachebust)
3. Normalise data.blocks (chaîne JSON → liste)
4. Parcours profondeur d'abord, pré-ordre, de tout l'arbre de blocs
5. Un PersonalizationContainer par bloc trouvé, variantes dans l'ordre déclaré

Fail-open : échec réseau, statut non-2xx, blocs illisibles ou document inattendu
→ liste vide, jamais d'exception vers l'appelant.
"""
import logging
from typing import Any, Iterator, List, Mapping, Optional, Union

import requests
from pydantic import ValidationError

from .content_api import fetch_content, normalize_blocks
from .core.schemas import (
    CONTAINER_COMPONENT_NAME,
    ContentRef,
    DetectionResult,
    DetectionStatus,
    PersonalizationContainer,
    QueryCondition,
    VariantInfo,
)
from .errors import BlocksParseError, ContentFetchError, InvalidDocumentError
from .locales import extract_target_locales_from_query

log = logging.getLogger(__name__)

ContentLike = Union[ContentRef, Mapping[str, Any]]


# ── Parcours ───────────────────────────────────────────────────────────

def iter_blocks(blocks: Any) -> Iterator[Mapping[str, Any]]:
    """
    Pré-ordre profondeur d'abord, pile explicite (pas de limite de récursion).
    Un même objet bloc n'est visité qu'une fois. Entrées non-dict ignorées.
    """
    if not isinstance(blocks, list):
        return

    seen = set()
    stack = list(reversed(blocks))
    while stack:
        block = stack.pop()
        if not isinstance(block, Mapping) or id(block) in seen:
            continue
        seen.add(id(block))
        yield block

        children = block.get("children")
        if isinstance(children, list):
            stack.extend(reversed(children))


def _component(block: Mapping[str, Any]) -> Mapping[str, Any]:
    component = block.get("component")
    return component if isinstance(component, Mapping) else {}


def is_personalization_container(block: Mapping[str, Any]) -> bool:
    return _component(block).get("name") == CONTAINER_COMPONENT_NAME


def _block_id(block: Mapping[str, Any]) -> Optional[str]:
    """Id scalaire → chaîne ; tout le reste (liste, objet, booléen) → None."""
    value = block.get("id")
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    log.warning("Id de bloc inattendu (%s) — ignoré", type(value).__name__)
    return None


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


def _build_variant(index: int, raw: Any) -> VariantInfo:
    if not isinstance(raw, Mapping):
        raw = {}

    query = _as_list(raw.get("query"))
    name  = raw.get("name")
    return VariantInfo(
        index=index,
        name=name if isinstance(name, str) else None,
        query=[QueryCondition.model_validate(dict(c)) for c in query if isinstance(c, Mapping)],
        blocks=[b for b in _as_list(raw.get("blocks")) if isinstance(b, Mapping)],
        target_locales=extract_target_locales_from_query(query),
    )


def build_variants(raw_variants: Any) -> List[VariantInfo]:
    """Variantes déclarées → VariantInfo, index = position dans la déclaration."""
    return [_build_variant(i, raw) for i, raw in enumerate(_as_list(raw_variants))]


def find_personalization_containers(blocks: Any) -> List[PersonalizationContainer]:
    """Parcours pur (sans I/O) sur des blocs déjà normalisés."""
    containers: List[PersonalizationContainer] = []
    for block in iter_blocks(blocks):
        if not is_personalization_container(block):
            continue
        options = _component(block).get("options")
        raw_variants = options.get("variants") if isinstance(options, Mapping) else None
        if not isinstance(raw_variants, list) or not raw_variants:
            log.debug("Container %s sans variantes — ignoré", block.get("id"))
            continue

        block_id = _block_id(block)
        try:
            variants = build_variants(raw_variants)
        except ValidationError as e:
            log.warning("Container %s : variantes invalides, ignoré (%s)", block_id, e)
            continue
        log.debug("Container %s : %d variantes", block_id, len(variants))
        containers.append(PersonalizationContainer(
            container_block_id=block_id,
            variants=variants,
        ))
    return containers


# ── Points d'entrée ────────────────────────────────────────────────────

def _as_ref(content: ContentLike) -> ContentRef:
    if isinstance(content, ContentRef):
        return content
    if not isinstance(content, Mapping):
        raise InvalidDocumentError(f"référence contenu inattendue : {type(content).__name__}")
    try:
        return ContentRef.model_validate(dict(content))
    except ValidationError as e:
        raise InvalidDocumentError(f"référence contenu invalide : {e.error_count()} erreur(s)") from e


def inspect_personalization(content: ContentLike, api_key: str, *,
                            session: Optional[requests.Session] = None,
                            logger: Optional[logging.Logger] = None,
                            **fetch_kwargs) -> DetectionResult:
    """
    Variante étiquetée de detect_personalization_containers :
    le statut dit si la liste vide veut dire "rien" ou "échec".
    """
    logger = logger or log
    try:
        ref = _as_ref(content)
    except InvalidDocumentError as e:
        logger.warning("Détection impossible : %s", e)
        return DetectionResult(status=DetectionStatus.INVALID_DOCUMENT, error=str(e))
    model_name, content_id = ref.resolved_model, ref.id

    try:
        document = fetch_content(model_name, content_id, api_key, session=session, **fetch_kwargs)
    except ContentFetchError as e:
        logger.error("Fetch contenu %s/%s échoué : %s", model_name, content_id, e)
        return DetectionResult(status=DetectionStatus.FETCH_FAILED, error=str(e))

    try:
        blocks = normalize_blocks(document)
    except BlocksParseError as e:
        logger.error("Blocs illisibles pour %s/%s : %s", model_name, content_id, e)
        return DetectionResult(status=DetectionStatus.PARSE_FAILED, error=str(e))
    except InvalidDocumentError as e:
        logger.warning("Document inattendu pour %s/%s : %s", model_name, content_id, e)
        return DetectionResult(status=DetectionStatus.INVALID_DOCUMENT, error=str(e))

    containers = find_personalization_containers(blocks)
    logger.info("Contenu %s/%s : %d PersonalizationContainer", model_name, content_id, len(containers))
    return DetectionResult(status=DetectionStatus.FOUND, containers=containers)


def detect_personalization_containers(content: ContentLike, api_key: str,
                                      **kwargs) -> List[PersonalizationContainer]:
    return inspect_personalization(content, api_key, **kwargs).containers


def has_personalization_containers(content: ContentLike, api_key: str, **kwargs) -> bool:
    return len(detect_personalization_containers(content, api_key, **kwargs)) > 0
