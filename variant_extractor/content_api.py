"""
Module CONTENT_API — récupération d'un document contenu complet (modèle + id)
et normalisation de `data.blocks`.

Un seul GET, pas de retry, pas de cache : `cachebust=true` force la version fraîche.
Les erreurs remontent typées (voir errors.py) ; c'est le détecteur qui décide du fail-open.
"""
import json
import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from .core.settings import get_settings
from .errors import BlocksParseError, ContentFetchError, InvalidDocumentError

log = logging.getLogger(__name__)

_UNSET = object()


def build_content_url(model_name: str, content_id: str, base_url: Optional[str] = None) -> str:
    """{base}/{model}/{id} — segments échappés."""
    base = (base_url or get_settings().content_api_base_url).rstrip("/")
    return f"{base}/{quote(str(model_name), safe='')}/{quote(str(content_id), safe='')}"


def fetch_content(model_name: str, content_id: str, api_key: str, *,
                  session: Optional[requests.Session] = None,
                  base_url: Optional[str] = None,
                  timeout: Any = _UNSET) -> Dict[str, Any]:
    """
    GET du document complet. Lève ContentFetchError si :
      - erreur transport (connexion, timeout…)
      - statut non-2xx
      - corps non-JSON ou JSON qui n'est pas un objet
    """
    settings = get_settings()
    url      = build_content_url(model_name, content_id, base_url or settings.content_api_base_url)
    params   = {"apiKey": api_key, "cachebust": "true"}
    if timeout is _UNSET:
        timeout = settings.content_api_timeout

    http = session or requests
    try:
        resp = http.get(url, params=params, timeout=timeout)
        resp.raise_for_status()
    except requests.HTTPError as e:
        status = getattr(e.response, "status_code", None)
        raise ContentFetchError(f"HTTP {status} pour {model_name}/{content_id}", status_code=status) from e
    except requests.RequestException as e:
        raise ContentFetchError(f"Erreur réseau pour {model_name}/{content_id} : {e}") from e

    try:
        document = resp.json()
    # RecursionError : JSON trop imbriqué pour le décodeur
    except (ValueError, RecursionError) as e:
        raise ContentFetchError(f"Réponse non-JSON pour {model_name}/{content_id}") from e

    if not isinstance(document, dict):
        raise ContentFetchError(
            f"Réponse JSON inattendue pour {model_name}/{content_id} : {type(document).__name__}"
        )
    return document


def normalize_blocks(document: Dict[str, Any]) -> List[Any]:
    """
    data.blocks → liste de blocs.
    Chaîne → json.loads (BlocksParseError si illisible).
    Absent / pas une liste après décodage → InvalidDocumentError.
    """
    data = document.get("data") if isinstance(document, dict) else None
    if not isinstance(data, dict):
        raise InvalidDocumentError("document sans champ `data`")

    blocks = data.get("blocks")
    if isinstance(blocks, str):
        log.debug("data.blocks encodé en chaîne (%d caractères)", len(blocks))
        try:
            blocks = json.loads(blocks)
        except (ValueError, RecursionError) as e:
            raise BlocksParseError(f"data.blocks illisible : {e}") from e

    if not isinstance(blocks, list):
        raise InvalidDocumentError(f"data.blocks n'est pas une liste ({type(blocks).__name__})")
    return blocks

