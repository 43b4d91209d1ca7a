"""
Settings — lus depuis l'environnement (os.getenv + défauts).

CONTENT_API_BASE_URL : racine de l'API contenu (sans slash final)
CONTENT_API_TIMEOUT  : timeout HTTP en secondes ("0" ou vide → pas de timeout)
"""
import logging
import os
from typing import Optional

from pydantic import BaseModel, ConfigDict

log = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://cdn.builder.io/api/v3/content"
DEFAULT_TIMEOUT  = 10.0


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    content_api_base_url: str = DEFAULT_BASE_URL
    content_api_timeout: Optional[float] = DEFAULT_TIMEOUT


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None:
        return DEFAULT_TIMEOUT
    raw = raw.strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        log.warning("CONTENT_API_TIMEOUT invalide (%r) — défaut %ss", raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    return value if value > 0 else None


def get_settings() -> Settings:
    """Relu à chaque appel : pas de cache, l'environnement fait foi."""
    return Settings(
        content_api_base_url=os.getenv("CONTENT_API_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        content_api_timeout=_parse_timeout(os.getenv("CONTENT_API_TIMEOUT")),
    )
