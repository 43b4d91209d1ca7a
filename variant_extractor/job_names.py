"""Noms de jobs de traduction par variante — déterministes et sûrs (URL/fichiers)."""
import re
from typing import Optional

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify_variant_name(name: str) -> str:
    """ "  EU - French!! " → "eu-french" """
    slug = _NON_ALNUM.sub("-", name.strip().lower())
    return slug.strip("-")


def generate_variant_job_name(content_id: str, variant_name: Optional[str] = None,
                              variant_index: Optional[int] = None) -> str:
    """
    Nom de variante renseigné → "{content_id}-{slug}".
    Sinon (absent ou blanc) → "{content_id}-variant-{index}".

    L'index n'est pas validé : absent, il apparaît tel quel ("variant-None").
    """
    if variant_name and variant_name.strip():
        return f"{content_id}-{slugify_variant_name(variant_name)}"
    return f"{content_id}-variant-{variant_index}"
