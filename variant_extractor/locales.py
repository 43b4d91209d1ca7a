"""
Locales cibles d'une variante, déduites de ses conditions de query.

Seules les conditions `property == "locale"` comptent. L'opérateur n'est PAS
évalué : "is" et "isNot" ajoutent tous deux leurs valeurs. On récolte les
locales mentionnées, on ne résout pas le ciblage.
"""
from typing import Any, List, Mapping

from .core.schemas import QueryCondition

LOCALE_PROPERTY = "locale"


def _field(condition: Any, name: str) -> Any:
    if isinstance(condition, QueryCondition):
        return getattr(condition, name)
    if isinstance(condition, Mapping):
        return condition.get(name)
    return None


def extract_target_locales_from_query(query: Any) -> List[str]:
    """
    [{property: "locale", value: ["en", "fr"]}, {property: "locale", value: "de"}]
    → ["en", "fr", "de"]

    Valeurs uniques, dans l'ordre de première apparition. Entrée malformée
    (pas une liste) → []. Dans une liste de valeurs, les non-chaînes sont ignorées.
    """
    if not isinstance(query, (list, tuple)):
        return []

    locales: dict = {}
    for condition in query:
        if _field(condition, "property") != LOCALE_PROPERTY:
            continue
        value = _field(condition, "value")
        if isinstance(value, (list, tuple)):
            for v in value:
                if isinstance(v, str):
                    locales.setdefault(v, None)
        elif isinstance(value, str):
            locales.setdefault(value, None)

    return list(locales)


extract_target_locales = extract_target_locales_from_query

