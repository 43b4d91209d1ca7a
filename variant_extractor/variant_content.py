"""
Contenu isolé d'une variante : copie du contenu parent dont `data.blocks`
est remplacé par les blocs de la variante, + `meta.variantMetadata`.
L'entrée n'est jamais modifiée (copie superficielle, dicts neufs à chaque niveau touché).
"""
from typing import Any, Dict, Mapping, Union

from .core.schemas import VariantInfo


def _as_mapping(value: Any) -> Mapping:
    """data / meta absents ou pas des objets → {}."""
    return value if isinstance(value, Mapping) else {}


def _variant_fields(variant: Union[VariantInfo, Mapping]) -> tuple:
    if isinstance(variant, VariantInfo):
        return variant.name, variant.blocks, variant.target_locales
    return (
        variant.get("name"),
        variant.get("blocks") or [],
        variant.get("targetLocales", variant.get("target_locales")) or [],
    )


def create_variant_content(content_item: Mapping[str, Any], variant_index: int,
                           variant: Union[VariantInfo, Mapping]) -> Dict[str, Any]:
    name, blocks, target_locales = _variant_fields(variant)

    return {
        **content_item,
        "data": {
            **_as_mapping(content_item.get("data")),
            "blocks": blocks,
        },
        "meta": {
            **_as_mapping(content_item.get("meta")),
            "variantMetadata": {
                "originalContentId": content_item.get("id"),
                "variantIndex":      variant_index,
                "variantName":       name,
                "targetLocales":     list(target_locales),
            },
        },
    }
