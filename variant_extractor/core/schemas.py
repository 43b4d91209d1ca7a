"""
Schémas Pydantic de l'extraction de variantes.
Structure : ContentRef → fetch → PersonalizationContainer → VariantInfo → VariantJob

Les clés JSON restent en camelCase (format de l'API contenu) via les alias ;
`model_dump(by_alias=True)` redonne le format fil.
"""
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MODEL_NAME = "page"
CONTAINER_COMPONENT_NAME = "PersonalizationContainer"


# ── ENUMS ──────────────────────────────────────────────────────────────

class QueryOperator(str, Enum):
    """Opérateurs connus côté éditeur. Informatif : jamais interprété ici.
    Un opérateur inconnu reste tel quel (chaîne brute) dans QueryCondition."""
    IS                        = "is"
    IS_NOT                    = "isNot"
    CONTAINS                  = "contains"
    STARTS_WITH               = "startsWith"
    ENDS_WITH                 = "endsWith"
    GREATER_THAN              = "greaterThan"
    LESS_THAN                 = "lessThan"
    GREATER_THAN_OR_EQUAL_TO  = "greaterThanOrEqualTo"
    LESS_THAN_OR_EQUAL_TO     = "lessThanOrEqualTo"


class DetectionStatus(str, Enum):
    FOUND            = "found"
    FETCH_FAILED     = "fetch_failed"
    PARSE_FAILED     = "parse_failed"
    INVALID_DOCUMENT = "invalid_document"


# ── Conditions ─────────────────────────────────────────────────────────

class QueryCondition(BaseModel):
    """
    Règle de ciblage d'une variante : {property, operator, value}.
    Tout est optionnel et les clés inconnues sont conservées : un opérateur
    exotique ne doit pas casser la détection.
    """
    model_config = ConfigDict(extra="allow", frozen=True)

    property: Any = None
    operator: Union[QueryOperator, Any] = Field(default=None, union_mode="left_to_right")
    value: Any = None


# ── Entrée ─────────────────────────────────────────────────────────────

class ContentRef(BaseModel):
    """Référence vers un contenu distant : id + modelName | modelId."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True,
                              protected_namespaces=())

    id: Optional[str] = None
    model_name: Optional[str] = Field(default=None, alias="modelName")
    model_id: Optional[str] = Field(default=None, alias="modelId")

    @property
    def resolved_model(self) -> str:
        """modelName → modelId → "page" (les chaînes vides comptent comme absentes)."""
        return self.model_name or self.model_id or DEFAULT_MODEL_NAME


# ── Sortie ─────────────────────────────────────────────────────────────

class VariantInfo(BaseModel):
    """Une variante d'un container, figée après construction."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    index: int
    name: Optional[str] = None
    query: List[QueryCondition] = Field(default_factory=list)
    blocks: List[Dict[str, Any]] = Field(default_factory=list)
    target_locales: List[str] = Field(default_factory=list, alias="targetLocales")


class PersonalizationContainer(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, coerce_numbers_to_str=True)

    container_block_id: Optional[str] = Field(default=None, alias="containerBlockId")
    variants: List[VariantInfo] = Field(default_factory=list)


class DetectionResult(BaseModel):
    """
    Résultat étiqueté : distingue "rien trouvé" (FOUND + liste vide)
    de "lookup échoué" (FETCH_FAILED / PARSE_FAILED / INVALID_DOCUMENT).
    """
    status: DetectionStatus
    containers: List[PersonalizationContainer] = Field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == DetectionStatus.FOUND


class VariantJob(BaseModel):
    """Un job de traduction par variante (consommé par la soumission)."""
    model_config = ConfigDict(populate_by_name=True)

    job_name: str = Field(alias="jobName")
    container_block_id: Optional[str] = Field(default=None, alias="containerBlockId")
    variant_index: int = Field(alias="variantIndex")
    variant_name: Optional[str] = Field(default=None, alias="variantName")
    target_locales: List[str] = Field(default_factory=list, alias="targetLocales")
    content: Dict[str, Any] = Field(default_factory=dict)
