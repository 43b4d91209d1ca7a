"""Core — schémas Pydantic + settings."""
from .schemas import (
    QueryOperator,
    QueryCondition,
    ContentRef,
    VariantInfo,
    PersonalizationContainer,
    DetectionStatus,
    DetectionResult,
    VariantJob,
)
from .settings import Settings, get_settings

__all__ = [
    "QueryOperator",
    "QueryCondition",
    "ContentRef",
    "VariantInfo",
    "PersonalizationContainer",
    "DetectionStatus",
    "DetectionResult",
    "VariantJob",
    "Settings",
    "get_settings",
]
