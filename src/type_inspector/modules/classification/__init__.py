# src/type_inspector/modules/classification/__init__.py
"""
Módulo de Clasificación de Valores.
"""

from __future__ import annotations

# Application
from .application.use_cases import (
    all_same_coarse_type,
    all_unique_refined_types,
    classify_all,
    classify_all_refined,
    count_refined_types,
)

# Domain
from .domain.classifier import coarse_type, refined_type
from .domain.equality import deep_equal
from .domain.value_objects import CoarseType, FrequencyEntry, RefinedType

__all__ = [
    "CoarseType",
    "RefinedType",
    "FrequencyEntry",
    "coarse_type",
    "refined_type",
    "deep_equal",
    "classify_all",
    "classify_all_refined",
    "all_same_coarse_type",
    "all_unique_refined_types",
    "count_refined_types",
]
