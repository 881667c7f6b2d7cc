"""
type-inspector: helpers de introspección de valores en runtime.

Uso rápido:
    >>> from type_inspector import refined_type, count_refined_types
    >>> refined_type(float("nan"))
    <RefinedType.NAN: 'NaN'>
"""

from type_inspector.core.value_objects import UNDEFINED, Symbol
from type_inspector.modules.classification import (
    CoarseType,
    FrequencyEntry,
    RefinedType,
    all_same_coarse_type,
    all_unique_refined_types,
    classify_all,
    classify_all_refined,
    coarse_type,
    count_refined_types,
    deep_equal,
    refined_type,
)
from type_inspector.modules.verification import (
    CaseResult,
    CaseStatus,
    ExampleSuite,
    render_report,
)

__version__ = "0.1.0"

__all__ = [
    "UNDEFINED",
    "Symbol",
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
    "CaseResult",
    "CaseStatus",
    "ExampleSuite",
    "render_report",
]
