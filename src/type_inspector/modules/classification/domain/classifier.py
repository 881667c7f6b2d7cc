# src/type_inspector/modules/classification/domain/classifier.py
"""
Clasificador de Tipos.

Arquitectura: Modular Monolith
Capa: Domain (Servicio puro)
Responsabilidad: Mapear cualquier valor de Python a una etiqueta gruesa o refinada.

Ambas funciones son totales: todo valor tiene exactamente una etiqueta y
nunca se lanza una excepción.
"""

from __future__ import annotations

import cmath
import collections
import datetime
import math
import numbers
import re
import types
from collections.abc import Mapping
from decimal import Decimal

from type_inspector.core.value_objects import Symbol, Undefined

from .value_objects import CoarseType, RefinedType

# === Tablas de Tipos Reconocidos ===
_ARRAY_TYPES = (list, tuple, collections.deque)
_SET_TYPES = (set, frozenset)
_DATE_TYPES = (datetime.date,)  # datetime.datetime hereda de date
_OPAQUE_TYPES = (
    bytes,
    bytearray,
    memoryview,
    range,
    types.ModuleType,
    types.GeneratorType,
    types.AsyncGeneratorType,
    types.CoroutineType,
    type(Ellipsis),
    type(NotImplemented),
)


def coarse_type(value: object) -> CoarseType:
    """
    Retorna la categoría primitiva del valor.

    ``None`` es ``object`` (igual que un dict o una lista).
    """
    if isinstance(value, Undefined):
        return CoarseType.UNDEFINED
    if isinstance(value, bool):
        return CoarseType.BOOLEAN
    if isinstance(value, numbers.Number):
        return CoarseType.NUMBER
    if isinstance(value, str):
        return CoarseType.STRING
    if isinstance(value, Symbol):
        return CoarseType.SYMBOL
    if callable(value):
        return CoarseType.FUNCTION
    return CoarseType.OBJECT


def refined_type(value: object) -> RefinedType:
    """
    Retorna la etiqueta refinada del valor.

    Reglas numéricas: NaN -> ``NaN``; +/- infinito -> ``infinity``;
    cualquier otro número -> ``number``.
    """
    if isinstance(value, Undefined):
        return RefinedType.UNDEFINED
    if value is None:
        return RefinedType.NULL
    if isinstance(value, bool):
        return RefinedType.BOOLEAN
    if isinstance(value, numbers.Number):
        return _numeric_type(value)
    if isinstance(value, str):
        return RefinedType.STRING
    if isinstance(value, Symbol):
        return RefinedType.SYMBOL
    if isinstance(value, _DATE_TYPES):
        return RefinedType.DATE
    if isinstance(value, re.Pattern):
        return RefinedType.REGEXP
    if isinstance(value, BaseException):
        return RefinedType.ERROR
    if isinstance(value, _ARRAY_TYPES):
        return RefinedType.ARRAY
    if isinstance(value, _SET_TYPES):
        return RefinedType.SET
    if type(value) is dict or isinstance(value, types.SimpleNamespace):
        return RefinedType.OBJECT
    if isinstance(value, Mapping):
        return RefinedType.MAP
    if isinstance(value, _OPAQUE_TYPES):
        return RefinedType.OTHER
    if callable(value):
        return RefinedType.FUNCTION
    if _is_bare_iterator(value):
        return RefinedType.OTHER
    return RefinedType.OBJECT


def _numeric_type(value: numbers.Number) -> RefinedType:
    """Distingue NaN e infinito del resto de números."""
    if isinstance(value, Decimal):
        if value.is_nan():
            return RefinedType.NAN
        if value.is_infinite():
            return RefinedType.INFINITY
        return RefinedType.NUMBER

    if isinstance(value, numbers.Rational):
        # int y Fraction nunca son NaN/inf; float() de un int enorme desborda.
        return RefinedType.NUMBER

    if isinstance(value, numbers.Real):
        try:
            as_float = float(value)
        except (OverflowError, TypeError, ValueError):
            return RefinedType.NUMBER
        if math.isnan(as_float):
            return RefinedType.NAN
        if math.isinf(as_float):
            return RefinedType.INFINITY
        return RefinedType.NUMBER

    if isinstance(value, complex):
        if cmath.isnan(value):
            return RefinedType.NAN
        if cmath.isinf(value):
            return RefinedType.INFINITY

    return RefinedType.NUMBER


def _is_bare_iterator(value: object) -> bool:
    # Iteradores sin estructura propia (map, filter, zip, iter(...)).
    cls = type(value)
    return hasattr(cls, "__next__") and hasattr(cls, "__iter__")
