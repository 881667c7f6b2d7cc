# src/type_inspector/modules/classification/application/use_cases.py
"""
Casos de Uso del Analizador de Colecciones.

Arquitectura: Application Layer
Responsabilidad: Aplicar el clasificador a secuencias completas y agregar
sus etiquetas (homogeneidad, unicidad, frecuencias).
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable

from type_inspector.modules.classification.domain.classifier import (
    coarse_type,
    refined_type,
)
from type_inspector.modules.classification.domain.value_objects import (
    CoarseType,
    FrequencyEntry,
    RefinedType,
)
from type_inspector.modules.classification.infrastructure.observability import (
    measure_time,
)

logger = logging.getLogger("type_inspector.analysis")


def classify_all(items: Iterable[object]) -> list[CoarseType]:
    """Etiqueta gruesa de cada elemento, en el mismo orden."""
    return [coarse_type(item) for item in items]


def classify_all_refined(items: Iterable[object]) -> list[RefinedType]:
    """Etiqueta refinada de cada elemento, en el mismo orden."""
    return [refined_type(item) for item in items]


def all_same_coarse_type(items: Iterable[object]) -> bool:
    """
    True si todos los elementos comparten la etiqueta gruesa del primero.

    Una secuencia vacía cumple trivialmente. Como la comparación es gruesa,
    ``[[1], {"a": 1}, None]`` cuenta como homogénea (todo es ``object``).
    """
    tags = iter(classify_all(items))
    first = next(tags, None)
    if first is None:
        return True
    return all(tag == first for tag in tags)


def all_unique_refined_types(items: Iterable[object]) -> bool:
    """
    True si ninguna etiqueta refinada se repite.

    Recorre en orden de entrada y se detiene en la primera repetición.
    """
    seen: set[RefinedType] = set()
    for position, item in enumerate(items):
        tag = refined_type(item)
        if tag in seen:
            logger.debug(f"Etiqueta repetida '{tag}' en la posición {position}")
            return False
        seen.add(tag)
    return True


@measure_time(metric_name="count_refined_types")
def count_refined_types(items: Iterable[object]) -> list[FrequencyEntry]:
    """
    Cuenta las etiquetas refinadas y las ordena alfabéticamente.

    El orden no distingue mayúsculas (``date`` < ``NaN`` < ``null``) y desempata
    por ordinal, así que el resultado no depende del orden de entrada.
    """
    frequencies = Counter(refined_type(item) for item in items)
    entries = [FrequencyEntry(tag, count) for tag, count in frequencies.items()]
    entries.sort(key=lambda entry: entry.tag.sort_key)
    logger.debug(f"Frecuencias calculadas: {len(entries)} etiquetas distintas")
    return entries
