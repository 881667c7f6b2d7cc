# src/type_inspector/modules/classification/domain/value_objects.py
"""
Value Objects para el Bounded Context de Clasificación.

Arquitectura: Modular Monolith
Capa: Domain
Responsabilidad: Definir el vocabulario cerrado de etiquetas de tipo y el par
(etiqueta, frecuencia) que resume una colección.
"""

from __future__ import annotations

from enum import StrEnum
from typing import NamedTuple

# === Guía de Organización ===
# ✅ PUREZA: Solo tipos nativos y validación pura.
# 🔒 Inmutabilidad: enums y tuplas.


class CoarseType(StrEnum):
    """
    Categoría primitiva de un valor (vista "gruesa").

    Los arrays, los objetos planos y ``None`` comparten la etiqueta ``object``.
    """

    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    OBJECT = "object"
    FUNCTION = "function"
    UNDEFINED = "undefined"
    SYMBOL = "symbol"


class RefinedType(StrEnum):
    """
    Clasificación refinada de un valor.

    Separa las estructuras que la vista gruesa agrupa como ``object`` y los
    casos borde numéricos (NaN, infinito). ``OTHER`` cubre los tipos de runtime
    fuera del vocabulario reconocido.
    """

    BOOLEAN = "boolean"
    NUMBER = "number"
    NAN = "NaN"
    INFINITY = "infinity"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"
    FUNCTION = "function"
    UNDEFINED = "undefined"
    NULL = "null"
    DATE = "date"
    REGEXP = "regexp"
    SET = "set"
    MAP = "map"
    ERROR = "error"
    SYMBOL = "symbol"
    OTHER = "other"

    @property
    def sort_key(self) -> tuple[str, str]:
        """Orden alfabético sin distinguir mayúsculas; desempata por ordinal."""
        return (self.value.casefold(), self.value)


class _FrequencyPair(NamedTuple):
    tag: RefinedType
    count: int


class FrequencyEntry(_FrequencyPair):
    """
    Par (etiqueta, cantidad) de un conteo de tipos.

    Invariantes:
    1. count >= 1 (una etiqueta ausente no produce entrada)

    Al ser una tupla, ``FrequencyEntry(RefinedType.NULL, 1) == ("null", 1)``.
    """

    __slots__ = ()

    def __new__(cls, tag: RefinedType | str, count: int) -> FrequencyEntry:
        if count < 1:
            raise ValueError(f"La cantidad debe ser al menos 1: {count}")
        return super().__new__(cls, RefinedType(tag), count)

    def to_dict(self) -> dict[str, object]:
        return {"tag": self.tag.value, "count": self.count}
