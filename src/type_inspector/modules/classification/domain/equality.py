# src/type_inspector/modules/classification/domain/equality.py
"""
Comparador de Igualdad Estructural.

Arquitectura: Modular Monolith
Capa: Domain (Servicio puro)
Responsabilidad: Decidir si dos valores son "iguales" para fines de aserción,
recorriendo su estructura según la etiqueta refinada de cada nivel.

Reglas:
1. Etiquetas refinadas distintas -> nunca iguales (``1`` vs ``"1"``, ``True`` vs ``1``).
2. Funciones, símbolos y tipos opacos (``other``) solo son iguales por identidad.
3. Ciclos: un par (a, b) que reaparece mientras se compara se asume igual.
4. Claves de dict y miembros de set también respetan la regla 1.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping

from .classifier import refined_type
from .value_objects import RefinedType

_Pair = tuple[int, int]


def deep_equal(a: object, b: object) -> bool:
    """Igualdad estructural recursiva. Nunca lanza excepciones."""
    try:
        return _Comparison().equal(a, b)
    except RecursionError:
        # Anidamiento más profundo que la pila: se reporta como distinto.
        return False


class _Comparison:
    """Estado de una comparación: pares en curso para cortar ciclos."""

    def __init__(self):
        self._in_progress: set[_Pair] = set()

    def equal(self, a: object, b: object) -> bool:
        if a is b:
            return True

        tag = refined_type(a)
        if tag != refined_type(b):
            return False

        compare = _STRATEGIES.get(tag, _by_identity)
        if tag not in _CONTAINERS:
            return compare(self, a, b)

        pair = (id(a), id(b))
        if pair in self._in_progress:
            return True
        self._in_progress.add(pair)
        try:
            return compare(self, a, b)
        finally:
            self._in_progress.discard(pair)


# === Estrategias por etiqueta ===


def _by_value(_: _Comparison, a, b) -> bool:
    try:
        return bool(a == b)
    except Exception:
        return False


def _by_identity(_: _Comparison, a, b) -> bool:
    return a is b


def _always(_: _Comparison, a, b) -> bool:
    # NaN, null y undefined: la etiqueta ya lo dice todo.
    return True


def _same_class_and_value(cmp: _Comparison, a, b) -> bool:
    return type(a) is type(b) and _by_value(cmp, a, b)


def _arrays(cmp: _Comparison, a, b) -> bool:
    if len(a) != len(b):
        return False
    return all(cmp.equal(x, y) for x, y in zip(a, b))


def _mappings(cmp: _Comparison, a: Mapping, b: Mapping) -> bool:
    if len(a) != len(b):
        return False
    # 1 y True comparten hash: la etiqueta forma parte de la clave.
    tagged_b = {_tagged(key): value for key, value in b.items()}
    for key, value in a.items():
        tagged = _tagged(key)
        if tagged not in tagged_b:
            return False
        if not cmp.equal(value, tagged_b[tagged]):
            return False
    return True


def _objects(cmp: _Comparison, a, b) -> bool:
    if isinstance(a, dict) and isinstance(b, dict):
        return _mappings(cmp, a, b)
    if type(a) is not type(b):
        return False
    if hasattr(a, "__dict__") and hasattr(b, "__dict__"):
        return _mappings(cmp, vars(a), vars(b))
    return _by_value(cmp, a, b)


def _maps(cmp: _Comparison, a, b) -> bool:
    return type(a) is type(b) and _mappings(cmp, a, b)


def _sets(cmp: _Comparison, a, b) -> bool:
    if len(a) != len(b):
        return False
    # Cada elemento de a necesita un par estructural distinto en b.
    pending = list(b)
    for x in a:
        for i, y in enumerate(pending):
            if cmp.equal(x, y):
                del pending[i]
                break
        else:
            return False
    return True


def _patterns(_: _Comparison, a, b) -> bool:
    return a.pattern == b.pattern and a.flags == b.flags


def _errors(cmp: _Comparison, a, b) -> bool:
    return type(a) is type(b) and _arrays(cmp, a.args, b.args)


def _tagged(key) -> tuple:
    return (refined_type(key), key)


_STRATEGIES: dict[RefinedType, Callable[[_Comparison, object, object], bool]] = {
    RefinedType.BOOLEAN: _by_value,
    RefinedType.NUMBER: _by_value,
    RefinedType.INFINITY: _by_value,
    RefinedType.STRING: _by_value,
    RefinedType.NAN: _always,
    RefinedType.NULL: _always,
    RefinedType.UNDEFINED: _always,
    RefinedType.ARRAY: _arrays,
    RefinedType.OBJECT: _objects,
    RefinedType.MAP: _maps,
    RefinedType.SET: _sets,
    RefinedType.DATE: _same_class_and_value,
    RefinedType.REGEXP: _patterns,
    RefinedType.ERROR: _errors,
    RefinedType.FUNCTION: _by_identity,
    RefinedType.SYMBOL: _by_identity,
    RefinedType.OTHER: _by_identity,
}

_CONTAINERS = frozenset({RefinedType.ARRAY, RefinedType.OBJECT, RefinedType.MAP, RefinedType.ERROR})
