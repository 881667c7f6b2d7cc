# src/type_inspector/core/value_objects.py
"""
Valores centinela universales.

Arquitectura: Modular Monolith
Capa: Core
Responsabilidad: Representar conceptos de "valor" que Python no trae de fábrica
(ausencia explícita vs. nulo, y símbolos opacos únicos).
"""

from __future__ import annotations

# === Guía de Organización ===
# ✅ PUREZA: Sin dependencias de módulos de negocio.
# 🔒 IDENTIDAD: UNDEFINED es un singleton; cada Symbol es único.


class Undefined:
    """
    Marca un valor ausente (nunca asignado), distinto de ``None`` (nulo explícito).

    Solo existe una instancia: ``UNDEFINED``.
    """

    _instance: Undefined | None = None

    __slots__ = ()

    def __new__(cls) -> Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> Undefined:
        return self

    def __deepcopy__(self, memo) -> Undefined:
        return self

    def __reduce__(self):
        return (Undefined, ())


UNDEFINED = Undefined()


class Symbol:
    """
    Token opaco y único. Dos símbolos solo son iguales si son el mismo objeto,
    aunque compartan descripción.
    """

    __slots__ = ("description",)

    def __init__(self, description: str = ""):
        self.description = description

    def __repr__(self) -> str:
        return f"Symbol({self.description})"
