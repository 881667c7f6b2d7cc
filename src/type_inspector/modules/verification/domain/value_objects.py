# src/type_inspector/modules/verification/domain/value_objects.py
"""
Value Objects para el Bounded Context de Verificación.

Arquitectura: Modular Monolith
Capa: Domain
Responsabilidad: Representar el resultado inmutable de cada caso de ejemplo.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

# === Guía de Organización ===
# ✅ PUREZA: Sin I/O. Imprimir o exportar es trabajo de infraestructura.


class CaseStatus(Enum):
    """Estados posibles de un caso evaluado."""

    PASSED = auto()
    FAILED = auto()
    ERROR = auto()  # El comparador falló; el caso no pudo evaluarse


@dataclass(frozen=True)
class CaseResult:
    """Resultado de comparar el valor obtenido contra el esperado."""

    label: str
    block: str
    status: CaseStatus
    expected: Any = None
    actual: Any = None
    detail: str = ""

    @property
    def passed(self) -> bool:
        return self.status == CaseStatus.PASSED

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "block": self.block,
            "status": self.status.name,
            "expected": repr(self.expected),
            "actual": repr(self.actual),
            "detail": self.detail,
        }


@dataclass(frozen=True)
class SuiteSummary:
    """Totales de una corrida."""

    total: int
    passed: int
    failed: int
    errors: int

    @property
    def all_passed(self) -> bool:
        return self.failed == 0 and self.errors == 0

    @classmethod
    def from_results(cls, results: list[CaseResult]) -> SuiteSummary:
        return cls(
            total=len(results),
            passed=sum(1 for r in results if r.status == CaseStatus.PASSED),
            failed=sum(1 for r in results if r.status == CaseStatus.FAILED),
            errors=sum(1 for r in results if r.status == CaseStatus.ERROR),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "errors": self.errors,
            "all_passed": self.all_passed,
        }
