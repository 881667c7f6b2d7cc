# src/type_inspector/modules/verification/domain/ports/printer.py
"""
Puerto para la Presentación de Resultados.

Arquitectura: Domain Port (Interface)
Responsabilidad: Separar la evaluación de casos de su impresión.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from type_inspector.modules.verification.domain.value_objects import (
    CaseResult,
    SuiteSummary,
)


@runtime_checkable
class ReportPrinter(Protocol):
    """
    Contrato para cualquier destino de impresión.

    Implementaciones esperadas:
    - ConsoleReportPrinter (rich)
    - LoggingReportPrinter (logging estándar)
    """

    def print_block(self, name: str) -> None:
        """Abre visualmente un grupo de casos."""
        ...

    def print_case(self, result: CaseResult) -> None:
        """
        Muestra un caso. Si falló, debe mostrar el valor esperado y el obtenido.
        """
        ...

    def print_summary(self, summary: SuiteSummary) -> None:
        """Cierra la corrida con los totales."""
        ...
