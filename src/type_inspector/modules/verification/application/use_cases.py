# src/type_inspector/modules/verification/application/use_cases.py
"""
Casos de Uso para la Verificación por Ejemplos.

Arquitectura: Application Layer
Responsabilidad: Evaluar casos (valor obtenido vs. esperado) y producir
resultados estructurados. Imprimir es responsabilidad de un ReportPrinter.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from type_inspector.modules.classification.domain.equality import deep_equal
from type_inspector.modules.classification.infrastructure.observability import (
    ObservabilityService,
)
from type_inspector.modules.verification.domain.exceptions import CaseDefinitionError
from type_inspector.modules.verification.domain.ports.printer import ReportPrinter
from type_inspector.modules.verification.domain.value_objects import (
    CaseResult,
    CaseStatus,
    SuiteSummary,
)

logger = logging.getLogger("type_inspector.verification")

DEFAULT_BLOCK = "default"

Comparator = Callable[[object, object], bool]


class ExampleSuite:
    """
    Caso de Uso: Acumular casos de ejemplo agrupados por bloque.

    Colaboradores:
    - comparator: decide si obtenido == esperado (por defecto deep_equal)
    """

    def __init__(self, name: str, comparator: Comparator = deep_equal):
        self.name = name
        self._comparator = comparator
        self._current_block = DEFAULT_BLOCK
        self._results: list[CaseResult] = []

    def block(self, name: str) -> ExampleSuite:
        """Los casos siguientes pertenecen al bloque ``name``."""
        if not name:
            raise CaseDefinitionError("El nombre del bloque no puede estar vacío.")
        self._current_block = name
        return self

    def check(self, label: str, actual: object, expected: object) -> CaseResult:
        """
        Compara y registra un caso. Nunca lanza por una comparación:
        un comparador que falla produce un resultado ERROR.
        """
        if not label:
            raise CaseDefinitionError("La etiqueta del caso no puede estar vacía.")

        try:
            matched = self._comparator(actual, expected)
        except Exception as e:
            logger.warning(
                f"Comparador falló en '{label}': {type(e).__name__}: {e}"
            )
            result = CaseResult(
                label=label,
                block=self._current_block,
                status=CaseStatus.ERROR,
                expected=expected,
                actual=actual,
                detail=f"{type(e).__name__}: {e}",
            )
        else:
            result = CaseResult(
                label=label,
                block=self._current_block,
                status=CaseStatus.PASSED if matched else CaseStatus.FAILED,
                expected=expected,
                actual=actual,
            )

        self._results.append(result)
        return result

    @property
    def results(self) -> list[CaseResult]:
        return list(self._results)

    def blocks(self) -> dict[str, list[CaseResult]]:
        """Resultados agrupados por bloque, en orden de aparición."""
        grouped: dict[str, list[CaseResult]] = {}
        for result in self._results:
            grouped.setdefault(result.block, []).append(result)
        return grouped

    def summary(self) -> SuiteSummary:
        return SuiteSummary.from_results(self._results)


@ObservabilityService.measure_latency(operation_name="render_report", level="DEBUG")
def render_report(
    suite: ExampleSuite, printer: ReportPrinter, failures_only: bool = False
) -> SuiteSummary:
    """
    Envía cada bloque, caso y el resumen al printer.

    Solo informa: no cambia el exit status ni lanza por casos fallidos.
    """
    for block_name, results in suite.blocks().items():
        visible = [r for r in results if not (failures_only and r.passed)]
        if not visible:
            continue
        printer.print_block(block_name)
        for result in visible:
            printer.print_case(result)

    summary = suite.summary()
    printer.print_summary(summary)
    logger.info(
        f"Suite '{suite.name}': {summary.passed}/{summary.total} casos aprobados"
    )
    return summary
