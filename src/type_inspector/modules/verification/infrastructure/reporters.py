# src/type_inspector/modules/verification/infrastructure/reporters.py
"""
Adaptadores de Presentación y Exportación de Reportes.

Arquitectura: Infrastructure Layer
Responsabilidad: Implementar el puerto ReportPrinter (rich / logging) y exportar
resultados a JSON estructurado.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.pretty import Pretty
from rich.table import Table

from type_inspector.modules.verification.application.use_cases import ExampleSuite
from type_inspector.modules.verification.domain.exceptions import ReportExportError
from type_inspector.modules.verification.domain.value_objects import (
    CaseResult,
    CaseStatus,
    SuiteSummary,
)

logger = logging.getLogger(__name__)

REPORT_VERSION = "1.0.0"

STATUS_ICONS = {
    CaseStatus.PASSED: "✅",
    CaseStatus.FAILED: "❌",
    CaseStatus.ERROR: "💥",
}
STATUS_COLORS = {
    CaseStatus.PASSED: "green",
    CaseStatus.FAILED: "red",
    CaseStatus.ERROR: "magenta",
}


class ConsoleReportPrinter:
    """Visualización en terminal con rich (colores, tablas, paneles)."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def print_block(self, name: str) -> None:
        self.console.rule(f"[bold cyan]# {escape(name)}[/]", align="left")

    def print_case(self, result: CaseResult) -> None:
        icon = STATUS_ICONS[result.status]
        color = STATUS_COLORS[result.status]
        self.console.print(
            f"[{color}]{icon} {escape(result.label)}[/]", highlight=False
        )

        if result.passed:
            return

        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("Esperado", style="green")
        table.add_column("Obtenido", style="red")
        table.add_row(Pretty(result.expected), Pretty(result.actual))
        self.console.print(table)
        if result.detail:
            self.console.print(f"   [dim]{escape(result.detail)}[/]", highlight=False)

    def print_summary(self, summary: SuiteSummary) -> None:
        table = Table(title="📊 Resumen de Casos", box=box.ROUNDED)
        table.add_column("Métrica", style="cyan")
        table.add_column("Valor", justify="right")
        table.add_row("Casos ejecutados", str(summary.total))
        table.add_row("✅ Aprobados", f"[green]{summary.passed}[/]")
        table.add_row(
            "❌ Fallidos", f"[red]{summary.failed}[/]" if summary.failed else "0"
        )
        table.add_row(
            "💥 Errores", f"[magenta]{summary.errors}[/]" if summary.errors else "0"
        )
        self.console.print(table)

        if summary.all_passed:
            message = "[bold green]✅ Todos los casos coinciden con lo esperado[/]"
            border = "green"
        else:
            message = "[bold red]🚨 Hay casos que no coinciden[/]: revisar Esperado vs Obtenido."
            border = "red"
        self.console.print(Panel(message, title="🎯 Resultado", border_style=border))


class LoggingReportPrinter:
    """
    Salida sobre logging estándar: [OK] en INFO; [FAIL] y los valores
    esperado/obtenido en ERROR, visibles con el nivel por defecto.
    """

    def __init__(self, logger_name: str = "type_inspector.report"):
        self._log = logging.getLogger(logger_name)

    def print_block(self, name: str) -> None:
        self._log.info(f"# {name}")

    def print_case(self, result: CaseResult) -> None:
        if result.passed:
            self._log.info(f"[OK] {result.label}")
            return

        tag = "FAIL" if result.status == CaseStatus.FAILED else "ERROR"
        self._log.error(f"[{tag}] {result.label}")
        self._log.error(f"Expected: {result.expected!r}")
        self._log.error(f"Actual: {result.actual!r}")
        if result.detail:
            self._log.error(result.detail)

    def print_summary(self, summary: SuiteSummary) -> None:
        self._log.info(
            f"📊 Resumen: {summary.passed}/{summary.total} aprobados, "
            f"{summary.failed} fallidos, {summary.errors} errores"
        )


def export_json(suite: ExampleSuite, output_path: Path) -> Path:
    """Exporta los resultados de la suite a JSON estructurado."""
    report = {
        "generated_at": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
        "report_version": REPORT_VERSION,
        "suite": suite.name,
        "summary": suite.summary().to_dict(),
        "results": [r.to_dict() for r in suite.results],
    }

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(report, indent=2, default=str), encoding="utf-8")
    except OSError as e:
        raise ReportExportError(f"No se pudo escribir el reporte en {output_path}: {e}") from e

    logger.info(f"📄 Reporte JSON exportado: {output_path}")
    return output_path
