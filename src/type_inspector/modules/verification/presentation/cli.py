# src/type_inspector/modules/verification/presentation/cli.py
"""
Interfaz de Línea de Comandos (CLI) de type-inspector.

Arquitectura: Presentation Layer (Interface Adapter)
Responsabilidad:
    1. Parsear argumentos (argv).
    2. Instanciar el Composition Root (settings, logging, printer).
    3. Formatear la salida (rich / texto / JSON).
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from type_inspector.modules.classification.application.use_cases import (
    all_same_coarse_type,
    all_unique_refined_types,
    classify_all,
    classify_all_refined,
    count_refined_types,
)
from type_inspector.modules.classification.infrastructure.observability import (
    ObservabilityService,
    configure_logging,
)
from type_inspector.modules.verification.application.reference_suite import (
    build_reference_suite,
)
from type_inspector.modules.verification.application.use_cases import render_report
from type_inspector.modules.verification.domain.exceptions import InspectionError
from type_inspector.modules.verification.infrastructure.reporters import (
    ConsoleReportPrinter,
    LoggingReportPrinter,
    export_json,
)
from type_inspector.modules.verification.infrastructure.settings import (
    InspectorSettings,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_BAD_INPUT = 1
EXIT_DOMAIN_ERROR = 2
EXIT_INTERRUPTED = 130


def setup_parser() -> argparse.ArgumentParser:
    """Configura los argumentos aceptados por la herramienta."""
    parser = argparse.ArgumentParser(
        prog="type-inspector",
        description="🔎 type-inspector - Clasificación de valores por tipo",
        epilog="Ejemplo: type-inspector inspect '[5, null, {\"a\": 1}, NaN]'",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Muestra logs detallados (DEBUG)",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Desactiva rich (salida de texto / logging)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    examples = subparsers.add_parser(
        "examples", help="Ejecuta el catálogo de ejemplos de referencia"
    )
    examples.add_argument(
        "--json",
        type=Path,
        default=None,
        metavar="PATH",
        help="Exporta los resultados a un archivo JSON",
    )
    examples.add_argument(
        "--failures-only",
        action="store_true",
        help="Solo muestra los casos que no coinciden",
    )

    inspect = subparsers.add_parser(
        "inspect", help="Clasifica los elementos de un array JSON"
    )
    inspect.add_argument(
        "values", help="Array JSON (acepta NaN, Infinity y null)"
    )
    inspect.add_argument(
        "--json",
        action="store_true",
        help="Salida en formato JSON (útil para tuberías/pipes)",
    )

    return parser


def run_examples(args: argparse.Namespace, settings: InspectorSettings) -> int:
    suite = build_reference_suite()
    printer = (
        ConsoleReportPrinter() if settings.use_rich else LoggingReportPrinter()
    )
    render_report(suite, printer, failures_only=args.failures_only)

    if args.json is not None:
        export_json(suite, args.json)

    # El reporte es informativo: los casos fallidos no cambian el exit status.
    return EXIT_OK


def run_inspect(args: argparse.Namespace, settings: InspectorSettings) -> int:
    try:
        items = json.loads(args.values)
    except json.JSONDecodeError as e:
        print(f"❌ Error: JSON inválido: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    if not isinstance(items, list):
        print("❌ Error: se esperaba un array JSON.", file=sys.stderr)
        return EXIT_BAD_INPUT

    report = inspect_values(items)

    if args.json:
        print(json.dumps(report, indent=2))
    elif settings.use_rich:
        format_output_rich(report, Console())
    else:
        format_output_text(report)
    return EXIT_OK


def inspect_values(items: list[object]) -> dict[str, object]:
    """Arma el reporte de clasificación de una lista de valores."""
    coarse = classify_all(items)
    refined = classify_all_refined(items)
    return {
        "items": [
            {"value": repr(item), "coarse": c.value, "refined": r.value}
            for item, c, r in zip(items, coarse, refined)
        ],
        "all_same_coarse_type": all_same_coarse_type(items),
        "all_unique_refined_types": all_unique_refined_types(items),
        "counts": [entry.to_dict() for entry in count_refined_types(items)],
    }


def format_output_rich(report: dict, console: Console) -> None:
    """Presentación amigable para humanos."""
    table = Table(title="🔎 Clasificación")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Valor")
    table.add_column("Grueso", style="cyan")
    table.add_column("Refinado", style="magenta")
    for i, item in enumerate(report["items"], 1):
        table.add_row(str(i), item["value"], item["coarse"], item["refined"])
    console.print(table)

    counts = Table(title="📊 Frecuencias")
    counts.add_column("Tipo", style="magenta")
    counts.add_column("Cantidad", justify="right")
    for entry in report["counts"]:
        counts.add_row(entry["tag"], str(entry["count"]))
    console.print(counts)

    console.print(f"Mismo tipo grueso: [bold]{report['all_same_coarse_type']}[/]")
    console.print(f"Tipos refinados únicos: [bold]{report['all_unique_refined_types']}[/]")


def format_output_text(report: dict) -> None:
    """Presentación en texto plano."""
    print(f"{'#':<4} | {'GRUESO':<10} | {'REFINADO':<10} | VALOR")
    print("-" * 60)
    for i, item in enumerate(report["items"], 1):
        print(f"{i:<4} | {item['coarse']:<10} | {item['refined']:<10} | {item['value']}")
    print("=" * 60)
    for entry in report["counts"]:
        print(f"{entry['tag']:<10} {entry['count']:>4}")
    print(f"Mismo tipo grueso: {report['all_same_coarse_type']}")
    print(f"Tipos refinados únicos: {report['all_unique_refined_types']}")


def main(argv: list[str] | None = None) -> int:
    parser = setup_parser()
    args = parser.parse_args(argv)

    # 1. Composition Root: entorno + flags
    try:
        settings = InspectorSettings.from_env()
    except ValueError as e:
        print(f"❌ Error de configuración: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT
    if args.verbose:
        settings.log_level = "DEBUG"
    if args.plain:
        settings.use_rich = False

    # Con --json, stdout queda reservado para el documento.
    json_output = args.command == "inspect" and args.json
    configure_logging(
        level=settings.level,
        log_file=settings.log_file,
        stream=sys.stderr if json_output else None,
    )
    ObservabilityService.PRETTY_PRINT = settings.pretty_logs

    # 2. Ejecución
    try:
        if args.command == "examples":
            return run_examples(args, settings)
        return run_inspect(args, settings)
    except InspectionError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return EXIT_DOMAIN_ERROR
    except KeyboardInterrupt:
        print("\n⚠️  Operación cancelada por el usuario.", file=sys.stderr)
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
