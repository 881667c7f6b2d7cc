# src/type_inspector/modules/verification/__init__.py
"""
Módulo de Verificación por Ejemplos.
"""

from __future__ import annotations

# Application
from .application.reference_suite import build_reference_suite
from .application.use_cases import ExampleSuite, render_report

# Domain
from .domain.exceptions import CaseDefinitionError, InspectionError, ReportExportError
from .domain.ports.printer import ReportPrinter
from .domain.value_objects import CaseResult, CaseStatus, SuiteSummary

# Infrastructure
from .infrastructure.reporters import (
    ConsoleReportPrinter,
    LoggingReportPrinter,
    export_json,
)
from .infrastructure.settings import InspectorSettings

__all__ = [
    "CaseResult",
    "CaseStatus",
    "SuiteSummary",
    "ReportPrinter",
    "InspectionError",
    "CaseDefinitionError",
    "ReportExportError",
    "ExampleSuite",
    "render_report",
    "build_reference_suite",
    "ConsoleReportPrinter",
    "LoggingReportPrinter",
    "export_json",
    "InspectorSettings",
]
