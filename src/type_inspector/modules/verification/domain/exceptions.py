# src/type_inspector/modules/verification/domain/exceptions.py
"""
Excepciones del dominio de Verificación.

Arquitectura: Domain Layer
Responsabilidad: Definir errores semánticos independientes de la infraestructura.

Un caso que no coincide NO es una excepción: se registra como FAILED.
"""


class InspectionError(Exception):
    """Clase base para errores del paquete."""

    pass


class CaseDefinitionError(InspectionError):
    """La suite se definió mal (ej: etiqueta de caso vacía)."""

    pass


class ReportExportError(InspectionError):
    """No se pudo escribir el reporte en el destino indicado."""

    pass
