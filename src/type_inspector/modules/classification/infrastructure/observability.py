# src/type_inspector/modules/classification/infrastructure/observability.py
"""
Servicio de Observabilidad: Logs estructurados, Latencia y Saturación (RAM).

Principios SRE:
1. Logs estructurados para máquinas (JSON horizontal por defecto).
2. Logs legibles para humanos (LOG_FORMAT=PRETTY -> JSON vertical).
3. Contexto (correlation_id) en cada evento.
"""

from __future__ import annotations

import functools
import json
import logging
import os
import sys
import time
import uuid
from collections.abc import Sized
from typing import Any, Callable, TextIO

import psutil

logger = logging.getLogger("type_inspector")

CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
FILE_FORMAT = (
    "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
)


def configure_logging(
    level: int | str = logging.INFO,
    log_file: str | None = None,
    stream: TextIO | None = None,
):
    """
    Configura el logging con destino Consola y, opcionalmente, Archivo.

    ``stream`` reemplaza a stdout (p. ej. stderr cuando stdout lleva JSON).
    """
    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
    console_handler.setLevel(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Limpiar handlers previos para evitar duplicados
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        file_handler.setLevel(logging.DEBUG)  # En disco se guarda todo
        root_logger.addHandler(file_handler)
        logging.getLogger(__name__).debug(f"Logs persistentes en: {log_file}")


class ObservabilityService:

    # None -> decide la variable de entorno LOG_FORMAT
    PRETTY_PRINT: bool | None = None

    @staticmethod
    def pretty_print() -> bool:
        if ObservabilityService.PRETTY_PRINT is not None:
            return ObservabilityService.PRETTY_PRINT
        return os.getenv("LOG_FORMAT") == "PRETTY"

    @staticmethod
    def get_correlation_id() -> str:
        return str(uuid.uuid4())[:8]

    @staticmethod
    def _get_ram_usage_mb() -> float:
        try:
            process = psutil.Process(os.getpid())
            return round(process.memory_info().rss / 1024 / 1024, 2)
        except psutil.Error:
            return 0.0

    @staticmethod
    def log_event(
        event_name: str,
        correlation_id: str,
        payload: dict[str, Any],
        level: str = "INFO",
    ):
        """Emite un log estructurado en JSON (Horizontal o Vertical)."""

        log_entry = {
            "timestamp": time.time(),
            "level": level,
            "event": event_name,
            "correlation_id": correlation_id,
            "data": payload,
        }

        if ObservabilityService.pretty_print():
            msg = json.dumps(log_entry, indent=4, default=str)
        else:
            msg = json.dumps(log_entry, default=str)

        if level == "ERROR":
            logger.error(msg)
        elif level == "DEBUG":
            logger.debug(msg)
        else:
            logger.info(msg)

    @staticmethod
    def measure_latency(operation_name: str, level: str = "INFO"):
        def decorator(func: Callable):
            @functools.wraps(func)
            def wrapper(*args, **kwargs):
                start_time = time.perf_counter()
                start_ram = ObservabilityService._get_ram_usage_mb()
                correlation_id = ObservabilityService.get_correlation_id()
                target = _describe_target(args)

                ObservabilityService.log_event(
                    event_name=f"{operation_name}.started",
                    correlation_id=correlation_id,
                    payload={"target": target, "start_ram_mb": start_ram},
                    level=level,
                )

                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    ObservabilityService.log_event(
                        event_name=f"{operation_name}.failed",
                        correlation_id=correlation_id,
                        payload={
                            "duration_sec": round(time.perf_counter() - start_time, 4),
                            "crash_ram_mb": ObservabilityService._get_ram_usage_mb(),
                            "target": target,
                            "error_type": type(e).__name__,
                            "error_msg": str(e),
                        },
                        level="ERROR",
                    )
                    raise

                end_ram = ObservabilityService._get_ram_usage_mb()
                ObservabilityService.log_event(
                    event_name=f"{operation_name}.completed",
                    correlation_id=correlation_id,
                    payload={
                        "duration_sec": round(time.perf_counter() - start_time, 4),
                        "end_ram_mb": end_ram,
                        "ram_delta_mb": round(end_ram - start_ram, 2),
                        "target": target,
                        "status": "success",
                    },
                    level=level,
                )
                return result

            return wrapper

        return decorator


def measure_time(metric_name: str):
    """
    Decorador liviano para medir latencia: una sola línea [METRIC] en 'metrics'.
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            start_time = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                duration = time.perf_counter() - start_time
                logging.getLogger("metrics").debug(
                    f"[METRIC] {metric_name} duration={duration:.6f}s"
                )

        return wrapper

    return decorator


def _describe_target(args: tuple) -> str:
    """Resume el primer argumento útil: un nombre o el tamaño de una colección."""
    for arg in args:
        name = getattr(arg, "name", None)
        if isinstance(name, str):
            return name
        if isinstance(arg, str):
            return arg
        if isinstance(arg, Sized):
            return f"{len(arg)} items"
    return "unknown"
