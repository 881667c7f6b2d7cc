# src/type_inspector/modules/verification/infrastructure/settings.py
"""
Configuración centralizada leída del entorno.

Variables:
- LOG_LEVEL: nivel de la consola (default INFO)
- LOG_FORMAT: PRETTY activa eventos JSON verticales
- TYPE_INSPECTOR_LOG_FILE: archivo de log opcional
- TYPE_INSPECTOR_USE_RICH: 0/false/no desactiva rich
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

_FALSY = {"0", "false", "no", "off"}


@dataclass
class InspectorSettings:
    """Configuración de ejecución (los flags del CLI tienen prioridad)."""

    log_level: str = "INFO"
    pretty_logs: bool = False
    log_file: str | None = None
    use_rich: bool = True

    def __post_init__(self):
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Nivel de log desconocido: {self.log_level}")

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> InspectorSettings:
        env = os.environ if environ is None else environ
        return cls(
            log_level=env.get("LOG_LEVEL", "INFO"),
            pretty_logs=env.get("LOG_FORMAT") == "PRETTY",
            log_file=env.get("TYPE_INSPECTOR_LOG_FILE") or None,
            use_rich=env.get("TYPE_INSPECTOR_USE_RICH", "1").strip().lower() not in _FALSY,
        )
