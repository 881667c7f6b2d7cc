"""📦 core/ — Building blocks universales del sistema

✨ ¿Qué pertenece aquí?
   • Centinelas de valor reusables en CUALQUIER dominio:
     - UNDEFINED (ausencia), Symbol (token opaco único)
   • Helpers genéricos SIN dependencia de negocio

🚫 ¿Qué NO pertenece aquí?
   • Etiquetas de tipo, conteos de frecuencia, resultados de casos
   • Reglas de clasificación o comparación

✅ Dónde poner lo específico del dominio:
   → modules/{bounded_context}/domain/
"""

from .value_objects import UNDEFINED, Symbol, Undefined

__all__ = ["UNDEFINED", "Symbol", "Undefined"]
