"""📦 modules/ — Bounded contexts del negocio

📚 Cada módulo contiene sus propias capas Clean Architecture:
   • classification/ → Etiquetas de tipo, análisis de colecciones, igualdad
   • verification/   → Casos de ejemplo, reportes y CLI
"""
