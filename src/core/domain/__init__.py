"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (Pydantic v2 / dataclasses) y la
  taxonomía de errores.
- El dominio no conoce HTTP ni la CLI.
"""
