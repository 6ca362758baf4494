"""
Modelos de datos para formgate.

Modelos Pydantic expuestos a la interfaz.
"""

from formgate.models.snapshot import FormSnapshot

__all__ = [
    "FormSnapshot",
]
