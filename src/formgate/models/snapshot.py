"""
Modelo de la instantánea de estado que consume la interfaz.
"""

from pydantic import BaseModel, ConfigDict, Field


class FormSnapshot(BaseModel):
    """
    Estado de solo lectura de un formulario tras la última mutación.

    La interfaz lo consulta después de cada evento para volver a dibujar.
    `errors` contiene todos los errores calculados; `visible_errors` solo
    los de campos tocados (los que se muestran al usuario).
    """

    model_config = ConfigDict(frozen=True)

    values: dict[str, str]
    errors: dict[str, str] = Field(default_factory=dict)
    touched: dict[str, bool] = Field(default_factory=dict)
    is_valid: bool = True
    dirty: bool = False
    submit_count: int = 0
    visible_errors: dict[str, str] = Field(default_factory=dict)
