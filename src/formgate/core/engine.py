"""
Motor de validación de formularios.

Mantiene los valores, los campos tocados y los errores derivados de un
formulario. La interfaz llama a sus métodos ante cada evento (cambio,
blur, envío) y vuelve a dibujar a partir de get_state().

Todas las operaciones son síncronas: el efecto de cada mutación es
visible en la siguiente lectura del estado.
"""

from typing import Callable, Mapping, Optional

from formgate.models import FormSnapshot

from .errors import SchemaError, UnknownFieldError
from .schema import FormSchema


class FormState:
    """
    Estado de un formulario para una pantalla.

    Se crea al montar la pantalla y se descarta (o se reinicia con reset)
    tras un envío exitoso.

    Cualquier cambio de valor o de campos tocados revalida todos los campos,
    de modo que los errores siempre corresponden a los valores actuales.
    Un formulario recién creado o reiniciado no tiene errores calculados.
    """

    def __init__(self, schema: FormSchema, initial_values: Mapping[str, str]):
        schema.check_values(initial_values)
        self.schema = schema
        self._initial: dict[str, str] = {name: initial_values[name] for name in schema}
        self._values: dict[str, str] = dict(self._initial)
        self._touched: dict[str, bool] = {name: False for name in schema}
        self._errors: dict[str, str] = {}
        self.submit_count = 0

    # ------------------------------------------------------------------
    # Consultas
    # ------------------------------------------------------------------

    @property
    def values(self) -> dict[str, str]:
        """Copia de los valores actuales."""
        return dict(self._values)

    @property
    def errors(self) -> dict[str, str]:
        """Errores calculados (campo ausente = válido)."""
        return dict(self._errors)

    @property
    def touched(self) -> dict[str, bool]:
        return dict(self._touched)

    @property
    def is_valid(self) -> bool:
        return not self._errors

    @property
    def dirty(self) -> bool:
        """True si algún valor difiere de los valores iniciales."""
        return self._values != self._initial

    def visible_error(self, field: str) -> Optional[str]:
        """Error del campo solo si está tocado (el que se muestra)."""
        self._require(field)
        if not self._touched[field]:
            return None
        return self._errors.get(field)

    def visible_errors(self) -> dict[str, str]:
        return {
            name: message
            for name, message in self._errors.items()
            if self._touched[name]
        }

    def get_state(self) -> FormSnapshot:
        """Instantánea de solo lectura del estado actual."""
        return FormSnapshot(
            values=self.values,
            errors=self.errors,
            touched=self.touched,
            is_valid=self.is_valid,
            dirty=self.dirty,
            submit_count=self.submit_count,
            visible_errors=self.visible_errors(),
        )

    # ------------------------------------------------------------------
    # Mutaciones
    # ------------------------------------------------------------------

    def set_value(self, field: str, value: str) -> None:
        """
        Actualiza el valor de un campo.

        Revalida todo el formulario, incluidos los campos cuyas reglas leen
        su valor (ej: confirmPassword cuando cambia password).
        """
        self._require(field)
        self._values[field] = value
        self._revalidate_all()

    def mark_touched(self, field: str) -> None:
        """Marca el campo como tocado (blur) y revalida el formulario."""
        self._require(field)
        self._touched[field] = True
        self._revalidate_all()

    def validate_all(self) -> bool:
        """Toca todos los campos, revalida todo y retorna si es válido."""
        for name in self.schema:
            self._touched[name] = True
        self._revalidate_all()
        return self.is_valid

    def submit(self, on_valid: Callable[[dict[str, str]], None]) -> bool:
        """
        Compuerta de envío.

        Ejecuta on_valid con una copia de los valores solo si validate_all()
        pasa. Si no pasa no hace nada más: los errores quedan visibles.

        Returns:
            True si se ejecutó on_valid
        """
        self.submit_count += 1
        if not self.validate_all():
            return False
        on_valid(self.values)
        return True

    def reset(self, new_initial_values: Optional[Mapping[str, str]] = None) -> None:
        """
        Vuelve al estado inicial.

        Args:
            new_initial_values: Si se pasa, reemplaza los valores iniciales
                (debe tener exactamente los campos del esquema)
        """
        if new_initial_values is not None:
            self.schema.check_values(new_initial_values)
            self._initial = {name: new_initial_values[name] for name in self.schema}
        self._values = dict(self._initial)
        self._touched = {name: False for name in self.schema}
        self._errors = {}
        self.submit_count = 0

    # ------------------------------------------------------------------

    def _require(self, field: str) -> None:
        if field not in self.schema:
            raise UnknownFieldError(field, self.schema.field_names)

    def _revalidate_all(self) -> None:
        errors = {}
        for name in self.schema:
            message = self.schema[name].validate(self._values[name], self._values)
            if message is not None:
                errors[name] = message
        self._errors = errors

    def __repr__(self) -> str:
        return f"FormState(fields={list(self.schema)}, valid={self.is_valid}, submits={self.submit_count})"


def create(schema: FormSchema, initial_values: Optional[Mapping[str, str]] = None) -> FormState:
    """
    Crea el estado de un formulario.

    Args:
        schema: Esquema con los campos y sus reglas
        initial_values: Valores iniciales; deben cubrir exactamente los
            campos del esquema. Si es None se usan cadenas vacías.

    Raises:
        SchemaError: Si faltan o sobran campos en initial_values
    """
    if initial_values is None:
        initial_values = {name: "" for name in schema}
    if not isinstance(initial_values, Mapping):
        raise SchemaError("initial_values debe ser un mapeo campo -> valor")
    return FormState(schema, initial_values)
