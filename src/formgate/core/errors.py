"""
Excepciones del motor de validación de formularios.

Los errores de entrada del usuario (campo vacío, formato inválido,
contraseñas distintas) NO son excepciones: viven en el mapa de errores
del FormState. Estas clases cubren solo errores del programador.
"""


class FormError(Exception):
    """Base para todos los errores de formgate."""


class SchemaError(FormError, ValueError):
    """El esquema o los valores iniciales no coinciden con los campos declarados."""


class UnknownFieldError(FormError, KeyError):
    """Se referenció un campo que no existe en el esquema."""

    def __init__(self, field: str, known: tuple[str, ...] = ()):
        self.field = field
        self.known = known
        super().__init__(field)

    def __str__(self) -> str:
        if self.known:
            return f"Campo desconocido: '{self.field}' (campos: {', '.join(self.known)})"
        return f"Campo desconocido: '{self.field}'"


class FormDefinitionError(FormError):
    """Una definición de formulario (JSON) no existe o es inválida."""
