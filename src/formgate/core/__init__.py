"""
Motor de validación de formularios.

- rules: constructores de reglas (required, min_length, email, matches, equals_field)
- schema: FieldSchema y FormSchema
- engine: FormState (valores, tocados, errores, compuerta de envío)
- errors: SchemaError, UnknownFieldError
"""

from .errors import (
    FormError,
    SchemaError,
    UnknownFieldError,
    FormDefinitionError,
)

from .rules import (
    Rule,
    required,
    min_length,
    email,
    matches,
    equals_field,
    EMAIL_PATTERN,
    PHONE_PATTERN,
)

from .schema import FieldSchema, FormSchema, humanize

from .engine import FormState, create

__all__ = [
    # Errores
    "FormError",
    "SchemaError",
    "UnknownFieldError",
    "FormDefinitionError",
    # Reglas
    "Rule",
    "required",
    "min_length",
    "email",
    "matches",
    "equals_field",
    "EMAIL_PATTERN",
    "PHONE_PATTERN",
    # Esquemas
    "FieldSchema",
    "FormSchema",
    "humanize",
    # Motor
    "FormState",
    "create",
]
