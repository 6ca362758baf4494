"""
Reglas de validación por campo.

Cada regla es un predicado puro sobre (valor del campo, valores del formulario)
más el mensaje a mostrar cuando falla. Las reglas se componen como listas de
datos; no hay jerarquía de clases de validadores.

Constructores disponibles:
- required: valor no vacío (ignorando espacios)
- min_length: longitud mínima
- email: forma local@dominio.tld
- matches: expresión regular provista por el llamador
- equals_field: igual al valor de otro campo (ej: confirmar contraseña)
"""

import re
from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional, Pattern, Union

Predicate = Callable[[str, Mapping[str, str]], bool]

# Forma estándar local@dominio.tld
EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9._%+\-]+@[A-Za-z0-9](?:[A-Za-z0-9\-]*[A-Za-z0-9])?(?:\.[A-Za-z0-9](?:[A-Za-z0-9\-]*[A-Za-z0-9])?)*\.[A-Za-z]{2,}$")

# Teléfono internacional: +CC, (área), bloques de 2-4 dígitos y separadores
PHONE_PATTERN = re.compile(
    r"^((\+[1-9]{1,4}[ \-]*)|(\([0-9]{2,3}\)[ \-]*)|([0-9]{2,4})[ \-]*)*?[0-9]{3,4}?[ \-]*[0-9]{3,4}?$"
)

LABEL_PLACEHOLDER = "{label}"


@dataclass(frozen=True)
class Rule:
    """Predicado de validación y su mensaje de error."""
    kind: str
    predicate: Predicate
    message: str
    depends_on: tuple[str, ...] = field(default_factory=tuple)

    def check(self, value: str, values: Mapping[str, str]) -> bool:
        """True si el valor cumple la regla."""
        return bool(self.predicate(value, values))

    def render_message(self, label: str) -> str:
        """Mensaje final, sustituyendo {label} por la etiqueta del campo."""
        return self.message.replace(LABEL_PLACEHOLDER, label)


def required(message: str = "{label} is required") -> Rule:
    """El valor no puede quedar vacío ni contener solo espacios."""
    return Rule(
        kind="required",
        predicate=lambda value, values: bool(value and value.strip()),
        message=message,
    )


def min_length(n: int, message: str = "{label} is too short") -> Rule:
    """
    Longitud mínima del valor.

    Args:
        n: Cantidad mínima de caracteres (sin recortar espacios)
        message: Mensaje a mostrar si no se cumple
    """
    if n < 0:
        raise ValueError(f"min_length requiere n >= 0 (recibido: {n})")
    return Rule(
        kind="min_length",
        predicate=lambda value, values: len(value) >= n,
        message=message,
    )


def email(message: str = "Invalid email") -> Rule:
    """El valor debe tener forma de dirección de correo."""
    return Rule(
        kind="email",
        predicate=lambda value, values: EMAIL_PATTERN.match(value) is not None,
        message=message,
    )


def matches(pattern: Union[str, Pattern[str]], message: str) -> Rule:
    """
    El valor debe coincidir con una expresión regular.

    Se usa búsqueda (no coincidencia completa): los anclajes ^ y $ los
    decide el patrón.
    """
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
    return Rule(
        kind="matches",
        predicate=lambda value, values: compiled.search(value) is not None,
        message=message,
    )


def equals_field(other: str, message: str = "Passwords must match") -> Rule:
    """
    El valor debe ser igual al valor actual de otro campo.

    La regla declara su dependencia para que el motor la revalide cuando
    cambia el campo referenciado.
    """
    return Rule(
        kind="equals_field",
        predicate=lambda value, values: value == values.get(other),
        message=message,
        depends_on=(other,),
    )


def first_error(rules: list[Rule], value: str, values: Mapping[str, str], label: str) -> Optional[str]:
    """Evalúa las reglas en orden y retorna el mensaje de la primera que falla."""
    for rule in rules:
        if not rule.check(value, values):
            return rule.render_message(label)
    return None
