"""
Esquemas de formulario: conjunto fijo de campos con sus reglas.
"""

import re
from dataclasses import dataclass, field
from typing import Iterator, Mapping, Optional

from .errors import SchemaError, UnknownFieldError
from .rules import Rule, first_error


def humanize(name: str) -> str:
    """
    Convierte un nombre de campo en etiqueta legible.

    fullName -> "Full name", confirm_password -> "Confirm password"
    """
    words = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", " ", name).replace("_", " ").split()
    if not words:
        return name
    text = " ".join(w.lower() for w in words)
    return text[0].upper() + text[1:]


@dataclass(frozen=True)
class FieldSchema:
    """Reglas de un campo, evaluadas en orden de declaración."""
    name: str
    rules: tuple[Rule, ...] = field(default_factory=tuple)
    label: Optional[str] = None

    def __post_init__(self):
        if not self.name:
            raise SchemaError("El nombre del campo no puede estar vacío")
        # Aceptar listas por comodidad
        object.__setattr__(self, "rules", tuple(self.rules))
        if self.label is None:
            object.__setattr__(self, "label", humanize(self.name))

    @property
    def depends_on(self) -> frozenset[str]:
        """Otros campos cuyos valores leen las reglas de este campo."""
        return frozenset(dep for rule in self.rules for dep in rule.depends_on if dep != self.name)

    def validate(self, value: str, values: Mapping[str, str]) -> Optional[str]:
        """Mensaje de la primera regla que falla, o None si es válido."""
        return first_error(list(self.rules), value, values, self.label)


class FormSchema:
    """
    Mapeo inmutable nombre de campo -> FieldSchema.

    Los campos se fijan al construir; no se agregan ni quitan después.
    Toda dependencia entre campos debe apuntar a un campo del esquema.
    """

    def __init__(self, fields: list[FieldSchema]):
        self._fields: dict[str, FieldSchema] = {}
        for fld in fields:
            if fld.name in self._fields:
                raise SchemaError(f"Campo duplicado en el esquema: '{fld.name}'")
            self._fields[fld.name] = fld

        for fld in self._fields.values():
            for dep in sorted(fld.depends_on):
                if dep not in self._fields:
                    raise SchemaError(
                        f"El campo '{fld.name}' depende de '{dep}', que no está en el esquema"
                    )

    @classmethod
    def from_rules(cls, rules: Mapping[str, list[Rule]], labels: Optional[Mapping[str, str]] = None) -> "FormSchema":
        """Construye un esquema a partir de {campo: [reglas]}."""
        labels = labels or {}
        return cls([
            FieldSchema(name=name, rules=tuple(field_rules), label=labels.get(name))
            for name, field_rules in rules.items()
        ])

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(self._fields)

    def __getitem__(self, name: str) -> FieldSchema:
        try:
            return self._fields[name]
        except KeyError:
            raise UnknownFieldError(name, self.field_names) from None

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def check_values(self, values: Mapping[str, str]) -> None:
        """Verifica que `values` tenga exactamente los campos del esquema."""
        expected = set(self._fields)
        given = set(values)
        missing = sorted(expected - given)
        extra = sorted(given - expected)
        if missing or extra:
            parts = []
            if missing:
                parts.append(f"faltan: {', '.join(missing)}")
            if extra:
                parts.append(f"sobran: {', '.join(extra)}")
            raise SchemaError("Los valores no coinciden con el esquema (" + "; ".join(parts) + ")")

    def __repr__(self) -> str:
        return f"FormSchema({', '.join(self._fields)})"
