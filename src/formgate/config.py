"""Modelos Pydantic para definiciones declarativas de formularios."""

import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from formgate.core import rules as rule_builders
from formgate.core.rules import PHONE_PATTERN, Rule
from formgate.core.schema import FieldSchema, FormSchema


class RuleType(str, Enum):
    """Tipos de regla disponibles en las definiciones."""
    REQUIRED = "required"
    MIN_LENGTH = "min_length"
    EMAIL = "email"
    MATCHES = "matches"
    EQUALS_FIELD = "equals_field"


class PatternPreset(str, Enum):
    """Expresiones regulares predefinidas para reglas MATCHES."""
    PHONE = "phone"


PATTERN_PRESETS = {
    PatternPreset.PHONE: PHONE_PATTERN,
}


# ============================================================================
# Reglas
# ============================================================================

class RuleConfig(BaseModel):
    """Definición de una regla de validación."""
    type: RuleType
    message: Optional[str] = None
    n: Optional[int] = Field(None, ge=0, description="Longitud mínima (MIN_LENGTH)")
    pattern: Optional[str] = Field(None, description="Expresión regular (MATCHES)")
    preset: Optional[PatternPreset] = Field(None, description="Patrón predefinido (MATCHES)")
    field: Optional[str] = Field(None, description="Campo a comparar (EQUALS_FIELD)")

    @field_validator("pattern")
    @classmethod
    def validate_pattern(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            try:
                re.compile(v)
            except re.error as e:
                raise ValueError(f"expresión regular inválida: {e}") from e
        return v

    @model_validator(mode="after")
    def check_arguments(self) -> "RuleConfig":
        if self.type == RuleType.MIN_LENGTH and self.n is None:
            raise ValueError("min_length requiere 'n'")
        if self.type == RuleType.MATCHES:
            if (self.pattern is None) == (self.preset is None):
                raise ValueError("matches requiere 'pattern' o 'preset' (solo uno)")
            if self.message is None:
                raise ValueError("matches requiere 'message'")
        if self.type == RuleType.EQUALS_FIELD and not self.field:
            raise ValueError("equals_field requiere 'field'")
        return self

    def to_rule(self) -> Rule:
        """Construye la regla del motor."""
        kwargs = {"message": self.message} if self.message is not None else {}

        if self.type == RuleType.REQUIRED:
            return rule_builders.required(**kwargs)
        if self.type == RuleType.MIN_LENGTH:
            return rule_builders.min_length(self.n, **kwargs)
        if self.type == RuleType.EMAIL:
            return rule_builders.email(**kwargs)
        if self.type == RuleType.MATCHES:
            pattern = PATTERN_PRESETS[self.preset] if self.preset else self.pattern
            return rule_builders.matches(pattern, self.message)
        return rule_builders.equals_field(self.field, **kwargs)


# ============================================================================
# Campos y formularios
# ============================================================================

class FieldConfig(BaseModel):
    """Definición de un campo del formulario."""
    name: str = Field(..., min_length=1)
    label: Optional[str] = None
    placeholder: str = ""
    secret: bool = False  # Entrada oculta (contraseñas)
    initial: str = ""
    rules: list[RuleConfig] = Field(default_factory=list)

    def to_schema(self) -> FieldSchema:
        return FieldSchema(
            name=self.name,
            rules=tuple(r.to_rule() for r in self.rules),
            label=self.label,
        )


class FormConfig(BaseModel):
    """Definición completa de un formulario (una pantalla)."""
    key: str = Field(..., min_length=1)
    title: str
    submit_label: str = "Submit"
    success_message: Optional[str] = None
    reset_on_success: bool = False
    fields: list[FieldConfig] = Field(..., min_length=1)

    @field_validator("fields")
    @classmethod
    def validate_unique_names(cls, v: list[FieldConfig]) -> list[FieldConfig]:
        names = [f.name for f in v]
        duplicated = sorted({n for n in names if names.count(n) > 1})
        if duplicated:
            raise ValueError(f"campos duplicados: {', '.join(duplicated)}")
        return v

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]

    def get_field(self, name: str) -> Optional[FieldConfig]:
        for f in self.fields:
            if f.name == name:
                return f
        return None

    def to_schema(self) -> FormSchema:
        """Construye el FormSchema (valida dependencias entre campos)."""
        return FormSchema([f.to_schema() for f in self.fields])

    def initial_values(self) -> dict[str, str]:
        return {f.name: f.initial for f in self.fields}
