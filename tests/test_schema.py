"""
Tests para core/schema.py - FieldSchema y FormSchema.
"""

import pytest

from formgate.core import (
    FieldSchema,
    FormSchema,
    SchemaError,
    UnknownFieldError,
    equals_field,
    humanize,
    required,
)


class TestHumanize:
    """Tests para etiquetas derivadas del nombre del campo."""

    @pytest.mark.parametrize("name,label", [
        ("email", "Email"),
        ("fullName", "Full name"),
        ("confirmPassword", "Confirm password"),
        ("phoneNumber", "Phone number"),
        ("employee_id", "Employee id"),
    ])
    def test_labels(self, name, label):
        assert humanize(name) == label


class TestFieldSchema:
    """Tests para FieldSchema."""

    def test_default_label(self):
        assert FieldSchema("fullName").label == "Full name"

    def test_explicit_label(self):
        assert FieldSchema("employeeId", label="Employee ID").label == "Employee ID"

    def test_rules_list_converted_to_tuple(self):
        fld = FieldSchema("email", rules=[required()])
        assert isinstance(fld.rules, tuple)

    def test_empty_name_rejected(self):
        with pytest.raises(SchemaError):
            FieldSchema("")

    def test_depends_on(self):
        fld = FieldSchema("confirmPassword", rules=(required(), equals_field("password")))
        assert fld.depends_on == frozenset({"password"})

    def test_validate_uses_label(self):
        fld = FieldSchema("fullName", rules=(required(),))
        assert fld.validate("", {"fullName": ""}) == "Full name is required"


class TestFormSchema:
    """Tests para FormSchema."""

    def test_field_names_keep_order(self, sign_in_schema):
        assert sign_in_schema.field_names == ("email", "password")
        assert list(sign_in_schema) == ["email", "password"]
        assert len(sign_in_schema) == 2

    def test_contains(self, sign_in_schema):
        assert "email" in sign_in_schema
        assert "phone" not in sign_in_schema

    def test_unknown_field(self, sign_in_schema):
        with pytest.raises(UnknownFieldError):
            sign_in_schema["phone"]

    def test_unknown_field_is_key_error(self, sign_in_schema):
        """Test UnknownFieldError también es KeyError."""
        with pytest.raises(KeyError):
            sign_in_schema["phone"]

    def test_duplicate_field(self):
        with pytest.raises(SchemaError, match="duplicado"):
            FormSchema([FieldSchema("email"), FieldSchema("email")])

    def test_dependency_on_missing_field(self):
        """Test una regla cruzada hacia un campo inexistente falla al construir."""
        with pytest.raises(SchemaError, match="password"):
            FormSchema.from_rules({"confirmPassword": [equals_field("password")]})

    def test_cross_field_dependency(self):
        schema = FormSchema.from_rules({
            "password": [required()],
            "confirmPassword": [required(), equals_field("password")],
        })
        assert schema["confirmPassword"].depends_on == frozenset({"password"})
        assert schema["password"].depends_on == frozenset()

    def test_self_dependency_ignored(self):
        """Test una regla que lee su propio campo no cuenta como dependencia."""
        schema = FormSchema.from_rules({"a": [equals_field("a")]})
        assert schema["a"].depends_on == frozenset()


class TestCheckValues:
    """Tests para verificación de valores iniciales contra el esquema."""

    def test_exact_match(self, sign_in_schema):
        sign_in_schema.check_values({"email": "", "password": ""})

    def test_missing_key(self, sign_in_schema):
        with pytest.raises(SchemaError, match="faltan: password"):
            sign_in_schema.check_values({"email": ""})

    def test_extra_key(self, sign_in_schema):
        with pytest.raises(SchemaError, match="sobran: phone"):
            sign_in_schema.check_values({"email": "", "password": "", "phone": ""})

    def test_schema_error_is_value_error(self, sign_in_schema):
        with pytest.raises(ValueError):
            sign_in_schema.check_values({})
