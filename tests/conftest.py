"""Configuración de pytest para tests de formgate."""

import pytest

from formgate.core import FormSchema, create, required, email, min_length, equals_field, matches
from formgate.core.rules import PHONE_PATTERN
from formgate.data import FormLoader


@pytest.fixture
def sign_in_schema():
    """Esquema de inicio de sesión armado con los constructores de reglas."""
    return FormSchema.from_rules({
        "email": [required(), email()],
        "password": [required()],
    })


@pytest.fixture
def sign_in_state(sign_in_schema):
    return create(sign_in_schema, {"email": "", "password": ""})


@pytest.fixture
def sign_up_state():
    """Formulario de registro con regla cruzada confirmPassword -> password."""
    schema = FormSchema.from_rules({
        "fullName": [required(), min_length(3, "Too Short!")],
        "email": [required(), email("Invalid email address")],
        "password": [required(), min_length(8, "Password must be at least 8 characters")],
        "confirmPassword": [required(), equals_field("password")],
    })
    return create(schema, {name: "" for name in schema})


@pytest.fixture
def employee_state():
    """Formulario de empleado con patrones de ID y teléfono."""
    schema = FormSchema.from_rules(
        {
            "fullName": [required(), min_length(3, "Full name is too short")],
            "employeeId": [required(), matches(r"^[A-Z0-9]{5,10}$", "Must be 5-10 alphanumeric characters")],
            "department": [required()],
            "email": [required(), email("Invalid email format")],
            "phoneNumber": [required(), matches(PHONE_PATTERN, "Phone number is not valid")],
        },
        labels={"employeeId": "Employee ID"},
    )
    return create(schema, {name: "" for name in schema})


@pytest.fixture
def valid_employee():
    """Valores de empleado que cumplen todas las reglas."""
    return {
        "fullName": "Jane Doe",
        "employeeId": "DEV12345",
        "department": "Engineering",
        "email": "jane@example.com",
        "phoneNumber": "+1 555-123-4567",
    }


@pytest.fixture
def loader():
    """Cargador con las definiciones del sistema."""
    return FormLoader()


@pytest.fixture(autouse=True)
def _clear_loader_cache():
    yield
    FormLoader.clear_cache()
