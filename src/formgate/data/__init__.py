"""
Definiciones de formularios del sistema.

Provee las pantallas sign_in, sign_up y employee_form como datos (JSON)
y su conversión a esquemas del motor.
"""

from formgate.data.form_loader import FormLoader, SYSTEM_FORMS_FILE

__all__ = [
    "FormLoader",
    "SYSTEM_FORMS_FILE",
]
