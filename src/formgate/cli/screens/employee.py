"""
Pantalla de captura de datos de empleado.
"""

from typing import Optional

from formgate.cli.screens.base import BaseScreen, Navigation


class EmployeeFormScreen(BaseScreen):
    """
    Formulario de empleado.

    Tras un envío válido informa los datos y reinicia el formulario para
    cargar otro empleado (la pantalla sigue abierta).
    """

    form_key = "employee_form"

    def on_success(self, values: dict[str, str]) -> Optional[Navigation]:
        self.info(f"Employee Data: {self.describe_values(values)}")
        self.success(self.config.success_message or "Employee information submitted successfully!")
        if self.config.reset_on_success:
            self.state.reset()
        return None
