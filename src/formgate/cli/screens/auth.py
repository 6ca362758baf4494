"""
Pantallas de acceso: inicio de sesión y registro.
"""

from typing import Optional

from formgate.cli.screens.base import BaseScreen, Navigation


class SignInScreen(BaseScreen):
    """Inicio de sesión. Un envío válido lleva al formulario de empleado."""

    form_key = "sign_in"
    links = [("sign_up", "Don't have an account? Sign Up")]

    def on_success(self, values: dict[str, str]) -> Optional[Navigation]:
        self.info(f"Signing in with: {self.describe_values(values)}")
        return Navigation.push("employee_form")


class SignUpScreen(BaseScreen):
    """Registro. Un envío válido reinicia el formulario y vuelve atrás."""

    form_key = "sign_up"

    def on_success(self, values: dict[str, str]) -> Optional[Navigation]:
        self.info(f"Signing up with: {self.describe_values(values)}")
        self.success(self.config.success_message or "Sign-up successful!")
        if self.config.reset_on_success:
            self.state.reset()
        return Navigation.back()
