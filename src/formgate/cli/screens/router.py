"""
Navegación entre pantallas con una pila (push / back).
"""

from typing import Callable, Optional

from formgate.data import FormLoader
from formgate.cli.screens.base import BaseScreen, Navigation
from formgate.cli.screens.auth import SignInScreen, SignUpScreen
from formgate.cli.screens.employee import EmployeeFormScreen

SCREENS: dict[str, Callable[..., BaseScreen]] = {
    "sign_in": SignInScreen,
    "sign_up": SignUpScreen,
    "employee_form": EmployeeFormScreen,
}


class ScreenRouter:
    """
    Pila de pantallas.

    Cada pantalla se crea nueva al entrar (su FormState no sobrevive a la
    navegación). back() sobre la última pantalla termina la sesión.
    """

    def __init__(self, start: str = "sign_in", loader: Optional[FormLoader] = None):
        if start not in SCREENS:
            raise KeyError(start)
        self.loader = loader or FormLoader()
        self.stack: list[str] = [start]
        self.history: list[str] = []

    @property
    def current(self) -> Optional[str]:
        return self.stack[-1] if self.stack else None

    def apply(self, nav: Navigation) -> None:
        """Aplica el resultado de una pantalla a la pila."""
        if nav.action == "push":
            if nav.target not in SCREENS:
                raise KeyError(nav.target)
            self.stack.append(nav.target)
        elif nav.action == "back":
            self.stack.pop()
        elif nav.action == "exit":
            self.stack.clear()
        else:
            raise ValueError(f"Acción de navegación desconocida: {nav.action}")

    def run(self) -> None:
        """Muestra pantallas hasta vaciar la pila."""
        while self.stack:
            key = self.current
            self.history.append(key)
            screen = SCREENS[key](self.loader)
            self.apply(screen.show())
