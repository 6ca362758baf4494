"""
Pantallas interactivas (questionary) sobre el motor de validación.
"""

from formgate.cli.screens.base import BaseScreen, Navigation, SUBMIT, BACK
from formgate.cli.screens.auth import SignInScreen, SignUpScreen
from formgate.cli.screens.employee import EmployeeFormScreen
from formgate.cli.screens.router import ScreenRouter, SCREENS

__all__ = [
    "BaseScreen",
    "Navigation",
    "SUBMIT",
    "BACK",
    "SignInScreen",
    "SignUpScreen",
    "EmployeeFormScreen",
    "ScreenRouter",
    "SCREENS",
]
