"""
Funciones que imprimen directamente a la consola.
"""

from formgate.cli.theme.palette import get_console
from formgate.cli.theme.styled import (
    styled_header, styled_success, styled_warning,
    styled_error, styled_info, styled_field, styled_field_error,
)


def print_header(text: str, subtitle: str = None) -> None:
    """Imprime un encabezado."""
    console = get_console()
    console.print(styled_header(text, subtitle))


def print_success(text: str) -> None:
    """Imprime mensaje de éxito."""
    console = get_console()
    console.print(styled_success(text))


def print_warning(text: str) -> None:
    """Imprime advertencia."""
    console = get_console()
    console.print(styled_warning(text))


def print_error(text: str) -> None:
    """Imprime error."""
    console = get_console()
    console.print(styled_error(text))


def print_info(text: str) -> None:
    """Imprime información."""
    console = get_console()
    console.print(styled_info(text))


def print_field(label: str, value: str, secret: bool = False, error: str = None) -> None:
    """
    Imprime un campo del formulario y, debajo, su error visible.

    Args:
        label: Etiqueta del campo
        value: Valor actual
        secret: Si True, enmascara el valor
        error: Error a mostrar (solo si el campo está tocado)
    """
    console = get_console()
    console.print("  ", styled_field(label, value, secret, error))
    if error:
        console.print(styled_field_error(error))
