"""
Funciones para crear objetos Text estilizados (no imprimen directamente).
"""

from typing import Optional

from rich.panel import Panel
from rich.text import Text
from rich import box

from formgate.cli.theme.palette import get_palette


def styled_header(text: str, subtitle: str = None) -> Panel:
    """Crea un encabezado estilizado."""
    p = get_palette()
    content = Text(text, style=f"bold {p.primary}")
    if subtitle:
        content.append(f"\n{subtitle}", style=p.muted)

    return Panel(
        content,
        border_style=p.border,
        box=box.ROUNDED,
        padding=(0, 2),
    )


def styled_success(text: str) -> Text:
    """Texto de éxito."""
    p = get_palette()
    return Text(f"[+] {text}", style=p.success)


def styled_warning(text: str) -> Text:
    """Texto de advertencia."""
    p = get_palette()
    return Text(f"[!] {text}", style=p.warning)


def styled_error(text: str) -> Text:
    """Texto de error."""
    p = get_palette()
    return Text(f"[x] {text}", style=p.error)


def styled_info(text: str) -> Text:
    """Texto informativo."""
    p = get_palette()
    return Text(f"[i] {text}", style=p.info)


def styled_field_error(message: str) -> Text:
    """Mensaje de error bajo un campo (indentado)."""
    p = get_palette()
    return Text(f"    {message}", style=p.error)


def styled_field(label: str, value: str, secret: bool = False, error: Optional[str] = None) -> Text:
    """
    Línea de un campo del formulario: etiqueta, valor y marca de estado.

    Los valores secretos (contraseñas) se muestran enmascarados.
    """
    p = get_palette()
    shown = "*" * len(value) if secret else value
    text = Text()
    text.append(f"{label}: ", style=p.label)
    text.append(shown or "-", style=f"bold {p.value}" if shown else p.muted)
    if error:
        text.append("  [x]", style=p.error)
    return text
