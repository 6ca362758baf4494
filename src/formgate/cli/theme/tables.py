"""
Funciones para crear e imprimir tablas Rich.
"""

from typing import TYPE_CHECKING

from rich.table import Table
from rich.text import Text
from rich import box

from formgate.core import humanize
from formgate.cli.theme.palette import get_console, get_palette

if TYPE_CHECKING:
    from formgate.config import FormConfig
    from formgate.models import FormSnapshot


def create_results_table(
    title: str = None,
    columns: list[tuple[str, str]] = None,  # [(nombre, justify), ...]
) -> Table:
    """Crea una tabla estilizada."""
    p = get_palette()

    table = Table(
        title=title,
        title_style=f"bold {p.primary}",
        border_style=p.border,
        header_style=f"bold {p.secondary}",
        box=box.ROUNDED,
        show_header=True,
        padding=(0, 1),
    )

    if columns:
        for name, justify in columns:
            table.add_column(name, justify=justify)

    return table


def print_forms_table(forms: list["FormConfig"]) -> None:
    """Imprime la lista de formularios disponibles."""
    console = get_console()
    p = get_palette()

    table = create_results_table(
        title="Formularios",
        columns=[("Clave", "left"), ("Título", "left"), ("Campos", "left")],
    )
    for form in forms:
        table.add_row(
            f"[bold {p.accent}]{form.key}[/]",
            form.title,
            ", ".join(form.field_names),
        )

    console.print(table)


def print_validation_table(config: "FormConfig", snapshot: "FormSnapshot") -> None:
    """
    Imprime el resultado de validar un formulario: una fila por campo.

    Los valores de campos secretos se enmascaran.
    """
    console = get_console()
    p = get_palette()

    table = create_results_table(
        title=config.title,
        columns=[("Campo", "left"), ("Valor", "left"), ("Estado", "left")],
    )
    for fld in config.fields:
        value = snapshot.values.get(fld.name, "")
        shown = "*" * len(value) if fld.secret else value
        error = snapshot.visible_errors.get(fld.name)
        status = Text(error, style=p.error) if error else Text("OK", style=p.success)
        table.add_row(fld.label or humanize(fld.name), shown or "-", status)

    console.print(table)
