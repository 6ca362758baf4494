"""
CLI de formgate - Validación de formularios de acceso y empleados.

Comandos:
- screens: Lista los formularios disponibles
- check: Valida valores contra un formulario (no interactivo)
- run: Sesión interactiva (inicio de sesión, registro, empleado)
"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from formgate.cli.theme import CLITheme, ThemeName, print_error, print_success

app = typer.Typer(
    name="formgate",
    help="Validación de formularios con compuerta de envío.",
    no_args_is_help=True,
)

DefinitionsOption = Annotated[
    Optional[Path],
    typer.Option("--definitions", "-d", help="Archivo JSON con definiciones de formularios"),
]


def _get_loader(definitions: Optional[Path]):
    from formgate.core import FormDefinitionError
    from formgate.data import FormLoader

    loader = FormLoader(definitions)
    try:
        loader.keys()
    except FormDefinitionError as e:
        print_error(str(e))
        raise typer.Exit(2)
    return loader


def parse_assignment(text: str) -> tuple[str, str]:
    """
    Parsea 'campo=valor'. El valor puede estar vacío o contener '='.

    Raises:
        typer.BadParameter: Si falta '=' o el campo está vacío
    """
    name, sep, value = text.partition("=")
    if not sep or not name.strip():
        raise typer.BadParameter(f"se esperaba campo=valor (recibido: '{text}')")
    return name.strip(), value


@app.callback()
def main(
    theme: Annotated[str, typer.Option(help="Tema de colores: default, nord, minimal")] = "default",
):
    """
    formgate - Motor de validación de formularios.

    Valida formularios declarativos campo a campo y solo permite el envío
    cuando todos los campos son válidos.
    """
    try:
        CLITheme.set_theme(ThemeName(theme.lower()))
    except ValueError:
        print_error(f"Tema desconocido: {theme}")
        raise typer.Exit(2)


@app.command("screens")
def list_screens(definitions: DefinitionsOption = None):
    """Lista los formularios disponibles."""
    from formgate.cli.theme import print_forms_table

    loader = _get_loader(definitions)
    print_forms_table(loader.list_forms())


@app.command("check")
def check(
    screen: Annotated[str, typer.Argument(help="Clave del formulario (ej: sign_in)")],
    values: Annotated[
        Optional[list[str]],
        typer.Option("--set", "-s", help="Valor de un campo: campo=valor (repetible)"),
    ] = None,
    definitions: DefinitionsOption = None,
):
    """
    Valida valores contra un formulario y muestra los errores.

    Código de salida: 0 si es válido, 1 si hay errores, 2 si el formulario
    o un campo no existen.

    Ejemplo:
        formgate check sign_in -s email=a@b.com -s password=x
        formgate check employee_form -s employeeId=dev123
    """
    from formgate.core import FormDefinitionError, UnknownFieldError
    from formgate.cli.theme import print_validation_table

    loader = _get_loader(definitions)
    try:
        config = loader.get_config(screen)
        state = loader.create_state(screen)
        for item in values or []:
            name, value = parse_assignment(item)
            state.set_value(name, value)
    except (FormDefinitionError, UnknownFieldError) as e:
        print_error(str(e))
        raise typer.Exit(2)

    valid = state.validate_all()
    print_validation_table(config, state.get_state())

    if not valid:
        n_errors = len(state.errors)
        print_error(f"{n_errors} campo(s) con errores")
        raise typer.Exit(1)
    print_success("Formulario válido")


@app.command("run")
def run(
    start: Annotated[str, typer.Option(help="Pantalla inicial")] = "sign_in",
    definitions: DefinitionsOption = None,
):
    """Sesión interactiva: inicio de sesión, registro y formulario de empleado."""
    from formgate.cli.screens import ScreenRouter, SCREENS
    from formgate.cli.theme import print_info

    if start not in SCREENS:
        print_error(f"Pantalla desconocida: {start} (disponibles: {', '.join(SCREENS)})")
        raise typer.Exit(2)

    router = ScreenRouter(start=start, loader=_get_loader(definitions))
    router.run()
    print_info("Goodbye!")
