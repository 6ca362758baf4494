"""
Sistema de temas para la interfaz CLI de formgate.

- palette: paletas y gestión de temas (CLITheme, ColorPalette)
- styled: funciones que retornan objetos Text estilizados
- printing: funciones que imprimen directamente a consola
- tables: tablas Rich de formularios y resultados
"""

from formgate.cli.theme.palette import (
    ThemeName,
    ColorPalette,
    THEME_DEFAULT,
    THEME_NORD,
    THEME_MINIMAL,
    THEMES,
    CLITheme,
    get_console,
    get_palette,
)

from formgate.cli.theme.styled import (
    styled_header,
    styled_success,
    styled_warning,
    styled_error,
    styled_info,
    styled_field,
    styled_field_error,
)

from formgate.cli.theme.printing import (
    print_header,
    print_success,
    print_warning,
    print_error,
    print_info,
    print_field,
)

from formgate.cli.theme.tables import (
    create_results_table,
    print_forms_table,
    print_validation_table,
)

__all__ = [
    # palette
    "ThemeName",
    "ColorPalette",
    "THEME_DEFAULT",
    "THEME_NORD",
    "THEME_MINIMAL",
    "THEMES",
    "CLITheme",
    "get_console",
    "get_palette",
    # styled
    "styled_header",
    "styled_success",
    "styled_warning",
    "styled_error",
    "styled_info",
    "styled_field",
    "styled_field_error",
    # printing
    "print_header",
    "print_success",
    "print_warning",
    "print_error",
    "print_info",
    "print_field",
    # tables
    "create_results_table",
    "print_forms_table",
    "print_validation_table",
]
