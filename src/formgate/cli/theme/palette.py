"""
Definicion de paletas de colores y gestion de temas.
"""

from dataclasses import dataclass
from typing import Optional
from enum import Enum

from rich.console import Console
from rich.theme import Theme


class ThemeName(Enum):
    """Temas disponibles."""
    DEFAULT = "default"
    NORD = "nord"
    MINIMAL = "minimal"


@dataclass
class ColorPalette:
    """Paleta de colores para un tema."""
    # Colores principales
    primary: str      # Títulos, destacados
    secondary: str    # Subtítulos
    accent: str       # Valores importantes

    # Colores semánticos
    success: str
    warning: str
    error: str
    info: str
    muted: str        # Texto secundario/atenuado

    # Formularios
    label: str        # Etiquetas de campo
    value: str        # Valores ingresados
    border: str       # Bordes y separadores


# Tema por defecto - colores pasteles
THEME_DEFAULT = ColorPalette(
    primary="#5f87af",      # Azul suave
    secondary="#87afaf",    # Cyan apagado
    accent="#af87af",       # Púrpura suave
    success="#87af87",      # Verde suave
    warning="#d7af5f",      # Amarillo/naranja suave
    error="#d75f5f",        # Rojo suave
    info="#5f87af",         # Azul info
    muted="#808080",        # Gris
    label="#afafaf",        # Gris claro
    value="#d7af5f",        # Amarillo
    border="#5f5f5f",       # Gris oscuro
)

# Tema Nord - colores fríos
THEME_NORD = ColorPalette(
    primary="#88c0d0",
    secondary="#81a1c1",
    accent="#b48ead",
    success="#a3be8c",
    warning="#ebcb8b",
    error="#bf616a",
    info="#5e81ac",
    muted="#4c566a",
    label="#d8dee9",
    value="#d08770",
    border="#3b4252",
)

# Tema Minimal - grises y un acento
THEME_MINIMAL = ColorPalette(
    primary="#ffffff",
    secondary="#b0b0b0",
    accent="#5fafff",
    success="#87d787",
    warning="#ffd787",
    error="#ff8787",
    info="#5fafff",
    muted="#606060",
    label="#909090",
    value="#ffffff",
    border="#404040",
)

THEMES = {
    ThemeName.DEFAULT: THEME_DEFAULT,
    ThemeName.NORD: THEME_NORD,
    ThemeName.MINIMAL: THEME_MINIMAL,
}


class CLITheme:
    """Gestor de tema para la CLI."""

    _palette: ColorPalette = THEME_DEFAULT
    _console: Optional[Console] = None

    @classmethod
    def set_theme(cls, theme: ThemeName) -> None:
        """Establece el tema activo."""
        cls._palette = THEMES.get(theme, THEME_DEFAULT)
        cls._console = None  # Recrear console con el nuevo tema

    @classmethod
    def get_palette(cls) -> ColorPalette:
        return cls._palette

    @classmethod
    def get_console(cls) -> Console:
        """Obtiene la consola Rich con el tema aplicado."""
        if cls._console is None:
            p = cls._palette
            cls._console = Console(theme=Theme({
                "primary": p.primary,
                "secondary": p.secondary,
                "accent": p.accent,
                "success": p.success,
                "warning": p.warning,
                "error": p.error,
                "info": p.info,
                "muted": p.muted,
                "label": p.label,
                "value": p.value,
                "title": f"bold {p.primary}",
            }))
        return cls._console


def get_console() -> Console:
    """Obtiene la consola con el tema actual."""
    return CLITheme.get_console()


def get_palette() -> ColorPalette:
    """Obtiene la paleta de colores actual."""
    return CLITheme.get_palette()
