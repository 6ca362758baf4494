"""
Estilos de questionary para las pantallas.

Toma los colores del tema activo de formgate.cli.theme.
"""

from questionary import Style

from formgate.cli.theme import get_palette


def get_form_style() -> Style:
    """Obtiene el estilo de questionary basado en el tema actual."""
    p = get_palette()
    return Style([
        ('qmark', f'fg:{p.accent} bold'),
        ('question', 'bold'),
        ('answer', f'fg:{p.success} bold'),
        ('pointer', f'fg:{p.accent} bold'),
        ('highlighted', f'fg:{p.primary} bold'),
        ('instruction', f'fg:{p.muted} italic'),
        ('text', ''),
        ('disabled', f'fg:{p.muted} italic'),
        ('separator', f'fg:{p.border}'),
    ])


def back_choice(text: str = "Back") -> str:
    return f"<- {text}"


def submit_choice(text: str) -> str:
    return f">> {text}"


def edit_choice(label: str, has_error: bool = False) -> str:
    """Texto de la opción para editar un campo (marca si tiene error visible)."""
    mark = " [x]" if has_error else ""
    return f"Edit {label}{mark}"
