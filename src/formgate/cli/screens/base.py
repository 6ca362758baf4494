"""
Clase base para las pantallas de formulario.

Una pantalla conecta las respuestas de questionary con el motor de
validación: cada respuesta es un cambio de valor seguido de un blur
(set_value + mark_touched), y el envío pasa por la compuerta submit().
La pantalla solo dibuja lo que expone get_state().
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

import questionary

from formgate.config import FieldConfig, FormConfig
from formgate.core import FormState
from formgate.data import FormLoader
from formgate.cli.theme import (
    print_header, print_field, print_success, print_error, print_info, print_warning,
)
from formgate.cli.screens.styles import get_form_style, back_choice, submit_choice, edit_choice

SUBMIT = "_submit"
BACK = "_back"


@dataclass(frozen=True)
class Navigation:
    """Resultado de una pantalla: a dónde ir después."""
    action: str  # "push", "back", "exit"
    target: Optional[str] = None

    @classmethod
    def push(cls, target: str) -> "Navigation":
        return cls("push", target)

    @classmethod
    def back(cls) -> "Navigation":
        return cls("back")

    @classmethod
    def exit(cls) -> "Navigation":
        return cls("exit")


class BaseScreen(ABC):
    """Pantalla interactiva con un formulario."""

    form_key: str = ""
    # Enlaces a otras pantallas: [(clave de pantalla, texto)]
    links: list[tuple[str, str]] = []

    def __init__(self, loader: Optional[FormLoader] = None):
        self.loader = loader or FormLoader()
        self.config: FormConfig = self.loader.get_config(self.form_key)
        self.state: FormState = self.loader.create_state(self.form_key)

    @property
    def style(self):
        return get_form_style()

    @abstractmethod
    def on_success(self, values: dict[str, str]) -> Optional[Navigation]:
        """
        Acción posterior a un envío válido.

        Returns:
            Navigation para salir de la pantalla, o None para seguir en ella
        """

    # ------------------------------------------------------------------
    # Prompts (aislados para poder sustituirlos en tests)
    # ------------------------------------------------------------------

    def ask_text(self, fld: FieldConfig, default: str = "") -> Optional[str]:
        """Pide el valor de un campo. None si el usuario cancela."""
        label = fld.placeholder or fld.label or fld.name
        if fld.secret:
            return questionary.password(f"{label}:", default=default, style=self.style).ask()
        return questionary.text(f"{label}:", default=default, style=self.style).ask()

    def ask_action(self) -> Optional[str]:
        """Muestra el menú de acciones. None si el usuario cancela."""
        return questionary.select(
            "Action",
            choices=self.action_choices(),
            style=self.style,
        ).ask()

    def action_choices(self) -> list[questionary.Choice]:
        visible = self.state.visible_errors()
        choices = [questionary.Choice(submit_choice(self.config.submit_label), value=SUBMIT)]
        for fld in self.config.fields:
            label = self.state.schema[fld.name].label
            choices.append(questionary.Choice(edit_choice(label, fld.name in visible), value=fld.name))
        for target, text in self.links:
            choices.append(questionary.Choice(text, value=target))
        choices.append(questionary.Choice(back_choice(), value=BACK))
        return choices

    # ------------------------------------------------------------------
    # Eventos de formulario
    # ------------------------------------------------------------------

    def fill_field(self, fld: FieldConfig) -> bool:
        """
        Edita un campo: cambio de valor + blur.

        Returns:
            False si el usuario canceló el prompt
        """
        value = self.ask_text(fld, default=self.state.values[fld.name])
        if value is None:
            return False
        self.state.set_value(fld.name, value)
        self.state.mark_touched(fld.name)
        error = self.state.visible_error(fld.name)
        if error:
            print_error(error)
        return True

    def fill_all(self) -> bool:
        """Recorre todos los campos en orden. False si el usuario cancela."""
        for fld in self.config.fields:
            if not self.fill_field(fld):
                return False
        return True

    def submit(self) -> Optional[Navigation]:
        """
        Intenta enviar el formulario.

        Si la validación falla los errores quedan visibles y la pantalla
        sigue abierta.
        """
        outcome: list[Optional[Navigation]] = []
        if self.state.submit(lambda values: outcome.append(self.on_success(values))):
            return outcome[0]
        n_errors = len(self.state.errors)
        print_warning(f"Please fix {n_errors} field{'s' if n_errors != 1 else ''} before continuing")
        return None

    # ------------------------------------------------------------------
    # Dibujo
    # ------------------------------------------------------------------

    def render(self) -> None:
        """Dibuja los campos a partir de la instantánea del motor."""
        snapshot = self.state.get_state()
        for fld in self.config.fields:
            print_field(
                self.state.schema[fld.name].label,
                snapshot.values[fld.name],
                secret=fld.secret,
                error=snapshot.visible_errors.get(fld.name),
            )

    def describe_values(self, values: dict[str, str]) -> str:
        """Resumen de los valores enviados, con los secretos enmascarados."""
        parts = []
        for fld in self.config.fields:
            value = values[fld.name]
            parts.append(f"{fld.name}={'*' * len(value) if fld.secret else value}")
        return ", ".join(parts)

    def show(self) -> Navigation:
        """Bucle de la pantalla hasta que el usuario navega a otra."""
        print_header(self.config.title)
        if not self.fill_all():
            return Navigation.back()

        while True:
            self.render()
            choice = self.ask_action()

            if choice is None or choice == BACK:
                return Navigation.back()

            if choice == SUBMIT:
                nav = self.submit()
                if nav is not None:
                    return nav
            elif choice in self.state.schema:
                self.fill_field(self.config.get_field(choice))
            else:
                return Navigation.push(choice)

    def success(self, message: str) -> None:
        print_success(message)

    def info(self, message: str) -> None:
        print_info(message)
