"""
Cargador de definiciones de formularios.

Lee las definiciones declarativas (JSON) de las pantallas del sistema
(sign_in, sign_up, employee_form) y construye esquemas y estados del motor.
Acepta también un archivo JSON propio con el mismo formato.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from formgate.config import FormConfig
from formgate.core import FormDefinitionError, FormState, create

SYSTEM_FORMS_FILE = "forms.json"


class FormLoader:
    """
    Acceso a definiciones de formularios.

    Example:
        >>> loader = FormLoader()
        >>> [c.key for c in loader.list_forms()]
        ['sign_in', 'sign_up', 'employee_form']
        >>> state = loader.create_state("sign_in")
        >>> state.validate_all()
        False
    """

    _data_dir = Path(__file__).parent
    _cache: dict[Path, dict[str, FormConfig]] = {}

    def __init__(self, path: Optional[Union[str, Path]] = None):
        """
        Inicializa el cargador.

        Args:
            path: Archivo JSON con definiciones. Si es None se usan las del sistema.
        """
        self.path = Path(path) if path is not None else self._data_dir / SYSTEM_FORMS_FILE

    @property
    def is_system(self) -> bool:
        return self.path == self._data_dir / SYSTEM_FORMS_FILE

    # =========================================================================
    # Listado
    # =========================================================================

    def list_forms(self) -> list[FormConfig]:
        """Lista las definiciones disponibles, en orden de archivo."""
        return list(self._load().values())

    def keys(self) -> list[str]:
        return list(self._load())

    def get_config(self, key: str) -> FormConfig:
        """
        Obtiene la definición de un formulario.

        Raises:
            FormDefinitionError: Si la clave no existe
        """
        forms = self._load()
        if key not in forms:
            raise FormDefinitionError(
                f"Formulario desconocido: '{key}' (disponibles: {', '.join(forms)})"
            )
        return forms[key]

    # =========================================================================
    # Construcción
    # =========================================================================

    def create_state(self, key: str) -> FormState:
        """Crea un FormState nuevo con los valores iniciales de la definición."""
        config = self.get_config(key)
        return create(config.to_schema(), config.initial_values())

    # =========================================================================
    # Lectura
    # =========================================================================

    def _load(self) -> dict[str, FormConfig]:
        """Carga y valida el JSON (con cache por archivo)."""
        path = self.path.resolve()
        if path not in FormLoader._cache:
            FormLoader._cache[path] = self._parse(path)
        return FormLoader._cache[path]

    @staticmethod
    def _parse(path: Path) -> dict[str, FormConfig]:
        try:
            with open(path, encoding="utf-8") as f:
                raw = json.load(f)
        except FileNotFoundError as e:
            raise FormDefinitionError(f"No existe el archivo de formularios: {path}") from e
        except json.JSONDecodeError as e:
            raise FormDefinitionError(f"JSON inválido en {path}: {e}") from e

        if not isinstance(raw, dict):
            raise FormDefinitionError(f"{path}: se esperaba un objeto {{clave: formulario}}")

        forms = {}
        for key, data in raw.items():
            if not isinstance(data, dict):
                raise FormDefinitionError(f"Definición inválida '{key}': se esperaba un objeto")
            try:
                config = FormConfig.model_validate({**data, "key": key})
                # Verifica dependencias entre campos (equals_field)
                config.to_schema()
            except ValidationError as e:
                raise FormDefinitionError(f"Definición inválida '{key}': {e}") from e
            except ValueError as e:
                raise FormDefinitionError(f"Definición inválida '{key}': {e}") from e
            forms[key] = config
        return forms

    @classmethod
    def clear_cache(cls) -> None:
        cls._cache.clear()
