"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que el comando y los adaptadores (prompter, exportador) lean la
  configuración de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.language import Language


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "get-credential"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "get-credential"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "get-credential"
    return Path.home() / ".config" / "get-credential"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="GETCRED_",
        extra="ignore",
        case_sensitive=False,
        env_file_encoding="utf-8",
    )

    default_language: Language = Field(
        default=Language.ENGLISH,
        description="Idioma de los textos por defecto del prompt (en/es).",
    )
    output_format: Literal["text", "json"] = Field(
        default="text",
        description="Formato de salida de la credencial producida.",
    )
    max_field_length: int = Field(
        default=128,
        ge=1,
        le=4096,
        description="Longitud máxima aceptada para usuario/dominio en el prompter de consola.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR).",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value!r}")
        return level

    def __init__(self, **values: Any) -> None:
        # Orden: proyecto primero (dev), luego config global de usuario.
        values.setdefault("_env_file", (".env", str(get_user_env_file())))
        super().__init__(**values)
