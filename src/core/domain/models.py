"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta y documentación autocontenida (Field) sin acoplar el
  Core a la terminal ni a la CLI.
- `SecretStr` evita que el secreto aparezca en `repr`, logs o tracebacks.

Nota:
- Estos modelos describen *qué* se entrega (una credencial), no *cómo* se
  obtiene.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, SecretStr
from pydantic.config import ConfigDict

from core.domain.language import Language


class Credential(BaseModel):
    """Par (usuario, secreto) listo para entregarse a otra operación.

    Inmutable una vez construido.
    """

    model_config = ConfigDict(frozen=True)

    username: str = Field(
        ...,
        description="Nombre de usuario (puede incluir dominio, p.ej. 'CORP\\alice').",
    )
    secret: SecretStr = Field(
        ...,
        description="Secreto opaco; solo se lee vía `get_secret_value()`.",
    )


class DirectCredential(BaseModel):
    """Conjunto de parámetros 'direct': el llamador ya tiene la credencial."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["direct"] = "direct"
    credential: Credential | None = Field(
        default=None,
        description="Credencial suministrada; si es None se cae al modo prompt.",
    )
    user_name: str | None = Field(
        default=None,
        description="Usuario de la credencial pendiente; se pre-rellena al preguntar.",
    )
    confirm_password: bool = Field(
        default=False,
        description="Solo tiene efecto si termina siendo necesario preguntar.",
    )


class PromptConfig(BaseModel):
    """Conjunto de parámetros 'prompt': datos de presentación del diálogo."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["prompt"] = "prompt"
    message: str = Field(
        default_factory=lambda: Language.default().default_prompt_message(),
        description="Texto del cuerpo del prompt.",
    )
    user_name: str | None = Field(
        default=None,
        description="Usuario pre-rellenado (opcional).",
    )
    title: str = Field(
        default_factory=lambda: Language.default().default_prompt_caption(),
        description="Título/caption de la ventana de prompt.",
    )
    confirm_password: bool = Field(
        default=False,
        description="Pedir re-entrada del secreto.",
    )

    @classmethod
    def default(
        cls,
        language: Language | None = None,
        *,
        user_name: str | None = None,
        confirm_password: bool = False,
    ) -> "PromptConfig":
        """Configuración con los textos por defecto del idioma dado."""

        language = language or Language.default()
        return cls(
            message=language.default_prompt_message(),
            user_name=user_name,
            title=language.default_prompt_caption(),
            confirm_password=confirm_password,
        )


ParameterSet = Annotated[Union[DirectCredential, PromptConfig], Field(discriminator="mode")]


class ErrorCategory(str, Enum):
    """Categorías de error reportadas por el comando."""

    INVALID_OPERATION = "InvalidOperation"


class ErrorRecord(BaseModel):
    """Error no fatal: se reporta, pero la ejecución que lo rodea continúa."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    error_id: str = Field(..., min_length=1)
    category: ErrorCategory
    target: Any = None
    exception: BaseException

    @property
    def message(self) -> str:
        return str(self.exception) or type(self.exception).__name__


class CommandResult(BaseModel):
    """Salida de una invocación: stream de resultados + stream de errores."""

    output: list[Credential] = Field(default_factory=list)
    errors: list[ErrorRecord] = Field(default_factory=list)

    @property
    def credential(self) -> Credential | None:
        return self.output[0] if self.output else None

    @property
    def succeeded(self) -> bool:
        return not self.errors
