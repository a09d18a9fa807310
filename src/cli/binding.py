"""Resolución del conjunto de parámetros (capa de binding).

Por qué fuera del Core:
- El comando recibe una unión etiquetada ya resuelta (`DirectCredential` o
  `PromptConfig`); decidir cuál a partir de las opciones sueltas de la CLI
  es responsabilidad de quien parsea argumentos.
"""

from __future__ import annotations

from pydantic import SecretStr

from core.domain.language import Language
from core.domain.models import Credential, DirectCredential, ParameterSet, PromptConfig
from core.errors import ParameterSetConflictError


def resolve_parameter_set(
    *,
    credential_user: str | None = None,
    secret: str | None = None,
    message: str | None = None,
    user_name: str | None = None,
    title: str | None = None,
    confirm_password: bool = False,
    language: Language | None = None,
) -> ParameterSet:
    """Construye el conjunto de parámetros a partir de las opciones de la CLI.

    Reglas:
    - Opciones de ambos grupos a la vez -> `ParameterSetConflictError`.
    - `--credential` -> `DirectCredential`; el secreto (opción o
      `GETCRED_SECRET`) solo cuenta junto a él. Sin secreto, la credencial
      queda pendiente y se pregunta por la contraseña de ese usuario.
    - Cualquier otra cosa (incluido nada) -> `PromptConfig` con los textos
      por defecto del idioma para lo que falte.
    - Cadenas vacías -> `ValueError` (no nulas ni vacías; los espacios valen).
    """

    language = language or Language.default()

    direct = ["--credential"] if credential_user is not None else []
    prompt = [
        name
        for name, value in (("--message", message), ("--user-name", user_name), ("--title", title))
        if value is not None
    ]
    if direct and prompt:
        raise ParameterSetConflictError(direct, prompt)

    for name, value in (("--credential", credential_user), ("--message", message), ("--user-name", user_name), ("--title", title)):
        if value == "":
            raise ValueError(f"{name} must not be empty")

    if credential_user is not None:
        if secret is None:
            return DirectCredential(user_name=credential_user, confirm_password=confirm_password)
        return DirectCredential(
            credential=Credential(username=credential_user, secret=SecretStr(secret)),
            confirm_password=confirm_password,
        )

    return PromptConfig(
        message=message if message is not None else language.default_prompt_message(),
        user_name=user_name,
        title=title if title is not None else language.default_prompt_caption(),
        confirm_password=confirm_password,
    )
