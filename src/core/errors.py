"""Taxonomía de errores del Core.

Por qué un módulo propio:
- La CLI, el comando y los adaptadores comparten las mismas excepciones sin
  importarse entre sí.
"""

from __future__ import annotations


class GetCredentialError(Exception):
    """Base de los errores propios del proyecto."""


class ParameterSetConflictError(GetCredentialError):
    """El llamador mezcló opciones de los grupos 'direct' y 'prompt'.

    Se detecta en la capa de binding (CLI), nunca dentro del comando.
    """

    def __init__(self, direct: list[str], prompt: list[str]) -> None:
        self.direct = list(direct)
        self.prompt = list(prompt)
        super().__init__(
            "Parameter set cannot be resolved: "
            f"{', '.join(self.direct)} cannot be combined with {', '.join(self.prompt)}."
        )


class PromptArgumentError(GetCredentialError, ValueError):
    """El prompter rechaza título/mensaje/usuario malformados.

    Hereda de `ValueError` porque es la condición de *argumento inválido* que
    el comando captura y degrada a un `ErrorRecord`.
    """

    def __init__(self, parameter: str, reason: str) -> None:
        self.parameter = parameter
        self.reason = reason
        super().__init__(f"Invalid value for '{parameter}': {reason}")
