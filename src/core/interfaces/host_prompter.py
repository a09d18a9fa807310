"""Contrato del prompter de credenciales del host.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir la consola real por un fake con respuestas guionizadas
  en tests.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Credential


@runtime_checkable
class HostPrompter(Protocol):
    """Capacidad del host para pedir una credencial a un operador.

    Reglas de diseño:
    - La llamada es bloqueante; la cancelación (si existe) es cosa del host.
    - Devuelve `None` si el operador descarta el prompt sin introducir nada.
    - Lanza `ValueError` (típicamente `PromptArgumentError`) si título,
      mensaje, usuario o dominio están malformados.
    - La confirmación del secreto (`confirm_password`) es responsabilidad
      exclusiva de la implementación.
    """

    def prompt_for_credential(
        self,
        title: str,
        message: str,
        user_name: str | None,
        domain: str,
        confirm_password: bool,
    ) -> Credential | None:
        """Pide la credencial y la devuelve ya construida."""

        ...
