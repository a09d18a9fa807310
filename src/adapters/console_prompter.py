"""Prompter de consola (implementación concreta de `HostPrompter`).

Por qué un adaptador:
- El Core solo conoce el contrato `HostPrompter`; la terminal, Rich y los
  prompts de Typer viven aquí.
- La confirmación del secreto (re-preguntar si no coincide) es un detalle de
  este adaptador, no del comando.
"""

from __future__ import annotations

import logging
from typing import Callable

import click
import typer
from pydantic import SecretStr
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from core.config import AppSettings
from core.domain.models import Credential
from core.errors import PromptArgumentError

logger = logging.getLogger(__name__)

PromptFunc = Callable[..., str]

_ALLOWED_CONTROL = {"\n", "\t"}


def _has_control_chars(value: str, *, allow_newlines: bool) -> bool:
    for ch in value:
        if ch in _ALLOWED_CONTROL and allow_newlines:
            continue
        if ord(ch) < 32 or ord(ch) == 127:
            return True
    return False


def _check_text(parameter: str, value: str, *, allow_newlines: bool = True) -> None:
    if not value:
        raise PromptArgumentError(parameter, "must not be empty")
    if _has_control_chars(value, allow_newlines=allow_newlines):
        raise PromptArgumentError(parameter, "contains control characters")


def _check_identifier(parameter: str, value: str, max_length: int) -> None:
    _check_text(parameter, value, allow_newlines=False)
    if len(value) > max_length:
        raise PromptArgumentError(parameter, f"longer than {max_length} characters")


def compose_user_name(user_name: str, domain: str) -> str:
    """Antepone el dominio (`DOMAIN\\user`) si el usuario no trae uno propio."""

    if not domain or "\\" in user_name or "@" in user_name:
        return user_name
    return f"{domain}\\{user_name}"


class ConsoleHostPrompter:
    """Pide la credencial por terminal (usuario visible, secreto oculto)."""

    def __init__(
        self,
        console: Console | None = None,
        *,
        settings: AppSettings | None = None,
        prompt_func: PromptFunc | None = None,
    ) -> None:
        self._console = console or Console(stderr=True)
        self._settings = settings or AppSettings()
        self._prompt = prompt_func or typer.prompt

    def prompt_for_credential(
        self,
        title: str,
        message: str,
        user_name: str | None,
        domain: str,
        confirm_password: bool,
    ) -> Credential | None:
        max_length = self._settings.max_field_length
        _check_text("title", title)
        _check_text("message", message)
        if user_name is not None:
            _check_identifier("user_name", user_name, max_length)
        if domain:
            _check_identifier("domain", domain, max_length)

        self._console.print(Panel(Text(message), title=Text(title, style="bold cyan"), border_style="cyan"))

        try:
            if user_name is None:
                entered = self._prompt("User", err=True).strip()
                _check_identifier("user_name", entered, max_length)
                user_name = entered
            else:
                self._console.print(Text(f"User: {user_name}", style="dim"))

            full_name = compose_user_name(user_name, domain)
            secret = self._prompt(
                f"Password for user {full_name}",
                hide_input=True,
                confirmation_prompt=confirm_password,
                err=True,
            )
        except click.exceptions.Abort:
            logger.info("Credential prompt dismissed by the operator")
            return None

        return Credential(username=full_name, secret=SecretStr(secret))
