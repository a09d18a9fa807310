"""CLI `get-credential` (Typer).

Esta capa solo hace binding de opciones, renderizado y códigos de salida;
la política de qué se emite y qué se reporta vive en
`core.services.credential_command`.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from adapters.console_prompter import ConsoleHostPrompter
from adapters.json_exporter import credential_to_json, export_credential_json
from cli.binding import resolve_parameter_set
from cli.ui_components import build_credential_table, print_error_record
from core.config import AppSettings
from core.domain.language import Language
from core.errors import ParameterSetConflictError
from core.interfaces.host_prompter import HostPrompter
from core.log import configure_logging
from core.services.credential_command import GetCredentialCommand


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


app = typer.Typer(
    add_completion=False,
    help="Return a credential object, either the one supplied or one collected interactively.",
)


def build_prompter(settings: AppSettings) -> HostPrompter:
    """Prompter usado por la CLI; los tests lo sustituyen con monkeypatch."""

    return ConsoleHostPrompter(Console(stderr=True), settings=settings)


@app.command()
def get_credential(
    user_name_arg: Optional[str] = typer.Argument(
        None,
        metavar="[USER_NAME]",
        help="User name to pre-fill in the prompt.",
        show_default=False,
    ),
    credential_user: Optional[str] = typer.Option(
        None,
        "--credential",
        help="User name of the credential to return; prompts for its secret unless --secret is given.",
    ),
    secret: Optional[str] = typer.Option(
        None,
        "--secret",
        envvar="GETCRED_SECRET",
        help="Secret of the credential given with --credential (ignored without it).",
        show_default=False,
    ),
    message: Optional[str] = typer.Option(None, "--message", "-m", help="Prompt body text."),
    user_name: Optional[str] = typer.Option(None, "--user-name", "-u", help="User name to pre-fill in the prompt."),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="Prompt caption."),
    confirm_password: bool = typer.Option(False, "--confirm-password", help="Ask for the secret twice."),
    output: Optional[OutputFormat] = typer.Option(None, "--output", "-o", help="Output format (text/json)."),
    reveal_secret: bool = typer.Option(False, "--reveal-secret", help="Include the secret in JSON output."),
    output_file: Optional[Path] = typer.Option(None, "--output-file", help="Also write the credential as JSON here."),
    language: Optional[Language] = typer.Option(None, "--language", help="Language of the default texts."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Return a credential object."""

    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)

    if user_name_arg is not None and user_name is not None:
        raise typer.BadParameter("user name given both as argument and as --user-name")

    language = language or settings.default_language
    try:
        parameters = resolve_parameter_set(
            credential_user=credential_user,
            secret=secret,
            message=message,
            user_name=user_name if user_name is not None else user_name_arg,
            title=title,
            confirm_password=confirm_password,
            language=language,
        )
    except (ParameterSetConflictError, ValueError) as exc:
        raise typer.BadParameter(str(exc)) from exc

    command = GetCredentialCommand(build_prompter(settings), language=language)
    result = command.execute(parameters)

    err_console = Console(stderr=True)
    for record in result.errors:
        print_error_record(err_console, record)

    credential = result.credential
    if credential is not None:
        fmt = output or OutputFormat(settings.output_format)
        if fmt is OutputFormat.JSON:
            typer.echo(credential_to_json(credential, reveal_secret=reveal_secret))
        else:
            Console().print(build_credential_table(credential))
        if output_file is not None:
            export_credential_json(credential=credential, output_path=output_file, reveal_secret=reveal_secret)

    if not result.succeeded:
        raise typer.Exit(code=1)


def run() -> None:
    app()
