"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- La credencial va a stdout y los registros de error a stderr; cada uno con
  su propio renderizado.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from adapters.json_exporter import MASKED_SECRET
from core.domain.models import Credential, ErrorRecord


def build_credential_table(credential: Credential) -> Table:
    """Tabla Rich con el usuario y el secreto enmascarado."""

    table = Table(show_header=True, header_style="bold")
    table.add_column("UserName", style="cyan", no_wrap=True)
    table.add_column("Password", style="dim")
    table.add_row(credential.username, MASKED_SECRET)
    return table


def print_error_record(console: Console, record: ErrorRecord) -> None:
    """Imprime un error no fatal en el estilo `id : mensaje`."""

    line = Text()
    line.append(f"{record.error_id}", style="bold red")
    line.append(f" ({record.category.value})", style="red")
    line.append(f": {record.message}")
    console.print(line, soft_wrap=True)
