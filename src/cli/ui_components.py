"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

import json
from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Ticket
from core.errors import ZendeskError


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("zendesk-tickets", style="bold cyan")
    subtitle = Text("Tickets • REST • CLI", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_tickets_table(tickets: Iterable[Ticket]) -> Table:
    """Crea una tabla Rich con una fila por ticket."""

    table = Table(title="Tickets")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Subject", style="white")
    table.add_column("Status", style="green")
    table.add_column("Priority", style="yellow")
    table.add_column("Type", style="magenta")
    table.add_column("Updated", style="dim")
    for ticket in tickets:
        table.add_row(
            str(ticket.id) if ticket.id is not None else "-",
            ticket.subject or "",
            ticket.status.value if ticket.status else "-",
            ticket.priority.value if ticket.priority else "-",
            ticket.type.label() if ticket.type else "-",
            ticket.updated_at.isoformat() if ticket.updated_at else "-",
        )
    return table


def build_error_panel(error: ZendeskError) -> Panel:
    """Panel rojo para errores de la taxonomía."""

    body = Text(str(error))
    if error.status_code is not None:
        body.append(f"\nHTTP {error.status_code}", style="dim")
    return Panel(body, title=Text(error.kind, style="bold red"), border_style="red")


def dump_json(payload: dict[str, object]) -> str:
    """JSON estable para el modo `--json` (pipelines)."""

    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True)
