"""CLI principal (Typer).

Por qué Typer + Rich:
- Typer da subcomandos tipados (ids enteros, enums) sin parseo manual.
- Rich separa la presentación (tablas/paneles) de la lógica de recursos.

Cada comando abre un `HttpxRestClient`, ejecuta una única llamada del
`TicketResource` con `asyncio.run` y cierra el cliente.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, List, Optional, TypeVar

import typer
from rich.console import Console

from adapters.http_client import HttpxRestClient
from adapters.resources import TicketResource
from cli import doctor
from cli.ui_components import build_error_panel, build_tickets_table, dump_json, print_banner
from core.config import AppSettings
from core.domain.models import Ticket, TicketListResponse, TicketRequest, TicketResponse
from core.domain.ticket_fields import TicketPriority, TicketStatus, TicketType
from core.errors import ZendeskError

T = TypeVar("T")

app = typer.Typer(no_args_is_help=True, help="Zendesk tickets from the command line.")
tickets_app = typer.Typer(no_args_is_help=True, help="Read and write tickets.")
app.add_typer(tickets_app, name="tickets")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def _call(action: Callable[[TicketResource], Awaitable[T]]) -> T:
    async def _runner() -> T:
        async with HttpxRestClient(AppSettings()) as client:
            return await action(TicketResource(client))

    return asyncio.run(_runner())


def _execute(action: Callable[[TicketResource], Awaitable[T]], *, as_json: bool) -> T:
    try:
        return _call(action)
    except ZendeskError as exc:
        if as_json:
            typer.echo(dump_json(exc.to_dict()))
        else:
            _console.print(build_error_panel(exc))
        raise typer.Exit(code=1) from exc


def _render(response: TicketResponse | TicketListResponse, *, as_json: bool) -> None:
    if as_json:
        typer.echo(dump_json(response.to_payload()))
        return
    tickets = response.results if isinstance(response, TicketListResponse) else [response.item]
    _console.print(build_tickets_table(tickets))


@app.callback()
def main(
    banner: bool = typer.Option(False, "--banner", help="Show the banner before running."),
) -> None:
    if banner:
        print_banner(_console)


@tickets_app.command()
def get(
    ticket_id: int = typer.Argument(..., help="Ticket id."),
    as_json: bool = typer.Option(False, "--json", help="Print the raw envelope as JSON."),
) -> None:
    """Show one ticket."""

    response = _execute(lambda resource: resource.get(ticket_id), as_json=as_json)
    _render(response, as_json=as_json)


@tickets_app.command(name="show-many")
def show_many(
    ticket_ids: List[int] = typer.Argument(..., help="One or more ticket ids."),
    as_json: bool = typer.Option(False, "--json", help="Print the raw envelope as JSON."),
) -> None:
    """Show several tickets in a single request."""

    response = _execute(lambda resource: resource.get_all(ticket_ids), as_json=as_json)
    _render(response, as_json=as_json)


@tickets_app.command()
def create(
    subject: str = typer.Option(..., "--subject", help="Ticket subject."),
    description: Optional[str] = typer.Option(None, "--description", help="First comment."),
    priority: Optional[TicketPriority] = typer.Option(None, "--priority"),
    ticket_type: Optional[TicketType] = typer.Option(None, "--type"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw envelope as JSON."),
) -> None:
    """Create a ticket (the server assigns the id)."""

    request = TicketRequest(
        item=Ticket(subject=subject, description=description, priority=priority, type=ticket_type)
    )
    response = _execute(lambda resource: resource.post(request), as_json=as_json)
    _render(response, as_json=as_json)


@tickets_app.command()
def update(
    ticket_id: int = typer.Argument(..., help="Ticket id."),
    subject: Optional[str] = typer.Option(None, "--subject"),
    status: Optional[TicketStatus] = typer.Option(None, "--status"),
    priority: Optional[TicketPriority] = typer.Option(None, "--priority"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw envelope as JSON."),
) -> None:
    """Update fields of an existing ticket."""

    request = TicketRequest(
        item=Ticket(id=ticket_id, subject=subject, status=status, priority=priority)
    )
    response = _execute(lambda resource: resource.put(request), as_json=as_json)
    _render(response, as_json=as_json)


@tickets_app.command()
def delete(
    ticket_id: int = typer.Argument(..., help="Ticket id."),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
) -> None:
    """Delete a ticket."""

    _execute(lambda resource: resource.delete(ticket_id), as_json=as_json)
    if as_json:
        typer.echo(dump_json({"deleted": ticket_id}))
    else:
        _console.print(f"[green]Deleted ticket {ticket_id}[/green]")


def run() -> None:
    app()
