"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Los alias reproducen las claves JSON de la API (`ticket`, `tickets`) mientras
  el código Python usa nombres neutros (`item`, `results`).

Nota:
- Todos los modelos son inmutables (`frozen=True`): se construyen por llamada
  y nadie los modifica después.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.ticket_fields import TicketPriority, TicketStatus, TicketType


class _ApiModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    def to_payload(self) -> dict[str, Any]:
        """Dump JSON-compatible con las claves de la API, sin nulos ni campos no asignados."""

        return self.model_dump(mode="json", by_alias=True, exclude_unset=True, exclude_none=True)


class Ticket(_ApiModel):
    """Un ticket de soporte tal y como lo expone la API.

    Solo `id` tiene semántica para el cliente: es obligatorio en updates y lo
    asigna el servidor en creates. El resto de campos es opcional.
    """

    id: int | None = Field(
        default=None,
        description="Identificador numérico (ausente en tickets nuevos).",
    )
    subject: str | None = Field(
        default=None,
        description="Asunto del ticket.",
    )
    description: str | None = Field(
        default=None,
        description="Primer comentario del ticket (solo lectura tras crearlo).",
    )
    url: str | None = Field(
        default=None,
        description="URL de la API para este ticket.",
    )
    external_id: str | None = Field(
        default=None,
        description="Identificador en un sistema externo.",
    )
    type: TicketType | None = None
    priority: TicketPriority | None = None
    status: TicketStatus | None = None

    requester_id: int | None = None
    submitter_id: int | None = None
    assignee_id: int | None = None
    organization_id: int | None = None
    group_id: int | None = None

    tags: tuple[str, ...] = Field(
        default=(),
        description="Etiquetas libres del ticket (tupla: el modelo es inmutable por completo).",
    )

    due_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def has_id(self) -> bool:
        """`None` y `0` (el valor por defecto de un entero) cuentan como ausentes."""

        return bool(self.id)


class TicketRequest(_ApiModel):
    """Envelope de salida para escrituras (`{"ticket": {...}}`)."""

    item: Ticket = Field(..., alias="ticket")


class TicketResponse(_ApiModel):
    """Envelope de respuesta con un único ticket."""

    item: Ticket = Field(..., alias="ticket")


class TicketListResponse(_ApiModel):
    """Envelope de respuesta para lecturas masivas (`{"tickets": [...]}`)."""

    results: list[Ticket] = Field(default_factory=list, alias="tickets")
