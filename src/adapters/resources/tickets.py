"""Recurso REST: tickets.

Rutas (relativas a la URL base de la API):
- GET    tickets/{id}
- GET    tickets/show_many?ids=1,2,3
- PUT    tickets/{id}
- POST   tickets
- DELETE tickets/{id}
"""

from __future__ import annotations

from typing import Iterable

from core.domain.models import TicketListResponse, TicketRequest, TicketResponse
from core.errors import ValidationError
from core.interfaces.rest_client import JSON_CONTENT_TYPE, RestClient
from core.logging_config import get_logger

logger = get_logger(__name__)


class TicketResource:
    """Fachada sin estado sobre un `RestClient` inyectado.

    Cada método hace exactamente una llamada al cliente y devuelve su resultado
    sin tocarlo. Los errores del cliente se propagan tal cual.
    """

    _resource_path = "tickets"

    def __init__(self, client: RestClient) -> None:
        self._client = client

    async def get(self, ticket_id: int) -> TicketResponse:
        uri = self._client.build_uri(f"{self._resource_path}/{ticket_id}", "")
        logger.debug("Dispatching", extra={"method": "GET", "path": uri})
        return await self._client.get(uri, TicketResponse)

    async def get_all(self, ticket_ids: Iterable[int]) -> TicketListResponse:
        ids = ",".join(str(ticket_id) for ticket_id in ticket_ids)
        uri = self._client.build_uri(f"{self._resource_path}/show_many", f"ids={ids}")
        logger.debug("Dispatching", extra={"method": "GET", "path": uri})
        return await self._client.get(uri, TicketListResponse)

    async def put(self, request: TicketRequest) -> TicketResponse:
        # Must stay above the first client call: an update without id never leaves the process.
        if not request.item.has_id():
            logger.warning("Rejected update without ticket id", extra={"subject": request.item.subject})
            raise ValidationError("Ticket id is required to update a ticket")

        uri = self._client.build_uri(f"{self._resource_path}/{request.item.id}", "")
        logger.debug("Dispatching", extra={"method": "PUT", "path": uri})
        return await self._client.put(uri, request, JSON_CONTENT_TYPE, TicketResponse)

    async def post(self, request: TicketRequest) -> TicketResponse:
        uri = self._client.build_uri(self._resource_path, "")
        logger.debug("Dispatching", extra={"method": "POST", "path": uri})
        return await self._client.post(uri, request, JSON_CONTENT_TYPE, TicketResponse)

    async def delete(self, ticket_id: int) -> None:
        uri = self._client.build_uri(f"{self._resource_path}/{ticket_id}", "")
        logger.debug("Dispatching", extra={"method": "DELETE", "path": uri})
        await self._client.delete(uri)
