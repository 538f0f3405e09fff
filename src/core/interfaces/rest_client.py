"""Contrato del cliente REST.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que el adaptador httpx y los dobles de test (AsyncMock, fakes) sean
  intercambiables sin acoplar los recursos a una implementación concreta.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)

JSON_CONTENT_TYPE = "application/json"


class SupportsPayload(Protocol):
    """Cuerpo de escritura: sabe volcarse al JSON que espera la API."""

    def to_payload(self) -> dict[str, Any]:
        ...


@runtime_checkable
class RestClient(Protocol):
    """Capacidades mínimas que consume un recurso.

    Reglas de diseño:
    - `build_uri` es síncrono: solo concatena base + path + query.
    - Los verbos son asíncronos porque hacen I/O (HTTP).
    - Los errores de transporte y deserialización salen de aquí tal cual;
      el recurso no los interpreta.
    """

    def build_uri(self, path: str, query: str = "") -> str:
        """Construye la URI absoluta para `path` con un `query` opcional."""

        ...

    async def get(self, uri: str, response_model: type[ModelT]) -> ModelT:
        ...

    async def put(
        self,
        uri: str,
        body: SupportsPayload,
        content_type: str,
        response_model: type[ModelT],
    ) -> ModelT:
        ...

    async def post(
        self,
        uri: str,
        body: SupportsPayload,
        content_type: str,
        response_model: type[ModelT],
    ) -> ModelT:
        ...

    async def delete(self, uri: str) -> None:
        ...
