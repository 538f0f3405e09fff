"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y logging para todos los recursos.
- Traduce los fallos de httpx/pydantic a la taxonomía de `core.errors`.
- Facilita testeo: se puede sustituir por un stub/mocked client (o inyectar un
  `httpx.AsyncClient` con `MockTransport`).
"""

from __future__ import annotations

import json
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from core.config import AppSettings
from core.errors import DeserializationError, NotFoundError, TransportError
from core.interfaces.rest_client import ModelT, SupportsPayload
from core.logging_config import get_logger

logger = get_logger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que todos los recursos se comporten igual.
    - `transport` permite inyectar `httpx.MockTransport` en tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


class HttpxRestClient:
    """Implementación de `core.interfaces.rest_client.RestClient` sobre httpx.

    No guarda estado por llamada: una instancia se puede compartir entre
    corutinas concurrentes (httpx gestiona el pool de conexiones).
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._owns_client = client is None
        self._client = client or build_async_client(self._settings)

    async def __aenter__(self) -> "HttpxRestClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Cierra el cliente httpx solo si lo creamos nosotros."""

        if self._owns_client:
            await self._client.aclose()

    def build_uri(self, path: str, query: str = "") -> str:
        uri = f"{self._settings.base_url.rstrip('/')}/{path.lstrip('/')}"
        if query:
            uri = f"{uri}?{query}"
        return uri

    async def get(self, uri: str, response_model: type[ModelT]) -> ModelT:
        response = await self._send("GET", uri)
        return self._decode(response, response_model)

    async def put(
        self,
        uri: str,
        body: SupportsPayload,
        content_type: str,
        response_model: type[ModelT],
    ) -> ModelT:
        response = await self._send("PUT", uri, body=body, content_type=content_type)
        return self._decode(response, response_model)

    async def post(
        self,
        uri: str,
        body: SupportsPayload,
        content_type: str,
        response_model: type[ModelT],
    ) -> ModelT:
        response = await self._send("POST", uri, body=body, content_type=content_type)
        return self._decode(response, response_model)

    async def delete(self, uri: str) -> None:
        await self._send("DELETE", uri)

    async def _send(
        self,
        method: str,
        uri: str,
        *,
        body: SupportsPayload | None = None,
        content_type: str | None = None,
    ) -> httpx.Response:
        headers: dict[str, str] = {}
        content: bytes | None = None
        if body is not None:
            content = json.dumps(body.to_payload(), ensure_ascii=False).encode("utf-8")
            headers["Content-Type"] = content_type or "application/json"

        try:
            response = await self._client.request(method, uri, content=content, headers=headers)
        except httpx.TimeoutException as exc:
            logger.warning("Request timed out", extra={"method": method, "url": uri})
            raise TransportError(f"{method} {uri} timed out") from exc
        except httpx.HTTPError as exc:
            logger.warning(
                "Request failed",
                extra={"method": method, "url": uri, "error": str(exc)},
            )
            raise TransportError(f"{method} {uri} failed: {exc}") from exc

        logger.debug(
            "Response received",
            extra={"method": method, "url": uri, "status_code": response.status_code},
        )

        if response.status_code == 404:
            logger.warning("Resource not found", extra={"method": method, "url": uri, "status_code": 404})
            raise NotFoundError(f"{method} {uri} returned 404", body=response.text)
        if not response.is_success:
            logger.warning(
                "Unexpected status",
                extra={"method": method, "url": uri, "status_code": response.status_code},
            )
            raise TransportError(
                f"{method} {uri} returned {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )
        return response

    @staticmethod
    def _decode(response: httpx.Response, response_model: type[ModelT]) -> ModelT:
        try:
            data: Any = response.json()
        except ValueError as exc:
            logger.warning(
                "Response body is not JSON",
                extra={"url": str(response.request.url), "status_code": response.status_code},
            )
            raise DeserializationError(f"Invalid JSON in response from {response.request.url}") from exc

        try:
            return response_model.model_validate(data)
        except PydanticValidationError as exc:
            logger.warning(
                "Response does not match envelope",
                extra={"url": str(response.request.url), "model": response_model.__name__},
            )
            raise DeserializationError(
                f"Response from {response.request.url} is not a valid {response_model.__name__}"
            ) from exc
