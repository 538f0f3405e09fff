"""
TicketResource tests with a mocked RestClient.

The client is a MagicMock specced on the RestClient protocol, so its verbs
are AsyncMocks and no HTTP is involved.

Run with: pytest tests/unit/test_ticket_resource.py -v
"""

from unittest.mock import MagicMock

import pytest

from adapters.resources import TicketResource
from core.domain.models import Ticket, TicketListResponse, TicketRequest, TicketResponse
from core.errors import NotFoundError, TransportError, ValidationError
from core.interfaces.rest_client import JSON_CONTENT_TYPE, RestClient

TICKET_IDS = [1, 321, 9_876_543_210]


@pytest.fixture
def client():
    mock = MagicMock(spec=RestClient)
    mock.build_uri.return_value = "http://search"
    return mock


class TestGet:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("ticket_id", TICKET_IDS)
    async def test_builds_uri_with_ticket_id_and_empty_query(self, client, ticket_id):
        client.get.return_value = TicketResponse(item=Ticket(id=ticket_id))
        resource = TicketResource(client)

        await resource.get(ticket_id)

        path, query = client.build_uri.call_args.args
        assert str(ticket_id) in path
        assert query == ""
        assert path == f"tickets/{ticket_id}"

    @pytest.mark.asyncio
    async def test_returns_ticket_response_from_client(self, client):
        response = TicketResponse(item=Ticket(id=1))
        client.get.return_value = response
        resource = TicketResource(client)

        result = await resource.get(321)

        assert result is response
        client.get.assert_awaited_once_with("http://search", TicketResponse)


class TestGetAll:
    @pytest.mark.asyncio
    async def test_builds_show_many_uri(self, client):
        client.get.return_value = TicketListResponse(results=[])
        resource = TicketResource(client)

        await resource.get_all([321, 456, 789])

        path, query = client.build_uri.call_args.args
        assert "/show_many" in path
        assert query == "ids=321,456,789"

    @pytest.mark.asyncio
    async def test_accepts_any_iterable_of_ids(self, client):
        client.get.return_value = TicketListResponse(results=[])
        resource = TicketResource(client)

        await resource.get_all(n for n in (7, 8))

        assert client.build_uri.call_args.args == ("tickets/show_many", "ids=7,8")

    @pytest.mark.asyncio
    async def test_returns_ticket_list_response_from_client(self, client):
        response = TicketListResponse(results=[Ticket(id=1)])
        client.get.return_value = response
        resource = TicketResource(client)

        result = await resource.get_all([321, 456, 789])

        assert result is response
        client.get.assert_awaited_once_with("http://search", TicketListResponse)


class TestPut:
    @pytest.mark.asyncio
    async def test_builds_uri_with_ticket_id(self, client):
        client.put.return_value = TicketResponse(item=Ticket(subject="blah blah"))
        request = TicketRequest(item=Ticket(subject="blah blah", id=123))
        resource = TicketResource(client)

        await resource.put(request)

        client.build_uri.assert_called_once_with("tickets/123", "")

    @pytest.mark.asyncio
    async def test_returns_ticket_response(self, client):
        response = TicketResponse(item=Ticket(subject="blah blah"))
        request = TicketRequest(item=Ticket(subject="blah blah", id=123))
        client.put.return_value = response
        resource = TicketResource(client)

        result = await resource.put(request)

        assert result is response
        assert result.item.subject == "blah blah"
        client.put.assert_awaited_once_with("http://search", request, JSON_CONTENT_TYPE, TicketResponse)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("ticket", [Ticket(subject="blah blah"), Ticket(subject="blah blah", id=0)])
    async def test_ticket_without_id_raises_before_dispatch(self, client, ticket):
        request = TicketRequest(item=ticket)
        resource = TicketResource(client)

        with pytest.raises(ValidationError) as exc_info:
            await resource.put(request)

        assert exc_info.value.status_code == 422
        client.put.assert_not_called()
        client.build_uri.assert_not_called()


class TestPost:
    @pytest.mark.asyncio
    async def test_builds_uri_without_id_segment(self, client):
        client.post.return_value = TicketResponse(item=Ticket(id=55, subject="blah blah"))
        request = TicketRequest(item=Ticket(subject="blah blah"))
        resource = TicketResource(client)

        await resource.post(request)

        client.build_uri.assert_called_once_with("tickets", "")

    @pytest.mark.asyncio
    async def test_does_not_require_id(self, client):
        response = TicketResponse(item=Ticket(subject="blah blah"))
        request = TicketRequest(item=Ticket(subject="blah blah"))
        client.post.return_value = response
        resource = TicketResource(client)

        result = await resource.post(request)

        assert result is response
        client.post.assert_awaited_once_with("http://search", request, JSON_CONTENT_TYPE, TicketResponse)


class TestDelete:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("ticket_id", TICKET_IDS)
    async def test_builds_uri_with_ticket_id_and_empty_query(self, client, ticket_id):
        resource = TicketResource(client)

        await resource.delete(ticket_id)

        path, query = client.build_uri.call_args.args
        assert str(ticket_id) in path
        assert query == ""
        assert path == f"tickets/{ticket_id}"

    @pytest.mark.asyncio
    async def test_calls_delete_on_client(self, client):
        client.delete.return_value = None
        resource = TicketResource(client)

        result = await resource.delete(321)

        assert result is None
        client.delete.assert_awaited_once_with("http://search")
        client.get.assert_not_called()


class TestErrorPropagation:
    @pytest.mark.asyncio
    async def test_transport_error_reaches_caller_unchanged(self, client):
        error = TransportError("GET http://search returned 503", status_code=503)
        client.get.side_effect = error
        resource = TicketResource(client)

        with pytest.raises(TransportError) as exc_info:
            await resource.get(1)

        assert exc_info.value is error
        assert client.get.await_count == 1

    @pytest.mark.asyncio
    async def test_not_found_on_delete_is_not_swallowed(self, client):
        client.delete.side_effect = NotFoundError()
        resource = TicketResource(client)

        with pytest.raises(NotFoundError):
            await resource.delete(404)
