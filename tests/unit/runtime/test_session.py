"""Unit tests for GitHubSession and run_github."""

from __future__ import annotations

import asyncio

import pytest

from laakhay.github.core import (
    AuthToken,
    ConstructionError,
    HTTPStatusError,
    Shape,
)
from laakhay.github.runtime.endpoint import EndpointSpec, bind, path_param
from laakhay.github.runtime.rest import HTTPResponse, RESTTransport
from laakhay.github.runtime.session import GitHubSession, create_session, run_github

ITEMS = EndpointSpec(id="items", method="GET", path="/items", shape=Shape.PAGINATED)
ITEM = EndpointSpec(
    id="item",
    method="GET",
    path="/items/{item_id}",
    shape=Shape.SINGLE,
    params=(path_param("item_id", int),),
)


class TestSessionLifecycle:
    """Test scoped transport ownership."""

    @pytest.mark.asyncio
    async def test_run_github_returns_value_and_closes(self, transport):
        transport.send.return_value = HTTPResponse(status=200, body={"id": 1})

        async def computation(session: GitHubSession):
            return await session.call(ITEM, 1)

        result = await run_github(computation, transport=transport)

        assert result == {"id": 1}
        transport.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_run_github_closes_on_error(self, transport, make_page):
        """A failure mid-pagination still releases the transport."""
        transport.send.side_effect = [
            make_page([1], next_page=2),
            HTTPStatusError("GET /items returned 502", status_code=502),
        ]

        async def computation(session: GitHubSession):
            return await session.call(ITEMS)

        with pytest.raises(HTTPStatusError):
            await run_github(computation, transport=transport)

        transport.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_closed_session_rejects_calls(self, transport):
        session = create_session(transport=transport)
        async with session:
            pass

        assert session.closed
        with pytest.raises(RuntimeError):
            await session.call(ITEM, 1)
        transport.send.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_close_is_idempotent(self, transport):
        session = GitHubSession(transport=transport)
        await session.close()
        await session.close()

        transport.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_default_transport(self):
        session = GitHubSession(base_url="https://github.example.com/api/v3")

        assert isinstance(session.context.transport, RESTTransport)
        assert session.context.transport.base_url == "https://github.example.com/api/v3"
        await session.close()

    def test_sessions_do_not_share_state(self, transport):
        first = GitHubSession(transport=transport)
        second = GitHubSession(transport=transport)
        first.set_page_size(10)
        first.recurse_off()

        assert second.context.page_size == 100
        assert second.context.recurse is True


class TestHeaders:
    """Test header injection through the session."""

    @pytest.mark.asyncio
    async def test_every_request_carries_token(self, transport, make_page, sent_requests):
        transport.send.side_effect = [
            HTTPResponse(status=200, body={"id": 1}),
            make_page([1], next_page=2),
            make_page([2]),
        ]

        async with create_session("s3cret", transport=transport) as session:
            await session.call(ITEM, 1)
            await session.call(ITEMS)

        requests = sent_requests()
        assert len(requests) == 3
        for request in requests:
            assert request.headers["User-Agent"] == "laakhay-github"
            assert request.headers["Authorization"] == "token s3cret"

    @pytest.mark.asyncio
    async def test_anonymous_session(self, transport, sent_requests):
        async with GitHubSession(transport=transport) as session:
            session.set_user_agent("octo-script")
            await session.call(ITEM, 1)

        request = sent_requests()[0]
        assert request.headers == {"User-Agent": "octo-script"}

    def test_token_is_wrapped(self, transport):
        session = GitHubSession("abc", transport=transport)

        assert session.context.token == AuthToken("abc")


class TestMutators:
    """Test pagination controls."""

    def test_defaults(self, transport):
        session = GitHubSession(transport=transport)
        context = session.context

        assert context.page == 1
        assert context.page_size == 100
        assert context.links is None
        assert context.recurse is True
        assert session.get_links() is None

    def test_page_size_above_limit_is_kept(self, transport):
        session = GitHubSession(transport=transport)
        session.set_page_size(250)

        assert session.context.page_size == 250

    def test_invalid_values(self, transport):
        session = GitHubSession(transport=transport)

        with pytest.raises(ValueError):
            session.set_page_size(0)
        with pytest.raises(ValueError):
            session.set_page(0)

    def test_bool_page_values_rejected(self, transport):
        """True is an int but never a page number or size."""
        session = GitHubSession(transport=transport)

        with pytest.raises(TypeError):
            session.set_page_size(True)
        with pytest.raises(TypeError):
            session.set_page(True)
        assert session.context.page_size == 100
        assert session.context.page == 1

    @pytest.mark.asyncio
    async def test_reset_pagination(self, transport, make_page, sent_requests):
        """Reset after a manual walk restarts from page 1."""
        transport.send.side_effect = [
            make_page([1], next_page=3),
            make_page([1, 2]),
        ]

        async with GitHubSession(transport=transport) as session:
            session.recurse_off()
            session.set_page(2)
            await session.call(ITEMS)
            assert session.get_links().has_next

            session.reset_pagination()
            assert session.context.page == 1
            assert session.get_links() is None

            session.recurse_on()
            result = await session.call(ITEMS)

        assert result == [1, 2]
        assert [r.params["page"] for r in sent_requests()] == ["2", "1"]


class TestEmbedding:
    """Test the embedded-call surface."""

    @pytest.mark.asyncio
    async def test_github_binds_eagerly(self, transport):
        """Argument errors are raised before any request is attempted."""
        async with GitHubSession(transport=transport) as session:
            get_item = session.github(ITEM)

            with pytest.raises(ConstructionError):
                get_item("not-an-int")
            with pytest.raises(ConstructionError):
                get_item()

        transport.send.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_github_runs_action(self, transport, sent_requests):
        transport.send.return_value = HTTPResponse(status=200, body={"id": 7})

        async with GitHubSession(transport=transport) as session:
            get_item = session.github(ITEM)
            result = await get_item(7)

        assert get_item.__name__ == "item"
        assert result == {"id": 7}
        assert sent_requests()[0].path == "/items/7"

    @pytest.mark.asyncio
    async def test_run_bound_action(self, transport):
        transport.send.return_value = HTTPResponse(status=200, body={"id": 2})

        async with GitHubSession(transport=transport) as session:
            result = await session.run(bind(ITEM, 2))

        assert result == {"id": 2}


class TestSequencing:
    """Test that calls on one session never interleave."""

    @pytest.mark.asyncio
    async def test_concurrent_calls_are_serialized(self, transport):
        in_flight = 0
        max_in_flight = 0
        order: list[str] = []

        async def send(request):
            nonlocal in_flight, max_in_flight
            in_flight += 1
            max_in_flight = max(max_in_flight, in_flight)
            order.append(request.path)
            await asyncio.sleep(0.01)
            in_flight -= 1
            return HTTPResponse(status=200, body={"path": request.path})

        transport.send.side_effect = send

        async with GitHubSession(transport=transport) as session:
            results = await asyncio.gather(
                session.call(ITEM, 1), session.call(ITEM, 2), session.call(ITEM, 3)
            )

        assert max_in_flight == 1
        assert order == ["/items/1", "/items/2", "/items/3"]
        assert [r["path"] for r in results] == order
