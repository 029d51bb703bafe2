"""Tests for the agent HTTP client."""

import json

import httpx
import pytest

from dc_api_types import (
    AgentClient,
    AgentError,
    CapabilitiesResponse,
    ErrorResponseType,
    ExplainResponse,
    MalformedInputError,
    MutationRequest,
    QueryRequest,
    RawRequest,
    ResponseRow,
    SchemaRequest,
    TypeMismatchError,
    decode,
)
from dc_api_types.client import CONFIG_HEADER, SOURCE_NAME_HEADER


def make_agent(handler, **kwargs) -> AgentClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return AgentClient("http://agent.test/", http_client=http_client, **kwargs)


class TestAgentClient:
    """Tests for the typed endpoint calls."""

    async def test_capabilities(self, capabilities_payload) -> None:
        """Test GET /capabilities decodes the reply."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=capabilities_payload)

        async with make_agent(handler) as agent:
            response = await agent.capabilities()

        assert isinstance(response, CapabilitiesResponse)
        assert response.display_name == "Chinook SQLite"
        assert seen[0].method == "GET"
        assert seen[0].url == "http://agent.test/capabilities"

    async def test_source_headers(self, schema_payload) -> None:
        """Test configuration and source name travel in headers."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=schema_payload)

        async with make_agent(handler, config={"db": "chinook.db"}, source_name="chinook") as agent:
            await agent.schema()

        headers = seen[0].headers
        assert json.loads(headers[CONFIG_HEADER]) == {"db": "chinook.db"}
        assert headers[SOURCE_NAME_HEADER] == "chinook"

    async def test_headers_omitted_without_source(self) -> None:
        agent = AgentClient("http://agent.test")
        assert CONFIG_HEADER not in agent.headers()
        assert SOURCE_NAME_HEADER not in agent.headers()

    async def test_schema_sends_request_body(self, schema_payload) -> None:
        bodies = []

        def handler(request: httpx.Request) -> httpx.Response:
            bodies.append(json.loads(request.content))
            return httpx.Response(200, json=schema_payload)

        async with make_agent(handler) as agent:
            await agent.schema()
            await agent.schema(SchemaRequest(detail_level="basic_info"))

        assert bodies == [{}, {"detail_level": "basic_info"}]

    async def test_query_and_explain(self, query_request_payload) -> None:
        """Test the query request is posted as wire JSON."""
        bodies = {}

        def handler(request: httpx.Request) -> httpx.Response:
            bodies[request.url.path] = json.loads(request.content)
            if request.url.path == "/explain":
                return httpx.Response(200, json={"lines": ["SCAN Album"], "query": "SELECT 1"})
            return httpx.Response(200, json={"rows": [{"id": 1}]})

        request = decode(QueryRequest, query_request_payload)
        async with make_agent(handler) as agent:
            response = await agent.query(request)
            explained = await agent.explain(request)

        assert isinstance(response, ResponseRow)
        assert response.rows == ({"id": 1},)
        assert isinstance(explained, ExplainResponse)
        assert bodies["/query"] == query_request_payload
        assert bodies["/explain"] == query_request_payload

    async def test_mutation_and_raw(self, mutation_payload) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/raw":
                return httpx.Response(200, json={"rows": [{"n": 3}]})
            return httpx.Response(200, json={"operation_results": [{"affected_rows": 3}]})

        async with make_agent(handler) as agent:
            mutated = await agent.mutation(decode(MutationRequest, mutation_payload))
            raw = await agent.raw(RawRequest(query="SELECT count(*) AS n FROM Artist"))

        assert mutated.operation_results[0].affected_rows == 3
        assert raw.rows == ({"n": 3},)

    async def test_health(self) -> None:
        statuses = iter([204, 503])

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(next(statuses))

        async with make_agent(handler) as agent:
            assert await agent.health() is True
            assert await agent.health() is False


class TestAgentErrors:
    """Tests for failed agent calls."""

    async def test_error_response(self) -> None:
        """Test a non-2xx reply carries the decoded ErrorResponse."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                400,
                json={"type": "uncaught-error", "message": "no such table"},
            )

        async with make_agent(handler) as agent:
            with pytest.raises(AgentError) as exc_info:
                await agent.capabilities()

        error = exc_info.value
        assert error.status_code == 400
        assert error.message == "no such table"
        assert error.response.type is ErrorResponseType.UNCAUGHT_ERROR

    async def test_plain_text_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="Bad Gateway")

        async with make_agent(handler) as agent:
            with pytest.raises(AgentError) as exc_info:
                await agent.capabilities()

        assert exc_info.value.status_code == 502
        assert exc_info.value.message == "Bad Gateway"
        assert exc_info.value.response is None

    async def test_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with make_agent(handler) as agent:
            with pytest.raises(AgentError) as exc_info:
                await agent.capabilities()

        assert exc_info.value.status_code == 0

    async def test_invalid_reply(self) -> None:
        """Test replies that do not match the type raise decode errors."""
        replies = iter(
            [
                httpx.Response(
                    200,
                    json={
                        "capabilities": {},
                        "config_schemas": {"config_schema": {}, "other_schemas": {}},
                        "display_name": 5,
                    },
                ),
                httpx.Response(200, text="not json"),
            ]
        )

        def handler(request: httpx.Request) -> httpx.Response:
            return next(replies)

        async with make_agent(handler) as agent:
            with pytest.raises(TypeMismatchError):
                await agent.capabilities()
            with pytest.raises(MalformedInputError):
                await agent.capabilities()
