"""
HTTP client for Data Connector agents.

Sends typed requests to an agent's endpoints and decodes the replies into the
native types.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional, TypeVar

import httpx

from .core.codec import decode_json, encode
from .core.errors import AgentError, DecodeError
from .types import (
    CapabilitiesResponse,
    ErrorResponse,
    ExplainResponse,
    MutationRequest,
    MutationResponse,
    QueryRequest,
    QueryResponse,
    RawRequest,
    RawResponse,
    SchemaRequest,
    SchemaResponse,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

CONFIG_HEADER = "X-Hasura-DataConnector-Config"
SOURCE_NAME_HEADER = "X-Hasura-DataConnector-SourceName"


class AgentClient:
    """
    Async client for a Data Connector agent.

    Usage:
        async with AgentClient("http://localhost:8100", config={"db": "chinook"}) as agent:
            capabilities = await agent.capabilities()
            response = await agent.query(request)
    """

    def __init__(
        self,
        base_url: str,
        config: Optional[dict[str, Any]] = None,
        source_name: Optional[str] = None,
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize agent client.

        Args:
            base_url: Agent base URL (e.g., "http://localhost:8100")
            config: Source configuration sent in the config header
            source_name: Source name sent in the source name header
            timeout: HTTP request timeout in seconds
            http_client: Pre-built client (tests inject a MockTransport here)
        """
        self.base_url = base_url.rstrip("/")
        self.config = config
        self.source_name = source_name
        self.timeout = timeout
        self._client = http_client
        self._owns_client = http_client is None

    async def __aenter__(self) -> AgentClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create async HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.config is not None:
            headers[CONFIG_HEADER] = json.dumps(self.config, separators=(",", ":"))
        if self.source_name is not None:
            headers[SOURCE_NAME_HEADER] = self.source_name
        return headers

    async def _send(self, method: str, path: str, body: Any = None) -> httpx.Response:
        client = await self._get_client()
        url = f"{self.base_url}{path}"
        logger.debug(f"{method} {url}")
        try:
            return await client.request(
                method,
                url,
                headers=self.headers(),
                json=body,
            )
        except httpx.RequestError as e:
            raise AgentError(status_code=0, message=str(e)) from e

    def _raise_for_status(self, response: httpx.Response) -> None:
        if response.is_success:
            return

        error: Optional[ErrorResponse] = None
        message = response.text
        try:
            error = decode_json(ErrorResponse, response.content)
        except DecodeError:
            logger.debug("Error body is not an ErrorResponse, reporting it verbatim")
        else:
            message = error.message

        logger.warning(
            f"Agent {response.request.method} {response.request.url} "
            f"returned {response.status_code}: {message}"
        )
        raise AgentError(status_code=response.status_code, message=message, response=error)

    async def _call(self, method: str, path: str, response_type: type[T], body: Any = None) -> T:
        response = await self._send(method, path, body)
        self._raise_for_status(response)
        return decode_json(response_type, response.content)

    async def capabilities(self) -> CapabilitiesResponse:
        """GET /capabilities"""
        return await self._call("GET", "/capabilities", CapabilitiesResponse)

    async def schema(self, request: Optional[SchemaRequest] = None) -> SchemaResponse:
        """POST /schema"""
        return await self._call(
            "POST", "/schema", SchemaResponse, encode(request or SchemaRequest())
        )

    async def query(self, request: QueryRequest) -> QueryResponse:
        """POST /query"""
        return await self._call("POST", "/query", QueryResponse, encode(request))

    async def explain(self, request: QueryRequest) -> ExplainResponse:
        """POST /explain"""
        return await self._call("POST", "/explain", ExplainResponse, encode(request))

    async def mutation(self, request: MutationRequest) -> MutationResponse:
        """POST /mutation"""
        return await self._call("POST", "/mutation", MutationResponse, encode(request))

    async def raw(self, request: RawRequest) -> RawResponse:
        """POST /raw"""
        return await self._call("POST", "/raw", RawResponse, encode(request))

    async def health(self) -> bool:
        """GET /health - True when the agent answers with a 2xx status."""
        response = await self._send("GET", "/health")
        return response.is_success
