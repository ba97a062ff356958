"""httpx wrapper: request construction and dispatch.

- `build_request` turns config + schema + validated arguments into a
  `RequestDescriptor` (URL, verb, auth headers, query, JSON body).
- `dispatch` sends exactly one request and captures the outcome in a
  `RemoteResult`. Transport failures are captured, not raised.

An `httpx.AsyncClient` is built per call; no connection state is shared
between calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping
from urllib.parse import quote

import httpx

from starbuero import __version__
from starbuero.core.config import ClientConfig
from starbuero.core.domain.models import OperationSchema, RequestDescriptor

USER_AGENT = f"starbuero-python/{__version__}"


def build_async_client(
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the SDK's default headers.

    Timeout and redirect handling are left at httpx defaults.
    """

    headers: dict[str, str] = {
        "User-Agent": USER_AGENT,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(headers=headers, transport=transport)


def _render_path(schema: OperationSchema, arguments: Mapping[str, Any]) -> str:
    path = schema.path
    for spec in schema.path_params:
        segment = quote(str(arguments[spec.name]), safe="")
        path = path.replace("{" + spec.wire + "}", segment)
    return path


def build_request(
    config: ClientConfig,
    schema: OperationSchema,
    arguments: Mapping[str, Any],
) -> RequestDescriptor:
    """Build the request for one call. Arguments must already be validated."""

    url = config.base_url.rstrip("/") + _render_path(schema, arguments)

    query = {
        spec.wire: str(arguments[spec.name])
        for spec in schema.query_params
        if arguments.get(spec.name) is not None
    }

    body: dict[str, Any] | None = None
    if schema.body_fields:
        body = {
            spec.wire: arguments[spec.name]
            for spec in schema.body_fields
            if arguments.get(spec.name) is not None
        }

    return RequestDescriptor(
        url=url,
        verb=schema.verb,
        headers=config.auth_headers,
        query=query,
        body=body,
    )


@dataclass(frozen=True)
class RemoteResult:
    """Outcome of a dispatch: a response, or the transport error."""

    response: httpx.Response | None = None
    error: Exception | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None


async def dispatch(
    request: RequestDescriptor,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> RemoteResult:
    """Send one request. Never raises for transport-level problems."""

    try:
        async with build_async_client(transport=transport) as client:
            response = await client.request(
                request.verb.value,
                request.url,
                params=request.query or None,
                json=request.body,
                headers=request.headers,
            )
    # TypeError / ValueError: body not JSON encodable (unsupported type, NaN,
    # circular reference) or a header value httpx cannot encode.
    except (httpx.HTTPError, httpx.InvalidURL, TypeError, ValueError) as exc:
        return RemoteResult(error=exc)
    return RemoteResult(response=response)
