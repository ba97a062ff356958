"""Request pipeline shared by every operation.

    validate -> build request -> dispatch -> normalize

The client layer only binds arguments and delegates here.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from starbuero.adapters.http_client import build_request, dispatch
from starbuero.adapters.response_normalizer import normalize_result
from starbuero.core.config import ClientConfig
from starbuero.core.domain.models import OperationSchema
from starbuero.core.validation import validate_arguments

logger = logging.getLogger(__name__)


async def run_operation(
    *,
    config: ClientConfig,
    schema: OperationSchema,
    arguments: Mapping[str, Any],
    transport: httpx.AsyncBaseTransport | None = None,
) -> Any:
    """Run one call end to end.

    Raises `ValidationError` before any I/O when arguments are invalid.
    Otherwise returns the decoded payload, or `NO_RESULT` on any remote
    failure.
    """

    validate_arguments(schema, arguments)
    request = build_request(config, schema, arguments)

    if config.debug:
        logger.debug(
            "%s: %s %s query=%s body=%s",
            schema.name,
            request.verb.value,
            request.url,
            request.query,
            request.body,
        )

    result = await dispatch(request, transport=transport)
    return normalize_result(result, config)
