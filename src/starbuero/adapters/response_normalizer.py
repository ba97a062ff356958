"""Maps a `RemoteResult` to the value returned to the caller.

- 200: decoded body, unchanged.
- anything else, or a transport failure: one ERROR log record and
  `NO_RESULT`.

Callers cannot tell "not found" from "server error" from "network down" by
the return value; only the log carries the detail.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from starbuero.adapters.http_client import RemoteResult
from starbuero.core.config import ClientConfig

logger = logging.getLogger(__name__)

NO_RESULT = None

_BODY_EXCERPT = 500


def _decode(response: httpx.Response) -> Any:
    if not response.content:
        return {}
    try:
        return response.json()
    except ValueError:
        return response.text


def normalize_result(result: RemoteResult, config: ClientConfig | None = None) -> Any:
    debug = bool(config and config.debug)

    if result.failed or result.response is None:
        error = result.error
        if error is None:
            logger.error("Error: no response received")
        else:
            logger.error("Error: %s (%s)", error, type(error).__name__)
        return NO_RESULT

    response = result.response
    if response.status_code == 200:
        return _decode(response)

    if debug:
        logger.error(
            "[%s] | Error: %s | %s %s | body=%s",
            response.status_code,
            response.reason_phrase,
            response.request.method,
            response.request.url,
            response.text[:_BODY_EXCERPT],
        )
    else:
        logger.error("[%s] | Error: %s", response.status_code, response.reason_phrase)
    return NO_RESULT
