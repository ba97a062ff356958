"""Async SDK for the Starbüro external API.

Remote failures are not raised: operations return `NO_RESULT` (None) and
log the status or transport error through the `starbuero` logger.
"""

import logging

__version__ = "1.0.0"

from starbuero.adapters.response_normalizer import NO_RESULT  # noqa: E402
from starbuero.client import StarbueroClient, resource_operation  # noqa: E402
from starbuero.core.config import ClientConfig, ClientSettings  # noqa: E402
from starbuero.core.errors import (  # noqa: E402
    ConfigurationError,
    StarbueroError,
    ValidationError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ClientConfig",
    "ClientSettings",
    "ConfigurationError",
    "NO_RESULT",
    "StarbueroClient",
    "StarbueroError",
    "ValidationError",
    "resource_operation",
]
