"""Pytest fixtures: a fake Starbüro backend on top of httpx.MockTransport."""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from starbuero import StarbueroClient
from starbuero.core.domain.models import FieldKind, FieldLocation, OperationSchema


class FakeService:
    """Records every request and answers with a configurable response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.json: Any = {"ok": True}
        self.content: bytes | None = None
        self.error: Exception | None = None
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.json)

    def respond(self, status_code: int = 200, json: Any = None, content: bytes | None = None) -> None:
        self.status_code = status_code
        self.json = json
        self.content = content

    def fail_with(self, error: Exception) -> None:
        self.error = error


def _valid_arguments(schema: OperationSchema) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for spec in schema.arguments:
        if spec.kind is FieldKind.ARRAY:
            values[spec.name] = ["info@example.com"]
        elif spec.kind is FieldKind.EXPLICIT_BOOLEAN:
            values[spec.name] = False
        elif spec.location is FieldLocation.PATH:
            values[spec.name] = "abc123"
        elif spec.location is FieldLocation.QUERY:
            values[spec.name] = "10"
        else:
            values[spec.name] = f"{spec.name}-value"
    return values


@pytest.fixture
def service():
    return FakeService()


@pytest.fixture
def client(service):
    return StarbueroClient("test-token", transport=service.transport)


@pytest.fixture
def valid_arguments():
    """Factory building a complete, valid argument set for an operation."""
    return _valid_arguments
