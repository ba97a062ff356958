"""Domain models (Pydantic v2).

These describe *what* an operation looks like (verb, path, argument shape),
not how it is sent. Resource payloads themselves (contacts, employees, ...)
stay opaque JSON mappings: the remote service owns their schema.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class HttpVerb(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class FieldKind(str, Enum):
    """How an argument is checked before dispatch."""

    # Non-empty value: rejects absent, None and "".
    PRESENCE = "presence"
    # Any provided value, `False` and `0` included.
    EXPLICIT_BOOLEAN = "explicit_boolean"
    # list or tuple, never a plain string.
    ARRAY = "array"


class FieldLocation(str, Enum):
    PATH = "path"
    QUERY = "query"
    BODY = "body"


class FieldSpec(BaseModel):
    """One argument of an operation."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        min_length=1,
        description="Python keyword argument name.",
    )
    wire: str = Field(
        ...,
        min_length=1,
        description="Name used in the URL, query string or JSON body.",
    )
    kind: FieldKind = FieldKind.PRESENCE
    location: FieldLocation = FieldLocation.BODY
    required: bool = True


class OperationSchema(BaseModel):
    """Static description of one remote operation.

    Shared read-only by every call; the generic pipeline is instantiated
    from it.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    verb: HttpVerb
    path: str = Field(
        default="",
        description="Path template below the API root, e.g. '/faq/{id}'. Empty for the root.",
    )
    arguments: tuple[FieldSpec, ...] = Field(default_factory=tuple)
    summary: str = ""

    @property
    def required_fields(self) -> tuple[FieldSpec, ...]:
        return tuple(f for f in self.arguments if f.required)

    @property
    def path_params(self) -> tuple[FieldSpec, ...]:
        return tuple(f for f in self.arguments if f.location is FieldLocation.PATH)

    @property
    def query_params(self) -> tuple[FieldSpec, ...]:
        return tuple(f for f in self.arguments if f.location is FieldLocation.QUERY)

    @property
    def body_fields(self) -> tuple[FieldSpec, ...]:
        return tuple(f for f in self.arguments if f.location is FieldLocation.BODY)


class RequestDescriptor(BaseModel):
    """A fully built request, owned by a single in-flight call."""

    model_config = ConfigDict(frozen=True)

    url: str
    verb: HttpVerb
    headers: dict[str, str] = Field(default_factory=dict)
    query: dict[str, str] = Field(default_factory=dict)
    body: dict[str, Any] | None = None
