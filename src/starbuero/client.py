"""Async client for the Starbüro external API.

Usage:
    from starbuero import StarbueroClient

    client = StarbueroClient("my-token")
    contacts = await client.list_contacts(page=1, limit=10)
    if contacts is None:
        ...  # remote failure, details are in the log

Every method is generated from an `OperationSchema` by `resource_operation`;
see `starbuero.core.domain.operations` for the catalogue.
"""

from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, Mapping

import httpx
from pydantic import ValidationError as PydanticValidationError

from starbuero.core.config import DEFAULT_BASE_URL, ClientConfig, ClientSettings
from starbuero.core.domain import operations
from starbuero.core.domain.models import FieldKind, OperationSchema
from starbuero.core.errors import ConfigurationError
from starbuero.core.services.pipeline import run_operation

_KIND_LABELS = {
    FieldKind.PRESENCE: "required",
    FieldKind.EXPLICIT_BOOLEAN: "required, False allowed",
    FieldKind.ARRAY: "required list",
}


def _describe(schema: OperationSchema) -> str:
    lines = [schema.summary or schema.name, "", f"{schema.verb.value} {schema.path or '/'}"]
    if schema.arguments:
        lines.append("")
        lines.append("Arguments:")
        for spec in schema.arguments:
            label = _KIND_LABELS[spec.kind] if spec.required else "optional"
            lines.append(f"    {spec.name} ({spec.location.value} '{spec.wire}', {label})")
    lines.append("")
    lines.append("Returns the decoded payload, or None when the call failed remotely.")
    return "\n".join(lines)


def resource_operation(schema: OperationSchema) -> Callable[..., Awaitable[Any]]:
    """Build a client method for `schema`.

    The method accepts the schema's arguments positionally (in catalogue
    order) or by keyword; every argument defaults to None so that missing
    ones are reported by the validator rather than by Python.
    """

    signature = inspect.Signature(
        [inspect.Parameter("self", inspect.Parameter.POSITIONAL_OR_KEYWORD)]
        + [
            inspect.Parameter(spec.name, inspect.Parameter.POSITIONAL_OR_KEYWORD, default=None)
            for spec in schema.arguments
        ]
    )

    async def operation(self: StarbueroClient, *args: Any, **kwargs: Any) -> Any:
        bound = signature.bind(self, *args, **kwargs)
        arguments = {k: v for k, v in bound.arguments.items() if k != "self"}
        return await self._run(schema, arguments)

    operation.__name__ = schema.name
    operation.__qualname__ = f"StarbueroClient.{schema.name}"
    operation.__doc__ = _describe(schema)
    operation.__signature__ = signature  # type: ignore[attr-defined]
    operation.schema = schema  # type: ignore[attr-defined]
    return operation


class StarbueroClient:
    """One authenticated client. Calls are independent and may run concurrently."""

    def __init__(
        self,
        token: str | None,
        debug: bool = False,
        *,
        base_url: str = DEFAULT_BASE_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not token:
            raise ConfigurationError(
                "No API token is defined. Please get the API key from Starbüro!"
            )
        if not token.isascii():
            raise ConfigurationError("The API token may only contain ASCII characters.")
        try:
            self._config = ClientConfig(token=token, debug=bool(debug), base_url=base_url)
        except PydanticValidationError as exc:
            raise ConfigurationError(str(exc)) from exc
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> StarbueroClient:
        settings = settings or ClientSettings()
        return cls(
            settings.api_token,
            settings.debug,
            base_url=settings.base_url,
            transport=transport,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def call(self, name: str, /, **arguments: Any) -> Any:
        """Run a catalogued operation by name, e.g. `call("get_contact", contact_id="42")`."""

        if name not in operations.OPERATIONS:
            raise ValueError(f"Unknown operation: {name!r}")
        method = getattr(self, name)
        return await method(**arguments)

    async def _run(self, schema: OperationSchema, arguments: Mapping[str, Any]) -> Any:
        return await run_operation(
            config=self._config,
            schema=schema,
            arguments=arguments,
            transport=self._transport,
        )

    # Contacts
    list_contacts = resource_operation(operations.LIST_CONTACTS)
    get_contact = resource_operation(operations.GET_CONTACT)
    create_contact = resource_operation(operations.CREATE_CONTACT)
    edit_contact = resource_operation(operations.EDIT_CONTACT)
    delete_contact = resource_operation(operations.DELETE_CONTACT)

    # Appointments
    list_appointments = resource_operation(operations.LIST_APPOINTMENTS)
    get_appointment = resource_operation(operations.GET_APPOINTMENT)
    create_appointment = resource_operation(operations.CREATE_APPOINTMENT)
    edit_appointment = resource_operation(operations.EDIT_APPOINTMENT)
    delete_appointment = resource_operation(operations.DELETE_APPOINTMENT)
    delete_recurring_appointment = resource_operation(operations.DELETE_RECURRING_APPOINTMENT)

    # Call data
    get_call_data = resource_operation(operations.GET_CALL_DATA)

    # Company info
    get_company_info = resource_operation(operations.GET_COMPANY_INFO)
    edit_company_info = resource_operation(operations.EDIT_COMPANY_INFO)

    # Employees
    list_employees = resource_operation(operations.LIST_EMPLOYEES)
    get_employee = resource_operation(operations.GET_EMPLOYEE)
    create_employee = resource_operation(operations.CREATE_EMPLOYEE)
    edit_employee = resource_operation(operations.EDIT_EMPLOYEE)
    delete_employee = resource_operation(operations.DELETE_EMPLOYEE)

    # FAQ
    list_faq_entries = resource_operation(operations.LIST_FAQ_ENTRIES)
    get_faq_entry = resource_operation(operations.GET_FAQ_ENTRY)
    edit_faq_entry = resource_operation(operations.EDIT_FAQ_ENTRY)
    delete_faq_entry = resource_operation(operations.DELETE_FAQ_ENTRY)
