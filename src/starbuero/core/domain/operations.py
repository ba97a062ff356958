"""Catalogue of the remote operations.

Each entry is declarative data; `starbuero.client.resource_operation` turns
it into a client method. Argument order here is the positional order of the
generated method.

Wire names follow the remote API, which mixes English and German keys.
"""

from __future__ import annotations

from starbuero.core.domain.models import (
    FieldKind,
    FieldLocation,
    FieldSpec,
    HttpVerb,
    OperationSchema,
)


def _path_id(name: str) -> FieldSpec:
    return FieldSpec(name=name, wire="id", location=FieldLocation.PATH)


def _query(name: str, wire: str | None = None) -> FieldSpec:
    return FieldSpec(name=name, wire=wire or name, location=FieldLocation.QUERY)


def _body(
    name: str,
    wire: str | None = None,
    *,
    kind: FieldKind = FieldKind.PRESENCE,
    required: bool = True,
) -> FieldSpec:
    return FieldSpec(name=name, wire=wire or name, kind=kind, required=required)


def _flag(name: str, wire: str | None = None) -> FieldSpec:
    return _body(name, wire, kind=FieldKind.EXPLICIT_BOOLEAN)


def _array(name: str, wire: str | None = None) -> FieldSpec:
    return _body(name, wire, kind=FieldKind.ARRAY)


_PAGING = (_query("page"), _query("limit"))

_CONTACT_FIELDS = (
    _body("salutation"),
    _body("title"),
    _body("firstname"),
    _body("lastname"),
    _body("company"),
    _body("notice"),
    _array("email_addresses", "emailAddresses"),
    _array("phone_numbers", "phoneNumbers"),
    _flag("vip"),
    _flag("employee"),
    _flag("can_forward", "canForward"),
    _flag("can_notified_by_sms", "canNotifiedBySms"),
)

_APPOINTMENT_FIELDS = (
    _body("start"),
    _body("end", "ende"),
    # Employee reference; may legitimately be falsy (0).
    _flag("employee"),
    _body("description", "beschreibung"),
    _body("import_hash", "importHash"),
    _flag("activate_transfer", "activateTransfer"),
    _flag("activate_transfer_vip", "activateTransferVIP"),
)

_EMPLOYEE_FIELDS = (
    _body("name", "mitarbeiter"),
    _array("mail_cc"),
    _body("mail"),
    _body("position"),
    _body("responsibility", "zustaendigkeit"),
    _body("sub_cc", "subcc"),
    _flag("direct_dialable", "durchwahlfaehig"),
    _body("direct_dial", "durchwahl"),
    _flag("sms_capable", "smsfaehig"),
    _body("sms_number", "smsnummer"),
    _flag("vip_direct_dialable", "vipdurchwahlfaehig"),
    _flag("vip_sms_capable", "vipsmsfaehig"),
)


# Contacts
LIST_CONTACTS = OperationSchema(
    name="list_contacts",
    verb=HttpVerb.GET,
    path="/addon_contact/contact",
    arguments=_PAGING,
    summary="List contacts (paged; limit between 10 and 1000).",
)
GET_CONTACT = OperationSchema(
    name="get_contact",
    verb=HttpVerb.GET,
    path="/addon_contact/contact/{id}",
    arguments=(_path_id("contact_id"),),
    summary="Get one contact.",
)
CREATE_CONTACT = OperationSchema(
    name="create_contact",
    verb=HttpVerb.POST,
    path="/addon_contact/contact",
    arguments=_CONTACT_FIELDS,
    summary="Create a contact.",
)
EDIT_CONTACT = OperationSchema(
    name="edit_contact",
    verb=HttpVerb.PUT,
    path="/addon_contact/contact/{id}",
    arguments=(_path_id("contact_id"), *_CONTACT_FIELDS),
    summary="Replace a contact.",
)
DELETE_CONTACT = OperationSchema(
    name="delete_contact",
    verb=HttpVerb.DELETE,
    path="/addon_contact/contact/{id}",
    arguments=(_path_id("contact_id"),),
    summary="Delete a contact.",
)

# Appointments
LIST_APPOINTMENTS = OperationSchema(
    name="list_appointments",
    verb=HttpVerb.GET,
    path="/appointment",
    arguments=_PAGING,
    summary="List appointments (paged).",
)
GET_APPOINTMENT = OperationSchema(
    name="get_appointment",
    verb=HttpVerb.GET,
    path="/appointment/{id}",
    arguments=(_path_id("appointment_id"),),
    summary="Get one appointment.",
)
CREATE_APPOINTMENT = OperationSchema(
    name="create_appointment",
    verb=HttpVerb.POST,
    path="/appointment",
    arguments=_APPOINTMENT_FIELDS,
    summary="Create an appointment.",
)
EDIT_APPOINTMENT = OperationSchema(
    name="edit_appointment",
    verb=HttpVerb.PUT,
    path="/appointment/{id}",
    arguments=(_path_id("appointment_id"), *_APPOINTMENT_FIELDS),
    summary="Replace an appointment.",
)
DELETE_APPOINTMENT = OperationSchema(
    name="delete_appointment",
    verb=HttpVerb.DELETE,
    path="/appointment/{id}",
    arguments=(_path_id("appointment_id"),),
    summary="Delete an appointment.",
)
DELETE_RECURRING_APPOINTMENT = OperationSchema(
    name="delete_recurring_appointment",
    verb=HttpVerb.DELETE,
    path="/appointment_recurring/{id}",
    arguments=(_path_id("appointment_id"),),
    summary="Delete a recurring appointment series.",
)

# Call data
GET_CALL_DATA = OperationSchema(
    name="get_call_data",
    verb=HttpVerb.GET,
    path="/call_data",
    arguments=(
        *_PAGING,
        _query("start_date_time", "startDateTime"),
        _query("end_date_time", "endDateTime"),
    ),
    summary="List call records in a time range (e.g. 2022-01-01T13:37:00).",
)

# Company info (singleton at the API root)
GET_COMPANY_INFO = OperationSchema(
    name="get_company_info",
    verb=HttpVerb.GET,
    summary="Get the company info.",
)
EDIT_COMPANY_INFO = OperationSchema(
    name="edit_company_info",
    verb=HttpVerb.PUT,
    arguments=(
        _body("greeting", "begruessung"),
        _body("instruction", "anweisung"),
        _body("company_info", "info_unternehmen"),
        _body("imprint", "impressum"),
        _body("outing"),
    ),
    summary="Replace the company info.",
)

# Employees
LIST_EMPLOYEES = OperationSchema(
    name="list_employees",
    verb=HttpVerb.GET,
    path="/employee",
    arguments=_PAGING,
    summary="List employees (paged).",
)
GET_EMPLOYEE = OperationSchema(
    name="get_employee",
    verb=HttpVerb.GET,
    path="/employee/{id}",
    arguments=(_path_id("employee_id"),),
    summary="Get one employee.",
)
CREATE_EMPLOYEE = OperationSchema(
    name="create_employee",
    verb=HttpVerb.POST,
    path="/employee",
    arguments=_EMPLOYEE_FIELDS,
    summary="Create an employee.",
)
# The remote API edits employees with POST, not PUT.
EDIT_EMPLOYEE = OperationSchema(
    name="edit_employee",
    verb=HttpVerb.POST,
    path="/employee/{id}",
    arguments=(_path_id("employee_id"), *_EMPLOYEE_FIELDS),
    summary="Replace an employee.",
)
DELETE_EMPLOYEE = OperationSchema(
    name="delete_employee",
    verb=HttpVerb.DELETE,
    path="/employee/{id}",
    arguments=(_path_id("employee_id"),),
    summary="Delete an employee.",
)

# FAQ
LIST_FAQ_ENTRIES = OperationSchema(
    name="list_faq_entries",
    verb=HttpVerb.GET,
    path="/faq",
    arguments=_PAGING,
    summary="List FAQ entries (paged).",
)
GET_FAQ_ENTRY = OperationSchema(
    name="get_faq_entry",
    verb=HttpVerb.GET,
    path="/faq/{id}",
    arguments=(_path_id("faq_entry_id"),),
    summary="Get one FAQ entry.",
)
EDIT_FAQ_ENTRY = OperationSchema(
    name="edit_faq_entry",
    verb=HttpVerb.PUT,
    path="/faq/{id}",
    arguments=(
        _path_id("faq_entry_id"),
        _body("question", required=False),
        _body("answer", required=False),
    ),
    summary="Update question and/or answer of a FAQ entry.",
)
DELETE_FAQ_ENTRY = OperationSchema(
    name="delete_faq_entry",
    verb=HttpVerb.DELETE,
    path="/faq/{id}",
    arguments=(_path_id("faq_entry_id"),),
    summary="Delete a FAQ entry.",
)


OPERATIONS: dict[str, OperationSchema] = {
    op.name: op
    for op in (
        LIST_CONTACTS,
        GET_CONTACT,
        CREATE_CONTACT,
        EDIT_CONTACT,
        DELETE_CONTACT,
        LIST_APPOINTMENTS,
        GET_APPOINTMENT,
        CREATE_APPOINTMENT,
        EDIT_APPOINTMENT,
        DELETE_APPOINTMENT,
        DELETE_RECURRING_APPOINTMENT,
        GET_CALL_DATA,
        GET_COMPANY_INFO,
        EDIT_COMPANY_INFO,
        LIST_EMPLOYEES,
        GET_EMPLOYEE,
        CREATE_EMPLOYEE,
        EDIT_EMPLOYEE,
        DELETE_EMPLOYEE,
        LIST_FAQ_ENTRIES,
        GET_FAQ_ENTRY,
        EDIT_FAQ_ENTRY,
        DELETE_FAQ_ENTRY,
    )
}
