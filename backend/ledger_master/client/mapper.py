"""
Mapping between the form (display) shape and the storage record shape
"""
import dataclasses
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Mapping, Optional, Union

from ledger_master.client.balance import (
    BALANCE_TYPES, DEBIT, ZERO, denormalize, normalize, parse_decimal
)
from ledger_master.errors import InvalidReference


@dataclass
class LedgerForm:
    """Form state shared by the create, edit and inline-edit screens"""
    ledger_name: str = ""
    print_name: str = ""
    ledger_type: str = "SUNDRY DEBTORS"
    ledger_group_id: str = ""
    address1: str = ""
    address2: str = ""
    address3: str = ""
    state: str = "01 - JAMMU & KASHMIR"
    city: str = ""
    pin_code: str = ""
    gst_number: str = ""
    contact: str = ""
    mobile_number: str = ""
    phone_number: str = ""
    email: str = ""
    opening_balance: str = ""
    balance_type: str = DEBIT
    is_active: bool = True


# form field -> storage column, for plain text fields
TEXT_COLUMNS = {
    "ledger_name": "Supplier",
    "print_name": "PrintName",
    "address1": "Add1",
    "address2": "Add2",
    "address3": "Add3",
    "gst_number": "TNGST_No",
    "contact": "Contact_person",
    "mobile_number": "Mobile_No",
    "phone_number": "Phone",
    "email": "Mailid",
}

MAPPED_COLUMNS = tuple(TEXT_COLUMNS.values()) + (
    "City", "LedgerGroupId", "Isactive", "OpBalAmt", "OpType",
)


def _parse_reference(value: Any, label: str) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        raise InvalidReference(f"Invalid {label} selection: {value!r}") from None


def display_to_storage(
    form: LedgerForm,
    company_id: Optional[int] = None,
    opening_date: Optional[Union[date, datetime]] = None,
) -> Dict[str, Any]:
    """Storage-shaped payload for a validated form.

    ``CompId`` and ``OpDt`` are only included when given, for the create
    flow; updates never change them.
    """
    record: Dict[str, Any] = {
        column: getattr(form, field) for field, column in TEXT_COLUMNS.items()
    }
    record["City"] = _parse_reference(form.city, "city")
    record["LedgerGroupId"] = _parse_reference(form.ledger_group_id, "ledger group")
    record["Isactive"] = "Y" if form.is_active else "N"
    record["OpBalAmt"] = normalize(form.opening_balance, form.balance_type)
    record["OpType"] = form.balance_type
    if company_id is not None:
        record["CompId"] = int(company_id)
    if opening_date is not None:
        record["OpDt"] = opening_date.isoformat()
    return record


def _text(record: Mapping[str, Any], column: str) -> str:
    value = record.get(column)
    return "" if value is None else str(value)


def storage_to_display(record: Mapping[str, Any]) -> LedgerForm:
    """Form state for a stored record; missing values fall back to form defaults"""
    amount = parse_decimal(record.get("OpBalAmt"))
    if amount is None:
        amount = ZERO
    magnitude, balance_type = denormalize(amount)
    # A zero balance carries no sign, so keep whichever toggle was stored
    stored_type = record.get("OpType")
    if amount == 0 and stored_type in BALANCE_TYPES:
        balance_type = stored_type

    values = {field: _text(record, column) for field, column in TEXT_COLUMNS.items()}
    return LedgerForm(
        city=_text(record, "City"),
        ledger_group_id=_text(record, "LedgerGroupId"),
        opening_balance=magnitude,
        balance_type=balance_type,
        is_active=record.get("Isactive") == "Y",
        **values,
    )


def merge_inline_edit(record: Mapping[str, Any], **changes: Any) -> LedgerForm:
    """Form state for an inline list edit: the stored record plus edited fields"""
    return dataclasses.replace(storage_to_display(record), **changes)
