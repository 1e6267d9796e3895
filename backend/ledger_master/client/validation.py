"""
Ledger form validation, shared by the create, edit and inline-edit flows
"""
import re
from dataclasses import dataclass, fields
from enum import Enum
from typing import Dict, Optional

from ledger_master.client.balance import parse_decimal

MOBILE_PATTERN = re.compile(r"[0-9]{10}")
EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")


class FieldErrorKind(Enum):
    REQUIRED_FIELD = "RequiredField"
    INVALID_FORMAT = "InvalidFormat"
    NOT_A_NUMBER = "NotANumber"


@dataclass(frozen=True)
class FieldError:
    kind: FieldErrorKind
    message: str


@dataclass(frozen=True)
class LedgerFormErrors:
    """One optional error slot per validated form field"""
    ledger_name: Optional[FieldError] = None
    mobile_number: Optional[FieldError] = None
    email: Optional[FieldError] = None
    opening_balance: Optional[FieldError] = None

    @property
    def is_valid(self) -> bool:
        return not any(getattr(self, f.name) for f in fields(self))

    def as_dict(self) -> Dict[str, str]:
        """Field name to message, for the fields that failed"""
        return {
            f.name: getattr(self, f.name).message
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


def check_ledger_name(value: str) -> Optional[FieldError]:
    if not (value or "").strip():
        return FieldError(FieldErrorKind.REQUIRED_FIELD, "Ledger name is required")
    return None


def check_mobile_number(value: str) -> Optional[FieldError]:
    value = value or ""
    if not value.strip():
        return FieldError(FieldErrorKind.REQUIRED_FIELD, "Mobile number is required")
    if not MOBILE_PATTERN.fullmatch(value):
        return FieldError(FieldErrorKind.INVALID_FORMAT, "Enter a valid 10-digit mobile number")
    return None


def check_email(value: str) -> Optional[FieldError]:
    if value and not EMAIL_PATTERN.search(value):
        return FieldError(FieldErrorKind.INVALID_FORMAT, "Enter a valid email address")
    return None


def check_opening_balance(value: str) -> Optional[FieldError]:
    if value and value.strip() and parse_decimal(value) is None:
        return FieldError(FieldErrorKind.NOT_A_NUMBER, "Opening balance must be a number")
    return None


def validate_ledger_form(form) -> LedgerFormErrors:
    """Run every rule against a :class:`LedgerForm`; all failures are reported"""
    return LedgerFormErrors(
        ledger_name=check_ledger_name(form.ledger_name),
        mobile_number=check_mobile_number(form.mobile_number),
        email=check_email(form.email),
        opening_balance=check_opening_balance(form.opening_balance),
    )
