"""
Client-side core: form validation, balance normalisation, record mapping,
HTTP data access, session context and list presentation.
"""
from ledger_master.client.api import LedgerApiClient, user_message
from ledger_master.client.controllers import LedgerController, SubmitResult
from ledger_master.client.balance import denormalize, format_balance, normalize
from ledger_master.client.listing import filter_suppliers, sort_by_last_update
from ledger_master.client.mapper import (
    LedgerForm, display_to_storage, merge_inline_edit, storage_to_display
)
from ledger_master.client.session import SessionContext, SessionStore
from ledger_master.client.validation import (
    FieldError, FieldErrorKind, LedgerFormErrors, validate_ledger_form
)

__all__ = [
    "LedgerApiClient",
    "LedgerController",
    "SubmitResult",
    "user_message",
    "normalize",
    "denormalize",
    "format_balance",
    "sort_by_last_update",
    "filter_suppliers",
    "LedgerForm",
    "display_to_storage",
    "storage_to_display",
    "merge_inline_edit",
    "SessionContext",
    "SessionStore",
    "FieldError",
    "FieldErrorKind",
    "LedgerFormErrors",
    "validate_ledger_form",
]
