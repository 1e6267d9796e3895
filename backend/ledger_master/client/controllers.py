"""
Screen-level actions for the login, create, edit and list screens.

Each action runs validation, mapping and one API call, and hands back either
the result or the field errors; API failures propagate to the caller, which
shows them with :func:`ledger_master.client.api.user_message`.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from ledger_master.client.api import LedgerApiClient
from ledger_master.client.listing import filter_suppliers, sort_by_last_update
from ledger_master.client.mapper import LedgerForm, display_to_storage, storage_to_display
from ledger_master.client.session import SessionContext, SessionStore
from ledger_master.client.validation import LedgerFormErrors, validate_ledger_form

log = logging.getLogger(__name__)


@dataclass
class SubmitResult:
    """Outcome of a form submit: field errors, or the saved SupplierId"""
    errors: LedgerFormErrors = field(default_factory=LedgerFormErrors)
    supplier_id: Optional[int] = None

    @property
    def saved(self) -> bool:
        return self.supplier_id is not None


@dataclass
class LedgerController:
    api: LedgerApiClient
    store: SessionStore

    def login(self, username: str, password: str) -> SessionContext:
        """Authenticate and persist the session; a failed login clears it"""
        try:
            user = self.api.login(username, password)
        except Exception:
            self.store.clear()
            raise
        context = SessionContext.from_login(username, user)
        self.store.save(context)
        log.info("User %s logged in for company %s", username, context.company_id)
        return context

    def logout(self) -> None:
        self.store.clear()

    def current_session(self) -> Optional[SessionContext]:
        return self.store.load()

    def form_choices(self, context: SessionContext) -> Dict[str, List[Dict[str, Any]]]:
        """City and ledger group options for the form pickers"""
        return {
            "cities": self.api.fetch_cities(),
            "ledger_groups": self.api.fetch_ledger_groups(context.company_id),
        }

    def create(
        self,
        context: SessionContext,
        form: LedgerForm,
        opening_date: Optional[datetime] = None,
    ) -> SubmitResult:
        errors = validate_ledger_form(form)
        if not errors.is_valid:
            return SubmitResult(errors=errors)
        record = display_to_storage(
            form,
            company_id=context.company_id,
            opening_date=opening_date or datetime.now(),
        )
        return SubmitResult(supplier_id=self.api.create_supplier(record))

    def load_for_edit(self, supplier_id: int) -> LedgerForm:
        return storage_to_display(self.api.get_supplier(supplier_id))

    def save_edit(self, context: SessionContext, supplier_id: int, form: LedgerForm) -> SubmitResult:
        """Full-form edit and inline list edit both end here"""
        errors = validate_ledger_form(form)
        if not errors.is_valid:
            return SubmitResult(errors=errors)
        record = display_to_storage(form)
        return SubmitResult(
            supplier_id=self.api.update_supplier(supplier_id, context.company_id, record)
        )

    def supplier_list(self, context: SessionContext, query: str = "") -> List[Mapping[str, Any]]:
        """The company's suppliers, newest first, narrowed by ``query``"""
        records = sort_by_last_update(self.api.list_suppliers(context.company_id))
        return filter_suppliers(records, query)
