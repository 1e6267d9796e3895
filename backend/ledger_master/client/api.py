"""
HTTP data access for the Ledger Master API.

One attempt per call, no retries. Transport failures raise
:class:`NetworkUnavailable`, non-2xx answers raise :class:`ServerError`
carrying the server's ``message``.
"""
import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional

import requests

from ledger_master.core.config import Settings
from ledger_master.errors import (
    InvalidCredentials, LedgerMasterError, NetworkUnavailable, ServerError
)

log = logging.getLogger(__name__)

CHECK_CONNECTION = "Please check your internet connection and try again"
TRY_AGAIN_LATER = "Unable to connect to the server. Please try again later."


def user_message(exc: LedgerMasterError) -> str:
    """Message to show for a failed call"""
    if isinstance(exc, NetworkUnavailable):
        return CHECK_CONNECTION
    if isinstance(exc, ServerError) and (exc.status_code is None or exc.status_code >= 500):
        return TRY_AGAIN_LATER
    return exc.message or TRY_AGAIN_LATER


def _jsonable(value: Any) -> Any:
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {key: _jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    return value


class LedgerApiClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http: Optional[Any] = None,
    ):
        self.base_url = (base_url or Settings.API_BASE_URL).rstrip("/")
        self.timeout = timeout or Settings.API_TIMEOUT
        self.http = http or requests.Session()

    def _request(
        self,
        method: str,
        path: str,
        body: Optional[Mapping[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        url = f"{self.base_url}{path}"
        try:
            resp = self.http.request(
                method,
                url,
                json=_jsonable(body) if body is not None else None,
                params=params,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.ConnectionError as e:
            log.warning("%s %s failed: no connection (%s)", method, url, e)
            raise NetworkUnavailable(f"Could not reach {url}") from e
        except requests.RequestException as e:
            log.warning("%s %s failed: %s", method, url, e)
            raise ServerError(f"HTTP request failed: {e}") from e

        try:
            payload = resp.json()
        except ValueError:
            payload = {"message": resp.text} if resp.text else None

        if not 200 <= resp.status_code < 300:
            message = None
            if isinstance(payload, dict):
                message = payload.get("message")
            message = message or f"Request failed with status {resp.status_code}"
            log.warning("%s %s answered %s: %s", method, url, resp.status_code, message)
            raise ServerError(
                message,
                status_code=resp.status_code,
                payload=payload if isinstance(payload, dict) else None,
            )
        return payload

    @staticmethod
    def _supplier_id(payload: Any) -> int:
        """SupplierId from a write acknowledgement"""
        if not isinstance(payload, dict) or "supplierId" not in payload:
            raise ServerError("Unexpected response from server: missing supplierId")
        return payload["supplierId"]

    @staticmethod
    def _company_header(company_id: int) -> Dict[str, str]:
        return {"company-id": str(company_id)}

    def login(self, username: str, password: str) -> Dict[str, Any]:
        """The ``user`` object (UserId, companyId, ...) for valid credentials"""
        try:
            payload = self._request("POST", "/login", body={"username": username, "password": password})
        except ServerError as e:
            if e.status_code == 401:
                raise InvalidCredentials(e.message) from e
            raise
        if not isinstance(payload, dict) or "user" not in payload:
            raise ServerError("Unexpected response from server: missing user")
        return payload["user"]

    def fetch_cities(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/cities")

    def fetch_ledger_groups(self, comp_id: int) -> List[Dict[str, Any]]:
        return self._request("GET", f"/ledger-groups/{comp_id}")

    def list_suppliers(self, company_id: int, search: Optional[str] = None) -> List[Dict[str, Any]]:
        params: Dict[str, Any] = {"companyId": company_id}
        if search:
            params["search"] = search
        return self._request("GET", "/suppliers", params=params)

    def get_supplier(self, supplier_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/suppliers/{supplier_id}")

    def create_supplier(self, record: Mapping[str, Any]) -> int:
        """Create a supplier from a storage-shaped record; returns its SupplierId"""
        return self._supplier_id(self._request("POST", "/suppliers", body=record))

    def update_supplier(self, supplier_id: int, company_id: int, record: Mapping[str, Any]) -> int:
        payload = self._request(
            "PUT", f"/suppliers/{supplier_id}",
            body=record, headers=self._company_header(company_id),
        )
        return self._supplier_id(payload)

    def delete_supplier(self, supplier_id: int, company_id: int) -> int:
        payload = self._request(
            "DELETE", f"/suppliers/{supplier_id}",
            headers=self._company_header(company_id),
        )
        return self._supplier_id(payload)

    def list_companies(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/companies")

    def get_active_company_id(self) -> Optional[int]:
        """CompanyId of the newest company, or None when the store is empty"""
        try:
            payload = self._request("GET", "/company-store/active")
        except ServerError as e:
            if e.status_code == 404:
                return None
            raise
        return payload.get("CompanyId")
