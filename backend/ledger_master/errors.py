"""
Domain errors shared by the API, the repositories and the client layer
"""
from typing import Any, Dict, Optional


class LedgerMasterError(Exception):
    """Base error; carries the HTTP status the API answers with"""
    status_code: Optional[int] = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidParameter(LedgerMasterError):
    status_code = 400


class MissingParameter(InvalidParameter):
    """A required query parameter or header was not supplied"""


class InvalidReference(LedgerMasterError):
    """City or ledger group does not point at existing reference data"""
    status_code = 400


class NotFound(LedgerMasterError):
    status_code = 404


class InvalidCredentials(LedgerMasterError):
    status_code = 401


class NetworkUnavailable(LedgerMasterError):
    """The transport could not reach the server at all"""
    status_code = None


class ServerError(LedgerMasterError):
    """The server answered with a non-2xx status"""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        payload: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload or {}
