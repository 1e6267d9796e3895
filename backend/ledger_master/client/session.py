"""
Client session context: who is logged in and which company they work in
"""
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from ledger_master.core.config import Settings

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionContext:
    """Created at login, destroyed at logout"""
    username: str
    user_id: int
    company_id: int

    @classmethod
    def from_login(cls, username: str, user: Mapping[str, Any]) -> "SessionContext":
        """Build the context from the ``user`` object of a login response"""
        return cls(
            username=username,
            user_id=int(user["UserId"]),
            company_id=int(user["companyId"]),
        )

    def to_storage(self) -> Dict[str, str]:
        return {
            "isLoggedIn": "true",
            "username": self.username,
            "userId": str(self.user_id),
            "companyId": str(self.company_id),
        }


class SessionStore:
    """Persists a :class:`SessionContext` as string-valued keys in a JSON file"""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path or Settings.SESSION_FILE)

    def load(self) -> Optional[SessionContext]:
        """The saved session, or None when nobody is logged in"""
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            if data.get("isLoggedIn") != "true":
                return None
            return SessionContext(
                username=data["username"],
                user_id=int(data["userId"]),
                company_id=int(data["companyId"]),
            )
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            log.warning("Ignoring unreadable session file %s: %s", self.path, e)
            return None

    def save(self, context: SessionContext) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(context.to_storage()), encoding="utf-8")

    def clear(self) -> None:
        """Forget every stored key"""
        self.path.unlink(missing_ok=True)
