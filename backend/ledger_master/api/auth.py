"""
Authentication API
"""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from ledger_master.core.security import passwords_match
from ledger_master.db.database import get_db
from ledger_master.errors import InvalidCredentials, MissingParameter
from ledger_master.repositories.reference import UserRepository
from ledger_master.schemas.auth import LoginRequest, LoginResponse

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
def login(request: LoginRequest, db: Session = Depends(get_db)):
    """
    Check a user name/password pair.
    Returns the user id and company scope; there is no server-side session.
    """
    if not request.username or not request.password:
        raise MissingParameter("Username and password are required")

    user = UserRepository(db).find_active(request.username)
    if user is None:
        log.warning("Login rejected for unknown or inactive user %s", request.username)
        raise InvalidCredentials("Invalid username or user is inactive")

    if not passwords_match(user.password, request.password):
        log.warning("Login rejected for user %s: bad password", request.username)
        raise InvalidCredentials("Invalid password")

    return {
        "message": "Login successful",
        "user": {
            "UserId": user.id,
            "IsAllComp": user.is_all_comp,
            "RightsCompId": user.rights_comp_id,
            "companyId": user.rights_comp_id,
        },
    }
