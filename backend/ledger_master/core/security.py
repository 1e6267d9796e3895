"""
Credential checks
"""
import hmac
from typing import Optional


def passwords_match(stored: Optional[str], supplied: str) -> bool:
    """Compare a stored password with the one supplied at login.

    Stored passwords are plaintext in the existing Users table, so this is a
    byte-for-byte equality check. Swap this function out when credentials
    are migrated to hashes.
    """
    if stored is None or supplied is None:
        return False
    return hmac.compare_digest(stored.encode("utf-8"), supplied.encode("utf-8"))
