"""
Database models
"""
from ledger_master.models.city import City
from ledger_master.models.ledger_group import LedgerGroup
from ledger_master.models.supplier import Supplier
from ledger_master.models.user import User
from ledger_master.models.company import Company

__all__ = [
    "City",
    "LedgerGroup",
    "Supplier",
    "User",
    "Company",
]
