"""
Ledger group model
"""
from sqlalchemy import Column, Integer, String, Index
from ledger_master.db.database import Base


class LedgerGroup(Base):
    """Company-scoped ledger groups (SUNDRY DEBTORS, SUNDRY CREDITORS, ...)"""
    __tablename__ = "LedgerGroup"

    id = Column("LedgerGroupId", Integer, primary_key=True, autoincrement=True)
    name = Column("LEDGERGROUP", String(100), comment="Group name")
    company_id = Column("CompId", Integer, comment="Company scope")

    __table_args__ = (
        Index("idx_ledger_group_comp_id", "CompId"),
    )
