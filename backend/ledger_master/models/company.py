"""
Company store model
"""
from sqlalchemy import Column, Integer
from ledger_master.db.database import Base


class Company(Base):
    __tablename__ = "Company_Store"

    id = Column("CompanyId", Integer, primary_key=True, autoincrement=True)
