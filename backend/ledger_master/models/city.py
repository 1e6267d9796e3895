"""
City reference model
"""
from sqlalchemy import Column, Integer, String
from ledger_master.db.database import Base


class City(Base):
    """City/state reference table; CityId is a stable code, not a surrogate"""
    __tablename__ = "City"

    id = Column("CityId", Integer, primary_key=True, autoincrement=False)
    name = Column("CITY", String(100), comment="City name")
    is_active = Column("IsActive", String(1), default="Y", comment="Y/N")
