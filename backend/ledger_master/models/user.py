"""
User model
"""
from sqlalchemy import Column, Integer, String, Index
from ledger_master.db.database import Base


class User(Base):
    """Application users; RightsCompId is the company a user works in"""
    __tablename__ = "Users"

    id = Column("UserId", Integer, primary_key=True, autoincrement=True)
    username = Column("UserName", String(100), nullable=False, comment="Login name")
    password = Column("Pwd", String(100), comment="Stored password")
    is_active = Column("IsActive", String(1), default="Y", comment="Y/N")
    is_all_comp = Column("IsAllComp", String(1), default="N", comment="Access to all companies")
    rights_comp_id = Column("RightsCompId", Integer, comment="Company scope")

    __table_args__ = (
        Index("idx_users_username", "UserName"),
    )
