"""
Supplier (ledger account) model
"""
from sqlalchemy import Column, Integer, String, Numeric, DateTime, Index
from sqlalchemy.sql import func
from ledger_master.db.database import Base


class Supplier(Base):
    """Ledger account table; column names are the wire names used by clients"""
    __tablename__ = "Supplier"

    id = Column("SupplierId", Integer, primary_key=True, autoincrement=True)
    name = Column("Supplier", String(100), nullable=False, comment="Ledger name")
    print_name = Column("PrintName", String(100), comment="Name printed on documents")
    address1 = Column("Add1", String(100))
    address2 = Column("Add2", String(100))
    address3 = Column("Add3", String(100))
    city_id = Column("City", Integer, nullable=False, comment="CityId reference")
    phone = Column("Phone", String(20))
    fax = Column("Fax", String(20))
    tngst_no = Column("TNGST_No", String(50), comment="Tax registration number")
    tin_no = Column("TIN_No", String(50))
    email = Column("Mailid", String(100))
    contact_person = Column("Contact_person", String(100))
    mobile_no = Column("Mobile_No", String(20))
    supplier_customer = Column("Supplier_Customer", String(1))
    is_active = Column("Isactive", String(1), default="Y", comment="Y/N")
    company_id = Column("CompId", Integer, nullable=False, comment="Company scope")
    ledger_group_id = Column("LedgerGroupId", Integer, comment="LedgerGroup reference")
    sup_code = Column("SupCode", String(10))
    credit_days = Column("CreditDays", Integer)
    vh_no = Column("VhNo", String(50))
    op_bal_amt = Column("OpBalAmt", Numeric(18, 2), default=0, comment="Signed opening balance, negative is credit")
    op_type = Column("OpType", String(10), default="Dr", comment="Dr/Cr")
    op_date = Column("OpDt", DateTime, comment="Opening balance date")
    last_update = Column("LastUpdate", DateTime, server_default=func.now(), comment="Last write time")

    __table_args__ = (
        Index("idx_supplier_comp_id", "CompId"),
        Index("idx_supplier_mobile_no", "Mobile_No"),
    )
