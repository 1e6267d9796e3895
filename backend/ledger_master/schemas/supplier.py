"""
Supplier (ledger account) Pydantic models

Fields use snake_case names with the storage column names as aliases, so
request and response bodies keep the column names clients already send.
"""
from pydantic import BaseModel, Field, field_serializer, model_validator
from typing import Optional
from datetime import datetime
from decimal import Decimal


def format_datetime(dt: Optional[datetime]) -> Optional[str]:
    """Render a timestamp as ISO 8601"""
    if dt is None:
        return None
    return dt.isoformat()


class SupplierBase(BaseModel):
    """Mutable supplier fields"""
    name: str = Field(..., alias="Supplier", description="Ledger name", min_length=1, max_length=100)
    print_name: Optional[str] = Field("", alias="PrintName", description="Print name", max_length=100)
    address1: Optional[str] = Field("", alias="Add1", max_length=100)
    address2: Optional[str] = Field("", alias="Add2", max_length=100)
    address3: Optional[str] = Field("", alias="Add3", max_length=100)
    city_id: int = Field(..., alias="City", description="CityId")
    phone: Optional[str] = Field("", alias="Phone", max_length=20)
    fax: Optional[str] = Field(None, alias="Fax", max_length=20)
    tngst_no: Optional[str] = Field("", alias="TNGST_No", description="Tax registration number", max_length=50)
    tin_no: Optional[str] = Field(None, alias="TIN_No", max_length=50)
    email: Optional[str] = Field("", alias="Mailid", max_length=100)
    contact_person: Optional[str] = Field("", alias="Contact_person", max_length=100)
    mobile_no: Optional[str] = Field(None, alias="Mobile_No", max_length=20)
    supplier_customer: Optional[str] = Field(None, alias="Supplier_Customer", max_length=1)
    is_active: str = Field("Y", alias="Isactive", pattern="^[YN]$")
    ledger_group_id: int = Field(..., alias="LedgerGroupId")
    sup_code: Optional[str] = Field(None, alias="SupCode", max_length=10)
    credit_days: Optional[int] = Field(None, alias="CreditDays")
    vh_no: Optional[str] = Field(None, alias="VhNo", max_length=50)
    op_bal_amt: Decimal = Field(Decimal("0"), alias="OpBalAmt", description="Signed opening balance")
    op_type: str = Field("Dr", alias="OpType", pattern="^(Dr|Cr)$")

    class Config:
        populate_by_name = True


# Extra columns the entry form does not edit; an update keeps them unless sent
PRESERVED_UNLESS_SENT = ("fax", "tin_no", "supplier_customer", "sup_code", "credit_days", "vh_no")


class SupplierWrite(SupplierBase):
    """Write body: OpType decides the sign of the stored OpBalAmt"""

    @model_validator(mode="after")
    def sign_balance(self):
        magnitude = abs(self.op_bal_amt)
        self.op_bal_amt = -magnitude if self.op_type == "Cr" and magnitude else magnitude
        return self


class SupplierCreate(SupplierWrite):
    """Create body; the company scope and opening date are fixed at creation"""
    company_id: int = Field(..., alias="CompId", description="Company scope")
    op_date: Optional[datetime] = Field(None, alias="OpDt", description="Opening balance date")


class SupplierUpdate(SupplierWrite):
    """Full-record update body; SupplierId and CompId in the body are ignored.

    The extra columns the entry form does not edit are only written when the
    body sends them.
    """
    def changes(self) -> dict:
        values = self.model_dump()
        for name in PRESERVED_UNLESS_SENT:
            if name not in self.model_fields_set:
                values.pop(name)
        return values


class SupplierResponse(SupplierBase):
    """Stored supplier record"""
    id: int = Field(..., alias="SupplierId")
    company_id: int = Field(..., alias="CompId")
    op_date: Optional[datetime] = Field(None, alias="OpDt")
    last_update: Optional[datetime] = Field(None, alias="LastUpdate")
    # Stored rows may predate validation, so relax the write-side constraints
    name: str = Field(..., alias="Supplier")
    is_active: Optional[str] = Field(None, alias="Isactive")
    op_type: Optional[str] = Field(None, alias="OpType")
    ledger_group_id: Optional[int] = Field(None, alias="LedgerGroupId")
    op_bal_amt: Optional[Decimal] = Field(None, alias="OpBalAmt")

    class Config:
        from_attributes = True
        populate_by_name = True

    @field_serializer('op_date', 'last_update')
    def serialize_datetime(self, dt: Optional[datetime]) -> Optional[str]:
        return format_datetime(dt)

    @field_serializer('op_bal_amt')
    def serialize_amount(self, amount: Optional[Decimal]) -> Optional[str]:
        # Exact decimal text, e.g. "-150.00"
        if amount is None:
            return None
        return str(amount)


class SupplierWriteResponse(BaseModel):
    """Acknowledgement for create/update/delete"""
    message: str
    supplierId: int
