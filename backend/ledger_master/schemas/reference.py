"""
City, ledger group and company Pydantic models
"""
from pydantic import BaseModel, Field


class CityResponse(BaseModel):
    """City reference entry"""
    id: int = Field(..., alias="CityId")
    name: str = Field(..., alias="CITY")

    class Config:
        from_attributes = True
        populate_by_name = True


class LedgerGroupResponse(BaseModel):
    """Ledger group reference entry"""
    id: int = Field(..., alias="LedgerGroupId")
    name: str = Field(..., alias="LEDGERGROUP")

    class Config:
        from_attributes = True
        populate_by_name = True


class CompanyResponse(BaseModel):
    id: int = Field(..., alias="CompanyId")

    class Config:
        from_attributes = True
        populate_by_name = True


class CompanyCreatedResponse(BaseModel):
    message: str
    companyId: int
