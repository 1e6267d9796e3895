"""
Supplier (ledger account) API
"""
from fastapi import APIRouter, Depends, Header, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from ledger_master.db.database import get_db
from ledger_master.errors import InvalidParameter, MissingParameter
from ledger_master.repositories.supplier import SupplierRepository
from ledger_master.schemas.supplier import (
    SupplierCreate, SupplierUpdate, SupplierResponse, SupplierWriteResponse
)

router = APIRouter(prefix="/api/suppliers", tags=["suppliers"])


def _parse_company_id(value: Optional[str]) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except ValueError:
        raise InvalidParameter(f"Invalid company ID provided: {value}")


def _require_company_header(company_id: Optional[str]) -> int:
    parsed = _parse_company_id(company_id)
    if parsed is None:
        raise MissingParameter("Company ID is required in headers")
    return parsed


@router.get("", response_model=List[SupplierResponse])
def get_suppliers(
    company_id_query: Optional[str] = Query(None, alias="companyId"),
    company_id: Optional[str] = Header(None),
    search: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """List the suppliers of a company (query ``companyId`` or header ``company-id``)"""
    scope = _parse_company_id(company_id_query or company_id)
    return SupplierRepository(db).list(scope, search=search)


@router.get("/{supplier_id}", response_model=SupplierResponse)
def get_supplier(supplier_id: int, db: Session = Depends(get_db)):
    """Fetch one supplier"""
    return SupplierRepository(db).get_by_id(supplier_id)


@router.post("", response_model=SupplierWriteResponse, status_code=201)
def create_supplier(supplier: SupplierCreate, db: Session = Depends(get_db)):
    """Create a supplier; the city must exist"""
    supplier_id = SupplierRepository(db).create(supplier)
    return {"message": "Supplier created successfully", "supplierId": supplier_id}


@router.put("/{supplier_id}", response_model=SupplierWriteResponse)
def update_supplier(
    supplier_id: int,
    supplier_update: SupplierUpdate,
    company_id: Optional[str] = Header(None),
    db: Session = Depends(get_db)
):
    """Update a supplier belonging to the company named in the ``company-id`` header"""
    scope = _require_company_header(company_id)
    SupplierRepository(db).update(supplier_id, scope, supplier_update)
    return {"message": "Supplier updated successfully", "supplierId": supplier_id}


@router.delete("/{supplier_id}", response_model=SupplierWriteResponse)
def delete_supplier(
    supplier_id: int,
    company_id: Optional[str] = Header(None),
    db: Session = Depends(get_db)
):
    """Delete a supplier belonging to the company named in the ``company-id`` header"""
    scope = _require_company_header(company_id)
    SupplierRepository(db).delete(supplier_id, scope)
    return {"message": "Supplier deleted successfully", "supplierId": supplier_id}
