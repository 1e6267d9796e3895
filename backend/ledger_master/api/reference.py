"""
Reference data API: cities and ledger groups
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from ledger_master.db.database import get_db
from ledger_master.errors import InvalidParameter, NotFound
from ledger_master.repositories.reference import CityRepository, LedgerGroupRepository
from ledger_master.schemas.reference import CityResponse, LedgerGroupResponse

router = APIRouter(prefix="/api", tags=["reference data"])


@router.get("/cities", response_model=List[CityResponse])
def get_cities(db: Session = Depends(get_db)):
    """Active cities"""
    return CityRepository(db).list_active()


@router.get("/ledger-groups/{comp_id}", response_model=List[LedgerGroupResponse])
def get_ledger_groups(comp_id: str, db: Session = Depends(get_db)):
    """Ledger groups of one company, by name"""
    # Taken as text so a non-numeric id is a 400, like the other bad parameters
    if not comp_id.isdigit():
        raise InvalidParameter("Invalid company ID provided")
    groups = LedgerGroupRepository(db).list_for_company(int(comp_id))
    if not groups:
        raise NotFound("No ledger groups found for this company")
    return groups
