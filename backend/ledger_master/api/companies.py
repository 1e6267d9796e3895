"""
Company store API
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from ledger_master.db.database import get_db
from ledger_master.errors import NotFound
from ledger_master.repositories.reference import CompanyRepository
from ledger_master.schemas.reference import CompanyCreatedResponse, CompanyResponse

router = APIRouter(prefix="/api", tags=["companies"])


@router.post("/companies", response_model=CompanyCreatedResponse, status_code=201)
def create_company(db: Session = Depends(get_db)):
    company_id = CompanyRepository(db).create()
    return {"message": "Company created successfully", "companyId": company_id}


@router.get("/companies", response_model=List[CompanyResponse])
def get_companies(db: Session = Depends(get_db)):
    return CompanyRepository(db).list()


@router.get("/company-store/active", response_model=CompanyResponse)
def get_active_company(db: Session = Depends(get_db)):
    """The newest company in the store"""
    company = CompanyRepository(db).active()
    if not company:
        raise NotFound("No active company found")
    return company
