"""
Reference data repositories: cities, ledger groups, companies and users
"""
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ledger_master.models import City, Company, LedgerGroup, User


class CityRepository:
    def __init__(self, db: Session):
        self.db = db

    def list_active(self) -> List[City]:
        return self.db.query(City).filter(City.is_active == "Y").all()

    def exists(self, city_id: Optional[int]) -> bool:
        """True when ``city_id`` names an active city"""
        if city_id is None:
            return False
        return (
            self.db.query(City.id)
            .filter(City.id == city_id, City.is_active == "Y")
            .first()
            is not None
        )


class LedgerGroupRepository:
    def __init__(self, db: Session):
        self.db = db

    def list_for_company(self, company_id: int) -> List[LedgerGroup]:
        return (
            self.db.query(LedgerGroup)
            .filter(LedgerGroup.company_id == company_id)
            .order_by(LedgerGroup.name)
            .all()
        )


class CompanyRepository:
    def __init__(self, db: Session):
        self.db = db

    def create(self) -> int:
        company = Company()
        self.db.add(company)
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        return company.id

    def list(self) -> List[Company]:
        return self.db.query(Company).order_by(Company.id).all()

    def active(self) -> Optional[Company]:
        """The most recently created company"""
        return self.db.query(Company).order_by(Company.id.desc()).first()


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_active(self, username: str) -> Optional[User]:
        return (
            self.db.query(User)
            .filter(User.username == username, User.is_active == "Y")
            .first()
        )
