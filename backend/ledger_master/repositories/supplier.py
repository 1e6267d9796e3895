"""
Supplier repository: company-scoped CRUD over the Supplier table
"""
import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ledger_master.errors import InvalidReference, MissingParameter, NotFound
from ledger_master.models.supplier import Supplier
from ledger_master.repositories.reference import CityRepository
from ledger_master.schemas.supplier import SupplierCreate, SupplierUpdate

log = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now()


class SupplierRepository:
    """Reads and writes supplier rows.

    Every write is a single transaction: it either commits fully or is rolled
    back and the error re-raised. ``LastUpdate`` is stamped on every write.
    """

    def __init__(self, db: Session):
        self.db = db
        self.cities = CityRepository(db)

    def list(self, company_id: Optional[int], search: Optional[str] = None) -> List[Supplier]:
        """All suppliers of one company; ordering is left to the caller"""
        if company_id is None:
            raise MissingParameter("Company ID is required")
        query = self.db.query(Supplier).filter(Supplier.company_id == company_id)
        if search:
            pattern = f"%{search}%"
            query = query.filter(
                or_(
                    Supplier.name.like(pattern),
                    Supplier.contact_person.like(pattern),
                    Supplier.mobile_no.like(pattern),
                )
            )
        return query.all()

    def get_by_id(self, supplier_id: int) -> Supplier:
        supplier = self.db.query(Supplier).filter(Supplier.id == supplier_id).first()
        if not supplier:
            raise NotFound("Supplier not found")
        return supplier

    def create(self, data: SupplierCreate) -> int:
        """Insert a supplier and return its new SupplierId"""
        self._ensure_city(data.city_id)
        supplier = Supplier(**data.model_dump())
        supplier.last_update = _now()
        self.db.add(supplier)
        self._commit()
        log.info("Created supplier %s for company %s", supplier.id, supplier.company_id)
        return supplier.id

    def update(self, supplier_id: int, company_id: int, data: SupplierUpdate) -> int:
        """Overwrite the mutable fields of a supplier owned by ``company_id``"""
        supplier = self._get_scoped(supplier_id, company_id)
        self._ensure_city(data.city_id)
        for field, value in data.changes().items():
            setattr(supplier, field, value)
        supplier.last_update = _now()
        self._commit()
        log.info("Updated supplier %s for company %s", supplier_id, company_id)
        return supplier.id

    def delete(self, supplier_id: int, company_id: int) -> int:
        supplier = self._get_scoped(supplier_id, company_id)
        self.db.delete(supplier)
        self._commit()
        log.info("Deleted supplier %s for company %s", supplier_id, company_id)
        return supplier_id

    def _get_scoped(self, supplier_id: int, company_id: int) -> Supplier:
        supplier = (
            self.db.query(Supplier)
            .filter(Supplier.id == supplier_id, Supplier.company_id == company_id)
            .first()
        )
        if not supplier:
            raise NotFound("Supplier not found or does not belong to the company")
        return supplier

    def _ensure_city(self, city_id: int) -> None:
        if not self.cities.exists(city_id):
            log.warning("Rejected write with unknown city code %s", city_id)
            raise InvalidReference(f"Invalid city code: {city_id}. Please select a valid city.")

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
