"""
Create tables and seed reference data
"""
import logging

from sqlalchemy.orm import Session

from ledger_master.db.database import engine, Base, SessionLocal
from ledger_master.models import City, LedgerGroup

log = logging.getLogger(__name__)

CITY_SEED = [
    (1, "JAMMU & KASHMIR"),
    (2, "HIMACHAL PRADESH"),
    (3, "PUNJAB"),
    (4, "CHANDIGARH"),
    (5, "UTTARANCHAL"),
    (6, "HARYANA"),
    (7, "DELHI"),
    (8, "RAJASTHAN"),
    (9, "UTTAR PRADESH"),
    (10, "BIHAR"),
    (11, "SIKKIM"),
    (12, "ARUNACHAL PRADESH"),
    (13, "NAGALAND"),
    (14, "MANIPUR"),
    (15, "MIZORAM"),
    (16, "TRIPURA"),
    (17, "MEGHALAYA"),
    (18, "ASSAM"),
    (19, "WEST BENGAL"),
    (20, "JHARKHAND"),
    (21, "ORISSA"),
    (22, "CHHATTISGARH"),
    (23, "MADHYA PRADESH"),
    (24, "GUJARAT"),
    (25, "DAMAN & DIU"),
    (26, "DADRA & NAGAR HAVELI"),
    (27, "MAHARASHTRA"),
    (28, "ANDHRA PRADESH (OLD)"),
    (29, "KARNATAKA"),
    (30, "GOA"),
    (31, "LAKSHADWEEP"),
    (32, "KERALA"),
    (33, "TAMIL NADU"),
    (34, "PUDUCHERRY"),
    (35, "ANDAMAN & NICOBAR ISLANDS"),
    (36, "TELENGANA"),
    (37, "ANDHRA PRADESH (NEW)"),
]

LEDGER_GROUP_SEED = [
    ("SUNDRY DEBTORS", 1),
    ("SUNDRY CREDITORS", 1),
]


def seed_reference_data(db: Session) -> None:
    """Insert cities and default ledger groups into empty tables"""
    if db.query(City).count() == 0:
        db.add_all(City(id=city_id, name=name, is_active="Y") for city_id, name in CITY_SEED)
        log.info("Seeded %d cities", len(CITY_SEED))
    if db.query(LedgerGroup).count() == 0:
        db.add_all(LedgerGroup(name=name, company_id=comp_id) for name, comp_id in LEDGER_GROUP_SEED)
        log.info("Seeded %d ledger groups", len(LEDGER_GROUP_SEED))
    db.commit()


def init_db():
    """Create all tables and seed reference data"""
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_reference_data(db)
    finally:
        db.close()
    log.info("Database tables initialized")


if __name__ == "__main__":
    init_db()
