from datetime import datetime
from decimal import Decimal

import pytest

from ledger_master.errors import InvalidReference, MissingParameter, NotFound
from ledger_master.models import City, Supplier
from ledger_master.repositories import supplier as supplier_repository
from ledger_master.repositories.supplier import SupplierRepository
from ledger_master.schemas.supplier import SupplierCreate, SupplierUpdate


def make_create(payload) -> SupplierCreate:
    return SupplierCreate.model_validate(payload)


def test_create_assigns_id_and_stamps_last_update(db_session, supplier_payload, monkeypatch):
    stamp = datetime(2024, 5, 1, 10, 30, 0)
    monkeypatch.setattr(supplier_repository, "_now", lambda: stamp)
    repo = SupplierRepository(db_session)

    supplier_id = repo.create(make_create(supplier_payload()))

    stored = repo.get_by_id(supplier_id)
    assert stored.name == "Acme Traders"
    assert stored.company_id == 1
    assert stored.op_bal_amt == Decimal("150.00")
    assert stored.last_update == stamp


def test_create_with_unknown_city_persists_nothing(db_session, supplier_payload):
    repo = SupplierRepository(db_session)
    repo.create(make_create(supplier_payload()))
    before = len(repo.list(1))

    with pytest.raises(InvalidReference):
        repo.create(make_create(supplier_payload(City=999)))

    assert len(repo.list(1)) == before
    assert db_session.query(Supplier).count() == before


def test_create_with_inactive_city_is_rejected(db_session, supplier_payload):
    db_session.get(City, 7).is_active = "N"
    db_session.commit()

    with pytest.raises(InvalidReference):
        SupplierRepository(db_session).create(make_create(supplier_payload(City=7)))


def test_list_requires_company_and_is_scoped(db_session, supplier_payload, foreign_supplier):
    repo = SupplierRepository(db_session)
    repo.create(make_create(supplier_payload()))

    with pytest.raises(MissingParameter):
        repo.list(None)
    assert [s.name for s in repo.list(1)] == ["Acme Traders"]
    assert [s.id for s in repo.list(2)] == [5]


def test_list_search(db_session, supplier_payload):
    repo = SupplierRepository(db_session)
    repo.create(make_create(supplier_payload()))
    repo.create(make_create(supplier_payload(Supplier="Bharat Stores", Contact_person="Meena", Mobile_No="9123456780")))

    assert [s.name for s in repo.list(1, search="Meena")] == ["Bharat Stores"]
    assert [s.name for s in repo.list(1, search="98765")] == ["Acme Traders"]


def test_get_by_id_missing(db_session):
    with pytest.raises(NotFound):
        SupplierRepository(db_session).get_by_id(404)


def test_update_other_company_record_is_not_found(db_session, supplier_payload, foreign_supplier):
    repo = SupplierRepository(db_session)

    with pytest.raises(NotFound):
        repo.update(5, 1, SupplierUpdate.model_validate(supplier_payload()))

    assert db_session.get(Supplier, 5).name == "Other Company Ledger"


def test_update_overwrites_fields_and_refreshes_last_update(db_session, supplier_payload, monkeypatch):
    times = iter([datetime(2024, 1, 1, 9, 0), datetime(2024, 2, 1, 9, 0)])
    monkeypatch.setattr(supplier_repository, "_now", lambda: next(times))
    repo = SupplierRepository(db_session)
    supplier_id = repo.create(make_create(supplier_payload()))

    body = supplier_payload(Supplier="Acme Traders Pvt", OpBalAmt="-75.50", OpType="Cr", CompId=2)
    repo.update(supplier_id, 1, SupplierUpdate.model_validate(body))

    stored = repo.get_by_id(supplier_id)
    assert stored.name == "Acme Traders Pvt"
    assert stored.op_bal_amt == Decimal("-75.50")
    assert stored.op_type == "Cr"
    assert stored.company_id == 1
    assert stored.op_date == datetime(2024, 4, 1)
    assert stored.last_update == datetime(2024, 2, 1, 9, 0)


def test_update_with_unknown_city_keeps_record(db_session, supplier_payload):
    repo = SupplierRepository(db_session)
    supplier_id = repo.create(make_create(supplier_payload()))

    with pytest.raises(InvalidReference):
        repo.update(supplier_id, 1, SupplierUpdate.model_validate(supplier_payload(City=999, Supplier="Changed")))

    db_session.expire_all()
    assert repo.get_by_id(supplier_id).name == "Acme Traders"


def test_delete_is_company_scoped(db_session, foreign_supplier):
    repo = SupplierRepository(db_session)

    with pytest.raises(NotFound):
        repo.delete(5, 1)
    assert repo.delete(5, 2) == 5
    assert db_session.query(Supplier).count() == 0


def test_balance_sign_follows_op_type(db_session, supplier_payload):
    repo = SupplierRepository(db_session)

    credit_id = repo.create(make_create(supplier_payload(OpBalAmt="150", OpType="Cr")))
    debit_id = repo.create(make_create(supplier_payload(OpBalAmt="-40.25", OpType="Dr")))

    assert repo.get_by_id(credit_id).op_bal_amt == Decimal("-150.00")
    assert repo.get_by_id(debit_id).op_bal_amt == Decimal("40.25")

    repo.update(credit_id, 1, SupplierUpdate.model_validate(supplier_payload(OpBalAmt="20", OpType="Cr")))
    assert repo.get_by_id(credit_id).op_bal_amt == Decimal("-20.00")


def test_update_keeps_extra_columns_not_sent(db_session, supplier_payload):
    repo = SupplierRepository(db_session)
    supplier_id = repo.create(make_create(supplier_payload(Fax="0441111", TIN_No="TIN9", CreditDays=30, VhNo="TN01")))

    repo.update(supplier_id, 1, SupplierUpdate.model_validate(supplier_payload(Mobile_No="9123456780")))

    stored = repo.get_by_id(supplier_id)
    assert stored.mobile_no == "9123456780"
    assert (stored.fax, stored.tin_no, stored.credit_days, stored.vh_no) == ("0441111", "TIN9", 30, "TN01")

    repo.update(supplier_id, 1, SupplierUpdate.model_validate(supplier_payload(Fax=None, CreditDays=45)))
    stored = repo.get_by_id(supplier_id)
    assert stored.fax is None
    assert stored.credit_days == 45
    assert stored.tin_no == "TIN9"
