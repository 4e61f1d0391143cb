from datetime import date

import pytest
from pydantic import ValidationError

from repository.rental_store import RentalStore, generate_id
from schemas import (
    EntityType,
    LandlordCreate,
    PaymentCreate,
    PaymentStatus,
    PaymentType,
    PropertyCreate,
    TenantCreate,
    UnitCreate,
)


def test_seed_counts(store):
    assert len(store.landlords) == 1
    assert len(store.properties) == 1
    assert len(store.units) == 4
    assert len(store.tenants) == 3
    assert len(store.payments) == 4
    assert [p.id for p in store.payments] == ["p1", "p2", "p3", "p4"]


def test_seed_store_instances_do_not_share_collections():
    first = RentalStore.from_seed()
    second = RentalStore.from_seed()
    first.update_payment_status("p3", PaymentStatus.PAID)

    assert second.get_payment("p3").status == PaymentStatus.OVERDUE


def test_generate_id_shape():
    new_id = generate_id()
    assert len(new_id) == 9
    assert new_id.isalnum()
    assert new_id == new_id.lower()


def test_adds_append_in_order_and_assign_ids(empty_store):
    landlord = empty_store.add_landlord(LandlordCreate(name="박사장", phone="010-0000-0000"))
    prop = empty_store.add_property(PropertyCreate(
        landlord_id=landlord.id, name="역삼 오피스", address="서울", type="Office", total_floors=10
    ))
    first = empty_store.add_unit(UnitCreate(property_id=prop.id, floor=1, name="101호"))
    second = empty_store.add_unit(UnitCreate(property_id=prop.id, floor=1, name="102호"))

    assert landlord.id == "new1"
    assert prop.id == "new2"
    assert [u.id for u in empty_store.units] == [first.id, second.id]
    assert empty_store.landlords == (landlord,)
    assert empty_store.properties == (prop,)


def test_each_add_grows_collection_by_one(store):
    before = len(store.tenants)
    store.add_tenant(TenantCreate(
        unit_id="u401",
        name="최지우",
        phone="010-2222-3333",
        deposit=20000000,
        rent_amount=700000,
        maintenance_amount=70000,
        lease_start_date=date(2024, 6, 1),
        lease_end_date=date(2026, 6, 1),
    ))
    assert len(store.tenants) == before + 1
    assert store.tenants[-1].name == "최지우"
    assert store.tenants[-1].type == EntityType.INDIVIDUAL


def test_add_does_not_check_foreign_keys(empty_store):
    prop = empty_store.add_property(PropertyCreate(landlord_id="missing", name="X", address="Y"))
    assert empty_store.get_landlord(prop.landlord_id) is None


def test_add_payment(empty_store):
    payment = empty_store.add_payment(PaymentCreate(
        tenant_id="t1", date=date(2024, 6, 1), type=PaymentType.MAINTENANCE, amount=50000
    ))
    assert payment.status == PaymentStatus.PENDING
    assert empty_store.payments == (payment,)


def test_update_status_to_paid_stamps_clock_date(store, today):
    before = store.get_payment("p3")

    assert store.update_payment_status("p3", PaymentStatus.PAID) is True

    after = store.get_payment("p3")
    assert after.status == PaymentStatus.PAID
    assert after.paid_date == today
    assert after.model_dump(exclude={"status", "paid_date"}) == before.model_dump(
        exclude={"status", "paid_date"}
    )


@pytest.mark.parametrize("status", [PaymentStatus.PENDING, PaymentStatus.OVERDUE])
def test_update_status_away_from_paid_clears_paid_date(store, status):
    assert store.get_payment("p1").paid_date is not None

    store.update_payment_status("p1", status)

    assert store.get_payment("p1").status == status
    assert store.get_payment("p1").paid_date is None


def test_update_status_replaces_record_instead_of_mutating(store):
    old_snapshot = store.payments
    old_record = store.get_payment("p4")

    store.update_payment_status("p4", PaymentStatus.PAID)

    assert store.payments is not old_snapshot
    assert old_record.status == PaymentStatus.PENDING
    assert old_snapshot[3] is old_record
    # untouched records are carried over as-is
    assert store.payments[0] is old_snapshot[0]


def test_update_status_unknown_id_is_noop(store):
    snapshot = store.payments

    assert store.update_payment_status("nope", PaymentStatus.PAID) is False
    assert store.payments is snapshot


def test_records_are_frozen(store):
    with pytest.raises(ValidationError):
        store.payments[0].status = PaymentStatus.OVERDUE


def test_getters_return_none_for_dangling_ids(store):
    assert store.get_landlord("x") is None
    assert store.get_property("x") is None
    assert store.get_unit("x") is None
    assert store.get_tenant("x") is None
    assert store.get_payment("x") is None


def test_update_status_accepts_display_label(store, today):
    assert store.update_payment_status("p3", "납부완료") is True

    after = store.get_payment("p3")
    assert after.status is PaymentStatus.PAID
    assert after.paid_date == today


def test_update_status_rejects_unknown_status_before_mutating(store):
    snapshot = store.payments

    with pytest.raises(ValueError):
        store.update_payment_status("p3", "bogus")

    assert store.payments is snapshot
    assert store.get_payment("p3").status == PaymentStatus.OVERDUE


def test_total_floors_must_be_positive():
    with pytest.raises(ValidationError):
        PropertyCreate(landlord_id="l1", name="X", address="Y", total_floors=0)


@pytest.mark.parametrize("amount", [0, -1000])
def test_payment_amount_must_be_positive(amount):
    with pytest.raises(ValidationError):
        PaymentCreate(tenant_id="t1", date=date(2024, 6, 1), amount=amount)
