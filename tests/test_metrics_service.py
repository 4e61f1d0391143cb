from datetime import date

import pytest

from schemas import PaymentCreate, PaymentStatus, PaymentType, TenantCreate
from services import metrics_service


def test_monthly_potential_revenue_seed(store):
    assert metrics_service.monthly_potential_revenue(store.tenants) == 2050000


def test_monthly_potential_revenue_empty():
    assert metrics_service.monthly_potential_revenue([]) == 0


def test_overdue_count_seed(store):
    assert metrics_service.overdue_count(store.payments) == 1
    assert [p.id for p in metrics_service.overdue_payments(store.payments)] == ["p3"]


def test_occupancy_rate_seed(store):
    rate = metrics_service.occupancy_rate(len(store.tenants), len(store.units))
    assert rate == pytest.approx(75.0)


def test_occupancy_rate_no_units():
    assert metrics_service.occupancy_rate(0, 0) == 0
    assert metrics_service.occupancy_rate(3, 0) == 0


def test_occupancy_rate_counts_tenants_not_occupied_units(store):
    for _ in range(2):
        store.add_tenant(TenantCreate(
            unit_id="u101", name="동거인", phone="010",
            lease_start_date=date(2024, 1, 1), lease_end_date=date(2025, 1, 1),
        ))
    rate = metrics_service.occupancy_rate(len(store.tenants), len(store.units))
    assert rate == pytest.approx(125.0)


def test_collected_this_month_same_month(store):
    assert metrics_service.collected_this_month(store.payments, date(2024, 5, 20)) == 650000


def test_collected_this_month_other_month(store):
    assert metrics_service.collected_this_month(store.payments, date(2024, 6, 1)) == 0
    assert metrics_service.collected_this_month(store.payments, date(2023, 5, 1)) == 0


def test_collected_this_month_follows_status_updates(store):
    store.update_payment_status("p4", PaymentStatus.PAID)
    store.update_payment_status("p1", PaymentStatus.PENDING)

    assert metrics_service.collected_this_month(store.payments, date(2024, 5, 31)) == 850000


def test_collected_uses_due_date_not_paid_date(store):
    store.add_payment(PaymentCreate(
        tenant_id="t2", date=date(2024, 4, 15), type=PaymentType.RENT, amount=450000,
        status=PaymentStatus.PAID, paid_date=date(2024, 5, 2),
    ))
    assert metrics_service.collected_this_month(store.payments, date(2024, 5, 20)) == 650000


def test_dashboard_stats(store):
    stats = metrics_service.dashboard_stats(store)

    assert stats.total_revenue == 2050000
    assert stats.occupancy_rate == pytest.approx(75.0)
    assert stats.overdue_count == 1
    assert stats.total_units == 4
    assert stats.to_dict()["total_units"] == 4


def test_dashboard_stats_recomputed_after_mutation(store):
    store.update_payment_status("p3", PaymentStatus.PAID)
    assert metrics_service.dashboard_stats(store).overdue_count == 0


def test_overdue_highlights_limit(store):
    for day in range(1, 8):
        store.add_payment(PaymentCreate(
            tenant_id="t3", date=date(2024, 4, day), amount=800000, status=PaymentStatus.OVERDUE,
        ))

    highlights = metrics_service.overdue_highlights(store)

    assert len(highlights) == 5
    assert highlights[0].payment.id == "p3"
    assert highlights[0].tenant.name == "이영희"


def test_days_overdue(store):
    payment = store.get_payment("p3")
    assert metrics_service.days_overdue(payment, date(2024, 5, 20)) == 5
    assert metrics_service.days_overdue(payment, date(2024, 5, 10)) == -5
