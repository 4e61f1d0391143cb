"""
繳費管理頁面
"""
import streamlit as st

from repository.rental_store import RentalStore
from schemas import PaymentStatus
from services.lookup_service import LookupService
from utils.formatters import format_currency

STATUS_ICONS = {
    PaymentStatus.PAID: "✅",
    PaymentStatus.PENDING: "⏳",
    PaymentStatus.OVERDUE: "🚨",
}


def render(store: RentalStore):
    """渲染繳費明細"""
    st.title("납부 현황")
    lookup = LookupService(store)

    frame = lookup.payments_frame()
    if frame.empty:
        st.info("납부 내역이 없습니다.")
        return

    for payment in store.payments:
        chain = lookup.chain_for_payment(payment)
        col1, col2, col3, col4, col5 = st.columns([1, 2, 1, 1, 1])
        with col1:
            st.write(str(payment.date))
        with col2:
            tenant_name = chain.tenant.name if chain.tenant else "-"
            where = " ".join(x.name for x in (chain.property, chain.unit) if x is not None)
            st.write(f"{tenant_name}  \n{where}")
        with col3:
            st.write(payment.type.value)
        with col4:
            st.write(format_currency(payment.amount))
        with col5:
            st.write(f"{STATUS_ICONS[payment.status]} {payment.status.value}")
            if payment.status != PaymentStatus.PAID:
                if st.button("납부 확인", key=f"pay_{payment.id}"):
                    store.update_payment_status(payment.id, PaymentStatus.PAID)
                    st.rerun()
            elif payment.paid_date:
                st.caption(f"{payment.paid_date} 납부")

    with st.expander("📋 전체 내역"):
        st.dataframe(frame, use_container_width=True, hide_index=True)
