"""
儀表板
四張統計卡片 + 月收入圖表 + 逾期列表
"""
import streamlit as st
import pandas as pd

from repository.rental_store import RentalStore
from services import metrics_service
from utils.formatters import format_currency, format_rate


def render(store: RentalStore):
    """渲染儀表板"""
    st.title("대시보드")

    stats = metrics_service.dashboard_stats(store)
    collected = metrics_service.collected_this_month(store.payments, store.clock())

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric(label="이번 달 예상 수익", value=format_currency(stats.total_revenue))
    with col2:
        st.metric(label="현재 입주율", value=format_rate(stats.occupancy_rate))
    with col3:
        st.metric(label="미납 건수", value=f"{stats.overdue_count}건")
    with col4:
        st.metric(label="총 관리 호실", value=f"{stats.total_units}개")

    st.divider()

    left, right = st.columns([2, 1])
    with left:
        st.subheader("이번 달 수납 현황")
        chart = pd.DataFrame(
            {"예상": [stats.total_revenue], "수입": [collected]},
            index=[store.clock().strftime("%Y-%m")]
        )
        st.bar_chart(chart)

    with right:
        st.subheader("미납 현황")
        highlights = metrics_service.overdue_highlights(store)
        if not highlights:
            st.info("미납 내역이 없습니다.")
        for chain in highlights:
            unit_name = chain.unit.name if chain.unit else "-"
            tenant_name = chain.tenant.name if chain.tenant else "-"
            prop_name = chain.property.name if chain.property else "-"
            st.markdown(
                f"**{tenant_name}** ({prop_name} {unit_name})  \n"
                f"{chain.payment.type.value} · {format_currency(chain.payment.amount)} · {chain.payment.date}"
            )
