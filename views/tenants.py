"""
租客 / 租約管理頁面
✅ 依姓名或房號搜尋
✅ 新增租客時只列出空房
"""
import streamlit as st
import pandas as pd
from datetime import date

from repository.rental_store import RentalStore
from schemas import EntityType, TenantCreate
from services.lookup_service import LookupService


def render(store: RentalStore):
    """渲染租客列表與新增表單"""
    st.title("임차인/계약 관리")
    lookup = LookupService(store)

    with st.expander("➕ 임차인 등록"):
        render_create_form(store, lookup)

    term = st.text_input("🔍 이름 또는 호실 검색", key="tenant_search")
    tenants = lookup.search_tenants(term)

    if not tenants:
        st.info("검색 결과가 없습니다.")
        return

    rows = []
    for tenant in tenants:
        unit, prop = lookup.unit_info(tenant.unit_id)
        rows.append({
            "이름": tenant.name,
            "건물": prop.name if prop else "-",
            "호실": unit.name if unit else "-",
            "연락처": tenant.phone,
            "보증금": tenant.deposit,
            "월세": tenant.rent_amount,
            "관리비": tenant.maintenance_amount,
            "계약기간": f"{tenant.lease_start_date} ~ {tenant.lease_end_date}",
        })
    st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)


def render_create_form(store: RentalStore, lookup: LookupService):
    if not store.properties:
        st.warning("먼저 건물을 등록해주세요.")
        return

    prop = st.selectbox(
        "건물*",
        options=list(store.properties),
        format_func=lambda p: p.name,
        key="tenant_property"
    )
    vacant_units = lookup.vacant_units_for_property(prop.id) if prop else []
    if not vacant_units:
        st.info("선택한 건물에 공실이 없습니다.")
        return

    with st.form("create_tenant_form", clear_on_submit=True):
        unit = st.selectbox("호실*", options=vacant_units, format_func=lambda u: u.name)
        name = st.text_input("이름*")
        entity_type = st.selectbox(
            "구분",
            options=list(EntityType),
            format_func=lambda x: "개인" if x == EntityType.INDIVIDUAL else "법인"
        )
        registration_number = st.text_input("주민/사업자 번호")
        phone = st.text_input("연락처")

        col1, col2, col3 = st.columns(3)
        with col1:
            deposit = st.number_input("보증금", min_value=0, value=0, step=1000000)
        with col2:
            rent_amount = st.number_input("월세", min_value=0, value=0, step=10000)
        with col3:
            maintenance_amount = st.number_input("관리비", min_value=0, value=0, step=10000)

        col4, col5 = st.columns(2)
        with col4:
            lease_start = st.date_input("계약 시작일", value=date.today())
        with col5:
            lease_end = st.date_input("계약 종료일", value=date.today())

        memo = st.text_area("메모")

        if st.form_submit_button("등록", type="primary"):
            if not name or unit is None:
                st.error("이름과 호실을 입력해주세요.")
                return
            store.add_tenant(TenantCreate(
                unit_id=unit.id,
                name=name,
                type=entity_type,
                registration_number=registration_number or None,
                phone=phone,
                deposit=deposit,
                rent_amount=rent_amount,
                maintenance_amount=maintenance_amount,
                lease_start_date=lease_start,
                lease_end_date=lease_end,
                memo=memo or None
            ))
            st.rerun()
