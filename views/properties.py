"""
物件 / 房間管理頁面
支援多棟建築物的管理與樓層平面視覺化
"""
import streamlit as st
from typing import Optional

from repository.rental_store import RentalStore
from schemas import PropertyCreate, UnitCreate
from services.address_service import AddressSearcher, StaticAddressSearcher
from services.lookup_service import LookupService
from utils.formatters import format_currency

PROPERTY_TYPES = ["Villa", "Apartment", "Commercial", "Office"]


def render(store: RentalStore, address_searcher: Optional[AddressSearcher] = None):
    """渲染物件管理頁面"""
    st.title("부동산/호실 관리")
    lookup = LookupService(store)

    with st.expander("➕ 건물 등록"):
        render_create_property_form(store, address_searcher)

    for prop in store.properties:
        landlord = lookup.landlord_for_property(prop.id)
        unit_count = len(lookup.units_for_property(prop.id))

        with st.container():
            col1, col2 = st.columns([3, 1])
            with col1:
                st.markdown(f"### 🏢 {prop.name}")
                st.caption(f"📍 {prop.address}")
                st.caption(f"{prop.type} · {prop.total_floors}층 · 임대인 {landlord.name if landlord else '-'}")
            with col2:
                st.metric(label="호실", value=f"{unit_count}개")
                if st.button("상세보기", key=f"view_{prop.id}", use_container_width=True):
                    st.session_state.selected_property_id = prop.id
                    st.rerun()
            st.divider()

    selected_id = st.session_state.get("selected_property_id")
    if selected_id and store.get_property(selected_id):
        render_floor_plan(store, lookup, selected_id)


def render_floor_plan(store: RentalStore, lookup: LookupService, property_id: str):
    """樓層平面：高樓層在上，每間房顯示租客或空房"""
    prop = store.get_property(property_id)
    st.subheader(f"{prop.name} 호실 현황")

    with st.expander("➕ 호실 추가"):
        render_create_unit_form(store, property_id)

    for floor, units in lookup.floors_for_property(property_id):
        st.markdown(f"**{floor}F**")
        cols = st.columns(max(len(units), 1))
        for col, unit in zip(cols, units):
            tenant = lookup.tenant_for_unit(unit.id)
            with col:
                st.markdown(f"**{unit.name}**")
                if tenant:
                    st.caption(f"👤 {tenant.name}")
                    st.caption(f"{format_currency(tenant.rent_amount)} / ~ {tenant.lease_end_date} 만료")
                else:
                    st.caption("공실")


def render_create_property_form(store: RentalStore, address_searcher: Optional[AddressSearcher]):
    if not store.landlords:
        st.warning("먼저 임대인을 등록해주세요.")
        return

    if address_searcher is not None:
        render_address_search(address_searcher)

    with st.form("create_property_form", clear_on_submit=True):
        name = st.text_input("건물명*")
        address = st.text_input("주소*", value=st.session_state.get("property_address", ""))
        landlord = st.selectbox(
            "임대인*",
            options=list(store.landlords),
            format_func=lambda l: l.name
        )
        property_type = st.selectbox("유형", options=PROPERTY_TYPES)
        total_floors = st.number_input("총 층수", min_value=1, value=1, step=1)

        if st.form_submit_button("등록", type="primary"):
            if not name or not address or landlord is None:
                st.error("건물명, 주소, 임대인을 입력해주세요.")
                return
            store.add_property(PropertyCreate(
                landlord_id=landlord.id,
                name=name,
                address=address,
                type=property_type,
                total_floors=int(total_floors)
            ))
            st.session_state.pop("property_address", None)
            st.rerun()


def render_create_unit_form(store: RentalStore, property_id: str):
    with st.form(f"create_unit_form_{property_id}", clear_on_submit=True):
        name = st.text_input("호실명*", placeholder="101호")
        floor = st.number_input("층*", value=1, step=1)
        area = st.number_input("면적 (m²)", min_value=0.0, value=0.0)
        memo = st.text_input("메모")

        if st.form_submit_button("추가", type="primary"):
            if not name:
                st.error("호실명을 입력해주세요.")
                return
            store.add_unit(UnitCreate(
                property_id=property_id,
                floor=int(floor),
                name=name,
                area=area or None,
                memo=memo or None
            ))
            st.rerun()


def render_address_search(address_searcher: AddressSearcher):
    """地址搜尋：道路名 / 地番地址組成完整地址後填入物件表單"""
    with st.form("address_search_form", clear_on_submit=True):
        st.markdown("🔍 **주소 검색**")
        road_address = st.text_input("도로명 주소", placeholder="서울특별시 강남구 테헤란로 123")
        jibun_address = st.text_input("지번 주소", placeholder="서울특별시 강남구 역삼동 1-1")
        col1, col2 = st.columns(2)
        with col1:
            bname = st.text_input("법정동", placeholder="역삼동")
        with col2:
            building_name = st.text_input("건물명")

        if st.form_submit_button("주소 적용"):
            if isinstance(address_searcher, StaticAddressSearcher):
                address_searcher.add_result({
                    "roadAddress": road_address,
                    "jibunAddress": jibun_address,
                    "userSelectedType": "R" if road_address else "J",
                    "bname": bname,
                    "buildingName": building_name,
                })
            found = address_searcher.search_address()
            if found:
                st.session_state.property_address = found
                st.rerun()
            st.error("주소를 입력해주세요.")
