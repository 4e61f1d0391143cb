"""
房東管理頁面
"""
import streamlit as st

from repository.rental_store import RentalStore
from schemas import BankAccount, EntityType, LandlordCreate


def render(store: RentalStore):
    """渲染房東列表與新增表單"""
    st.title("임대인 관리")

    with st.expander("➕ 임대인 등록"):
        render_create_form(store)

    cols = st.columns(3)
    for idx, landlord in enumerate(store.landlords):
        with cols[idx % 3]:
            st.markdown(f"### 👤 {landlord.name}")
            st.caption("개인" if landlord.type == EntityType.INDIVIDUAL else "법인")
            st.write(f"📞 {landlord.phone}")
            if landlord.email:
                st.write(f"✉️ {landlord.email}")
            if landlord.bank_account:
                account = landlord.bank_account
                st.write(f"🏦 {account.bank_name} {account.account_number} ({account.holder_name})")
            if landlord.memo:
                st.caption(landlord.memo)


def render_create_form(store: RentalStore):
    with st.form("create_landlord_form", clear_on_submit=True):
        name = st.text_input("이름/상호*")
        entity_type = st.selectbox(
            "구분",
            options=list(EntityType),
            format_func=lambda x: "개인" if x == EntityType.INDIVIDUAL else "법인"
        )
        registration_number = st.text_input("주민/사업자 번호")
        phone = st.text_input("연락처*")
        email = st.text_input("이메일")

        col1, col2, col3 = st.columns(3)
        with col1:
            bank_name = st.text_input("은행")
        with col2:
            account_number = st.text_input("계좌번호")
        with col3:
            holder_name = st.text_input("예금주")

        memo = st.text_area("메모")

        if st.form_submit_button("등록", type="primary"):
            # 必填欄位檢查屬於畫面層
            if not name or not phone:
                st.error("이름과 연락처를 입력해주세요.")
                return

            bank_account = None
            if bank_name or account_number or holder_name:
                bank_account = BankAccount(
                    bank_name=bank_name,
                    account_number=account_number,
                    holder_name=holder_name
                )

            store.add_landlord(LandlordCreate(
                name=name,
                type=entity_type,
                registration_number=registration_number,
                phone=phone,
                email=email or None,
                bank_account=bank_account,
                memo=memo or None
            ))
            st.success(f"✅ {name} 등록 완료")
            st.rerun()
