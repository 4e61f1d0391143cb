import streamlit as st

from utils.session_manager import SessionManager
from views import ai_assistant, dashboard, landlords, properties, rent, tenants

# 設定頁面資訊
st.set_page_config(
    page_title="EstateFlow",
    page_icon="🏢",
    layout="wide",
    initial_sidebar_state="expanded"
)

PAGES = {
    "대시보드": dashboard.render,
    "임대인 관리": landlords.render,
    "부동산/호실 관리": properties.render,
    "임차인/계약": tenants.render,
    "납부 관리": rent.render,
}


def main():
    session = SessionManager()

    # 側邊欄導覽
    st.sidebar.title("🏢 EstateFlow")
    page = st.sidebar.radio("메뉴", [*PAGES, "AI 비서"])

    st.sidebar.divider()
    st.sidebar.info("AI 비서에게 미납 안내 문자를 작성해달라고 요청해보세요.")
    if st.sidebar.button("샘플 데이터로 초기화"):
        session.reset()
        st.rerun()

    if page == "AI 비서":
        ai_assistant.render(session.assistant)
    elif page == "부동산/호실 관리":
        properties.render(session.store, session.address_searcher)
    else:
        PAGES[page](session.store)


if __name__ == "__main__":
    main()
