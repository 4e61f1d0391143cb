"""
AI 秘書頁面
"""
import streamlit as st

from services.assistant_service import AssistantSession


def render(assistant: AssistantSession):
    """渲染對話紀錄、催繳快捷鍵與輸入框"""
    st.title("AI 스마트 비서")

    shortcuts = assistant.notice_shortcuts()
    if shortcuts:
        st.warning(f"미납 {len(shortcuts)}건 감지됨")

    for message in assistant.messages:
        with st.chat_message(message.role):
            st.write(message.text)

    if shortcuts:
        cols = st.columns(len(shortcuts))
        for col, (payment_id, label) in zip(cols, shortcuts):
            with col:
                if st.button(f"💬 {label}", key=f"notice_{payment_id}"):
                    with st.spinner("작성 중..."):
                        assistant.draft_notice_for(payment_id)
                    st.rerun()

    prompt = st.chat_input("AI에게 무엇이든 물어보세요...")
    if prompt:
        with st.spinner("답변 생성 중..."):
            assistant.send_message(prompt)
        st.rerun()
