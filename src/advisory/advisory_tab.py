# src/advisory/advisory_tab.py
"""
Jal Assistant Tab UI
====================

Streamlit component for the Jal Assistant page of the dashboard.

This module provides:
    - advisory_tab(): Main Streamlit UI for the assistant
    - Chat interface with message history
    - Suggested prompts for quick access
    - Preventive measures and state health report panels
"""

from __future__ import annotations

import asyncio

import streamlit as st

from .advisory_messages import (
    JAL_ASSISTANT_NAME,
    JAL_ASSISTANT_DESCRIPTION,
)
from .advisory_router import ask_jal_assistant
from .advisory_tools import (
    AssistantContext,
    generate_health_report,
    suggest_preventive_measures,
)


# =============================================================================
# SUGGESTED PROMPTS
# =============================================================================

SUGGESTED_PROMPTS = [
    {
        "label": "Safe pH range",
        "query": "What is the safe pH range?",
    },
    {
        "label": "Highest disease burden",
        "query": "Which state has the most disease cases?",
    },
    {
        "label": "Latest water quality",
        "query": "How is the latest water quality?",
    },
    {
        "label": "General status",
        "query": "Give me an update",
    },
]

LANGUAGES = {
    "English": "en",
    "हिन्दी": "hi",
    "অসমীয়া": "as",
    "বাংলা": "bn",
}


# =============================================================================
# CSS STYLING
# =============================================================================

ADVISORY_TAB_CSS = """
<style>
.jal-info-box {
    background-color: #e0f2fe;
    border-left: 4px solid #0076A8;
    padding: 0.75rem 1rem;
    border-radius: 4px;
    font-size: 0.85rem;
}

.jal-offline-box {
    background-color: #fef3c7;
    border-left: 4px solid #f59e0b;
    padding: 0.75rem 1rem;
    border-radius: 4px;
    font-size: 0.85rem;
}
</style>
"""


# =============================================================================
# SESSION STATE MANAGEMENT
# =============================================================================

def init_advisory_session():
    """Initialize session state for the assistant."""
    if "jal_messages" not in st.session_state:
        st.session_state.jal_messages = []
    if "jal_language" not in st.session_state:
        st.session_state.jal_language = "en"


def clear_messages():
    """Clear all assistant chat messages."""
    st.session_state.jal_messages = []


# =============================================================================
# MESSAGE PROCESSING
# =============================================================================

def process_user_message(message: str, context: AssistantContext):
    """
    Answer a user message and append both turns to the chat history.

    Args:
        message: User's input message
        context: Dashboard data the assistant answers from
    """
    reply = asyncio.run(
        ask_jal_assistant(message, context, st.session_state.jal_language)
    )
    st.session_state.jal_messages += [
        {"role": "user", "content": message},
        {"role": "assistant", "content": reply},
    ]


# =============================================================================
# UI COMPONENTS
# =============================================================================

def render_chat_history():
    """Render the chat message history."""
    for msg in st.session_state.jal_messages:
        with st.chat_message(msg["role"]):
            st.markdown(msg["content"])


def render_suggested_prompts(context: AssistantContext):
    """Render suggested prompt buttons."""
    st.markdown("**💡 Try one of these:**")

    cols = st.columns(2)
    for i, prompt in enumerate(SUGGESTED_PROMPTS):
        with cols[i % 2]:
            if st.button(prompt["label"], key=f"jal_prompt_{i}", use_container_width=True):
                process_user_message(prompt["query"], context)
                st.rerun()


def render_preventive_measures():
    """Disease name input with the matching precautions."""
    st.markdown("**🛡️ Preventive measures**")
    disease = st.text_input("Disease", value="Cholera", key="jal_disease")
    for measure in asyncio.run(suggest_preventive_measures(disease)):
        st.markdown(f"- {measure}")


def render_health_report(context: AssistantContext):
    """State picker with the offline health report."""
    st.markdown("**📄 State health report**")
    if not context.states:
        st.caption("No state disease data loaded.")
        return
    names = [s.name for s in context.states]
    selected = st.selectbox("State", names, key="jal_report_state")
    state = context.states[names.index(selected)]
    st.text(asyncio.run(generate_health_report(state)))


# =============================================================================
# MAIN ADVISORY TAB
# =============================================================================

def advisory_tab(context: AssistantContext):
    """
    Render the Jal Assistant tab.

    This is the main entry point for the assistant UI.
    """
    init_advisory_session()

    st.markdown(ADVISORY_TAB_CSS, unsafe_allow_html=True)

    st.markdown(f"## 💧 {JAL_ASSISTANT_NAME}")
    st.caption(JAL_ASSISTANT_DESCRIPTION)

    col_main, col_sidebar = st.columns([2.5, 1])

    with col_sidebar:
        st.markdown(
            """
            <div class="jal-offline-box">
                <strong>📴 Offline mode:</strong> answers are built from the
                data on this dashboard. Voice replies are not available.
            </div>
            """,
            unsafe_allow_html=True,
        )
        st.markdown("")

        label = st.selectbox("Language", list(LANGUAGES.keys()), key="jal_language_label")
        st.session_state.jal_language = LANGUAGES[label]

        st.markdown("---")
        render_preventive_measures()

        st.markdown("---")
        render_health_report(context)

        st.markdown("---")
        if st.button("🗑️ Clear chat", use_container_width=True):
            clear_messages()
            st.rerun()

    with col_main:
        if st.session_state.jal_messages:
            render_chat_history()
        else:
            st.markdown(
                """
                👋 **Welcome!** Ask me about:
                - Which state has the highest disease burden
                - The latest water quality reading
                - Safe drinking-water ranges
                """
            )
            render_suggested_prompts(context)

        user_input = st.chat_input("Ask about diseases or water quality...")
        if user_input:
            process_user_message(user_input, context)
            st.rerun()
