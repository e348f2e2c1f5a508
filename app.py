"""Qwen3 TTS Flash Voice Picker — Streamlit Application.

A small web page for browsing the predefined Qwen3 TTS Flash voices and
choosing the ``voice`` value to put in a synthesis request:

1. **Filter**: Narrow the list by gender in the sidebar.
2. **Select**: Pick a voice from the list, or roll a random one.
3. **Inspect**: Read the voice's identifier, name, gender and description.

The initial selection comes from ``QWEN_TTS_VOICE`` in ``.env`` when it names
a known voice, otherwise a random voice.

Usage:
    Run via ``streamlit run app.py`` or use ``run.py`` for headless mode.
"""

import streamlit as st
from dotenv import load_dotenv

from qwen_voices.catalog import QWEN3_TTS_FLASH_CATALOG, random_voice, resolve_voice
from qwen_voices.qwen_voices import Gender
from qwen_voices.utils import logger

# Load environment variables
load_dotenv()

GENDER_FILTERS = {
    "全部": None,
    "女声": Gender.FEMALE,
    "男声": Gender.MALE,
}

GENDER_LABELS = {
    Gender.FEMALE: "女声 (Female)",
    Gender.MALE: "男声 (Male)",
}

# Page configuration
st.set_page_config(
    page_title="Qwen3 TTS Voices",
    page_icon="🎙️",
    layout="wide"
)

# Initialize session state
if 'selected_voice_id' not in st.session_state:
    st.session_state.selected_voice_id = resolve_voice().voice_id


def filtered_options(gender):
    """Return the ``(voice_id, label)`` options for a gender filter.

    Args:
        gender (Gender | None): Gender to keep, or None for all voices.

    Returns:
        list[tuple[str, str]]: Options in catalog order.
    """
    if gender is None:
        return QWEN3_TTS_FLASH_CATALOG.options()
    return [(v.voice_id, v.label) for v in QWEN3_TTS_FLASH_CATALOG.voices_by_gender(gender)]


def main():
    """Render the voice picker page."""
    st.title("🎙️ Qwen3 TTS Flash 音色")

    with st.sidebar:
        st.header("⚙️ 筛选")
        gender_choice = st.radio("性别", list(GENDER_FILTERS), horizontal=True)

        st.divider()

        if st.button("🎲 随机音色"):
            voice = random_voice()
            st.session_state.selected_voice_id = voice.voice_id
            logger.info(f"Random voice selected: {voice.voice_id}")

    options = filtered_options(GENDER_FILTERS[gender_choice])
    ids = [voice_id for voice_id, _ in options]

    # Keep the current voice selected if it survives the filter
    current = st.session_state.selected_voice_id
    index = ids.index(current) if current in ids else 0

    option = st.selectbox(
        "音色",
        options=options,
        index=index,
        format_func=lambda x: x[1],
    )
    st.session_state.selected_voice_id = option[0]

    voice = QWEN3_TTS_FLASH_CATALOG.find_by_identifier(option[0])

    st.divider()
    col1, col2 = st.columns(2)
    with col1:
        st.metric("Voice ID", voice.voice_id)
        st.metric("名称", voice.display_name)
    with col2:
        st.metric("性别", GENDER_LABELS[voice.gender])
    st.markdown(f"**描述:** {voice.description}")

    st.caption("将 Voice ID 作为 qwen3-tts-flash 请求的 `voice` 参数")
    st.code(voice.voice_id, language=None)


if __name__ == "__main__":
    main()
