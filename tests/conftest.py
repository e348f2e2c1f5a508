import os
import tempfile

import pytest

# Keep test runs from writing app.log into the working directory
os.environ.setdefault(
    "QWEN_VOICES_LOG_FILE", os.path.join(tempfile.gettempdir(), "qwen_voices_test.log")
)


@pytest.fixture(autouse=True)
def no_default_voice(monkeypatch):
    """Start every test without a QWEN_TTS_VOICE preference."""
    monkeypatch.delenv("QWEN_TTS_VOICE", raising=False)
