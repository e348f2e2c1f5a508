"""Utility functions for the Qwen voice catalog.

Provides the helpers shared across modules: logging setup and reading
configuration from environment variables.
"""

import os
import logging

LOG_FILE_ENV = "QWEN_VOICES_LOG_FILE"
DEFAULT_VOICE_ENV = "QWEN_TTS_VOICE"


def setup_logging():
    """Configure and initialize the application-wide logger.

    Sets up a logger named "QwenVoices" with both file and console output.
    Log messages are formatted with timestamp, logger name, level, and message.
    The log file path is read from ``QWEN_VOICES_LOG_FILE`` and defaults to
    "app.log".

    Returns:
        logging.Logger: Configured logger instance for the application.
    """
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(os.getenv(LOG_FILE_ENV, "app.log"), encoding="utf-8"),
            logging.StreamHandler()
        ]
    )
    return logging.getLogger("QwenVoices")


def get_default_voice_id():
    """Read the preferred voice identifier from the environment.

    Returns:
        str | None: The stripped value of ``QWEN_TTS_VOICE``, or None if the
        variable is unset or blank.
    """
    value = os.getenv(DEFAULT_VOICE_ENV, "").strip()
    return value or None


logger = setup_logging()
