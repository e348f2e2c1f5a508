"""Launcher for the Qwen3 TTS voice picker.

Starts the Streamlit page in headless mode with development mode
disabled.

Usage:
    python run.py
"""

import subprocess
import sys
import os


def build_command(app_path):
    """Build the ``streamlit run`` command for the given app script.

    Args:
        app_path (str): Relative or absolute path to the Streamlit script.

    Returns:
        list[str]: The command, using the current interpreter.
    """
    return [
        sys.executable, "-m", "streamlit", "run",
        os.path.abspath(app_path),
        "--server.headless=true",
        "--global.developmentMode=false"
    ]


if __name__ == "__main__":
    cmd = build_command("app.py")

    print(f"Starting Streamlit app: {' '.join(cmd)}")

    try:
        # Run as a subprocess to ensure clean environment
        subprocess.run(cmd, check=True)
    except KeyboardInterrupt:
        print("\nStopped by user.")
    except subprocess.CalledProcessError as e:
        print(f"Streamlit exited with code {e.returncode}")
        sys.exit(e.returncode)
