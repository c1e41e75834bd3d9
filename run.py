"""Entry point: launches the Streamlit app and opens the browser."""

import os
import sys
import threading
import time
import webbrowser
from pathlib import Path

import requests


PORT = 8501
URL = f"http://localhost:{PORT}"
LOG_LEVEL_ENV = "TREE_ARCHITECT_LOG_LEVEL"


def _wait_and_open_browser(url: str = URL, attempts: int = 30) -> bool:
    """Wait for the Streamlit server to become ready, then open the browser."""
    for _ in range(attempts):  # one attempt per second
        try:
            resp = requests.get(url, timeout=2)
            if resp.status_code == 200:
                webbrowser.open(url)
                return True
        except requests.RequestException:
            pass
        time.sleep(1)
    return False


def _log_level() -> str:
    return os.environ.get(LOG_LEVEL_ENV, "info").lower()


def main() -> None:
    # Ensure the src directory is on the path
    src_dir = Path(__file__).resolve().parent / "src"
    if src_dir.exists() and str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))

    from streamlit.web import bootstrap

    app_path = str(src_dir / "TreeArchitect" / "app.py")

    # Open browser in a background thread once the server is up
    threading.Thread(target=_wait_and_open_browser, daemon=True).start()

    bootstrap.run(
        app_path,
        is_hello=False,
        args=[],
        flag_options={
            "server.headless": True,
            "server.port": PORT,
            "browser.gatherUsageStats": False,
            "logger.level": _log_level(),
        },
    )


if __name__ == "__main__":
    main()
