"""Login dashboard app: standalone NiceGUI application for LoginDashboardWidget.

Runs in web or native mode via env vars. Uses @ui.page("/") pattern.

Run:
    python -m logindash.dashboard_app.app

Env vars:
    LOGINDASH_EVENTS_PATH: .csv or .json event file (default data/login_events_sample.csv)
    LOGINDASH_GUI_NATIVE: 1/0 (default 0)
    LOGINDASH_GUI_RELOAD: 1/0 (default 0)
    HOST: bind host (default 127.0.0.1 native, 0.0.0.0 web)
    PORT: bind port (default find_open_port native, 8080 web)
"""

from __future__ import annotations

import multiprocessing as mp
import os
from multiprocessing import freeze_support
from pathlib import Path

from nicegui import ui

from logindash.dashboard.dashboard_widget import LoginDashboardWidget
from logindash.dashboard.theme import ThemeMode
from logindash.dashboard_app import header
from logindash.dashboard_app.gui_defaults import setUpGuiDefaults
from logindash.dataset import load_events
from logindash.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

EVENTS_PATH_ENV = "LOGINDASH_EVENTS_PATH"
DEFAULT_EVENTS_FILE = "login_events_sample.csv"


def _env_bool(name: str, default: bool) -> bool:
    """Parse env var as bool; if unset/invalid returns default."""
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip().lower()
    if v in {"1", "true", "yes", "on"}:
        return True
    if v in {"0", "false", "no", "off"}:
        return False
    return default


def _env_int(name: str, default: int) -> int:
    """Parse env var as int; if unset/invalid returns default."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def get_data_dir() -> Path:
    """Resolve the project-level data/ directory.

    Package layout: <root>/src/logindash/dashboard_app/app.py, data: <root>/data/
    """
    return Path(__file__).resolve().parent.parent.parent.parent / "data"


def get_events_path() -> Path:
    """Event file from LOGINDASH_EVENTS_PATH, else the bundled sample."""
    raw = os.getenv(EVENTS_PATH_ENV)
    if raw:
        return Path(raw).expanduser()
    return get_data_dir() / DEFAULT_EVENTS_FILE


# ---------------------------------------------------------------------------
# Page
# ---------------------------------------------------------------------------

@ui.page("/")
def home() -> None:
    """Home page: header + LoginDashboardWidget fed from the configured event file."""

    setUpGuiDefaults("text-sm")

    ui.page_title("Login Dashboard")

    widget = LoginDashboardWidget(theme=ThemeMode.LIGHT)
    header.build_dashboard_header(
        on_theme_change=lambda dark: widget.set_theme(ThemeMode.DARK if dark else ThemeMode.LIGHT),
    )

    events_path = get_events_path()
    with ui.column().classes("w-full max-w-7xl mx-auto gap-6 p-4"):
        try:
            events = load_events(events_path)
        except FileNotFoundError:
            ui.label(f"{events_path} not found.").classes("text-negative")
            return
        except ValueError as e:
            logger.exception("Failed to load %s: %s", events_path, e)
            ui.label(f"Failed to load: {e}").classes("text-negative")
            return
        widget.render()
        widget.set_events(events)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main(*, reload: bool | None = None, native_bool: bool | None = None) -> None:
    """Start the login dashboard application.

    Defaults (no env vars, no args):
      - native=False
      - reload=False
    """
    configure_logging()

    native_bool = _env_bool("LOGINDASH_GUI_NATIVE", False) if native_bool is None else native_bool
    reload = _env_bool("LOGINDASH_GUI_RELOAD", False) if reload is None else reload

    if native_bool:
        from nicegui import native as native_module
        port = _env_int("PORT", native_module.find_open_port())
    else:
        port = _env_int("PORT", 8080)

    default_host = "127.0.0.1" if native_bool else "0.0.0.0"
    host = os.getenv("HOST", default_host)

    logger.info(
        "Starting login dashboard: port=%s reload=%s native=%s events=%s",
        port,
        reload,
        native_bool,
        get_events_path(),
    )

    run_kwargs: dict = {
        "host": host,
        "port": port,
        "reload": reload,
        "native": native_bool,
        "title": "Login Dashboard",
    }
    if native_bool:
        run_kwargs["window_size"] = (1200, 800)
    ui.run(**run_kwargs)


if __name__ == "__main__":
    freeze_support()
    if mp.current_process().name == "MainProcess":
        main()
    else:
        logger.debug("Skipping GUI startup in worker process: %s", mp.current_process().name)
