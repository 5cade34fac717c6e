"""Login dashboard widget.

Self-contained NiceGUI widget with summary cards, company distribution pie,
login time distribution bar chart and a recent logins table. All numbers come
from a SummaryCache; the widget never counts anything itself. Uses Plotly
dicts only for ui.plotly (never go.Figure).
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence, Union

from nicegui import ui

from logindash.aggregator.config import AggregatorConfig
from logindash.aggregator.events import LoginEvent
from logindash.aggregator.stats import SummaryStats
from logindash.aggregator.summary import LoginSummary, SummaryCache
from logindash.dashboard.figures import category_pie_figure, login_trend_figure
from logindash.dashboard.recent_table import recent_columns, recent_login_rows
from logindash.dashboard.theme import ThemeMode, palette_color, resolve_theme
from logindash.utils.logging import get_logger

logger = get_logger(__name__)

# Shown on the average card when there is nothing to average.
ABSENT_VALUE = "–"


def _safe_call(func: Callable, *args, **kwargs) -> None:
    """Safely call a function, catching 'client deleted' RuntimeErrors only."""
    try:
        func(*args, **kwargs)
    except RuntimeError as e:
        if "deleted" not in str(e).lower():
            raise


def format_stats(stats: SummaryStats) -> tuple[str, str, str]:
    """Card texts for total, companies and average per company."""
    average = ABSENT_VALUE if stats.average_per_category is None else f"{stats.average_per_category:.1f}"
    return str(stats.total_count), str(stats.unique_category_count), average


class LoginDashboardWidget:
    """Reusable login analytics dashboard.

    Call render() inside a container, then set_events() whenever the event
    list changes. Recomputation is memoized on the last input.
    """

    def __init__(
        self,
        *,
        config: Optional[AggregatorConfig] = None,
        theme: Union[str, ThemeMode] = "light",
        recent_limit: Optional[int] = None,
    ) -> None:
        self._cache = SummaryCache(config)
        self._theme = resolve_theme(theme)
        self._recent_limit = recent_limit
        self._events: tuple[LoginEvent, ...] = ()

        self._total_label: Optional[ui.label] = None
        self._companies_label: Optional[ui.label] = None
        self._average_label: Optional[ui.label] = None
        self._skipped_label: Optional[ui.label] = None
        self._pie_plot: Optional[ui.plotly] = None
        self._breakdown_column: Optional[ui.column] = None
        self._trend_plot: Optional[ui.plotly] = None
        self._recent_table: Optional[ui.table] = None

    @property
    def summary(self) -> LoginSummary:
        """Summary for the current events (memoized)."""
        return self._cache.get(self._events)

    def render(self) -> None:
        """Create the dashboard UI inside the current container."""
        summary = self.summary

        with ui.row().classes("w-full gap-4"):
            self._total_label = self._build_card("Active Users Today")
            self._companies_label = self._build_card("Active Companies")
            self._average_label = self._build_card("Average per Company")

        self._skipped_label = ui.label("").classes("text-warning")

        with ui.card().classes("w-full"):
            ui.label("Company Distribution").classes("text-lg font-semibold")
            with ui.row().classes("w-full gap-4 no-wrap"):
                self._pie_plot = ui.plotly(category_pie_figure((), self._theme)).classes("w-1/2 h-72")
                self._breakdown_column = ui.column().classes("w-1/2 gap-2")

        with ui.card().classes("w-full"):
            ui.label("Login Time Distribution").classes("text-lg font-semibold")
            self._trend_plot = ui.plotly(login_trend_figure((), self._theme)).classes("w-full h-72")

        with ui.card().classes("w-full"):
            ui.label("Recent Logins").classes("text-lg font-semibold")
            self._recent_table = ui.table(
                columns=recent_columns(),
                rows=[],
                row_key="row_key",
            ).classes("w-full")

        self._apply_summary(summary)

    def set_events(self, events: Sequence[LoginEvent]) -> None:
        """Replace the event list and refresh every view."""
        _safe_call(self._set_events_impl, events)

    def _set_events_impl(self, events: Sequence[LoginEvent]) -> None:
        self._events = tuple(events)
        self._apply_summary(self.summary)

    def set_theme(self, theme: Union[str, ThemeMode]) -> None:
        """Switch chart theme and redraw from the cached summary."""
        self._theme = resolve_theme(theme)
        _safe_call(self._apply_summary, self.summary)

    def _build_card(self, title: str) -> ui.label:
        with ui.card().classes("flex-1"):
            ui.label(title).classes("text-sm text-gray-500")
            return ui.label("").classes("text-2xl font-bold")

    def _apply_summary(self, summary: LoginSummary) -> None:
        total, companies, average = format_stats(summary.stats)
        if self._total_label is not None:
            self._total_label.text = total
        if self._companies_label is not None:
            self._companies_label.text = companies
        if self._average_label is not None:
            self._average_label.text = average

        if self._skipped_label is not None:
            n = summary.skipped_count
            self._skipped_label.text = (
                f"{n} event(s) with unreadable timestamps were left out of the trend and recent list."
                if n
                else ""
            )
            self._skipped_label.visible = bool(n)

        if self._pie_plot is not None:
            self._pie_plot.update_figure(category_pie_figure(summary.categories, self._theme))
        if self._breakdown_column is not None:
            self._breakdown_column.clear()
            with self._breakdown_column:
                for i, item in enumerate(summary.categories):
                    with ui.row().classes("w-full items-center justify-between"):
                        with ui.row().classes("items-center gap-2"):
                            ui.element("div").classes("w-4 h-4 rounded-full").style(
                                f"background-color: {palette_color(i)}"
                            )
                            ui.label(item.category).classes("font-medium")
                        ui.label(str(item.count))
        if self._trend_plot is not None:
            self._trend_plot.update_figure(login_trend_figure(summary.buckets, self._theme))
        if self._recent_table is not None:
            self._recent_table.rows = recent_login_rows(summary.recent, limit=self._recent_limit)
            self._recent_table.update()

        logger.debug(
            "dashboard refreshed: %d events, %d skipped",
            summary.stats.total_count,
            summary.skipped_count,
        )
