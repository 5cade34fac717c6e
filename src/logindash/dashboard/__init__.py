"""Login dashboard widget and chart builders."""

from logindash.dashboard.dashboard_widget import LoginDashboardWidget
from logindash.dashboard.figures import category_pie_figure, login_trend_figure
from logindash.dashboard.theme import ThemeMode

__all__ = [
    "LoginDashboardWidget",
    "ThemeMode",
    "category_pie_figure",
    "login_trend_figure",
]
