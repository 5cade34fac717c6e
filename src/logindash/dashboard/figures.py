"""Chart builders for the login dashboard.

Return Plotly figure dicts (never go.Figure) for ui.plotly / update_figure.
Inputs are aggregator results; nothing here recomputes counts.
"""

from __future__ import annotations

from typing import Optional, Sequence, Union

import plotly.graph_objects as go

from logindash.aggregator.events import CategoryCount, TimeBucket
from logindash.dashboard.theme import (
    PALETTE,
    ThemeMode,
    get_theme_colors,
    get_theme_template,
    palette_color,
    resolve_theme,
)


def _themed_layout(fig: go.Figure, theme_mode: ThemeMode) -> None:
    bg_color, fg_color = get_theme_colors(theme_mode)
    fig.update_layout(
        template=get_theme_template(theme_mode),
        paper_bgcolor=bg_color,
        plot_bgcolor=bg_color,
        font=dict(color=fg_color),
        margin=dict(l=20, r=20, t=20, b=20),
    )


def category_pie_figure(
    categories: Sequence[CategoryCount],
    theme: Optional[Union[str, ThemeMode]] = None,
) -> dict:
    """Pie chart of events per company, labelled with percentages.

    Args:
        categories: Output of group_by_category (order decides slice colors).
        theme: Theme mode (DARK or LIGHT). Defaults to LIGHT.

    Returns:
        Plotly figure dict. Empty categories give an empty themed figure.
    """
    theme_mode = resolve_theme(theme)
    fig = go.Figure()
    _themed_layout(fig, theme_mode)
    if not categories:
        return fig.to_dict()

    fig.add_trace(
        go.Pie(
            labels=[c.category for c in categories],
            values=[c.count for c in categories],
            marker=dict(colors=[palette_color(i) for i in range(len(categories))]),
            texttemplate="%{label}: %{percent:.1%}",
            hovertemplate="%{label}: %{value}<extra></extra>",
            sort=False,
        )
    )
    fig.update_layout(showlegend=False)
    return fig.to_dict()


def login_trend_figure(
    buckets: Sequence[TimeBucket],
    theme: Optional[Union[str, ThemeMode]] = None,
) -> dict:
    """Bar chart of logins per time bucket, in the order given.

    Args:
        buckets: Output of bucket_by_time (already sorted by key).
        theme: Theme mode (DARK or LIGHT). Defaults to LIGHT.

    Returns:
        Plotly figure dict. Empty buckets give an empty themed figure.
    """
    theme_mode = resolve_theme(theme)
    _, fg_color = get_theme_colors(theme_mode)
    grid_color = "rgba(255,255,255,0.2)" if theme_mode is ThemeMode.DARK else "#cccccc"

    fig = go.Figure()
    _themed_layout(fig, theme_mode)
    if not buckets:
        return fig.to_dict()

    fig.add_trace(
        go.Bar(
            x=[b.bucket_key for b in buckets],
            y=[b.count for b in buckets],
            marker_color=PALETTE[0],
            name="Logins",
        )
    )
    fig.update_layout(
        xaxis=dict(
            title="Time",
            type="category",
            tickangle=-45,
            color=fg_color,
            gridcolor=grid_color,
        ),
        yaxis=dict(
            title="Logins",
            tickformat="d",
            rangemode="tozero",
            color=fg_color,
            gridcolor=grid_color,
        ),
        showlegend=False,
    )
    return fig.to_dict()
