"""Plotly chart builders for the SubTrack dashboard."""

from __future__ import annotations

from datetime import date
from typing import Sequence

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from core.formatting import CURRENCY_SYMBOLS, format_billing_date
from core.models import Subscription

from .theme import theme_tokens

TOKENS = theme_tokens()

__all__ = [
    "build_category_chart",
    "build_upcoming_chart",
]


def _empty_plotly_figure(message: str) -> go.Figure:
    fig = go.Figure()
    fig.update_layout(
        annotations=[
            dict(
                text=message,
                x=0.5,
                y=0.5,
                xref="paper",
                yref="paper",
                showarrow=False,
                font=dict(color=TOKENS.neutral_grey, size=14, family=TOKENS.label_font),
            )
        ],
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
        margin=dict(l=0, r=0, t=20, b=0),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def build_category_chart(category_df: pd.DataFrame, currency: str = "USD") -> go.Figure:
    """Render a donut chart of monthly-equivalent spend per category."""

    if category_df.empty:
        return _empty_plotly_figure("No active subscriptions yet.")

    data = category_df.sort_values("MonthlyValue", ascending=False).reset_index(drop=True)
    color_map = {category: TOKENS.category_color(category) for category in data["Category"]}
    symbol = CURRENCY_SYMBOLS.get(currency.upper(), "")

    fig = px.pie(
        data,
        names="Category",
        values="MonthlyValue",
        hole=0.55,
        color="Category",
        color_discrete_map=color_map,
    )

    fig.update_traces(
        textposition="inside",
        texttemplate="%{label}<br>%{percent:.1%}",
        customdata=data[["MonthlyValue", "Share"]],
        hovertemplate=(
            "%{label}<br>"
            f"{symbol}%{{customdata[0]:,.2f}} / month<br>"
            "Share: %{customdata[1]:.1%}<extra></extra>"
        ),
        marker=dict(line=dict(color=TOKENS.neutral_white, width=2)),
    )

    fig.update_layout(
        margin=dict(l=0, r=0, t=0, b=0),
        legend=dict(
            title="",
            orientation="v",
            yanchor="middle",
            y=0.5,
            xanchor="left",
            x=1.05,
            font=dict(color=TOKENS.label_color, family=TOKENS.label_font, size=TOKENS.label_size),
        ),
        showlegend=True,
    )

    return fig


def build_upcoming_chart(upcoming: Sequence[Subscription], today: date | None = None) -> go.Figure:
    """Render a horizontal bar chart of days until each upcoming charge."""

    if not upcoming:
        return _empty_plotly_figure("No upcoming payments.")

    today = today or date.today()
    frame = pd.DataFrame(
        {
            "label": [subscription.name for subscription in upcoming],
            "days": [(subscription.next_billing_date - today).days for subscription in upcoming],
            "due": [format_billing_date(subscription.next_billing_date) for subscription in upcoming],
            "color": [subscription.color or TOKENS.category_color(subscription.category) for subscription in upcoming],
        }
    )

    fig = go.Figure(
        go.Bar(
            x=frame["days"],
            y=frame["label"],
            orientation="h",
            text=frame["due"],
            textposition="outside",
            cliponaxis=False,
            marker=dict(color=frame["color"].tolist()),
            hovertemplate="%{y}<br>Due %{text} (%{x} days)<extra></extra>",
        )
    )

    fig.update_layout(
        margin=dict(l=0, r=10, t=20, b=0),
        xaxis=dict(title="Days until charge", showgrid=True, gridcolor=TOKENS.neutral_background, zeroline=False),
        yaxis=dict(title="", automargin=True, autorange="reversed"),
        bargap=0.35,
        height=240,
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )

    return fig
