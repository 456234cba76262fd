"""
Dashboard chart builders.
"""

from typing import Dict, List

import plotly.graph_objects as go

from config.constants import STATUS_CHART_COLORS

FONT_FAMILY = 'Inter, -apple-system, sans-serif'


def create_analytics_bar_chart(
    x_data: list,
    y_data: list,
    x_label: str,
    y_label: str,
    height: int = 320,
    hover_context: str = "Số lượng",
    colors: List[str] = None,
) -> go.Figure:
    """
    Bar chart with light gridlines, per-bar colors and a share-of-total tooltip.

    Args:
        x_data: Category labels
        y_data: Counts
        x_label: Label for x-axis
        y_label: Label for y-axis
        height: Chart height in pixels
        hover_context: Label for the count in the tooltip
        colors: Bar colors, cycled

    Returns:
        Plotly Figure
    """
    total = sum(y_data)
    percentages = [(v / total * 100) if total else 0 for v in y_data]
    palette = colors or STATUS_CHART_COLORS
    bar_colors = [palette[i % len(palette)] for i in range(len(x_data))]

    bar_trace = go.Bar(
        x=x_data,
        y=y_data,
        marker=dict(color=bar_colors, line=dict(width=0)),
        customdata=percentages,
        hovertemplate=(
            '<b style="font-size:14px">%{x}</b><br>'
            f'<span style="color:#6B7280">{hover_context}:</span> '
            '<b>%{y:,}</b><br>'
            '<span style="color:#6B7280">Tỷ lệ:</span> '
            '<b>%{customdata:.1f}%</b>'
            '<extra></extra>'
        ),
        hoverlabel=dict(
            bgcolor='#1F2937',
            bordercolor='#374151',
            font=dict(family=FONT_FAMILY, size=13, color='#FFFFFF'),
            align='left'
        )
    )

    fig = go.Figure(data=[bar_trace])
    fig.update_layout(
        height=height,
        paper_bgcolor='#FFFFFF',
        plot_bgcolor='#FFFFFF',
        font=dict(family=FONT_FAMILY, size=12, color='#374151'),
        margin=dict(t=20, b=60, l=50, r=20),
        showlegend=False,
        xaxis=dict(
            title=dict(text=x_label, font=dict(size=12, color='#4B5563'), standoff=12),
            tickfont=dict(size=11, color='#6B7280'),
            showgrid=False,
            showline=True,
            linecolor='#E5E7EB',
            type='category',
        ),
        yaxis=dict(
            title=dict(text=y_label, font=dict(size=12, color='#4B5563'), standoff=12),
            tickfont=dict(size=11, color='#9CA3AF'),
            showgrid=True,
            gridcolor='#F3F4F6',
            showline=True,
            linecolor='#E5E7EB',
            rangemode='tozero',
            dtick=1,
        ),
        bargap=0.3,
        hovermode='closest',
    )
    return fig


def create_device_status_chart(counts: Dict[str, int]) -> go.Figure:
    """Devices per status, bars in status order."""
    return create_analytics_bar_chart(
        x_data=list(counts.keys()),
        y_data=list(counts.values()),
        x_label="Trạng thái",
        y_label="Số thiết bị",
        hover_context="Thiết bị",
    )
