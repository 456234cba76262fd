"""Dashboard page: record counts, pending work and devices per status."""

from datetime import datetime

import streamlit as st

from config.constants import DASHBOARD_CARDS, MISSING_VALUE
from services.dashboard_service import (
    get_dashboard_stats, get_devices_by_status, get_pending_maintenances,
    get_pending_repairs,
)
from components.charts import create_device_status_chart
from components.empty_states import render_empty_state, render_success_state
from core.navigation import navigate_to
from views.context import AppContext

CARDS_PER_ROW = 4

# Cards that count work still to do get the amber/red accent
CARD_TONES = {
    "maintenances_pending": "amber",
    "repairs_pending": "amber",
    "warranties_expired": "red",
}


def render_stat_cards(stats: dict) -> None:
    for start in range(0, len(DASHBOARD_CARDS), CARDS_PER_ROW):
        row = DASHBOARD_CARDS[start:start + CARDS_PER_ROW]
        cols = st.columns(CARDS_PER_ROW)
        for col, (stat_key, label, route) in zip(cols, row):
            with col:
                tone = CARD_TONES.get(stat_key, "neutral")
                st.markdown(f"""
                <div class="kpi-card {tone}">
                    <div class="kpi-card-title">{label.upper()}</div>
                    <div class="kpi-card-value">{stats.get(stat_key, 0)}</div>
                </div>
                """, unsafe_allow_html=True)
                if st.button("Xem chi tiết", key=f"kpi_{stat_key}", width="stretch"):
                    navigate_to(route)


def render_pending_list(title: str, items: list, empty_title: str, empty_message: str) -> None:
    st.markdown(f'<div class="section-title">{title}</div>', unsafe_allow_html=True)
    if not items:
        render_success_state(empty_title, empty_message)
        return
    for item in items:
        st.markdown(f"""
        <div class="pending-item">
            <span class="pending-item-id">{item['id']}</span>
            <span class="pending-item-name">{item['device_name']}</span>
            <span class="pending-item-date">{item['date'] or MISSING_VALUE}</span>
        </div>
        """, unsafe_allow_html=True)


def render(ctx: AppContext) -> None:
    """Render this page."""
    st.markdown('<p class="main-header">Tổng quan</p>', unsafe_allow_html=True)
    st.markdown(f"""
    <div class="last-updated">
        <span class="dot"></span>
        Cập nhật lúc {datetime.now().strftime("%H:%M")}
    </div>
    """, unsafe_allow_html=True)

    stats = get_dashboard_stats(ctx.views, ctx.today)
    render_stat_cards(stats)

    st.markdown("<div style='height: 24px;'></div>", unsafe_allow_html=True)

    left, right = st.columns(2)
    with left:
        render_pending_list(
            "Bảo trì chưa thực hiện",
            get_pending_maintenances(ctx.views),
            "Không có bảo trì tồn đọng",
            "Tất cả thiết bị đã được bảo trì.",
        )
    with right:
        render_pending_list(
            "Sửa chữa chưa hoàn thành",
            get_pending_repairs(ctx.views),
            "Không có sửa chữa tồn đọng",
            "Tất cả phiếu sửa chữa đã hoàn thành.",
        )

    st.markdown("<div style='height: 24px;'></div>", unsafe_allow_html=True)
    st.markdown('<div class="section-title">Thiết bị theo trạng thái</div>', unsafe_allow_html=True)

    counts = get_devices_by_status(ctx.views)
    if not counts:
        render_empty_state("no_chart_data", show_action=False)
    else:
        st.plotly_chart(
            create_device_status_chart(counts),
            width="stretch",
            config={"displayModeBar": False},
            key="device_status_chart",
        )
