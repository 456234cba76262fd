"""
CSS for Device Care.
Injected once per run from app.py via st.markdown(..., unsafe_allow_html=True).
"""


def get_dashboard_css():
    """Design tokens, dark sidebar, page header, KPI cards and pending lists."""
    return """
<style>
    :root {
        --color-bg-primary: #ffffff;
        --color-bg-secondary: #f8fafc;
        --color-sidebar-bg: #1a2332;
        --color-sidebar-border: #2d3748;

        --color-text-primary: #1e293b;
        --color-text-secondary: #475569;
        --color-text-tertiary: #64748b;
        --color-text-muted: #94a3b8;

        --color-brand-primary: #f97316;
        --color-brand-light: rgba(249, 115, 22, 0.1);

        --color-success: #22c55e;
        --color-warning: #f59e0b;
        --color-critical: #ef4444;
        --color-neutral: #64748b;

        --color-border-light: #e2e8f0;
        --radius-md: 8px;
        --radius-lg: 12px;
        --radius-full: 9999px;
    }

    /* ===== SIDEBAR - Dark Theme ===== */
    [data-testid="stSidebar"],
    [data-testid="stSidebar"] > div:first-child {
        background-color: var(--color-sidebar-bg) !important;
    }

    [data-testid="stSidebar"] .stMarkdown p {
        color: var(--color-text-muted) !important;
    }

    .sidebar-brand {
        padding: 20px 16px 8px 16px;
        text-align: center;
    }

    .sidebar-brand p {
        color: var(--color-brand-primary) !important;
        font-size: 18px !important;
        font-weight: 700;
        letter-spacing: 0.5px;
        margin: 0 !important;
    }

    .nav-section-header {
        color: var(--color-text-tertiary);
        font-size: 10px;
        font-weight: 600;
        text-transform: uppercase;
        letter-spacing: 1px;
        padding: 16px 16px 6px 16px;
        margin: 0;
    }

    /* Nav buttons: secondary = idle page, primary = current page */
    [data-testid="stSidebar"] .stButton > button {
        background: transparent !important;
        color: var(--color-text-muted) !important;
        border: none !important;
        border-left: 3px solid transparent !important;
        border-radius: 0 8px 8px 0 !important;
        justify-content: flex-start !important;
        text-align: left !important;
        box-shadow: none !important;
    }

    [data-testid="stSidebar"] .stButton > button[kind="secondary"]:hover {
        background: rgba(249, 115, 22, 0.08) !important;
        color: var(--color-brand-primary) !important;
    }

    [data-testid="stSidebar"] .stButton > button[kind="primary"] {
        background: rgba(249, 115, 22, 0.15) !important;
        color: var(--color-brand-primary) !important;
        font-weight: 500 !important;
        border-left: 3px solid var(--color-brand-primary) !important;
    }

    [data-testid="stSidebar"] button:focus,
    [data-testid="stSidebar"] button:focus-visible {
        outline: none !important;
        box-shadow: none !important;
    }

    .sidebar-footer {
        text-align: center;
        padding: 12px;
        border-top: 1px solid var(--color-sidebar-border);
        margin-top: 16px;
    }

    .sidebar-footer .version {
        color: var(--color-text-secondary);
        font-size: 10px;
    }

    .sidebar-footer .tech {
        color: var(--color-brand-primary);
        font-size: 10px;
        font-weight: 500;
    }

    /* ===== MAIN CONTENT ===== */
    .main .block-container {
        background-color: var(--color-bg-secondary);
        padding: 1.5rem 2rem;
        max-width: 100%;
    }

    .main-header {
        font-size: 1.5rem;
        font-weight: 600;
        color: var(--color-text-primary);
        margin-bottom: 0.5rem;
    }

    .section-title {
        font-size: 0.75rem;
        font-weight: 600;
        color: var(--color-text-tertiary);
        text-transform: uppercase;
        letter-spacing: 0.8px;
        margin: 1rem 0 0.75rem 0;
    }

    .last-updated {
        display: inline-flex;
        align-items: center;
        gap: 0.5rem;
        padding: 0.4rem 0.75rem;
        margin-bottom: 1rem;
        background: var(--color-bg-secondary);
        border: 1px solid var(--color-border-light);
        border-radius: 20px;
        font-size: 0.75rem;
        color: var(--color-text-tertiary);
    }

    .last-updated .dot {
        width: 6px;
        height: 6px;
        background: var(--color-success);
        border-radius: 50%;
    }

    /* ===== KPI CARDS ===== */
    .kpi-card {
        background: var(--color-bg-primary);
        border-radius: 10px;
        padding: 20px 16px;
        box-shadow: 0 1px 3px rgba(0, 0, 0, 0.04), 0 1px 2px rgba(0, 0, 0, 0.02);
        display: flex;
        flex-direction: column;
        align-items: center;
        text-align: center;
        min-height: 110px;
        margin-bottom: 6px;
    }

    .kpi-card-title {
        font-size: 11px;
        font-weight: 600;
        color: #9ca3af;
        letter-spacing: 0.8px;
        margin-bottom: 10px;
    }

    .kpi-card-value {
        font-size: 36px;
        font-weight: 700;
        line-height: 1;
        letter-spacing: -1px;
    }

    .kpi-card.neutral .kpi-card-value { color: #374151; }
    .kpi-card.amber .kpi-card-value { color: #d97706; }
    .kpi-card.red .kpi-card-value { color: #dc2626; }

    /* ===== EMPTY / ALL-CLEAR STATES ===== */
    .empty-state {
        text-align: center;
        padding: 36px 28px;
        margin: 16px 0;
        border-radius: var(--radius-lg);
        border: 1px dashed var(--color-border-light);
        background: var(--color-bg-secondary);
        color: var(--color-neutral);
    }

    .empty-state.info {
        color: #3b82f6;
        border-color: rgba(59, 130, 246, 0.3);
        background: rgba(59, 130, 246, 0.05);
    }

    .empty-state.success {
        color: #10b981;
        border-style: solid;
        border-color: rgba(16, 185, 129, 0.2);
        background: rgba(16, 185, 129, 0.05);
    }

    .empty-state-icon {
        width: 44px;
        height: 44px;
        opacity: 0.75;
        margin-bottom: 12px;
    }

    .empty-state-title {
        font-size: 1.05rem;
        font-weight: 600;
        color: var(--color-text-primary);
        margin-bottom: 6px;
    }

    .empty-state.success .empty-state-title { color: #065f46; }

    .empty-state-text {
        font-size: 0.875rem;
        color: var(--color-text-tertiary);
        max-width: 420px;
        margin: 0 auto;
    }

    /* ===== DELETE CONFIRMATION ===== */
    .confirm-panel {
        background: #fef2f2;
        border: 1px solid #fecaca;
        border-left: 4px solid var(--color-critical);
        border-radius: var(--radius-md);
        padding: 14px 16px;
        margin: 10px 0;
    }

    .confirm-panel-title {
        color: #b91c1c;
        font-weight: 600;
        margin-bottom: 6px;
    }

    .confirm-panel-body {
        color: #374151;
        font-size: 0.9rem;
    }

    /* ===== PENDING LISTS ===== */
    .pending-item {
        display: flex;
        gap: 12px;
        align-items: center;
        padding: 10px 14px;
        margin-bottom: 6px;
        background: var(--color-bg-primary);
        border: 1px solid var(--color-border-light);
        border-left: 3px solid var(--color-warning);
        border-radius: var(--radius-md);
        font-size: 0.875rem;
    }

    .pending-item-id {
        font-weight: 600;
        color: var(--color-text-secondary);
        min-width: 48px;
    }

    .pending-item-name {
        flex: 1;
        color: var(--color-text-primary);
    }

    .pending-item-date {
        color: var(--color-text-tertiary);
        font-size: 0.8rem;
    }
</style>
"""
