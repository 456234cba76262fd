"""Fallback page for unknown routes."""

from components.empty_states import render_empty_state
from views.context import AppContext


def render(ctx: AppContext) -> None:
    render_empty_state("page_not_found")
