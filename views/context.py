"""Shared context object passed to all page renderers."""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from core.joins import Denormalizer
from core.store import DataStore


@dataclass
class AppContext:
    """Bundles shared state that page renderers need from app.py."""

    store: DataStore
    views: Denormalizer
    page: str = "dashboard"
    # Fixed "today" for warranty expiry; None means the real date
    today: Optional[date] = None
