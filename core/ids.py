"""
Record id suggestions for create forms.
"""

import re
from typing import Iterable

ID_PATTERN = re.compile(r"^([A-Za-z]*)(\d+)$")


def suggest_next_id(prefix: str, existing: Iterable[str], width: int = 3) -> str:
    """
    Next free id for a prefix: one past the highest numeric suffix in use.

    suggest_next_id("D", ["D001", "D005"]) -> "D006"
    suggest_next_id("RH", [])             -> "RH001"

    Ids with a different prefix (e.g. "ID001" when the prefix is "I") are ignored.
    """
    highest = 0
    taken = set()
    for record_id in existing:
        taken.add(record_id)
        match = ID_PATTERN.match(record_id or "")
        if match and match.group(1) == prefix:
            highest = max(highest, int(match.group(2)))

    candidate = highest + 1
    while f"{prefix}{candidate:0{width}d}" in taken:
        candidate += 1
    return f"{prefix}{candidate:0{width}d}"
