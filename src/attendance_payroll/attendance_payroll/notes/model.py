from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

# employee_id -> date_key -> note text
NoteLedger = Mapping[str, Mapping[str, str]]


@dataclass(frozen=True)
class CellNote:
    """Ghi chú tự do gắn với một ô chấm công (không ảnh hưởng tính lương)."""

    employee_id: str
    date_key: str
    text: str
