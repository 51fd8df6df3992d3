from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Project:
    """Thực thể miền (domain): một dự án, phạm vi của mọi dữ liệu chấm công."""

    project_id: str
    name: str

    def to_dict(self) -> dict:
        return {"id": self.project_id, "name": self.name}
