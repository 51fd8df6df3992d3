from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

COMPONENT_FIELDS = ("base_salary", "housing_allowance", "child_allowance", "other_benefits")


@dataclass(frozen=True)
class Employee:
    """Thực thể miền (domain): nhân viên của một dự án.

    Lưu ý: Đây là đối tượng dữ liệu thuần (không chứa code truy cập DB).
    """

    employee_id: str
    last_name: str
    first_name: str
    position: str = ""
    monthly_salary: float = 0.0
    is_archived: bool = False
    national_id: Optional[str] = None
    base_salary: Optional[float] = None
    housing_allowance: Optional[float] = None
    child_allowance: Optional[float] = None
    other_benefits: Optional[float] = None
    settlement_date: Optional[str] = None

    @property
    def display_name(self) -> str:
        return f"{self.last_name} {self.first_name}"

    @property
    def components_total(self) -> float:
        return sum(float(getattr(self, name) or 0) for name in COMPONENT_FIELDS)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Employee":
        """Build from the camelCase shape used by the front end and backups."""

        def _opt(key: str) -> Optional[float]:
            value = data.get(key)
            return None if value is None else float(value)

        return cls(
            employee_id=str(data["id"]),
            last_name=str(data.get("lastName", "")),
            first_name=str(data.get("firstName", "")),
            position=str(data.get("position", "")),
            monthly_salary=float(data.get("monthlySalary") or 0),
            is_archived=bool(data.get("isArchived", False)),
            national_id=data.get("nationalId"),
            base_salary=_opt("baseSalary"),
            housing_allowance=_opt("housingAllowance"),
            child_allowance=_opt("childAllowance"),
            other_benefits=_opt("otherBenefits"),
            settlement_date=data.get("settlementDate"),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "lastName": self.last_name,
            "firstName": self.first_name,
            "position": self.position,
            "monthlySalary": self.monthly_salary,
            "isArchived": self.is_archived,
            "nationalId": self.national_id,
            "baseSalary": self.base_salary,
            "housingAllowance": self.housing_allowance,
            "childAllowance": self.child_allowance,
            "otherBenefits": self.other_benefits,
            "settlementDate": self.settlement_date,
        }


def active_only(employees) -> list[Employee]:
    return [e for e in employees if not e.is_archived]
