from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Optional

from ..core.enums import LeaveCriteria


@dataclass(frozen=True)
class LeaveType:
    """Domain entity: a named leave policy with an allowance per recurrence period."""

    leave_type_id: Optional[str]
    name: str
    maximum_days: int
    criteria: LeaveCriteria

    @property
    def is_valid(self) -> bool:
        return bool(self.name and self.name.strip()) and self.maximum_days > 0

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.leave_type_id,
            "name": self.name,
            "maximumdays": self.maximum_days,
            "leavecriteria": self.criteria.to_json(),
        }

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "LeaveType":
        if not isinstance(data, dict):
            raise TypeError(f"LeaveType must be a map, got {type(data).__name__}")

        name = data["name"]
        if not isinstance(name, str):
            raise TypeError("LeaveType name must be a string")

        maximum_days = data["maximumdays"]
        if isinstance(maximum_days, bool) or not isinstance(maximum_days, int):
            raise TypeError("LeaveType maximumdays must be a whole number")

        return cls(
            leave_type_id=data.get("id"),
            name=name,
            maximum_days=maximum_days,
            criteria=LeaveCriteria.from_json(data["leavecriteria"]),
        )

    def to_json_string(self) -> str:
        return json.dumps(self.to_json())

    @classmethod
    def from_json_string(cls, value: str) -> "LeaveType":
        return cls.from_json(json.loads(value))
