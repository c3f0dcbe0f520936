"""ldapquery types."""

from __future__ import annotations

from dataclasses import dataclass

from .operators import Operator


@dataclass(frozen=True)
class Condition:
    """A single field/operator/value clause. ``value`` is already escaped."""

    field: str
    operator: Operator
    value: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "field": self.field,
            "operator": self.operator.value,
            "value": self.value,
        }
