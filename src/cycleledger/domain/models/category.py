"""Category domain model."""

from dataclasses import dataclass
from typing import Optional

from cycleledger.domain.models.enums import FlowType


@dataclass
class Category:
    """Income or expense category, optionally nested one level under a parent."""

    category_id: str
    account_id: str
    name: str
    flow_type: FlowType
    parent_id: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.flow_type, str):
            self.flow_type = FlowType(self.flow_type)

    @property
    def is_income(self) -> bool:
        return self.flow_type == FlowType.INCOME
