"""ItemReport Pydantic models.

Field types are deliberately loose: the report pipeline renders whatever the
caller supplies and never validates or coerces line item values.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Viewer roles. Only ADMIN changes pipeline behaviour."""

    STANDARD = "STANDARD"
    ADMIN = "ADMIN"


class ReportFormat(str, Enum):
    """Supported report formats."""

    CSV = "CSV"
    HTML = "HTML"

    @classmethod
    def parse(cls, token: Any) -> ReportFormat | None:
        """Exact, case-sensitive lookup. Unknown tokens return None, never raise."""
        if isinstance(token, cls):
            return token
        for member in cls:
            if token == member.value:
                return member
        return None


class Viewer(BaseModel):
    """The person requesting a report."""

    model_config = ConfigDict(frozen=True, extra="allow")

    name: Any = None
    role: Any = None


class LineItem(BaseModel):
    """A single report row as supplied by the caller.

    ``priority`` is written back in place by the item transformer when an
    admin views a high-value item.
    """

    model_config = ConfigDict(extra="allow")

    id: Any = None
    name: Any = None
    value: Any = None
    priority: bool | None = None


class RenderedLine(BaseModel):
    """Output of the item transformer for one item."""

    line: str = ""
    value: Any = 0


class AggregationResult(BaseModel):
    """Body stage result: concatenated rows and their running total."""

    content: str = ""
    total: Any = 0
    visible_count: int = Field(default=0, ge=0)
    priority_count: int = Field(default=0, ge=0)
