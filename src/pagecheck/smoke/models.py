"""
Render attempt schemas.

A RenderAttempt is created when a smoke test mounts a component and is
immutable once the attempt has completed. StyleCapture holds the style
records gathered during the mount, ready for snapshot serialization.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class RenderOutcome(str, Enum):
    """Terminal outcome of a render attempt."""
    SUCCEEDED = "succeeded"
    RAISED_ERROR = "raised-error"


class StyleRecord(BaseModel):
    """Styling applied to one registered element."""

    element: str = Field(..., description="Element type (buttons, cards, ...)")
    label: Optional[str] = Field(None, description="Visible text or identifier")
    classes: List[str] = Field(default_factory=list, description="CSS classes in application order")
    style: str = Field("", description="Inline style string")

    model_config = ConfigDict(frozen=True)


class StyleCapture(BaseModel):
    """Ordered style records captured during one mount."""

    scope: str = Field(..., description="Registry scope the records were captured in")
    records: List[StyleRecord] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_registry(cls, scope: str, records: List[dict]) -> "StyleCapture":
        return cls(scope=scope, records=[StyleRecord(**r) for r in records])


class RenderAttempt(BaseModel):
    """
    Single render attempt record.

    `outcome` is known once the attempt returns. `error`, `error_type`
    and `traceback` are only set for RAISED_ERROR; `style_snapshot`
    only when style capture was requested and the mount succeeded.
    """

    target: str = Field(..., description="Qualified name of the component")
    outcome: RenderOutcome
    style_snapshot: Optional[str] = None
    error: Optional[str] = Field(None, description="Exception message, verbatim")
    error_type: Optional[str] = None
    traceback: Optional[str] = None
    counts: Dict[str, int] = Field(default_factory=dict)
    exception: Optional[BaseException] = Field(None, exclude=True, repr=False)

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @property
    def succeeded(self) -> bool:
        return self.outcome is RenderOutcome.SUCCEEDED
