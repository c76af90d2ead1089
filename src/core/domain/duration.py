"""
Duration — Booking window of a plan/campaign line item

Immutable Pydantic models for the {start_date, end_date, duration_days,
duration_mode, months_count} tuple and the partial patches the duration
synchronizer returns for a single-field edit.
Compatible with JSON Schema contracts/schema/duration_state.json.
"""

from datetime import date
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from src.core.math.dates import end_date_for, normalize


# =============================================================================
# ENUMS
# =============================================================================


class DurationMode(str, Enum):
    """Unit the user edits the booking length in"""

    MONTH = "MONTH"  # months_count authoritative, 30 days per month
    DAYS = "DAYS"  # duration_days authoritative


# =============================================================================
# DURATION STATE
# =============================================================================


class DurationState(BaseModel):
    """
    Booking window of a single line item.

    Invariant: end_date == start_date + (duration_days - 1) days
    (inclusive window). Enforced on construction, so every instance
    obtained through apply() is consistent.

    Immutable model (frozen=True): edits produce a new instance.
    """

    start_date: date = Field(..., description="First booked day (inclusive)")
    end_date: date = Field(..., description="Last booked day (inclusive)")
    duration_days: int = Field(..., ge=1, description="Inclusive day count")
    duration_mode: DurationMode = Field(
        DurationMode.MONTH, description="Unit the duration is edited in"
    )
    months_count: float = Field(
        ..., ge=0, description="Duration in 30-day months (2 decimals when derived)"
    )

    model_config = {"frozen": True}

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def normalize_date(cls, v: Any) -> date:
        """Drop time-of-day from datetime / ISO datetime inputs"""
        return normalize(v)

    @field_validator("end_date")
    @classmethod
    def validate_inclusive_window(cls, v: date, info) -> date:
        """end_date must not precede start_date"""
        if "start_date" in info.data and v < info.data["start_date"]:
            raise ValueError(
                f"end_date {v.isoformat()} before start_date "
                f"{info.data['start_date'].isoformat()}"
            )
        return v

    @field_validator("duration_days")
    @classmethod
    def validate_days_match_window(cls, v: int, info) -> int:
        """duration_days must equal the inclusive length of [start_date, end_date]"""
        if "start_date" in info.data and "end_date" in info.data:
            expected_end = end_date_for(info.data["start_date"], v)
            if expected_end != info.data["end_date"]:
                raise ValueError(
                    f"duration_days {v} inconsistent with window "
                    f"{info.data['start_date'].isoformat()}..{info.data['end_date'].isoformat()}"
                )
        return v

    def apply(self, patch: "DurationPatch") -> "DurationState":
        """
        Merge a synchronizer patch into a new state.

        Args:
            patch: Fields changed by one edit

        Returns:
            New validated DurationState

        Raises:
            pydantic.ValidationError: If the merged state breaks the invariant
        """
        data = self.model_dump()
        data.update(patch.changes())
        return DurationState(**data)


# =============================================================================
# PATCH
# =============================================================================


class DurationPatch(BaseModel):
    """
    Fields of a DurationState changed by a single edit.

    Unset fields (None) are left untouched by DurationState.apply().
    """

    start_date: date | None = None
    end_date: date | None = None
    duration_days: int | None = Field(None, ge=1)
    duration_mode: DurationMode | None = None
    months_count: float | None = Field(None, ge=0)

    model_config = {"frozen": True}

    def changes(self) -> dict[str, Any]:
        """Only the fields this patch sets"""
        return self.model_dump(exclude_none=True)
