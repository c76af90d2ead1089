"""Duration — booking window synchronization and storage round-trip.

- Single-field edits recomputing the rest of the window
- Mode switching (MONTH / DAYS)
- Serialization against the duration_state contract
"""

from .serialization import deserialize_duration_state, serialize_duration_state
from .synchronizer import (
    DurationValidation,
    clamp_duration_days,
    clamp_months_count,
    days_from_months,
    fit_window,
    months_from_days,
    new_duration_state,
    switch_mode,
    sync_from_duration_days,
    sync_from_end_date,
    sync_from_months_count,
    sync_from_start_date,
    validate_duration,
)

__all__ = [
    "DurationValidation",
    "clamp_duration_days",
    "clamp_months_count",
    "days_from_months",
    "fit_window",
    "months_from_days",
    "new_duration_state",
    "switch_mode",
    "sync_from_duration_days",
    "sync_from_end_date",
    "sync_from_months_count",
    "sync_from_start_date",
    "validate_duration",
    "serialize_duration_state",
    "deserialize_duration_state",
]
