"""Duration serialization — storage round-trip of DurationState.

Dates are stored as YYYY-MM-DD strings and modes as their enum values.
Both directions are checked against contracts/schema/duration_state.json,
so deserialize(serialize(state)) == state for every valid state.
"""

from typing import Any, Dict

from src.core.contracts import validate_duration_state
from src.core.domain.duration import DurationState
from src.core.math.dates import to_iso


def serialize_duration_state(state: DurationState) -> Dict[str, Any]:
    """
    DurationState → storage record.

    Raises:
        jsonschema.ValidationError: If the record breaks the contract
    """
    data = {
        "start_date": to_iso(state.start_date),
        "end_date": to_iso(state.end_date),
        "duration_days": state.duration_days,
        "duration_mode": state.duration_mode.value,
        "months_count": state.months_count,
    }
    validate_duration_state(data)
    return data


def deserialize_duration_state(data: Dict[str, Any]) -> DurationState:
    """
    Storage record → DurationState.

    Raises:
        jsonschema.ValidationError: If the record breaks the contract
        pydantic.ValidationError: If the window is inconsistent
            (end_date != start_date + duration_days - 1)
    """
    validate_duration_state(data)
    return DurationState(**data)
