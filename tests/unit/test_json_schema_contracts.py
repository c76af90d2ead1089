"""
Tests for JSON Schema Contract Validators and DurationState storage round-trip

Covers:
- Validity of the schemas themselves
- Valid data accepted
- Missing required fields, wrong types, enum and format violations
- serialize → deserialize is lossless
- Integration with the Pydantic models
"""

from datetime import date

import pytest
from jsonschema import ValidationError
from pydantic import ValidationError as PydanticValidationError

from src.billing import compute_rent_amount
from src.core.contracts import (
    DurationStateValidator,
    RentResultValidator,
    SchemaLoader,
    validate_duration_state,
    validate_rent_result,
)
from src.core.domain import BillingMode, DurationMode
from src.duration import (
    deserialize_duration_state,
    new_duration_state,
    serialize_duration_state,
    sync_from_end_date,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_duration_state():
    """Stored record of a 59-day booking."""
    return {
        "start_date": "2025-01-15",
        "end_date": "2025-03-14",
        "duration_days": 59,
        "duration_mode": "DAYS",
        "months_count": 1.97,
    }


@pytest.fixture
def valid_rent_result():
    return {
        "booked_days": 180,
        "daily_rate": 1666.67,
        "rent_amount": 300000.0,
        "billing_mode": "PRORATA_30",
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Schema files load and pass meta-validation"""

    @pytest.mark.parametrize("schema_name", ["duration_state", "rent_result"])
    def test_schema_loads(self, schema_name):
        schema = SchemaLoader().load_schema(schema_name)
        assert schema["type"] == "object"
        assert schema["additionalProperties"] is False

    def test_schema_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("duration_state") is loader.load_schema("duration_state")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")


# =============================================================================
# DURATION STATE CONTRACT
# =============================================================================


class TestDurationStateContract:
    """duration_state.json"""

    def test_valid(self, valid_duration_state):
        validate_duration_state(valid_duration_state)
        assert DurationStateValidator().is_valid(valid_duration_state)

    @pytest.mark.parametrize(
        "field",
        ["start_date", "end_date", "duration_days", "duration_mode", "months_count"],
    )
    def test_required_fields(self, valid_duration_state, field):
        del valid_duration_state[field]
        with pytest.raises(ValidationError):
            validate_duration_state(valid_duration_state)

    def test_zero_days_rejected(self, valid_duration_state):
        valid_duration_state["duration_days"] = 0
        with pytest.raises(ValidationError):
            validate_duration_state(valid_duration_state)

    def test_float_days_rejected(self, valid_duration_state):
        valid_duration_state["duration_days"] = 59.5
        with pytest.raises(ValidationError):
            validate_duration_state(valid_duration_state)

    def test_unknown_mode_rejected(self, valid_duration_state):
        valid_duration_state["duration_mode"] = "WEEK"
        with pytest.raises(ValidationError):
            validate_duration_state(valid_duration_state)

    def test_datetime_string_rejected(self, valid_duration_state):
        valid_duration_state["start_date"] = "2025-01-15T00:00:00Z"
        with pytest.raises(ValidationError):
            validate_duration_state(valid_duration_state)

    def test_impossible_calendar_date_rejected(self, valid_duration_state):
        valid_duration_state["end_date"] = "2025-02-30"
        with pytest.raises(ValidationError):
            validate_duration_state(valid_duration_state)

    def test_extra_field_rejected(self, valid_duration_state):
        valid_duration_state["asset_id"] = "HYD-001"
        with pytest.raises(ValidationError):
            validate_duration_state(valid_duration_state)

    def test_all_errors_reported(self, valid_duration_state):
        valid_duration_state["duration_days"] = 0
        valid_duration_state["duration_mode"] = "WEEK"
        errors = list(DurationStateValidator().iter_errors(valid_duration_state))
        assert len(errors) == 2


class TestRentResultContract:
    """rent_result.json"""

    def test_valid(self, valid_rent_result):
        validate_rent_result(valid_rent_result)

    def test_negative_rent_rejected(self, valid_rent_result):
        valid_rent_result["rent_amount"] = -1.0
        with pytest.raises(ValidationError):
            validate_rent_result(valid_rent_result)

    def test_unknown_billing_mode_rejected(self, valid_rent_result):
        valid_rent_result["billing_mode"] = "WEEKLY"
        assert not RentResultValidator().is_valid(valid_rent_result)

    def test_engine_output_matches_contract(self):
        result = compute_rent_amount(50000, "2025-01-01", "2025-06-29", BillingMode.PRORATA_30)
        validate_rent_result(result.model_dump(mode="json"))


# =============================================================================
# ROUND-TRIP
# =============================================================================


class TestDurationStateRoundTrip:
    """serialize → deserialize keeps the window"""

    def test_serialized_shape(self, valid_duration_state):
        state = deserialize_duration_state(valid_duration_state)
        assert serialize_duration_state(state) == valid_duration_state

    def test_roundtrip_preserves_window(self):
        for start in (date(2024, 2, 29), date(2025, 1, 15), date(2025, 12, 31)):
            for days in (1, 30, 31, 59, 365):
                state = new_duration_state(start, days, DurationMode.DAYS)
                restored = deserialize_duration_state(serialize_duration_state(state))
                assert restored.start_date == state.start_date
                assert restored.end_date == state.end_date
                assert restored.duration_days == state.duration_days
                assert restored == state

    def test_roundtrip_after_edit(self):
        state = new_duration_state("2025-01-15")
        state = state.apply(sync_from_end_date(state.start_date, "2025-03-14"))
        restored = deserialize_duration_state(serialize_duration_state(state))
        assert restored == state

    def test_inconsistent_record_rejected(self, valid_duration_state):
        """Passes the schema but breaks end == start + days - 1"""
        valid_duration_state["duration_days"] = 60
        with pytest.raises(PydanticValidationError):
            deserialize_duration_state(valid_duration_state)

    def test_invalid_record_rejected_before_model(self, valid_duration_state):
        valid_duration_state["start_date"] = "15/01/2025"
        with pytest.raises(ValidationError):
            deserialize_duration_state(valid_duration_state)
