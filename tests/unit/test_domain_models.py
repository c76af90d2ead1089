"""
Tests for the domain models: DurationState, DurationPatch, PricingInput,
RentResult, BillingPeriod

Covers:
1. Construction and validation of the Pydantic models
2. The inclusive-window invariant of DurationState
3. Immutability (frozen=True)
4. Date normalization of datetime / ISO inputs
5. JSON serialization
"""

import json
from datetime import date, datetime

import pytest
from pydantic import ValidationError

from src.core.domain import (
    BILLING_MODE_LABELS,
    BillingMode,
    BillingPeriod,
    DurationMode,
    DurationPatch,
    DurationState,
    PricingInput,
    RentResult,
    format_billing_mode,
)


@pytest.fixture
def duration() -> DurationState:
    return DurationState(
        start_date=date(2025, 1, 1),
        end_date=date(2025, 1, 30),
        duration_days=30,
        duration_mode=DurationMode.MONTH,
        months_count=1.0,
    )


# =============================================================================
# DURATION STATE
# =============================================================================


class TestDurationState:
    """Tests for DurationState"""

    def test_valid_state(self, duration: DurationState) -> None:
        assert duration.duration_days == 30
        assert duration.end_date == date(2025, 1, 30)

    def test_default_mode_is_month(self) -> None:
        state = DurationState(
            start_date="2025-01-01", end_date="2025-01-01", duration_days=1, months_count=0.03
        )
        assert state.duration_mode == DurationMode.MONTH

    def test_datetime_inputs_normalized(self) -> None:
        state = DurationState(
            start_date=datetime(2025, 1, 1, 23, 59),
            end_date="2025-01-10T08:00:00",
            duration_days=10,
            duration_mode=DurationMode.DAYS,
            months_count=0.33,
        )
        assert state.start_date == date(2025, 1, 1)
        assert state.end_date == date(2025, 1, 10)

    def test_end_before_start_rejected(self) -> None:
        with pytest.raises(ValidationError, match="before start_date"):
            DurationState(
                start_date="2025-01-10", end_date="2025-01-01", duration_days=1, months_count=0.03
            )

    def test_days_inconsistent_with_window(self) -> None:
        with pytest.raises(ValidationError, match="inconsistent with window"):
            DurationState(
                start_date="2025-01-01", end_date="2025-01-30", duration_days=31, months_count=1.03
            )

    def test_zero_days_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DurationState(
                start_date="2025-01-01", end_date="2025-01-01", duration_days=0, months_count=0
            )

    def test_negative_months_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DurationState(
                start_date="2025-01-01", end_date="2025-01-01", duration_days=1, months_count=-1
            )

    def test_invalid_date_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DurationState(
                start_date="2025-02-30", end_date="2025-03-01", duration_days=1, months_count=0.03
            )

    def test_frozen(self, duration: DurationState) -> None:
        with pytest.raises(ValidationError):
            duration.duration_days = 10  # type: ignore[misc]

    def test_json_dump(self, duration: DurationState) -> None:
        data = json.loads(duration.model_dump_json())
        assert data == {
            "start_date": "2025-01-01",
            "end_date": "2025-01-30",
            "duration_days": 30,
            "duration_mode": "MONTH",
            "months_count": 1.0,
        }


class TestDurationPatch:
    """Tests for DurationPatch / DurationState.apply"""

    def test_changes_only_set_fields(self) -> None:
        patch = DurationPatch(duration_mode=DurationMode.DAYS)
        assert patch.changes() == {"duration_mode": DurationMode.DAYS}

    def test_apply_returns_new_state(self, duration: DurationState) -> None:
        patch = DurationPatch(end_date=date(2025, 2, 14), duration_days=45, months_count=1.5)
        updated = duration.apply(patch)
        assert updated.duration_days == 45
        assert updated.months_count == 1.5
        assert updated.start_date == duration.start_date
        assert duration.duration_days == 30

    def test_apply_rejects_inconsistent_merge(self, duration: DurationState) -> None:
        with pytest.raises(ValidationError):
            duration.apply(DurationPatch(duration_days=45))

    def test_empty_patch(self, duration: DurationState) -> None:
        assert duration.apply(DurationPatch()) == duration


# =============================================================================
# PRICING
# =============================================================================


class TestPricingModels:
    """Tests for PricingInput / RentResult / labels"""

    def test_pricing_defaults(self) -> None:
        pricing = PricingInput(monthly_rate=30000)
        assert pricing.billing_mode == BillingMode.PRORATA_30
        assert pricing.daily_rate is None

    def test_negative_monthly_rate_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PricingInput(monthly_rate=-1)

    def test_mode_from_string(self) -> None:
        assert PricingInput(monthly_rate=1, billing_mode="DAILY").billing_mode == BillingMode.DAILY

    def test_unknown_mode_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PricingInput(monthly_rate=1, billing_mode="WEEKLY")

    def test_rent_result_requires_booked_day(self) -> None:
        with pytest.raises(ValidationError):
            RentResult(
                booked_days=0, daily_rate=0, rent_amount=0, billing_mode=BillingMode.PRORATA_30
            )

    def test_labels(self) -> None:
        assert set(BILLING_MODE_LABELS) == set(BillingMode)
        assert format_billing_mode(BillingMode.FULL_MONTH) == "Full Month"
        assert format_billing_mode(BillingMode.DAILY) == "Daily"
        assert format_billing_mode(BillingMode.PRORATA_30) == "Pro-rata (30-day)"


class TestBillingPeriod:
    """Tests for BillingPeriod"""

    def test_contains_inclusive(self) -> None:
        period = BillingPeriod(period_start="2025-02-01", period_end="2025-02-28")
        assert period.contains(date(2025, 2, 1))
        assert period.contains(date(2025, 2, 28))
        assert not period.contains(date(2025, 3, 1))

    def test_single_day_period(self) -> None:
        period = BillingPeriod(period_start="2025-02-01", period_end="2025-02-01")
        assert period.contains(date(2025, 2, 1))

    def test_reversed_period_rejected(self) -> None:
        with pytest.raises(ValidationError, match="before period_start"):
            BillingPeriod(period_start="2025-02-28", period_end="2025-02-01")
