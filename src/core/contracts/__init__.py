"""
Contract Validation Module

Validation of the engine's JSON contracts (contracts/schema/).
"""

from .validators import (
    ContractValidator,
    DurationStateValidator,
    RentResultValidator,
    SchemaLoader,
    validate_duration_state,
    validate_rent_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DurationStateValidator",
    "RentResultValidator",
    # Functions
    "validate_duration_state",
    "validate_rent_result",
]
