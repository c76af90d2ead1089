"""
JSON Schema Contract Validators

Validation of persisted / exchanged JSON data against the formal
contracts in contracts/schema/. Uses the jsonschema library.

Schemas:
- duration_state.json (line item booking window, as stored on save)
- rent_result.json (rent of one booking window, as handed to invoicing)
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Loader for JSON Schema files.

    Finds the schemas in contracts/schema/ relative to the project root.
    """

    def __init__(self):
        # Project root is 4 levels up from this file
        self._schema_dir = Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a JSON Schema file.

        Args:
            schema_name: Schema name without extension (e.g. 'duration_state')

        Returns:
            Parsed schema

        Raises:
            FileNotFoundError: If the schema file does not exist
            ValueError: If the file is not a valid JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation of the schema itself
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Base class of contract validators.

    Dates are checked with the "date" format checker, so 2025-02-30 is
    rejected even though it matches the YYYY-MM-DD pattern.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(
            self.schema, format_checker=Draft202012Validator.FORMAT_CHECKER
        )

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Validate data against the schema.

        Raises:
            ValidationError: If data does not match the schema
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Validity check without raising"""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Iterate over every ValidationError found in data"""
        return self.validator.iter_errors(data)


class DurationStateValidator(ContractValidator):
    """Validator of the duration_state contract."""

    def __init__(self):
        super().__init__("duration_state")


class RentResultValidator(ContractValidator):
    """Validator of the rent_result contract."""

    def __init__(self):
        super().__init__("rent_result")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_duration_state(data: Dict[str, Any]) -> None:
    """
    Validate serialized duration_state data.

    Raises:
        ValidationError: If data does not match the schema
    """
    DurationStateValidator().validate(data)


def validate_rent_result(data: Dict[str, Any]) -> None:
    """
    Validate serialized rent_result data.

    Raises:
        ValidationError: If data does not match the schema
    """
    RentResultValidator().validate(data)


__all__ = [
    "SchemaLoader",
    "ContractValidator",
    "DurationStateValidator",
    "RentResultValidator",
    "ValidationError",
    "validate_duration_state",
    "validate_rent_result",
]
