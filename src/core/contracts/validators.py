"""
JSON Schema Contract Validators

Validation of serialized values against the JSON Schema contracts in
contracts/schema/ (Draft 2020-12), using the jsonschema library.

Schemas:
- big_decimal.json (wire form of BigDecimal, see BigDecimalPayload)
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

# Project root is four levels up from this file
DEFAULT_SCHEMA_DIR = Path(__file__).parent.parent.parent.parent / "contracts" / "schema"


class SchemaLoader:
    """Loads and meta-validates schema files from one directory, caching by name."""

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or DEFAULT_SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Args:
            schema_name: Schema name without extension (e.g. 'big_decimal')

        Raises:
            FileNotFoundError: If the schema file does not exist
            ValueError: If the file is not a valid Draft 2020-12 schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


class ContractValidator:
    """Validates data against one named JSON Schema."""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.validator = Draft202012Validator((loader or SchemaLoader()).load_schema(schema_name))

    def validate(self, data: Any) -> None:
        """
        Raises:
            jsonschema.ValidationError: If data does not match the schema
        """
        self.validator.validate(data)


@lru_cache(maxsize=None)
def _big_decimal_validator() -> ContractValidator:
    return ContractValidator("big_decimal")


def validate_big_decimal(data: Dict[str, Any]) -> None:
    """
    Validate a serialized BigDecimal.

    Raises:
        jsonschema.ValidationError: If data does not match big_decimal.json
    """
    _big_decimal_validator().validate(data)
