"""
Schema validation for coordinate payloads.

Coordinate lists arrive from outside the package (route polylines, CLI
input) as JSON. This module checks them against a JSON schema before they are
turned into Coordinate objects. Accepted item shapes:

- ``{"latitude": 51.5, "longitude": -0.12}``
- ``{"lat": 51.5, "lng": -0.12}``
- ``[51.5, -0.12]``
"""

from typing import Any, Dict, List

from jsonschema import Draft7Validator

from ...core.exceptions import ValidationError
from ...core.models import Coordinate
from .base import ValidationResult

COORDINATE_SCHEMA: Dict[str, Any] = {
    "oneOf": [
        {
            "type": "object",
            "properties": {
                "latitude": {"type": "number"},
                "longitude": {"type": "number"},
            },
            "required": ["latitude", "longitude"],
        },
        {
            "type": "object",
            "properties": {
                "lat": {"type": "number"},
                "lng": {"type": "number"},
            },
            "required": ["lat", "lng"],
            "not": {"required": ["latitude", "longitude"]},
        },
        {
            "type": "array",
            "items": {"type": "number"},
            "minItems": 2,
            "maxItems": 2,
        },
    ]
}

COORDINATES_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "array",
    "items": COORDINATE_SCHEMA,
}


class CoordinateSchemaValidator:
    """
    JSON Schema-based validator for coordinate lists.

    Example:
        >>> result = CoordinateSchemaValidator().validate([[51.5, -0.12]])
        >>> result.is_valid
        True
    """

    def __init__(self, schema: Dict[str, Any] = COORDINATES_SCHEMA):
        self.schema = schema
        self._validator = Draft7Validator(schema)

    def validate(self, data: Any) -> ValidationResult:
        """
        Validate a payload against the coordinate list schema.

        Returns:
            ValidationResult listing every schema violation, each prefixed
            with its location in the payload
        """
        errors = []
        for error in sorted(self._validator.iter_errors(data), key=lambda e: list(e.path)):
            location = "/".join(str(part) for part in error.path) or "<root>"
            errors.append(f"{location}: {error.message}")
        return ValidationResult(
            is_valid=not errors,
            errors=errors,
            warnings=[],
            context={"count": len(data) if isinstance(data, list) else None},
        )


def parse_coordinates(data: Any) -> List[Coordinate]:
    """
    Validate a JSON payload and convert it to coordinates.

    Raises:
        ValidationError: If the payload does not match the schema
    """
    result = CoordinateSchemaValidator().validate(data)
    if not result.is_valid:
        raise ValidationError("; ".join(result.errors))
    return [Coordinate.coerce(item) for item in data]
