"""Input validation for coordinate payloads."""

from .base import ValidationResult
from .schema import COORDINATES_SCHEMA, CoordinateSchemaValidator, parse_coordinates

__all__ = [
    "COORDINATES_SCHEMA",
    "CoordinateSchemaValidator",
    "ValidationResult",
    "parse_coordinates",
]
