"""
Services Package

Conversion logic for kitchenconv.
"""

from .suggest import name_distance, rank_suggestions
from .unit_conversion import (
    DENSITY_DB,
    UNITS_DB,
    convert_request,
    convert_temperature,
    convert_unit,
    convert_value,
    get_substance,
    get_unit,
    list_substances,
    list_units,
)

__all__ = [
    # Suggestions
    "name_distance",
    "rank_suggestions",
    # Tables
    "DENSITY_DB",
    "UNITS_DB",
    # Conversion
    "convert_request",
    "convert_temperature",
    "convert_unit",
    "convert_value",
    "get_substance",
    "get_unit",
    "list_substances",
    "list_units",
]
