"""
Unit Conversion Service for kitchenconv.

Handles weight, volume and temperature conversions. Weight <-> volume goes
through a per-substance density lookup.
"""

import logging
from typing import Dict, List, Optional

from ..errors import (
    IncompatibleCategoryError,
    MissingSubstanceError,
    UnknownSubstanceError,
    UnknownUnitError,
)
from ..parsing.quantity import parse_quantity
from ..schemas import CELSIUS, FAHRENHEIT, ConversionResult, ParsedArgs, Substance, Unit
from .suggest import rank_suggestions

logger = logging.getLogger("kitchenconv.units")

# --- Data Tables ---

# Normalized unit -> Unit
# Base units: kg (weight), l (volume)
UNITS_DB: Dict[str, Unit] = {
    unit.name: unit
    for unit in (
        # Weight (base: kg)
        Unit(name="kg", factor=1.0, category="weight"),
        Unit(name="g", factor=1e-3, category="weight"),
        Unit(name="mg", factor=1e-6, category="weight"),
        Unit(name="lb", factor=4.536e-1, category="weight"),
        Unit(name="oz", factor=2.835e-2, category="weight"),

        # Volume (base: l)
        Unit(name="l", factor=1.0, category="volume"),
        Unit(name="dl", factor=1e-1, category="volume"),
        Unit(name="cl", factor=1e-2, category="volume"),
        Unit(name="ml", factor=1e-3, category="volume"),
        Unit(name="gal", factor=3.785, category="volume"),  # US gallon
        Unit(name="cup", factor=2.366e-1, category="volume"),  # US cup
        Unit(name="floz", factor=2.957e-2, category="volume"),
        Unit(name="tbs", factor=1.479e-2, category="volume"),
        Unit(name="ts", factor=4.93e-3, category="volume"),

        # Temperature (scale flag, not a factor)
        Unit(name="c", factor=CELSIUS, category="temperature"),
        Unit(name="f", factor=FAHRENHEIT, category="temperature"),
    )
}

# Density Table: kg/l (approximate)
# Water = 1.0
_HERBS = 0.10566

DENSITY_DB: Dict[str, float] = {
    "flour": 0.5283,
    "butter": 0.9586,
    "sugar": 0.8453,
    "salt": 1.1548,
    "baking-powder": 0.7208,
    "baking-soda": 0.9337,
    "almond-flour": 0.5679,
    "tomato-paste": 1.1075,
    "tomato-puree": 1.1075,
    "rice": 0.8453,  # uncooked
    "tofu": 1.0480,
    "parmesan": 0.4227,  # grated
    "oil": 0.9215,
    "water": 1.0000,
    # Fresh herbs, chopped
    "parsley": _HERBS,
    "basil": _HERBS,
    "cilantro": _HERBS,
    "dill": _HERBS,
    "herbs": _HERBS,
}

# --- Core Functions ---

def get_unit(name: str, suggestion_limit: Optional[int] = None) -> Unit:
    """
    Resolve a unit name (any case) to its Unit.

    Raises UnknownUnitError with every known unit ranked by similarity.
    """
    key = (name or "").lower()
    unit = UNITS_DB.get(key)
    if unit is None:
        suggestions = rank_suggestions(key, UNITS_DB.keys(), suggestion_limit)
        raise UnknownUnitError(f"unknown unit '{key}'", name=key, suggestions=suggestions)
    return unit


def get_substance(name: Optional[str], suggestion_limit: Optional[int] = None) -> Substance:
    """
    Resolve a substance name (any case) to its density entry.

    Raises UnknownSubstanceError with every known substance ranked by similarity.
    """
    key = (name or "").lower()
    if key not in DENSITY_DB:
        suggestions = rank_suggestions(key, DENSITY_DB.keys(), suggestion_limit)
        raise UnknownSubstanceError(f"the density of '{key}' is unknown", name=key, suggestions=suggestions)
    return Substance(name=key, density=DENSITY_DB[key])


def list_units() -> List[Unit]:
    return list(UNITS_DB.values())


def list_substances(query: Optional[str] = None) -> List[Substance]:
    """Known substances, optionally filtered by a case-insensitive substring."""
    needle = (query or "").lower()
    return [
        Substance(name=name, density=density)
        for name, density in DENSITY_DB.items()
        if needle in name
    ]


def convert_temperature(qty: float, from_unit: Unit, to_unit: Unit) -> float:
    """Celsius and Fahrenheit do not share a zero, so this is affine."""
    if from_unit.factor == to_unit.factor:
        return qty
    if from_unit.factor == CELSIUS:
        return qty * 9.0 / 5.0 + 32.0
    return (qty - 32.0) * 5.0 / 9.0


def convert_value(
    qty: float,
    from_unit: Unit,
    to_unit: Unit,
    substance: Optional[str] = None,
    suggestion_limit: Optional[int] = None,
) -> float:
    """
    Convert quantity between units.

    Weight <-> volume needs a substance; the volume side is turned into an
    equivalent weight unit using the substance density (kg/l).
    """
    if {from_unit.category, to_unit.category} == {"weight", "volume"}:
        if not substance:
            raise MissingSubstanceError(
                f"converting '{from_unit.name}' (a {from_unit.category}) into "
                f"'{to_unit.name}' (a {to_unit.category}) requires knowing the "
                "substance which is converted"
            )

        density = get_substance(substance, suggestion_limit).density
        logger.debug(f"Using density of {substance}: {density} kg/l")

        if from_unit.category == "volume":
            from_unit = from_unit.model_copy(update={"category": "weight", "factor": from_unit.factor * density})
        else:
            to_unit = to_unit.model_copy(update={"category": "weight", "factor": to_unit.factor * density})

    if from_unit.category != to_unit.category:
        raise IncompatibleCategoryError(
            f"cannot convert from '{from_unit.name}' (a {from_unit.category}) "
            f"into '{to_unit.name}' (a {to_unit.category})"
        )

    if from_unit.category == "temperature":
        return convert_temperature(qty, from_unit, to_unit)

    # base_qty = qty * factor_from
    # target_qty = base_qty / factor_to
    return qty * from_unit.factor / to_unit.factor


def _build_result(
    quantity_text: str,
    qty: float,
    result: float,
    unit_from: Unit,
    unit_to: Unit,
    substance: Optional[str],
) -> ConversionResult:
    density = None
    if {unit_from.category, unit_to.category} == {"weight", "volume"}:
        density = DENSITY_DB.get(substance)

    logger.debug(f"{qty} {unit_from.name} ({unit_from.category}) -> {result} {unit_to.name} ({unit_to.category})")

    return ConversionResult(
        quantity_text=quantity_text,
        value=qty,
        result=result,
        from_unit=unit_from.name,
        to_unit=unit_to.name,
        substance=substance or None,
        density=density,
    )


def convert_unit(
    qty: float,
    from_unit: str,
    to_unit: str,
    substance: Optional[str] = None,
    suggestion_limit: Optional[int] = None,
) -> ConversionResult:
    """
    Convert a numeric quantity given unit names.
    """
    unit_from = get_unit(from_unit, suggestion_limit)
    unit_to = get_unit(to_unit, suggestion_limit)
    substance = substance.lower() if substance else None

    result = convert_value(qty, unit_from, unit_to, substance, suggestion_limit)
    return _build_result(f"{qty:g}", qty, result, unit_from, unit_to, substance)


def convert_request(args: ParsedArgs, suggestion_limit: Optional[int] = None) -> ConversionResult:
    """
    Run a parsed command line through the converter.

    Units are resolved before the quantity is parsed, so a bad unit is
    reported even when the number is also malformed.
    """
    unit_from = get_unit(args.from_unit, suggestion_limit)
    unit_to = get_unit(args.to_unit, suggestion_limit)
    qty = parse_quantity(args.quantity)

    result = convert_value(qty, unit_from, unit_to, args.substance, suggestion_limit)
    return _build_result(args.quantity, qty, result, unit_from, unit_to, args.substance)
