"""
Command line token classifier.

Turns '3 ts of sugar to g' into quantity, units and substances.
"""

import logging
from typing import List, Optional, Sequence

from ..errors import ConversionSyntaxError, SubstanceMismatchError
from ..schemas import ParsedArgs

logger = logging.getLogger("kitchenconv.parsing")

SEPARATORS = {"to", "in"}
FILLER = "of"
MIN_TOKENS = 4  # quantity, unit, separator, unit

EXPECTED_SHAPE = "expected '<quantity> <unit> [substance] to <unit> [substance]'"


def parse_arguments(tokens: Sequence[str]) -> ParsedArgs:
    """
    Classify raw tokens by position.

    Raises:
        ConversionSyntaxError: repeated separator, too many tokens, or no
            target unit
        SubstanceMismatchError: a different substance on each side
    """
    quantity: Optional[str] = None
    unit_from: Optional[str] = None
    object_from: Optional[str] = None
    unit_to: Optional[str] = None
    object_to: Optional[str] = None
    to_found = False

    for raw in tokens:
        token = raw.lower()

        if token in SEPARATORS:
            if to_found:
                raise ConversionSyntaxError("multiple 'to' or 'in' not allowed")
            to_found = True
        elif not quantity:
            quantity = token
        elif not unit_from:
            unit_from = token
        elif not to_found and not object_from:
            if token != FILLER:
                object_from = token
        elif to_found and not unit_to:
            unit_to = token
        elif to_found and not object_to:
            if token != FILLER:
                object_to = token
        else:
            raise ConversionSyntaxError(EXPECTED_SHAPE)

    if not to_found or not unit_to:
        raise ConversionSyntaxError(EXPECTED_SHAPE)

    if object_from and object_to and object_from != object_to:
        raise SubstanceMismatchError(
            f"cannot convert a quantity of '{object_from}' into one of '{object_to}'"
        )

    parsed = ParsedArgs(
        quantity=quantity,
        from_unit=unit_from,
        from_substance=object_from,
        to_unit=unit_to,
        to_substance=object_to,
    )
    logger.debug(f"Parsed arguments: {parsed.model_dump()}")
    return parsed


def has_enough_tokens(tokens: List[str]) -> bool:
    return len(tokens) >= MIN_TOKENS
