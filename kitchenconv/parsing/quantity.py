import math
import re

from ..errors import NumericParseError

# Plain decimal or scientific notation, whole string only: 2, -40, .5, 1e3, 5e-2
_NUMBER_RE = re.compile(r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?', re.ASCII)
# One side of a fraction: unsigned integer, optional '+', nothing else
_WHOLE_RE = re.compile(r'\+?\d+', re.ASCII)


def _divide(numerator: int, denominator: int) -> float:
    # 1/0 and 0/0 follow float semantics instead of raising
    if denominator == 0:
        return math.nan if numerator == 0 else math.inf
    return numerator / denominator


def parse_quantity(text: str) -> float:
    """
    Parse a quantity such as '2', '0.5', '3/4' or '1e3' into a float.

    Fractions are split at the first '/' and both sides must be plain
    non-negative integers, so '3.5/4' and '-3/4' are rejected.
    """
    s = text or ""

    if "/" in s:
        upper, lower = s.split("/", 1)
        if not _WHOLE_RE.fullmatch(upper) or not _WHOLE_RE.fullmatch(lower):
            raise NumericParseError(f"could not convert '{s}' into a number")
        try:
            return _divide(int(upper), int(lower))
        except (OverflowError, ValueError) as e:
            # result too large for a float, or too many digits for int()
            raise NumericParseError(f"could not convert '{s}' into a number") from e

    if not _NUMBER_RE.fullmatch(s):
        raise NumericParseError(f"could not convert '{s}' into a number")
    return float(s)
