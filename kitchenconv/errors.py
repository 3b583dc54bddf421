from typing import List, Optional


class ConversionError(Exception):
    """Base exception for every failure the converter reports to the user."""
    prefix = "error"


class ConversionSyntaxError(ConversionError):
    """Arguments do not have the '<quantity> <unit> [substance] to <unit> [substance]' shape."""
    prefix = "syntax error"


class SubstanceMismatchError(ConversionError):
    """Different substances given on each side of 'to'."""
    pass


class NumericParseError(ConversionError):
    """Quantity is not an integer, decimal, fraction or scientific number."""
    pass


class MissingSubstanceError(ConversionError):
    """Weight <-> volume conversion requested without naming a substance."""
    pass


class IncompatibleCategoryError(ConversionError):
    """Units belong to categories that cannot be converted into each other."""
    pass


class UnknownNameError(ConversionError):
    """Lookup miss for a unit or substance name.

    Carries the known names ranked by similarity so the CLI can print a
    "did you mean" hint.
    """

    def __init__(self, message: str, name: str, suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.name = name
        self.suggestions = suggestions or []


class UnknownUnitError(UnknownNameError):
    pass


class UnknownSubstanceError(UnknownNameError):
    pass
