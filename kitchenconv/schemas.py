"""
Pydantic schemas for kitchenconv.
"""

from typing import Optional, Literal
from pydantic import BaseModel, ConfigDict

UnitCategory = Literal["weight", "volume", "temperature"]

# Identity flags stored in Unit.factor for temperature scales
CELSIUS = 1.0
FAHRENHEIT = 0.0


class Unit(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    # Multiplier to the category base unit (kg, l). For temperature this is
    # the scale flag: CELSIUS or FAHRENHEIT.
    factor: float
    category: UnitCategory


class Substance(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    density: float  # kg/l


class ParsedArgs(BaseModel):
    quantity: str
    from_unit: str
    from_substance: Optional[str] = None
    to_unit: str
    to_substance: Optional[str] = None

    @property
    def substance(self) -> Optional[str]:
        """Substance named on either side of the separator."""
        return self.from_substance or self.to_substance


class ConversionResult(BaseModel):
    quantity_text: str
    value: float
    result: float
    from_unit: str
    to_unit: str
    substance: Optional[str] = None
    density: Optional[float] = None

    def format(self, digits: int = 6) -> str:
        """Render the human-readable answer, e.g. '  1 cup of butter is 226.805 g'."""
        of_clause = f" of {self.substance}" if self.substance else ""
        return f"  {self.quantity_text} {self.from_unit}{of_clause} is {self.result:.{digits}g} {self.to_unit}"
