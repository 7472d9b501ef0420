from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class FuelType(str, Enum):
    NOTHING = "NOTHING"
    GASEOUS_FUEL = "GASEOUS_FUEL"
    LIQUID_FUEL = "LIQUID_FUEL"
    SOLID_FUEL = "SOLID_FUEL"


@dataclass(frozen=True)
class Fuel:
    NONE: ClassVar["Fuel"]

    quantity: float
    type: FuelType

    @property
    def is_available(self) -> bool:
        return self.quantity > 0 and self.type != FuelType.NOTHING

    @property
    def is_volatile(self) -> bool:
        return self.type == FuelType.GASEOUS_FUEL

    @property
    def energy(self) -> float:
        if self.type == FuelType.NOTHING:
            return 0
        elif self.type == FuelType.GASEOUS_FUEL:
            return self.quantity
        elif self.type == FuelType.LIQUID_FUEL:
            return self.quantity * 10
        elif self.type == FuelType.SOLID_FUEL:
            return self.quantity * 100
        else:
            raise ValueError("fuel has no known energy")


Fuel.NONE = Fuel(0, FuelType.NOTHING)
