from rocketlog.models.fuel import Fuel, FuelType
from rocketlog.models.rocket import Rocket

__all__ = ["Fuel", "FuelType", "Rocket"]
