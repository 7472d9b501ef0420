from rocketlog.decorators import catch_error, log
from rocketlog.models import Fuel, FuelType, Rocket

__all__ = ["catch_error", "log", "Fuel", "FuelType", "Rocket"]
