import logging

from rocketlog.decorators import catch_error, log
from rocketlog.models.fuel import Fuel, FuelType

logger = logging.getLogger(__name__)


class Rocket:
    def __init__(self) -> None:
        self._fuel: Fuel = Fuel.NONE

    @property
    def fuel(self) -> Fuel:
        return self._fuel

    @catch_error(None)
    @log("will fuel up the rocket")
    def fuel_up(self, quantity: float, type: FuelType) -> None:
        self._fuel = Fuel(quantity, type)

    @catch_error(-1)
    @log("will launch the rocket")
    def launch(self, countdown: int, call_sign: str) -> float:
        if not self._fuel.is_available:
            raise RuntimeError("it fizzled out")

        if self._fuel.is_volatile:
            raise RuntimeError("it blew up")

        logger.info(
            "** actual launch of %s with countdown of %s seconds **",
            call_sign,
            countdown,
            extra={"markup": False},
        )

        return self._fuel.energy
