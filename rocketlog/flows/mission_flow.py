from dataclasses import dataclass

from prefect import flow, task
from prefect.cache_policies import NO_CACHE

from rocketlog.config import configure_logging
from rocketlog.models import FuelType, Rocket
from rocketlog.utils.utils import generate_task_run_name


@dataclass
class Mission:
    fuel_type: FuelType
    quantity: float
    countdown: int
    call_sign: str


@dataclass
class MissionReport:
    call_sign: str
    fuel_type: FuelType
    energy: float


DEFAULT_MISSIONS = [
    Mission(FuelType.NOTHING, 100, 10, "Apollo 11"),
    Mission(FuelType.GASEOUS_FUEL, 100, 10, "Apollo 12"),
    Mission(FuelType.LIQUID_FUEL, 100, 10, "Apollo 13"),
    Mission(FuelType.SOLID_FUEL, 100, 10, "Apollo 14"),
]


@task(
    name="Fly",
    task_run_name=generate_task_run_name("Fly"),
    cache_policy=NO_CACHE,
)
def fly_mission(rocket: Rocket, mission: Mission) -> MissionReport:
    rocket.fuel_up(mission.quantity, mission.fuel_type)
    energy = rocket.launch(mission.countdown, mission.call_sign)

    return MissionReport(
        call_sign=mission.call_sign, fuel_type=mission.fuel_type, energy=energy
    )


@flow
def mission_flow(missions: list[Mission] | None = None) -> list[MissionReport]:
    if missions is None:
        missions = DEFAULT_MISSIONS

    # One rocket for the whole sequence, so missions fly one after another
    rocket = Rocket()
    return [fly_mission(rocket, mission) for mission in missions]


if __name__ == "__main__":
    configure_logging()
    mission_flow()
