import pytest

from rocketlog.flows import mission_flow as mission_flow_module
from rocketlog.flows.mission_flow import (
    DEFAULT_MISSIONS,
    Mission,
    MissionReport,
    fly_mission,
    mission_flow,
)
from rocketlog.models import FuelType, Rocket
from rocketlog.utils import utils
from rocketlog.utils.utils import generate_task_run_name


def test_default_missions_match_apollo_sequence():
    assert [m.call_sign for m in DEFAULT_MISSIONS] == [
        "Apollo 11",
        "Apollo 12",
        "Apollo 13",
        "Apollo 14",
    ]
    assert [m.fuel_type for m in DEFAULT_MISSIONS] == list(FuelType)
    assert {(m.quantity, m.countdown) for m in DEFAULT_MISSIONS} == {(100, 10)}


@pytest.mark.parametrize(
    "mission, expected",
    [
        (DEFAULT_MISSIONS[0], -1),
        (DEFAULT_MISSIONS[1], -1),
        (DEFAULT_MISSIONS[2], 1000),
        (DEFAULT_MISSIONS[3], 10000),
    ],
)
def test_fly_mission_reports_energy(mission, expected):
    report = fly_mission.fn(Rocket(), mission)

    assert report == MissionReport(
        call_sign=mission.call_sign, fuel_type=mission.fuel_type, energy=expected
    )


def test_missions_share_the_rocket():
    rocket = Rocket()

    fly_mission.fn(rocket, Mission(FuelType.SOLID_FUEL, 5, 3, "Gemini 1"))

    assert rocket.fuel.quantity == 5
    assert rocket.fuel.type == FuelType.SOLID_FUEL


def test_task_run_name_uses_call_sign(monkeypatch):
    mission = Mission(FuelType.LIQUID_FUEL, 100, 10, "Apollo 13")
    monkeypatch.setattr(utils.task_run, "get_parameters", lambda: {"mission": mission})

    assert generate_task_run_name("Fly")() == "Apollo 13 - Fly"


@pytest.fixture
def untracked_tasks(monkeypatch):
    # Run the task body directly instead of through the Prefect engine
    monkeypatch.setattr(mission_flow_module, "fly_mission", fly_mission.fn)


def test_empty_mission_list_flies_nothing(untracked_tasks):
    assert mission_flow.fn([]) == []


def test_flow_defaults_to_apollo_sequence(untracked_tasks):
    reports = mission_flow.fn()

    assert [(r.call_sign, r.energy) for r in reports] == [
        ("Apollo 11", -1),
        ("Apollo 12", -1),
        ("Apollo 13", 1000),
        ("Apollo 14", 10000),
    ]


def test_flow_flies_missions_in_order_on_one_rocket(untracked_tasks):
    missions = [
        Mission(FuelType.SOLID_FUEL, 1, 3, "Gemini 1"),
        # Empty tank: fuel_up replaces the fuel loaded by the previous mission
        Mission(FuelType.LIQUID_FUEL, 0, 3, "Gemini 2"),
        Mission(FuelType.LIQUID_FUEL, 2, 3, "Gemini 3"),
    ]

    reports = mission_flow.fn(missions)

    assert reports == [
        MissionReport("Gemini 1", FuelType.SOLID_FUEL, 100),
        MissionReport("Gemini 2", FuelType.LIQUID_FUEL, -1),
        MissionReport("Gemini 3", FuelType.LIQUID_FUEL, 20),
    ]


def test_flow_builds_a_single_rocket(untracked_tasks, monkeypatch):
    rockets = []

    def build_rocket():
        rocket = Rocket()
        rockets.append(rocket)
        return rocket

    monkeypatch.setattr(mission_flow_module, "Rocket", build_rocket)

    mission_flow.fn()

    assert len(rockets) == 1
    assert rockets[0].fuel.type == FuelType.SOLID_FUEL
