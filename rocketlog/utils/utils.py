import json
from datetime import datetime, timezone
from typing import Any

from prefect.runtime import task_run


def format_timestamp(dt: datetime) -> str:
    # ISO-8601 in UTC with millisecond precision, e.g. 2024-05-01T12:00:00.000Z
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace(
        "+00:00", "Z"
    )


def serialize_args(args: tuple, kwargs: dict[str, Any]) -> str | None:
    if not args and not kwargs:
        return None

    values: list[Any] = list(args)
    if kwargs:
        values.append(kwargs)
    return json.dumps(values, default=str)


def generate_task_run_name(step_name: str):
    def _generate_name():
        mission = task_run.get_parameters()["mission"]
        return f"{mission.call_sign} - {step_name}"

    return _generate_name
