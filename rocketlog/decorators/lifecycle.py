import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from functools import wraps
from typing import Any, Callable, Optional, TypeVar

from pydantic import ValidationError
from rich.markup import escape

from rocketlog.config import get_settings
from rocketlog.decorators.phrasing import to_negative, to_past_tense
from rocketlog.utils.utils import format_timestamp, serialize_args

T = TypeVar("T")


class MessageKind(str, Enum):
    START = "START"
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"


@dataclass
class Message:
    kind: MessageKind
    timestamp: datetime
    text: str
    args: Optional[str] = None

    # SUCCESS only
    result: Any = None

    # FAILURE only
    error: Optional[BaseException] = None


@dataclass
class LogActions:
    """Message factories for the three lifecycle events of one method."""

    start_text: str
    success_text: str
    failure_text: str

    def start(self, args: tuple, kwargs: dict) -> Message:
        return Message(
            kind=MessageKind.START,
            timestamp=datetime.now(timezone.utc),
            text=self.start_text,
            args=serialize_args(args, kwargs),
        )

    def success(self, args: tuple, kwargs: dict, result: Any) -> Message:
        return Message(
            kind=MessageKind.SUCCESS,
            timestamp=datetime.now(timezone.utc),
            text=self.success_text,
            args=serialize_args(args, kwargs),
            result=result if result else None,
        )

    def failure(self, error: BaseException) -> Message:
        reason = str(error)
        return Message(
            kind=MessageKind.FAILURE,
            timestamp=datetime.now(timezone.utc),
            text=f"{self.failure_text} because {reason}" if reason else self.failure_text,
            error=error,
        )


def parse_actions(description: str) -> LogActions | None:
    try:
        success_text = to_past_tense(description)
        failure_text = to_negative(success_text)
    except Exception:
        # Unparseable descriptions disable logging for the method
        return None

    return LogActions(
        start_text=description,
        success_text=success_text,
        failure_text=failure_text,
    )


def _styled() -> bool:
    try:
        return get_settings().STYLED
    except ValidationError:
        # Unreadable settings fall back to plain output
        return False


def _style(value: Any, style: str | None, styled: bool) -> str:
    text = str(value)
    if not styled:
        return text
    text = escape(text)
    return f"[{style}]{text}[/]" if style else text


def format_message(message: Message, styled: bool = False) -> str:
    if message.kind == MessageKind.START:
        segments = [(message.text, "italic"), (message.args, None)]
    elif message.kind == MessageKind.SUCCESS:
        segments = [
            (message.text, "bold green"),
            (message.args, "blue"),
            (message.result, "cyan"),
        ]
    elif message.kind == MessageKind.FAILURE:
        segments = [(message.text, "strike red"), (message.args, None)]
    else:
        raise ValueError(f"Unknown message kind: {message.kind}")

    timestamp = _style(format_timestamp(message.timestamp), "yellow", styled)
    text = "; ".join(
        _style(value, style, styled) for value, style in segments if value is not None
    )

    return f"{timestamp}: {text}"


def log(description: str) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Log the start, success and failure of every call to the decorated method.

    `description` is a present-tense phrase such as "will launch the rocket".
    Its past-tense ("launched the rocket") and negated ("did not launch the
    rocket") forms are worked out once, here, and used for the success and
    failure messages. Exceptions are logged and re-raised unchanged.
    """
    actions = parse_actions(description)

    def decorator(method: Callable[..., T]) -> Callable[..., T]:
        logger = logging.getLogger(method.__module__)

        def emit(level: int, build: Callable[..., Message], *details: Any) -> None:
            # Logging problems never stop or replace the call itself
            try:
                logger.log(level, format_message(build(*details), styled=_styled()))
            except Exception:
                logger.warning(
                    "Could not log a lifecycle message for %s",
                    method.__qualname__,
                    exc_info=True,
                )

        @wraps(method)
        def wrapper(self: Any, *args: Any, **kwargs: Any) -> T:
            if actions:
                emit(logging.DEBUG, actions.start, args, kwargs)

            try:
                result = method(self, *args, **kwargs)
            except Exception as error:
                if actions:
                    emit(logging.ERROR, actions.failure, error)
                raise

            if actions:
                emit(logging.INFO, actions.success, args, kwargs, result)

            return result

        return wrapper

    return decorator
