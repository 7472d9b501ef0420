from rocketlog.decorators.catch_error import catch_error
from rocketlog.decorators.lifecycle import log

__all__ = ["catch_error", "log"]
