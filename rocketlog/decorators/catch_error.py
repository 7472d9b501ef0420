from functools import wraps
from typing import Any, Callable, TypeVar

T = TypeVar("T")


def catch_error(default: T) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Return `default` instead of raising whenever the decorated method fails.
    Apply it outermost so errors raised by inner decorators are swallowed too.
    """

    def decorator(method: Callable[..., T]) -> Callable[..., T]:
        @wraps(method)
        def wrapper(self: Any, *args: Any, **kwargs: Any) -> T:
            try:
                return method(self, *args, **kwargs)
            except Exception:
                return default

        return wrapper

    return decorator
