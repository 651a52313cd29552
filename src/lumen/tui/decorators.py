"""
TUI decorators for safe action handling.
"""

from functools import wraps
from typing import Any, Callable

from lumen.core.errors import LumenError


def safe_action(action_func: Callable[..., Any]) -> Callable[..., Any]:
    """Skip the action until a dispatcher exists; report LumenError as a notification."""

    @wraps(action_func)
    def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
        if getattr(self, "dispatcher", None) is None:
            return None

        try:
            return action_func(self, *args, **kwargs)
        except LumenError as e:
            self.notify(str(e), severity="warning")
            return None

    return wrapper
