# ABOUTME: Helpers shared by chain components
# ABOUTME: Lets steps, resolvers and transformers be plain or async callables

import inspect
from typing import Any, Callable


async def call_maybe_async(fn: Callable[..., Any], *args: Any) -> Any:
    """
    Call a function and await its result if it is awaitable.

    Args:
        fn: Sync or async callable.
        *args: Positional arguments for the call.

    Returns:
        The (awaited) return value.
    """
    result = fn(*args)
    if inspect.isawaitable(result):
        result = await result
    return result


def callable_name(fn: Callable[..., Any], default: str) -> str:
    """Get a readable name for a callable, falling back to ``default``."""
    name = getattr(fn, "__name__", None)
    if not name or name == "<lambda>":
        return default
    return name
