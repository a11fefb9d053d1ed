"""Observability helpers for instrumenting tool calls."""

from __future__ import annotations

import inspect
import logging
import time
from functools import wraps
from typing import Any, Callable, TypeVar

from aunty_app.logging_config import ensure_correlation_id, get_logger, log_event, redact_for_log

LOGGER = get_logger(__name__)
F = TypeVar("F", bound=Callable[..., Any])


def _preview_kwargs(kwargs: dict, max_keys: int = 6) -> dict:
    preview: dict = {}
    for idx, (key, value) in enumerate(kwargs.items()):
        if idx >= max_keys:
            preview["truncated"] = True
            break
        preview[key] = value
    return redact_for_log(preview)


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


def instrument_tool(tool_name: str) -> Callable[[F], F]:
    """Wrap a sync or async callable to emit structured start, finish and failure logs."""

    def decorator(func: F) -> F:
        def _started(kwargs: dict) -> tuple[str, float]:
            correlation_id = ensure_correlation_id()
            log_event(
                LOGGER,
                logging.INFO,
                "tool_call_started",
                tool=tool_name,
                correlation_id=correlation_id,
                kwargs=_preview_kwargs(kwargs),
            )
            return correlation_id, time.perf_counter()

        def _failed(correlation_id: str, start: float) -> None:
            log_event(
                LOGGER,
                logging.ERROR,
                "tool_call_failed",
                tool=tool_name,
                correlation_id=correlation_id,
                duration_ms=_elapsed_ms(start),
                exc_info=True,
            )

        def _completed(correlation_id: str, start: float) -> None:
            log_event(
                LOGGER,
                logging.INFO,
                "tool_call_completed",
                tool=tool_name,
                correlation_id=correlation_id,
                duration_ms=_elapsed_ms(start),
            )

        if inspect.iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                correlation_id, start = _started(kwargs)
                try:
                    result = await func(*args, **kwargs)
                except Exception:
                    _failed(correlation_id, start)
                    raise
                _completed(correlation_id, start)
                return result

            return async_wrapper  # type: ignore[return-value]

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            correlation_id, start = _started(kwargs)
            try:
                result = func(*args, **kwargs)
            except Exception:
                _failed(correlation_id, start)
                raise
            _completed(correlation_id, start)
            return result

        return wrapper  # type: ignore[return-value]

    return decorator


__all__ = ["instrument_tool"]
