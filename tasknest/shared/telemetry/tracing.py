"""Tracing decorator and span helpers.

Without a configured tracer provider the OpenTelemetry API hands out
non-recording spans, so decorated code runs unchanged when telemetry is off.
"""

import inspect
from collections.abc import Callable
from functools import wraps
from typing import Any

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

# Allowlist of kwarg names recorded as span attributes (case-insensitive).
# Free text (task names, search text, descriptions) is never recorded.
_SAFE_SPAN_ATTR_KEYS = frozenset({
    "owner_id", "task_id", "caller_id", "skip", "limit",
})


def _set_safe_span_attrs(span: trace.Span, kwargs: dict) -> None:
    """Set span attributes from kwargs; only allowlisted keys are recorded."""
    for key, value in kwargs.items():
        if not key.startswith("_") and key.lower() in _SAFE_SPAN_ATTR_KEYS:
            span.set_attribute(f"arg.{key}", str(value))


def traced(operation_name: str | None = None) -> Callable:
    """Decorator to run an async function inside a span.

    Exceptions are recorded on the span and re-raised; the span status
    carries the exception class name only.

    Args:
        operation_name: Span name (defaults to module.funcname).
    """

    def decorator(func: Callable) -> Callable:
        if not inspect.iscoroutinefunction(func):
            raise TypeError(f"traced() expects an async function, got {func!r}")
        tracer = trace.get_tracer(__name__)
        span_name = operation_name or f"{func.__module__}.{func.__name__}"

        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            with tracer.start_as_current_span(
                span_name, record_exception=False, set_status_on_exception=False
            ) as span:
                _set_safe_span_attrs(span, kwargs)
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    span.set_status(Status(StatusCode.ERROR, type(e).__name__))
                    span.record_exception(e)
                    raise
                span.set_status(Status(StatusCode.OK))
                return result

        return wrapper

    return decorator


def add_span_attributes(**attributes: str | int | float | bool) -> None:
    """Add attributes to the current span."""
    span = trace.get_current_span()
    if span and span.is_recording():
        for key, value in attributes.items():
            span.set_attribute(key, value)
