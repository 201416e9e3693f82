"""Instrumentation for public engine entry points."""

from __future__ import annotations

import inspect
import logging
import time
from functools import wraps
from typing import Any, Callable, Dict, ParamSpec, TypeVar

from pydantic import BaseModel, ValidationError

from stylist_app.logging_config import get_logger, log_event, operation_context, redact_for_log

LOGGER = get_logger(__name__)
P = ParamSpec("P")
R = TypeVar("R")


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


def _describe_inputs(kwargs: Dict[str, Any]) -> Dict[str, Any]:
    """Summarize call arguments: collections by size, objects by type name."""

    described: Dict[str, Any] = {}
    for key, value in kwargs.items():
        if isinstance(value, (list, tuple)):
            described[key] = f"<{len(value)} entries>"
        elif isinstance(value, (str, int, float, bool, dict)) or value is None:
            described[key] = value
        else:
            described[key] = type(value).__name__
    return redact_for_log(described)


def instrument_operation(
    operation_name: str,
    input_model: type[BaseModel] | None = None,
    on_validation_error: Callable[[ValidationError], R] | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Validate call arguments against ``input_model`` and log the call.

    Positional and keyword arguments are bound to the wrapped signature
    before validation. Validated fields replace the bound values; parameters
    the model does not declare are passed through untouched. A validation
    failure is handed to ``on_validation_error`` when given and re-raised
    otherwise.
    Exceptions from the wrapped callable are logged and re-raised.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        signature = inspect.signature(func)

        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            with operation_context(operation_name) as correlation_id:
                start = time.perf_counter()
                if input_model is not None:
                    bound = signature.bind_partial(*args, **kwargs)
                    try:
                        validated = input_model.model_validate(bound.arguments).model_dump()
                    except ValidationError as exc:
                        log_event(
                            LOGGER,
                            logging.WARNING,
                            "operation_validation_failed",
                            operation=operation_name,
                            correlation_id=correlation_id,
                            error_count=exc.error_count(),
                            errors=[{"loc": list(error["loc"]), "type": error["type"]} for error in exc.errors()],
                        )
                        if on_validation_error is None:
                            raise
                        return on_validation_error(exc)
                    bound.arguments.update(
                        {name: value for name, value in validated.items() if name in signature.parameters}
                    )
                    args, kwargs = bound.args, bound.kwargs  # type: ignore[assignment]

                log_event(
                    LOGGER,
                    logging.INFO,
                    "operation_started",
                    operation=operation_name,
                    correlation_id=correlation_id,
                    inputs=_describe_inputs(dict(signature.bind_partial(*args, **kwargs).arguments)),
                )
                try:
                    result = func(*args, **kwargs)
                except Exception:
                    log_event(
                        LOGGER,
                        logging.ERROR,
                        "operation_failed",
                        operation=operation_name,
                        correlation_id=correlation_id,
                        duration_ms=_elapsed_ms(start),
                        exc_info=True,
                    )
                    raise
                log_event(
                    LOGGER,
                    logging.INFO,
                    "operation_completed",
                    operation=operation_name,
                    correlation_id=correlation_id,
                    duration_ms=_elapsed_ms(start),
                )
                return result

        return wrapper

    return decorator


__all__ = ["instrument_operation"]
