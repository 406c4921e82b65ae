"""Logging helpers for description assembly."""
from __future__ import annotations

import logging
import uuid
from contextlib import contextmanager
from dataclasses import dataclass, field
from time import monotonic
from typing import Dict, Iterator, Mapping, Optional

import contextvars


_DESCRIBE_CONTEXT: contextvars.ContextVar["DescribeContext | None"] = contextvars.ContextVar(
    "descriptions_describe_context", default=None
)


@contextmanager
def scoped_timer(
    logger: logging.Logger, message: str, *, extra: Optional[Dict[str, object]] = None
) -> Iterator[None]:
    start = monotonic()
    try:
        yield
    finally:
        elapsed = monotonic() - start
        logger.debug("%s", message, extra={"duration_s": elapsed, **(extra or {})})


@dataclass(slots=True)
class DescribeContext:
    """Structured logging context for one description assembly."""

    name: str
    describe_id: str
    logger: logging.Logger
    metadata: Dict[str, object] = field(default_factory=dict)
    counters: Dict[str, int] = field(default_factory=dict)
    start_time: float = field(default_factory=monotonic)

    def extra(self, **values: object) -> Dict[str, object]:
        payload = {"describe_id": self.describe_id, "describe": self.name, **self.metadata}
        payload.update(values)
        return payload

    def log(
        self, level: int, message: str, *, extra: Optional[Mapping[str, object]] = None
    ) -> None:
        payload = self.extra(**(dict(extra) if extra else {}))
        self.logger.log(level, message, extra=payload)

    def increment(self, counter: str, amount: int = 1) -> int:
        value = self.counters.get(counter, 0) + amount
        self.counters[counter] = value
        self.logger.debug(
            "counter.%s", counter, extra=self.extra(counter=counter, value=value)
        )
        return value


@contextmanager
def describe_scope(
    name: str,
    *,
    logger: Optional[logging.Logger] = None,
    extra: Optional[Mapping[str, object]] = None,
) -> Iterator[DescribeContext]:
    """Open a structured logging scope around a single description assembly."""

    logger = logger or logging.getLogger("descriptions.describe")
    context = DescribeContext(
        name=name,
        describe_id=str(uuid.uuid4()),
        logger=logger,
        metadata=dict(extra or {}),
    )
    token = _DESCRIBE_CONTEXT.set(context)
    context.log(logging.DEBUG, "describe.start")
    try:
        with scoped_timer(logger, f"{name}.duration", extra=context.extra(event="timer")):
            yield context
    except Exception:
        logger.exception("describe.error", extra=context.extra())
        raise
    finally:
        duration = monotonic() - context.start_time
        context.log(
            logging.DEBUG,
            "describe.finish",
            extra={"duration_s": duration, "counters": dict(context.counters)},
        )
        _DESCRIBE_CONTEXT.reset(token)


def current_scope() -> Optional[DescribeContext]:
    """Return the active describe context if one is present."""

    return _DESCRIBE_CONTEXT.get(None)


def increment_counter(name: str, amount: int = 1) -> None:
    """Increment a named counter on the current describe scope."""

    context = current_scope()
    if context is not None:
        context.increment(name, amount)


__all__ = [
    "DescribeContext",
    "current_scope",
    "describe_scope",
    "increment_counter",
    "scoped_timer",
]
