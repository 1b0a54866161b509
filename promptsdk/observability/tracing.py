"""Minimal tracing primitives.

A ``Span`` times one API request and collects its attributes. Used as a
context manager it closes itself on exit and is emitted as a structured log
event on the ``promptsdk.trace`` logger, so it ends up wherever the host
application sends its logs:

    with Span('promptsdk.api.request', event='api.request') as span:
        span.set_attribute('http.method', 'GET')
        ...
"""

from __future__ import annotations

import json
import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import Any

trace_logger = logging.getLogger('promptsdk.trace')


def new_trace_id() -> str:
    return uuid.uuid4().hex


@dataclass
class Span:
    name: str
    event: str | None = None
    trace_id: str = field(default_factory=new_trace_id)
    span_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    start_ns: int = field(default_factory=time.perf_counter_ns)
    end_ns: int | None = None
    attributes: dict[str, Any] = field(default_factory=dict)

    def __enter__(self) -> Span:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            self.record_error(exc_type.__name__, str(exc))
        self.end()
        if self.event is not None:
            log_event(self.event, trace_id=self.trace_id, span=self)

    def set_attribute(self, key: str, value: Any) -> None:
        self.attributes[key] = value

    def record_error(self, error_type: str, message: str, status_code: int | None = None) -> None:
        """Mark the span as failed."""
        self.attributes['request.success'] = False
        self.attributes['error.type'] = error_type
        self.attributes['error.message'] = message
        if status_code is not None:
            self.attributes['http.status_code'] = status_code

    def end(self) -> None:
        # First call wins.
        if self.end_ns is None:
            self.end_ns = time.perf_counter_ns()

    @property
    def duration_ms(self) -> float | None:
        if self.end_ns is None:
            return None
        return (self.end_ns - self.start_ns) / 1_000_000.0

    def as_dict(self) -> dict[str, Any]:
        return {
            'name': self.name,
            'span_id': self.span_id,
            'duration_ms': self.duration_ms,
            'attributes': self.attributes,
        }


def log_event(event: str, *, trace_id: str, span: Span | None = None, **fields: Any) -> None:
    """Emit one JSON trace record at DEBUG level."""
    payload: dict[str, Any] = {'event': event, 'trace_id': trace_id, **fields}
    if span is not None:
        payload['span'] = span.as_dict()
    trace_logger.debug(json.dumps(payload, ensure_ascii=False, default=str))
