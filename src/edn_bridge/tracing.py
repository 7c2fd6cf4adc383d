"""Optional per-call observers for intermediate conversion values."""

import logging
from typing import Any, Callable, List, Optional
from .types import TraceEvent


Tracer = Callable[[str, Any], None]


def emit(tracer: Optional[Tracer], stage: str, value: Any) -> None:
    """Send ``value`` to ``tracer`` if one is attached."""
    if tracer is not None:
        tracer(stage, value)


class LoggingTracer:
    """Tracer that writes each stage to a logger at DEBUG level."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def __call__(self, stage: str, value: Any) -> None:
        self.logger.debug(f"[{stage}] {value!r}")


class RecordingTracer:
    """Tracer that keeps every event in memory."""

    def __init__(self):
        self.events: List[TraceEvent] = []

    def __call__(self, stage: str, value: Any) -> None:
        self.events.append(TraceEvent(stage=stage, value=value))

    @property
    def stages(self) -> List[str]:
        return [event.stage for event in self.events]

    def values_for(self, stage: str) -> List[Any]:
        return [event.value for event in self.events if event.stage == stage]
