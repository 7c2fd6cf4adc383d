"""Performance profiler for EDN Bridge operations."""

import time
import psutil
import logging
from typing import Dict, Any, Optional, List
from dataclasses import dataclass
from contextlib import contextmanager


@dataclass
class PerformanceMetrics:
    """Performance metrics for one conversion."""
    operation_name: str
    start_time: float
    end_time: float
    duration: float
    input_size: int
    output_size: int
    memory_start_mb: float
    memory_end_mb: float
    succeeded: bool


class PerformanceProfiler:
    """
    Profiler recording duration and process memory per operation.

    Attach one to an EdnConverter to time every conversion it runs.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the performance profiler.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.metrics_history: List[PerformanceMetrics] = []

    @contextmanager
    def profile_operation(self, operation_name: str, input_size: int = 0):
        """
        Context manager for profiling operations.

        The yielded session dict accepts an ``output_size`` entry which
        is recorded when the block exits.

        Args:
            operation_name: Name of the operation being profiled
            input_size: Size of input text in bytes
        """
        session = {"output_size": 0}
        start_time = time.perf_counter()
        start_memory = self._current_memory_mb()
        succeeded = False
        self.logger.debug(f"Started profiling: {operation_name}")
        try:
            yield session
            succeeded = True
        finally:
            end_time = time.perf_counter()
            metrics = PerformanceMetrics(
                operation_name=operation_name,
                start_time=start_time,
                end_time=end_time,
                duration=end_time - start_time,
                input_size=input_size,
                output_size=session["output_size"],
                memory_start_mb=start_memory,
                memory_end_mb=self._current_memory_mb(),
                succeeded=succeeded
            )
            self.metrics_history.append(metrics)
            self.logger.debug(f"Finished {operation_name} in {metrics.duration * 1000:.2f}ms "
                              f"({'ok' if succeeded else 'failed'})")

    def _current_memory_mb(self) -> float:
        process = psutil.Process()
        return process.memory_info().rss / 1024 / 1024

    def get_performance_summary(self) -> Dict[str, Any]:
        """
        Get summary of all performance metrics.

        Returns:
            Dictionary with performance summary
        """
        if not self.metrics_history:
            return {"total_operations": 0}

        total_duration = sum(m.duration for m in self.metrics_history)
        total_input = sum(m.input_size for m in self.metrics_history)
        total_output = sum(m.output_size for m in self.metrics_history)

        return {
            "total_operations": len(self.metrics_history),
            "failed_operations": sum(1 for m in self.metrics_history if not m.succeeded),
            "total_duration": total_duration,
            "total_input_bytes": total_input,
            "total_output_bytes": total_output,
            "peak_memory_mb": max(m.memory_end_mb for m in self.metrics_history),
            "operations": [
                {
                    "name": m.operation_name,
                    "duration": m.duration,
                    "input_size": m.input_size,
                    "output_size": m.output_size,
                    "succeeded": m.succeeded,
                }
                for m in self.metrics_history
            ]
        }

    def reset(self) -> None:
        """Forget all recorded metrics."""
        self.metrics_history.clear()
