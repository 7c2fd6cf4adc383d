"""Tests for the performance profiler."""

import pytest
from edn_bridge.profiler import PerformanceProfiler


class TestPerformanceProfiler:
    """Tests for PerformanceProfiler class."""
    
    def setup_method(self):
        """Set up test fixtures."""
        self.profiler = PerformanceProfiler()
    
    def test_empty_summary(self):
        """Test summary before anything is profiled."""
        assert self.profiler.get_performance_summary() == {"total_operations": 0}
    
    def test_profile_operation(self):
        """Test a successful block is recorded."""
        with self.profiler.profile_operation("flatten", input_size=10) as session:
            session["output_size"] = 5
        
        summary = self.profiler.get_performance_summary()
        assert summary["total_operations"] == 1
        assert summary["failed_operations"] == 0
        assert summary["total_input_bytes"] == 10
        assert summary["total_output_bytes"] == 5
        assert summary["peak_memory_mb"] > 0
        assert summary["operations"][0]["duration"] >= 0
    
    def test_failed_operation_is_recorded(self):
        """Test an exception still produces metrics and propagates."""
        with pytest.raises(RuntimeError):
            with self.profiler.profile_operation("pretty", input_size=3):
                raise RuntimeError("boom")
        
        assert self.profiler.metrics_history[0].succeeded is False
    
    def test_reset(self):
        """Test metrics can be cleared."""
        with self.profiler.profile_operation("flatten"):
            pass
        self.profiler.reset()
        
        assert self.profiler.metrics_history == []
