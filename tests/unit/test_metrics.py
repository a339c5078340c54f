"""Tests for tool metrics collection."""

import asyncio

import pytest

from gemurl.metrics import (
    MetricsCollector,
    ToolMetrics,
    get_metrics_collector,
    reset_metrics_collector,
)


@pytest.fixture
def metrics_collector():
    """Create a fresh metrics collector for each test."""
    return MetricsCollector()


class TestToolMetrics:
    """Test ToolMetrics data structure."""

    def test_tool_metrics_initialization(self):
        """Test ToolMetrics initializes with zeros."""
        metrics = ToolMetrics(tool="resolve_url")
        assert metrics.count == 0
        assert metrics.errors == 0
        assert metrics.times == []
        assert metrics.avg_ms() == 0.0

    def test_avg_ms_with_data(self):
        """Test average latency calculation."""
        metrics = ToolMetrics(tool="resolve_url", times=[1.0, 2.0, 3.0])
        assert metrics.avg_ms() == 2.0

    def test_to_dict(self):
        """Test to_dict() output format."""
        metrics = ToolMetrics(tool="parse_url", count=2, errors=1, times=[0.5, 1.5])
        assert metrics.to_dict() == {
            "tool": "parse_url",
            "count": 2,
            "avg_ms": 1.0,
            "errors": 1,
        }


class TestMetricsCollector:
    """Test MetricsCollector."""

    @pytest.mark.asyncio
    async def test_record_success(self, metrics_collector):
        """Test recording a successful call."""
        await metrics_collector.record("resolve_url", 1.5, success=True)

        metrics = metrics_collector.get_tool_metrics("resolve_url")
        assert metrics is not None
        assert metrics.count == 1
        assert metrics.errors == 0
        assert metrics.times == [1.5]

    @pytest.mark.asyncio
    async def test_record_failure(self, metrics_collector):
        """Test recording a failed call counts an error."""
        await metrics_collector.record("encode_host", 0.1, success=False)
        assert metrics_collector.get_tool_metrics("encode_host").errors == 1

    @pytest.mark.asyncio
    async def test_record_empty_tool_name_raises(self, metrics_collector):
        """Test an empty tool name is rejected."""
        with pytest.raises(ValueError, match="must not be empty"):
            await metrics_collector.record("", 1.0, success=True)

    @pytest.mark.asyncio
    async def test_concurrent_records(self, metrics_collector):
        """Test concurrent records are all counted."""
        await asyncio.gather(
            *(metrics_collector.record("parse_url", 1.0, success=True) for _ in range(50))
        )
        assert metrics_collector.get_tool_metrics("parse_url").count == 50

    @pytest.mark.asyncio
    async def test_get_all_metrics_sorted(self, metrics_collector):
        """Test get_all_metrics() lists tools by name."""
        await metrics_collector.record("resolve_url", 1.0, success=True)
        await metrics_collector.record("decode_host", 1.0, success=True)

        tools = [m.tool for m in metrics_collector.get_all_metrics()]
        assert tools == ["decode_host", "resolve_url"]

    def test_unknown_tool_returns_none(self, metrics_collector):
        """Test get_tool_metrics() for a tool never called."""
        assert metrics_collector.get_tool_metrics("parse_url") is None

    def test_uptime_seconds(self, metrics_collector):
        """Test uptime is non-negative."""
        assert metrics_collector.uptime_seconds() >= 0.0


class TestGlobalCollector:
    """Test the process-wide collector accessors."""

    def test_get_metrics_collector_is_singleton(self):
        """Test get_metrics_collector() returns the same instance."""
        assert get_metrics_collector() is get_metrics_collector()

    def test_reset_metrics_collector(self):
        """Test reset_metrics_collector() drops the instance."""
        first = get_metrics_collector()
        reset_metrics_collector()
        assert get_metrics_collector() is not first
