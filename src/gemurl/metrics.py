"""Per-tool call metrics.

Counts calls, failures and latencies for every MCP tool so health_check can
report them.
"""

import asyncio
import time
from dataclasses import dataclass, field


@dataclass
class ToolMetrics:
    """Metrics for a single tool.

    All latency times are stored as milliseconds.
    """

    tool: str
    count: int = 0
    errors: int = 0
    times: list[float] = field(default_factory=list)

    def avg_ms(self) -> float:
        """Calculate average latency in milliseconds."""
        return sum(self.times) / len(self.times) if self.times else 0.0

    def to_dict(self) -> dict:
        """Convert metrics to dictionary format.

        Returns:
            Dictionary representation of metrics suitable for JSON serialization
        """
        return {
            "tool": self.tool,
            "count": self.count,
            "avg_ms": round(self.avg_ms(), 3),
            "errors": self.errors,
        }


class MetricsCollector:
    """Metrics collector shared by all tools.

    Uses asyncio.Lock for safe access from concurrent tool calls.
    """

    def __init__(self) -> None:
        self._metrics: dict[str, ToolMetrics] = {}
        self._start_time = time.time()
        self._lock = asyncio.Lock()

    async def record(self, tool: str, duration_ms: float, success: bool) -> None:
        """Record one tool call.

        Args:
            tool: Tool name (e.g. "resolve_url")
            duration_ms: Duration in milliseconds
            success: Whether the call returned a success response

        Raises:
            ValueError: If tool is empty
        """
        if not tool:
            raise ValueError("Tool name must not be empty")

        async with self._lock:
            metrics = self._metrics.setdefault(tool, ToolMetrics(tool))
            metrics.count += 1
            metrics.times.append(duration_ms)
            if not success:
                metrics.errors += 1

    def get_tool_metrics(self, tool: str) -> ToolMetrics | None:
        """Get metrics for one tool, or None if it was never called."""
        return self._metrics.get(tool)

    def get_all_metrics(self) -> list[ToolMetrics]:
        """Get metrics for all tools that have been called, sorted by name."""
        return sorted(self._metrics.values(), key=lambda m: m.tool)

    def uptime_seconds(self) -> float:
        """Time elapsed since collector initialization."""
        return time.time() - self._start_time


_collector: MetricsCollector | None = None


def get_metrics_collector() -> MetricsCollector:
    """Get the process-wide collector, creating it on first use."""
    global _collector
    if _collector is None:
        _collector = MetricsCollector()
    return _collector


def reset_metrics_collector() -> None:
    """Drop the process-wide collector (for testing only)."""
    global _collector
    _collector = None
