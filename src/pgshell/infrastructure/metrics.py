"""Prometheus metrics for the console."""

from __future__ import annotations

from prometheus_client import (
    Counter,
    Histogram,
    Info,
    start_http_server,
    REGISTRY,
    CollectorRegistry,
)


class MetricsRegistry:
    """Registry of all console metrics."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize metrics registry."""
        self._registry = registry or REGISTRY

        # Query metrics
        self.queries_total = Counter(
            "pgshell_queries_total",
            "Total number of statements executed",
            ["kind", "status"],  # kind: read, write; status: success, error
            registry=self._registry,
        )

        self.query_latency_seconds = Histogram(
            "pgshell_query_latency_seconds",
            "Statement latency in seconds, including rendering",
            ["kind"],
            buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
            registry=self._registry,
        )

        # Connection metrics
        self.connection_attempts_total = Counter(
            "pgshell_connection_attempts_total",
            "Total connection attempts",
            ["status"],  # success, failure
            registry=self._registry,
        )

        # Server control metrics
        self.server_starts_total = Counter(
            "pgshell_server_starts_total",
            "Total attempts to start the local server",
            ["status"],  # success, failure
            registry=self._registry,
        )

        self.info = Info(
            "pgshell",
            "Console information",
            registry=self._registry,
        )

    @property
    def registry(self) -> CollectorRegistry:
        return self._registry


# Global metrics registry
_metrics: MetricsRegistry | None = None


def setup_metrics(port: int = 8001, registry: CollectorRegistry | None = None) -> MetricsRegistry:
    """
    Set up Prometheus metrics server.

    Args:
        port: Port for the metrics HTTP server
        registry: Optional custom registry

    Returns:
        The metrics registry
    """
    global _metrics
    _metrics = MetricsRegistry(registry)

    from pgshell import __version__
    _metrics.info.info({
        "version": __version__,
    })

    # Start HTTP server for Prometheus scraping
    start_http_server(port, registry=registry or REGISTRY)

    return _metrics


def get_metrics() -> MetricsRegistry:
    """Get the global metrics registry."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsRegistry()
    return _metrics
