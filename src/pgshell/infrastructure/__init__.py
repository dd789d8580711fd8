"""Infrastructure layer - cross-cutting concerns."""

from pgshell.infrastructure.config import Config, get_config
from pgshell.infrastructure.logging import setup_logging, get_logger
from pgshell.infrastructure.metrics import setup_metrics, get_metrics, MetricsRegistry
from pgshell.infrastructure.terminal import resolve_clear_screen
from pgshell.infrastructure.tracing import setup_tracing, get_tracer, trace_span

__all__ = [
    "Config",
    "get_config",
    "setup_logging",
    "get_logger",
    "setup_metrics",
    "get_metrics",
    "MetricsRegistry",
    "resolve_clear_screen",
    "setup_tracing",
    "get_tracer",
    "trace_span",
]
