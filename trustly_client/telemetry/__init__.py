"""
OpenTelemetry Integration Module

Provides tracing and metrics for signed API calls:
- tracer: tracer setup and per-call spans
- metrics: request/error counters and latency histograms
"""

from .metrics import increment_counter, record_latency, setup_metrics
from .tracer import create_span, current_trace_id, setup_tracer

__all__ = [
    "setup_tracer",
    "create_span",
    "current_trace_id",
    "setup_metrics",
    "increment_counter",
    "record_latency",
]
