"""
OpenTelemetry Metrics Collection

Counters and latency histograms for signed API calls. The client records
these instruments, all tagged with the JSON-RPC method:

- rpc.client.requests: calls started
- rpc.client.success: calls that returned a verified reply
- rpc.client.errors: calls that raised, tagged with the exception type
- rpc.client.latency: transport round trip in milliseconds
"""

import logging
from typing import Any, Dict, Optional

from opentelemetry import metrics
from opentelemetry.exporter.otlp.proto.grpc.metric_exporter import OTLPMetricExporter
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import MetricReader, PeriodicExportingMetricReader

logger = logging.getLogger(__name__)

METER_NAME = "trustly_client"

# name -> (description, unit)
CLIENT_COUNTERS = {
    "rpc.client.requests": ("Signed JSON-RPC calls started", "{call}"),
    "rpc.client.success": ("Signed JSON-RPC calls with a verified reply", "{call}"),
    "rpc.client.errors": ("Signed JSON-RPC calls that raised", "{call}"),
}
CLIENT_HISTOGRAMS = {
    "rpc.client.latency": ("Round trip time of signed JSON-RPC calls", "ms"),
}

_counters = {}
_histograms = {}


def setup_metrics(
    service_name: str,
    otlp_endpoint: str = "localhost:4317",
    export_interval_ms: int = 5000,
    reader: Optional[MetricReader] = None,
):
    """Install a meter provider and register the client instruments on it

    Args:
        service_name: Service name
        otlp_endpoint: OTLP receiver address, used when no reader is given
        export_interval_ms: Export interval of the OTLP reader in milliseconds
        reader: Metric reader to use instead of the OTLP exporter

    Returns:
        Meter: Meter the client instruments were created on
    """
    if reader is None:
        reader = PeriodicExportingMetricReader(
            OTLPMetricExporter(endpoint=otlp_endpoint),
            export_interval_millis=export_interval_ms
        )

    provider = MeterProvider(metric_readers=[reader])
    metrics.set_meter_provider(provider)
    meter = provider.get_meter(METER_NAME)

    # Instruments bound to an earlier provider would keep reporting there
    _counters.clear()
    _histograms.clear()
    for name, (description, unit) in CLIENT_COUNTERS.items():
        _counters[name] = meter.create_counter(name=name, description=description, unit=unit)
    for name, (description, unit) in CLIENT_HISTOGRAMS.items():
        _histograms[name] = meter.create_histogram(name=name, description=description, unit=unit)

    logger.info(f"OpenTelemetry metrics configured, service name: {service_name}, OTLP endpoint: {otlp_endpoint}")
    return meter


def _counter(name: str):
    if name not in _counters:
        description, unit = CLIENT_COUNTERS.get(name, (name, "1"))
        _counters[name] = metrics.get_meter(METER_NAME).create_counter(
            name=name, description=description, unit=unit
        )
    return _counters[name]


def _histogram(name: str):
    if name not in _histograms:
        description, unit = CLIENT_HISTOGRAMS.get(name, (name, "ms"))
        _histograms[name] = metrics.get_meter(METER_NAME).create_histogram(
            name=name, description=description, unit=unit
        )
    return _histograms[name]


def increment_counter(name: str, amount: int = 1, attributes: Dict[str, Any] = None):
    """Increment counter value"""
    _counter(name).add(amount, attributes or {})


def record_latency(name: str, value_ms: float, attributes: Dict[str, Any] = None):
    """Record a latency sample in milliseconds"""
    _histogram(name).record(value_ms, attributes or {})
