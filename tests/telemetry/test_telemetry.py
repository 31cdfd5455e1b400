"""
Tests for telemetry helpers
"""
import json
from unittest.mock import MagicMock, patch

import pytest
from opentelemetry.sdk.metrics.export import InMemoryMetricReader

from trustly_client.telemetry import metrics, tracer


def test_current_trace_id_outside_span():
    """Test no trace id is reported without an active span"""
    assert tracer.current_trace_id() is None


def test_create_span_is_context_manager():
    """Test spans can wrap a block without a configured provider"""
    with tracer.create_span("trustly.Test", {"rpc.method": "Test"}):
        pass


def test_setup_tracer_uses_given_exporter():
    """Test the tracer provider is installed with the exporter"""
    exporter = MagicMock()
    with patch.object(tracer.trace, "set_tracer_provider") as set_provider:
        result = tracer.setup_tracer("trustly-test", exporter=exporter)
    set_provider.assert_called_once()
    assert result is not None


@pytest.fixture
def metric_reader():
    """In-memory reader with the client instruments registered on it"""
    reader = InMemoryMetricReader()
    with patch.object(metrics.metrics, "set_meter_provider") as set_provider:
        metrics.setup_metrics("trustly-test", reader=reader)
    set_provider.assert_called_once()
    yield reader
    metrics._counters.clear()
    metrics._histograms.clear()


def _collected(reader):
    data = reader.get_metrics_data()
    return {
        metric.name: metric
        for resource_metrics in data.resource_metrics
        for scope_metrics in resource_metrics.scope_metrics
        for metric in scope_metrics.metrics
    }


class TestClientMetrics:
    """Tests for the rpc.client.* instruments"""

    def test_setup_registers_client_instruments(self, metric_reader):
        """Test every client instrument is created with its description and unit"""
        for name, (description, unit) in metrics.CLIENT_COUNTERS.items():
            assert metrics._counters[name].description == description
            assert metrics._counters[name].unit == unit
        latency = metrics._histograms["rpc.client.latency"]
        assert latency.description == "Round trip time of signed JSON-RPC calls"
        assert latency.unit == "ms"

    def test_recorded_values_reach_reader(self, metric_reader):
        """Test counters and latency samples are exported with their attributes"""
        metrics.increment_counter("rpc.client.requests", 1, {"rpc.method": "Refund"})
        metrics.increment_counter("rpc.client.requests", 2, {"rpc.method": "Refund"})
        metrics.record_latency("rpc.client.latency", 12.5, {"rpc.method": "Refund"})

        collected = _collected(metric_reader)
        requests = collected["rpc.client.requests"]
        assert requests.description == "Signed JSON-RPC calls started"
        point = list(requests.data.data_points)[0]
        assert point.value == 3
        assert dict(point.attributes) == {"rpc.method": "Refund"}
        latency_point = list(collected["rpc.client.latency"].data.data_points)[0]
        assert latency_point.count == 1
        assert latency_point.sum == 12.5

    def test_signed_call_records_metrics(self, metric_reader, mock_client, signed_reply, json_reply):
        """Test a successful call counts a request and a success"""

        def handler(request):
            params = json.loads(request.content)["params"]
            return json_reply(signed_reply("Void", params["UUID"], {"result": "1"}))

        mock_client(handler).void(OrderId="1")

        collected = _collected(metric_reader)
        assert list(collected["rpc.client.requests"].data.data_points)[0].value == 1
        assert list(collected["rpc.client.success"].data.data_points)[0].value == 1
