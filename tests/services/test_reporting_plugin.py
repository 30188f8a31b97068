import unittest
import asyncio
from unittest.mock import patch, MagicMock, AsyncMock

from loadwatch.core.exceptions import NamespaceEmptyError, PluginStateError
from loadwatch.domains.metric import Dimension, MetricUnit
from loadwatch.domains.report import PerformanceReport
from loadwatch.infrastructure.events import ReportEventSource
from loadwatch.services.reporting_plugin import PluginState, ReportingPlugin, create_plugin

SCRIPT_CONFIG = {"plugins": {"cloudwatch": {"namespace": "ns1", "region": "us-east-1"}}}


def _report(**kwargs) -> PerformanceReport:
    payload = {
        "entries": [(500, "r1", 2_000_000, 200)],
        "latencies": [2_000_000],
        "requestTimestamps": [500],
        "errors": {},
    }
    payload.update(kwargs)
    return PerformanceReport.from_payload(payload)


class TestReportingPluginLifecycle(unittest.TestCase):
    def test_construction_validates_config(self):
        plugin = ReportingPlugin(SCRIPT_CONFIG, sink=AsyncMock())

        self.assertEqual(plugin.state, PluginState.validated)
        self.assertEqual(plugin.config.namespace, "ns1")
        self.assertEqual(plugin.config.region, "us-east-1")

    def test_invalid_config_aborts_construction(self):
        config = {"plugins": {"cloudwatch": {"namespace": "", "region": "us-east-1"}}}

        with self.assertRaises(NamespaceEmptyError):
            ReportingPlugin(config, sink=AsyncMock())

    @patch("loadwatch.services.reporting_plugin.create_sink")
    def test_default_sink_uses_configured_region(self, mock_create_sink):
        mock_sink = MagicMock()
        mock_create_sink.return_value = mock_sink

        plugin = ReportingPlugin(SCRIPT_CONFIG)

        mock_create_sink.assert_called_once_with("us-east-1")
        self.assertEqual(plugin.sink, mock_sink)

    @patch("loadwatch.services.reporting_plugin.logger")
    def test_activate_subscribes_handler(self, mock_logger):
        source = ReportEventSource()
        plugin = ReportingPlugin(SCRIPT_CONFIG, sink=AsyncMock())

        plugin.activate(source)

        self.assertEqual(plugin.state, PluginState.active)
        self.assertEqual(source.subscriber_count, 1)
        mock_logger.info.assert_called_once_with("CloudWatch reporting active for namespace ns1")

    def test_activate_twice_fails(self):
        source = ReportEventSource()
        plugin = create_plugin(SCRIPT_CONFIG, source, sink=AsyncMock())

        with self.assertRaises(PluginStateError):
            plugin.activate(source)
        self.assertEqual(source.subscriber_count, 1)

    def test_create_plugin(self):
        source = ReportEventSource()
        sink = AsyncMock()

        plugin = create_plugin(SCRIPT_CONFIG, source, sink=sink)

        self.assertEqual(plugin.state, PluginState.active)
        self.assertIs(plugin.sink, sink)


class TestReportingPluginReports(unittest.TestCase):
    def setUp(self):
        self.sink = AsyncMock()
        self.source = ReportEventSource()
        self.plugin = create_plugin(SCRIPT_CONFIG, self.source, sink=self.sink)

    def _publish(self, *payloads):
        async def run_test():
            for payload in payloads:
                await self.source.publish(payload)
            await self.plugin.drain()

        asyncio.run(run_test())

    def test_end_to_end_single_entry(self):
        """Test one entry at 2ms with status 200 and no error"""
        self._publish(_report())

        self.sink.put_metric_data.assert_awaited_once()
        namespace, metric_data = self.sink.put_metric_data.call_args[0]
        self.assertEqual(namespace, "ns1")
        self.assertEqual(
            [(d.metric_name, d.value, d.unit) for d in metric_data],
            [
                ("AverageLatency", 2.0, MetricUnit.MILLISECONDS),
                ("2XX", 1, MetricUnit.NONE),
                ("Error", 0, MetricUnit.NONE),
            ],
        )
        for datum in metric_data:
            self.assertEqual(datum.timestamp, "1970-01-01T00:00:00.500Z")
            self.assertEqual(datum.dimensions, ())

    def test_configured_dimensions_are_attached(self):
        config = {
            "plugins": {
                "cloudwatch": {
                    "namespace": "ns1",
                    "region": "us-east-1",
                    "dimensions": {"env": "prod", "scenario": "checkout"},
                }
            }
        }
        source = ReportEventSource()
        sink = AsyncMock()
        plugin = create_plugin(config, source, sink=sink)

        async def run_test():
            await source.publish(_report())
            await plugin.drain()

        asyncio.run(run_test())

        _, metric_data = sink.put_metric_data.call_args[0]
        expected = (
            Dimension(name="env", value="prod"),
            Dimension(name="scenario", value="checkout"),
        )
        for datum in metric_data:
            self.assertEqual(datum.dimensions, expected)

    def test_empty_entries_are_skipped(self):
        self._publish(_report(entries=[], latencies=[]))

        self.sink.put_metric_data.assert_not_called()

    @patch("loadwatch.services.reporting_plugin.logger")
    def test_missing_timestamp_is_skipped(self, mock_logger):
        self._publish(_report(requestTimestamps=[]))

        self.sink.put_metric_data.assert_not_called()
        mock_logger.warning.assert_called_once_with(
            "Failed to get timestamp value, skipping report"
        )

    @patch("loadwatch.services.reporting_plugin.logger")
    def test_sink_failure_is_logged_and_processing_continues(self, mock_logger):
        self.sink.put_metric_data.side_effect = [RuntimeError("throttled"), None]

        self._publish(_report(), _report())

        self.assertEqual(self.sink.put_metric_data.await_count, 2)
        mock_logger.error.assert_called_once_with(
            "Error reporting metrics to CloudWatch via put_metric_data: throttled"
        )
        self.assertEqual(self.plugin.pending_submissions, 0)

    def test_submission_is_not_awaited_by_the_handler(self):
        """Test a slow sink does not block the next report"""
        submissions = []

        async def run_test():
            gate = asyncio.Event()

            async def slow_put(namespace, metric_data):
                submissions.append(namespace)
                await gate.wait()

            self.sink.put_metric_data.side_effect = slow_put

            await self.source.publish(_report())
            await self.source.publish(_report())
            self.assertEqual(self.plugin.pending_submissions, 2)

            gate.set()
            await self.plugin.drain()

        asyncio.run(run_test())

        self.assertEqual(submissions, ["ns1", "ns1"])
        self.assertEqual(self.plugin.pending_submissions, 0)

    def test_reports_from_load_generator_stats(self):
        """Test the underscored attribute names of the stats object"""
        self._publish(
            {
                "_entries": [(100, "a", 1_000_000, 200), (300, "b", 3_000_000, 404)],
                "_latencies": [1_000_000, 3_000_000],
                "_requestTimestamps": [100, 300],
                "_errors": {"ETIMEDOUT": 2, "ECONNRESET": 1},
            }
        )

        _, metric_data = self.sink.put_metric_data.call_args[0]
        self.assertEqual(
            [(d.metric_name, d.value) for d in metric_data],
            [("AverageLatency", 2.0), ("2XX", 1), ("4XX", 1), ("Error", 3)],
        )
        self.assertEqual(metric_data[0].timestamp, "1970-01-01T00:00:00.300Z")


if __name__ == "__main__":
    unittest.main()
