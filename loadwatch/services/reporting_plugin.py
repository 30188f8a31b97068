import asyncio
from enum import StrEnum, auto
from typing import Any, Set

from loguru import logger

from loadwatch.core.aggregator import aggregate_metrics
from loadwatch.core.config import validate_config
from loadwatch.core.dimensions import build_dimensions
from loadwatch.core.exceptions import PluginStateError
from loadwatch.core.timestamp import resolve_timestamp
from loadwatch.domains.metric import MetricDatum
from loadwatch.domains.report import PerformanceReport
from loadwatch.infrastructure.events import ReportEventSource
from loadwatch.infrastructure.metrics import MetricsSink, create_sink


class PluginState(StrEnum):
    """Plugin lifecycle state."""

    uninitialized = auto()
    validated = auto()
    active = auto()


class ReportingPlugin:
    """
    Turns interval reports into CloudWatch metrics.

    The configuration is validated on construction; a PluginConfigError
    aborts it. Once activated the plugin handles every published report and
    stays active for the lifetime of the process.
    """

    def __init__(self, script_config: Any, sink: MetricsSink | None = None):
        self.state = PluginState.uninitialized
        self.config = validate_config(script_config)
        self.sink = sink if sink is not None else create_sink(self.config.region)
        self.state = PluginState.validated
        self._pending: Set[asyncio.Task] = set()

    def activate(self, event_source: ReportEventSource) -> None:
        if self.state != PluginState.validated:
            raise PluginStateError(f"Cannot activate a plugin in state {self.state}")

        event_source.subscribe(self.handle_report)
        self.state = PluginState.active
        logger.info(f"CloudWatch reporting active for namespace {self.config.namespace}")

    async def handle_report(self, report: PerformanceReport) -> None:
        if not report.entries:
            return

        timestamp = resolve_timestamp(report.request_timestamps)
        if timestamp is None:
            logger.warning("Failed to get timestamp value, skipping report")
            return

        dimensions = build_dimensions(self.config.dimensions_mapping)
        metric_data = aggregate_metrics(report, timestamp, dimensions)
        self._submit(metric_data)

    def _submit(self, metric_data: list[MetricDatum]) -> None:
        """Schedule the submission without waiting for it to complete."""
        task = asyncio.create_task(self.sink.put_metric_data(self.config.namespace, metric_data))
        self._pending.add(task)
        task.add_done_callback(self._on_submitted)

    def _on_submitted(self, task: asyncio.Task) -> None:
        self._pending.discard(task)
        if task.cancelled():
            logger.warning("Metrics submission was cancelled")
            return

        error = task.exception()
        if error is not None:
            logger.error(f"Error reporting metrics to CloudWatch via put_metric_data: {error}")

    @property
    def pending_submissions(self) -> int:
        return len(self._pending)

    async def drain(self) -> None:
        """Wait for the submissions still in flight"""
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)


def create_plugin(
    script_config: Any,
    event_source: ReportEventSource,
    sink: MetricsSink | None = None,
) -> ReportingPlugin:
    """Validate the configuration and subscribe a new plugin to the event source."""
    plugin = ReportingPlugin(script_config, sink=sink)
    plugin.activate(event_source)
    return plugin
