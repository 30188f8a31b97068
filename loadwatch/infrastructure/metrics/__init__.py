from loadwatch.config.settings import settings
from .base import MetricsSink
from .cloudwatch import CloudWatchMetricsSink
from .stdout import StdoutMetricsSink


def create_sink(region: str) -> MetricsSink:
    """Build the sink selected by `METRICS_SINK` for the given region."""
    if settings.METRICS_SINK == "aws":
        return CloudWatchMetricsSink(region)
    return StdoutMetricsSink()


__all__ = ["MetricsSink", "CloudWatchMetricsSink", "StdoutMetricsSink", "create_sink"]
