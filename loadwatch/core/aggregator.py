from loguru import logger

from loadwatch.constants import (
    AVERAGE_LATENCY_METRIC,
    ERROR_METRIC,
    NANOSECONDS_PER_MILLISECOND,
    STATUS_CODE_BUCKETS,
)
from loadwatch.domains.metric import Dimension, MetricDatum, MetricUnit
from loadwatch.domains.report import PerformanceReport


def status_code_bucket(status_code: int) -> str:
    """Return the class label of a status code, e.g. `404` -> `4XX`."""
    return f"{str(status_code)[0]}XX"


def build_latency_metric_data(
    report: PerformanceReport, timestamp: str, dimensions: tuple[Dimension, ...]
) -> list[MetricDatum]:
    # Callers skip reports without entries, so the count is never zero
    total_nanos = sum(entry.latency_nanos for entry in report.entries)
    average_nanos = total_nanos / len(report.entries)

    return [
        MetricDatum(
            metric_name=AVERAGE_LATENCY_METRIC,
            dimensions=dimensions,
            timestamp=timestamp,
            value=average_nanos / NANOSECONDS_PER_MILLISECOND,
            unit=MetricUnit.MILLISECONDS,
        )
    ]


def build_status_code_metric_data(
    report: PerformanceReport, timestamp: str, dimensions: tuple[Dimension, ...]
) -> list[MetricDatum]:
    counts = dict.fromkeys(STATUS_CODE_BUCKETS, 0)

    for entry in report.entries:
        bucket = status_code_bucket(entry.status_code)
        if bucket not in counts:
            logger.debug(f"Ignoring status code {entry.status_code} of request {entry.request_id}")
            continue
        counts[bucket] += 1

    return [
        MetricDatum(
            metric_name=bucket,
            dimensions=dimensions,
            timestamp=timestamp,
            value=count,
            unit=MetricUnit.NONE,
        )
        for bucket, count in counts.items()
        if count > 0
    ]


def build_error_metric_data(
    report: PerformanceReport, timestamp: str, dimensions: tuple[Dimension, ...]
) -> list[MetricDatum]:
    # Always emitted, a zero count included
    error_count = sum(report.errors.values())

    return [
        MetricDatum(
            metric_name=ERROR_METRIC,
            dimensions=dimensions,
            timestamp=timestamp,
            value=error_count,
            unit=MetricUnit.NONE,
        )
    ]


def aggregate_metrics(
    report: PerformanceReport, timestamp: str, dimensions: tuple[Dimension, ...]
) -> list[MetricDatum]:
    """Build the latency, status code and error metrics of one report, in that order."""
    return [
        *build_latency_metric_data(report, timestamp, dimensions),
        *build_status_code_metric_data(report, timestamp, dimensions),
        *build_error_metric_data(report, timestamp, dimensions),
    ]
