import json
from collections.abc import Sequence

from loguru import logger

from loadwatch.domains.metric import MetricDatum
from .base import MetricsSink


class StdoutMetricsSink(MetricsSink):
    async def put_metric_data(self, namespace: str, metric_data: Sequence[MetricDatum]) -> None:
        for datum in metric_data:
            logger.info(f"METRIC: {json.dumps({'namespace': namespace, **datum.to_cloudwatch()})}")
