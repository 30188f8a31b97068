from collections.abc import Sequence

import boto3
from loguru import logger

from loadwatch.config.settings import settings
from loadwatch.domains.metric import MetricDatum
from loadwatch.utils.asyncio import run_async
from .base import MetricsSink


class CloudWatchMetricsSink(MetricsSink):
    def __init__(self, region: str):
        client_config = {"region_name": region}
        if settings.METRICS_AWS_ENDPOINT_URL:
            client_config["endpoint_url"] = settings.METRICS_AWS_ENDPOINT_URL

        self.cloudwatch = boto3.client("cloudwatch", **client_config)
        self.region = region

    async def put_metric_data(self, namespace: str, metric_data: Sequence[MetricDatum]) -> None:
        if not metric_data:
            return

        payload = [datum.to_cloudwatch() for datum in metric_data]
        batch_size = settings.METRICS_MAX_BATCH_SIZE

        for i in range(0, len(payload), batch_size):
            batch = payload[i : i + batch_size]
            await run_async(
                lambda b=batch: self.cloudwatch.put_metric_data(Namespace=namespace, MetricData=b)
            )

        logger.debug(f"Sent {len(payload)} metrics to CloudWatch namespace {namespace}")
