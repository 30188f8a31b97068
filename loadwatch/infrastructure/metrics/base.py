from abc import ABC, abstractmethod
from collections.abc import Sequence

from loadwatch.domains.metric import MetricDatum


class MetricsSink(ABC):
    @abstractmethod
    async def put_metric_data(self, namespace: str, metric_data: Sequence[MetricDatum]) -> None:
        """Submit a batch of metric data under a namespace"""
        pass
