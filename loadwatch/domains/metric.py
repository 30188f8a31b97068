from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict


class MetricUnit(StrEnum):
    """CloudWatch standard units used by the reporter."""

    MILLISECONDS = "Milliseconds"
    NONE = "None"


class Dimension(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    value: str

    def to_cloudwatch(self) -> dict[str, str]:
        return {"Name": self.name, "Value": self.value}


class MetricDatum(BaseModel):
    model_config = ConfigDict(frozen=True)

    metric_name: str
    dimensions: tuple[Dimension, ...] = ()
    # ISO-8601 string or epoch seconds
    timestamp: str | float
    value: float
    unit: MetricUnit

    def to_cloudwatch(self) -> dict[str, Any]:
        """Return the datum in the shape expected by `put_metric_data`."""
        return {
            "MetricName": self.metric_name,
            "Dimensions": [dimension.to_cloudwatch() for dimension in self.dimensions],
            "Timestamp": self.timestamp,
            "Value": self.value,
            "Unit": self.unit.value,
        }
