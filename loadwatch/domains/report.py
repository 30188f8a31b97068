from collections.abc import Mapping
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

# Order of the fields inside a raw entry tuple
_ENTRY_FIELDS = ("timestamp", "request_id", "latency_nanos", "status_code")

# Attribute names a report object may expose, camelCase first then load-tester internals
_PAYLOAD_ATTRIBUTES = (
    "entries",
    "_entries",
    "latencies",
    "_latencies",
    "requestTimestamps",
    "_requestTimestamps",
    "errors",
    "_errors",
)


class RequestEntry(BaseModel):
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    timestamp: float
    request_id: str
    latency_nanos: float
    status_code: int

    @model_validator(mode="before")
    @classmethod
    def from_tuple(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            if len(data) != len(_ENTRY_FIELDS):
                raise ValueError(
                    f"Report entry must have {len(_ENTRY_FIELDS)} elements, got {len(data)}"
                )
            return dict(zip(_ENTRY_FIELDS, data))
        return data


class PerformanceReport(BaseModel):
    """
    Snapshot of the requests observed during one reporting interval.

    Built once per interval by the load generator and consumed, read-only,
    by the reporting pipeline.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    entries: tuple[RequestEntry, ...] = Field(
        default=(), validation_alias=AliasChoices("entries", "_entries")
    )
    latencies: tuple[float, ...] = Field(
        default=(), validation_alias=AliasChoices("latencies", "_latencies")
    )
    request_timestamps: tuple[float, ...] = Field(
        default=(),
        validation_alias=AliasChoices(
            "request_timestamps", "requestTimestamps", "_requestTimestamps"
        ),
    )
    errors: dict[str, int] = Field(
        default_factory=dict, validation_alias=AliasChoices("errors", "_errors")
    )

    @classmethod
    def from_payload(cls, payload: Any) -> "PerformanceReport":
        """Build a report from a mapping or from an object exposing report attributes."""
        if isinstance(payload, cls):
            return payload
        if isinstance(payload, Mapping):
            return cls.model_validate(dict(payload))

        fields = {
            name: getattr(payload, name)
            for name in _PAYLOAD_ATTRIBUTES
            if getattr(payload, name, None) is not None
        }
        return cls.model_validate(fields)
