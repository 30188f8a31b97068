from collections.abc import Sequence

from loguru import logger

from loadwatch.utils.datetime import epoch_millis_to_iso


def resolve_timestamp(request_timestamps: Sequence[float]) -> str | None:
    """
    Return the timestamp shared by every metric of a report.

    This is the latest request timestamp of the interval (epoch milliseconds)
    as an ISO 8601 string, or None when the report observed no request.
    """
    if not request_timestamps:
        logger.debug("Report has no request timestamps")
        return None

    return epoch_millis_to_iso(max(request_timestamps))
