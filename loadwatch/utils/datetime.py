from datetime import datetime, timedelta, timezone

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def epoch_millis_to_iso(epoch_millis: float) -> str:
    """Return the ISO 8601 UTC representation of an epoch timestamp in milliseconds.

    The result has millisecond precision and a `Z` suffix, e.g. `1970-01-01T00:00:00.300Z`.
    """
    date = _EPOCH + timedelta(milliseconds=epoch_millis)
    return date.isoformat(timespec="milliseconds").replace("+00:00", "Z")
