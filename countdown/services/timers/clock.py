from datetime import datetime, timezone


def utcnow() -> datetime:
    """Current wall-clock instant as a naive UTC datetime.

    Naive values match what the DateTime columns store and hand back.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)
