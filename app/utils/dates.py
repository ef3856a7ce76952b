from datetime import datetime, timezone


def utc_now() -> datetime:
    # Siempre con zona horaria: sqlmodel rechaza datetimes "naive"
    return datetime.now(timezone.utc)
