from datetime import datetime


def get_now() -> datetime:
    """Current local time. Routers depend on this so tests can pin the clock."""
    return datetime.now()
