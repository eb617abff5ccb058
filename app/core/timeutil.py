import pytz
from datetime import datetime

from app.core.config import settings

TZ = pytz.timezone(settings.TZ)

def now_br() -> datetime:
    return datetime.now(TZ)

def to_naive(dt: datetime) -> datetime:
    if dt.tzinfo:
        return dt.astimezone(TZ).replace(tzinfo=None)
    return dt
