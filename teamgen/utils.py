"""
teamgen/utils.py - Hàm tiện ích dùng chung
"""
from datetime import datetime, timezone


def utc_isoformat(dt: datetime):
    """ISO-8601 kèm offset UTC. Giá trị đọc từ DB không có tzinfo nhưng luôn là UTC."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat()
