"""工具函数模块

记录字段读取与数值/日期解析。上游数据可能是 ORM 对象、pydantic 记录或 JSON 字典，
这里统一按字段名读取；无法解析的数值一律按 0 处理，不抛异常。
"""

import logging
import math
from collections.abc import Mapping
from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

logger = logging.getLogger(__name__)


def get_field(record: Any, name: str, default: Any = None) -> Any:
    """从字典或对象上读取字段，缺失时返回 default"""
    if record is None:
        return default
    if isinstance(record, Mapping):
        return record.get(name, default)
    return getattr(record, name, default)


def is_present(value: Any) -> bool:
    """None 和空字符串视为缺失"""
    if value is None:
        return False
    if isinstance(value, str) and not value.strip():
        return False
    return True


def parse_decimal(value: Any) -> float:
    """把十进制字符串或数字解析为 float

    缺失、非数字、NaN/Inf 均返回 0.0
    """
    if not is_present(value) or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float, Decimal)):
        number = float(value)
    else:
        try:
            number = float(Decimal(str(value).strip()))
        except (InvalidOperation, ValueError):
            logger.debug("无法解析的数值字段 %r，按 0 处理", value)
            return 0.0
    if math.isnan(number) or math.isinf(number):
        logger.debug("非有限数值 %r，按 0 处理", value)
        return 0.0
    return number


def parse_int(value: Any) -> Optional[int]:
    """解析整数，失败返回 None"""
    if not is_present(value) or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        try:
            number = float(str(value).strip())
        except ValueError:
            return None
        if math.isnan(number) or math.isinf(number):
            return None
        return int(number)


def to_datetime(value: Any) -> Optional[datetime]:
    """把 datetime/date/ISO 字符串转换为 datetime，无法识别时返回 None"""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, datetime.min.time())
    if isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            logger.debug("无法解析的时间字段 %r", value)
            return None
    return None


def to_date(value: Any) -> Optional[date]:
    """取日期部分（时分秒归零）"""
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    dt = to_datetime(value)
    return dt.date() if dt else None


def to_naive_utc(dt: datetime) -> datetime:
    """带时区的时间换算为 UTC 后去掉时区，便于与无时区时间比较"""
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc).replace(tzinfo=None)
