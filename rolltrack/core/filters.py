"""卷材与订单筛选

所有筛选条件按 AND 组合；条件缺失或取值为 "all" 时不做限制。
筛选是稳定的：结果保持输入中的相对顺序，不修改输入。
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Any, Iterable, List, Optional, Union

from ..utils.helpers import get_field, parse_int, to_datetime, to_naive_utc

logger = logging.getLogger(__name__)

ALL = "all"

DateBound = Union[date, datetime]


def _active(value: Any) -> bool:
    """None、空字符串与 "all" 表示不限制"""
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip()) and value != ALL
    return True


def _contains(value: Any, term: str) -> bool:
    return value is not None and term in str(value).lower()


@dataclass(frozen=True)
class RollFilter:
    """卷材筛选条件

    start_date / end_date 为 date 或只含日期的字符串时按整天包含；为 datetime 时按时刻比较。
    """
    search: Optional[str] = None
    stage: Optional[str] = None
    customer_id: Optional[str] = None
    production_order_id: Optional[Union[int, str]] = None
    start_date: Optional[Union[DateBound, str]] = None
    end_date: Optional[Union[DateBound, str]] = None

    def is_empty(self) -> bool:
        return not any(
            _active(v)
            for v in (
                self.search,
                self.stage,
                self.customer_id,
                self.production_order_id,
                self.start_date,
                self.end_date,
            )
        )


# 自由文本搜索覆盖的字段；客户与品名同时匹配本地名和阿拉伯语名
ROLL_SEARCH_FIELDS = (
    "roll_number",
    "production_order_number",
    "order_number",
    "customer_name",
    "customer_name_ar",
    "item_name",
    "item_name_ar",
)


def _matches_search(roll: Any, search: Optional[str]) -> bool:
    if not search:
        return True
    term = search.lower()
    return any(_contains(get_field(roll, name), term) for name in ROLL_SEARCH_FIELDS)


def _after_start(created: datetime, bound: DateBound) -> bool:
    if isinstance(bound, datetime):
        return _comparable(created, bound) >= _comparable(bound, created)
    return created.date() >= bound


def _before_end(created: datetime, bound: DateBound) -> bool:
    if isinstance(bound, datetime):
        return _comparable(created, bound) <= _comparable(bound, created)
    return created.date() <= bound


def _comparable(value: datetime, other: datetime) -> datetime:
    # 有无时区混用时统一换算为无时区 UTC
    if (value.tzinfo is None) != (other.tzinfo is None):
        return to_naive_utc(value)
    return value


def normalize_bound(value: Any) -> Optional[DateBound]:
    """把筛选边界统一为 date 或 datetime

    只有日期部分的字符串（如 "2025-03-01"）视为整天；带时间的字符串按时刻比较。
    无法解析的边界视为不限制。
    """
    if not _active(value):
        return None
    if isinstance(value, (date, datetime)):
        return value
    text = str(value).strip()
    parsed = to_datetime(text)
    if parsed is None:
        logger.debug("无法解析的日期筛选条件 %r，忽略", value)
        return None
    if len(text) <= 10:
        return parsed.date()
    return parsed


def _matches_dates(roll: Any, start: Optional[DateBound], end: Optional[DateBound]) -> bool:
    if start is None and end is None:
        return True
    created = to_datetime(get_field(roll, "created_at"))
    if created is None:
        return False
    if start is not None and not _after_start(created, start):
        return False
    if end is not None and not _before_end(created, end):
        return False
    return True


def matches_roll(roll: Any, criteria: RollFilter) -> bool:
    """判断单个卷材是否满足全部筛选条件"""
    if not _matches_search(roll, criteria.search.strip() if criteria.search else None):
        return False
    if _active(criteria.stage) and get_field(roll, "stage") != criteria.stage:
        return False
    if _active(criteria.customer_id) and str(get_field(roll, "customer_id")) != str(criteria.customer_id):
        return False
    if _active(criteria.production_order_id):
        # 无法解析的编号不匹配任何卷材
        wanted = parse_int(criteria.production_order_id)
        if wanted is None or parse_int(get_field(roll, "production_order_id")) != wanted:
            return False
    return _matches_dates(roll, normalize_bound(criteria.start_date), normalize_bound(criteria.end_date))


def as_roll_filter(criteria: Union[RollFilter, Mapping, None]) -> Optional[RollFilter]:
    """接受 RollFilter 或字段同名的字典；字典中的未知键抛出 TypeError"""
    if criteria is None or isinstance(criteria, RollFilter):
        return criteria
    if isinstance(criteria, Mapping):
        return RollFilter(**criteria)
    raise TypeError(f"不支持的筛选条件类型: {type(criteria).__name__}")


def filter_rolls(
    rolls: Optional[Iterable[Any]], criteria: Union[RollFilter, Mapping, None] = None
) -> List[Any]:
    """返回满足条件的卷材，保持原有顺序"""
    criteria = as_roll_filter(criteria)
    if not rolls:
        return []
    if criteria is None or criteria.is_empty():
        return list(rolls)
    # 日期边界只解析一次
    criteria = replace(
        criteria,
        start_date=normalize_bound(criteria.start_date),
        end_date=normalize_bound(criteria.end_date),
    )
    return [roll for roll in rolls if matches_roll(roll, criteria)]


@dataclass(frozen=True)
class OrderFilter:
    """订单筛选条件：订单号/客户名搜索 + 状态"""
    search: Optional[str] = None
    status: Optional[str] = None


def _order_customer_names(order: Any, customers_by_id: dict) -> List[Any]:
    names = [get_field(order, "customer_name"), get_field(order, "customer_name_ar")]
    customer = customers_by_id.get(str(get_field(order, "customer_id")))
    if customer is not None:
        names.extend([get_field(customer, "name"), get_field(customer, "name_ar")])
    return names


def filter_orders(
    orders: Optional[Iterable[Any]],
    criteria: Optional[OrderFilter] = None,
    customers: Optional[Iterable[Any]] = None,
) -> List[Any]:
    """按订单号、客户名（含客户表中的名称）与状态筛选订单"""
    if not orders:
        return []
    if criteria is None:
        return list(orders)
    customers_by_id = {str(get_field(c, "id")): c for c in (customers or [])}
    term = criteria.search.strip().lower() if criteria.search else ""

    result = []
    for order in orders:
        if _active(criteria.status) and get_field(order, "status") != criteria.status:
            continue
        if term:
            candidates = [get_field(order, "order_number")] + _order_customer_names(order, customers_by_id)
            if not any(_contains(value, term) for value in candidates):
                continue
        result.append(order)
    return result
