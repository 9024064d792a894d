from datetime import date, datetime

from rolltrack.core.filters import OrderFilter, RollFilter, filter_orders, filter_rolls


def roll(roll_id, stage="film", customer_id="CID001", po_id=1, created_at=None, **extra):
    record = {
        "roll_id": roll_id,
        "roll_number": f"PO-ORD001-{po_id}-R{roll_id:03d}",
        "production_order_id": po_id,
        "production_order_number": f"PO-ORD001-{po_id}",
        "order_number": "ORD001",
        "customer_id": customer_id,
        "customer_name": "Gulf Packaging",
        "customer_name_ar": None,
        "item_name": "T-shirt bag",
        "item_name_ar": None,
        "stage": stage,
        "weight_kg": "40.0",
        "created_at": created_at or datetime(2025, 3, 10, 9, 0),
    }
    record.update(extra)
    return record


ROLLS = [
    roll(1, "film", created_at=datetime(2025, 3, 1, 8, 0)),
    roll(2, "printing", customer_id="CID002", customer_name="Desert Foods", created_at=datetime(2025, 3, 5, 23, 30)),
    roll(3, "cutting", po_id=2, created_at=datetime(2025, 3, 10, 12, 0)),
    roll(4, "done", po_id=2, item_name="Garbage bag", item_name_ar="أكياس قمامة", created_at=datetime(2025, 3, 15, 6, 0)),
    roll(5, "film", customer_id="CID002", customer_name="Desert Foods", created_at=datetime(2025, 3, 20, 17, 45)),
]


def ids(rolls):
    return [r["roll_id"] for r in rolls]


def test_empty_filter_returns_everything_in_order():
    assert ids(filter_rolls(ROLLS, RollFilter())) == [1, 2, 3, 4, 5]
    assert ids(filter_rolls(ROLLS)) == [1, 2, 3, 4, 5]


def test_all_sentinel_never_excludes():
    criteria = RollFilter(stage="all", customer_id="all", production_order_id="all", search="")
    assert ids(filter_rolls(ROLLS, criteria)) == [1, 2, 3, 4, 5]


def test_search_is_case_insensitive_and_spans_fields():
    assert ids(filter_rolls(ROLLS, RollFilter(search="desert"))) == [2, 5]
    assert ids(filter_rolls(ROLLS, RollFilter(search="R003"))) == [3]
    assert ids(filter_rolls(ROLLS, RollFilter(search="po-ord001-2"))) == [3, 4]
    assert ids(filter_rolls(ROLLS, RollFilter(search="قمامة"))) == [4]
    assert ids(filter_rolls(ROLLS, RollFilter(search="ord001"))) == [1, 2, 3, 4, 5]
    assert filter_rolls(ROLLS, RollFilter(search="nothing-matches")) == []


def test_stage_customer_and_production_order_filters():
    assert ids(filter_rolls(ROLLS, RollFilter(stage="film"))) == [1, 5]
    assert ids(filter_rolls(ROLLS, RollFilter(customer_id="CID002"))) == [2, 5]
    assert ids(filter_rolls(ROLLS, RollFilter(production_order_id="2"))) == [3, 4]
    assert ids(filter_rolls(ROLLS, RollFilter(production_order_id=2))) == [3, 4]
    assert filter_rolls(ROLLS, RollFilter(production_order_id="abc")) == []


def test_filters_combine_with_and():
    criteria = RollFilter(search="desert", stage="film")
    assert ids(filter_rolls(ROLLS, criteria)) == [5]
    criteria = RollFilter(customer_id="CID001", production_order_id=2, stage="done")
    assert ids(filter_rolls(ROLLS, criteria)) == [4]


def test_date_bounds_are_day_inclusive():
    criteria = RollFilter(start_date=date(2025, 3, 5), end_date=date(2025, 3, 15))
    assert ids(filter_rolls(ROLLS, criteria)) == [2, 3, 4]


def test_open_date_bounds():
    assert ids(filter_rolls(ROLLS, RollFilter(start_date=date(2025, 3, 10)))) == [3, 4, 5]
    assert ids(filter_rolls(ROLLS, RollFilter(end_date=date(2025, 3, 5)))) == [1, 2]


def test_datetime_bounds_compare_instants():
    criteria = RollFilter(start_date=datetime(2025, 3, 10, 12, 0), end_date=datetime(2025, 3, 15, 5, 59))
    assert ids(filter_rolls(ROLLS, criteria)) == [3]


def test_rolls_without_creation_date_excluded_only_by_date_filters():
    rolls = ROLLS + [roll(6, created_at=None)]
    rolls[-1]["created_at"] = None
    assert 6 in ids(filter_rolls(rolls, RollFilter(stage="film")))
    assert 6 not in ids(filter_rolls(rolls, RollFilter(start_date=date(2025, 1, 1))))


def test_filter_is_idempotent():
    for criteria in (
        RollFilter(),
        RollFilter(search="desert"),
        RollFilter(stage="film", customer_id="CID002"),
        RollFilter(start_date=date(2025, 3, 5), production_order_id="2"),
    ):
        once = filter_rolls(ROLLS, criteria)
        assert filter_rolls(once, criteria) == once


def test_input_is_not_mutated():
    rolls = list(ROLLS)
    filter_rolls(rolls, RollFilter(stage="cutting"))
    assert ids(rolls) == [1, 2, 3, 4, 5]


def test_empty_or_missing_collection():
    assert filter_rolls([], RollFilter(stage="film")) == []
    assert filter_rolls(None, RollFilter()) == []


ORDERS = [
    {"id": 1, "order_number": "ORD001", "customer_id": "CID001", "status": "waiting"},
    {"id": 2, "order_number": "ORD002", "customer_id": "CID002", "status": "in_production"},
    {"id": 3, "order_number": "ORD003", "customer_id": "CID001", "status": "waiting", "customer_name": "Gulf Packaging"},
]
CUSTOMERS = [
    {"id": "CID001", "name": "Gulf Packaging", "name_ar": "الخليج للتغليف"},
    {"id": "CID002", "name": "Desert Foods", "name_ar": None},
]


def test_order_filter_by_status_and_search():
    assert [o["id"] for o in filter_orders(ORDERS, OrderFilter(status="waiting"))] == [1, 3]
    assert [o["id"] for o in filter_orders(ORDERS, OrderFilter(status="all"))] == [1, 2, 3]
    assert [o["id"] for o in filter_orders(ORDERS, OrderFilter(search="ord002"))] == [2]


def test_order_search_uses_customer_directory():
    assert [o["id"] for o in filter_orders(ORDERS, OrderFilter(search="desert"), CUSTOMERS)] == [2]
    assert [o["id"] for o in filter_orders(ORDERS, OrderFilter(search="الخليج"), CUSTOMERS)] == [1, 3]
    # without the directory only the denormalized name on the order is searchable
    assert [o["id"] for o in filter_orders(ORDERS, OrderFilter(search="gulf"))] == [3]


def test_string_date_bounds_are_whole_days():
    criteria = RollFilter(start_date="2025-03-05", end_date="2025-03-15")
    assert ids(filter_rolls(ROLLS, criteria)) == [2, 3, 4]
    rolls = [{"roll_id": 1, "created_at": "2025-03-10T09:00:00"}]
    assert ids(filter_rolls(rolls, RollFilter(start_date="2025-03-01"))) == [1]
    assert filter_rolls(rolls, RollFilter(end_date="2025-03-09")) == []


def test_string_datetime_bounds_compare_instants():
    criteria = RollFilter(start_date="2025-03-10T12:00:00", end_date="2025-03-15T05:59:00")
    assert ids(filter_rolls(ROLLS, criteria)) == [3]
    utc = RollFilter(start_date="2025-03-20T17:00:00Z")
    assert ids(filter_rolls(ROLLS, utc)) == [5]


def test_unparseable_date_bound_is_ignored():
    assert ids(filter_rolls(ROLLS, RollFilter(start_date="not-a-date", stage="film"))) == [1, 5]


def test_criteria_given_as_dict():
    assert ids(filter_rolls(ROLLS, {})) == [1, 2, 3, 4, 5]
    assert ids(filter_rolls(ROLLS, {"stage": "film", "start_date": "2025-03-02"})) == [5]
