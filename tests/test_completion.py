import pytest

from rolltrack.core.completion import (
    aggregate_completion,
    aggregate_completion_by_order,
    final_quantity,
    weighted_completion,
)


def po(order_id, qty, film=None, printing=None, cutting=None, final=None):
    return {
        "order_id": order_id,
        "quantity_kg": qty,
        "final_quantity_kg": final,
        "film_completion_percentage": film,
        "printing_completion_percentage": printing,
        "cutting_completion_percentage": cutting,
    }


ORDER = {"id": 1}


def test_zero_production_orders():
    result = aggregate_completion(ORDER, [])
    assert (result.film, result.printing, result.cutting) == (0, 0, 0)
    assert result.has_production_orders is False


def test_quantity_weighted_scenario():
    pos = [po(1, 10, film=100), po(1, 20, film=50), po(1, 70, film=0)]
    result = aggregate_completion(ORDER, pos)
    assert result.film == pytest.approx(20.0)
    assert result.printing == 0
    assert result.has_production_orders
    assert result.production_order_count == 3
    assert result.total_quantity_kg == pytest.approx(100.0)


def test_scenario_with_production_orders_already_scoped():
    pos = [
        {"quantity_kg": 10, "film_completion_percentage": 100},
        {"quantity_kg": 20, "film_completion_percentage": 50},
        {"quantity_kg": 70, "film_completion_percentage": 0},
    ]
    result = aggregate_completion({"id": 5}, pos)
    assert result.film == pytest.approx(20.0)
    assert result.has_production_orders
    assert result.production_order_count == 3


def test_unscoped_production_orders_mixed_with_other_orders():
    pos = [{"quantity_kg": 10, "film_completion_percentage": 100}, po(9, 90, film=0)]
    result = aggregate_completion({"id": 5}, pos)
    assert result.production_order_count == 1
    assert result.film == pytest.approx(100.0)


def test_equal_quantities_give_arithmetic_mean():
    pos = [po(1, 40, film=10, cutting=5), po(1, 40, film=20, cutting=50), po(1, 40, film=90, cutting=95)]
    result = aggregate_completion(ORDER, pos)
    assert result.film == pytest.approx((10 + 20 + 90) / 3)
    assert result.cutting == pytest.approx((5 + 50 + 95) / 3)


def test_scaling_quantities_leaves_result_unchanged():
    base = [po(1, 3, film=80, printing=40), po(1, 11, film=25, printing=10), po(1, 7, film=60)]
    scaled = [po(1, p["quantity_kg"] * 250, film=p["film_completion_percentage"],
                 printing=p["printing_completion_percentage"]) for p in base]
    a = aggregate_completion(ORDER, base)
    b = aggregate_completion(ORDER, scaled)
    assert b.film == pytest.approx(a.film)
    assert b.printing == pytest.approx(a.printing)


def test_final_quantity_preferred_over_requested():
    pos = [po(1, 100, film=100, final=300), po(1, 100, film=0)]
    assert aggregate_completion(ORDER, pos).film == pytest.approx(75.0)


def test_missing_percentage_still_counts_in_denominator():
    pos = [po(1, 50, film=100, printing=100), po(1, 50, film=100)]
    result = aggregate_completion(ORDER, pos)
    assert result.film == pytest.approx(100.0)
    assert result.printing == pytest.approx(50.0)


def test_decimal_strings_and_malformed_quantities():
    pos = [po(1, "10.00", film="100.00"), po(1, "abc", film="50"), po(1, None, film=100)]
    result = aggregate_completion(ORDER, pos)
    # only the first production order carries weight
    assert result.film == pytest.approx(100.0)
    assert result.production_order_count == 3


def test_zero_total_quantity_yields_zero():
    result = aggregate_completion(ORDER, [po(1, 0, film=100)])
    assert result.film == 0
    assert result.has_production_orders


def test_out_of_range_percentages_pass_through():
    result = aggregate_completion(ORDER, [po(1, 10, film=150), po(1, 10, film=-10)])
    assert result.film == pytest.approx(70.0)
    assert aggregate_completion(ORDER, [po(1, 10, film=130)]).film == pytest.approx(130.0)


def test_only_the_orders_production_orders_are_used():
    pos = [po(1, 10, film=100), po(2, 1000, film=0), po("1", 10, film=0)]
    assert aggregate_completion(ORDER, pos).film == pytest.approx(50.0)


def test_inputs_are_not_mutated():
    pos = [po(1, 10, film=100)]
    snapshot = [dict(p) for p in pos]
    aggregate_completion(ORDER, pos)
    assert pos == snapshot


def test_batch_aggregation_matches_single():
    orders = [{"id": 1}, {"id": 2}, {"id": 3}]
    pos = [po(1, 10, film=100), po(2, 30, film=10), po(1, 30, film=0), po(2, 10, film=50)]
    batch = aggregate_completion_by_order(orders, pos)
    for order in orders:
        single = aggregate_completion(order, pos)
        assert batch[order["id"]].film == pytest.approx(single.film)
    assert batch[3].has_production_orders is False


def test_weighted_completion_without_order_scope():
    result = weighted_completion([po(None, 1, cutting=100), po(None, 3, cutting=0)])
    assert result.cutting == pytest.approx(25.0)


def test_final_quantity_with_overrun():
    assert final_quantity(100, 5) == pytest.approx(105.0)
    assert final_quantity("200", "10") == pytest.approx(220.0)
    assert final_quantity(100, 0) == pytest.approx(100.0)
    # default overrun from settings
    assert final_quantity(100) == pytest.approx(105.0)
