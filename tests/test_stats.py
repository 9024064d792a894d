import pytest

from rolltrack.core.stats import summarize_orders, summarize_rolls


def test_total_weight_parses_decimal_strings_and_ignores_missing():
    stats = summarize_rolls([{"stage": "film", "weight_kg": "12.5"}, {"stage": "film"}])
    assert stats.total_weight == 12.5
    assert stats.total == 2


def test_every_stage_bucket_is_present():
    stats = summarize_rolls([{"stage": "printing", "weight_kg": "1"}])
    assert stats.by_stage == {"film": 0, "printing": 1, "cutting": 0, "done": 0, "archived": 0}


def test_empty_and_missing_collections_are_all_zero():
    for rolls in ([], None):
        stats = summarize_rolls(rolls)
        assert stats.total == 0
        assert stats.total_weight == 0
        assert set(stats.by_stage.values()) == {0}
        assert len(stats.by_stage) == 5


def test_malformed_weights_contribute_zero():
    rolls = [
        {"stage": "film", "weight_kg": "abc"},
        {"stage": "film", "weight_kg": ""},
        {"stage": "film", "weight_kg": 7.25},
        {"stage": "film", "weight_kg": "NaN"},
    ]
    assert summarize_rolls(rolls).total_weight == pytest.approx(7.25)


def test_unknown_stage_counts_toward_total_only():
    stats = summarize_rolls([{"stage": "laminating", "weight_kg": "5"}, {"stage": "done", "weight_kg": "5"}])
    assert stats.total == 2
    assert sum(stats.by_stage.values()) == 1
    assert stats.total_weight == pytest.approx(10.0)


def test_cut_weight_and_waste_totals():
    rolls = [
        {"stage": "done", "weight_kg": "50", "cut_weight_total_kg": "48.5", "waste_kg": "1.5"},
        {"stage": "archived", "weight_kg": "40", "cut_weight_total_kg": "39", "waste_kg": "1"},
        {"stage": "film", "weight_kg": "30"},
    ]
    stats = summarize_rolls(rolls)
    assert stats.total_cut_weight == pytest.approx(87.5)
    assert stats.total_waste == pytest.approx(2.5)
    assert stats.total_weight == pytest.approx(120.0)


def test_order_stats():
    orders = [{"status": "waiting"}, {"status": "waiting"}, {"status": "completed"}, {"status": "mystery"}]
    production_orders = [{"status": "in_progress"}, {"status": "completed"}, {"status": "pending"}, {"status": "in_progress"}]
    stats = summarize_orders(orders, production_orders)
    assert stats.total_orders == 4
    assert stats.by_status["waiting"] == 2
    assert stats.by_status["completed"] == 1
    assert stats.by_status["cancelled"] == 0
    assert "mystery" not in stats.by_status
    assert stats.production_in_progress == 2
    assert stats.production_completed == 1


def test_order_stats_empty():
    stats = summarize_orders(None)
    assert stats.total_orders == 0
    assert len(stats.by_status) == 10
