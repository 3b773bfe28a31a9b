from datetime import UTC, date, datetime, timedelta, timezone
from types import SimpleNamespace

from folio.resource.ordering import compare, sort_resources


def _item(path, date_value):
    return SimpleNamespace(path=path, metadata={"date": date_value})


def test_earlier_date_sorts_first():
    a = _item("b.md", datetime(2024, 1, 1))
    b = _item("a.md", datetime(2024, 1, 2))
    assert compare(a, b) < 0
    assert compare(b, a) > 0


def test_equal_dates_break_ties_by_path():
    a = _item("a.md", datetime(2024, 1, 1))
    b = _item("b.md", datetime(2024, 1, 1))
    assert compare(a, b) < 0
    assert compare(b, a) > 0
    assert compare(a, a) == 0


def test_dates_and_datetimes_compare_together():
    a = _item("a.md", date(2024, 1, 2))
    b = _item("b.md", datetime(2024, 1, 1, 23, 59))
    assert compare(a, b) > 0


def test_aware_datetimes_compare_across_timezones():
    plus_two = timezone(timedelta(hours=2))
    a = _item("a.md", datetime(2024, 1, 1, 12, 0, tzinfo=plus_two))
    b = _item("b.md", datetime(2024, 1, 1, 11, 0, tzinfo=UTC))
    assert compare(a, b) < 0


def test_non_date_values_fall_back_to_raw_then_path():
    assert compare(_item("a.md", "2024-02-01"), _item("b.md", "2024-01-01")) > 0
    assert compare(_item("a.md", "2024-01-01"), _item("b.md", 42)) < 0


def test_objects_without_metadata_are_not_orderable():
    assert compare(_item("a.md", datetime(2024, 1, 1)), object()) is None


def test_sort_resources_orders_by_date_then_path():
    newest = _item("z.md", datetime(2024, 3, 1))
    oldest_b = _item("b.md", datetime(2024, 1, 1))
    oldest_a = _item("a.md", datetime(2024, 1, 1))

    assert sort_resources([newest, oldest_b, oldest_a]) == [oldest_a, oldest_b, newest]
    assert sort_resources([newest, oldest_b, oldest_a], reverse=True) == [newest, oldest_b, oldest_a]
