from datetime import date

from parking_windows.suspensions import (
    CalendarDay,
    CalendarItem,
    collect_suspensions,
    strip_year,
    summarize_suspensions,
)


def _suspended(details=None, exception_name=None) -> CalendarItem:
    return CalendarItem(
        type="Alternate Side Parking",
        status="SUSPENDED",
        details=details,
        exception_name=exception_name,
    )


def test_single_day_without_meter_detail():
    days = [CalendarDay(date=date(2023, 11, 23), items=[_suspended(details="ASP is suspended.")])]
    assert summarize_suspensions(days) == "By the way, alternate side parking is suspended on Thursday, 11/23."


def test_meter_exceptions_deduplicated_after_year_strip():
    details = "Alternate side parking and meters are suspended for the holiday."
    days = [
        CalendarDay(date=date(2023, 12, 25), items=[_suspended(details, "Xmas 2023")]),
        CalendarDay(date=date(2024, 12, 25), items=[_suspended(details, "Xmas 2024")]),
    ]
    summary = collect_suspensions(days)
    assert summary.dates == ["Monday, 12/25", "Wednesday, 12/25"]
    assert summary.exception_names == ["Xmas"]
    assert summarize_suspensions(days) == (
        "By the way, alternate side parking is suspended on Monday, 12/25 and Wednesday, 12/25. "
        "Meters are in effect except for Xmas."
    )


def test_ignores_other_items_and_keeps_calendar_order():
    days = [
        CalendarDay(
            date=date(2023, 11, 10),
            items=[
                CalendarItem(type="Collections", status="ON SCHEDULE"),
                CalendarItem(type="Alternate Side Parking", status="IN EFFECT"),
            ],
        ),
        CalendarDay(date=date(2023, 11, 11), items=[_suspended()]),
        CalendarDay(date=date(2023, 11, 23), items=[_suspended()]),
        CalendarDay(date=date(2023, 11, 24), items=[_suspended()]),
    ]
    assert summarize_suspensions(days) == (
        "By the way, alternate side parking is suspended on "
        "Saturday, 11/11, Thursday, 11/23 and Friday, 11/24."
    )


def test_no_suspensions_is_empty():
    assert summarize_suspensions([]) == ""
    assert summarize_suspensions([CalendarDay(date=date(2023, 11, 10))]) == ""


def test_strip_year():
    assert strip_year("Christmas Day 2023") == "Christmas Day"
    assert strip_year("Diwali") == "Diwali"


def test_several_meter_exceptions_are_joined():
    details = "Alternate side parking and meters are suspended."
    days = [
        CalendarDay(date=date(2023, 11, 23), items=[_suspended(details, "Thanksgiving Day 2023")]),
        CalendarDay(date=date(2023, 12, 25), items=[_suspended(details, "Christmas Day 2023")]),
        CalendarDay(date=date(2024, 1, 1), items=[_suspended(details, "New Year's Day 2024")]),
    ]
    assert summarize_suspensions(days).endswith(
        "Meters are in effect except for Thanksgiving Day, Christmas Day and New Year's Day."
    )


def test_meter_suspension_without_exception_name(caplog):
    days = [CalendarDay(date=date(2023, 11, 23), items=[_suspended("Meters are suspended; meters are suspended.")])]
    with caplog.at_level("WARNING", logger="parking_windows.suspensions"):
        summary = collect_suspensions(days)
    assert summary.dates == ["Thursday, 11/23"]
    assert summary.exception_names == []
    assert "has no exception name" in caplog.text
