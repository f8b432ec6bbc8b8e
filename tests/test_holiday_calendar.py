from __future__ import annotations

from datetime import date, timedelta

import pytest

from olsalg.scheduling import NorwegianHolidayCalendar

calendar = NorwegianHolidayCalendar()
easter_2023 = calendar.easter_sunday(2023)


@pytest.mark.parametrize(
    "day",
    [
        date(2023, 1, 1),
        easter_2023,
        easter_2023 + timedelta(days=1),
        date(2023, 5, 1),
        date(2023, 5, 17),
        calendar.ascension_day(2023),
        calendar.pentecost_sunday(2023),
        calendar.pentecost_sunday(2023) + timedelta(days=1),
        date(2023, 12, 26),
    ],
)
def test_is_holiday_true(day: date) -> None:
    assert calendar.is_holiday(day) is True


@pytest.mark.parametrize("day", [date(2023, 12, 23), date(2023, 6, 15)])
def test_is_holiday_false(day: date) -> None:
    assert calendar.is_holiday(day) is False


def test_maundy_thursday_and_good_friday_are_holidays() -> None:
    assert calendar.is_holiday(date(2024, 3, 28))
    assert calendar.is_holiday(date(2024, 3, 29))


def test_every_sunday_is_a_holiday() -> None:
    assert calendar.is_holiday(date(2024, 4, 14))
    assert calendar.holiday_name(date(2024, 4, 14)) is None


@pytest.mark.parametrize(
    ("day", "name"),
    [
        (date(2024, 1, 1), "1. Nyttårsdag"),
        (date(2024, 3, 27), "Onsdag før skjærtorsdag"),
        (date(2024, 3, 28), "Skjærtorsdag"),
        (date(2024, 3, 29), "Langfredag"),
        (date(2024, 3, 30), "Påskeaften"),
        (date(2024, 3, 31), "1. påskedag"),
        (date(2024, 4, 1), "2. påskedag"),
        (date(2024, 5, 1), "Arbeidernes dag"),
        (date(2024, 5, 17), "Grunnlovsdag"),
        (date(2024, 5, 9), "Kristi himmelfartsdag"),
        (date(2024, 5, 18), "Pinseaften"),
        (date(2024, 5, 19), "1. pinsedag"),
        (date(2024, 5, 20), "2. pinsedag"),
        (date(2024, 12, 24), "Julaften"),
        (date(2024, 12, 25), "1. juledag"),
        (date(2024, 12, 26), "2. juledag"),
        (date(2024, 12, 31), "Nyttårsaften"),
    ],
)
def test_holiday_names(day: date, name: str) -> None:
    assert calendar.holiday_name(day) == name


def test_unnamed_day_has_no_name() -> None:
    assert calendar.holiday_name(date(2024, 6, 12)) is None


def test_named_eves_are_not_holidays() -> None:
    # Tuesdays in 2024
    assert calendar.holiday_name(date(2024, 12, 24)) == "Julaften"
    assert calendar.is_holiday(date(2024, 12, 24)) is False
    assert calendar.holiday_name(date(2024, 12, 31)) == "Nyttårsaften"
    assert calendar.is_holiday(date(2024, 12, 31)) is False


def test_fixed_name_wins_when_ascension_falls_on_may_17() -> None:
    assert calendar.ascension_day(2007) == date(2007, 5, 17)
    assert calendar.holiday_name(date(2007, 5, 17)) == "Grunnlovsdag"


def test_info_combines_name_and_flag() -> None:
    info = calendar.info(date(2024, 3, 30))
    assert info.name == "Påskeaften"
    assert info.is_holiday is False

    sunday = calendar.info(date(2024, 3, 31))
    assert sunday.name == "1. påskedag"
    assert sunday.is_holiday is True


def test_named_days_in_calendar_order() -> None:
    named = calendar.named_days(2024)
    days = [day for day, _ in named]
    assert days == sorted(days)
    assert len(named) == 17
    assert named[0] == (date(2024, 1, 1), "1. Nyttårsdag")
    assert named[-1] == (date(2024, 12, 31), "Nyttårsaften")


def test_named_days_dedupes_collisions() -> None:
    named = dict(calendar.named_days(2007))
    assert named[date(2007, 5, 17)] == "Grunnlovsdag"
    assert len(named) == 16
