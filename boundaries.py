#!/usr/bin/env python3
"""Calendar period boundaries for a reference instant."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Iterator, Literal, Sequence, Tuple

PeriodName = Literal["day", "week", "month", "year"]
PERIODS: Sequence[PeriodName] = ("day", "week", "month", "year")

# Days per month for a common year, January first.
_MONTH_LENGTHS: Tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

_END_OF_DAY = time(23, 59, 59, 999000)


@dataclass(frozen=True)
class Boundary:
    start: datetime
    end: datetime


@dataclass(frozen=True)
class RangeSet:
    day: Boundary
    week: Boundary
    month: Boundary
    year: Boundary

    def get(self, period: PeriodName) -> Boundary:
        if period not in PERIODS:
            raise ValueError(f"Unknown period: {period}")
        return getattr(self, period)

    def items(self) -> Iterator[Tuple[PeriodName, Boundary]]:
        for period in PERIODS:
            yield period, getattr(self, period)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_LENGTHS[month - 1]


def truncate_to_millisecond(value: datetime) -> datetime:
    return value.replace(microsecond=value.microsecond - value.microsecond % 1000)


def _start_of_day(day: date, reference: datetime) -> datetime:
    return datetime.combine(day, time.min, tzinfo=reference.tzinfo)


def _end_of_day(day: date, reference: datetime) -> datetime:
    return datetime.combine(day, _END_OF_DAY, tzinfo=reference.tzinfo)


def _start_of_week(day: date) -> date:
    return day - timedelta(days=day.weekday())


def day_bounds(reference: datetime) -> Boundary:
    today = reference.date()
    return Boundary(_start_of_day(today, reference), _end_of_day(today, reference))


def week_bounds(reference: datetime) -> Boundary:
    """Monday through Sunday around ``reference``.

    Both ends keep the reference's own time-of-day and zone; they are not
    snapped to midnight or to 23:59:59.999 the way the other periods are.
    """
    reference = truncate_to_millisecond(reference)
    monday = _start_of_week(reference.date())
    sunday = monday + timedelta(days=6)
    clock = reference.timetz()
    return Boundary(datetime.combine(monday, clock), datetime.combine(sunday, clock))


def month_bounds(reference: datetime) -> Boundary:
    first = date(reference.year, reference.month, 1)
    last = date(reference.year, reference.month, days_in_month(reference.year, reference.month))
    return Boundary(_start_of_day(first, reference), _end_of_day(last, reference))


def year_bounds(reference: datetime) -> Boundary:
    first = date(reference.year, 1, 1)
    last = date(reference.year, 12, 31)
    return Boundary(_start_of_day(first, reference), _end_of_day(last, reference))


_RESOLVERS = {
    "day": day_bounds,
    "week": week_bounds,
    "month": month_bounds,
    "year": year_bounds,
}


def period_bounds(period: str, reference: datetime) -> Boundary:
    resolver = _RESOLVERS.get(period)
    if resolver is None:
        raise ValueError(f"Unknown period: {period}")
    return resolver(reference)


def compute_boundaries(reference: datetime) -> RangeSet:
    """Return the day, week, month and year boundaries enclosing ``reference``."""
    return RangeSet(
        day=day_bounds(reference),
        week=week_bounds(reference),
        month=month_bounds(reference),
        year=year_bounds(reference),
    )


__all__ = [
    "Boundary",
    "RangeSet",
    "PeriodName",
    "PERIODS",
    "is_leap_year",
    "truncate_to_millisecond",
    "days_in_month",
    "day_bounds",
    "week_bounds",
    "month_bounds",
    "year_bounds",
    "period_bounds",
    "compute_boundaries",
]
