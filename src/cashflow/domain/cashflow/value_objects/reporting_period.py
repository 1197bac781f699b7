"""Reporting periods that select which transactions enter the graph."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date, datetime, time, timedelta, timezone
from enum import Enum

from cashflow.domain.cashflow.exceptions import InvalidPeriodError
from cashflow.domain.shared.time import ensure_tz_aware, utc_now

_MONTH = re.compile(r"^(\d{4})-(\d{2})$")
_QUARTER = re.compile(r"^(\d{4})-Q(\d)$")
_SEMESTER = re.compile(r"^(\d{4})-S(\d)$")
_YEAR = re.compile(r"^(\d{4})$")


class PeriodKind(str, Enum):
    MONTH = "month"
    QUARTER = "quarter"
    SEMESTER = "semester"
    YEAR = "year"
    CUSTOM = "custom"

    @property
    def months(self) -> int:
        return {
            PeriodKind.MONTH: 1,
            PeriodKind.QUARTER: 3,
            PeriodKind.SEMESTER: 6,
            PeriodKind.YEAR: 12,
        }[self]


def _add_months(year: int, month: int, months: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + months
    return index // 12, index % 12 + 1


@dataclass(frozen=True)
class ReportingPeriod:
    """An inclusive ``[start, end]`` window with a human-readable label."""

    start: datetime
    end: datetime
    label: str
    kind: PeriodKind = PeriodKind.CUSTOM

    @classmethod
    def _calendar(
        cls,
        kind: PeriodKind,
        year: int,
        first_month: int,
        label: str,
    ) -> ReportingPeriod:
        next_year, next_month = _add_months(year, first_month, kind.months)
        # the exclusive end bound must still be a representable datetime
        if year < MINYEAR or next_year > MAXYEAR:
            raise InvalidPeriodError(label, "year is out of range")
        start = datetime(year, first_month, 1, tzinfo=timezone.utc)
        end =datetime(next_year, next_month, 1, tzinfo=timezone.utc) - timedelta(
            microseconds=1,
        )
        return cls(start=start, end=end, label=label, kind=kind)

    @classmethod
    def month(cls, token: str) -> ReportingPeriod:
        match = _MONTH.match(token)
        if not match:
            raise InvalidPeriodError(token, "expected YYYY-MM")
        year, month = int(match.group(1)), int(match.group(2))
        if not 1 <= month <= 12:
            raise InvalidPeriodError(token, "month must be between 01 and 12")
        return cls._calendar(PeriodKind.MONTH, year, month, f"{year:04d}-{month:02d}")

    @classmethod
    def quarter(cls, token: str) -> ReportingPeriod:
        match = _QUARTER.match(token)
        if not match:
            raise InvalidPeriodError(token, "expected YYYY-Q#")
        year, quarter = int(match.group(1)), int(match.group(2))
        if not 1 <= quarter <= 4:
            raise InvalidPeriodError(token, "quarter must be between 1 and 4")
        return cls._calendar(
            PeriodKind.QUARTER,
            year,
            (quarter - 1) * 3 + 1,
            f"{year:04d}-Q{quarter}",
        )

    @classmethod
    def semester(cls, token: str) -> ReportingPeriod:
        match = _SEMESTER.match(token)
        if not match:
            raise InvalidPeriodError(token, "expected YYYY-S#")
        year, semester = int(match.group(1)), int(match.group(2))
        if semester not in (1, 2):
            raise InvalidPeriodError(token, "semester must be 1 or 2")
        return cls._calendar(
            PeriodKind.SEMESTER,
            year,
            (semester - 1) * 6 + 1,
            f"{year:04d}-S{semester}",
        )

    @classmethod
    def year(cls, token: str) -> ReportingPeriod:
        match = _YEAR.match(token)
        if not match:
            raise InvalidPeriodError(token, "expected YYYY")
        year = int(match.group(1))
        return cls._calendar(PeriodKind.YEAR, year, 1, f"{year:04d}")

    @classmethod
    def custom(cls, date_from: date, date_to: date) -> ReportingPeriod:
        """Whole days from ``date_from`` 00:00 to ``date_to`` 23:59:59.999999."""
        if date_to < date_from:
            raise InvalidPeriodError(
                f"{date_from.isoformat()}..{date_to.isoformat()}",
                "end date is before start date",
            )
        start = datetime.combine(date_from, time.min, tzinfo=timezone.utc)
        end = datetime.combine(date_to, time.max, tzinfo=timezone.utc)
        label = f"{date_from.strftime('%d/%m/%Y')} - {date_to.strftime('%d/%m/%Y')}"
        return cls(start=start, end=end, label=label, kind=PeriodKind.CUSTOM)

    @classmethod
    def current_month(cls, now: datetime | None = None) -> ReportingPeriod:
        now = now or utc_now()
        return cls.month(f"{now.year:04d}-{now.month:02d}")

    @classmethod
    def parse(cls, token: str) -> ReportingPeriod:
        """Parse ``YYYY-MM``, ``YYYY-Q#``, ``YYYY-S#`` or ``YYYY``."""
        token = token.strip()
        if _MONTH.match(token):
            return cls.month(token)
        if _QUARTER.match(token):
            return cls.quarter(token)
        if _SEMESTER.match(token):
            return cls.semester(token)
        if _YEAR.match(token):
            return cls.year(token)
        raise InvalidPeriodError(token, "expected YYYY-MM, YYYY-Q#, YYYY-S# or YYYY")

    @classmethod
    def resolve(
        cls,
        period: str | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
        now: datetime | None = None,
    ) -> ReportingPeriod:
        """Pick the window for a request.

        Priority: explicit date range > period token > current month.
        """
        if date_from and date_to:
            return cls.custom(date_from, date_to)
        if period:
            return cls.parse(period)
        return cls.current_month(now)

    def shift(self, delta: int) -> ReportingPeriod:
        """Move a calendar period ``delta`` steps backwards or forwards."""
        if self.kind is PeriodKind.CUSTOM:
            raise InvalidPeriodError(self.label, "custom periods cannot be shifted")
        year, month = _add_months(
            self.start.year,
            self.start.month,
            delta * self.kind.months,
        )
        if self.kind is PeriodKind.MONTH:
            return ReportingPeriod.month(f"{year:04d}-{month:02d}")
        if self.kind is PeriodKind.QUARTER:
            return ReportingPeriod.quarter(f"{year:04d}-Q{(month - 1) // 3 + 1}")
        if self.kind is PeriodKind.SEMESTER:
            return ReportingPeriod.semester(f"{year:04d}-S{(month - 1) // 6 + 1}")
        return ReportingPeriod.year(f"{year:04d}")

    def contains(self, moment: datetime) -> bool:
        return self.start <= ensure_tz_aware(moment) <= self.end
