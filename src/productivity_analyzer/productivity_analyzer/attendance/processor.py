"""Monthly gap-filling: sparse check-ins in, one record per calendar day out."""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional

from ..common.datetime_utils import month_dates, normalize_date
from ..core.exceptions import DomainError
from .factory import DayStatusStrategyFactory
from .model import DailyAttendanceRecord, RawAttendanceEntry

logger = logging.getLogger(__name__)

_DEFAULT_FACTORY = DayStatusStrategyFactory()


def index_entries_by_date(entries: Iterable[RawAttendanceEntry]) -> dict[date, RawAttendanceEntry]:
    """Map normalized date -> entry. The first entry seen for a date wins."""
    index: dict[date, RawAttendanceEntry] = {}
    for entry in entries:
        index.setdefault(normalize_date(entry.work_date), entry)
    return index


def process_month(
    year: int,
    month: int,
    raw_entries: Iterable[RawAttendanceEntry],
    *,
    employee_ref: Optional[str] = None,
    strategy_factory: Optional[DayStatusStrategyFactory] = None,
) -> list[DailyAttendanceRecord]:
    """Build the dense ledger of one employee for (year, month).

    ``month`` is 1-based. Entries outside the month are ignored. Every record
    is owned by ``employee_ref``, or by the first entry's ref when omitted, so
    callers must pass one employee's entries per call.

    Raises:
        InvalidDateError: for a bad year/month or an unresolvable entry date.
        InvalidTimeFormatError: for a bad in/out time on any matched day; the
            whole month is rejected.
    """
    days = month_dates(year, month)
    entries = list(raw_entries)
    by_date = index_entries_by_date(entries)

    if employee_ref is None:
        employee_ref = entries[0].employee_ref if entries else ""

    refs = {e.employee_ref for e in entries}
    if len(refs) > 1:
        logger.warning(
            "process_month(%s-%02d) received entries for %d employees; all records are assigned to %r",
            year, month, len(refs), employee_ref,
        )

    factory = strategy_factory or _DEFAULT_FACTORY
    records: list[DailyAttendanceRecord] = []
    for day in days:
        entry = by_date.get(day)
        strategy = factory.for_day(work_date=day, entry=entry)
        try:
            decision = strategy.decide(work_date=day, entry=entry)
        except DomainError as e:
            logger.error("Error calculating hours for %s on %s: %s", employee_ref, day.isoformat(), e)
            raise

        records.append(
            DailyAttendanceRecord(
                employee_ref=employee_ref,
                work_date=day,
                status=decision.status,
                worked_hours=decision.worked_hours,
                in_time=decision.in_time,
                out_time=decision.out_time,
            )
        )

    return records
