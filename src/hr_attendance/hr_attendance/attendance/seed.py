from __future__ import annotations

import random
from datetime import date, datetime, time, timedelta
from typing import List, Optional, Sequence

from ..core.constants import FULL_DAY_MS, SEED_ABSENT_THRESHOLD, SEED_HISTORY_DAYS, SEED_LEAVE_THRESHOLD
from ..core.enums import AttendanceStatus
from .model import DailyRecord, Session


def generate_history(
    employee_ids: Sequence[str],
    *,
    today: date,
    rng: Optional[random.Random] = None,
    days: int = SEED_HISTORY_DAYS,
) -> List[DailyRecord]:
    """Synthesize weekday history for ``days`` calendar days before ``today``.

    Weekends get no records. Each remaining (employee, day) is Absent with
    probability 0.05, Leave with 0.05, otherwise one session starting between
    08:45 and 09:44 and ending between 17:30 and 18:59.
    """
    rng = rng or random.Random()
    records: List[DailyRecord] = []

    for offset in range(days, 0, -1):
        day = today - timedelta(days=offset)
        if day.weekday() >= 5:
            continue

        for emp_id in employee_ids:
            record_id = f"hist_{emp_id}_{day.isoformat()}"
            r = rng.random()
            if r < SEED_LEAVE_THRESHOLD:
                status = AttendanceStatus.ABSENT if r < SEED_ABSENT_THRESHOLD else AttendanceStatus.LEAVE
                records.append(
                    DailyRecord(
                        id=record_id,
                        employee_id=emp_id,
                        date=day,
                        sessions=[],
                        status=status,
                        last_updated=datetime.combine(day, time.min),
                    )
                )
                continue

            start = datetime.combine(day, time(8, 0)) + timedelta(minutes=45 + rng.randrange(60))
            end = datetime.combine(day, time(17, 0)) + timedelta(minutes=30 + rng.randrange(90))
            session = Session(check_in=start, check_out=end)
            status = AttendanceStatus.PRESENT if session.duration_ms >= FULL_DAY_MS else AttendanceStatus.PARTIAL
            records.append(
                DailyRecord(
                    id=record_id,
                    employee_id=emp_id,
                    date=day,
                    sessions=[session],
                    status=status,
                    last_updated=end,
                )
            )

    return records
