"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the rules live in the services.
"""

from datetime import datetime

from src.hr_attendance.hr_attendance.attendance.analytics import summarize
from src.hr_attendance.hr_attendance.container import build_container
from src.hr_attendance.hr_attendance.storage.memory import InMemoryStorage


def main():
    container = build_container(storage=InMemoryStorage(), random_seed=7)
    svc = container.attendance_service

    day = datetime.now().date()
    svc.check_in("EMP-202", now=datetime.combine(day, datetime.min.time()).replace(hour=9, minute=5))
    svc.check_out("EMP-202", now=datetime.combine(day, datetime.min.time()).replace(hour=18, minute=15))

    views = svc.records_for("EMP-202")
    print(views[0])
    print(summarize(views))


if __name__ == "__main__":
    main()
