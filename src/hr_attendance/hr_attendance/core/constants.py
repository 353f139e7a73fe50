"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

FULL_DAY_MS = 8 * 60 * 60 * 1000
MS_PER_HOUR = 3_600_000
MS_PER_MINUTE = 60_000

SEED_HISTORY_DAYS = 30
SEED_ABSENT_THRESHOLD = 0.05
SEED_LEAVE_THRESHOLD = 0.10

ANNUAL_LEAVE_QUOTA = 20
PAID_LEAVE_QUOTA = 14
SICK_LEAVE_QUOTA = 8
TREND_DAYS = 14

ATTENDANCE_DB_KEY = "attendance_db"
ATTENDANCE_SEEDED_KEY = "attendance_seeded_flag"
EMPLOYEES_DB_KEY = "employees_db"
LEAVES_DB_KEY = "leaves_db"
AUDIT_LOG_KEY = "audit_logs"

DURATION_PLACEHOLDER = "--"
CLOCK_PLACEHOLDER = "--:--"
