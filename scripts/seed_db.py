from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.hr_attendance.hr_attendance.container import build_container, build_storage
from src.hr_attendance.hr_attendance.logging_config import configure_logging


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"), getattr(settings, "LOG_FORMAT", "text"))

    container = build_container(
        storage=build_storage(settings),
        random_seed=getattr(settings, "SEED_RANDOM_SEED", None),
    )
    ran = container.attendance_store.seed()
    records = container.attendance_store.load()

    if ran:
        print(f"OK: Seeded {len(records)} attendance records ({settings.STORAGE_BACKEND})")
    else:
        print(f"SKIP: Store already seeded ({len(records)} records, {settings.STORAGE_BACKEND})")


if __name__ == "__main__":
    main()
