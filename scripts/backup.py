"""Back up a JSON-file store.

Note: for the mysql backend use ``mysqldump`` on the ``kv_store`` table instead.
"""

from __future__ import annotations

import importlib
import shutil
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    if settings.STORAGE_BACKEND != "json":
        raise SystemExit(f"Backup only supports the json backend (current: {settings.STORAGE_BACKEND})")

    data_dir = Path(settings.DATA_DIR)
    if not data_dir.is_dir():
        raise SystemExit(f"Data directory not found: {data_dir}")

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    archive = shutil.make_archive(str(out_dir / f"hr_attendance_{ts}"), "zip", root_dir=data_dir)
    print(f"OK: Backup created: {archive}")


if __name__ == "__main__":
    main()
