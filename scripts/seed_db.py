from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import load_settings

from src.attendance_tracker.attendance_tracker.database.bootstrap import DEMO_PROFILES, demo_profile_id, seed_demo_profiles


def main() -> None:
    settings = load_settings()
    db_config = dict(settings.DB_CONFIG)

    seed_demo_profiles(db_config)

    print(f"OK: seeded {len(DEMO_PROFILES)} demo profiles into {db_config.get('database')}")
    for name, email, role, code, _ in DEMO_PROFILES:
        print(f"  {role:<8} {code:<7} {name:<15} X-User-Id: {demo_profile_id(email)}")


if __name__ == "__main__":
    main()
