# Path: scripts/db_selftest.py
# Purpose: CLI health check for the gallery MongoDB deployment.
# Layer: scripts.
# Details: Pings the server and performs an insert/read/delete roundtrip on a scratch collection.

from __future__ import annotations

import sys
from pathlib import Path

# Ensure project root is on sys.path when running as a script.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config import AppSettings, configure_logging
from core.store import MongoImageStore, StoreUnavailable


def main() -> int:
    """Run the self-test and report the outcome through the exit code."""

    settings = AppSettings.from_env()
    configure_logging(settings.log_level)
    try:
        store = MongoImageStore.from_settings(settings)
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    print(f"Connecting to MongoDB database {settings.database_name!r}...")
    try:
        report = store.self_test()
    except StoreUnavailable as exc:
        print(f"MongoDB self-test FAILED: {exc}", file=sys.stderr)
        return 1
    finally:
        store.close()

    print(f"Ping: {report['ping']}")
    print(f"Inserted _id: {report['insertedId']}")
    print(f"Fetched exists: {report['fetchedExists']}")
    print("MongoDB self-test succeeded.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
