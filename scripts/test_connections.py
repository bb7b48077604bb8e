#!/usr/bin/env python3
"""
Connection Test Script

Run this to verify the configured storage backend is reachable and that a
record survives a write/read/remove through an EntityStore.
Usage: python scripts/test_connections.py
"""
import sys
sys.path.insert(0, '.')

from jobportal.core.config import get_settings
from jobportal.core.errors import StorageError
from jobportal.db.stores import build_stores
from jobportal.schemas.schemas import User


def check_backend(settings) -> bool:
    if settings.storage_backend == "mongo":
        from jobportal.db.mongodb import test_mongo_connection
        print(f"    URI: {settings.mongodb_uri}")
        print(f"    Database: {settings.mongodb_db}")
        return test_mongo_connection()
    if settings.storage_backend == "sql":
        from jobportal.db.postgres import test_postgres_connection
        print(f"    URL: {settings.postgres_url.split('@')[-1]}")
        return test_postgres_connection()
    print("    In-memory backend, nothing to connect to")
    return True


def check_round_trip(settings) -> bool:
    users = build_stores(settings).users
    probe = User(id="__connection-test__", full_name="Probe", email="probe@example.com", phone="0", registered_at=0)
    try:
        users.insert(probe.id, probe)
        ok = users.get(probe.id) == probe
        users.remove(probe.id)
        return ok and users.get(probe.id) is None
    except StorageError as e:
        print(f"    Storage error: {e}")
        return False


def main():
    settings = get_settings()
    print("=" * 50)
    print("JOB PORTAL - CONNECTION TEST")
    print("=" * 50)

    print(f"\n[1] Testing {settings.storage_backend} backend...")
    if check_backend(settings):
        print("    ✅ Backend: CONNECTED")
    else:
        print("    ❌ Backend: FAILED")
        return

    print("\n[2] Testing store round trip (users)...")
    if check_round_trip(settings):
        print("    ✅ Insert / get / remove: OK")
    else:
        print("    ❌ Round trip: FAILED")

    print("\n" + "=" * 50)
    print("Connection test complete!")
    print("=" * 50)


if __name__ == "__main__":
    main()
