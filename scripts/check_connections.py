#!/usr/bin/env python3
"""
Connection Check Script

Verifies the configured storage backend is reachable and shows what the
catalog holds.
Usage: python scripts/check_connections.py
"""
import sys
sys.path.insert(0, '.')

from copilot.api.deps import get_storage
from copilot.core.config import get_settings


def main():
    settings = get_settings()
    print("=" * 50)
    print("STUDENT CO-PILOT - CONNECTION CHECK")
    print("=" * 50)

    print(f"\n[1] Storage backend: {settings.storage_backend}")
    if settings.storage_backend == "sql":
        url = settings.database_url
        if "@" in url:
            # hide credentials
            url = url.split("://", 1)[0] + "://****@" + url.split("@", 1)[1]
        print(f"    URL: {url}")

    storage = get_storage()
    if storage.is_healthy():
        print("    ✅ Storage: CONNECTED")
    else:
        print("    ❌ Storage: FAILED")
        return 1

    print("\n[2] Catalog...")
    print(f"    Internships: {len(storage.list_internships())}")
    print(f"    Projects:    {len(storage.list_projects())}")

    print(f"\n[3] Match mode: {settings.match_mode}")

    print("\n" + "=" * 50)
    print("Connection check complete!")
    print("=" * 50)
    return 0


if __name__ == "__main__":
    sys.exit(main())
