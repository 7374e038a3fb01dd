"""
Initialize database: creates both tables and reports row counts.
Run once before first launch.
Usage: python scripts/setup/init_db.py
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from emulog.config import settings
from emulog.database import build_engine
from emulog.exceptions import StorageError
from emulog.services.storage import Storage


def main():
    print("🗄️  EMU Log DB Initialization")
    print("=" * 40)
    print(f"📡 Database: {settings.DATABASE_URL}")

    storage = Storage(build_engine(settings.DATABASE_URL))
    try:
        storage.ping()
        print("✅ Database connection OK")
        print("\n📋 Creating tables...")
        storage.create_tables()
        print("✅ Tables ready: emu_qrcode, emu_log")
        print(f"\n📊 emu_qrcode: {storage.count_scan_codes()} rows")
        print(f"📊 emu_log:    {storage.count_log_entries()} rows")
    except StorageError as e:
        print(f"❌ {e}")
        sys.exit(1)

    print("\n🎉 Database ready! You can now start the collector:")
    print("   python -m emulog")


if __name__ == "__main__":
    main()
