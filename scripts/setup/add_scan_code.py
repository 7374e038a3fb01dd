"""
Register a scan code for a train unit by hand.
Usage: python scripts/setup/add_scan_code.py CRH380A-2641 H PQ0123456
"""

import sys
import os
import argparse
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from emulog.config import settings
from emulog.database import build_engine
from emulog.exceptions import StorageError
from emulog.services.storage import Storage


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("emu_no", help="train unit number, e.g. CRH380A-2641")
    parser.add_argument("bureau", choices=["H", "P"])
    parser.add_argument("qrcode", help="scan code printed inside the unit")
    args = parser.parse_args()

    storage = Storage(build_engine(settings.DATABASE_URL))
    try:
        storage.create_tables()
        storage.add_scan_code(args.emu_no, args.bureau, args.qrcode)
    except StorageError as e:
        print(f"❌ {e}")
        sys.exit(1)
    print(f"✅ {args.emu_no} → {args.bureau}/{args.qrcode}")


if __name__ == "__main__":
    main()
