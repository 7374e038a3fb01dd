"""
Probes every bureau API with one scan code and prints what comes back.
Usage: python scripts/test/check_provider_conn.py
       python scripts/test/check_provider_conn.py --code PQ0123456
       python scripts/test/check_provider_conn.py --bureau P --code <qrcode>
"""

import sys
import os
import argparse
import asyncio
import time
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

import httpx
from emulog.config import settings
from emulog.exceptions import ResolutionError
from emulog.providers import build_providers


async def probe(provider, qrcode: str) -> dict:
    start = time.monotonic()
    try:
        info = await provider.fetch(qrcode)
    except httpx.TimeoutException:
        return {"status": "❌ timeout", "hint": "API unreachable, check network"}
    except httpx.HTTPStatusError as e:
        return {"status": f"❌ http_{e.response.status_code}"}
    except httpx.HTTPError as e:
        return {"status": f"❌ connection_error: {e!r}"}
    except (ResolutionError, ValueError) as e:
        return {"status": f"❌ bad_response: {e}"}

    result = {"status": "✅ online", "rtt": f"{(time.monotonic() - start) * 1000:.0f}ms"}
    try:
        resolution = provider.extract(info)
        result["train"] = f"{resolution.train_no} on {resolution.date}"
    except ResolutionError:
        result["train"] = "none (code unknown to bureau)"
    return result


async def run(bureau: str, qrcode: str) -> bool:
    all_ok = True
    async with httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT_SECONDS) as client:
        for provider in build_providers(client):
            if bureau != "all" and provider.code != bureau:
                continue
            print(f"\n[{provider.code}] {provider.name}")
            result = await probe(provider, qrcode)
            print(f"  Status : {result['status']}")
            if result["status"].startswith("✅"):
                print(f"  RTT    : {result['rtt']}")
                print(f"  Train  : {result['train']}")
            else:
                all_ok = False
                if "hint" in result:
                    print(f"  Hint   : {result['hint']}")
    return all_ok


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--bureau", choices=["H", "P", "all"], default="all")
    parser.add_argument("--code", default=settings.PROBE_SCAN_CODE)
    args = parser.parse_args()

    print("🚄 EMU Log Provider Connectivity Test")
    print("=" * 55)
    all_ok = asyncio.run(run(args.bureau, args.code))

    print("\n" + "=" * 55)
    if all_ok:
        print("✅ All bureaus reachable.")
    else:
        print("⚠️  Some bureaus have issues. The collector refuses to start if bureau H is down.")
        sys.exit(1)


if __name__ == "__main__":
    main()
