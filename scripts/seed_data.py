#!/usr/bin/env python3
"""
Seed script: creates the demo furniture catalog via the API (no direct store access).
Run: API must be running.
  python scripts/seed_data.py
  python scripts/seed_data.py --copies 3 --base-url http://localhost:8000/api/v1
"""

import argparse
import sys
from pathlib import Path

# Project root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import httpx

from app.services.seed import DEMO_PRODUCTS

API_BASE = "http://localhost:8000/api/v1"


def main():
    ap = argparse.ArgumentParser(description="Seed the furniture catalog via API")
    ap.add_argument("--copies", type=int, default=1, help="How many times to post the demo catalog")
    ap.add_argument("--base-url", default=API_BASE, help="API base URL")
    args = ap.parse_args()

    created = 0
    errors = []

    with httpx.Client(base_url=args.base_url, timeout=30.0) as client:
        print(f"Creating {len(DEMO_PRODUCTS) * args.copies} products...")
        for copy in range(args.copies):
            for payload in DEMO_PRODUCTS:
                if copy:
                    payload = {**payload, "name": f"{payload['name']} {copy + 1}"[:60]}
                try:
                    r = client.post("/products", json=payload)
                except httpx.HTTPError as e:
                    errors.append(f"{payload['name']}: {e}")
                    continue
                if r.status_code == 201:
                    created += 1
                else:
                    errors.append(f"{payload['name']}: {r.status_code} {r.text[:80]}")

    print(f"\nDone. Products created: {created}")
    if errors:
        print(f"Errors ({len(errors)}):")
        for e in errors[:15]:
            print("  ", e)
        if len(errors) > 15:
            print("  ... and", len(errors) - 15, "more")


if __name__ == "__main__":
    main()
