#!/usr/bin/env python3
"""
Seed script: registers the family members through the API (no direct DB).
Existing first names (409) are reported and skipped.
  python scripts/seed_data.py
  python scripts/seed_data.py --member Lucie:enfant --member Paul:parent
"""

import argparse

import httpx

API_BASE = "http://localhost:8000/api"

FAMILY = [
    ("Marie", "parent"),
    ("Jean", "parent"),
    ("Sophie", "enfant"),
    ("Pierre", "enfant"),
    ("Claire", "enfant"),
]


def parse_member(value: str) -> tuple[str, str]:
    name, _, role = value.partition(":")
    if role not in ("parent", "enfant"):
        raise argparse.ArgumentTypeError(f"expected NAME:parent or NAME:enfant, got {value!r}")
    return name, role


def main():
    ap = argparse.ArgumentParser(description="Register family members via the API")
    ap.add_argument("--base-url", default=API_BASE, help="API base URL")
    ap.add_argument(
        "--member",
        type=parse_member,
        action="append",
        help="NAME:ROLE to register instead of the default family (repeatable)",
    )
    args = ap.parse_args()

    members = args.member or FAMILY
    created, skipped, errors = [], [], []

    with httpx.Client(base_url=args.base_url, timeout=30.0) as client:
        for name, role in members:
            try:
                r = client.post("/users", json={"name": name, "role": role})
            except httpx.HTTPError as e:
                errors.append(f"{name}: {e}")
                continue
            if r.status_code == 201:
                created.append(f"{name} (id={r.json()['id']})")
            elif r.status_code == 409:
                skipped.append(name)
            else:
                errors.append(f"{name}: {r.status_code} {r.text[:80]}")

    print(f"Created: {', '.join(created) or '-'}")
    print(f"Already present: {', '.join(skipped) or '-'}")
    if errors:
        print(f"Errors ({len(errors)}):")
        for e in errors:
            print("  ", e)


if __name__ == "__main__":
    main()
