#!/usr/bin/env python3
"""
Bulk import of image files, uploaded one at a time.
By default every file becomes a new fiche. With --item-id every file is appended
as a photo to that existing fiche instead.
Each image is downscaled and JPEG-encoded before upload. A failing file is reported
and the import goes on; fiches and photos already uploaded stay in place.
  python scripts/import_photos.py --user-id 1 photos/*.jpg
  python scripts/import_photos.py --user-id 1 --item-id 12 photos/commode-*.jpg
"""

import argparse
import sys
from pathlib import Path

# Project root, for app.utils
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import httpx
from PIL import UnidentifiedImageError

from app.utils.images import compress_image, to_data_url

API_BASE = "http://localhost:8000/api"


def import_files(
    client: httpx.Client,
    user_id: int,
    paths: list[Path],
    item_id: int | None = None,
) -> tuple[list[str], list[str]]:
    """Returns (created, failed) descriptions. With item_id, photos are appended to that fiche."""
    created, failed = [], []
    headers = {"X-User-Id": str(user_id)}
    url = "/items" if item_id is None else f"/items/{item_id}/photos"
    for i, path in enumerate(paths, start=1):
        print(f"[{i}/{len(paths)}] {path.name}")
        try:
            photo = to_data_url(compress_image(path.read_bytes()))
            r = client.post(url, headers=headers, json={"photo": photo})
        except (OSError, UnidentifiedImageError, httpx.HTTPError) as e:
            failed.append(f"{path.name}: {e}")
            continue
        if r.status_code != 201:
            failed.append(f"{path.name}: {r.status_code} {r.text[:80]}")
        elif item_id is None:
            created.append(f"{path.name} -> fiche #{r.json()['number']}")
        else:
            created.append(f"{path.name} -> fiche {item_id}, photo #{r.json()['position']}")
    return created, failed


def main():
    ap = argparse.ArgumentParser(description="Upload image files as new fiches, or as photos of one fiche")
    ap.add_argument("files", nargs="+", type=Path)
    ap.add_argument("--user-id", type=int, required=True, help="Id of the family member importing")
    ap.add_argument("--item-id", type=int, help="Append every image to this fiche instead of creating fiches")
    ap.add_argument("--base-url", default=API_BASE, help="API base URL")
    args = ap.parse_args()

    with httpx.Client(base_url=args.base_url, timeout=60.0) as client:
        created, failed = import_files(client, args.user_id, args.files, item_id=args.item_id)

    print(f"\nDone. {len(created)} of {len(args.files)} imported.")
    for line in created:
        print("  ", line)
    if failed:
        print(f"Failed ({len(failed)}):")
        for line in failed:
            print("  ", line)
        sys.exit(1)


if __name__ == "__main__":
    main()
