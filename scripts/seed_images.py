# Path: scripts/seed_images.py
# Purpose: CLI tool to load image documents from a JSON file into the gallery collection.
# Layer: scripts.
# Details: Converts author references and timestamps to BSON types and inserts in batches.

from __future__ import annotations

import argparse
import json
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

from bson import ObjectId
from tqdm import tqdm

# Ensure project root is on sys.path when running as a script.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config import AppSettings, configure_logging
from core.store import MongoImageStore, StoreUnavailable

TIMESTAMP_KEYS = ("createdAt", "updatedAt")


def to_bson_document(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Turn a JSON image payload into a document matching the stored schema."""

    document = dict(payload)
    author = document.get("author")
    if isinstance(author, str) and ObjectId.is_valid(author):
        document["author"] = ObjectId(author)
    for key in TIMESTAMP_KEYS:
        value = document.get(key)
        if isinstance(value, str):
            document[key] = datetime.fromisoformat(value.replace("Z", "+00:00"))
    return document


def main() -> int:
    """Insert every document from the input file."""

    parser = argparse.ArgumentParser(description="Seed the Artify gallery with image documents")
    parser.add_argument("source", type=Path, help="JSON file holding a list of image documents")
    parser.add_argument("--batch-size", type=int, default=100, help="Number of documents per insert")
    args = parser.parse_args()

    settings = AppSettings.from_env()
    configure_logging(settings.log_level)
    payloads = json.loads(args.source.read_text(encoding="utf-8"))
    store = MongoImageStore.from_settings(settings)

    inserted = 0
    batch: List[Dict[str, Any]] = []
    try:
        for payload in tqdm(payloads, desc="Seeding images", unit="img"):
            batch.append(to_bson_document(payload))
            if len(batch) >= args.batch_size:
                inserted += store.insert_many(batch)
                batch = []
        inserted += store.insert_many(batch)
    except StoreUnavailable as exc:
        print(f"Seeding stopped after {inserted} images: {exc}", file=sys.stderr)
        return 1
    finally:
        store.close()

    print(f"Inserted {inserted} images into {settings.database_name}.{settings.images_collection}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
