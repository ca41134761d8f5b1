# Path: scripts/search_gallery.py
# Purpose: Simple CLI to run a gallery search against the configured MongoDB.
# Layer: scripts.
# Details: Demonstrates ranked listing by wiring settings, the Mongo store, and the query service.

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Ensure project root is on sys.path when running as a script.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config import AppSettings, configure_logging
from core.search.pipeline import GalleryQueryService
from core.store import MongoImageStore, StoreUnavailable


def main() -> int:
    """Execute a gallery search from the command line."""

    parser = argparse.ArgumentParser(description="Search the Artify gallery")
    parser.add_argument("query", nargs="?", default="", help="Free-text search; omit for the newest images")
    parser.add_argument("--page", type=int, default=1, help="Page number to display")
    parser.add_argument("--page-size", type=int, default=None, help="Images per page")
    args = parser.parse_args()

    settings = AppSettings.from_env()
    configure_logging(settings.log_level)
    store = MongoImageStore.from_settings(settings)
    service = GalleryQueryService(store, settings.search)

    try:
        result = service.list_images(page=args.page, page_size=args.page_size, search_query=args.query)
    except StoreUnavailable as exc:
        print(f"Search failed: {exc}", file=sys.stderr)
        return 1
    finally:
        store.close()

    for position, record in enumerate(result.data, start=1):
        author = record.author
        author_name = " ".join(filter(None, [author.first_name, author.last_name])) if author else "n/a"
        print(f"{position}. id={record.id} title={record.title!r} type={record.transformation_type} by {author_name}")
    print(f"page {args.page}/{result.total_pages} ({result.total_record_count} images in gallery)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
