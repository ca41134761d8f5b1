"""Shared fixtures for the gallery search tests."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

import pytest

from core.models.domain import Author, ImageRecord
from core.store.memory_store import InMemoryImageStore

BASE_TIME = datetime(2024, 5, 1, 12, 0, 0)


def make_record(
    id: str,
    title: Optional[str] = None,
    transformation_type: Optional[str] = None,
    minutes: int = 0,
    author: Optional[Author] = None,
    **fields,
) -> ImageRecord:
    """Build a record updated ``minutes`` after BASE_TIME."""

    return ImageRecord(
        id=id,
        title=title,
        transformation_type=transformation_type,
        author=author,
        updated_at=BASE_TIME + timedelta(minutes=minutes),
        **fields,
    )


@pytest.fixture
def ada():
    return Author(id="u1", first_name="Ada", last_name="Lovelace", clerk_id="clerk_1")


@pytest.fixture
def gallery_records(ada):
    grace = Author(id="u2", first_name="Grace", last_name="Hopper")
    return [
        make_record("1", "Sunset", "removeBackground", minutes=1, author=ada, prompt="beach at dusk"),
        make_record("2", "Cat portrait", "recolor", minutes=2, author=grace, color="orange"),
        make_record("3", "Mountain lake", "restore", minutes=3, author=ada),
        make_record("4", "Sunset over sea", "fill", minutes=4, author=grace, aspect_ratio="16:9"),
        make_record("5", "City lights", "generativeFill", minutes=5, author=ada, prompt="neon sunset skyline"),
        make_record("6", "Old photo", "restore", minutes=6, author=grace, public_id="artify/old_photo"),
    ]


@pytest.fixture
def store(gallery_records):
    return InMemoryImageStore(gallery_records)


@pytest.fixture
def record_factory():
    return make_record
