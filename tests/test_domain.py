"""ImageRecord document conversion tests."""

from datetime import datetime

from bson import ObjectId

from core.models.domain import Author, GalleryPage, ImageRecord

UPDATED = datetime(2024, 6, 1, 8, 30)


def test_from_document_with_populated_author():
    document = {
        "_id": ObjectId("65a000000000000000000001"),
        "title": "Sunset",
        "transformationType": "fill",
        "aspectRatio": "16:9",
        "publicId": "artify/sunset",
        "secureURL": "https://example.com/sunset.png",
        "width": 1024,
        "author": {"_id": ObjectId("65a0000000000000000000aa"), "firstName": "Ada", "lastName": "Lovelace"},
        "updatedAt": UPDATED,
    }
    record = ImageRecord.from_document(document)
    assert record.id == "65a000000000000000000001"
    assert record.aspect_ratio == "16:9"
    assert record.author == Author(id="65a0000000000000000000aa", first_name="Ada", last_name="Lovelace")
    assert record.updated_at == UPDATED
    assert record.extra == {"secureURL": "https://example.com/sunset.png", "width": 1024}
    assert record.prompt is None


def test_from_document_with_unpopulated_or_missing_author():
    assert ImageRecord.from_document({"author": "u1"}).author == Author(id="u1")
    assert ImageRecord.from_document({"title": "x"}).author is None


def test_to_dict_inlines_author_and_keeps_extra_fields():
    record = ImageRecord(
        id="1",
        title="Sunset",
        color="red",
        author=Author(id="u1", first_name="Ada"),
        updated_at=UPDATED,
        extra={"width": 512},
    )
    assert record.to_dict() == {
        "_id": "1",
        "title": "Sunset",
        "color": "red",
        "width": 512,
        "author": {"_id": "u1", "firstName": "Ada", "lastName": None, "clerkId": None},
        "updatedAt": "2024-06-01T08:30:00",
    }


def test_gallery_page_uses_caller_field_names():
    page = GalleryPage(data=[], total_pages=1, total_record_count=0)
    assert page.to_dict() == {"data": [], "totalPages": 1, "savedImages": 0}
