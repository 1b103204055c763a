"""Tests for the devotional service against a real SQLite file."""

import pytest

from devotional_api.app.core.errors import DevotionalNotFound, StoreError
from devotional_api.app.schemas.devotional import DevotionalCreate, DevotionalUpdate
from devotional_api.app.services.devotional_service import DevotionalService, parse_id


def create(service, verse="John 3:16", content="For God so loved..."):
    return service.create_devotional(DevotionalCreate(verse=verse, content=content))


def fixed_clock(*stamps):
    values = iter(stamps)
    return lambda: next(values)


def test_create_then_get(service) -> None:
    devotional_id = create(service)
    assert devotional_id == 1
    record = service.get_devotional(devotional_id)
    assert record.verse == "John 3:16"
    assert record.content == "For God so loved..."
    assert record.created_at
    assert record.updated_at is None
    assert record.deleted_at is None


def test_created_at_comes_from_the_store(database) -> None:
    # The clock is never consulted on insert
    service = DevotionalService(database, clock=fixed_clock())
    record = service.get_devotional(create(service))
    assert record.created_at.startswith("20")


def test_ids_are_not_reused_after_delete(service) -> None:
    first = create(service)
    service.delete_devotional(first)
    second = create(service)
    assert second > first


def test_list_is_newest_first_and_skips_deleted(service) -> None:
    ids = [create(service, verse=f"v{n}") for n in range(3)]
    service.delete_devotional(ids[1])
    listed = service.list_devotionals()
    assert [record.id for record in listed] == [ids[2], ids[0]]
    assert all(record.deleted_at is None for record in listed)


def test_list_orders_by_created_at_before_id(service, database) -> None:
    older = create(service, verse="older")
    newer = create(service, verse="newer")
    with database.cursor() as cursor:
        cursor.execute(
            "UPDATE devotionals SET created_at = '2001-01-01 00:00:00.000' WHERE id = ?",
            (newer,),
        )
    assert [record.id for record in service.list_devotionals()] == [older, newer]


def test_list_empty(service) -> None:
    assert service.list_devotionals() == []


def test_partial_update_changes_only_supplied_field(service) -> None:
    devotional_id = create(service)
    updated = service.update_devotional(devotional_id, DevotionalUpdate(content="New content"))
    assert updated.content == "New content"
    assert updated.verse == "John 3:16"
    assert updated.updated_at is not None
    assert updated.updated_at > updated.created_at


def test_each_update_refreshes_updated_at(database) -> None:
    service = DevotionalService(
        database,
        clock=fixed_clock("2099-01-01 00:00:01.000000", "2099-01-01 00:00:02.000000"),
    )
    devotional_id = create(service)
    first = service.update_devotional(devotional_id, DevotionalUpdate(verse="a"))
    second = service.update_devotional(devotional_id, DevotionalUpdate(verse="b"))
    assert first.updated_at == "2099-01-01 00:00:01.000000"
    assert second.updated_at == "2099-01-01 00:00:02.000000"


def test_delete_stamps_deleted_at_from_clock(database) -> None:
    service = DevotionalService(database, clock=fixed_clock("2099-06-01 12:00:00.000000"))
    devotional_id = create(service)
    service.delete_devotional(devotional_id)
    with database.cursor() as cursor:
        row = cursor.execute("SELECT * FROM devotionals WHERE id = ?", (devotional_id,)).fetchone()
    assert row is not None
    assert row["deleted_at"] == "2099-06-01 12:00:00.000000"


def test_deleted_record_is_gone(service) -> None:
    devotional_id = create(service)
    service.delete_devotional(devotional_id)
    with pytest.raises(DevotionalNotFound):
        service.get_devotional(devotional_id)
    with pytest.raises(DevotionalNotFound):
        service.update_devotional(devotional_id, DevotionalUpdate(verse="x"))
    with pytest.raises(DevotionalNotFound):
        service.delete_devotional(devotional_id)


def test_unknown_ids_are_not_found(service) -> None:
    for bad_id in (999, "abc", "1.5", str(2 ** 70)):
        with pytest.raises(DevotionalNotFound):
            service.get_devotional(bad_id)


def test_integer_lookalikes_do_not_alias_records(service) -> None:
    ids = [create(service, verse=f"v{n}") for n in range(10)]
    assert ids[-1] == 10
    for alias in ("1_0", "+10", " 10", "10 ", "１０"):
        with pytest.raises(DevotionalNotFound):
            service.get_devotional(alias)
        with pytest.raises(DevotionalNotFound):
            service.delete_devotional(alias)
    assert service.get_devotional("10").id == 10


def test_store_failure_becomes_store_error(service, database) -> None:
    with database.cursor() as cursor:
        cursor.execute("DROP TABLE devotionals")
    with pytest.raises(StoreError):
        service.list_devotionals()
    with pytest.raises(StoreError):
        create(service)


def test_parse_id() -> None:
    assert parse_id("12") == 12
    assert parse_id("-3") == -3
    assert parse_id(7) == 7
    for raw in ("x", " 3 ", "+1", "1_0", "１", "٣", "", str(2 ** 64)):
        assert parse_id(raw) is None
