"""Integration tests for the CatalogStore.

Uses an in-memory fake source, no network.
"""

from decimal import Decimal

import pytest

from catview.application.catalog_store import CatalogStore
from catview.domain.exceptions import DecodeError, LoadError
from tests.fakes import FakeCatalogSource, raw_record


class TestLoadHappyPath:

    def test_maps_records_to_products(self):
        source = FakeCatalogSource([
            raw_record(
                1, "Shirt", 29.5,
                images='["https://i.imgur.com/a.jpeg", " https://i.imgur.com/b.jpeg "]',
                category={"id": 3, "name": "Clothes"},
                description="Soft cotton",
                slug="shirt",
            ),
        ])
        store = CatalogStore(source)
        catalog = store.load()

        assert len(catalog) == 1
        product = catalog[0]
        assert product.id == 1
        assert product.title == "Shirt"
        assert product.price.amount == Decimal("29.5")
        assert product.images == ("https://i.imgur.com/a.jpeg", "https://i.imgur.com/b.jpeg")
        assert product.category_name == "Clothes"
        assert product.description == "Soft cotton"
        assert product.extra["slug"] == "shirt"
        assert product.extra["category"] == {"id": 3, "name": "Clothes"}

    def test_get_returns_loaded_catalog(self):
        store = CatalogStore(FakeCatalogSource([raw_record(1, "A"), raw_record(2, "B")]))
        store.load()
        assert [p.title for p in store.get()] == ["A", "B"]
        assert store.loaded

    def test_catalog_is_immutable_tuple(self):
        store = CatalogStore(FakeCatalogSource([raw_record(1, "A")]))
        assert isinstance(store.load(), tuple)
        with pytest.raises(TypeError):
            store.get()[0].extra["new"] = 1

    def test_reload_replaces_catalog(self):
        source = FakeCatalogSource([raw_record(1, "A")])
        store = CatalogStore(source)
        store.load()
        source.records = [raw_record(2, "B"), raw_record(3, "C")]
        store.load()
        assert [p.id for p in store.get()] == [2, 3]

    def test_missing_optional_fields_default(self):
        store = CatalogStore(FakeCatalogSource([{"id": 7, "title": "Bare", "price": 1}]))
        product = store.load()[0]
        assert product.images == ()
        assert product.category_name is None
        assert product.description == ""


class TestPerRecordAnomalies:

    def test_malformed_images_degrade_to_empty(self):
        store = CatalogStore(FakeCatalogSource([raw_record(1, "A", images="[not json")]))
        assert store.load()[0].images == ()

    def test_deeply_nested_images_do_not_abort_load(self):
        source = FakeCatalogSource([
            raw_record(1, "ok"),
            raw_record(2, "bad", images="[" * 100000),
        ])
        catalog = CatalogStore(source).load()
        assert [p.id for p in catalog] == [1, 2]
        assert catalog[1].images == ()

    def test_record_without_title_skipped(self):
        source = FakeCatalogSource([{"id": 1, "price": 5}, raw_record(2, "Kept")])
        assert [p.id for p in CatalogStore(source).load()] == [2]

    def test_record_with_bad_price_skipped(self):
        source = FakeCatalogSource([raw_record(1, "A", price="free"), raw_record(2, "B")])
        assert [p.id for p in CatalogStore(source).load()] == [2]

    def test_non_object_record_skipped(self):
        source = FakeCatalogSource(["junk", 42, raw_record(3, "C")])
        assert [p.id for p in CatalogStore(source).load()] == [3]

    def test_skipped_records_logged(self, caplog):
        with caplog.at_level("WARNING", logger="catview.application.catalog_store"):
            CatalogStore(FakeCatalogSource([{"id": 1}])).load()
        assert "Skipping record #0" in caplog.text


class TestLoadFailure:

    def test_first_load_failure_leaves_catalog_empty(self):
        store = CatalogStore(FakeCatalogSource(error=LoadError("HTTP 500")))
        with pytest.raises(LoadError, match="HTTP 500"):
            store.load()
        assert store.get() == ()
        assert not store.loaded
        assert isinstance(store.last_error, LoadError)

    def test_failed_reload_keeps_previous_catalog(self):
        source = FakeCatalogSource([raw_record(1, "A")])
        store = CatalogStore(source)
        store.load()
        source.error = DecodeError("not JSON")
        with pytest.raises(DecodeError):
            store.load()
        assert [p.id for p in store.get()] == [1]

    def test_successful_load_clears_last_error(self):
        source = FakeCatalogSource(error=LoadError("down"))
        store = CatalogStore(source)
        with pytest.raises(LoadError):
            store.load()
        source.error = None
        store.load()
        assert store.last_error is None


class TestClose:

    def test_load_after_close_does_not_replace_catalog(self):
        source = FakeCatalogSource([raw_record(1, "A")])
        store = CatalogStore(source)
        store.close()
        assert store.load() == ()
        assert store.get() == ()
        assert store.closed
