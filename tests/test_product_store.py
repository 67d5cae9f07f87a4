import pytest

from products_api.app.core.errors import NotFoundError, ProductsAPIError
from products_api.app.schemas.product import ProductCreate, ProductUpdate
from products_api.app.services.product_service import ProductStore


def make_product(**overrides) -> ProductCreate:
    fields = {
        "name": "Notebook",
        "description": "Paper notebook",
        "price": 3.5,
        "category": "Office",
        "in_stock": True,
    }
    fields.update(overrides)
    return ProductCreate(**fields)


@pytest.fixture
def store() -> ProductStore:
    return ProductStore.with_seed_data()


class TestList:
    def test_defaults(self, store):
        page = store.list()

        assert page.total == 3
        assert page.page == 1
        assert page.limit == 10
        assert page.total_pages == 1
        assert [p.id for p in page.data] == ["1", "2", "3"]

    def test_category_is_case_insensitive(self, store):
        page = store.list(category="kitchen")

        assert page.total == 1
        assert [p.name for p in page.data] == ["Coffee Mug"]

    def test_in_stock_filter(self, store):
        assert [p.id for p in store.list(in_stock=True).data] == ["1", "2"]
        assert [p.id for p in store.list(in_stock=False).data] == ["3"]

    def test_filters_combine(self, store):
        assert store.list(category="home", in_stock=True).total == 0

    def test_pagination(self, store):
        page = store.list(page=2, limit=2)

        assert page.total == 3
        assert page.total_pages == 2
        assert [p.id for p in page.data] == ["3"]

    def test_page_past_the_end_is_empty(self, store):
        page = store.list(page=5, limit=2)

        assert page.data == []
        assert page.total == 3

    def test_invalid_page_and_limit_fall_back_to_defaults(self, store):
        page = store.list(page=0, limit=-1)

        assert page.page == 1
        assert page.limit == 10

    def test_empty_store(self):
        page = ProductStore().list()

        assert page.total == 0
        assert page.total_pages == 0
        assert page.data == []


class TestCrud:
    def test_get(self, store):
        assert store.get("2").name == "Coffee Mug"

    def test_get_missing(self, store):
        with pytest.raises(NotFoundError) as exc_info:
            store.get("999")

        assert exc_info.value.message == "Product not found"
        assert exc_info.value.status_code == 404

    def test_create_appends_with_new_id(self, store):
        first = store.create(make_product())
        second = store.create(make_product(name="Pen"))

        assert first.id != second.id
        assert first.id not in {"1", "2", "3"}
        assert [p.id for p in store.all()][-2:] == [first.id, second.id]
        assert len(store) == 5

    def test_update_merges_fields_in_place(self, store):
        updated = store.update("2", ProductUpdate(price=15.0))

        assert updated.price == 15.0
        assert updated.name == "Coffee Mug"
        assert store.get("2") == updated
        assert [p.id for p in store.all()] == ["1", "2", "3"]

    def test_update_never_changes_id(self, store):
        class PatchWithId:
            def model_dump(self, exclude_unset=False):
                return {"id": "42", "name": "Renamed"}

        updated = store.update("1", PatchWithId())

        assert updated.id == "1"
        assert updated.name == "Renamed"

    def test_update_missing(self, store):
        with pytest.raises(NotFoundError):
            store.update("999", ProductUpdate(name="x"))

    def test_delete_returns_removed_product(self, store):
        removed = store.delete("1")

        assert removed.name == "Laptop"
        assert [p.id for p in store.all()] == ["2", "3"]

    def test_delete_missing(self, store):
        with pytest.raises(NotFoundError):
            store.delete("999")

    def test_seed_data_is_copied_per_store(self, store):
        store.delete("1")

        assert len(ProductStore.with_seed_data()) == 3


class TestSearch:
    def test_matches_name_or_description(self, store):
        result = store.search("LED")

        assert result.query == "led"
        assert result.total == 1
        assert result.results[0].name == "Desk Lamp"

    def test_matches_preserve_order(self, store):
        result = store.search("a")

        assert [p.id for p in result.results] == ["1", "2", "3"]

    def test_no_matches(self, store):
        result = store.search("bicycle")

        assert result.total == 0
        assert result.results == []

    @pytest.mark.parametrize("query", [None, ""])
    def test_missing_query(self, store, query):
        with pytest.raises(ProductsAPIError) as exc_info:
            store.search(query)

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Search query is required"


class TestStats:
    def test_seed_stats(self, store):
        stats = store.stats()

        assert stats.total_products == 3
        assert stats.in_stock == 2
        assert stats.out_of_stock == 1
        assert stats.categories == {"Electronics": 1, "Kitchen": 1, "Home": 1}
        assert stats.price_stats.highest == 1299.99
        assert stats.price_stats.lowest == 12.99
        assert stats.price_stats.average == pytest.approx((1299.99 + 12.99 + 34.99) / 3)

    def test_categories_are_counted(self, store):
        store.create(make_product(category="Kitchen"))

        assert store.stats().categories["Kitchen"] == 2

    def test_empty_store(self):
        stats = ProductStore().stats()

        assert stats.total_products == 0
        assert stats.in_stock == 0
        assert stats.out_of_stock == 0
        assert stats.categories == {}
        assert stats.price_stats.highest is None
        assert stats.price_stats.lowest is None
        assert stats.price_stats.average is None
