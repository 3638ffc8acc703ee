"""Contract tests run against every ProductRepository implementation."""

import json
from datetime import timezone
from decimal import Decimal

import pytest

from catalog.domain.exceptions import AlreadyExistsError, ProductNotFoundError
from catalog.domain.model.product import ProductStatus
from catalog.infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
    init_schema,
)
from catalog.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from catalog.infrastructure.persistence.sqlalchemy_product_repository import (
    SqlAlchemyProductRepository,
)
from tests.fakes import make_product


@pytest.fixture(params=["memory", "json", "sql"])
def repo(request, tmp_path):
    if request.param == "memory":
        return InMemoryProductRepository()
    if request.param == "json":
        return JsonProductRepository(tmp_path / "products.json")
    engine = create_db_engine("sqlite://")
    init_schema(engine)
    return SqlAlchemyProductRepository(create_session_factory(engine))


class TestCreate:

    def test_assigns_ids(self, repo):
        first = repo.create(make_product(sku="AAA-1"))
        second = repo.create(make_product(sku="BBB-2"))
        assert first.id == 1
        assert second.id == 2

    def test_round_trips_every_field(self, repo):
        original = make_product(description="Latest model", brand="Apple")
        created = repo.create(original)
        loaded = repo.get_by_id(created.id)
        assert loaded.name == "iPhone 15"
        assert loaded.description == "Latest model"
        assert loaded.sku == "IPH15-128GB"
        assert loaded.price.amount == Decimal("999.99")
        assert loaded.category == "Electronics"
        assert loaded.brand == "Apple"
        assert loaded.stock == 100
        assert loaded.status == ProductStatus.ACTIVE
        assert loaded.created_at == original.created_at
        assert loaded.updated_at == original.updated_at
        assert loaded.created_at.tzinfo is not None

    @pytest.mark.parametrize("price", ["1.50", "0.01", "19.99", "999999.99", "7"])
    def test_price_comes_back_unchanged(self, repo, price):
        created = repo.create(make_product(price=price))
        assert created.price.amount == Decimal(price)
        assert repo.get_by_id(created.id).price.amount == Decimal(price)

    def test_duplicate_sku_rejected(self, repo):
        repo.create(make_product(sku="DUP-1"))
        with pytest.raises(AlreadyExistsError):
            repo.create(make_product(name="Other", sku="DUP-1"))
        assert repo.count() == 1


class TestLookups:

    def test_get_by_sku(self, repo):
        repo.create(make_product(sku="WID-001", name="Widget"))
        assert repo.get_by_sku("WID-001").name == "Widget"

    def test_missing_id(self, repo):
        with pytest.raises(ProductNotFoundError):
            repo.get_by_id(404)

    def test_missing_sku(self, repo):
        with pytest.raises(ProductNotFoundError):
            repo.get_by_sku("NOPE-1")

    def test_exists_by_sku(self, repo):
        repo.create(make_product(sku="WID-001"))
        assert repo.exists_by_sku("WID-001")
        assert not repo.exists_by_sku("GAD-002")


class TestUpdate:

    def test_persists_changes(self, repo):
        created = repo.create(make_product(stock=5))
        product = repo.get_by_id(created.id)
        product.reduce_stock(2)
        product.update_price("10.00")
        product.discontinue()
        repo.update(product)

        loaded = repo.get_by_id(created.id)
        assert loaded.stock == 3
        assert loaded.price.amount == Decimal("10.00")
        assert loaded.status == ProductStatus.DISCONTINUED
        assert loaded.updated_at == product.updated_at
        assert loaded.updated_at > loaded.created_at

    def test_loaded_copy_is_detached_until_update(self, repo):
        created = repo.create(make_product(stock=5))
        product = repo.get_by_id(created.id)
        product.add_stock(10)
        assert repo.get_by_id(created.id).stock == 5

    def test_unknown_product_rejected(self, repo):
        product = make_product()
        product.id = 77
        with pytest.raises(ProductNotFoundError):
            repo.update(product)

    def test_sku_taken_by_another_product_rejected(self, repo):
        repo.create(make_product(sku="AAA-1"))
        second = repo.create(make_product(sku="BBB-2"))
        second.sku = "AAA-1"
        with pytest.raises(AlreadyExistsError):
            repo.update(second)


class TestListAndCount:

    def test_pages_in_id_order(self, repo):
        for i in range(1, 8):
            repo.create(make_product(name=f"Product {i}", sku=f"SKU-{i}"))
        assert repo.count() == 7
        assert [p.id for p in repo.list(limit=3, offset=0)] == [1, 2, 3]
        assert [p.id for p in repo.list(limit=3, offset=6)] == [7]
        assert repo.list(limit=3, offset=9) == []

    def test_empty(self, repo):
        assert repo.count() == 0
        assert repo.list(limit=10, offset=0) == []


class TestJsonFile:

    def test_creates_missing_file(self, tmp_path):
        path = tmp_path / "nested" / "products.json"
        JsonProductRepository(path)
        assert json.loads(path.read_text(encoding="utf-8")) == []

    def test_survives_reopen(self, tmp_path):
        path = tmp_path / "products.json"
        JsonProductRepository(path).create(make_product())
        reopened = JsonProductRepository(path)
        assert reopened.get_by_sku("IPH15-128GB").id == 1

    def test_stores_price_as_string(self, tmp_path):
        path = tmp_path / "products.json"
        JsonProductRepository(path).create(make_product(price="12.50"))
        raw = json.loads(path.read_text(encoding="utf-8"))
        assert raw[0]["price"] == "12.50"
        assert raw[0]["status"] == "active"


class TestSqlStore:

    def test_survives_new_engine(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'catalog.db'}"
        engine = create_db_engine(url)
        init_schema(engine)
        SqlAlchemyProductRepository(create_session_factory(engine)).create(make_product())

        engine = create_db_engine(url)
        reopened = SqlAlchemyProductRepository(create_session_factory(engine))
        loaded = reopened.get_by_sku("IPH15-128GB")
        assert loaded.id == 1
        assert loaded.created_at.tzinfo == timezone.utc
