"""
Unit tests for ProductRepository

Run against an in-memory SQLite database; repositories never commit,
so each test commits explicitly where it needs the row persisted.

Author: TM3
Date: 2025-10-17
"""
from decimal import Decimal
from uuid import uuid4

from sales_api.domain.product import Product
from sales_api.repositories.product_repository import ProductRepository


class TestProductRepository:
    """Test ProductRepository methods"""

    def test_get_by_id_returns_product(self, db_session, product_repository):
        """Test get_by_id returns a Product domain model"""
        # Arrange
        product = product_repository.create(
            Product(name="Cerveza IPA", description="Lata 355ml", price=Decimal("12.90"))
        )
        db_session.commit()

        # Act
        found = product_repository.get_by_id(product.id)

        # Assert
        assert isinstance(found, Product)
        assert found.id == product.id
        assert found.name == "Cerveza IPA"
        assert found.description == "Lata 355ml"
        assert found.price == Decimal("12.90")
        assert found.created_at.tzinfo is not None

    def test_get_by_id_returns_none_when_not_found(self, product_repository):
        """Test get_by_id returns None when product doesn't exist"""
        assert product_repository.get_by_id(uuid4()) is None

    def test_create_does_not_commit(self, db_session, product_repository):
        """Nothing is persisted until the unit of work commits"""
        # Arrange
        product = product_repository.create(Product(name="Agua", price=Decimal("1.00")))

        # Act: rollback instead of commit
        db_session.rollback()

        # Assert
        assert product_repository.get_by_id(product.id) is None

    def test_update_writes_changes(self, db_session, product_repository, product):
        # Arrange
        product.update_info("Cerveza Lager 473ml", "Lata grande", Decimal("14.50"), False)

        # Act
        updated = product_repository.update(product)
        db_session.commit()

        # Assert
        stored = product_repository.get_by_id(product.id)
        assert updated is product
        assert stored.name == "Cerveza Lager 473ml"
        assert stored.price == Decimal("14.50")
        assert stored.is_active is False
        assert stored.updated_at is not None

    def test_update_missing_product_returns_none(self, product_repository):
        assert product_repository.update(Product(name="Fantasma", price=Decimal("1"))) is None

    def test_delete(self, db_session, product_repository, product):
        assert product_repository.delete(product.id) is True
        db_session.commit()

        assert product_repository.get_by_id(product.id) is None
        assert product_repository.delete(product.id) is False

    def test_get_paged_filters_and_orders_by_name(self, db_session, product_repository):
        """Test get_paged returns one page of products and the total count"""
        # Arrange
        for name, active in [("Vino Tinto", True), ("Cerveza Negra", True), ("Cerveza Rubia", False),
                             ("Cerveza Roja", True)]:
            product_repository.create(Product(name=name, price=Decimal("5.00"), is_active=active))
        db_session.commit()

        # Act
        products, total = product_repository.get_paged(1, 1, search="cerveza", is_active=True)
        second_page, _ = product_repository.get_paged(2, 1, search="cerveza", is_active=True)

        # Assert
        assert total == 2
        assert [p.name for p in products] == ["Cerveza Negra"]
        assert [p.name for p in second_page] == ["Cerveza Roja"]

    def test_get_paged_search_treats_wildcards_literally(self, db_session, product_repository):
        # Arrange
        for name in ["Promo 50% Lager", "Promo 500 Lager", "Pack_6 Lager", "Pack 6 Lager"]:
            product_repository.create(Product(name=name, price=Decimal("5.00")))
        db_session.commit()

        # Act
        percent, percent_total = product_repository.get_paged(1, 10, search="50%")
        underscore, underscore_total = product_repository.get_paged(1, 10, search="k_6")

        # Assert
        assert percent_total == 1
        assert [p.name for p in percent] == ["Promo 50% Lager"]
        assert underscore_total == 1
        assert [p.name for p in underscore] == ["Pack_6 Lager"]

    def test_get_paged_past_last_page_is_empty(self, product_repository, product):
        products, total = product_repository.get_paged(5, 10)

        assert products == []
        assert total == 1


class TestProductRepositoryMapping:

    def test_map_row_to_product(self, db_session, product):
        from sales_api.models.product import Product as ProductModel

        row = db_session.get(ProductModel, product.id)

        mapped = ProductRepository._map_row_to_product(row)

        assert mapped.model_dump() == product.model_dump()
