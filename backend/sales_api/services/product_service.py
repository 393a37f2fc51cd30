"""
Product Service
Product catalog CRUD; update and delete read and write the stored product

Author: TM3
Date: 2025-10-17
"""
import logging
from typing import Optional
from uuid import UUID

from sales_api.core.errors import ConflictError, NotFoundError
from sales_api.core.unit_of_work import UnitOfWork
from sales_api.domain.product import ProductCreate, ProductUpdate
from sales_api.repositories.product_repository import ProductRepository
from sales_api.services.base import BaseService
from sales_api.services.mappers import product_from_create, product_to_result
from sales_api.services.results import ProductResult, PagedResult, build_page
from sales_api.validators import (
    ensure_valid,
    validate_id,
    validate_page_request,
    validate_create_product,
    validate_update_product,
)

logger = logging.getLogger(__name__)


class ProductService(BaseService):

    def __init__(self, products: ProductRepository, unit_of_work: UnitOfWork):
        super().__init__(unit_of_work)
        self.products = products

    def create_product(self, command: ProductCreate) -> ProductResult:
        logger.info(f"Creating product: {command.name}")
        ensure_valid(validate_create_product(command))

        product = self.products.create(product_from_create(command))
        self._commit("product creation")

        logger.info(f"Product created: {product.id} ({product.name}) at {product.price}")
        return product_to_result(product)

    def get_product(self, product_id: UUID) -> ProductResult:
        ensure_valid(validate_id(product_id, "Product ID"))

        product = self.products.get_by_id(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        return product_to_result(product)

    def list_products(
        self,
        page: int,
        size: int,
        search: Optional[str] = None,
        is_active: Optional[bool] = None
    ) -> PagedResult[ProductResult]:
        ensure_valid(validate_page_request(page, size, search))

        products, total = self.products.get_paged(page, size, search=search, is_active=is_active)
        return build_page([product_to_result(p) for p in products], total, page, size)

    def update_product(self, command: ProductUpdate) -> ProductResult:
        logger.info(f"Updating product: {command.id}")
        ensure_valid(validate_update_product(command))

        product = self.products.get_by_id(command.id)
        if product is None:
            logger.warning(f"Product not found for update: {command.id}")
            raise NotFoundError("Product", command.id)

        product.update_info(command.name, command.description, command.price, command.is_active)
        self.products.update(product)
        self._commit("product update")

        logger.info(f"Product updated: {product.id}")
        return product_to_result(product)

    def delete_product(self, product_id: UUID) -> None:
        logger.info(f"Deleting product: {product_id}")
        ensure_valid(validate_id(product_id, "Product ID"))

        if self.products.get_by_id(product_id) is None:
            logger.warning(f"Product not found for deletion: {product_id}")
            raise NotFoundError("Product", product_id)

        if self.products.has_sale_items(product_id):
            logger.warning(f"Product {product_id} is on sale items, refusing deletion")
            raise ConflictError(f"Product with ID {product_id} is used by sale items and cannot be deleted")

        self.products.delete(product_id)
        self._commit("product deletion")
        logger.info(f"Product deleted: {product_id}")
