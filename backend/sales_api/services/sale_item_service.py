"""
Sale Item Service
Items are changed through their Sale so the sale total stays in step.

Author: TM3
Date: 2025-10-17
"""
import logging
from uuid import UUID

from sales_api.core.errors import BusinessRuleError, NotFoundError
from sales_api.core.unit_of_work import UnitOfWork
from sales_api.domain.product import Product
from sales_api.domain.sale import Sale, SaleItemCreate, SaleItemUpdate
from sales_api.events.publisher import MessagePublisher
from sales_api.events.topics import EventTopics
from sales_api.repositories.product_repository import ProductRepository
from sales_api.repositories.sale_item_repository import SaleItemRepository
from sales_api.repositories.sale_repository import SaleRepository
from sales_api.services.base import BaseService
from sales_api.services.mappers import (
    sale_item_to_result,
    sale_item_to_added_event,
    sale_item_to_updated_event,
    sale_item_to_cancelled_event,
)
from sales_api.services.results import SaleItemResult, PagedResult, build_page
from sales_api.validators import (
    ensure_valid,
    validate_id,
    validate_page_request,
    validate_create_sale_item,
    validate_update_sale_item,
)

logger = logging.getLogger(__name__)


class SaleItemService(BaseService):

    def __init__(
        self,
        sales: SaleRepository,
        sale_items: SaleItemRepository,
        products: ProductRepository,
        unit_of_work: UnitOfWork,
        publisher: MessagePublisher
    ):
        super().__init__(unit_of_work, publisher)
        self.sales = sales
        self.sale_items = sale_items
        self.products = products

    def _get_sale(self, sale_id: UUID) -> Sale:
        sale = self.sales.get_by_id(sale_id)
        if sale is None:
            raise NotFoundError("Sale", sale_id)
        return sale

    def _get_sellable_product(self, product_id: UUID) -> Product:
        product = self.products.get_by_id(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        if not product.can_be_sold:
            raise BusinessRuleError(f"Product {product.id} is not active")
        return product

    def add_item(self, command: SaleItemCreate) -> SaleItemResult:
        """
        Add an item to a Pending sale

        The item keeps the unit price and discount given in the command.
        """
        logger.info(f"Adding product {command.product_id} to sale {command.sale_id}")
        ensure_valid(validate_create_sale_item(command))

        sale = self._get_sale(command.sale_id)
        sale.ensure_items_editable("add")
        product = self._get_sellable_product(command.product_id)

        item = sale.add_item(product.id, command.quantity, command.unit_price, command.discount)
        self.sales.update(sale)
        self._commit("sale item creation")

        self._publish(EventTopics.SALE_ITEM_ADDED, sale_item_to_added_event(item))
        logger.info(f"Sale item {item.id} added to sale {sale.id}, sale total {sale.total_amount}")
        return sale_item_to_result(item)

    def get_item(self, sale_id: UUID, item_id: UUID) -> SaleItemResult:
        ensure_valid(
            validate_id(sale_id, "Sale ID", field="sale_id") + validate_id(item_id, "Sale item ID")
        )

        item = self.sale_items.get_by_id_and_sale_id(item_id, sale_id)
        if item is None:
            raise NotFoundError("Sale item", item_id)
        return sale_item_to_result(item)

    def list_items(self, sale_id: UUID, page: int, size: int) -> PagedResult[SaleItemResult]:
        ensure_valid(
            validate_id(sale_id, "Sale ID", field="sale_id") + validate_page_request(page, size)
        )

        self._get_sale(sale_id)

        items, total = self.sale_items.get_paged_by_sale_id(sale_id, page, size)
        return build_page([sale_item_to_result(i) for i in items], total, page, size)

    def update_item(self, command: SaleItemUpdate) -> SaleItemResult:
        """
        Change the product or quantity of an item

        The unit price is refreshed from the product; the item's discount
        is kept.
        """
        logger.info(f"Updating sale item {command.id} of sale {command.sale_id}")
        ensure_valid(validate_update_sale_item(command))

        sale = self._get_sale(command.sale_id)
        item = sale.find_item(command.id)
        if item is None:
            logger.warning(f"Sale item {command.id} not found in sale {command.sale_id}")
            raise NotFoundError("Sale item", command.id)

        sale.ensure_items_editable("update")
        product = self._get_sellable_product(command.product_id)

        previous = item.model_copy()
        sale.update_item(item.id, product.id, command.quantity, product.price, item.discount)
        self.sales.update(sale)
        self._commit("sale item update")

        self._publish(EventTopics.SALE_ITEM_UPDATED, sale_item_to_updated_event(previous, item))
        logger.info(f"Sale item updated: {item.id}, sale total {sale.total_amount}")
        return sale_item_to_result(item)

    def delete_item(self, sale_id: UUID, item_id: UUID) -> None:
        logger.info(f"Deleting sale item {item_id} of sale {sale_id}")
        ensure_valid(
            validate_id(sale_id, "Sale ID", field="sale_id") + validate_id(item_id, "Sale item ID")
        )

        sale = self._get_sale(sale_id)
        if sale.find_item(item_id) is None:
            logger.warning(f"Sale item {item_id} not found in sale {sale_id}")
            raise NotFoundError("Sale item", item_id)

        item = sale.remove_item(item_id)
        self.sales.update(sale)
        self._commit("sale item deletion")

        self._publish(EventTopics.SALE_ITEM_CANCELLED, sale_item_to_cancelled_event(item))
        logger.info(f"Sale item {item_id} deleted from sale {sale_id}")
