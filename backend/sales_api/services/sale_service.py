"""
Sale Service
Sale lifecycle: creation with initial items, header updates, status
transitions and removal. Events are published once the commit succeeds.

Author: TM3
Date: 2025-10-17
"""
import logging
from typing import Optional
from uuid import UUID

from sales_api.core.errors import BusinessRuleError, ConflictError, NotFoundError
from sales_api.core.unit_of_work import UnitOfWork
from sales_api.domain.sale import SaleCreate, SaleItemCreate, SaleStatus, SaleStatusUpdate, SaleUpdate
from sales_api.events.publisher import MessagePublisher
from sales_api.events.topics import EventTopics
from sales_api.repositories.branch_repository import BranchRepository
from sales_api.repositories.customer_repository import CustomerRepository
from sales_api.repositories.product_repository import ProductRepository
from sales_api.repositories.sale_repository import SaleRepository
from sales_api.services.base import BaseService
from sales_api.services.mappers import (
    sale_from_create,
    sale_to_result,
    sale_to_created_event,
    sale_to_modified_event,
    sale_to_cancelled_event,
    sale_to_status_changed_event,
)
from sales_api.services.results import SaleResult, PagedResult, build_page
from sales_api.validators import (
    ensure_valid,
    validate_id,
    validate_page_request,
    validate_create_sale,
    validate_update_sale,
    validate_update_sale_status,
)

logger = logging.getLogger(__name__)


class SaleService(BaseService):

    def __init__(
        self,
        sales: SaleRepository,
        customers: CustomerRepository,
        branches: BranchRepository,
        products: ProductRepository,
        unit_of_work: UnitOfWork,
        publisher: MessagePublisher
    ):
        super().__init__(unit_of_work, publisher)
        self.sales = sales
        self.customers = customers
        self.branches = branches
        self.products = products

    def _ensure_sale_number_available(self, sale_number: str, sale_id: Optional[UUID] = None) -> None:
        existing = self.sales.get_by_sale_number(sale_number)
        if existing is not None and existing.id != sale_id:
            logger.warning(f"Sale number already in use: {sale_number}")
            raise ConflictError(f"Sale with number {sale_number} already exists")

    def _ensure_parties_exist(self, customer_id: UUID, branch_id: UUID) -> None:
        """Customer and branch must exist before a sale points at them"""
        if self.customers.get_by_id(customer_id) is None:
            logger.warning(f"Sale references unknown customer: {customer_id}")
            raise NotFoundError("Customer", customer_id)
        if self.branches.get_by_id(branch_id) is None:
            logger.warning(f"Sale references unknown branch: {branch_id}")
            raise NotFoundError("Branch", branch_id)

    def _ensure_product_sellable(self, item: SaleItemCreate) -> None:
        product = self.products.get_by_id(item.product_id)
        if product is None:
            raise NotFoundError("Product", item.product_id)
        if not product.can_be_sold:
            raise BusinessRuleError(f"Product {product.id} is not active")

    def create_sale(self, command: SaleCreate) -> SaleResult:
        """
        Create a Pending sale, optionally with its first items

        Raises:
            ValidationError: invalid command
            ConflictError: sale number already used
            NotFoundError: unknown customer, branch or product
            BusinessRuleError: inactive product
            TransactionError: commit failed
        """
        logger.info(f"Creating sale: {command.sale_number}")
        ensure_valid(validate_create_sale(command))
        self._ensure_sale_number_available(command.sale_number)
        self._ensure_parties_exist(command.customer_id, command.branch_id)

        for item in command.items:
            self._ensure_product_sellable(item)

        sale = self.sales.create(sale_from_create(command))
        self._commit("sale creation")

        self._publish(EventTopics.SALE_CREATED, sale_to_created_event(sale))
        logger.info(f"Sale created: {sale.id} ({sale.sale_number}) with {len(sale.items)} items")
        return sale_to_result(sale)

    def get_sale(self, sale_id: UUID) -> SaleResult:
        ensure_valid(validate_id(sale_id, "Sale ID"))

        sale = self.sales.get_by_id(sale_id)
        if sale is None:
            raise NotFoundError("Sale", sale_id)
        return sale_to_result(sale)

    def list_sales(
        self,
        page: int,
        size: int,
        sale_number: Optional[str] = None,
        customer_id: Optional[UUID] = None,
        branch_id: Optional[UUID] = None,
        status: Optional[SaleStatus] = None
    ) -> PagedResult[SaleResult]:
        ensure_valid(validate_page_request(page, size, sale_number=sale_number))

        sales, total = self.sales.get_paged(
            page,
            size,
            sale_number=sale_number,
            customer_id=customer_id,
            branch_id=branch_id,
            status=status
        )
        return build_page([sale_to_result(s) for s in sales], total, page, size)

    def update_sale(self, command: SaleUpdate) -> SaleResult:
        """
        Update the sale header

        A status of Cancelled cancels the sale instead of touching the
        header. Other status changes go through update_sale_status.
        """
        logger.info(f"Updating sale: {command.id}")
        ensure_valid(validate_update_sale(command))

        sale = self.sales.get_by_id(command.id)
        if sale is None:
            logger.warning(f"Sale not found for update: {command.id}")
            raise NotFoundError("Sale", command.id)

        self._ensure_sale_number_available(command.sale_number, sale.id)
        self._ensure_parties_exist(command.customer_id, command.branch_id)

        cancelling = command.status == SaleStatus.CANCELLED
        if cancelling:
            sale.cancel()
        else:
            if command.status is not None and command.status != sale.status:
                raise BusinessRuleError(
                    f"Sale status cannot be changed to {command.status.value} here; use the status update"
                )
            sale.update_info(command.sale_number, command.sale_date, command.customer_id, command.branch_id)

        self.sales.update(sale)
        self._commit("sale update")

        if cancelling:
            self._publish(EventTopics.SALE_CANCELLED, sale_to_cancelled_event(sale))
        else:
            self._publish(EventTopics.SALE_MODIFIED, sale_to_modified_event(sale))

        logger.info(f"Sale updated: {sale.id}")
        return sale_to_result(sale)

    def update_sale_status(self, command: SaleStatusUpdate) -> SaleResult:
        logger.info(f"Updating status of sale: {command.id}")
        ensure_valid(validate_update_sale_status(command))

        sale = self.sales.get_by_id(command.id)
        if sale is None:
            logger.warning(f"Sale not found for status update: {command.id}")
            raise NotFoundError("Sale", command.id)

        previous_status = sale.status
        sale.change_status(command.status)

        self.sales.update(sale)
        self._commit("sale status update")

        self._publish(EventTopics.SALE_STATUS_CHANGED, sale_to_status_changed_event(sale, previous_status))
        if sale.is_cancelled:
            self._publish(EventTopics.SALE_CANCELLED, sale_to_cancelled_event(sale))

        logger.info(f"Sale {sale.id} status changed: {previous_status.value} -> {sale.status.value}")
        return sale_to_result(sale)

    def delete_sale(self, sale_id: UUID) -> None:
        logger.info(f"Deleting sale: {sale_id}")
        ensure_valid(validate_id(sale_id, "Sale ID"))

        if self.sales.get_by_id(sale_id) is None:
            logger.warning(f"Sale not found for deletion: {sale_id}")
            raise NotFoundError("Sale", sale_id)

        self.sales.delete(sale_id)
        self._commit("sale deletion")
        logger.info(f"Sale deleted: {sale_id}")
