"""
Customer Service
Customer CRUD with unique email enforcement

Author: TM3
Date: 2025-10-17
"""
import logging
from typing import Optional
from uuid import UUID

from sales_api.core.errors import ConflictError, NotFoundError
from sales_api.core.unit_of_work import UnitOfWork
from sales_api.domain.customer import CustomerCreate, CustomerUpdate
from sales_api.repositories.customer_repository import CustomerRepository
from sales_api.services.base import BaseService
from sales_api.services.mappers import customer_from_create, customer_to_result
from sales_api.services.results import CustomerResult, PagedResult, build_page
from sales_api.validators import (
    ensure_valid,
    validate_id,
    validate_page_request,
    validate_create_customer,
    validate_update_customer,
)

logger = logging.getLogger(__name__)


class CustomerService(BaseService):

    def __init__(self, customers: CustomerRepository, unit_of_work: UnitOfWork):
        super().__init__(unit_of_work)
        self.customers = customers

    def _ensure_email_available(self, email: Optional[str], customer_id: Optional[UUID] = None) -> None:
        """Email must not belong to another customer"""
        if not email:
            return
        existing = self.customers.get_by_email(email)
        if existing is not None and existing.id != customer_id:
            logger.warning(f"Customer email already in use: {email}")
            raise ConflictError(f"Customer with email {email} already exists")

    def create_customer(self, command: CustomerCreate) -> CustomerResult:
        logger.info(f"Creating customer: {command.name}")
        ensure_valid(validate_create_customer(command))
        self._ensure_email_available(command.email)

        customer = self.customers.create(customer_from_create(command))
        self._commit("customer creation")

        logger.info(f"Customer created: {customer.id}")
        return customer_to_result(customer)

    def get_customer(self, customer_id: UUID) -> CustomerResult:
        ensure_valid(validate_id(customer_id, "Customer ID"))

        customer = self.customers.get_by_id(customer_id)
        if customer is None:
            raise NotFoundError("Customer", customer_id)
        return customer_to_result(customer)

    def list_customers(
        self,
        page: int,
        size: int,
        name: Optional[str] = None,
        email: Optional[str] = None
    ) -> PagedResult[CustomerResult]:
        ensure_valid(validate_page_request(page, size, name=name, email=email))

        customers, total = self.customers.get_paged(page, size, name=name, email=email)
        return build_page([customer_to_result(c) for c in customers], total, page, size)

    def update_customer(self, command: CustomerUpdate) -> CustomerResult:
        logger.info(f"Updating customer: {command.id}")
        ensure_valid(validate_update_customer(command))

        customer = self.customers.get_by_id(command.id)
        if customer is None:
            logger.warning(f"Customer not found for update: {command.id}")
            raise NotFoundError("Customer", command.id)

        self._ensure_email_available(command.email, customer_id=customer.id)

        customer.update_info(command.name, command.email or None, command.phone or None, command.is_active)
        self.customers.update(customer)
        self._commit("customer update")

        logger.info(f"Customer updated: {customer.id}")
        return customer_to_result(customer)

    def delete_customer(self, customer_id: UUID) -> None:
        logger.info(f"Deleting customer: {customer_id}")
        ensure_valid(validate_id(customer_id, "Customer ID"))

        if self.customers.get_by_id(customer_id) is None:
            logger.warning(f"Customer not found for deletion: {customer_id}")
            raise NotFoundError("Customer", customer_id)

        if self.customers.has_sales(customer_id):
            logger.warning(f"Customer {customer_id} has sales, refusing deletion")
            raise ConflictError(f"Customer with ID {customer_id} has sales and cannot be deleted")

        self.customers.delete(customer_id)
        self._commit("customer deletion")
        logger.info(f"Customer deleted: {customer_id}")
