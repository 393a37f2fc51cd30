"""
Sale Domain Models

A Sale is the aggregate root; it owns its SaleItems and keeps its
total in line with them. Status changes go through the methods below
so the allowed transitions live in one place.

Author: TM3
Date: 2025-10-17
"""
from collections import defaultdict
from enum import Enum
from pydantic import BaseModel, Field, ConfigDict
from typing import Dict, List, Optional
from datetime import datetime
from decimal import Decimal
from uuid import UUID, uuid4

from sales_api.core.errors import BusinessRuleError
from sales_api.domain.common import utc_now, round_money

MAX_IDENTICAL_ITEMS = 20


class SaleStatus(str, Enum):
    """Lifecycle of a sale"""
    PENDING = "Pending"
    PAID = "Paid"
    CLOSED = "Closed"
    CANCELLED = "Cancelled"


def discount_for_quantity(total_quantity: int) -> Decimal:
    """
    Automatic discount applied when a sale is closed

    4-9 identical items: 10%, 10-20 identical items: 20%, otherwise none.
    More than 20 identical items cannot be sold at all.
    """
    if total_quantity > MAX_IDENTICAL_ITEMS:
        raise BusinessRuleError(
            f"Cannot sell more than {MAX_IDENTICAL_ITEMS} identical items"
        )
    if 4 <= total_quantity <= 9:
        return Decimal("10")
    if 10 <= total_quantity <= MAX_IDENTICAL_ITEMS:
        return Decimal("20")
    return Decimal("0")


class SaleItem(BaseModel):
    """
    Sale Item domain model - one product line of a sale

    Fields:
        id: Sale item ID
        sale_id: Parent sale ID (back-reference)
        product_id: Product sold
        quantity: Units sold (1-20)
        unit_price: Price per unit at time of sale
        discount: Discount percentage (0-100)
        total_amount: quantity * unit_price * (1 - discount / 100)
        is_cancelled: Cancelled items do not count towards the sale total
    """

    id: UUID = Field(default_factory=uuid4, description="Sale item ID")
    sale_id: UUID = Field(..., description="Parent sale ID")
    product_id: UUID = Field(..., description="Product ID")
    quantity: int = Field(..., description="Quantity sold")
    unit_price: Decimal = Field(..., description="Price per unit")
    discount: Decimal = Field(Decimal("0"), description="Discount percentage")
    total_amount: Decimal = Field(Decimal("0"), description="Line total after discount")
    is_cancelled: bool = Field(False, description="Whether item is cancelled")
    created_at: datetime = Field(default_factory=utc_now, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)

    def model_post_init(self, __context) -> None:
        self.calculate_total_amount()

    def calculate_total_amount(self) -> Decimal:
        self.total_amount = round_money(
            Decimal(self.quantity) * Decimal(self.unit_price) * (1 - Decimal(self.discount) / 100)
        )
        return self.total_amount

    def update_info(self, product_id: UUID, quantity: int, unit_price: Decimal, discount: Decimal) -> None:
        if self.is_cancelled:
            raise BusinessRuleError("Cannot update a cancelled sale item")

        self.product_id = product_id
        self.quantity = quantity
        self.unit_price = unit_price
        self.discount = discount
        self.calculate_total_amount()
        self.updated_at = utc_now()

    def apply_discount(self, discount: Decimal) -> None:
        if self.is_cancelled:
            raise BusinessRuleError("Cannot apply discount to a cancelled sale item")
        if discount < 0 or discount > 100:
            raise BusinessRuleError("Discount percentage must be between 0 and 100")

        self.discount = Decimal(discount)
        self.calculate_total_amount()
        self.updated_at = utc_now()

    def cancel(self) -> None:
        if self.is_cancelled:
            raise BusinessRuleError("Sale item is already cancelled")
        self.is_cancelled = True
        self.updated_at = utc_now()

    def reactivate(self) -> None:
        if not self.is_cancelled:
            raise BusinessRuleError("Sale item is not cancelled")
        self.is_cancelled = False
        self.updated_at = utc_now()


class Sale(BaseModel):
    """
    Sale domain model - aggregate root for a sale and its items

    total_amount always equals the sum of the non-cancelled item totals;
    every method that touches items recalculates it.
    """

    id: UUID = Field(default_factory=uuid4, description="Sale ID")
    sale_number: str = Field(..., description="Business sale number (unique)")
    sale_date: datetime = Field(..., description="When the sale happened")
    customer_id: UUID = Field(..., description="Customer ID")
    branch_id: UUID = Field(..., description="Branch ID")
    status: SaleStatus = Field(SaleStatus.PENDING, description="Sale status")
    total_amount: Decimal = Field(Decimal("0"), description="Sum of active item totals")
    items: List[SaleItem] = Field(default_factory=list, description="Sale items")
    created_at: datetime = Field(default_factory=utc_now, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)

    def model_post_init(self, __context) -> None:
        self.calculate_total_amount()

    # Computed properties
    @property
    def is_cancelled(self) -> bool:
        return self.status == SaleStatus.CANCELLED

    @property
    def is_pending(self) -> bool:
        return self.status == SaleStatus.PENDING

    @property
    def active_items(self) -> List[SaleItem]:
        return [item for item in self.items if not item.is_cancelled]

    def calculate_total_amount(self) -> Decimal:
        self.total_amount = round_money(
            sum((item.total_amount for item in self.active_items), Decimal("0"))
        )
        return self.total_amount

    def find_item(self, item_id: UUID) -> Optional[SaleItem]:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    # Item management
    def ensure_items_editable(self, action: str) -> None:
        if not self.is_pending:
            raise BusinessRuleError(f"Cannot {action} items in a sale with status {self.status.value}")

    def add_item(self, product_id: UUID, quantity: int, unit_price: Decimal,
                 discount: Decimal = Decimal("0")) -> SaleItem:
        self.ensure_items_editable("add")

        item = SaleItem(
            sale_id=self.id,
            product_id=product_id,
            quantity=quantity,
            unit_price=unit_price,
            discount=discount,
        )
        self.items.append(item)
        self.calculate_total_amount()
        self.updated_at = utc_now()
        return item

    def update_item(self, item_id: UUID, product_id: UUID, quantity: int,
                    unit_price: Decimal, discount: Decimal) -> SaleItem:
        self.ensure_items_editable("update")

        item = self.find_item(item_id)
        if item is None:
            raise BusinessRuleError(f"Sale item with ID {item_id} does not belong to sale {self.id}")

        item.update_info(product_id, quantity, unit_price, discount)
        self.calculate_total_amount()
        self.updated_at = utc_now()
        return item

    def remove_item(self, item_id: UUID) -> SaleItem:
        self.ensure_items_editable("delete")

        item = self.find_item(item_id)
        if item is None:
            raise BusinessRuleError(f"Sale item with ID {item_id} does not belong to sale {self.id}")

        self.items.remove(item)
        self.calculate_total_amount()
        self.updated_at = utc_now()
        return item

    # Header
    def update_info(self, sale_number: str, sale_date: datetime, customer_id: UUID, branch_id: UUID) -> None:
        if self.is_cancelled:
            raise BusinessRuleError("Cannot update a cancelled sale")

        self.sale_number = sale_number
        self.sale_date = sale_date
        self.customer_id = customer_id
        self.branch_id = branch_id
        self.updated_at = utc_now()

    # Status transitions
    def cancel(self) -> None:
        if self.is_cancelled:
            raise BusinessRuleError("Sale is already cancelled")
        self.status = SaleStatus.CANCELLED
        self.updated_at = utc_now()

    def reactivate(self) -> None:
        if not self.is_cancelled:
            raise BusinessRuleError("Sale is not cancelled")
        self.status = SaleStatus.PENDING
        self.updated_at = utc_now()

    def pay(self) -> None:
        if self.is_cancelled:
            raise BusinessRuleError("Cannot pay a cancelled sale")
        if self.status == SaleStatus.PAID:
            raise BusinessRuleError("Sale is already paid")
        self.status = SaleStatus.PAID
        self.updated_at = utc_now()

    def close(self) -> None:
        """
        Close a pending sale, applying the automatic quantity discounts

        Discounts are computed for every product before any item is
        touched, so a rule violation leaves the sale unchanged.
        """
        if not self.items:
            raise BusinessRuleError(f"Sale with ID {self.id} has no items")
        if not self.is_pending:
            raise BusinessRuleError(f"Sale with ID {self.id} has not pending status")

        quantities: Dict[UUID, int] = defaultdict(int)
        for item in self.active_items:
            quantities[item.product_id] += item.quantity

        discounts = {
            product_id: discount_for_quantity(quantity)
            for product_id, quantity in quantities.items()
        }

        for item in self.active_items:
            item.apply_discount(discounts[item.product_id])

        self.status = SaleStatus.CLOSED
        self.calculate_total_amount()
        self.updated_at = utc_now()

    def change_status(self, status: SaleStatus) -> None:
        """Move to the requested status through the matching transition"""
        if status == SaleStatus.CLOSED:
            self.close()
        elif status == SaleStatus.CANCELLED:
            self.cancel()
        elif status == SaleStatus.PAID:
            self.pay()
        elif status == SaleStatus.PENDING:
            self.reactivate()
        else:
            raise BusinessRuleError(f"Invalid status: {status}")


class SaleItemCreate(BaseModel):
    """Schema for a sale item, either inside a new sale or added to an existing one"""
    sale_id: Optional[UUID] = None
    product_id: Optional[UUID] = None
    quantity: int = 0
    unit_price: Optional[Decimal] = None
    discount: Decimal = Decimal("0")


class SaleItemUpdate(BaseModel):
    """Schema for updating a sale item (unit price comes from the product, discount is kept)"""
    id: Optional[UUID] = None
    sale_id: Optional[UUID] = None
    product_id: Optional[UUID] = None
    quantity: int = 0


class SaleCreate(BaseModel):
    """Schema for creating a new sale"""
    sale_number: Optional[str] = None
    sale_date: Optional[datetime] = None
    customer_id: Optional[UUID] = None
    branch_id: Optional[UUID] = None
    items: List[SaleItemCreate] = Field(default_factory=list)


class SaleUpdate(BaseModel):
    """Schema for updating the header of an existing sale"""
    id: Optional[UUID] = None
    sale_number: Optional[str] = None
    sale_date: Optional[datetime] = None
    customer_id: Optional[UUID] = None
    branch_id: Optional[UUID] = None
    status: Optional[SaleStatus] = None


class SaleStatusUpdate(BaseModel):
    """Schema for moving a sale to another status"""
    id: Optional[UUID] = None
    status: Optional[SaleStatus] = None
