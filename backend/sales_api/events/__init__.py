"""
Events - payloads, topics and publisher for sale events

Author: TM3
Date: 2025-10-17
"""
from sales_api.events.topics import EventTopics
from sales_api.events.publisher import MessagePublisher, LoggingMessagePublisher
from sales_api.events.models import (
    SaleCreatedEvent,
    SaleModifiedEvent,
    SaleCancelledEvent,
    SaleStatusChangedEvent,
    SaleItemAddedEvent,
    SaleItemUpdatedEvent,
    SaleItemCancelledEvent,
)

__all__ = [
    'EventTopics',
    'MessagePublisher',
    'LoggingMessagePublisher',
    'SaleCreatedEvent',
    'SaleModifiedEvent',
    'SaleCancelledEvent',
    'SaleStatusChangedEvent',
    'SaleItemAddedEvent',
    'SaleItemUpdatedEvent',
    'SaleItemCancelledEvent',
]
