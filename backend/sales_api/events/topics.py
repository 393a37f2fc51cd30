"""
Message topics for sale events
"""


class EventTopics:
    SALE_CREATED = "sale.created"
    SALE_MODIFIED = "sale.modified"
    SALE_CANCELLED = "sale.cancelled"
    SALE_STATUS_CHANGED = "sale.status.changed"
    SALE_ITEM_ADDED = "sale.item.added"
    SALE_ITEM_UPDATED = "sale.item.updated"
    SALE_ITEM_CANCELLED = "sale.item.cancelled"
