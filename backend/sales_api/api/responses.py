"""
Response envelopes shared by all routers
"""
from typing import Any, Optional

from pydantic import BaseModel

from sales_api.services.results import PagedResult


def success(data: Any = None, message: Optional[str] = None) -> dict:
    """{"status": "success", "data": ...}"""
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json")
    body = {"status": "success", "data": data}
    if message:
        body["message"] = message
    return body


def paged(page: PagedResult) -> dict:
    """Success envelope for a page of results, with the paging metadata at the top level"""
    return {
        "status": "success",
        "data": [item.model_dump(mode="json") for item in page.items],
        "page": page.page,
        "size": page.size,
        "total_count": page.total_count,
        "total_pages": page.total_pages,
        "has_next": page.has_next,
        "has_previous": page.has_previous,
    }
