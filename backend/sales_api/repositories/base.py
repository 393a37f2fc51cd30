"""
Shared query helpers for repositories
"""
from typing import List, Tuple

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session


def paginate(session: Session, stmt: Select, page: int, size: int) -> Tuple[List, int]:
    """
    Run a 1-based page of `stmt`

    Returns:
        Tuple of (rows in the page, total row count)
    """
    total = session.scalar(
        select(func.count()).select_from(stmt.order_by(None).subquery())
    )
    rows = session.scalars(
        stmt.offset((page - 1) * size).limit(size)
    ).all()
    return list(rows), total or 0


LIKE_ESCAPE = "\\"


def contains(term: str) -> str:
    """
    LIKE pattern for a case-insensitive substring match

    Wildcards in `term` are escaped, so use it with `escape=LIKE_ESCAPE`.
    """
    escaped = (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"
