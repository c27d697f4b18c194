"""
Articles collection query: parameter normalization and SQL composition.

`sort_by` and `order` end up in the statement text (ORDER BY cannot take a
bound parameter), so they only ever come from the closed enums below. Raw
query strings never reach `build_list_articles`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from core import params
from core.errors import InvalidOrderError, InvalidSortByError


class SortBy(str, Enum):
    CREATED_AT = "created_at"
    TITLE = "title"
    ARTICLE_ID = "article_id"
    VOTES = "votes"
    AUTHOR = "author"
    TOPIC = "topic"
    COMMENT_COUNT = "comment_count"

    @property
    def sql(self) -> str:
        return _SORT_EXPRESSIONS[self]


# comment_count is projected as text, so it sorts on the aggregate itself.
_SORT_EXPRESSIONS: dict[SortBy, str] = {
    SortBy.CREATED_AT: "a.created_at",
    SortBy.TITLE: "a.title",
    SortBy.ARTICLE_ID: "a.article_id",
    SortBy.VOTES: "a.votes",
    SortBy.AUTHOR: "a.author",
    SortBy.TOPIC: "a.topic",
    SortBy.COMMENT_COUNT: "COUNT(c.comment_id)",
}


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @property
    def sql(self) -> str:
        return self.value.upper()


@dataclass(frozen=True)
class ArticleListQuery:
    topic: str | None = None
    sort_by: SortBy = SortBy.CREATED_AT
    order: SortOrder = SortOrder.DESC
    limit: int = 10
    page: int = 1

    @property
    def offset(self) -> int:
        return params.page_offset(limit=self.limit, page=self.page)


def parse_sort_by(raw: str | None) -> SortBy:
    if raw is None:
        return SortBy.CREATED_AT
    try:
        return SortBy(raw)
    except ValueError as exc:
        raise InvalidSortByError() from exc


def parse_order(raw: str | None) -> SortOrder:
    if raw is None:
        return SortOrder.DESC
    try:
        return SortOrder(raw.strip().lower())
    except ValueError as exc:
        raise InvalidOrderError() from exc


def normalize_list_query(
    *,
    topic: str | None = None,
    sort_by: str | None = None,
    order: str | None = None,
    limit: str | None = None,
    page: str | None = None,
) -> ArticleListQuery:
    """
    Turn raw `GET /api/articles` query strings into a descriptor.

    Check order is fixed: limit, p, sort_by, order. The first failure wins.
    """
    parsed_limit = params.parse_limit(limit)
    parsed_page = params.parse_page(page)
    return ArticleListQuery(
        topic=topic,
        sort_by=parse_sort_by(sort_by),
        order=parse_order(order),
        limit=parsed_limit,
        page=parsed_page,
    )


ARTICLE_LIST_COLUMNS = """
          a.author,
          a.title,
          a.article_id,
          a.topic,
          a.created_at,
          a.votes,
          a.article_img_url,
          COUNT(c.comment_id)::text AS comment_count"""


def build_list_articles(query: ArticleListQuery) -> tuple[str, list[Any]]:
    """
    Compose the page query for the articles collection.

    Returns `(sql, args)`. Every row carries `total_count`, the number of
    matching articles before LIMIT/OFFSET, computed by a window over the
    grouped rows.
    """
    args: list[Any] = []
    where = ""
    if query.topic is not None:
        args.append(query.topic)
        where = f"WHERE a.topic = ${len(args)}"

    args.append(query.limit)
    limit_ref = f"${len(args)}"
    args.append(query.offset)
    offset_ref = f"${len(args)}"

    order_by = f"{query.sort_by.sql} {query.order.sql}"
    if query.sort_by is not SortBy.ARTICLE_ID:
        order_by += ", a.article_id ASC"

    sql = f"""
        SELECT{ARTICLE_LIST_COLUMNS},
          (COUNT(*) OVER ())::text AS total_count
        FROM articles a
        LEFT JOIN comments c ON c.article_id = a.article_id
        {where}
        GROUP BY a.article_id
        ORDER BY {order_by}
        LIMIT {limit_ref}
        OFFSET {offset_ref}
        """
    return sql, args
