from typing import Optional

import structlog
from sqlalchemy.exc import SQLAlchemyError

from ..api.v1.schemas import EditNewsRequest, EditNewsResponse, NewsItem, NewsListResponse
from ..exceptions import DatabaseError, NewsNotFoundError, ValidationError
from ..repositories.news_repository import NewsRepository
from ..utils.validation_utils import parse_page_param, validate_news_exists


class NewsService:
    def __init__(
        self,
        repository: NewsRepository,
        default_limit: int = 10,
        default_offset: int = 0,
        max_limit: Optional[int] = None,
        logger=None
    ):
        self.repository = repository
        self.default_limit = default_limit
        self.default_offset = default_offset
        self.max_limit = max_limit
        self.logger = logger or structlog.get_logger(__name__)

    def list_news(self, limit_param: Optional[str] = None, offset_param: Optional[str] = None) -> NewsListResponse:
        limit = parse_page_param(limit_param, self.default_limit, "limit", self.max_limit)
        offset = parse_page_param(offset_param, self.default_offset, "offset")

        try:
            rows = self.repository.list_news(limit, offset)
        except SQLAlchemyError as e:
            self.logger.error("Failed to list news", limit=limit, offset=offset, error=str(e))
            raise DatabaseError("failed to list news") from e

        self.logger.debug("Listed news", limit=limit, offset=offset, count=len(rows))
        return NewsListResponse(
            success=True,
            news=[
                NewsItem(id=row.id, title=row.title, content=row.content, categories=row.categories)
                for row in rows
            ]
        )

    def edit_news(self, request_id: int, body: EditNewsRequest) -> EditNewsResponse:
        """Update a news row and, when categories are given, replace its categories.

        The id check and existence check run before any write. The field update
        and the category replacement share one transaction, so a failure in
        either leaves the stored row and its categories as they were.
        """
        if body.id != request_id:
            raise ValidationError("id mismatch")

        try:
            news = self.repository.get_news(request_id)
        except SQLAlchemyError as e:
            self.logger.error("Failed to load news", news_id=request_id, error=str(e))
            raise DatabaseError("failed to load news") from e
        validate_news_exists(news, request_id)

        def apply(repo: NewsRepository) -> None:
            if not repo.update_news_fields(request_id, title=body.title, content=body.content):
                raise NewsNotFoundError(request_id)
            if body.categories:
                repo.replace_categories(request_id, body.categories)

        try:
            self.repository.with_transaction(apply)
        except SQLAlchemyError as e:
            self.logger.error("Failed to edit news", news_id=request_id, error=str(e))
            raise DatabaseError("failed to update news") from e

        self.logger.info(
            "News updated",
            news_id=request_id,
            categories_replaced=bool(body.categories)
        )
        return EditNewsResponse(success=True)
