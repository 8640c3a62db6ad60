from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Query

from ...dependencies import get_news_service, require_bearer_token
from ....services.news_service import NewsService
from ....utils.validation_utils import parse_int64
from ..schemas import EditNewsRequest, EditNewsResponse, NewsListResponse

logger = structlog.get_logger(__name__)

router = APIRouter(dependencies=[Depends(require_bearer_token)])


# Handlers are sync so FastAPI runs the blocking session work in its threadpool.
@router.get("/list", response_model=NewsListResponse)
def list_news(
    limit: Optional[str] = Query(None, description="Page size, defaults to the configured limit"),
    offset: Optional[str] = Query(None, description="Rows to skip, defaults to the configured offset"),
    news_service: NewsService = Depends(get_news_service)
):
    """List news ordered by id descending, with their category ids."""
    return news_service.list_news(limit, offset)


@router.post("/edit/{news_id}", response_model=EditNewsResponse)
def edit_news(
    news_id: str,
    request: EditNewsRequest,
    news_service: NewsService = Depends(get_news_service)
):
    """Update title/content and replace categories of one news row atomically."""
    parsed_id = parse_int64(news_id, "news id")
    logger.debug("Editing news", news_id=parsed_id)
    return news_service.edit_news(parsed_id, request)
