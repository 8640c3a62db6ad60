from datetime import timedelta
from typing import Optional

import structlog
from fastapi import Depends, Header
from sqlalchemy.orm import Session

from ..config import get_settings
from ..core.database import get_db
from ..core.security import TokenClaims, TokenService
from ..exceptions import AuthenticationError
from ..repositories.news_repository import NewsRepository, SqlNewsRepository
from ..services.auth_service import AuthService
from ..services.news_service import NewsService

logger = structlog.get_logger(__name__)

BEARER_PREFIX = "Bearer "


def get_news_repository(db: Session = Depends(get_db)) -> NewsRepository:
    return SqlNewsRepository(db)


def get_news_service(repository: NewsRepository = Depends(get_news_repository)) -> NewsService:
    settings = get_settings()
    return NewsService(
        repository,
        default_limit=settings.pagination_limit,
        default_offset=settings.pagination_offset,
        max_limit=settings.pagination_max_limit,
        logger=structlog.get_logger("src.services.news_service")
    )


def get_token_service() -> TokenService:
    settings = get_settings()
    return TokenService(
        secret=settings.jwt_secret,
        expires_in=timedelta(hours=settings.jwt_expiry_hours),
        algorithm=settings.jwt_algorithm,
        logger=structlog.get_logger("src.core.security")
    )


def get_auth_service(token_service: TokenService = Depends(get_token_service)) -> AuthService:
    return AuthService(token_service, logger=structlog.get_logger("src.services.auth_service"))


def require_bearer_token(
    authorization: Optional[str] = Header(None),
    token_service: TokenService = Depends(get_token_service)
) -> TokenClaims:
    if not authorization:
        logger.error("Missing authorization header")
        raise AuthenticationError("Missing authorization header")

    if not authorization.startswith(BEARER_PREFIX):
        logger.error("Invalid token format")
        raise AuthenticationError("Invalid token format")

    token = authorization[len(BEARER_PREFIX):]
    try:
        return token_service.verify(token)
    except AuthenticationError as e:
        logger.error("Token verification failed", reason=e.message)
        raise AuthenticationError("Invalid or expired token") from e
