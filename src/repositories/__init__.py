from .news_repository import ListRow, NewsRepository, SqlNewsRepository

__all__ = ["ListRow", "NewsRepository", "SqlNewsRepository"]
