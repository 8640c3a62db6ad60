from .news import News, news_categories

__all__ = ["News", "news_categories"]
