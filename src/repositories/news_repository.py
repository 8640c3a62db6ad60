from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, TypeVar

from sqlalchemy import delete, insert, select, update
from sqlalchemy.orm import Session

from ..models.news import News, news_categories

T = TypeVar("T")


@dataclass
class ListRow:
    id: int
    title: str
    content: str
    categories: List[int] = field(default_factory=list)


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class NewsRepository(ABC):
    """Data access for news rows and their category links.

    Mutating methods never commit. Callers that need the writes to stick run
    them inside ``with_transaction``.
    """

    @abstractmethod
    def get_news(self, news_id: int) -> Optional[News]:
        pass

    @abstractmethod
    def list_news(self, limit: int, offset: int) -> List[ListRow]:
        """Page of news ordered by id descending, with category ids attached."""
        pass

    @abstractmethod
    def update_news_fields(self, news_id: int, title: Optional[str] = None, content: Optional[str] = None) -> bool:
        """Update title/content, leaving a field alone when its value is blank.

        Returns False when no row has ``news_id``.
        """
        pass

    @abstractmethod
    def delete_categories(self, news_id: int) -> int:
        pass

    @abstractmethod
    def insert_categories(self, news_id: int, category_ids: Sequence[int]) -> int:
        pass

    @abstractmethod
    def with_transaction(self, scope: Callable[["NewsRepository"], T]) -> T:
        """Run ``scope`` and commit, rolling back if it raises."""
        pass

    def replace_categories(self, news_id: int, category_ids: Sequence[int]) -> None:
        self.delete_categories(news_id)
        self.insert_categories(news_id, category_ids)


class SqlNewsRepository(NewsRepository):
    def __init__(self, session: Session):
        self.session = session

    def get_news(self, news_id: int) -> Optional[News]:
        return self.session.query(News).filter(News.id == news_id).first()

    def list_news(self, limit: int, offset: int) -> List[ListRow]:
        page = (
            self.session.query(News)
            .order_by(News.id.desc())
            .offset(offset)
            .limit(limit)
            .all()
        )
        if not page:
            return []

        categories = self._categories_for([news.id for news in page])
        return [
            ListRow(
                id=news.id,
                title=news.title,
                content=news.content,
                categories=categories.get(news.id, [])
            )
            for news in page
        ]

    def _categories_for(self, news_ids: List[int]) -> Dict[int, List[int]]:
        stmt = (
            select(news_categories.c.news_id, news_categories.c.category_id)
            .where(news_categories.c.news_id.in_(news_ids))
            .order_by(news_categories.c.id)
        )
        grouped: Dict[int, List[int]] = {}
        for news_id, category_id in self.session.execute(stmt):
            grouped.setdefault(news_id, []).append(category_id)
        return grouped

    def update_news_fields(self, news_id: int, title: Optional[str] = None, content: Optional[str] = None) -> bool:
        values = {}
        if not _blank(title):
            values["title"] = title
        if not _blank(content):
            values["content"] = content

        if not values:
            return self.session.query(News.id).filter(News.id == news_id).first() is not None

        result = self.session.execute(
            update(News).where(News.id == news_id).values(**values),
            execution_options={"synchronize_session": "fetch"}
        )
        return result.rowcount > 0

    def delete_categories(self, news_id: int) -> int:
        result = self.session.execute(
            delete(news_categories).where(news_categories.c.news_id == news_id)
        )
        return result.rowcount

    def insert_categories(self, news_id: int, category_ids: Sequence[int]) -> int:
        values = [{"news_id": news_id, "category_id": cid} for cid in category_ids]

        if not values:
            return 0

        self.session.execute(insert(news_categories), values)
        return len(values)

    def with_transaction(self, scope: Callable[[NewsRepository], T]) -> T:
        try:
            result = scope(self)
            self.session.commit()
            return result
        except Exception:
            self.session.rollback()
            raise
