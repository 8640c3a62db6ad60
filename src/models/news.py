from sqlalchemy import BigInteger, Column, ForeignKey, Integer, String, Table, Text

from ..core.database import Base

# Join table (many-to-many with an external category catalogue). The surrogate
# id keeps insertion order and lets the same category appear twice.
news_categories = Table(
    'news_categories',
    Base.metadata,
    Column('id', Integer, primary_key=True, autoincrement=True),
    Column('news_id', BigInteger().with_variant(Integer, "sqlite"), ForeignKey('news.id'), nullable=False, index=True),
    Column('category_id', BigInteger, nullable=False)
)


class News(Base):
    __tablename__ = "news"

    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<News id={self.id} title={self.title!r}>"
