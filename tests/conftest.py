import os

# Must be set before src.config is imported so the cached settings pick them up.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret-key-that-is-long-enough-for-hs256")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest
from sqlalchemy import create_engine, insert
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool


@pytest.fixture
def test_engine():
    from src.core.database import Base
    from src.models import news  # noqa: F401

    # Use in-memory SQLite for tests
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def test_db(test_engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def seed_news(test_db):
    from src.models.news import News, news_categories

    def _seed(news_id: int, title: str, content: str, categories=()):
        test_db.add(News(id=news_id, title=title, content=content))
        test_db.flush()
        if categories:
            test_db.execute(
                insert(news_categories),
                [{"news_id": news_id, "category_id": cid} for cid in categories]
            )
        test_db.commit()

    return _seed


@pytest.fixture
def stored_categories(test_db):
    from sqlalchemy import select
    from src.models.news import news_categories

    def _categories(news_id: int):
        rows = test_db.execute(
            select(news_categories.c.category_id)
            .where(news_categories.c.news_id == news_id)
            .order_by(news_categories.c.id)
        )
        return [row[0] for row in rows]

    return _categories


@pytest.fixture
def news_repository(test_db):
    from src.repositories.news_repository import SqlNewsRepository
    return SqlNewsRepository(test_db)


@pytest.fixture
def token_service():
    from src.api.dependencies import get_token_service
    return get_token_service()


@pytest.fixture
def auth_headers(token_service):
    return {"Authorization": f"Bearer {token_service.issue('editor')}"}


@pytest.fixture
async def async_client(test_db):
    from httpx import AsyncClient, ASGITransport
    from src.main import app
    from src.core.database import get_db

    def override_get_db():
        try:
            yield test_db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    # Use ASGITransport for direct app interaction
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
