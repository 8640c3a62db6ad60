from typing import Generator

from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from ..config import Settings, get_settings


def build_engine(settings: Settings) -> Engine:
    url = settings.sqlalchemy_database_url
    if url.startswith("sqlite"):
        return create_engine(
            url,
            echo=settings.debug,
            connect_args={"check_same_thread": False}
        )
    return create_engine(
        url,
        pool_size=settings.db_max_open_conns,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,
        pool_recycle=settings.db_max_lifetime_minutes * 60,
        echo=settings.debug
    )


settings = get_settings()

engine = build_engine(settings)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def table_exists(bind: Engine, table_name: str) -> bool:
    return inspect(bind).has_table(table_name)


def create_tables(bind: Engine = engine):
    # Import models to register them with Base
    from ..models import news
    Base.metadata.create_all(bind=bind)


def drop_tables(bind: Engine = engine):
    Base.metadata.drop_all(bind=bind)
