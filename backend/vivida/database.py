"""Database connection and session management."""
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import NullPool, StaticPool
from vivida.config import settings


def _build_engine(database_url: str):
    echo = settings.environment == "development"

    # SQLite is used for local runs and tests; an in-memory database must
    # share one connection across threads or every session sees an empty schema
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=False,
        )

    # Pooler connections (pgbouncer/Supabase on 6543) must not be pooled twice
    if "pooler." in database_url or database_url.endswith(":6543"):
        return create_engine(database_url, poolclass=NullPool, echo=echo)

    return create_engine(
        database_url,
        pool_size=20,
        max_overflow=10,
        pool_pre_ping=True,
        echo=echo,
    )


engine = _build_engine(settings.database_url)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    """Dependency for getting database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create all tables that do not exist yet."""
    # Import models so they register on Base.metadata
    import vivida.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
