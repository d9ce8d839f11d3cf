from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

Base = declarative_base()


def create_db_engine(url: str) -> Engine:
    """
    Create the engine for a database URL.

    SQLite gets foreign keys switched on. An in-memory SQLite database is
    pinned to a single connection so every session sees the same data.
    """
    if not url.startswith('sqlite'):
        return create_engine(url, echo=False, pool_pre_ping=True)

    kwargs = {'connect_args': {'check_same_thread': False}, 'echo': False}
    if ':memory:' in url or url in ('sqlite://', 'sqlite:///'):
        kwargs['poolclass'] = StaticPool
    engine = create_engine(url, **kwargs)

    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA busy_timeout=5000")
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


def create_session_factory(engine: Engine) -> sessionmaker:
    """Session factory bound to ``engine``; objects stay usable after commit."""
    return sessionmaker(bind=engine, expire_on_commit=False)


def init_database(engine: Engine) -> None:
    """Create every table that does not exist yet."""
    import models  # noqa: F401  registers the tables on Base.metadata
    Base.metadata.create_all(engine)

