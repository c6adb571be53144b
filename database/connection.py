import logging
from contextlib import contextmanager
from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from utils.exceptions import NotInitialized

logger = logging.getLogger(__name__)

# Create base class for models
Base = declarative_base()

def _is_sqlite(url: str) -> bool:
    return url.startswith('sqlite')

def _is_memory_sqlite(url: str) -> bool:
    return url in ('sqlite://', 'sqlite:///:memory:')

def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute('PRAGMA foreign_keys=ON')
    cursor.close()

class Database:
    """Handle on the local data store: one engine and one session factory per process"""

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self.echo = echo
        self.engine = None
        self.SessionLocal = None

    @property
    def is_initialized(self) -> bool:
        return self.SessionLocal is not None

    def init(self) -> None:
        """Create the engine, register the models and create missing tables"""
        if self.is_initialized:
            return

        engine_kwargs = {'echo': self.echo}
        if _is_sqlite(self.database_url):
            engine_kwargs['connect_args'] = {'check_same_thread': False}
            if _is_memory_sqlite(self.database_url):
                # One shared connection, otherwise every session sees its own empty database
                engine_kwargs['poolclass'] = StaticPool

        self.engine = create_engine(self.database_url, **engine_kwargs)
        if _is_sqlite(self.database_url):
            event.listen(self.engine, 'connect', _enable_sqlite_foreign_keys)

        # Create session factory
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine
        )

        import models  # noqa: F401  registers every table on Base.metadata
        Base.metadata.create_all(bind=self.engine)
        logger.info(f"Database initialized at {self.engine.url.render_as_string(hide_password=True)}")

    def dispose(self) -> None:
        """Release pooled connections"""
        if self.engine is not None:
            self.engine.dispose()
        self.engine = None
        self.SessionLocal = None

    @contextmanager
    def session_scope(self):
        """Transactional scope: commit on success, roll back on any error"""
        if not self.is_initialized:
            raise NotInitialized("Database accessed before init()")

        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
