# database.py
"""
SQLAlchemy database connection and session management.

This module provides:
- Database engine configuration for Azure SQL (MS SQL Server), or any
  URL given through DATABASE_URL
- Session factory for dependency injection
- Connection utilities

Usage:
     from database import get_session, engine

     # In FastAPI routes:
     @router.get("/items")
     def get_items(db: Session = Depends(get_session)):
          return db.query(Item).all()
     """
import logging
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool

from config import DATABASE_URL, SQL_ECHO

logger = logging.getLogger(__name__)


def build_engine(url: str, echo: bool = False):
     """
     Create a SQLAlchemy engine for the given URL.

     SQLite URLs get a single shared connection so in-memory databases
     survive across sessions; everything else uses a QueuePool.
     """
     if url.startswith("sqlite"):
          return create_engine(
               url,
               connect_args={"check_same_thread": False},
               poolclass=StaticPool,
               echo=echo,
          )
     return create_engine(
          url,
          poolclass=QueuePool,
          pool_size=5,
          max_overflow=10,
          pool_timeout=30,
          pool_recycle=1800,  # Recycle connections after 30 minutes
          echo=echo,
     )


# Create SQLAlchemy engine
engine = build_engine(DATABASE_URL, echo=SQL_ECHO)

# Session factory
SessionLocal = sessionmaker(
     bind=engine,
     autocommit=False,
     autoflush=False,
     expire_on_commit=False,
)


def get_session() -> Generator[Session, None, None]:
     """
     FastAPI dependency that provides a database session.

     The session is committed when the request handler returns and
     rolled back if it raises.

     Yields:
          Session: SQLAlchemy database session
     """
     session = SessionLocal()
     try:
          yield session
          session.commit()
     except Exception:
          session.rollback()
          raise
     finally:
          session.close()


@contextmanager
def get_session_context() -> Generator[Session, None, None]:
     """
     Context manager for database sessions (for use outside FastAPI routes).

     Usage:
          with get_session_context() as db:
               seed_database(db)

     Yields:
          Session: SQLAlchemy database session
     """
     session = SessionLocal()
     try:
          yield session
          session.commit()
     except Exception:
          session.rollback()
          raise
     finally:
          session.close()


def init_db() -> None:
     """
     Initialize database tables.

     Creates all tables defined in the models if they don't exist.
     For production, use Alembic migrations instead.
     """
     from models import Base
     Base.metadata.create_all(bind=engine)


def check_connection(db: Session) -> bool:
     """
     Test database connectivity through the given session.

     Returns:
          bool: True if connection successful, False otherwise
     """
     try:
          db.execute(text("SELECT 1"))
          return True
     except SQLAlchemyError as e:
          db.rollback()
          logger.error(f"Database connection failed: {e}")
          return False
