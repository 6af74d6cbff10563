"""Database session management."""

from collections.abc import Generator, Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from quizbank.core.app_exceptions import TransactionAbortedError
from quizbank.core.logging import get_logger
from quizbank.db.engine import engine

logger = get_logger(__name__)

# Create session factory
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    expire_on_commit=False,  # Prevent lazy loading issues
)


def get_db() -> Generator[Session, None, None]:
    """Dependency to get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session, operation: str) -> Iterator[Session]:
    """Run a multi-statement write as one all-or-nothing unit.

    Commits when the block exits normally. On any other exit the session is
    rolled back before the error propagates; storage failures are re-raised
    as TransactionAbortedError chained to the original cause.
    """
    try:
        yield db
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.warning(
            "transaction_aborted",
            extra={"operation": operation, "error_type": type(exc).__name__},
        )
        raise TransactionAbortedError(
            f"{operation} failed and was rolled back",
            details={"operation": operation},
        ) from exc
    except BaseException:
        db.rollback()
        raise
